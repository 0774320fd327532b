from abc import ABC, abstractmethod


class AbstractAgent(ABC):
    def __init__(self, name=None):
        if name is None:
            self.name = type(self).__name__
        else:
            assert type(name) == str, f"Name of an agent should be a str, received {type(name)}"
            self.name = name

    @abstractmethod
    def choose_action(self, arms, *args, **kwargs):
        """
        Choose the arm that the agent is going to play
        :param arms: the arms (with their observed statistics) on which the action is chosen
        :return: the index of the chosen arm
        """

        raise NotImplementedError("Subclass of Agent should implement choose_action methode")

    @abstractmethod
    def single_test(self, env, engine):
        """
        Run one session on the environment
        :param env: the env on which the agent runs the test
        :param engine: the bandit engine holding the beliefs of the agent
        :return: the result (and the history) of the single test
        """
        raise NotImplementedError("Subclass of Agent should implement single_test methode")

    @abstractmethod
    def multi_test(self, env, engine, test_nb):
        """
        Run several sessions on the given environment
        :param env: the env on which the agent runs the test
        :param engine: the bandit engine holding the beliefs of the agent
        :param test_nb: how many times the test will run
        :return: the result (and the history) of the multi test
        """
        raise NotImplementedError("Subclass of Agent should implement multi_test methode")
