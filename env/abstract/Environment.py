from abc import ABC, abstractmethod


class AbstractEnvironment(ABC):
    def env_snap(self):
        return vars(self)

    @abstractmethod
    def step(self, action, display=False):
        """
        Take action and return feedback from env:
        :return: reward, flag of done (done), and other information
        """
        raise NotImplementedError("Subclass of Environment should implement step methode")

    @abstractmethod
    def reset(self):
        """
        Reset the env

        :return: The initial state
        """
        raise NotImplementedError("Subclass of Environment should implement reset methode")

    @abstractmethod
    def get_action_space(self):
        """
        Get the size of action space, i.e. the number of arms

        :return: The size of action space
        """
        raise NotImplementedError("Subclass of Environment should implement this methode")

    @abstractmethod
    def render(self):
        """
        Show a visio of the environment

        """
        raise NotImplementedError("Subclass of Environment should implement this methode")
