from abc import ABC, abstractmethod

from agent.abstract.Agent import AbstractAgent


class AbstractAlgo(AbstractAgent, ABC):

    @abstractmethod
    def score_arms(self, arms, prior_mean, sampler=None, *args, **kwargs):
        """
        Give a score to every arm, the arm with the highest score gets played
        :param arms: sequence of Arm, in index order
        :param prior_mean: mean used for an arm without observation
        :param sampler: source of standard normal draws, for the algos which sample
        :return: list of scores, one per arm
        """
        raise NotImplementedError("Subclass of AbstractAlgo should implement score_arms methode")
