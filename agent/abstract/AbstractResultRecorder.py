from abc import ABC, abstractmethod


class AbstractResultRecorder(ABC):

    @abstractmethod
    def update(self, *args, **kwargs) -> None:
        """
        Record a new outcome: one pull for a SingleResult, one whole session for a TestResult
        :return: None
        """
        raise NotImplementedError("Subclass of Result should implement update methode")

    @abstractmethod
    def get_summary(self, *args, **kwargs):
        """
        Get summary of what has been recorded so far
        :return:
        """
        raise NotImplementedError("Subclass of Result should implement get summary methode")
