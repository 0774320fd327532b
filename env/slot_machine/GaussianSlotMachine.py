from typing import Optional, Union

from utils.GaussianSampler import GaussianSampler
from utils.utils import round_half_up


class GaussianSlotMachine:
    def __init__(self, index: Optional[int]=None, mean: Union[int, float]=0, stddev: Union[int, float]=1,
                 sampler: Optional[GaussianSampler]=None) -> None:
        """
        One reward process: each play draws from N(mean, stddev), rounded and clamped at 0.
        """
        assert stddev > 0, f"stddev should be > 0, current value:{stddev}"
        self.id = index
        self._mean = mean
        self._stddev = stddev
        self._sampler = sampler if sampler is not None else GaussianSampler()
        self._played = 0
        self._total_rewards = 0

    def play(self) -> int:
        reward = max(0, round_half_up(self._sampler.sample_normal(self._mean, self._stddev)))
        self._played += 1
        self._total_rewards += reward
        return reward

    def get_state(self) -> dict:
        return {"played": self._played, "total_rewards": self._total_rewards}

    def get_mean(self) -> Union[int, float]:
        return self._mean

    def get_stddev(self) -> Union[int, float]:
        return self._stddev

    def display(self) -> None:
        print(f"id: {self.id}")
        print(f"mean: {self._mean}, stddev: {self._stddev}")
        print(f"played: {self._played}")
        print(f"total rewards: {self._total_rewards}")
