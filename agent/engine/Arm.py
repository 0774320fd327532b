import math
from typing import Optional, Union


class Arm:
    """
    Observed statistics of one arm.

    The true stddev of the arm is known and used as the noise term of the posterior variance; its true mean
    is what gets estimated and is never stored here.
    """

    def __init__(self, index: int, true_stddev: Union[int, float]) -> None:
        assert true_stddev > 0, f"true_stddev should be > 0, current value:{true_stddev}"
        self._index = index
        self._true_stddev = true_stddev
        self._count = 0
        self._reward_sum: Union[int, float] = 0
        self._mean: Optional[float] = None
        self._history: list[Union[int, float]] = []

    @property
    def index(self) -> int:
        return self._index

    @property
    def true_stddev(self) -> Union[int, float]:
        return self._true_stddev

    @property
    def count(self) -> int:
        return self._count

    @property
    def reward_sum(self) -> Union[int, float]:
        return self._reward_sum

    @property
    def mean(self) -> Optional[float]:
        """Sample mean of the rewards, None before the first observation"""
        return self._mean

    @property
    def history(self) -> tuple:
        return tuple(self._history)

    def update(self, reward: Union[int, float]) -> None:
        self._reward_sum += reward
        self._count += 1
        self._mean = self._reward_sum / self._count
        self._history.append(reward)

    def reset(self, true_stddev: Optional[Union[int, float]]=None) -> None:
        if true_stddev is not None:
            assert true_stddev > 0, f"true_stddev should be > 0, current value:{true_stddev}"
            self._true_stddev = true_stddev
        self._count = 0
        self._reward_sum = 0
        self._mean = None
        self._history = []

    def posterior_mean(self, prior_mean: Union[int, float]) -> Union[int, float]:
        return self._mean if self._count > 0 else prior_mean

    def posterior_variance(self) -> float:
        # Shrinkage of the known noise by n + 1, not a conjugate normal update
        return self._true_stddev ** 2 / (self._count + 1)

    def posterior_stddev(self) -> float:
        return math.sqrt(self.posterior_variance())

    def get_state(self) -> dict:
        return {"index": self._index, "count": self._count, "reward_sum": self._reward_sum, "mean": self._mean,
                "true_stddev": self._true_stddev}
