import math
import numpy as np
from typing import Callable, Optional, Union

from utils.utils import random_verifier


def box_muller(u1: float, u2: float) -> float:
    """
    Box-Muller transform of two uniform draws into one standard normal variate.
    Only the cosine branch is returned, the sine variate is dropped.
    :param u1: uniform draw in (0, 1]
    :param u2: uniform draw in [0, 1)
    :return: z ~ N(0, 1)
    """
    return math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)


class GaussianSampler:
    def __init__(self, uniform: Optional[Callable[[], float]]=None, seed: Optional[int]=None) -> None:
        """
        :param uniform: zero-argument callable returning draws in [0, 1). A seeded numpy generator is used if None
        :param seed: seed of the default numpy generator, ignored when uniform is given
        """
        if uniform is None:
            rng = np.random.default_rng(seed)
            uniform = lambda: float(rng.random())
        assert hasattr(uniform, '__call__'), f"uniform should be callable, received {type(uniform)}"
        self.uniform = uniform

    def sample_standard_normal(self) -> float:
        # u1 == 0 would give log(0)
        u1 = random_verifier(self.uniform, low=0, up=1, low_open=True)
        u2 = self.uniform()
        return box_muller(u1, u2)

    def sample_normal(self, mean: Union[int, float]=0, stddev: Union[int, float]=1) -> float:
        return mean + stddev * self.sample_standard_normal()
