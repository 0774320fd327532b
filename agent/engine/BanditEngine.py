import math
import logging
import numbers
from typing import Optional, Sequence, Union

from agent.engine.Arm import Arm
from agent.algo.base_algo.BaseAlgo import BaseAlgo, DEFAULT_PRIOR_MEAN
from agent.algo.ThompsonSampling import ThompsonSampling
from agent.algo.BayesianUCB import BayesianUCB
from utils.GaussianSampler import GaussianSampler
from utils.utils import InvalidRewardError, check_arm_index, is_valid_reward, round_half_up


def _check_stddevs(stddevs: Sequence) -> list[Union[int, float]]:
    stddevs = list(stddevs)
    if len(stddevs) == 0:
        raise ValueError("The engine needs at least one arm")
    for stddev in stddevs:
        if isinstance(stddev, bool) or not isinstance(stddev, numbers.Real) \
                or not math.isfinite(stddev) or stddev <= 0:
            raise ValueError(f"Each stddev should be a finite number > 0, received {stddev!r}")
    return stddevs


class BanditEngine:
    """
    Beliefs about a fixed set of Gaussian arms and the two Bayesian policies playing on them.

    Arms only change through update (and reset, when a session restarts). Selection and stats calls are
    pure reads, except that Thompson sampling consumes draws from the sampler.
    Not thread safe: callers serialize access to one engine.
    """

    def __init__(self, stddevs: Union[Sequence[Union[int, float]], int, float], arm_nb: Optional[int]=None,
                 prior_mean: Union[int, float]=DEFAULT_PRIOR_MEAN,
                 sampler: Optional[GaussianSampler]=None) -> None:
        """
        :param stddevs: known noise stddev of each arm, or one stddev shared by arm_nb arms
        :param arm_nb: number of arms, required when stddevs is a single number
        :param prior_mean: mean assumed for an arm before its first observation
        :param sampler: source of standard normal draws for Thompson sampling
        """
        if isinstance(stddevs, numbers.Real):
            if arm_nb is None:
                raise ValueError("arm_nb is required when a single stddev is given")
            stddevs = [stddevs] * arm_nb
        stddevs = _check_stddevs(stddevs)
        if arm_nb is not None and arm_nb != len(stddevs):
            raise ValueError(f"arm_nb ({arm_nb}) does not match the {len(stddevs)} stddevs given")

        self.prior_mean = prior_mean
        self.sampler = sampler if sampler is not None else GaussianSampler()
        self.arms = [Arm(index=i, true_stddev=stddev) for i, stddev in enumerate(stddevs)]
        self._thompson = ThompsonSampling()
        self._bayes_ucb = BayesianUCB()

    @property
    def num_arms(self) -> int:
        return len(self.arms)

    def get_arms(self) -> list[Arm]:
        return self.arms

    def select(self, algo: BaseAlgo, **kwargs) -> int:
        """
        Let algo pick an arm from the current beliefs, scored with this engine's prior mean and sampler
        """
        return algo.choose_action(self.arms, prior_mean=self.prior_mean, sampler=self.sampler, **kwargs)

    def select_thompson(self) -> int:
        return self.select(self._thompson)

    def select_bayesian_ucb(self, confidence: float=0.95) -> int:
        # confidence is accepted but the bound is always the 95% one
        return self.select(self._bayes_ucb, confidence=confidence)

    def update(self, arm_index: int, reward: Union[int, float]) -> None:
        arm_index = check_arm_index(arm_index, self.num_arms)
        if not is_valid_reward(reward):
            raise InvalidRewardError(reward)
        arm = self.arms[arm_index]
        arm.update(reward)
        logging.debug(f"Arm {arm_index} updated with reward {reward}: count {arm.count}, mean {arm.mean}")

    def get_estimated_stats(self) -> list[dict]:
        return [{"mean": round_half_up(arm.mean) if arm.count > 0 else None, "count": arm.count}
                for arm in self.arms]

    def get_posterior_params(self) -> list[dict]:
        return [{"mean": float(arm.posterior_mean(self.prior_mean)), "stddev": arm.posterior_stddev()}
                for arm in self.arms]

    def reset(self, stddevs: Optional[Sequence[Union[int, float]]]=None) -> None:
        """
        Forget every observation. New stddevs can be given when the arms of the session changed
        """
        if stddevs is not None:
            stddevs = _check_stddevs(stddevs)
            if len(stddevs) != self.num_arms:
                raise ValueError(f"Expected {self.num_arms} stddevs, received {len(stddevs)}")
        for i, arm in enumerate(self.arms):
            arm.reset(None if stddevs is None else stddevs[i])

    def display(self) -> None:
        for i, stats in enumerate(self.get_estimated_stats()):
            if stats["count"] > 0:
                line = f"Arm {i} estimated: {stats['mean']} ({stats['count']} pulls)"
            else:
                line = f"Arm {i} estimated: — (0 pulls)"
            logging.info(line)
            print(line)
