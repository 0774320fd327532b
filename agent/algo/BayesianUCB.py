from typing import Optional, Sequence, Union

from agent.algo.base_algo.BaseAlgo import BaseAlgo

# Two-sided 95% bound
UCB_Z_SCORE = 1.96


class BayesianUCB(BaseAlgo):
    def __init__(self, confidence: float=0.95, *args, **kwargs):
        """
        :param confidence: kept for interface compatibility, the bound always uses UCB_Z_SCORE
        """
        super().__init__(*args, **kwargs)
        assert 0 < confidence < 1, f"confidence should be in (0, 1), get {confidence}"
        self.confidence = confidence

    def score_arms(self, arms: Sequence, prior_mean: Union[int, float], sampler=None,
                   confidence: Optional[float]=None, *args, **kwargs) -> list[float]:
        if confidence is not None:
            assert 0 < confidence < 1, f"confidence should be in (0, 1), get {confidence}"
        return [arm.posterior_mean(prior_mean) + UCB_Z_SCORE * arm.posterior_stddev() for arm in arms]
