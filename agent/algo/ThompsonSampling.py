from typing import Sequence, Union

from agent.algo.base_algo.BaseAlgo import BaseAlgo


class ThompsonSampling(BaseAlgo):
    """
    Draw one plausible mean per arm from N(mean, stddev**2 / (n + 1)) and play the highest draw
    """

    def score_arms(self, arms: Sequence, prior_mean: Union[int, float], sampler=None,
                   *args, **kwargs) -> list[float]:
        assert sampler is not None, "Thompson sampling needs a sampler of standard normal draws"
        return [arm.posterior_mean(prior_mean) + sampler.sample_standard_normal() * arm.posterior_stddev()
                for arm in arms]
