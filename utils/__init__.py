"""Shared helpers: random number utilities, validation and error types.

This mirrors the expected `utils.utils` import path used in the project.
"""

from .utils import (InvalidArmIndexError, InvalidRewardError, RandomGeneratorError, check_arm_index,
                    combination_dict, is_valid_reward, random_verifier, round_half_up)
from .GaussianSampler import GaussianSampler, box_muller

__all__ = ["GaussianSampler", "box_muller", "InvalidArmIndexError", "InvalidRewardError", "RandomGeneratorError",
           "check_arm_index", "combination_dict", "is_valid_reward", "random_verifier", "round_half_up"]
