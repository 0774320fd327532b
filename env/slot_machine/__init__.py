"""Gaussian reward generators and the parameters they are built from.

The machines here hold the true (hidden) parameters; bandit policies only see the rewards they produce.
"""

from .MultiArmedBandit import MultiArmedBandit
from .GaussianSlotMachine import GaussianSlotMachine
from .ParameterInitializer import ArmParams, DEFAULT_ARM_PARAMS, CONFIGURED_STDDEV, init_arm_params

__all__ = ["MultiArmedBandit", "GaussianSlotMachine", "ArmParams", "DEFAULT_ARM_PARAMS", "CONFIGURED_STDDEV",
           "init_arm_params"]
