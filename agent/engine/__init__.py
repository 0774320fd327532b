from .Arm import Arm
from .BanditEngine import BanditEngine

__all__ = ["Arm", "BanditEngine"]
