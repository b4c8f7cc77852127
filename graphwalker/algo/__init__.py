"""Graph walks and the cycle detector built on top of them."""

from .cycles import CycleDetector
from .walker import SuccessorFunction, Walker

__all__ = [
    "SuccessorFunction",
    "Walker",
    "CycleDetector",
]
