from .arrival import ArrivalFinder
from .base import BaseBusFinder
from .departure import DepartureFinder

__all__ = ["ArrivalFinder", "BaseBusFinder", "DepartureFinder"]
