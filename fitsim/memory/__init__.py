from .allocators import PlacementStrategy
from .best_fit import BestFitStrategy
from .first_fit import FirstFitStrategy
from .fragmentation import fragmentation
from .free_list import FreeList
from .next_fit import NextFitStrategy
from .random_fit import RandomFitStrategy
from .worst_fit import WorstFitStrategy

__all__ = [
    "FreeList",
    "PlacementStrategy",
    "FirstFitStrategy",
    "NextFitStrategy",
    "BestFitStrategy",
    "WorstFitStrategy",
    "RandomFitStrategy",
    "fragmentation",
]
