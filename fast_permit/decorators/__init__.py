from .singleton_decorator import singleton
from .validates_decorator import validates

__all__ = [
    "singleton",
    "validates",
]
