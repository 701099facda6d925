from .serialisation import is_blank, serialise

__all__ = [
    "is_blank",
    "serialise",
]
