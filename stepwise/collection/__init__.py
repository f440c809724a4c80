from .replicate import replicate
from .sequence import sequence
from .traverse import for_each, traverse

__all__ = (
    "replicate",
    "sequence",
    "traverse",
    "for_each",
)
