from .parallel import in_parallel_with
from .race import race
from .zip import zip, zip_with

__all__ = (
    "race",
    "in_parallel_with",
    "zip",
    "zip_with",
)
