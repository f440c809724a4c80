from .coroutine import Coroutine, bind_coroutine, join_coroutine, map_coroutine
from .outcome import Completed, Failed, NoResult, Outcome, Suspended

__all__ = (
    # Coroutine
    "Coroutine",
    "map_coroutine",
    "join_coroutine",
    "bind_coroutine",
    # Outcome
    "Completed",
    "Suspended",
    "Failed",
    "NoResult",
    "Outcome",
)
