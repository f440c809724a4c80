from .collect import collect_until, collect_while
from .fallback import fallback_chain, or_else
from .repeat import repeat, repeat_until, repeat_while
from .retry import RetryPolicy, retry

__all__ = (
    # Policies
    "RetryPolicy",
    # Collect
    "collect_while",
    "collect_until",
    # Fallback
    "or_else",
    "fallback_chain",
    # Repeat
    "repeat",
    "repeat_while",
    "repeat_until",
    # Retry
    "retry",
)
