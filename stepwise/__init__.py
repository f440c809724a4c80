"""
Stepwise: cooperative, stateful, fallible coroutines.

A Coroutine is a multi-step program that can pause itself without holding a
thread or a stack, hand control back to an external driver (a game loop, an
interval timer) and later resume exactly where it left off.

Architecture:
- core       - Coroutine type, Outcome (Completed / Suspended / Failed), map/join/bind
- lift.up    - constructors (succeed, fail, suspend, compute, transform, effect, ...)
- lift.down  - driver adapter (run_once, run_and_extract, drive)
- control    - repeat, collect, retry, fallback
- concurrency - race, in_parallel_with, zip (single-step interleaving)
- collection - replicate, sequence, traverse
- time       - tick-based wait / delay
"""

# Core types
from ._types import Either, Left, NoError, Pair, Predicate, Right, Unit
from .core import (
    Completed,
    Coroutine,
    Failed,
    NoResult,
    Outcome,
    Suspended,
    bind_coroutine,
    join_coroutine,
    map_coroutine,
)

# Internal helpers (for custom combinators)
from . import _helpers

# Lift helpers
from . import lift
from .lift import (
    compute,
    drive,
    effect,
    fail,
    from_either,
    from_option,
    from_result,
    optional,
    run_and_extract,
    run_once,
    succeed,
    suspend,
    transform,
    unit,
)

# Control flow
from .control import (
    RetryPolicy,
    collect_until,
    collect_while,
    fallback_chain,
    or_else,
    repeat,
    repeat_until,
    repeat_while,
    retry,
)

# Concurrency
from .concurrency import in_parallel_with, race, zip, zip_with

# Collection operations
from .collection import for_each, replicate, sequence, traverse

# Time operations
from .time import delay, delayed, wait

# Errors
from ._errors import CoroutineFailedError, StillSuspendedError, TicksExhaustedError

__all__ = (
    # Types
    "Either",
    "Left",
    "Right",
    "NoError",
    "Pair",
    "Predicate",
    "Unit",
    # Core
    "Coroutine",
    "Completed",
    "Suspended",
    "Failed",
    "NoResult",
    "Outcome",
    "map_coroutine",
    "join_coroutine",
    "bind_coroutine",
    # Internal helpers (for custom combinators)
    "_helpers",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift - up
    "succeed",
    "fail",
    "unit",
    "suspend",
    "compute",
    "transform",
    "effect",
    "from_option",
    "optional",
    "from_either",
    "from_result",
    # Lift - down
    "run_once",
    "run_and_extract",
    "drive",
    # Control
    "RetryPolicy",
    "collect_while",
    "collect_until",
    "or_else",
    "fallback_chain",
    "repeat",
    "repeat_while",
    "repeat_until",
    "retry",
    # Concurrency
    "race",
    "in_parallel_with",
    "zip",
    "zip_with",
    # Collection
    "replicate",
    "sequence",
    "traverse",
    "for_each",
    # Time
    "wait",
    "delay",
    "delayed",
    # Errors
    "CoroutineFailedError",
    "StillSuspendedError",
    "TicksExhaustedError",
)
