from __future__ import annotations

import logging
import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from stepwise import Coroutine, Left, Right, lift as L  # noqa: E402


def banner(title: str) -> None:  # pragma: no cover (examples only)
    print(f"\n== {title} ==")


def tick_loop[S](
    program: Coroutine[S, Any, Any],
    next_state: Callable[[int], S],
    *,
    interval_seconds: float = 0.0,
    max_ticks: int = 100,
) -> None:  # pragma: no cover (examples only)
    """Interval-timer style driver: one run_once per tick, fresh state each time."""
    for tick in range(max_ticks):
        match L.down.run_once(program, next_state(tick)):
            case Left(program):
                print(f"[tick {tick}] Suspended!")
            case Right((value, state)):
                print(f"[tick {tick}] Got a result! {value!r} (state={state!r})")
                return
        if interval_seconds > 0.0:
            time.sleep(interval_seconds)
    print(f"gave up after {max_ticks} ticks")


def setup_logging() -> None:  # pragma: no cover (examples only)
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
