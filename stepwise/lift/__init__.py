"""
Lift helpers with semantic namespaces.

Supports three import styles:
    from stepwise import lift as L   # Recommended
    from stepwise import lift        # Explicit
    from stepwise.lift import succeed, run_once

Architecture:
- L.up.*    - подъем значений в монаду (constructors)
- L.down.*  - опускание монады в значение (driver adapter)

Examples:
    from stepwise import lift as L

    hero = L.up.succeed(Hero(hp=10))
    heal = L.up.transform(lambda h: h.heal(1))

    step = L.down.run_once(heal, hero)       # Left(k) | Right((value, state))
    value, state = L.down.run_and_extract(heal, hero)
"""

from __future__ import annotations

from . import down as down_ns
from . import up as up_ns

# From up namespace - подъем значений
from .up import (
    compute,
    effect,
    fail,
    from_either,
    from_option,
    from_result,
    optional,
    succeed,
    suspend,
    transform,
    unit,
)

# From down namespace - опускание
from .down import drive, run_and_extract, run_once

# L.up.* / L.down.*
up = up_ns
down = down_ns

__all__ = (
    # Namespaces
    "up",
    "down",
    # Up
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
    # Down
    "run_once",
    "run_and_extract",
    "drive",
)
