from __future__ import annotations

from dataclasses import dataclass, replace

from _infra import banner, setup_logging, tick_loop

from stepwise import RetryPolicy, compute, fail, transform, wait


@dataclass(frozen=True, slots=True)
class World:
    tick: int
    door_open: bool = False


def open_door(world: World) -> World:
    # The door is jammed for the first few ticks.
    if world.tick < 3:
        raise RuntimeError(f"door jammed at tick {world.tick}")
    return replace(world, door_open=True)


def main() -> None:
    setup_logging()
    banner("02_race_and_retry: a jammed door against a timeout")

    escape = transform(open_door).retry(policy=RetryPolicy.fixed(5, delay_ticks=1)).map(
        lambda w: f"escaped at tick {w.tick}"
    )
    timeout = wait(6).bind(lambda _: fail("guards arrived"))

    tick_loop(escape.race_against(timeout), lambda tick: World(tick=tick))

    banner("02_race_and_retry: patrol until the counter reaches 3")
    patrol = wait(1).bind(lambda _: compute(lambda w: w.tick)).collect_until(lambda w: w.tick >= 3)
    tick_loop(patrol, lambda tick: World(tick=tick))


if __name__ == "__main__":
    main()
