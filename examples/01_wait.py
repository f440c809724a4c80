from __future__ import annotations

from _infra import banner, tick_loop

from stepwise import transform, wait


def main() -> None:
    banner("01_wait: suspend for a tick, then double the state")

    program = wait(1).bind(lambda _: transform(lambda s: s * 2))
    tick_loop(program, lambda _: 1, interval_seconds=0.25)


if __name__ == "__main__":
    main()
