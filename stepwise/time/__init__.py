from .wait import delay, delayed, wait

__all__ = (
    "wait",
    "delay",
    "delayed",
)
