"""Frame timing passed to everything that updates once per frame."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Timer:
    """Seconds elapsed since the previous frame."""

    delta: float = 0.0

    @property
    def milliseconds(self) -> float:
        return self.delta * 1000