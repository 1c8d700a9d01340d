"""Frame time measured in seconds."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Timestep:
    """Time elapsed between two frames, in seconds."""

    frame_time: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "frame_time", float(self.frame_time))

    @property
    def seconds(self) -> float:
        return self.frame_time

    @property
    def milliseconds(self) -> float:
        return self.frame_time * 1000

    def __float__(self) -> float:
        return self.frame_time

    def __mul__(self, other: float) -> float:
        return self.frame_time * float(other)

    __rmul__ = __mul__

    def __add__(self, other: float) -> float:
        return self.frame_time + float(other)

    __radd__ = __add__

    def __sub__(self, other: float) -> float:
        return self.frame_time - float(other)

    def __rsub__(self, other: float) -> float:
        return float(other) - self.frame_time

    def __truediv__(self, other: float) -> float:
        return self.frame_time / float(other)