"""Component types used by the 2D world."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Position:
    """Location of an entity in viewport coordinates."""

    x: float
    y: float


@dataclass
class Velocity:
    """Rate of change of position per second."""

    dx: float
    dy: float


@dataclass
class Circle:
    """Circular shape of an entity."""

    radius: float