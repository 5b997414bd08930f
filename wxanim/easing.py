"""Easing functions and the animated value description they drive."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

EasingFunction = Callable[[float, float, float], float]
ValueCallback = Callable[["AnimatedValue", float, float], None]


def linear(start: float, end: float, t_norm: float) -> float:
    """Interpolate at constant speed."""
    return start + (end - start) * t_norm


def ease_in_quad(start: float, end: float, t_norm: float) -> float:
    """Quadratic acceleration from rest."""
    return start + (end - start) * t_norm * t_norm


def ease_out_quad(start: float, end: float, t_norm: float) -> float:
    """Quadratic deceleration to rest."""
    return start + (end - start) * (1 - (1 - t_norm) * (1 - t_norm))


def ease_in_out_quad(start: float, end: float, t_norm: float) -> float:
    """Quadratic acceleration for the first half, deceleration for the second."""
    if t_norm < 0.5:
        return start + (end - start) * 2 * t_norm * t_norm
    return start + (end - start) * (1 - 2 * (1 - t_norm) * (1 - t_norm))


def ease_in_cubic(start: float, end: float, t_norm: float) -> float:
    """Cubic acceleration from rest."""
    return start + (end - start) * t_norm * t_norm * t_norm


def ease_out_cubic(start: float, end: float, t_norm: float) -> float:
    """Cubic deceleration to rest."""
    return start + (end - start) * (1 - (1 - t_norm) * (1 - t_norm) * (1 - t_norm))


def ease_in_out_cubic(start: float, end: float, t_norm: float) -> float:
    """Cubic acceleration for the first half, deceleration for the second."""
    if t_norm < 0.5:
        return start + (end - start) * 4 * t_norm * t_norm * t_norm
    return start + (end - start) * (
        1 - 4 * (1 - t_norm) * (1 - t_norm) * (1 - t_norm)
    )


@dataclass
class AnimatedValue:
    """A value animated from ``start_value`` to ``end_value`` along an easing curve."""

    start_value: float
    end_value: float
    on_value_changed: Optional[ValueCallback] = None
    description: str = ""
    easing: EasingFunction = linear

    def value_at(self, t_norm: float) -> float:
        """Return the eased value at normalised time ``t_norm``."""
        return self.easing(self.start_value, self.end_value, t_norm)

    def notify(self, t_norm: float, value: float) -> None:
        """Report a new value to the change callback, if there is one."""
        if self.on_value_changed is not None:
            self.on_value_changed(self, t_norm, value)