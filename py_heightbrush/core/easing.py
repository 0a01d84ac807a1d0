"""
Falloff curves for circular brushes.

Curves take a normalized distance from the brush centre and return a strength.
They accept Python floats or NumPy arrays and are only meaningful on
``[0, 1]``.
"""

from typing import Callable, Dict, List, Union

import numpy as np

from .exceptions import UnknownEasingError

ArrayOrFloat = Union[float, np.ndarray]
EasingFunction = Callable[[ArrayOrFloat], ArrayOrFloat]

# Overshoot used by the "back" curves
BACK_OVERSHOOT = 1.70158


def ease_in_out_cubic(t: ArrayOrFloat) -> ArrayOrFloat:
    """
    Rational cubic ease-in-out: ``t^2 / (2 (t^2 - t) + 1)``.

    Maps 0 to 0 and 1 to 1 with an S-shaped acceleration in between.
    The denominator has its minimum of 0.5 at ``t = 0.5`` so it never
    vanishes for real input.
    """
    sqt = t * t
    return sqt / (2.0 * (sqt - t) + 1.0)


def ease_in_back(t: ArrayOrFloat) -> ArrayOrFloat:
    """Ease-in that dips below zero before accelerating."""
    s = BACK_OVERSHOOT
    return t * t * ((s + 1.0) * t - s)


def ease_in_out_back(t: ArrayOrFloat) -> ArrayOrFloat:
    """Symmetric ease-in-out with overshoot at both ends."""
    if isinstance(t, np.ndarray):
        return np.where(
            t < 0.5,
            ease_in_back(t * 2.0) / 2.0,
            1.0 - ease_in_back((1.0 - t) * 2.0) / 2.0,
        )
    if t < 0.5:
        return ease_in_back(t * 2.0) / 2.0
    return 1.0 - ease_in_back((1.0 - t) * 2.0) / 2.0


EASINGS: Dict[str, EasingFunction] = {
    "in_out_cubic": ease_in_out_cubic,
    "in_out_back": ease_in_out_back,
}


def get_easing(name: str) -> EasingFunction:
    """
    Look up a falloff curve by name.

    Raises:
        UnknownEasingError: if no curve is registered under ``name``
    """
    try:
        return EASINGS[name]
    except KeyError:
        raise UnknownEasingError(
            f"Unknown easing '{name}'. Available: {', '.join(list_easings())}"
        ) from None


def list_easings() -> List[str]:
    """Get the names of all registered falloff curves."""
    return sorted(EASINGS)
