"""
Curves - scalar remapping helpers and easing curves used by the stack transform.
"""

import math
from enum import Enum
from typing import NamedTuple


class Range(NamedTuple):
    start: float
    end: float


UNIT = Range(0.0, 1.0)


def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v


def interpolate(value, domain):
    """Map *value* from ``domain`` onto 0..1, clamped at both ends.

    A zero-width domain gives 0.0 below its start and 1.0 otherwise.
    """
    start, end = domain
    if start == end:
        return 0.0 if value < start else 1.0
    return clamp((value - start) / (end - start), 0.0, 1.0)


def interpolate_out(value, out, domain=UNIT):
    """Clamp *value* into ``domain`` and remap it linearly onto ``out``."""
    start, end = out
    return start + interpolate(value, domain) * (end - start)


class TransformCurve(Enum):
    LINEAR = "linear"
    EASE_IN = "ease_in"
    EASE_OUT = "ease_out"

    def compute_from_linear(self, progress):
        t = clamp(progress, 0.0, 1.0)
        if self is TransformCurve.EASE_IN:
            return t * t * t
        if self is TransformCurve.EASE_OUT:
            return 1.0 - math.pow(1.0 - t, 3)
        return t


def ease_out(t):
    return TransformCurve.EASE_OUT.compute_from_linear(t)
