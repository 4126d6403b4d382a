"""
Stack options - the immutable configuration behind every stack transform,
plus a handful of named layout presets.
"""
import math
from dataclasses import dataclass, replace
from enum import Enum


class BlurStyle(Enum):
    LIGHT = "light"
    EXTRA_LIGHT = "extra_light"
    DARK = "dark"
    REGULAR = "regular"


@dataclass(frozen=True)
class StackOptions:
    # scale
    scale_factor: float = 0.10
    min_scale: float | None = 0.0
    max_scale: float | None = 1.0

    # stacking geometry
    max_stack_size: int = 4
    spacing_factor: float = 0.10
    max_spacing: float | None = None     # fraction of card size
    stack_position: tuple[float, float] = (0.0, 1.0)
    perspective_ratio: float = 0.0

    # fading
    alpha_factor: float = 0.40
    bottom_stack_alpha_speed_factor: float = 10.0
    top_stack_alpha_speed_factor: float = 0.10

    # rotation, radians
    stack_rotate_angle: float = 0.0
    pop_angle: float = 0.0
    pop_offset_ratio: tuple[float, float] = (-1.3, 0.3)

    reverse: bool = False

    # shadow
    shadow_enabled: bool = False
    shadow_color: tuple[int, int, int] = (0, 0, 0)
    shadow_offset: tuple[float, float] = (0.0, 0.0)
    shadow_radius: float = 10.0
    shadow_opacity: float = 0.1

    # blur
    blur_effect_enabled: bool = False
    max_blur_effect_radius: float = 0.0
    blur_effect_style: BlurStyle = BlurStyle.LIGHT


DEFAULT_OPTIONS = StackOptions()

LAYOUTS = {
    "default": DEFAULT_OPTIONS,
    "fan": replace(
        DEFAULT_OPTIONS,
        scale_factor=0.12, min_scale=0.2, max_stack_size=5,
        spacing_factor=0.0, alpha_factor=0.10,
        stack_rotate_angle=math.radians(8), pop_angle=math.radians(20),
        pop_offset_ratio=(-1.45, 0.3), shadow_enabled=True,
    ),
    "perspective": replace(
        DEFAULT_OPTIONS,
        scale_factor=0.10, spacing_factor=0.05, max_spacing=0.04,
        perspective_ratio=0.30, alpha_factor=0.15,
        bottom_stack_alpha_speed_factor=0.9, top_stack_alpha_speed_factor=0.3,
        shadow_enabled=True, shadow_radius=12.0, shadow_opacity=0.25,
    ),
    "tower": replace(
        DEFAULT_OPTIONS,
        scale_factor=0.05, spacing_factor=0.08, stack_position=(0.0, -1.0),
        alpha_factor=0.20, pop_offset_ratio=(0.0, -1.2),
    ),
    "vortex": replace(
        DEFAULT_OPTIONS,
        scale_factor=0.06, spacing_factor=0.02, max_stack_size=6,
        alpha_factor=0.12, stack_rotate_angle=math.radians(15),
        pop_angle=-math.radians(30), pop_offset_ratio=(0.9, -0.4),
    ),
    "blur": replace(
        DEFAULT_OPTIONS,
        scale_factor=0.08, spacing_factor=0.06, alpha_factor=0.05,
        blur_effect_enabled=True, max_blur_effect_radius=8.0,
        blur_effect_style=BlurStyle.DARK,
    ),
    "reverse": replace(
        DEFAULT_OPTIONS,
        reverse=True, stack_position=(1.0, 0.0), pop_offset_ratio=(1.3, 0.0),
        alpha_factor=0.20,
    ),
}
LAYOUT_ORDER = tuple(LAYOUTS)


def layout_options(name: str) -> StackOptions:
    try:
        return LAYOUTS[name]
    except KeyError:
        raise KeyError(f"Unknown layout {name!r}, expected one of: {', '.join(LAYOUT_ORDER)}") from None
