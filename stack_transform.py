"""
Stack transform - maps a card's progress through the stack onto its affine
transform, alpha, z-order, shadow and blur radius.

``progress`` is the card's offset from the focused position: 0 is the focused
card, 1, 2, ... are the cards stacked behind it and negative values belong to
a card being popped off the front.  Everything here is a pure function of
(progress, options, card size) except ``apply_stack_transform``, which also
attaches the card's blur sink.
"""
import math
from dataclasses import dataclass
from typing import Protocol

from blur import BlurHost, ensure_blur_sink, find_blur_sink
from curves import Range, clamp, ease_out, interpolate, interpolate_out
from stack_options import BlurStyle, StackOptions


# ==============================
# Affine transform
# ==============================
@dataclass(frozen=True)
class Affine:
    """2D affine transform ``[a b; c d; tx ty]`` using row-vector convention.

    ``translated``, ``scaled`` and ``rotated`` prepend the operation, i.e. it
    happens in the transform's own coordinate space before everything already
    composed into it.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    tx: float = 0.0
    ty: float = 0.0

    def translated(self, x, y):
        return Affine(self.a, self.b, self.c, self.d,
                      self.tx + self.a * x + self.c * y,
                      self.ty + self.b * x + self.d * y)

    def scaled(self, sx, sy=None):
        if sy is None:
            sy = sx
        return Affine(self.a * sx, self.b * sx, self.c * sy, self.d * sy, self.tx, self.ty)

    def rotated(self, angle):
        cos, sin = math.cos(angle), math.sin(angle)
        return Affine(self.a * cos + self.c * sin, self.b * cos + self.d * sin,
                      self.c * cos - self.a * sin, self.d * cos - self.b * sin,
                      self.tx, self.ty)

    def apply(self, x, y):
        return (self.a * x + self.c * y + self.tx,
                self.b * x + self.d * y + self.ty)

    @property
    def scale(self):
        """Uniform scale magnitude (ignores reflection)."""
        return math.hypot(self.a, self.b)

    @property
    def rotation(self):
        return math.atan2(self.b, self.a)

    @property
    def translation(self):
        return (self.tx, self.ty)


IDENTITY = Affine()


@dataclass(frozen=True)
class Shadow:
    color: tuple[int, int, int]
    offset: tuple[float, float]
    radius: float
    opacity: float


@dataclass(frozen=True)
class TransformResult:
    transform: Affine
    alpha: float
    z_order: int
    blur_radius: float = 0.0
    blur_style: BlurStyle = BlurStyle.LIGHT
    shadow: Shadow | None = None


class StackTransformView(Protocol):
    """Anything that can be laid out as a card in a stack."""
    options: StackOptions
    card_size: tuple[float, float]
    blur_host: BlurHost
    blur_supported: bool


# ==============================
# Steps
# ==============================
def _shadow(options):
    if not options.shadow_enabled:
        return None
    return Shadow(options.shadow_color, options.shadow_offset,
                  options.shadow_radius, options.shadow_opacity)


def _scale_transform(progress, options, card_size):
    width, height = card_size
    sx, sy = options.stack_position

    scale = 1 - progress * options.scale_factor
    if options.min_scale is not None:
        scale = max(options.min_scale, scale)
    if options.max_scale is not None:
        scale = min(options.max_scale, scale)

    stack_progress = interpolate(progress, Range(0, options.max_stack_size))
    perspective_progress = ease_out(stack_progress) * options.perspective_ratio

    x_spacing = width * options.spacing_factor
    y_spacing = height * options.spacing_factor
    if options.max_spacing is not None:
        x_spacing = min(x_spacing, width * options.max_spacing)
        y_spacing = min(y_spacing, height * options.max_spacing)
    translate_x = x_spacing * -max(progress, 0) * -sx
    translate_y = y_spacing * -max(progress, 0) * -sy

    # keep the stack edge anchored while cards shrink
    x_adjustment = ((scale - 1) * width) / 2 + perspective_progress * width
    x_adjustment *= -sx
    y_adjustment = ((scale - 1) * height) / 2 + perspective_progress * height
    y_adjustment *= -sy

    if progress < 0:
        pop_w, pop_h = options.pop_offset_ratio
        x_adjustment -= width * pop_w * progress
        y_adjustment -= height * pop_h * progress

    return IDENTITY.translated(translate_x + x_adjustment,
                               translate_y + y_adjustment).scaled(scale)


def _alpha(progress, options):
    alpha = 1.0
    stack_size = float(options.max_stack_size)
    if progress >= stack_size - 1:
        target = stack_size - 1
        alpha = 1 - interpolate(progress, Range(target, target + options.bottom_stack_alpha_speed_factor))
    elif progress < 0:
        alpha = interpolate(progress, Range(-1, -1 + options.top_stack_alpha_speed_factor))

    if alpha > 0 and progress >= 0:
        alpha = clamp(alpha - progress * options.alpha_factor, 0.0, 1.0)
    return alpha


def _rotation(progress, options):
    if progress <= 0:
        angle = -interpolate_out(abs(progress), Range(0, abs(options.pop_angle)))
        if options.pop_angle < 0:
            angle *= -1
        return angle

    rotate = options.stack_rotate_angle
    whole = int(progress)
    angle = -(progress - whole) * rotate * 2 + rotate
    if whole % 2 == 0:
        angle *= -1
    if progress < 1:
        angle += interpolate_out(1 - progress, Range(0, rotate))
    return angle


def _blur_radius(progress, options, blur_supported):
    if not (blur_supported and options.blur_effect_enabled and options.max_blur_effect_radius > 0):
        return 0.0
    fraction = interpolate(max(progress, 0), Range(0, options.max_stack_size))
    return fraction * options.max_blur_effect_radius


def _round_half_away(v):
    return int(math.copysign(math.floor(abs(v) + 0.5), v))


# ==============================
# Public API
# ==============================
def z_position(progress, options):
    z = -_round_half_away(progress)
    if options.reverse:
        z = -z
    return z


def compute_transform(progress, options, card_size, blur_supported=True):
    """Full transform for a card at ``progress`` with the given options."""
    raw_progress = progress
    if options.reverse:
        progress = -progress

    transform = _scale_transform(progress, options, card_size)
    transform = transform.rotated(_rotation(progress, options))
    return TransformResult(
        transform=transform,
        alpha=_alpha(progress, options),
        z_order=z_position(raw_progress, options),
        blur_radius=_blur_radius(progress, options, blur_supported),
        blur_style=options.blur_effect_style,
        shadow=_shadow(options),
    )


def apply_stack_transform(card: StackTransformView, progress) -> TransformResult:
    """Compute the card's transform and sync its blur sink.

    A sink is attached on the first non-zero blur radius and reused after
    that; an existing sink is reset to zero when blur no longer applies.
    """
    result = compute_transform(progress, card.options, card.card_size, card.blur_supported)
    if result.blur_radius > 0:
        sink = ensure_blur_sink(card.blur_host)
    else:
        sink = find_blur_sink(card.blur_host)
    if sink is not None:
        sink.set_blur_radius(result.blur_style, result.blur_radius)
    return result
