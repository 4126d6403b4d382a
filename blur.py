"""
Blur sink - a per-card effect layer that blurs the card surface with a radius
and a style tint.  Pixels go through numpy/OpenCV; surfaces stay pygame.
"""
from typing import Protocol

import cv2
import numpy as np
import pygame

from stack_options import BlurStyle

# style -> (tint rgb, tint strength at full radius)
_STYLE_TINT = {
    BlurStyle.LIGHT:       ((255, 255, 255), 0.30),
    BlurStyle.EXTRA_LIGHT: ((255, 255, 255), 0.55),
    BlurStyle.DARK:        ((16, 16, 16),    0.45),
    BlurStyle.REGULAR:     ((240, 240, 240), 0.15),
}
_TINT_FULL_RADIUS = 8.0   # radius at which the tint reaches full strength


class BlurHost(Protocol):
    children: list


class BlurSink:
    def __init__(self):
        self.radius = 0.0
        self.style = BlurStyle.LIGHT

    def set_blur_radius(self, style, radius):
        if radius < 0:
            raise ValueError(f"blur radius must be >= 0, got {radius}")
        self.style = style
        self.radius = radius

    def apply(self, surface):
        return blur_surface(surface, self.radius, self.style)


def find_blur_sink(host):
    for child in host.children:
        if isinstance(child, BlurSink):
            return child
    return None


def ensure_blur_sink(host):
    """Return the host's blur sink, attaching a new one if it has none."""
    sink = find_blur_sink(host)
    if sink is None:
        sink = BlurSink()
        host.children.append(sink)
    return sink


def blur_surface(surface, radius, style=None):
    """Gaussian-blur *surface* (colour and per-pixel alpha), tinted when a style is given.

    Returns *surface* itself when ``radius`` is 0, otherwise a new surface.
    """
    if radius <= 0:
        return surface
    sigma = radius / 2.0

    rgb = np.ascontiguousarray(pygame.surfarray.array3d(surface), dtype=np.float32)
    rgb = cv2.GaussianBlur(rgb, (0, 0), sigma)
    if style is not None:
        tint, strength = _STYLE_TINT[style]
        mix = strength * min(1.0, radius / _TINT_FULL_RADIUS)
        rgb = rgb * (1.0 - mix) + np.array(tint, dtype=np.float32) * mix

    out = surface.copy()
    pixels = pygame.surfarray.pixels3d(out)
    pixels[...] = np.clip(rgb, 0, 255).astype(np.uint8)
    del pixels  # unlock

    if surface.get_flags() & pygame.SRCALPHA:
        alpha = np.ascontiguousarray(pygame.surfarray.array_alpha(surface), dtype=np.float32)
        alpha = cv2.GaussianBlur(alpha, (0, 0), sigma)
        pa = pygame.surfarray.pixels_alpha(out)
        pa[...] = np.clip(alpha, 0, 255).astype(np.uint8)
        del pa
    return out
