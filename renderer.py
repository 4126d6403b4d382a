"""
Renderer - Pygame drawing for the card stack: card faces, shadows, blur and
the per-card affine transform, painted back-to-front by z-order.
"""

import math
import pygame

from blur import blur_surface, find_blur_sink
from state import CARD_COLORS


# ==============================
# Font cache
# ==============================
_font_cache: dict[int, pygame.font.Font] = {}


def get_font(size: int) -> pygame.font.Font:
    if size not in _font_cache:
        _font_cache[size] = pygame.font.Font(None, size)
    return _font_cache[size]


# Pre-rendered text surface cache: (text, size, color) -> Surface
_text_cache: dict[tuple, pygame.Surface] = {}


def _render_text(text: str, size: int, color: tuple) -> pygame.Surface:
    key = (text, size, color)
    if key not in _text_cache:
        _text_cache[key] = get_font(size).render(text, True, color)
    return _text_cache[key]


# ==============================
# Card faces
# ==============================
# Card surface cache: (name, w, h) -> Surface
_card_surface_cache: dict[tuple, pygame.Surface] = {}
_CARD_CACHE_MAX = 60
_BAR_HEIGHT_FRAC = 0.14            # title-bar height as fraction of card height


def make_card_surface(name, w, h):
    """Render a rounded, colored card face with its title."""
    key = (name, w, h)
    if key in _card_surface_cache:
        return _card_surface_cache[key]
    if len(_card_surface_cache) >= _CARD_CACHE_MAX:
        for old_key in list(_card_surface_cache.keys())[:30]:
            del _card_surface_cache[old_key]

    color = CARD_COLORS.get(name, (100, 100, 100))
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    br = max(12, int(min(w, h) * 0.08))
    pygame.draw.rect(surf, (*color, 255), (0, 0, w, h), border_radius=br)

    bar_h = int(h * _BAR_HEIGHT_FRAC)
    bar_color = tuple(int(c * 0.75) for c in color)
    pygame.draw.rect(surf, (*bar_color, 255), (0, 0, w, bar_h),
                     border_top_left_radius=br, border_top_right_radius=br)
    pygame.draw.rect(surf, (255, 255, 255), (0, 0, w, h), width=2, border_radius=br)

    title = _render_text(name, max(16, bar_h - 8), (255, 255, 255))
    surf.blit(title, title.get_rect(midleft=(br, bar_h // 2)))
    initial = _render_text(name[:1], max(24, h // 3), (255, 255, 255))
    surf.blit(initial, initial.get_rect(center=(w // 2, h // 2 + bar_h // 2)))

    _card_surface_cache[key] = surf
    return surf


# ==============================
# Shadow
# ==============================
def _shadow_surface(img, shadow, alpha):
    """Blurred, tinted silhouette of *img*."""
    mask = pygame.mask.from_surface(img)
    shade = mask.to_surface(setcolor=(*shadow.color, 255), unsetcolor=(0, 0, 0, 0))
    if shadow.radius > 0:
        pad = int(math.ceil(shadow.radius))
        padded = pygame.Surface((shade.get_width() + pad * 2, shade.get_height() + pad * 2),
                                pygame.SRCALPHA)
        padded.blit(shade, (pad, pad))
        shade = blur_surface(padded, shadow.radius)
    shade.set_alpha(round(255 * shadow.opacity * alpha))
    return shade


# ==============================
# Card stack
# ==============================
def draw_card(surface, card, center):
    """Paint one card with its latest transform.  Returns its rect or None."""
    result = card.result
    if result is None or result.alpha <= 0:
        return None
    t = result.transform
    if t.scale <= 0:
        return None

    src = card.surface
    sink = find_blur_sink(card.blur_host)
    if sink is not None and sink.radius > 0:
        src = sink.apply(src)

    # pygame rotates counter-clockwise in a y-down space
    img = pygame.transform.rotozoom(src, -math.degrees(t.rotation), t.scale)
    cx, cy = center[0] + t.tx, center[1] + t.ty

    if result.shadow is not None:
        shade = _shadow_surface(img, result.shadow, result.alpha)
        dx, dy = result.shadow.offset
        surface.blit(shade, shade.get_rect(center=(round(cx + dx), round(cy + dy))))

    img.set_alpha(round(255 * result.alpha))
    rect = img.get_rect(center=(round(cx), round(cy)))
    surface.blit(img, rect)
    return rect


def draw_card_stack(surface, cards, center):
    """Paint every laid-out card back-to-front.

    Lower z-order is painted first; equal z-orders keep list order.
    Returns ``(rect, index)`` pairs for the cards that were drawn.
    """
    order = sorted(
        (i for i, card in enumerate(cards) if card.result is not None),
        key=lambda i: cards[i].result.z_order,
    )
    rects = []
    for i in order:
        rect = draw_card(surface, cards[i], center)
        if rect is not None:
            rects.append((rect, i))
    return rects


def draw_status(surface, text, window_width, window_height):
    msg = _render_text(text, 28, (200, 200, 210))
    surface.blit(msg, msg.get_rect(midbottom=(window_width // 2, window_height - 16)))
