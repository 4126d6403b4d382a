import os
import unittest
from dataclasses import replace

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame

from card_view import CardView
from renderer import draw_card, draw_card_stack, make_card_surface
from stack_options import DEFAULT_OPTIONS, LAYOUTS

RED = (200, 40, 40)
BLUE = (40, 40, 200)


def solid(color, w=30, h=40):
    surf = pygame.Surface((w, h), pygame.SRCALPHA)
    surf.fill((*color, 255))
    return surf


def setUpModule():
    pygame.init()


def tearDownModule():
    pygame.quit()


class CardViewTestCase(unittest.TestCase):
    def test_card_size_follows_surface(self):
        card = CardView(solid(RED, 30, 40))
        self.assertEqual((30, 40), card.card_size)
        self.assertIs(card, card.blur_host)

    def test_transform_remembers_result(self):
        card = CardView(solid(RED))
        self.assertIsNone(card.result)
        result = card.transform(1)
        self.assertIs(result, card.result)
        self.assertEqual(-1, result.z_order)
        self.assertEqual(-1, card.z_position(1))


class DrawStackTestCase(unittest.TestCase):
    def setUp(self):
        self.screen = pygame.Surface((200, 200))
        self.screen.fill((0, 0, 0))

    def test_focused_card_is_drawn_on_top(self):
        back = CardView(solid(BLUE))
        front = CardView(solid(RED))
        # list order deliberately puts the focused card first
        cards = [front, back]
        front.transform(0)
        back.transform(1)

        rects = draw_card_stack(self.screen, cards, (100, 100))
        self.assertEqual([1, 0], [i for _, i in rects])
        self.assertEqual(RED, tuple(self.screen.get_at((100, 100)))[:3])

        # the stacked card peeks out below the focused one, dimmed
        peek = self.screen.get_at((100, 122))
        self.assertNotEqual(RED, tuple(peek)[:3])
        self.assertGreater(peek.b, 0)
        self.assertLess(peek.b, BLUE[2])

    def test_invisible_and_unlaid_cards_are_skipped(self):
        popped = CardView(solid(RED))
        popped.transform(-1)
        fresh = CardView(solid(BLUE))
        self.assertIsNone(draw_card(self.screen, popped, (100, 100)))
        self.assertEqual([], draw_card_stack(self.screen, [popped, fresh], (100, 100)))

    def test_shadow_and_blur_layouts_draw(self):
        shadowed = CardView(solid(RED), replace(DEFAULT_OPTIONS, shadow_enabled=True,
                                                shadow_offset=(3.0, 3.0), shadow_opacity=0.5))
        blurred = CardView(solid(BLUE), LAYOUTS["blur"])
        shadowed.transform(0)
        blurred.transform(2)
        rects = draw_card_stack(self.screen, [shadowed, blurred], (100, 100))
        self.assertEqual(2, len(rects))

    def test_rotated_card_grows_bounding_rect(self):
        card = CardView(solid(RED), replace(DEFAULT_OPTIONS, pop_angle=0.5, pop_offset_ratio=(0.0, 0.0),
                                            top_stack_alpha_speed_factor=1.0))
        card.transform(-0.5)
        rect = draw_card(self.screen, card, (100, 100))
        self.assertGreater(rect.width, 30)


class CardFaceTestCase(unittest.TestCase):
    def test_card_face_is_cached(self):
        surf = make_card_surface("Mail", 120, 160)
        self.assertEqual((120, 160), surf.get_size())
        self.assertIs(surf, make_card_surface("Mail", 120, 160))

    def test_unknown_name_uses_fallback_color(self):
        surf = make_card_surface("Zzz", 80, 100)
        self.assertEqual((80, 100), surf.get_size())


if __name__ == "__main__":
    unittest.main()
