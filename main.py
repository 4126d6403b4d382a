"""
Card Stack - demo application loop.
"""

import argparse
import time
from dataclasses import replace

import pygame

from card_view import CardView
from renderer import draw_card_stack, draw_status, make_card_surface
from stack_options import LAYOUT_ORDER, layout_options
from state import (
    BG_COLOR, CARD_COUNT, CARD_HEIGHT, CARD_NAMES, CARD_WIDTH,
    WINDOW_HEIGHT, WINDOW_WIDTH, StackState,
)


class App:
    """Top-level card stack demo."""

    def __init__(self, layout="default", card_count=CARD_COUNT, blur_supported=True):
        pygame.init()
        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption("Card Stack")
        self.clock = pygame.time.Clock()
        self._last_frame_time = time.time()
        self.state = StackState(card_count)
        self._layout = layout
        options = layout_options(layout)
        self.cards = []
        for i in range(card_count):
            name = CARD_NAMES[i % len(CARD_NAMES)]
            try:
                surf = make_card_surface(name, CARD_WIDTH, CARD_HEIGHT)
            except pygame.error as e:
                print(f"Warning: could not render card face ({e})")
                surf = pygame.Surface((CARD_WIDTH, CARD_HEIGHT), pygame.SRCALPHA)
                surf.fill((100, 100, 100, 255))
            self.cards.append(CardView(surf, options, blur_supported=blur_supported, name=name))

    def _set_options(self, options):
        for card in self.cards:
            card.options = options

    def _cycle_layout(self):
        idx = (LAYOUT_ORDER.index(self._layout) + 1) % len(LAYOUT_ORDER)
        self._layout = LAYOUT_ORDER[idx]
        self._set_options(layout_options(self._layout))
        print(f"Layout: {self._layout}")

    def _toggle_reverse(self):
        options = self.cards[0].options
        self._set_options(replace(options, reverse=not options.reverse))
        print(f"Reverse: {not options.reverse}")

    def _draw(self):
        st = self.state
        now = time.time()
        dt = min(now - self._last_frame_time, 0.05)  # cap at 50ms to avoid jumps
        self._last_frame_time = now
        st.update(dt)

        for i, card in enumerate(self.cards):
            card.transform(st.progress(i))

        self.screen.fill(BG_COLOR)
        center = (WINDOW_WIDTH // 2, WINDOW_HEIGHT // 2)
        draw_card_stack(self.screen, self.cards, center)
        focused = self.cards[st.focus]
        draw_status(self.screen, f"{self._layout}  |  {focused.name} ({st.focus + 1}/{len(self.cards)})",
                    WINDOW_WIDTH, WINDOW_HEIGHT)
        pygame.display.flip()

    def run(self):
        print("=" * 50)
        print("CARD STACK STARTED")
        print("Left/Right or wheel to move | L = layout | R = reverse | Esc = quit")
        print("=" * 50)
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self._shutdown()
                    return
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        self._shutdown()
                        return
                    if event.key in (pygame.K_RIGHT, pygame.K_DOWN):
                        self.state.step(1)
                    elif event.key in (pygame.K_LEFT, pygame.K_UP):
                        self.state.step(-1)
                    elif event.key == pygame.K_l:
                        self._cycle_layout()
                    elif event.key == pygame.K_r:
                        self._toggle_reverse()
                if event.type == pygame.MOUSEWHEEL:
                    self.state.step(-event.y)
            self._draw()
            self.clock.tick(60)

    def _shutdown(self):
        pygame.quit()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Stacked card transform demo")
    parser.add_argument("--layout", choices=LAYOUT_ORDER, default="default")
    parser.add_argument("--cards", type=int, default=CARD_COUNT)
    parser.add_argument("--no-blur", action="store_true",
                        help="treat the platform as unable to render blur effects")
    args = parser.parse_args(argv)
    if args.cards < 1:
        parser.error("--cards must be at least 1")
    return args


def main(argv=None):
    args = parse_args(argv)
    App(args.layout, args.cards, blur_supported=not args.no_blur).run()


if __name__ == "__main__":
    main()
