"""
Application state - configuration constants and the stack's focus state.
"""

# ==============================
# Stack layout
# ==============================
CARD_COUNT = 8
CARD_WIDTH = 300
CARD_HEIGHT = 400

CARD_NAMES = ["Mail", "Music", "Browser", "Messages", "Calendar", "Maps",
              "Camera", "Photos", "Notes", "Weather", "Books", "Games"]

CARD_COLORS = {
    "Mail": (74, 144, 226),     "Music": (252, 61, 86),    "Browser": (35, 142, 250),
    "Messages": (76, 217, 100), "Calendar": (252, 61, 57), "Maps": (89, 199, 249),
    "Camera": (138, 138, 142),  "Photos": (252, 203, 47),  "Notes": (255, 214, 10),
    "Weather": (99, 204, 250),  "Books": (255, 124, 45),   "Games": (255, 45, 85),
}

WINDOW_WIDTH = 1000
WINDOW_HEIGHT = 800
BG_COLOR = (20, 20, 30)


# ==============================
# Stack state
# ==============================
class StackState:
    """Which card is focused, and the smoothed position the stack shows."""

    def __init__(self, card_count, smoothing=0.22):
        self.card_count = card_count
        self.focus = 0              # target card index
        self.position = 0.0         # displayed (smoothed) focus
        self.smoothing = smoothing

    def step(self, delta):
        self.focus = max(0, min(self.card_count - 1, self.focus + delta))

    def update(self, dt):
        # frame-rate independent: sm = 1 - (1 - base)^(dt * 60)
        sm = 1.0 - (1.0 - self.smoothing) ** (dt * 60.0)
        self.position += (self.focus - self.position) * sm
        if abs(self.focus - self.position) < 1e-3:
            self.position = float(self.focus)

    def progress(self, index):
        return index - self.position
