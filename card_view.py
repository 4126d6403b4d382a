"""
Card view - a pygame-backed card that lays itself out with the stack transform.
"""
from stack_options import DEFAULT_OPTIONS
from stack_transform import apply_stack_transform, z_position


class CardView:
    """One card in the stack.

    The card is its own blur host: an attached ``BlurSink`` lives in
    ``children`` next to anything else the host hangs off the card.
    """

    def __init__(self, surface, options=DEFAULT_OPTIONS, *, blur_supported=True, name=""):
        self.surface = surface
        self.options = options
        self.blur_supported = blur_supported
        self.name = name
        self.children = []
        self.result = None   # latest TransformResult

    @property
    def card_size(self):
        return self.surface.get_size()

    @property
    def blur_host(self):
        return self

    def transform(self, progress):
        self.result = apply_stack_transform(self, progress)
        return self.result

    def z_position(self, progress):
        return z_position(progress, self.options)
