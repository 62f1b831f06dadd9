from enum import Enum


class BubbleColor(Enum):
    """Color tag carried by settled bubbles and the projectile."""
    RED = 'red'
    BLUE = 'blue'
    GREEN = 'green'
    YELLOW = 'yellow'
    PURPLE = 'purple'
    ORANGE = 'orange'
    CYAN = 'cyan'
    PINK = 'pink'
    # Special kinds
    RAINBOW = 'rainbow'  # wildcard: joins any color group, never seeds a match
    BOMB = 'bomb'        # area-clear on impact
    FREEZE = 'freeze'    # reserved, no resolution behaviour

    @property
    def is_special(self) -> bool:
        return self in SPECIAL_COLORS

    @property
    def is_wildcard(self) -> bool:
        return self is BubbleColor.RAINBOW


# Ordinary hues in spawn order; a level with N colors draws from the first N.
ORDINARY_COLORS = (
    BubbleColor.RED,
    BubbleColor.BLUE,
    BubbleColor.GREEN,
    BubbleColor.YELLOW,
    BubbleColor.PURPLE,
    BubbleColor.ORANGE,
    BubbleColor.CYAN,
    BubbleColor.PINK,
)
SPECIAL_COLORS = (BubbleColor.RAINBOW, BubbleColor.BOMB, BubbleColor.FREEZE)
