from dataclasses import dataclass

from colorburst.components.bubble_color import BubbleColor

@dataclass(slots=True)
class Bubble:
    """Settled bubble: color plus its derived pixel centre."""
    color: BubbleColor
    x: float
    y: float
    radius: float
