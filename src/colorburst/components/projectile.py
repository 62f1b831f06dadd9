from dataclasses import dataclass

from colorburst.components.bubble_color import BubbleColor

@dataclass(slots=True)
class Projectile:
    x: float
    y: float
    vx: float
    vy: float
    color: BubbleColor
    radius: float
