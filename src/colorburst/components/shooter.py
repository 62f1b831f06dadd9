from dataclasses import dataclass
from typing import Optional

from colorburst.components.bubble_color import BubbleColor
from colorburst.constants import INITIAL_AIM_ANGLE


@dataclass(slots=True)
class Shooter:
    """Launch point, aim and the two loaded colors."""
    x: float
    y: float
    aim_angle: float = INITIAL_AIM_ANGLE
    current_color: Optional[BubbleColor] = None
    next_color: Optional[BubbleColor] = None
