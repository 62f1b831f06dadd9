from dataclasses import dataclass

@dataclass(slots=True)
class Popping:
    """Removal in progress; the bubble is deleted once progress reaches 1."""
    progress: float = 0.0
