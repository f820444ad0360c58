# controls.py
from enum import Enum
from typing import Protocol


class Key(Enum):
    """Logical keys the game reacts to; the front end maps physical keys onto these."""
    UP = "up"
    LEFT = "left"
    DOWN = "down"
    RIGHT = "right"
    CONFIRM = "confirm"


class InputSource(Protocol):
    def is_down(self, key: Key) -> bool:
        """True while the key is held during this frame."""
        ...

    def is_pressed(self, key: Key) -> bool:
        """True only on the frame the key went down."""
        ...
