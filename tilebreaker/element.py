"""Base class of everything that lives in a scene."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from tilebreaker.settings import MAX_ELEMENT


class ElementLabel(enum.IntEnum):
    """Kinds of element in the game scene."""

    TELEPORT = 0
    GROUND = 1
    CHARACTER = 2
    PROJECTILE = 3


class Element(ABC):
    """An object in a scene, updated, checked for interactions and drawn each frame."""

    def __init__(self, label: int, interacts_with: Iterable[int] = ()):
        if not 0 <= label < MAX_ELEMENT:
            raise ValueError(f"element label must be in 0..{MAX_ELEMENT - 1}")
        interacts = list(interacts_with)
        if len(interacts) > MAX_ELEMENT:
            raise ValueError(f"an element interacts with at most {MAX_ELEMENT} labels")
        self.label = label
        self.id = -1
        self.interacts_with = interacts
        self.to_delete = False

    @abstractmethod
    def update(self, scene: Any) -> None:
        """Advance the element by one frame."""

    @abstractmethod
    def interact(self, scene: Any) -> None:
        """React to the other elements of ``scene``."""

    @abstractmethod
    def draw(self, surface: Any) -> None:
        """Draw the element onto ``surface``."""

    @abstractmethod
    def destroy(self) -> None:
        """Release what the element holds."""