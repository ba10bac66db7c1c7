"""Scenes: collections of elements grouped by label."""

from __future__ import annotations

from typing import Any

from tilebreaker.element import Element
from tilebreaker.settings import MAX_ELEMENT


class Scene:
    """Holds elements by label and runs them frame by frame."""

    def __init__(self, label: int):
        self.label = label
        self.scene_end = False
        self._elements: dict[int, list[Element]] = {}

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._elements.values())

    def register(self, element: Element) -> None:
        """Add ``element`` to the scene and give it an id."""
        if not 0 <= element.label < MAX_ELEMENT:
            raise ValueError(f"element label must be in 0..{MAX_ELEMENT - 1}")
        element.id = len(self)
        self._elements.setdefault(element.label, []).append(element)

    def remove(self, element: Element) -> None:
        """Take ``element`` out of the scene."""
        bucket = self._elements.get(element.label, [])
        position = next((i for i, e in enumerate(bucket) if e is element), None)
        if position is None:
            raise ValueError("element is not registered in this scene")
        del bucket[position]

    def all_elements(self) -> list[Element]:
        """Every element, by ascending label, in registration order within a label."""
        return [
            element
            for label in sorted(self._elements)
            for element in self._elements[label]
        ]

    def label_elements(self, label: int) -> list[Element]:
        """Elements with the given label, in registration order."""
        return list(self._elements.get(label, ()))

    def update(self) -> None:
        """Update every element, then let each interact, then drop deleted ones."""
        elements = self.all_elements()
        for element in elements:
            element.update(self)
        for element in elements:
            element.interact(self)
        for element in elements:
            if element.to_delete:
                self.remove(element)

    def draw(self, surface: Any) -> None:
        """Draw every element onto ``surface``."""
        for element in self.all_elements():
            element.draw(surface)

    def destroy(self) -> None:
        """Destroy every element and empty the scene."""
        for element in self.all_elements():
            element.destroy()
        self._elements.clear()