"""Scene objects and a renderer that draws them in z-order."""

from __future__ import annotations

from typing import Iterable, List, Optional, Protocol

import numpy as np

from hexmatch.transform import Matrices, Transform, uniform_matrices

DEFAULT_WINDOW_SIZE = (1280, 720)


class Drawable(Protocol):
    size: tuple

    def draw(self, data: Matrices) -> None: ...


class GameObject:
    """A drawable node with a transform, z-index, pivot and children."""

    window_size = DEFAULT_WINDOW_SIZE

    def __init__(
        self,
        drawable: Optional[Drawable] = None,
        z_index: float = 0.0,
        visible: bool = True,
        children: Optional[Iterable["GameObject"]] = None,
        pivot=(0.0, 0.0),
    ) -> None:
        self.drawable = drawable
        self.z_index = z_index
        self.visible = visible
        self.children: List[GameObject] = list(children or [])
        self.pivot = np.array(pivot, dtype=float)
        self.transform = Transform()

    def add_child(self, child: "GameObject") -> None:
        self.children.append(child)

    def remove_child(self, child: "GameObject") -> None:
        self.children = [existing for existing in self.children if existing is not child]

    def draw(self) -> Optional[Matrices]:
        """Draw the object if visible; return the matrices used, if any."""
        if not self.visible or self.drawable is None:
            return None
        size = np.array(self.drawable.size, dtype=float)
        width, height = self.window_size
        data = uniform_matrices(self.transform, size, self.z_index, width, height)
        pivot_shift = np.identity(4)
        pivot_shift[:2, 3] = -(self.pivot / size)
        data.model = data.model @ pivot_shift
        self.drawable.draw(data)
        return data


class Renderer:
    """Holds root objects and draws the whole tree, lowest z-index first."""

    def __init__(self, children: Optional[Iterable[GameObject]] = None) -> None:
        self.children: List[GameObject] = list(children or [])

    def add_child(self, child: GameObject) -> None:
        self.children.append(child)

    def remove_child(self, child: GameObject) -> None:
        self.children = [existing for existing in self.children if existing is not child]

    def add_children(self, children: Iterable[GameObject]) -> None:
        self.children.extend(children)

    def render_order(self) -> List[GameObject]:
        """All objects in the tree, sorted by ascending z-index."""
        stack = list(self.children)
        visited: List[GameObject] = []
        while stack:
            current = stack.pop()
            visited.append(current)
            stack.extend(current.children)
        return sorted(visited, key=lambda obj: obj.z_index)

    def update(self) -> None:
        for obj in self.render_order():
            obj.draw()