"""Per-frame update and render registries and their element base classes."""

from __future__ import annotations

from typing import Any, Iterator


class ComponentObject:
    """Something that changes state once per frame."""

    def __init__(self) -> None:
        self.next_x_move = 0.0
        self.next_y_move = 0.0

    def update(self, delta_time: float) -> None:
        """Advance by ``delta_time`` seconds; the base component has no behaviour."""


class RenderObject:
    """Something that draws itself once per frame."""

    def render(self, surface: Any) -> None:
        """Draw onto ``surface``; the base object draws nothing."""


class _Registry:
    """Ordered collection of distinct objects, compared by identity."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def _contains(self, item: Any) -> bool:
        return any(existing is item for existing in self._items)

    def _add(self, item: Any) -> None:
        if not self._contains(item):
            self._items.append(item)

    def _remove(self, item: Any) -> None:
        for position, existing in enumerate(self._items):
            if existing is item:
                del self._items[position]
                return

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))


class ComponentManager(_Registry):
    """Runs every registered component once per frame, in order of addition."""

    def add(self, component: ComponentObject) -> None:
        """Register ``component``; adding it a second time does nothing."""
        self._add(component)

    def remove(self, component: ComponentObject) -> None:
        """Unregister ``component`` if it is registered."""
        self._remove(component)

    def update(self, delta_time: float) -> None:
        """Update every component with the frame's ``delta_time``."""
        for component in self:
            component.update(delta_time)

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[ComponentObject]:
        return super().__iter__()


class RenderManager(_Registry):
    """Renders every registered object once per frame, in order of addition."""

    def add(self, render_object: RenderObject) -> None:
        """Register ``render_object``; adding it a second time does nothing."""
        self._add(render_object)

    def remove(self, render_object: RenderObject) -> None:
        """Unregister ``render_object`` if it is registered."""
        self._remove(render_object)

    def update(self, surface: Any) -> None:
        """Render every object onto ``surface``."""
        for render_object in self:
            render_object.render(surface)

    def __len__(self) -> int:
        return super().__len__()

    def __iter__(self) -> Iterator[RenderObject]:
        return super().__iter__()