"""Document-level pointer dispatch for widgets that react to outside clicks."""

from dataclasses import dataclass
from typing import Callable


PointerListener = Callable[[object], None]


@dataclass(frozen=True, eq=False)
class Region:
    """An identifiable area of the page that a pointer event can land on."""

    name: str


# Target for events that hit nothing a widget owns.
OUTSIDE = Region("outside")


class PointerEvents:
    """Fan-out of pointer-down events to registered listeners."""

    def __init__(self):
        self._listeners: list[PointerListener] = []

    def add_listener(self, listener: PointerListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: PointerListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def dispatch(self, target: object) -> None:
        for listener in list(self._listeners):
            listener(target)

    def __len__(self) -> int:
        return len(self._listeners)
