"""Pointer input plumbing.

Hosts translate their toolkit's mouse / touch callbacks into the three
pointer event dataclasses below, expressed in surface-space coordinates
relative to the drawing surface's top-left corner. Registration with a window
system stays in the host; the engine only depends on the ``EventSource``
protocol.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Iterable, List, Protocol

from pixel_pencil.components import SurfacePoint

if TYPE_CHECKING:
    from pixel_pencil.engine import RasterEngine


@dataclass(frozen=True)
class PointerDown:
    point: SurfacePoint


@dataclass(frozen=True)
class PointerMove:
    point: SurfacePoint


@dataclass(frozen=True)
class PointerUp:
    pass


PointerEvent = PointerDown | PointerMove | PointerUp

PointerHandler = Callable[[PointerEvent], None]
Unsubscribe = Callable[[], None]


class EventSource(Protocol):
    def subscribe(self, handler: PointerHandler) -> Unsubscribe: ...


class PointerEventBus:
    """Synchronous in-process event source.

    ``emit`` delivers each event to every subscribed handler, in subscription
    order, before returning.
    """

    def __init__(self) -> None:
        self._handlers: List[PointerHandler] = []

    def subscribe(self, handler: PointerHandler) -> Unsubscribe:
        self._handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._handlers:
                self._handlers.remove(handler)

        return unsubscribe

    def emit(self, event: PointerEvent) -> None:
        for handler in list(self._handlers):
            handler(event)

    def __len__(self) -> int:
        return len(self._handlers)


def replay(engine: "RasterEngine", events: Iterable[PointerEvent]) -> None:
    """Feed a recorded event sequence through ``engine`` in order."""
    for event in events:
        engine.handle_event(event)
