"""
Hover state of the map.

The map is either Idle or Hovering one destination city. Pointer events move
between the two; a pointer entering another city while one is hovered
switches directly without passing through Idle.
"""
from typing import Any, Callable, Dict, List, NamedTuple, Optional

from migration_map.logging import logger

DESTINATION_KIND: str = "destination"
ORIGIN_KIND: str = "origin"


class HoverState(NamedTuple):
    city: Optional[str] = None

    @property
    def hovering(self) -> bool:
        return self.city is not None

    def to_store(self) -> Dict[str, Optional[str]]:
        return {"city": self.city}

    @classmethod
    def from_store(cls, data: Optional[Dict[str, Any]]) -> "HoverState":
        if not data:
            return IDLE
        return cls(city=data.get("city"))


IDLE = HoverState()


def pointer_enter(state: HoverState, city: str) -> HoverState:
    return HoverState(city=city)


def pointer_leave(state: HoverState) -> HoverState:
    return IDLE


Subscriber = Callable[[HoverState], None]


class HoverMachine:
    """
    holds the current HoverState and notifies subscribers after each change.

    the new state is fully assigned before any subscriber runs, and subscribers
    run in the order they subscribed. transitions that leave the state as it
    was notify nobody.
    """

    def __init__(self, state: HoverState = IDLE):
        self.state = state
        self._subscribers: List[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    def pointer_enter(self, city: str) -> HoverState:
        return self._set(pointer_enter(self.state, city))

    def pointer_leave(self) -> HoverState:
        return self._set(pointer_leave(self.state))

    def _set(self, new: HoverState) -> HoverState:
        if new == self.state:
            return self.state

        logger.debug(f"hover {self.state.city!r} -> {new.city!r}")
        self.state = new
        for subscriber in list(self._subscribers):
            subscriber(new)

        return new


def hovered_point(hover_data: Optional[Dict[str, Any]]) -> Optional[List[Any]]:
    """customdata ([kind, name]) of the first hovered point, if any"""
    if not hover_data:
        return None

    points = hover_data.get("points") or []
    if not points:
        return None

    customdata = points[0].get("customdata")
    if not isinstance(customdata, (list, tuple)) or len(customdata) < 2:
        return None

    return list(customdata)


def apply_hover_data(machine: HoverMachine, hover_data: Optional[Dict[str, Any]]) -> HoverState:
    """
    translates a dcc.Graph hoverData payload into a pointer event. only
    destination markers enter; everything else, including the None sent on
    unhover, is a leave.
    """
    point = hovered_point(hover_data)
    if point is not None and point[0] == DESTINATION_KIND:
        return machine.pointer_enter(point[1])

    return machine.pointer_leave()
