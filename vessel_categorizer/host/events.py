"""Host event hooks with explicit, scoped registration.

Each hook keeps an ordered list of callbacks. Addons add their handlers
when they attach and remove them when they detach; ``subscribed`` brackets
that pair so the handler is removed on every exit path.

Example:
    events = GameEvents()
    with events.on_vessel_change.subscribed(handle_vessel_change):
        events.on_vessel_change.fire(vessel)
"""
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List

import structlog

logger = structlog.get_logger(__name__)

Callback = Callable[..., Any]


class EventHook:
    """An ordered set of callbacks fired together."""

    def __init__(self, name: str):
        self.name = name
        self._callbacks: List[Callback] = []

    def add(self, callback: Callback) -> None:
        """Register a callback. Adding one that is already present is a no-op."""
        if callback in self._callbacks:
            return
        self._callbacks.append(callback)
        logger.debug("event_callback_added", hook=self.name, count=len(self._callbacks))

    def remove(self, callback: Callback) -> None:
        """Unregister a callback. Removing one that is absent is a no-op."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)
            logger.debug("event_callback_removed", hook=self.name, count=len(self._callbacks))

    def fire(self, *args: Any) -> None:
        """Invoke every callback in registration order."""
        # Copy so callbacks may detach themselves while firing
        for callback in list(self._callbacks):
            callback(*args)

    @contextmanager
    def subscribed(self, callback: Callback) -> Iterator[Callback]:
        """Keep ``callback`` registered for the duration of a with-block."""
        self.add(callback)
        try:
            yield callback
        finally:
            self.remove(callback)

    def __contains__(self, callback: Callback) -> bool:
        return callback in self._callbacks

    def __len__(self) -> int:
        return len(self._callbacks)


@dataclass
class GameEvents:
    """Hooks the host fires that categorization cares about.

    Attributes:
        on_vessel_change: Fired with the vessel on switch, load or launch
        on_editor_pod_picked: Fired with the root part of a new ship
        on_editor_part_placed: Fired with the placed part, or None when an
            unattached part is deleted
    """
    on_vessel_change: EventHook = field(default_factory=lambda: EventHook("on_vessel_change"))
    on_editor_pod_picked: EventHook = field(default_factory=lambda: EventHook("on_editor_pod_picked"))
    on_editor_part_placed: EventHook = field(default_factory=lambda: EventHook("on_editor_part_placed"))
