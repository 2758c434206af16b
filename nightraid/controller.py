"""Screen stack, deferred navigation requests and the entity factory."""

from __future__ import annotations

from typing import Any, Callable, Hashable

from .constants import ScreenID


class Screen:
    """A screen that the stack can show.

    Input is routed to handlers registered with :meth:`on`, keyed by the
    event's ``type`` attribute (or the event itself when it has none).
    Rendering draws every object in :attr:`drawables` onto the target.
    """

    def __init__(self, screen_id: ScreenID) -> None:
        self.screen_id = screen_id
        self.active = False
        self.elapsed = 0.0
        self.drawables: list[Any] = []
        self._handlers: dict[Hashable, Callable[[Any], None]] = {}

    def on(self, kind: Hashable, handler: Callable[[Any], None]) -> None:
        """Register a handler for events of the given kind."""
        self._handlers[kind] = handler

    def init(self) -> None:
        """Called once when the screen is pushed: starts the screen afresh."""
        self.active = True
        self.elapsed = 0.0

    def process_event(self, event: Any) -> bool:
        """Handle one input event; returns whether a handler took it."""
        handler = self._handlers.get(getattr(event, "type", event))
        if handler is None:
            return False
        handler(event)
        return True

    def update(self, delta_time: float) -> None:
        """Advance the screen's clock by one frame."""
        self.elapsed += delta_time

    def render(self, target: Any) -> None:
        """Draw the screen's drawables onto ``target``."""
        for drawable in self.drawables:
            target.draw(drawable)


class ScreenStack:
    """Screens shown one over another; only the top one is active.

    Pops are requested during a frame and carried out afterwards by
    :meth:`apply_requests`, so that a screen never removes itself mid-update.
    """

    def __init__(self) -> None:
        self._screens: list[Screen] = []
        self.pop_requested = False
        self.pop_to_home_requested = False

    def __len__(self) -> int:
        return len(self._screens)

    def __bool__(self) -> bool:
        return bool(self._screens)

    def push(self, screen: Screen) -> None:
        """Put a screen on top and initialise it."""
        self._screens.append(screen)
        screen.init()

    def pop(self) -> Screen | None:
        """Remove the top screen; does nothing on an empty stack."""
        return self._screens.pop() if self._screens else None

    def pop_to_home(self) -> None:
        """Pop screens until the home screen is on top or none are left."""
        while self._screens and self._screens[-1].screen_id != ScreenID.HOME:
            self._screens.pop()

    def request_pop(self) -> None:
        self.pop_requested = True

    def request_pop_to_home(self) -> None:
        self.pop_to_home_requested = True

    def apply_requests(self) -> None:
        """Carry out a pending request; a plain pop takes precedence."""
        if self.pop_requested:
            self.pop()
            self.pop_requested = False
        elif self.pop_to_home_requested:
            self.pop_to_home()
            self.pop_to_home_requested = False

    def top(self) -> Screen:
        if not self._screens:
            raise IndexError("no screens on the stack")
        return self._screens[-1]


class Factory:
    """Creates objects by a registered kind."""

    def __init__(self) -> None:
        self._constructors: dict[Hashable, Callable[..., Any]] = {}

    def register(self, kind: Hashable, constructor: Callable[..., Any]) -> None:
        self._constructors[kind] = constructor

    def create(self, kind: Hashable, *args: Any, **kwargs: Any) -> Any:
        try:
            constructor = self._constructors[kind]
        except KeyError:
            raise KeyError(f"no constructor registered for {kind!r}") from None
        return constructor(*args, **kwargs)