"""Mouse, keyboard and touch input state, updated from window events."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
from typing import Any, Hashable, Optional

from .vector import Vec2


class TouchPhase(Enum):
    STARTED = auto()
    STATIONARY = auto()
    MOVED = auto()
    ENDED = auto()
    CANCELLED = auto()


class MouseButton(Enum):
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Touch:
    """A single touch point with its position in pixels."""

    id: int
    phase: TouchPhase
    position: Vec2


@dataclass(frozen=True)
class InputEvent:
    """A recorded window event: the handler method name and its arguments."""

    name: str
    args: tuple[Any, ...]

    def replay(self, target: Any) -> None:
        """Call the same-named handler method on target with the recorded arguments."""
        getattr(target, self.name)(*self.args)


class InputState:
    """Input state of one window, fed by its event callbacks."""

    def __init__(
        self,
        screen_width: float = 800.0,
        screen_height: float = 600.0,
        dpi_scale: float = 1.0,
    ) -> None:
        self.screen_width = screen_width
        self.screen_height = screen_height
        self.dpi_scale = dpi_scale

        self.simulate_mouse_with_touch = True
        self.cursor_grabbed = False
        self.prevent_quit_event = False
        self.quit_requested = False

        self._keys_down: set[Hashable] = set()
        self._keys_pressed: dict[Hashable, None] = {}
        self._keys_released: set[Hashable] = set()
        self._mouse_down: set[MouseButton] = set()
        self._mouse_pressed: set[MouseButton] = set()
        self._mouse_released: set[MouseButton] = set()
        self._touches: dict[int, Touch] = {}
        self._chars_pressed: list[str] = []
        self._mouse_position = Vec2(0.0, 0.0)
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._subscribers: list[list[InputEvent]] = []

    def _broadcast(self, name: str, *args: Any) -> None:
        event = InputEvent(name, args)
        for queue in self._subscribers:
            queue.append(event)

    def _to_local(self, pixel_pos: Vec2) -> Vec2:
        scaled = Vec2(pixel_pos.x / self.screen_width, pixel_pos.y / self.screen_height)
        return scaled * 2.0 - Vec2(1.0, 1.0)

    # -- event callbacks -------------------------------------------------

    def resize(self, width: float, height: float) -> None:
        self.screen_width = width
        self.screen_height = height

    def set_cursor_grab(self, grab: bool) -> None:
        """Constrain the mouse to the window."""
        self.cursor_grabbed = grab

    def raw_mouse_motion(self, x: float, y: float) -> None:
        """Relative motion; only tracked while the cursor is grabbed."""
        if self.cursor_grabbed:
            self._mouse_position = self._mouse_position + Vec2(x, y)
            self._broadcast(
                "mouse_motion_event", self._mouse_position.x, self._mouse_position.y
            )

    def mouse_motion_event(self, x: float, y: float) -> None:
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)
            self._broadcast("mouse_motion_event", x, y)

    def mouse_wheel_event(self, x: float, y: float) -> None:
        self._mouse_wheel = Vec2(x, y)
        self._broadcast("mouse_wheel_event", x, y)

    def mouse_button_down_event(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.add(button)
        self._mouse_pressed.add(button)
        self._broadcast("mouse_button_down_event", button, x, y)
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def mouse_button_up_event(self, button: MouseButton, x: float, y: float) -> None:
        self._mouse_down.discard(button)
        self._mouse_released.add(button)
        self._broadcast("mouse_button_up_event", button, x, y)
        if not self.cursor_grabbed:
            self._mouse_position = Vec2(x, y)

    def touch_event(self, phase: TouchPhase, touch_id: int, x: float, y: float) -> None:
        self._touches[touch_id] = Touch(touch_id, phase, Vec2(x, y))

        if self.simulate_mouse_with_touch:
            if phase is TouchPhase.STARTED:
                self.mouse_button_down_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.ENDED:
                self.mouse_button_up_event(MouseButton.LEFT, x, y)
            elif phase is TouchPhase.MOVED:
                self.mouse_motion_event(x, y)

        self._broadcast("touch_event", phase, touch_id, x, y)

    def char_event(self, character: str, modifiers: Any = None, repeat: bool = False) -> None:
        self._chars_pressed.append(character)
        self._broadcast("char_event", character, modifiers, repeat)

    def key_down_event(self, keycode: Hashable, modifiers: Any = None, repeat: bool = False) -> None:
        self._keys_down.add(keycode)
        if not repeat:
            self._keys_pressed.pop(keycode, None)
            self._keys_pressed[keycode] = None
        self._broadcast("key_down_event", keycode, modifiers, repeat)

    def key_up_event(self, keycode: Hashable, modifiers: Any = None) -> None:
        self._keys_down.discard(keycode)
        self._keys_released.add(keycode)
        self._broadcast("key_up_event", keycode, modifiers)

    def quit_requested_event(self) -> bool:
        """Handle a quit request; return False when the quit is cancelled."""
        if self.prevent_quit_event:
            self.quit_requested = True
            return False
        return True

    def end_frame(self) -> None:
        """Forget per-frame state and settle touches for the next frame."""
        self._mouse_wheel = Vec2(0.0, 0.0)
        self._keys_pressed.clear()
        self._keys_released.clear()
        self._mouse_pressed.clear()
        self._mouse_released.clear()
        self.quit_requested = False

        self._touches = {
            touch_id: (
                replace(touch, phase=TouchPhase.STATIONARY)
                if touch.phase in (TouchPhase.STARTED, TouchPhase.MOVED)
                else touch
            )
            for touch_id, touch in self._touches.items()
            if touch.phase not in (TouchPhase.ENDED, TouchPhase.CANCELLED)
        }

    # -- queries -----------------------------------------------------------

    def mouse_position(self) -> tuple[float, float]:
        """Mouse position in logical pixels."""
        return (
            self._mouse_position.x / self.dpi_scale,
            self._mouse_position.y / self.dpi_scale,
        )

    def mouse_position_local(self) -> Vec2:
        """Mouse position in the range [-1, 1]."""
        x, y = self.mouse_position()
        return self._to_local(Vec2(x, y))

    def touches(self) -> list[Touch]:
        return list(self._touches.values())

    def touches_local(self) -> list[Touch]:
        """Touches with positions in the range [-1, 1]."""
        return [
            replace(touch, position=self._to_local(touch.position))
            for touch in self._touches.values()
        ]

    def mouse_wheel(self) -> tuple[float, float]:
        return (self._mouse_wheel.x, self._mouse_wheel.y)

    def is_key_pressed(self, keycode: Hashable) -> bool:
        """True if the key went down this frame (repeats excluded)."""
        return keycode in self._keys_pressed

    def is_key_down(self, keycode: Hashable) -> bool:
        return keycode in self._keys_down

    def is_key_released(self, keycode: Hashable) -> bool:
        return keycode in self._keys_released

    def get_char_pressed(self) -> Optional[str]:
        """Take the most recent character off the input queue, or None."""
        return self._chars_pressed.pop() if self._chars_pressed else None

    def get_last_key_pressed(self) -> Optional[Hashable]:
        """The most recently pressed key of this frame, or None."""
        return next(reversed(self._keys_pressed), None)

    def is_mouse_button_down(self, button: MouseButton) -> bool:
        return button in self._mouse_down

    def is_mouse_button_pressed(self, button: MouseButton) -> bool:
        return button in self._mouse_pressed

    def is_mouse_button_released(self, button: MouseButton) -> bool:
        return button in self._mouse_released

    def prevent_quit(self) -> None:
        self.prevent_quit_event = True

    def is_quit_requested(self) -> bool:
        return self.quit_requested

    # -- subscribers -------------------------------------------------------

    def register_input_subscriber(self) -> int:
        """Register a subscriber and return its identifier."""
        self._subscribers.append([])
        return len(self._subscribers) - 1

    def drain_input_events(self, subscriber: int) -> list[InputEvent]:
        """Return and forget the events recorded for subscriber since the last drain."""
        queue = self._subscribers[subscriber]
        events = list(queue)
        queue.clear()
        return events