"""Frame profiler: nested timing zones and logged strings."""

from __future__ import annotations

import copy
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional


@dataclass
class Zone:
    """A named timed section of a frame, possibly holding nested zones."""

    name: str
    start_time: float
    duration: float = 0.0
    children: list[Zone] = field(default_factory=list)


@dataclass
class Frame:
    """All zones recorded during one frame."""

    full_frame_time: float = 0.0
    zones: list[Zone] = field(default_factory=list)
    _active: list[Zone] = field(default_factory=list, repr=False, compare=False)

    def try_clone(self) -> Optional[Frame]:
        """A deep copy of the frame, or None while a zone is still open."""
        if self._active:
            return None
        return Frame(self.full_frame_time, copy.deepcopy(self.zones))


class Profiler:
    """Collects timing zones per frame; enabling takes effect on the next reset."""

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        self._clock = clock or time.perf_counter
        self._frame = Frame()
        self._prev_frame = Frame()
        self._enabled = False
        self._enable_request: Optional[bool] = None
        self._strings: list[str] = []

    @property
    def enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        """Request zone recording, starting with the next frame."""
        self._enable_request = True

    def disable(self) -> None:
        """Request that zone recording stops with the next frame."""
        self._enable_request = False

    def begin_zone(self, name: str) -> None:
        """Open a zone nested in the currently open one, if recording."""
        if not self._enabled:
            return
        zone = Zone(name, self._clock())
        active = self._frame._active
        siblings = active[-1].children if active else self._frame.zones
        siblings.append(zone)
        active.append(zone)

    def end_zone(self) -> None:
        """Close the innermost open zone, if recording."""
        if not self._enabled:
            return
        if not self._frame._active:
            raise RuntimeError("end_zone called without begin_zone")
        zone = self._frame._active.pop()
        zone.duration = self._clock() - zone.start_time

    @contextmanager
    def zone(self, name: str) -> Iterator[None]:
        """Record the enclosed block as a zone."""
        self.begin_zone(name)
        try:
            yield
        finally:
            self.end_zone()

    def reset(self, frame_time: float) -> None:
        """Finish the current frame and start a new one."""
        if self._frame._active:
            raise RuntimeError("New frame started with unpaired begin/end zones.")
        self._frame.full_frame_time = frame_time
        self._prev_frame = self._frame
        self._frame = Frame()
        if self._enable_request is not None:
            self._enabled = self._enable_request
            self._enable_request = None

    def frame(self) -> Frame:
        """A copy of the last finished frame."""
        return copy.deepcopy(self._prev_frame)

    def log_string(self, string: str) -> None:
        self._strings.append(string)

    def strings(self) -> list[str]:
        """A copy of all logged strings."""
        return list(self._strings)

    @contextmanager
    def log_time(self, name: str) -> Iterator[None]:
        """Log how long the enclosed block took, as a string."""
        start = self._clock()
        try:
            yield
        finally:
            elapsed = self._clock() - start
            self.log_string(f"Time query: {name}, {elapsed:.1f}s")