"""Scroll-progress indicator: raw scroll fraction, spring smoothing, host subscription."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Protocol

from pydantic import BaseModel, Field


SUBSTEP_SECONDS = 1.0 / 240.0
FRAME_SECONDS = 1.0 / 60.0
MAX_FRAME_SECONDS = 0.1


def scroll_fraction(scroll_offset: float, document_height: float, viewport_height: float) -> float:
    """Return how far through the scrollable extent the page is, in [0, 1].

    A page that does not overflow the viewport has no scrollable extent and
    reports 0.0 rather than dividing by zero.
    """
    max_offset = document_height - viewport_height
    if not max_offset > 0:
        return 0.0
    raw = scroll_offset / max_offset
    if not math.isfinite(raw):
        return 0.0
    return max(0.0, min(1.0, raw))


class SpringConfig(BaseModel):
    stiffness: float = Field(default=100.0, gt=0.0)
    damping: float | None = Field(default=None, ge=0.0, description="None means critically damped")
    mass: float = Field(default=1.0, gt=0.0)
    rest_delta: float = Field(default=0.001, ge=0.0)
    rest_speed: float = Field(default=0.01, ge=0.0)

    @property
    def resolved_damping(self) -> float:
        if self.damping is None:
            return 2.0 * math.sqrt(self.stiffness * self.mass)
        return self.damping


class Spring:
    def __init__(self, config: SpringConfig | None = None, value: float = 0.0):
        self.config = config or SpringConfig()
        self.value = value
        self.velocity = 0.0
        self.target = value

    def set_target(self, target: float) -> None:
        self.target = target

    @property
    def at_rest(self) -> bool:
        return (
            abs(self.target - self.value) <= self.config.rest_delta
            and abs(self.velocity) <= self.config.rest_speed
        )

    def step(self, dt: float) -> float:
        # Same per-frame cap as the page script.
        dt = min(dt, MAX_FRAME_SECONDS)
        if not dt > 0:
            return self.value

        stiffness = self.config.stiffness
        damping = self.config.resolved_damping
        mass = self.config.mass

        remaining = dt
        while remaining > 0:
            h = min(SUBSTEP_SECONDS, remaining)
            accel = (-stiffness * (self.value - self.target) - damping * self.velocity) / mass
            self.velocity += accel * h
            self.value += self.velocity * h
            remaining -= h

        if self.at_rest:
            self.value = self.target
            self.velocity = 0.0
        return self.value

    def settle(self, max_seconds: float = 5.0, frame: float = FRAME_SECONDS) -> float:
        """Step frame by frame until at rest; return the simulated seconds."""
        elapsed = 0.0
        while not self.at_rest and elapsed < max_seconds:
            self.step(frame)
            elapsed += frame
        return elapsed


@dataclass(frozen=True)
class ScrollSample:
    offset: float
    document_height: float
    viewport_height: float

    @property
    def fraction(self) -> float:
        return scroll_fraction(self.offset, self.document_height, self.viewport_height)


ScrollCallback = Callable[[ScrollSample], None]


class ScrollSource(Protocol):
    def subscribe(self, callback: ScrollCallback) -> Callable[[], None]: ...


class ScrollEmitter:
    """In-process scroll source that pushes samples to its subscribers."""

    def __init__(self) -> None:
        self._callbacks: list[ScrollCallback] = []

    @property
    def subscriber_count(self) -> int:
        return len(self._callbacks)

    def subscribe(self, callback: ScrollCallback) -> Callable[[], None]:
        self._callbacks.append(callback)

        def _unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return _unsubscribe

    def emit(self, sample: ScrollSample) -> None:
        for callback in list(self._callbacks):
            callback(sample)


class ScrollProgressIndicator:
    def __init__(self, config: SpringConfig | None = None):
        self.spring = Spring(config)
        self.raw = 0.0
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def mounted(self) -> bool:
        return self._unsubscribe is not None

    def mount(self, source: ScrollSource | None) -> None:
        self.unmount()
        if source is None:
            return
        self._unsubscribe = source.subscribe(self.on_scroll)

    def unmount(self) -> None:
        if self._unsubscribe is None:
            return
        release = self._unsubscribe
        self._unsubscribe = None
        release()

    def on_scroll(self, sample: ScrollSample) -> None:
        self.raw = sample.fraction
        self.spring.set_target(self.raw)

    def tick(self, dt: float) -> float:
        self.spring.step(dt)
        return self.displayed

    def settle(self, max_seconds: float = 5.0) -> float:
        self.spring.settle(max_seconds)
        return self.displayed

    @property
    def displayed(self) -> float:
        return max(0.0, min(1.0, self.spring.value))

    @property
    def width_percent(self) -> float:
        return self.displayed * 100.0
