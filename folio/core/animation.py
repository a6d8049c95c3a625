from __future__ import annotations

from dataclasses import dataclass


# cubic-bezier(0.33, 1, 0.68, 1) in CSS
EASE_OUT_CSS = "cubic-bezier(0.33, 1, 0.68, 1)"


@dataclass(frozen=True)
class Reveal:
    offset_y: float = 8.0
    duration: float = 0.4
    delay: float = 0.0
    once: bool = True
    amount: float = 0.3


@dataclass(frozen=True)
class RevealStyle:
    opacity: float
    translate_y: float


def ease_out(t: float) -> float:
    t = max(0.0, min(1.0, t))
    return 1.0 - (1.0 - t) ** 3


def stagger(index: int, step: float, base: float = 0.0) -> float:
    return base + index * step


def reveal_style(visible: bool, elapsed: float, reveal: Reveal) -> RevealStyle:
    """Interpolated entrance style for an element `elapsed` seconds after it became visible."""
    if not visible:
        return RevealStyle(opacity=0.0, translate_y=reveal.offset_y)

    active = elapsed - reveal.delay
    if active <= 0:
        return RevealStyle(opacity=0.0, translate_y=reveal.offset_y)
    if reveal.duration <= 0 or active >= reveal.duration:
        return RevealStyle(opacity=1.0, translate_y=0.0)

    progress = ease_out(active / reveal.duration)
    return RevealStyle(opacity=progress, translate_y=reveal.offset_y * (1.0 - progress))


HERO_REVEAL = Reveal(offset_y=20.0, duration=0.6)
PHOTO_REVEAL = Reveal(offset_y=40.0, duration=0.8)
SKILL_REVEAL = Reveal(offset_y=8.0, duration=0.4)
PROJECT_REVEAL = Reveal(offset_y=8.0, duration=0.45)

HERO_STAGGER = 0.1
SKILL_STAGGER = 0.03
PROJECT_STAGGER = 0.05
