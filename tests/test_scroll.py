import math

import pytest
from pydantic import ValidationError

from folio.core.scroll import (
    MAX_FRAME_SECONDS,
    ScrollEmitter,
    ScrollProgressIndicator,
    ScrollSample,
    Spring,
    SpringConfig,
    scroll_fraction,
)


def test_scroll_fraction_stays_in_unit_range_across_the_page() -> None:
    document_height, viewport_height = 3000.0, 1000.0
    max_scroll = document_height - viewport_height
    for step in range(0, 201):
        offset = max_scroll * step / 200
        raw = scroll_fraction(offset, document_height, viewport_height)
        assert 0.0 <= raw <= 1.0


def test_scroll_fraction_clamps_overscroll() -> None:
    assert scroll_fraction(-50, 3000, 1000) == 0.0
    assert scroll_fraction(2600, 3000, 1000) == 1.0


def test_scroll_fraction_is_zero_when_page_does_not_scroll() -> None:
    assert scroll_fraction(0, 1000, 1000) == 0.0
    assert scroll_fraction(40, 800, 1000) == 0.0
    assert not math.isnan(scroll_fraction(math.inf, math.inf, 1000))


def test_scroll_fraction_halfway_scenario() -> None:
    assert scroll_fraction(1000, 3000, 1000) == pytest.approx(0.5)


def test_spring_config_defaults_to_critical_damping() -> None:
    config = SpringConfig(stiffness=100.0, mass=1.0)
    assert config.resolved_damping == pytest.approx(20.0)
    assert SpringConfig(damping=30.0).resolved_damping == 30.0


def test_spring_config_rejects_non_positive_stiffness() -> None:
    with pytest.raises(ValidationError):
        SpringConfig(stiffness=0.0)


def test_spring_settles_exactly_on_target() -> None:
    spring = Spring()
    spring.set_target(0.75)
    elapsed = spring.settle(max_seconds=5.0)

    assert spring.at_rest
    assert spring.value == 0.75
    assert spring.velocity == 0.0
    assert elapsed < 2.0


def test_indicator_smooths_instead_of_jumping() -> None:
    indicator = ScrollProgressIndicator()
    indicator.on_scroll(ScrollSample(offset=1000, document_height=3000, viewport_height=1000))

    assert indicator.raw == pytest.approx(0.5)
    first_frame = indicator.tick(1 / 60)
    assert 0.0 < first_frame < 0.05

    for _ in range(23):
        indicator.tick(1 / 60)
    # roughly 0.4s in: most of the way there, not yet arrived
    assert 0.4 < indicator.displayed < 0.5


def test_indicator_settles_at_half_width() -> None:
    indicator = ScrollProgressIndicator()
    indicator.on_scroll(ScrollSample(offset=1000, document_height=3000, viewport_height=1000))
    indicator.settle()

    assert indicator.displayed == pytest.approx(0.5)
    assert indicator.width_percent == pytest.approx(50.0)


def test_indicator_without_scroll_source_stays_at_initial_value() -> None:
    indicator = ScrollProgressIndicator()
    indicator.mount(None)

    assert not indicator.mounted
    assert indicator.tick(1.0) == 0.0
    assert indicator.width_percent == 0.0


def test_indicator_subscription_is_released_on_unmount() -> None:
    source = ScrollEmitter()
    indicator = ScrollProgressIndicator()

    indicator.mount(source)
    assert source.subscriber_count == 1

    source.emit(ScrollSample(offset=500, document_height=3000, viewport_height=1000))
    assert indicator.raw == pytest.approx(0.25)

    indicator.unmount()
    assert source.subscriber_count == 0
    source.emit(ScrollSample(offset=2000, document_height=3000, viewport_height=1000))
    assert indicator.raw == pytest.approx(0.25)


def test_remounting_does_not_leave_a_dangling_subscription() -> None:
    first = ScrollEmitter()
    second = ScrollEmitter()
    indicator = ScrollProgressIndicator()

    indicator.mount(first)
    indicator.mount(second)

    assert first.subscriber_count == 0
    assert second.subscriber_count == 1


def test_spring_step_caps_long_frames() -> None:
    stalled = Spring()
    stalled.set_target(1.0)
    capped = Spring()
    capped.set_target(1.0)

    stalled.step(float("inf"))
    capped.step(MAX_FRAME_SECONDS)
    assert stalled.value == capped.value
    assert stalled.velocity == capped.velocity

    stalled.step(30.0)
    assert stalled.value < 1.0


def test_spring_step_ignores_non_positive_and_nan_frames() -> None:
    spring = Spring()
    spring.set_target(1.0)
    for dt in (0.0, -1.0, float("nan")):
        assert spring.step(dt) == 0.0
    assert spring.velocity == 0.0
