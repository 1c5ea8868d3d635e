import pytest

from quadkit.telemetry import Frame, Profiler, Zone


def make_clock(start=0.0, step=0.25):
    state = {"now": start}

    def clock():
        value = state["now"]
        state["now"] += step
        return value

    return clock


def test_zones_ignored_while_disabled():
    profiler = Profiler(clock=make_clock())
    profiler.begin_zone("a")
    profiler.end_zone()
    profiler.reset(0.016)
    assert profiler.frame().zones == []


def test_enable_applies_after_reset():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    assert profiler.enabled is False
    profiler.begin_zone("ignored")
    profiler.end_zone()
    profiler.reset(0.016)
    assert profiler.enabled is True
    assert profiler.frame().zones == []


def test_nested_zones_recorded():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    profiler.begin_zone("outer")
    profiler.begin_zone("inner")
    profiler.end_zone()
    profiler.end_zone()
    profiler.reset(0.02)
    frame = profiler.frame()
    assert [z.name for z in frame.zones] == ["outer"]
    outer = frame.zones[0]
    assert [z.name for z in outer.children] == ["inner"]
    inner = outer.children[0]
    assert inner.start_time >= outer.start_time
    assert 0 < inner.duration <= outer.duration
    assert frame.full_frame_time == 0.02


def test_zone_context_manager():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    with profiler.zone("draw"):
        with profiler.zone("sprites"):
            pass
    profiler.reset(0.0)
    zones = profiler.frame().zones
    assert zones[0].name == "draw"
    assert zones[0].children[0].name == "sprites"


def test_reset_with_unpaired_zone_raises():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    profiler.begin_zone("open")
    with pytest.raises(RuntimeError):
        profiler.reset(0.0)


def test_end_without_begin_raises():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    with pytest.raises(RuntimeError):
        profiler.end_zone()


def test_disable_stops_recording():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    profiler.disable()
    profiler.reset(0.0)
    profiler.begin_zone("a")
    profiler.end_zone()
    profiler.reset(0.0)
    assert profiler.frame().zones == []


def test_try_clone_none_while_zone_open():
    frame = Frame()
    zone = Zone("open", 0.0)
    frame.zones.append(zone)
    frame._active.append(zone)
    assert frame.try_clone() is None
    frame._active.clear()
    clone = frame.try_clone()
    assert clone == frame
    assert clone.zones[0] is not zone


def test_frame_returns_copy():
    profiler = Profiler(clock=make_clock())
    profiler.enable()
    profiler.reset(0.0)
    with profiler.zone("a"):
        pass
    profiler.reset(0.0)
    first = profiler.frame()
    first.zones.clear()
    assert len(profiler.frame().zones) == 1


def test_log_time_format():
    profiler = Profiler(clock=make_clock(start=1.0, step=0.5))
    with profiler.log_time("Atlas build time"):
        pass
    assert profiler.strings() == ["Time query: Atlas build time, 0.5s"]


def test_strings_is_a_copy():
    profiler = Profiler()
    profiler.log_string("hello")
    profiler.strings().append("other")
    assert profiler.strings() == ["hello"]