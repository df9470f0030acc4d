import gc
import sys
from pathlib import Path

import numpy as np
import pytest

from _fake_backend import FakeBackend

from fbdraw.core.errors import WindowCreationError
from fbdraw.core.runtime_config import set_config_path
from fbdraw.interactive.surface import Surface


@pytest.fixture(autouse=True)
def _isolate_runtime_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("FBDRAW_PERF", raising=False)
    set_config_path(None)
    yield
    set_config_path(None)


def _surface(backend: FakeBackend, width: int = 4, height: int = 4, **kwargs) -> Surface:
    kwargs.setdefault("fps", 0)
    return Surface("t", width, height, backend=backend, **kwargs)


def test_put_pixel_scenario_writes_in_range_and_ignores_out_of_range():
    backend = FakeBackend()
    surface = _surface(backend)

    surface.put_pixel(0, 0, 0xFF0000)
    surface.put_pixel(3, 3, 0x00FF00)
    surface.put_pixel(10, 10, 0x0000FF)

    assert surface.get_pixel(0, 0) == 0xFF0000
    assert surface.get_pixel(3, 3) == 0x00FF00
    for y in range(4):
        for x in range(4):
            if (x, y) in {(0, 0), (3, 3)}:
                continue
            assert surface.get_pixel(x, y) == 0x000000
    surface.close()


def test_put_pixel_does_not_present():
    backend = FakeBackend()
    surface = _surface(backend)

    for x in range(4):
        surface.put_pixel(x, 1, 0xFFFFFF)

    assert backend.calls == ["create_window"]
    surface.close()


def test_construction_creates_window_with_title_and_size():
    backend = FakeBackend()
    surface = Surface("hello", 8, 5, backend=backend, fps=0)

    assert surface.is_open()
    assert surface.size() == (8, 5)
    handle = backend.handles[0]
    assert (handle.title, handle.width, handle.height) == ("hello", 8, 5)
    surface.close()


@pytest.mark.parametrize(("width", "height"), [(0, 4), (4, -1), (-3, 0)])
def test_invalid_dimensions_fail_without_creating_window(width: int, height: int):
    backend = FakeBackend()

    with pytest.raises(ValueError):
        Surface("t", width, height, backend=backend, fps=0)

    assert backend.calls == []


def test_window_creation_error_propagates():
    backend = FakeBackend(fail_create=True)

    with pytest.raises(WindowCreationError):
        Surface("t", 4, 4, backend=backend, fps=0)

    assert backend.calls == ["create_window"]


def test_default_backend_without_display_raises_window_creation_error(
    monkeypatch: pytest.MonkeyPatch,
):
    from fbdraw.interactive import pyglet_backend

    def _no_display() -> tuple[object, int]:
        raise RuntimeError("Cannot connect to display")

    monkeypatch.setattr(pyglet_backend, "_load_window_api", _no_display)

    with pytest.raises(WindowCreationError, match="Cannot connect"):
        Surface("t", 4, 4, fps=0)


def test_default_backend_import_failure_raises_window_creation_error(
    monkeypatch: pytest.MonkeyPatch,
):
    monkeypatch.setitem(sys.modules, "fbdraw.interactive.pyglet_backend", None)

    with pytest.raises(WindowCreationError, match="pyglet backend") as excinfo:
        Surface("t", 4, 4, fps=0)
    assert isinstance(excinfo.value.__cause__, ImportError)


def test_refresh_pumps_events_before_presenting():
    backend = FakeBackend()
    surface = _surface(backend)
    surface.put_pixel(1, 2, 0x123456)

    surface.refresh()

    assert backend.calls == ["create_window", "pump_events", "present"]
    frame = backend.frames[0]
    assert frame[2 * 4 + 1] == 0x123456
    surface.close()


def test_refresh_is_idempotent_without_writes():
    backend = FakeBackend()
    surface = _surface(backend)
    surface.put_pixel(2, 1, 0xABCDEF)

    for _ in range(5):
        surface.refresh()
        assert surface.is_open()

    assert len(backend.frames) == 5
    for frame in backend.frames[1:]:
        np.testing.assert_array_equal(frame, backend.frames[0])
    surface.close()


def test_close_event_on_first_pump_suppresses_present():
    backend = FakeBackend(close_on_pump=1)
    surface = _surface(backend)

    surface.refresh()

    assert not surface.is_open()
    assert backend.present_count == 0
    assert backend.calls == ["create_window", "pump_events", "destroy_window"]


def test_closed_state_is_terminal():
    backend = FakeBackend(close_on_pump=2)
    surface = _surface(backend)

    surface.refresh()
    assert surface.is_open()
    surface.refresh()
    assert not surface.is_open()

    for _ in range(3):
        surface.refresh()
        assert not surface.is_open()
    assert backend.pump_count == 2
    assert backend.present_count == 1


def test_presentation_error_closes_surface_without_raising(caplog: pytest.LogCaptureFixture):
    backend = FakeBackend(fail_present_on=2)
    surface = _surface(backend)

    surface.refresh()
    assert surface.is_open()

    with caplog.at_level("WARNING", logger="fbdraw.interactive.surface"):
        surface.refresh()

    assert not surface.is_open()
    assert "Failed to present frame" in caplog.text
    surface.refresh()
    assert backend.present_count == 2


def test_pump_failure_closes_surface():
    backend = FakeBackend(fail_pump_on=1)
    surface = _surface(backend)

    surface.refresh()

    assert not surface.is_open()
    assert backend.present_count == 0


def test_refresh_reports_section_timings_when_perf_is_enabled(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
):
    monkeypatch.setenv("FBDRAW_PERF", "1")
    monkeypatch.setenv("FBDRAW_PERF_EVERY", "1")
    surface = _surface(FakeBackend())

    with caplog.at_level("INFO", logger="fbdraw.interactive.runtime.perf"):
        surface.refresh()

    assert len(caplog.records) == 1
    assert "pump=" in caplog.text and "present=" in caplog.text and "wait=" in caplog.text
    surface.close()


def test_put_pixel_still_mutates_buffer_after_close():
    backend = FakeBackend(close_on_pump=1)
    surface = _surface(backend)
    surface.refresh()

    surface.put_pixel(1, 1, 0xFF00FF)

    assert surface.get_pixel(1, 1) == 0xFF00FF
    assert backend.present_count == 0


def test_context_manager_releases_window_on_exception():
    backend = FakeBackend()

    with pytest.raises(RuntimeError, match="boom"):
        with _surface(backend) as surface:
            surface.put_pixel(0, 0, 0xFFFFFF)
            raise RuntimeError("boom")

    assert backend.handles[0].destroy_count == 1
    assert not surface.is_open()


def test_window_is_released_exactly_once():
    backend = FakeBackend(close_on_pump=1)
    surface = _surface(backend)

    surface.refresh()
    surface.close()
    surface.close()

    assert backend.handles[0].destroy_count == 1


def test_window_is_released_when_surface_is_garbage_collected():
    backend = FakeBackend()
    surface = _surface(backend)
    handle = backend.handles[0]

    del surface
    gc.collect()

    assert handle.destroy_count == 1


def test_clear_uses_background_color():
    backend = FakeBackend()
    surface = _surface(backend, background="#102030")
    assert surface.get_pixel(0, 0) == 0x102030

    surface.put_pixel(0, 0, 0xFFFFFF)
    surface.clear()
    assert surface.get_pixel(0, 0) == 0x102030

    surface.clear(0x0000FF)
    assert set(surface.buffer.raw_view().tolist()) == {0x0000FF}
    surface.close()


def test_title_and_background_default_to_runtime_config():
    backend = FakeBackend()
    surface = Surface(None, 2, 2, backend=backend, fps=0)

    assert surface.title == "fbdraw - ESC to exit"
    assert surface.background == 0x000000
    surface.close()


def test_begin_draw_runs_until_window_closes():
    backend = FakeBackend(close_on_pump=4)
    surface = _surface(backend)
    calls: list[int] = []

    def draw_frame(s: Surface) -> None:
        calls.append(len(calls))
        s.put_pixel(len(calls) - 1, 0, 0xFF0000)

    surface.begin_draw(draw_frame)

    assert calls == [0, 1, 2, 3]
    assert backend.present_count == 3
    assert not surface.is_open()
    assert backend.frames[-1][:3].tolist() == [0xFF0000, 0xFF0000, 0xFF0000]
