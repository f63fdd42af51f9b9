import pytest

from chiprunner.window import (
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
    SizeChangeMode,
    SizingEdge,
    WindowRect,
    WindowState,
    fix_aspect,
)

ASPECT = WINDOW_WIDTH / WINDOW_HEIGHT


@pytest.mark.parametrize(
    "edge",
    [SizingEdge.LEFT, SizingEdge.RIGHT, SizingEdge.BOTTOM_LEFT, SizingEdge.BOTTOM_RIGHT],
)
def test_horizontal_drag_adjusts_bottom(edge):
    rect = WindowRect(10, 20, 10 + 1000, 20 + 123)
    fixed = fix_aspect(rect, edge, ASPECT)
    assert (fixed.left, fixed.top, fixed.right) == (rect.left, rect.top, rect.right)
    assert fixed.width / fixed.height == pytest.approx(ASPECT, rel=1e-2)


@pytest.mark.parametrize("edge", [SizingEdge.TOP, SizingEdge.TOP_RIGHT, SizingEdge.BOTTOM])
def test_vertical_drag_adjusts_right(edge):
    rect = WindowRect(5, 5, 50, 5 + 450)
    fixed = fix_aspect(rect, edge, ASPECT)
    assert (fixed.left, fixed.top, fixed.bottom) == (rect.left, rect.top, rect.bottom)
    assert fixed.width / fixed.height == pytest.approx(ASPECT, rel=1e-2)


def test_top_left_drag_keeps_bottom_right_corner():
    rect = WindowRect(0, 0, 1280, 100)
    fixed = fix_aspect(rect, SizingEdge.TOP_LEFT, ASPECT)
    assert (fixed.right, fixed.bottom) == (rect.right, rect.bottom)
    assert fixed.width / fixed.height == pytest.approx(ASPECT, rel=1e-2)


def test_rect_already_in_aspect_is_unchanged():
    rect = WindowRect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)
    assert fix_aspect(rect, SizingEdge.RIGHT, ASPECT) == rect
    assert fix_aspect(rect, SizingEdge.BOTTOM, ASPECT) == rect


def test_fix_aspect_rejects_non_positive_ratio():
    with pytest.raises(ValueError):
        fix_aspect(WindowRect(0, 0, 10, 10), SizingEdge.RIGHT, 0.0)


def test_initial_state():
    state = WindowState()
    assert state.rect == WindowRect(0, 0, WINDOW_WIDTH, WINDOW_HEIGHT)
    assert state.aspect_ratio == pytest.approx(ASPECT)
    assert state.size_change_mode is SizeChangeMode.NORMAL
    assert state.is_fullscreen is False


def test_fullscreen_round_trip_restores_rect():
    state = WindowState()
    original = state.rect
    monitor = WindowRect(-1920, 0, 0, 1080)
    state.set_fullscreen(True, monitor)
    assert state.is_fullscreen is True
    assert state.rect == WindowRect(0, 0, monitor.width, monitor.height)
    assert state.decorated is False and state.topmost is True
    state.set_fullscreen(False, monitor)
    assert state.rect == original
    assert state.decorated is True and state.topmost is False


def test_setting_fullscreen_twice_keeps_saved_rect():
    state = WindowState()
    original = state.rect
    monitor = WindowRect(0, 0, 1920, 1080)
    state.set_fullscreen(True, monitor)
    state.set_fullscreen(True, monitor)
    state.set_fullscreen(False, monitor)
    assert state.rect == original


def test_size_change_mode_none_disables_resizing():
    state = WindowState()
    state.set_size_change_mode(SizeChangeMode.NONE, 800, 600)
    assert state.resizable is False
    rect = WindowRect(0, 0, 300, 700)
    assert state.on_sizing(rect, SizingEdge.RIGHT) == rect


def test_fixed_aspect_uses_given_client_size():
    state = WindowState()
    state.set_size_change_mode(SizeChangeMode.FIXED_ASPECT, 800, 800)
    assert state.resizable is True
    assert state.aspect_ratio == pytest.approx(800 / 800)
    fixed = state.on_sizing(WindowRect(0, 0, 400, 50), SizingEdge.RIGHT)
    assert fixed.height == fixed.width


def test_normal_mode_passes_rect_through():
    state = WindowState()
    rect = WindowRect(1, 2, 333, 444)
    assert state.on_sizing(rect, SizingEdge.TOP_LEFT) == rect


def test_invalid_client_size_raises():
    with pytest.raises(ValueError):
        WindowState(client_width=100, client_height=0)
    state = WindowState()
    with pytest.raises(ValueError):
        state.set_size_change_mode(SizeChangeMode.FIXED_ASPECT, 100, 0)