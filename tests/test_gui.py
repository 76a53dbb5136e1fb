import pygame
import pytest

from flock3d.boid import MAX_BOIDS
from flock3d.gui import (
    GRAY,
    PANEL_COLOR,
    PANEL_WIDTH,
    ButtonAction,
    ControlPanel,
    PanelAction,
    Slider,
    panel_rect,
)
from flock3d.simulation import Simulation

SCREEN = (1920, 1080)


@pytest.fixture
def sim():
    return Simulation(seed=7)


@pytest.fixture
def panel():
    return ControlPanel(panel_rect(*SCREEN))


def _down(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def _up(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1)


def _move(pos):
    return pygame.event.Event(pygame.MOUSEMOTION, pos=pos)


def _click(panel, sim, pos):
    panel.handle_event(_down(pos), sim)
    return panel.handle_event(_up(pos), sim)


def _slider(panel, attribute):
    return next(s for s in panel.sliders if s.attribute == attribute)


def _checkbox(panel, attribute):
    return next(c for c in panel.checkboxes if c.attribute == attribute)


def _button(panel, action):
    return next(b for b in panel.buttons if b.action is action)


def test_panel_rect_docks_to_right_edge():
    rect = panel_rect(*SCREEN)
    assert rect.right == SCREEN[0]
    assert rect.width == PANEL_WIDTH
    assert rect.height == SCREEN[1]
    assert rect.y == 0


def test_slider_value_at_ends_and_clamps():
    slider = Slider("Speed", "max_speed", 0.5, 10.0, "{:.2f}", pygame.Rect(100, 0, 200, 30))
    assert slider.value_at(100) == pytest.approx(0.5)
    assert slider.value_at(300) == pytest.approx(10.0)
    assert slider.value_at(-50) == pytest.approx(0.5)
    assert slider.value_at(5000) == pytest.approx(10.0)


def test_slider_handle_round_trip():
    slider = Slider("Radius", "perception_radius", 5.0, 200.0, "{:.1f}", pygame.Rect(40, 0, 600, 30))
    for value in (5.0, 50.0, 123.4, 200.0):
        assert slider.value_at(slider.handle_x(value)) == pytest.approx(value)


def test_slider_handle_clamps_out_of_range_values():
    slider = Slider("W", "cohesion_weight", 0.0, 5.0, "{:.2f}", pygame.Rect(10, 0, 100, 30))
    assert slider.handle_x(-3.0) == slider.rect.x
    assert slider.handle_x(99.0) == slider.rect.right


def test_layout_controls_stay_inside_panel_and_descend(panel):
    rects = (
        [s.rect for s in panel.sliders]
        + [c.box for c in panel.checkboxes[:4]]
        + [b.rect for b in panel.buttons]
    )
    for rect in rects:
        assert panel.rect.contains(rect)
    tops = [s.rect.y for s in panel.sliders]
    assert tops == sorted(tops)
    assert len(panel.sliders) == 9
    assert [b.action for b in panel.buttons] == [
        ButtonAction.RESET,
        ButtonAction.PAUSE,
        ButtonAction.EXIT,
    ]


def test_drag_speed_slider_to_far_right_sets_maximum(panel, sim):
    slider = _slider(panel, "max_speed")
    assert panel.handle_event(_down(slider.rect.center), sim) is PanelAction.HANDLED
    panel.handle_event(_move((slider.rect.right + 50, slider.rect.centery)), sim)
    panel.handle_event(_up((slider.rect.right + 50, slider.rect.centery)), sim)
    assert sim.max_speed == pytest.approx(slider.high)


def test_drag_boid_count_slider_to_left_keeps_one_boid(panel, sim):
    slider = _slider(panel, "num_boids")
    panel.handle_event(_down(slider.rect.center), sim)
    panel.handle_event(_move((slider.rect.x - 100, slider.rect.centery)), sim)
    panel.handle_event(_up((slider.rect.x - 100, slider.rect.centery)), sim)
    assert sim.num_boids == 1
    assert len(sim.active_boids()) == 1


def test_boid_count_slider_never_exceeds_limit(panel, sim):
    slider = _slider(panel, "num_boids")
    panel.handle_event(_down(slider.rect.center), sim)
    panel.handle_event(_move((slider.rect.right + 10, slider.rect.centery)), sim)
    assert sim.num_boids == MAX_BOIDS


def test_perception_slider_updates_squared_radius(panel, sim):
    slider = _slider(panel, "perception_radius")
    _click(panel, sim, (slider.rect.x + slider.rect.width // 4, slider.rect.centery))
    assert sim.perception_radius_sq == pytest.approx(sim.perception_radius**2)
    assert sim.grid_cell_size == pytest.approx(sim.perception_radius)


def test_motion_without_drag_is_ignored(panel, sim):
    before = sim.max_speed
    slider = _slider(panel, "max_speed")
    assert panel.handle_event(_move(slider.rect.center), sim) is PanelAction.IGNORED
    assert sim.max_speed == before


def test_checkbox_click_toggles_rule(panel, sim):
    checkbox = _checkbox(panel, "separation_active")
    assert sim.separation_active is True
    assert _click(panel, sim, checkbox.box.center) is PanelAction.HANDLED
    assert sim.separation_active is False
    _click(panel, sim, checkbox.box.center)
    assert sim.separation_active is True


def test_checkbox_release_outside_does_not_toggle(panel, sim):
    checkbox = _checkbox(panel, "auto_rotate_camera")
    panel.handle_event(_down(checkbox.box.center), sim)
    panel.handle_event(_up((0, 0)), sim)
    assert sim.auto_rotate_camera is True


def test_pause_button_toggles_and_relabels(panel, sim):
    button = _button(panel, ButtonAction.PAUSE)
    assert button.label(sim) == "Pause Simulation (P)"
    _click(panel, sim, button.rect.center)
    assert sim.paused is True
    assert button.label(sim) == "Resume Simulation (P)"


def test_reset_button_respawns_flock(panel, sim):
    old_first = sim.boids[0]
    _click(panel, sim, _button(panel, ButtonAction.RESET).rect.center)
    assert sim.boids[0] is not old_first
    assert len(sim.active_boids()) == 100


def test_exit_button_requests_exit(panel, sim):
    action = _click(panel, sim, _button(panel, ButtonAction.EXIT).rect.center)
    assert action is PanelAction.EXIT


def test_click_outside_panel_is_ignored(panel, sim):
    assert panel.handle_event(_down((5, 5)), sim) is PanelAction.IGNORED


def test_draw_paints_background_and_border(panel, sim):
    surface = pygame.Surface(SCREEN)
    panel.draw(surface, sim)
    assert tuple(surface.get_at((panel.rect.x + 2, panel.rect.y + 2)))[:3] == PANEL_COLOR
    assert tuple(surface.get_at((panel.rect.x, 5)))[:3] == GRAY
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)