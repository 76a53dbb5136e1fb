"""Side control panel: sliders, rule toggles and buttons that tune a running flock."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import pygame

from .boid import MAX_BOIDS
from .simulation import Simulation
from .vector import EPSILON

PANEL_WIDTH = 700
PADDING = 25
LABEL_TEXT_SIZE = 18
HEADER_TEXT_SIZE = LABEL_TEXT_SIZE + 2
VALUE_TEXT_SIZE = LABEL_TEXT_SIZE - 2
CONTROLS_TEXT_SIZE = 20
SLIDER_HEIGHT = 30
CHECKBOX_SIZE = 22
BUTTON_HEIGHT = 35
VERTICAL_SPACING = 18
LABEL_CONTROL_SPACING = 6
VALUE_TEXT_OFFSET = 5
MIN_SLIDER_WIDTH = 100
MIN_VIEW_SIZE = 10

WHITE = (255, 255, 255)
RAYWHITE = (245, 245, 245)
LIGHTGRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARKGRAY = (80, 80, 80)
PANEL_COLOR = (60, 63, 65)
BASE_NORMAL = (70, 73, 75)
BASE_FOCUSED = (80, 83, 85)
BASE_PRESSED = (50, 53, 55)
SLIDER_BASE = (50, 53, 55)

Point = tuple[int, int]


def panel_rect(screen_width: int, screen_height: int) -> pygame.Rect:
    """Rectangle of the control panel docked to the right edge of the window."""
    return pygame.Rect(screen_width - PANEL_WIDTH, 0, PANEL_WIDTH, screen_height)


class PanelAction(enum.Enum):
    """What the application should do after the panel has seen an event."""

    IGNORED = "ignored"
    HANDLED = "handled"
    EXIT = "exit"


class ButtonAction(enum.Enum):
    RESET = "reset"
    PAUSE = "pause"
    EXIT = "exit"


@dataclass
class Slider:
    """A horizontal slider bound to one numeric attribute of the simulation."""

    label: str
    attribute: str
    low: float
    high: float
    fmt: str
    rect: pygame.Rect
    label_y: int = 0
    integer: bool = False
    affects_radii: bool = False

    def value_at(self, x: float) -> float:
        """Value the slider takes when its handle sits at horizontal position ``x``."""
        width = max(self.rect.width, 1)
        fraction = min(max((x - self.rect.x) / width, 0.0), 1.0)
        return self.low + fraction * (self.high - self.low)

    def handle_x(self, value: float) -> float:
        """Horizontal position of the handle for ``value``, clamped to the range."""
        span = self.high - self.low
        if span <= 0:
            return float(self.rect.x)
        fraction = (min(max(value, self.low), self.high) - self.low) / span
        return self.rect.x + fraction * self.rect.width

    def current(self, sim: Simulation) -> float:
        return float(getattr(sim, self.attribute))

    def value_text(self, sim: Simulation) -> str:
        value = getattr(sim, self.attribute)
        return self.fmt.format(int(value) if self.integer else value)

    def apply(self, sim: Simulation, x: float) -> None:
        """Set the bound attribute from a handle position, with its side effects."""
        value = self.value_at(x)
        if self.integer:
            count = int(value)
            if count != sim.num_boids:
                sim.set_boid_count(count)
            return
        old = getattr(sim, self.attribute)
        setattr(sim, self.attribute, value)
        if self.affects_radii and abs(value - old) > EPSILON:
            sim.update_squared_radii()


@dataclass
class Checkbox:
    """A toggle bound to one boolean attribute of the simulation."""

    label: str
    attribute: str
    box: pygame.Rect
    hit: pygame.Rect

    def toggle(self, sim: Simulation) -> None:
        setattr(sim, self.attribute, not getattr(sim, self.attribute))


@dataclass
class Button:
    """A push button that triggers an action on release."""

    action: ButtonAction
    rect: pygame.Rect

    def label(self, sim: Simulation) -> str:
        if self.action is ButtonAction.RESET:
            return "Reset Simulation"
        if self.action is ButtonAction.PAUSE:
            return "Resume Simulation (P)" if sim.paused else "Pause Simulation (P)"
        return "Exit Application"


@dataclass
class Header:
    text: str
    y: int


_SLIDER_SPECS = (
    ("Number of Boids", "num_boids", 1.0, float(MAX_BOIDS), "{:d}", True, False),
    ("Maximum Speed", "max_speed", 0.5, 10.0, "{:.2f}", False, False),
    ("Perception Radius", "perception_radius", 5.0, 200.0, "{:.1f}", False, True),
    ("Separation Radius", "separation_radius", 5.0, 100.0, "{:.1f}", False, True),
    ("Edge Margin (3D)", "edge_margin", 10.0, 150.0, "{:.1f}", False, False),
    ("Separation Weight", "separation_weight", 0.0, 5.0, "{:.2f}", False, False),
    ("Alignment Weight", "alignment_weight", 0.0, 5.0, "{:.2f}", False, False),
    ("Cohesion Weight", "cohesion_weight", 0.0, 5.0, "{:.2f}", False, False),
    ("Edge Avoid Weight", "edge_avoid_weight", 0.5, 10.0, "{:.2f}", False, False),
)

_RULE_TOGGLES = (
    (" Separation Active", "separation_active"),
    (" Alignment Active", "alignment_active"),
    (" Cohesion Active", "cohesion_active"),
    (" Edge Avoidance Active", "edge_avoid_active"),
)


@dataclass
class ControlPanel:
    """Lays out the controls inside ``rect``, reacts to mouse events and draws itself."""

    rect: pygame.Rect
    view: pygame.Rect = field(init=False)
    headers: list[Header] = field(init=False, default_factory=list)
    sliders: list[Slider] = field(init=False, default_factory=list)
    checkboxes: list[Checkbox] = field(init=False, default_factory=list)
    buttons: list[Button] = field(init=False, default_factory=list)

    def __init__(self, rect: pygame.Rect) -> None:
        self.rect = pygame.Rect(rect)
        self.headers = []
        self.sliders = []
        self.checkboxes = []
        self.buttons = []
        self._mouse: Point = (-1, -1)
        self._dragging: Slider | None = None
        self._pressed: Checkbox | Button | None = None
        self._fonts: dict[int, pygame.font.Font] = {}
        self._layout()

    def _layout(self) -> None:
        content_y = self.rect.y + PADDING
        content_h = self.rect.height - 2 * PADDING
        self.view = pygame.Rect(
            self.rect.x + PADDING,
            content_y,
            max(self.rect.width - 2 * PADDING, MIN_VIEW_SIZE),
            max(content_h - PADDING, MIN_VIEW_SIZE),
        )
        x, width = self.view.x, self.view.width
        y = self.view.y

        self.headers.append(Header("--- Main Parameters ---", y))
        y += HEADER_TEXT_SIZE + VERTICAL_SPACING
        for label, attribute, low, high, fmt, integer, radii in _SLIDER_SPECS:
            label_y = y
            y += LABEL_TEXT_SIZE + LABEL_CONTROL_SPACING
            self.sliders.append(
                Slider(
                    label,
                    attribute,
                    low,
                    high,
                    fmt,
                    pygame.Rect(x, y, width, SLIDER_HEIGHT),
                    label_y=label_y,
                    integer=integer,
                    affects_radii=radii,
                )
            )
            y += SLIDER_HEIGHT + VERTICAL_SPACING

        self.headers.append(Header("--- Rule Toggles ---", y))
        y += HEADER_TEXT_SIZE + VERTICAL_SPACING
        for position, (label, attribute) in enumerate(_RULE_TOGGLES):
            self.checkboxes.append(self._checkbox(label, attribute, x, y, width))
            last = position == len(_RULE_TOGGLES) - 1
            y += CHECKBOX_SIZE + (VERTICAL_SPACING if last else LABEL_CONTROL_SPACING)

        self.headers.append(Header("--- Simulation Options ---", y))
        y += HEADER_TEXT_SIZE + VERTICAL_SPACING
        for action in (ButtonAction.RESET, ButtonAction.PAUSE):
            self.buttons.append(Button(action, pygame.Rect(x, y, width, BUTTON_HEIGHT)))
            y += BUTTON_HEIGHT + LABEL_CONTROL_SPACING
        self.checkboxes.append(
            self._checkbox(" Auto-Rotate Camera", "auto_rotate_camera", x, y, width)
        )
        y += CHECKBOX_SIZE + VERTICAL_SPACING

        self.headers.append(Header("--- Application ---", y))
        y += HEADER_TEXT_SIZE + LABEL_CONTROL_SPACING
        self.buttons.append(Button(ButtonAction.EXIT, pygame.Rect(x, y, width, BUTTON_HEIGHT)))

    @staticmethod
    def _checkbox(label: str, attribute: str, x: int, y: int, width: int) -> Checkbox:
        box = pygame.Rect(x, y, CHECKBOX_SIZE, CHECKBOX_SIZE)
        return Checkbox(label, attribute, box, pygame.Rect(x, y, width, CHECKBOX_SIZE))

    def _widget_at(self, pos: Point) -> Slider | Checkbox | Button | None:
        for slider in self.sliders:
            if slider.rect.collidepoint(pos):
                return slider
        for checkbox in self.checkboxes:
            if checkbox.hit.collidepoint(pos):
                return checkbox
        for button in self.buttons:
            if button.rect.collidepoint(pos):
                return button
        return None

    def handle_event(self, event: pygame.event.Event, sim: Simulation) -> PanelAction:
        """Apply a mouse event to the simulation; report whether it was used."""
        if event.type == pygame.MOUSEMOTION:
            self._mouse = tuple(event.pos)
            if self._dragging is not None:
                self._dragging.apply(sim, event.pos[0])
                return PanelAction.HANDLED
            return PanelAction.IGNORED

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self._mouse = tuple(event.pos)
            widget = self._widget_at(event.pos)
            if widget is None:
                return PanelAction.IGNORED
            if isinstance(widget, Slider):
                self._dragging = widget
                widget.apply(sim, event.pos[0])
            else:
                self._pressed = widget
            return PanelAction.HANDLED

        if event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self._mouse = tuple(event.pos)
            was_dragging = self._dragging is not None
            self._dragging = None
            pressed, self._pressed = self._pressed, None
            if pressed is None or self._widget_at(event.pos) is not pressed:
                return PanelAction.HANDLED if was_dragging else PanelAction.IGNORED
            if isinstance(pressed, Checkbox):
                pressed.toggle(sim)
                return PanelAction.HANDLED
            if pressed.action is ButtonAction.RESET:
                sim.reset()
            elif pressed.action is ButtonAction.PAUSE:
                sim.toggle_pause()
            else:
                return PanelAction.EXIT
            return PanelAction.HANDLED

        return PanelAction.IGNORED

    def _font(self, size: int) -> pygame.font.Font:
        if not pygame.font.get_init():
            pygame.font.init()
        font = self._fonts.get(size)
        if font is None:
            font = self._fonts[size] = pygame.font.Font(None, size)
        return font

    def _centered_text(
        self, surface: pygame.Surface, text: str, y: float, size: int, color: tuple[int, int, int]
    ) -> None:
        image = self._font(size).render(text, True, color)
        x = self.view.x + (self.view.width - image.get_width()) / 2
        surface.blit(image, (int(x), int(y)))

    def draw(self, surface: pygame.Surface, sim: Simulation) -> None:
        """Draw the panel background and every control reflecting ``sim``."""
        pygame.draw.rect(surface, PANEL_COLOR, self.rect)
        if self.rect.x > 0:
            pygame.draw.line(
                surface, GRAY, (self.rect.x, 0), (self.rect.x, surface.get_height())
            )

        for header in self.headers:
            self._centered_text(surface, header.text, header.y, HEADER_TEXT_SIZE, WHITE)

        value_font = self._font(VALUE_TEXT_SIZE)
        for slider in self.sliders:
            self._centered_text(surface, slider.label, slider.label_y, LABEL_TEXT_SIZE, LIGHTGRAY)
            pygame.draw.rect(surface, SLIDER_BASE, slider.rect)
            fill_width = int(slider.handle_x(slider.current(sim)) - slider.rect.x)
            if fill_width > 0:
                fill = pygame.Rect(slider.rect.x, slider.rect.y, fill_width, slider.rect.height)
                pygame.draw.rect(surface, RAYWHITE, fill)
            pygame.draw.rect(surface, GRAY, slider.rect, 1)
            image = value_font.render(slider.value_text(sim), True, LIGHTGRAY)
            surface.blit(
                image,
                (
                    slider.rect.right - image.get_width() - VALUE_TEXT_OFFSET,
                    slider.rect.centery - image.get_height() // 2,
                ),
            )

        label_font = self._font(CONTROLS_TEXT_SIZE)
        for checkbox in self.checkboxes:
            hovered = checkbox.hit.collidepoint(self._mouse)
            pygame.draw.rect(surface, LIGHTGRAY if hovered else GRAY, checkbox.box, 1)
            if getattr(sim, checkbox.attribute):
                pygame.draw.rect(surface, LIGHTGRAY, checkbox.box.inflate(-8, -8))
            image = label_font.render(checkbox.label, True, WHITE if hovered else LIGHTGRAY)
            surface.blit(
                image,
                (checkbox.box.right, checkbox.box.centery - image.get_height() // 2),
            )

        for button in self.buttons:
            hovered = button.rect.collidepoint(self._mouse)
            pressed = hovered and self._pressed is button
            base = BASE_PRESSED if pressed else BASE_FOCUSED if hovered else BASE_NORMAL
            pygame.draw.rect(surface, base, button.rect)
            pygame.draw.rect(surface, LIGHTGRAY if hovered else GRAY, button.rect, 1)
            image = label_font.render(button.label(sim), True, WHITE if hovered else LIGHTGRAY)
            surface.blit(image, image.get_rect(center=button.rect.center))