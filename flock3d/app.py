"""Window, event loop and frame drawing for the interactive flock."""

from __future__ import annotations

import argparse

import pygame

from .gui import PANEL_WIDTH, ControlPanel, PanelAction, panel_rect
from .render import Camera, draw_scene
from .simulation import Simulation

TITLE = "3D Boids Simulation"
TARGET_FPS = 60
ORBIT_SPEED = 0.5
WINDOW_COLOR = (60, 63, 65)
FPS_COLOR = (0, 158, 47)
PAUSE_COLOR = (253, 249, 0)
FPS_TEXT_SIZE = 20
PAUSE_TEXT_SIZE = 40


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {text}")
    return value


def _non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {text}")
    return value


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="flock3d", description="Interactive 3D boids flock.")
    parser.add_argument("--seed", type=int, default=None, help="random seed for the flock")
    parser.add_argument("--windowed", action="store_true", help="open a window, not full screen")
    parser.add_argument("--width", type=_positive_int, default=None, help="window width")
    parser.add_argument("--height", type=_positive_int, default=None, help="window height")
    parser.add_argument(
        "--frames", type=_non_negative_int, default=None, help="stop after this many frames"
    )
    return parser.parse_args(argv)


def _draw_frame(
    screen: pygame.Surface,
    camera: Camera,
    sim: Simulation,
    panel: ControlPanel,
    fps_font: pygame.font.Font,
    pause_font: pygame.font.Font,
    fps: float,
) -> None:
    width, height = screen.get_size()
    screen.fill(WINDOW_COLOR)
    view_width = min(max(width - PANEL_WIDTH, 1), max(width, 1))
    view = screen.subsurface(pygame.Rect(0, 0, view_width, max(height, 1)))
    draw_scene(view, camera, sim)
    panel.draw(screen, sim)
    screen.blit(fps_font.render(f"{int(fps)} FPS", True, FPS_COLOR), (10, 10))
    if sim.paused:
        image = pause_font.render("PAUSED", True, PAUSE_COLOR)
        screen.blit(
            image,
            (view_width // 2 - image.get_width() // 2, height // 2 - PAUSE_TEXT_SIZE // 2),
        )


def _run(screen: pygame.Surface, sim: Simulation, frames: int | None) -> int:
    camera = Camera.for_cube(sim.cube)
    clock = pygame.time.Clock()
    size = screen.get_size()
    panel = ControlPanel(panel_rect(*size))
    fps_font = pygame.font.Font(None, FPS_TEXT_SIZE)
    pause_font = pygame.font.Font(None, PAUSE_TEXT_SIZE)

    frame = 0
    while frames is None or frame < frames:
        dt = clock.tick(TARGET_FPS) / 1000.0
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return 0
                if event.key == pygame.K_p:
                    sim.toggle_pause()
                continue
            if panel.handle_event(event, sim) is PanelAction.EXIT:
                return 0

        screen = pygame.display.get_surface()
        if screen.get_size() != size:
            size = screen.get_size()
            panel = ControlPanel(panel_rect(*size))

        if sim.auto_rotate_camera:
            camera.orbit(ORBIT_SPEED * dt)

        sim.update()
        _draw_frame(screen, camera, sim, panel, fps_font, pause_font, clock.get_fps())
        pygame.display.flip()
        frame += 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the flock until it is closed; return the exit status."""
    args = _parse_args(argv)
    sim = Simulation(args.seed)
    width = args.width or sim.screen_width
    height = args.height or sim.screen_height
    sim.screen_width, sim.screen_height = width, height

    pygame.init()
    try:
        flags = pygame.RESIZABLE if args.windowed else pygame.FULLSCREEN
        screen = pygame.display.set_mode((width, height), flags)
        pygame.display.set_caption(TITLE)
        return _run(screen, sim, args.frames)
    finally:
        pygame.quit()


if __name__ == "__main__":
    raise SystemExit(main())