"""Interactive editor: place circles and watch them fall and bounce."""

from __future__ import annotations

import argparse
import enum
import os
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from circlesim.components import Position
from circlesim.entity import Entity
from circlesim.physics import step
from circlesim.scene import find_circle_at_position, spawn_circle
from circlesim.world import World2D

TITLE = "Engine 2D Editor"
FRAME_DT = 1.0 / 60.0
PANEL_WIDTH = 260

_BACKGROUND = (25, 25, 35)
_BORDER = (60, 60, 80)
_GROUND = (180, 180, 100)
_CIRCLE = (100, 200, 255)
_PANEL = (40, 40, 48)
_TEXT = (220, 220, 220)
_ACCENT = (70, 110, 170)
_TRACK = (80, 80, 95)


class Tool(enum.Enum):
    """Editing tools available in the side panel."""

    PLACE_CIRCLE = "Place Circle"


@dataclass
class EditorState:
    """The editor's world and user-adjustable settings."""

    world: World2D = field(default_factory=World2D)
    selected_tool: Tool = Tool.PLACE_CIRCLE
    next_radius: float = 20.0
    ground_y: float = 500.0
    gravity: float = 500.0
    bouncing_factor: float = 0.45

    def handle_left_click(self, x: float, y: float) -> Optional[Entity]:
        """Apply the selected tool at canvas coordinates (x, y)."""
        if self.selected_tool is Tool.PLACE_CIRCLE:
            return spawn_circle(self.world, x, y, self.next_radius)
        return None

    def handle_right_click(self, x: float, y: float) -> bool:
        """Delete the circle under (x, y); return whether one was deleted."""
        entity = find_circle_at_position(self.world, Position(x, y))
        if entity is None:
            return False
        return self.world.despawn(entity)

    def update(self, width: float, height: float) -> None:
        """Advance the simulation by one frame on a canvas of the given size."""
        step(
            self.world,
            FRAME_DT,
            self.gravity,
            width,
            height,
            self.ground_y,
            self.bouncing_factor,
        )


@dataclass(frozen=True)
class _SliderSpec:
    label: str
    attribute: str
    low: float
    high: float
    top: int


_HEADINGS: Tuple[Tuple[str, int], ...] = (
    ("Tools", 16),
    ("Spawn Settings", 124),
    ("Scene", 214),
)

_SLIDERS: Tuple[_SliderSpec, ...] = (
    _SliderSpec("Radius", "next_radius", 5.0, 80.0, 152),
    _SliderSpec("Ground Y", "ground_y", 100.0, 700.0, 242),
    _SliderSpec("Gravity", "gravity", 0.0, 2000.0, 292),
    _SliderSpec("Bounciness", "bouncing_factor", 0.0, 1.0, 342),
)

_TOOL_TOP = 48
_HINT_TOP = 86
_MARGIN = 16


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="circlesim", description=TITLE)
    parser.add_argument("--width", type=int, default=1200, help="window width")
    parser.add_argument("--height", type=int, default=800, help="window height")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the editor window and run until it is closed."""
    args = _parse_args(argv)
    _run(EditorState(), args.width, args.height)
    return 0


def _run(state: EditorState, width: int, height: int) -> None:
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(TITLE)
        heading_font = pygame.font.Font(None, 28)
        text_font = pygame.font.Font(None, 20)
        clock = pygame.time.Clock()
        track_width = PANEL_WIDTH - 2 * _MARGIN
        tracks: List[Tuple[_SliderSpec, "pygame.Rect"]] = [
            (spec, pygame.Rect(_MARGIN, spec.top + 22, track_width, 8)) for spec in _SLIDERS
        ]
        tool_rect = pygame.Rect(_MARGIN, _TOOL_TOP, track_width, 28)
        dragging: Optional[Tuple[_SliderSpec, "pygame.Rect"]] = None

        def set_from_mouse(spec: _SliderSpec, track: "pygame.Rect", mouse_x: int) -> None:
            fraction = min(max((mouse_x - track.left) / track.width, 0.0), 1.0)
            setattr(state, spec.attribute, spec.low + fraction * (spec.high - spec.low))

        running = True
        while running:
            screen_w, screen_h = screen.get_size()
            canvas = pygame.Rect(PANEL_WIDTH, 0, max(screen_w - PANEL_WIDTH, 0), screen_h)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    mx, my = event.pos
                    if event.button == 1:
                        hit = next(
                            ((s, t) for s, t in tracks if t.inflate(0, 16).collidepoint(mx, my)),
                            None,
                        )
                        if hit is not None:
                            dragging = hit
                            set_from_mouse(hit[0], hit[1], mx)
                        elif tool_rect.collidepoint(mx, my):
                            state.selected_tool = Tool.PLACE_CIRCLE
                        elif canvas.collidepoint(mx, my):
                            state.handle_left_click(mx - canvas.left, my - canvas.top)
                    elif event.button == 3 and canvas.collidepoint(mx, my):
                        state.handle_right_click(mx - canvas.left, my - canvas.top)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    dragging = None
                elif event.type == pygame.MOUSEMOTION and dragging is not None:
                    set_from_mouse(dragging[0], dragging[1], event.pos[0])

            state.update(canvas.width, canvas.height)

            screen.fill(_PANEL)
            for title, top in _HEADINGS:
                screen.blit(heading_font.render(title, True, _TEXT), (_MARGIN, top))
            tool_colour = _ACCENT if state.selected_tool is Tool.PLACE_CIRCLE else _TRACK
            pygame.draw.rect(screen, tool_colour, tool_rect, border_radius=4)
            screen.blit(
                text_font.render(Tool.PLACE_CIRCLE.value, True, _TEXT),
                (tool_rect.left + 8, tool_rect.top + 7),
            )
            screen.blit(
                text_font.render("Right-click a circle to delete it", True, _TEXT),
                (_MARGIN, _HINT_TOP),
            )
            for spec, track in tracks:
                value = getattr(state, spec.attribute)
                label = f"{spec.label}: {value:.2f}"
                screen.blit(text_font.render(label, True, _TEXT), (_MARGIN, spec.top))
                pygame.draw.rect(screen, _TRACK, track, border_radius=4)
                fraction = (value - spec.low) / (spec.high - spec.low)
                knob_x = track.left + int(fraction * track.width)
                pygame.draw.circle(screen, _ACCENT, (knob_x, track.centery), 8)

            screen.set_clip(canvas)
            pygame.draw.rect(screen, _BACKGROUND, canvas)
            pygame.draw.rect(screen, _BORDER, canvas, width=2)
            ground = canvas.top + state.ground_y
            pygame.draw.line(
                screen, _GROUND, (canvas.left, ground), (canvas.right, ground), width=3
            )
            for entity, position in state.world.positions():
                circle = state.world.get_circle(entity)
                if circle is None:
                    continue
                centre = (canvas.left + position.x, canvas.top + position.y)
                pygame.draw.circle(screen, _CIRCLE, centre, circle.radius)
            screen.set_clip(None)

            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()