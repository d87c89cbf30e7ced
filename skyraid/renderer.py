"""Flat-shape renderer for ``RenderSnapshot``.

Presentation only: reads an immutable snapshot and draws it, never
touches simulation state. Layer order (bottom -> top):

1. Water + scrolling grid
2. River banks
3. World objects (enemies, fuel)
4. Particles (trail, explosions)
5. Projectiles
6. Player
7. HUD (score, fuel, level progress)
8. Phase overlay (idle / level complete / game over)

``capture_sequence`` records the executed layers for tests instead of
sampling pixels.
"""

from __future__ import annotations

import math
from typing import List, Optional

import pygame

from skyraid.entities import FUEL
from skyraid.logger import get_logger
from skyraid.run_state import Phase
from skyraid.snapshot import EntityView, RenderSnapshot

_log = get_logger("renderer")

WATER = (30, 64, 175)
GRID = (59, 130, 246)
BANK = (22, 101, 52)
HUD_TEXT = (74, 222, 128)
FUEL_LOW = (239, 68, 68)
FUEL_OK = (250, 204, 21)

OVERLAY_TEXT = {
    Phase.IDLE: ("ENGAGE", "press ENTER"),
    Phase.LEVEL_COMPLETE: ("SECTOR SECURED", "ENTER: advance"),
    Phase.GAME_OVER: ("K.I.A.", "ENTER: redeploy"),
}


class Renderer:
    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self._font: pygame.font.Font | None = None

    def _get_font(self) -> pygame.font.Font:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 28)
        return self._font

    def render(
        self,
        snap: RenderSnapshot,
        surface: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence

        def mark(name: str) -> None:
            if seq is not None:
                seq.append(name)

        self._draw_water(surface, snap.scroll_offset)
        mark("water")
        self._draw_banks(surface, snap.scroll_offset)
        mark("banks")
        for obj in snap.objects:
            self._draw_object(surface, obj)
        mark("objects")
        for p in snap.particles:
            radius = max(1, int(p.size * p.life))
            pygame.draw.circle(surface, pygame.Color(p.color), (int(p.x), int(p.y)), radius)
        mark("particles")
        for proj in snap.projectiles:
            pygame.draw.rect(surface, pygame.Color(proj.color), _rect(proj))
        mark("projectiles")
        if snap.player is not None:
            self._draw_player(surface, snap.player)
        mark("player")
        self._draw_hud(surface, snap)
        mark("hud")
        if snap.phase in OVERLAY_TEXT:
            self._draw_overlay(surface, snap)
            mark("overlay")

    # Layers --------------------------------------------------------
    def _draw_water(self, surface: pygame.Surface, scroll: float) -> None:
        surface.fill(WATER)
        offset = scroll % 50
        for i in range(self.height // 50 + 1):
            y = int(i * 50 + offset - 50)
            pygame.draw.line(surface, GRID, (0, y), (self.width, y))
        for i in range(1, 5):
            x = int(i * self.width / 5)
            pygame.draw.line(surface, GRID, (x, 0), (x, self.height))

    def _draw_banks(self, surface: pygame.Surface, scroll: float) -> None:
        left = [(0, 0)]
        right = [(self.width, 0)]
        for y in range(0, self.height + 1, 20):
            left.append((int(30 + math.sin((y + scroll) * 0.01) * 15), y))
            right.append((int(self.width - 30 + math.sin((y + scroll + 100) * 0.01) * 15), y))
        left.append((0, self.height))
        right.append((self.width, self.height))
        pygame.draw.polygon(surface, BANK, left)
        pygame.draw.polygon(surface, BANK, right)

    def _draw_object(self, surface: pygame.Surface, obj: EntityView) -> None:
        color = pygame.Color(obj.color)
        if obj.kind == FUEL:
            pygame.draw.rect(surface, color, _rect(obj), border_radius=4)
            label = self._get_font().render("F", True, (255, 255, 255))
            surface.blit(label, label.get_rect(center=_rect(obj).center))
        else:
            pygame.draw.rect(surface, color, _rect(obj))

    def _draw_player(self, surface: pygame.Surface, player: EntityView) -> None:
        cx = player.x + player.width / 2
        cy = player.y + player.height / 2
        half_w, half_h = player.width / 2, player.height / 2
        shape = [(0, -half_h), (half_w, half_h * 0.6), (0, half_h * 0.3), (-half_w, half_h * 0.6)]
        cos_b, sin_b = math.cos(player.bank), math.sin(player.bank)
        points = [(cx + x * cos_b - y * sin_b, cy + x * sin_b + y * cos_b) for x, y in shape]
        pygame.draw.polygon(surface, pygame.Color(player.color), points)

    def _draw_hud(self, surface: pygame.Surface, snap: RenderSnapshot) -> None:
        font = self._get_font()
        surface.blit(font.render(f"SCORE {snap.score:06d}", True, HUD_TEXT), (12, 12))
        fuel_color = FUEL_LOW if snap.fuel < snap.max_fuel / 4 else FUEL_OK
        fuel = font.render(f"FUEL {int(snap.fuel)}", True, fuel_color)
        surface.blit(fuel, (self.width - fuel.get_width() - 12, 12))
        surface.blit(font.render(f"SECTOR {snap.level}", True, HUD_TEXT), (12, 40))
        bar = pygame.Rect(12, 68, int((self.width - 24) * snap.progress), 4)
        pygame.draw.rect(surface, HUD_TEXT, bar)

    def draw_fps(self, surface: pygame.Surface, fps: float) -> None:
        label = self._get_font().render(f"{fps:.0f} FPS", True, HUD_TEXT)
        surface.blit(label, (self.width - label.get_width() - 12, 40))

    def _draw_overlay(self, surface: pygame.Surface, snap: RenderSnapshot) -> None:
        shade = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 150))
        surface.blit(shade, (0, 0))
        font = self._get_font()
        title, hint = OVERLAY_TEXT[snap.phase]
        lines = [title]
        if snap.phase is Phase.GAME_OVER and snap.final_score is not None:
            lines.append(f"SCORE: {snap.final_score}")
        lines.append(hint)
        y = self.height // 2 - 20 * len(lines)
        for line in lines:
            text = font.render(line, True, (255, 255, 255))
            surface.blit(text, text.get_rect(center=(self.width // 2, y)))
            y += 40


def _rect(view: EntityView) -> pygame.Rect:
    return pygame.Rect(int(view.x), int(view.y), int(view.width), int(view.height))


__all__ = ["Renderer"]
