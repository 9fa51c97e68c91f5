"""Frame composition from a ``WorldSnapshot``.

Layer order (bottom -> top):
1. Sky background
2. Platforms (culled to the viewport)
3. Collectibles
4. Animals
5. Player and status decorations
6. HUD: score, level, goal progress, sprint meter
7. Notifications
8. Pause / game-over overlay

``render_menu`` draws the start screen (background, menu) without a world.

The renderer reads the snapshot only. Sprites are out of scope, so every
entity is a flat-coloured shape. The optional ``capture_sequence`` records
executed layers for tests instead of sampling pixels.
"""

from __future__ import annotations

import math
from typing import List, Optional

import pygame

from hunter.physics import PhysicsEngine
from hunter.snapshot import EntityView, WorldSnapshot


SKY = (135, 206, 235)
PLATFORM_FILL = (139, 195, 74)
PLATFORM_GRASS = (156, 204, 101)
ROUNDED_RADIUS = 20
KIND_COLOURS = {
    "rabbit": (200, 200, 200),
    "bird": (66, 133, 244),
    "squirrel": (160, 82, 45),
    "pig": (244, 143, 177),
    "bone": (245, 245, 220),
    "treat": (255, 193, 7),
}
PLAYER_COLOUR = (121, 85, 72)
POWER_UP_GLOW = (76, 175, 80, 77)
POO_COLOUR = (93, 64, 55)
POO_ORBIT_RADIUS = 30
POO_ORBIT_SPEED = 0.05
HUD_TEXT = (255, 255, 255)
BAR_BG = (51, 51, 51)
BAR_FILL = (76, 175, 80)
SPRINT_FILL = (33, 150, 243)
SPRINT_COOLDOWN_FILL = (244, 67, 54)
MENU_SELECTED = (255, 193, 7)


class Renderer:
    def __init__(self) -> None:
        if not pygame.font.get_init():
            pygame.font.init()
        self.font = pygame.font.Font(None, 28)

    def render(
        self,
        snapshot: WorldSnapshot,
        surface: pygame.Surface,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence
        cam = snapshot.camera_x
        view_w, view_h = surface.get_size()

        surface.fill(SKY)
        if seq is not None:
            seq.append("background")

        for platform in snapshot.platforms:
            if PhysicsEngine.is_on_screen(platform, view_w, view_h, cam):
                self._draw_platform(surface, platform, cam)
        if seq is not None:
            seq.append("platforms")

        for item in snapshot.collectibles:
            if PhysicsEngine.is_on_screen(item, view_w, view_h, cam):
                self._draw_rotated(surface, item, cam)
        if seq is not None:
            seq.append("collectibles")

        for animal in snapshot.animals:
            if PhysicsEngine.is_on_screen(animal, view_w, view_h, cam):
                self._draw_animal(surface, animal, cam)
        if seq is not None:
            seq.append("animals")

        self._draw_player(surface, snapshot)
        if seq is not None:
            seq.append("player")

        self._draw_hud(surface, snapshot)
        if seq is not None:
            seq.append("hud")

        if snapshot.notifications:
            self._draw_notifications(surface, snapshot.notifications)
            if seq is not None:
                seq.append("notifications")

        if snapshot.paused or snapshot.game_over:
            self._draw_overlay(surface, "Paused" if snapshot.paused else "Game Over")
            if seq is not None:
                seq.append("overlay")

    # --- Menu -----------------------------------------------------------
    def render_menu(
        self,
        surface: pygame.Surface,
        title: str,
        labels: List[str],
        selected: int,
        capture_sequence: Optional[List[str]] = None,
    ) -> None:
        seq = capture_sequence
        surface.fill(SKY)
        if seq is not None:
            seq.append("background")

        cx = surface.get_width() // 2
        y = surface.get_height() // 3
        text = self.font.render(title, True, HUD_TEXT)
        surface.blit(text, (cx - text.get_width() // 2, y))
        y += text.get_height() * 2
        for i, label in enumerate(labels):
            colour = MENU_SELECTED if i == selected else HUD_TEXT
            text = self.font.render(f"> {label} <" if i == selected else label, True, colour)
            surface.blit(text, (cx - text.get_width() // 2, y))
            y += text.get_height() + 10
        if seq is not None:
            seq.append("menu")

    # --- World ----------------------------------------------------------
    def _draw_platform(self, surface, platform, cam):
        rect = pygame.Rect(int(platform.x - cam), int(platform.y), int(platform.width), int(platform.height))
        radius = ROUNDED_RADIUS if platform.kind == "rounded" else 0
        pygame.draw.rect(surface, PLATFORM_FILL, rect, border_radius=radius)
        pygame.draw.rect(surface, PLATFORM_GRASS, (rect.x, rect.y, rect.width, 5))

    def _draw_animal(self, surface, animal: EntityView, cam):
        colour = KIND_COLOURS.get(animal.kind, (0, 0, 0))
        rect = pygame.Rect(int(animal.x - cam), int(animal.y), int(animal.width), int(animal.height))
        pygame.draw.ellipse(surface, colour, rect)
        # Eye on the leading side shows the facing direction.
        eye_x = rect.right - 8 if animal.direction > 0 else rect.left + 8
        pygame.draw.circle(surface, (0, 0, 0), (eye_x, rect.top + rect.height // 3), 3)

    def _draw_rotated(self, surface, item: EntityView, cam):
        cx = item.x + item.width / 2 - cam
        cy = item.y + item.height / 2
        cos_a, sin_a = math.cos(item.rotation), math.sin(item.rotation)
        hw, hh = item.width / 2, item.height / 2
        corners = [
            (cx + dx * cos_a - dy * sin_a, cy + dx * sin_a + dy * cos_a)
            for dx, dy in ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh))
        ]
        pygame.draw.polygon(surface, KIND_COLOURS.get(item.kind, (0, 0, 0)), corners)

    def _draw_player(self, surface, snapshot: WorldSnapshot):
        p = snapshot.player
        cam = snapshot.camera_x
        rect = pygame.Rect(int(p.x - cam), int(p.y), int(p.width), int(p.height))
        if p.status == "powered_up":
            glow_r = int(p.width * 0.7)
            glow = pygame.Surface((glow_r * 2, glow_r * 2), pygame.SRCALPHA)
            pygame.draw.circle(glow, POWER_UP_GLOW, (glow_r, glow_r), glow_r)
            surface.blit(glow, (rect.centerx - glow_r, rect.centery - glow_r))
        pygame.draw.rect(surface, PLAYER_COLOUR, rect, border_radius=8)
        eye_x = rect.right - 10 if p.direction > 0 else rect.left + 10
        pygame.draw.circle(surface, (0, 0, 0), (eye_x, rect.top + 14), 4)
        if p.status == "sick":
            angle = (snapshot.tick * POO_ORBIT_SPEED) % (math.pi * 2)
            poo = (
                int(rect.centerx + math.cos(angle) * POO_ORBIT_RADIUS),
                int(rect.centery + math.sin(angle) * POO_ORBIT_RADIUS),
            )
            pygame.draw.circle(surface, POO_COLOUR, poo, 8)

    # --- HUD ------------------------------------------------------------
    def _draw_bar(self, surface, x, y, w, h, fraction, fill):
        pygame.draw.rect(surface, BAR_BG, (x, y, w, h))
        pygame.draw.rect(surface, fill, (x, y, int(w * max(0.0, min(1.0, fraction))), h))
        pygame.draw.rect(surface, HUD_TEXT, (x, y, w, h), 2)

    def _draw_hud(self, surface, snapshot: WorldSnapshot):
        text = self.font.render(f"Score: {snapshot.score}   Level: {snapshot.level_number}", True, HUD_TEXT)
        surface.blit(text, (10, 10))
        width = surface.get_width()
        self._draw_bar(surface, width - 210, 10, 200, 10, snapshot.progress, BAR_FILL)
        p = snapshot.player
        fill = SPRINT_COOLDOWN_FILL if p.sprint_cooldown else SPRINT_FILL
        self._draw_bar(surface, width - 210, 28, 200, 8, p.sprint_meter / p.max_sprint_meter, fill)

    def _draw_notifications(self, surface, messages):
        y = surface.get_height() // 4
        for message in messages:
            text = self.font.render(message, True, HUD_TEXT)
            surface.blit(text, (surface.get_width() // 2 - text.get_width() // 2, y))
            y += text.get_height() + 6

    def _draw_overlay(self, surface, title):
        overlay = pygame.Surface(surface.get_size(), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))
        surface.blit(overlay, (0, 0))
        text = self.font.render(title, True, HUD_TEXT)
        surface.blit(text, (surface.get_width() // 2 - text.get_width() // 2, surface.get_height() // 2))


__all__ = ["Renderer"]
