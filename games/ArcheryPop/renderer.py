"""
Archery Pop pygame renderer.

Draws a SessionSnapshot: the board, ring targets, the aiming scope, the HUD
and the menu / paused / game-over overlays. The renderer only reads the
snapshot; it never touches the session.
"""

from typing import Optional, Tuple

import pygame

from models import RunState, SessionSnapshot, TargetView
from games.ArcheryPop.config import (
    BACKGROUND_COLOR,
    BOARD_BORDER_COLOR,
    TARGET_RING_COLORS,
    TARGET_OUTLINE_COLOR,
    SCOPE_COLOR,
    HUD_TEXT_COLOR,
    HEART_COLOR,
    OVERLAY_COLOR,
    OVERLAY_TEXT_COLOR,
    NEW_HIGH_COLOR,
    SHOW_SCOPE,
)
from games.ArcheryPop.session_clock import format_time


class SessionRenderer:
    """
    Renders session snapshots onto a pygame surface.

    Args:
        width: Board width in pixels
        height: Board height in pixels
        show_scope: Draw the crosshair at the aim point
    """

    def __init__(self, width: int, height: int, show_scope: bool = SHOW_SCOPE):
        self.width = width
        self.height = height
        self.show_scope = show_scope
        self._font: Optional[pygame.font.Font] = None
        self._font_large: Optional[pygame.font.Font] = None

    def _get_font(self) -> pygame.font.Font:
        """Get or create the HUD font."""
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, 36)
        return self._font

    def _get_font_large(self) -> pygame.font.Font:
        """Get or create the overlay title font."""
        if self._font_large is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font_large = pygame.font.Font(None, 72)
        return self._font_large

    def render(
        self,
        screen: pygame.Surface,
        snapshot: SessionSnapshot,
        aim: Optional[Tuple[float, float]] = None,
        player_name: str = "",
    ) -> None:
        """
        Render one frame.

        Args:
            screen: Pygame surface to draw on
            snapshot: Session state to draw
            aim: Current aim point, for the scope
            player_name: Name the next session will start with
        """
        screen.fill(BACKGROUND_COLOR)
        pygame.draw.rect(screen, BOARD_BORDER_COLOR, (0, 0, self.width, self.height), 2)

        for target in snapshot.targets:
            self._render_target(screen, target)

        if snapshot.run_state != RunState.MENU:
            self._render_hud(screen, snapshot)

        if snapshot.run_state == RunState.MENU:
            self._render_menu(screen, snapshot, player_name)
        elif snapshot.run_state == RunState.PAUSED:
            self._render_paused(screen)
        elif snapshot.run_state == RunState.GAME_OVER:
            self._render_game_over(screen, snapshot)
        elif self.show_scope and aim is not None:
            self._render_scope(screen, aim)

    def _render_target(self, screen: pygame.Surface, target: TargetView) -> None:
        """Concentric rings inscribed in the target's bounding square."""
        radius = target.size / 2
        center = (int(target.x + radius), int(target.y + radius))
        rings = len(TARGET_RING_COLORS)
        for index, color in enumerate(TARGET_RING_COLORS):
            ring_radius = max(1, int(radius * (rings - index) / rings))
            pygame.draw.circle(screen, color, center, ring_radius)
        pygame.draw.circle(screen, TARGET_OUTLINE_COLOR, center, int(radius), 2)

    def _render_scope(self, screen: pygame.Surface, aim: Tuple[float, float]) -> None:
        x, y = int(aim[0]), int(aim[1])
        pygame.draw.circle(screen, SCOPE_COLOR, (x, y), 18, 2)
        pygame.draw.line(screen, SCOPE_COLOR, (x - 26, y), (x + 26, y), 2)
        pygame.draw.line(screen, SCOPE_COLOR, (x, y - 26), (x, y + 26), 2)

    def _render_hud(self, screen: pygame.Surface, snapshot: SessionSnapshot) -> None:
        """Score and best on the left, timer centred, hearts on the right."""
        font = self._get_font()

        score_text = font.render(f"Score: {snapshot.score}", True, HUD_TEXT_COLOR)
        screen.blit(score_text, (10, 10))

        best_text = font.render(f"Best: {snapshot.high_score}", True, HUD_TEXT_COLOR)
        screen.blit(best_text, (10, 44))

        timer_text = font.render(format_time(snapshot.time_remaining), True, HUD_TEXT_COLOR)
        timer_rect = timer_text.get_rect(midtop=(self.width // 2, 10))
        screen.blit(timer_text, timer_rect)

        for index in range(snapshot.lives):
            self._render_heart(screen, (self.width - 30 - index * 34, 24))

    def _render_heart(self, screen: pygame.Surface, center: Tuple[int, int]) -> None:
        cx, cy = center
        pygame.draw.circle(screen, HEART_COLOR, (cx - 6, cy - 4), 7)
        pygame.draw.circle(screen, HEART_COLOR, (cx + 6, cy - 4), 7)
        pygame.draw.polygon(screen, HEART_COLOR, [(cx - 13, cy - 1), (cx + 13, cy - 1), (cx, cy + 13)])

    def _render_overlay(self, screen: pygame.Surface) -> None:
        overlay = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        screen.blit(overlay, (0, 0))

    def _blit_centered(self, screen: pygame.Surface, font: pygame.font.Font,
                       text: str, color, dy: int) -> None:
        surface = font.render(text, True, color)
        rect = surface.get_rect(center=(self.width // 2, self.height // 2 + dy))
        screen.blit(surface, rect)

    def _render_menu(self, screen: pygame.Surface, snapshot: SessionSnapshot, player_name: str) -> None:
        self._render_overlay(screen)
        font = self._get_font()
        self._blit_centered(screen, self._get_font_large(), "ARCHERY POP", OVERLAY_TEXT_COLOR, -110)
        self._blit_centered(screen, font, f"Player: {player_name}", OVERLAY_TEXT_COLOR, -20)
        self._blit_centered(screen, font, "ENTER to start", OVERLAY_TEXT_COLOR, 30)
        self._blit_centered(screen, font, f"Best: {snapshot.high_score}   (R resets)",
                            OVERLAY_TEXT_COLOR, 80)

    def _render_paused(self, screen: pygame.Surface) -> None:
        self._render_overlay(screen)
        self._blit_centered(screen, self._get_font_large(), "PAUSED", OVERLAY_TEXT_COLOR, -40)
        self._blit_centered(screen, self._get_font(), "SPACE to resume, Q to quit",
                            OVERLAY_TEXT_COLOR, 30)

    def _render_game_over(self, screen: pygame.Surface, snapshot: SessionSnapshot) -> None:
        self._render_overlay(screen)
        font = self._get_font()
        self._blit_centered(screen, self._get_font_large(), "GAME OVER", OVERLAY_TEXT_COLOR, -110)

        summary = snapshot.summary
        if summary is None:
            return
        self._blit_centered(screen, font, f"{summary.player_name}: {summary.score}",
                            OVERLAY_TEXT_COLOR, -40)
        self._blit_centered(screen, font, f"Best: {summary.high_score}", OVERLAY_TEXT_COLOR, 0)
        self._blit_centered(
            screen, font,
            f"Hits {summary.hits}  Misses {summary.misses}  Escapes {summary.escapes}",
            OVERLAY_TEXT_COLOR, 40,
        )
        if summary.is_new_highscore:
            self._blit_centered(screen, font, "New high score!", NEW_HIGH_COLOR, 80)
        self._blit_centered(screen, font, "ENTER to play again, Q for menu", OVERLAY_TEXT_COLOR, 130)
