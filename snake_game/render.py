"""Pygame drawing of game snapshots."""

import logging

import pygame

from .config import (
    BAR_HEIGHT,
    BG_COLOR,
    BODY_COLOR,
    EYE_COLOR,
    FOOD_COLOR,
    GRID_LINE,
    HEAD_COLOR,
    HUD_BG,
    HUD_FONT_SIZE,
    HUD_HEIGHT,
    LEAF_COLOR,
    OVERLAY_ALPHA,
    SMALL_FONT_SIZE,
    STEM_COLOR,
    TITLE_FONT_SIZE,
    WHITE,
)
from .direction import Direction
from .speed import speed_label

logger = logging.getLogger(__name__)

PREFERRED_FONTS = ["Bahnschrift", "Segoe UI", "Arial"]


def get_ui_font(size):
    """Load a preferred UI font, then fall back to the pygame default."""
    for name in PREFERRED_FONTS:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    logger.warning("No preferred UI font found; using the pygame default")
    return pygame.font.Font(None, size)


def body_color(index, length):
    """Fade body segments toward the background the further they are from the head."""
    intensity = 1 - (index / length) * 0.3
    return tuple(int(bg + (c - bg) * intensity) for c, bg in zip(BODY_COLOR, BG_COLOR))


def eye_positions(rect, direction):
    """Return the two eye centers for a head cell facing ``direction``."""
    cx, cy = rect.center
    offset = rect.width * 0.3
    spread = rect.width * 0.2
    if direction is Direction.RIGHT:
        return [(cx + offset, cy - spread), (cx + offset, cy + spread)]
    if direction is Direction.LEFT:
        return [(cx - offset, cy - spread), (cx - offset, cy + spread)]
    if direction is Direction.UP:
        return [(cx - spread, cy - offset), (cx + spread, cy - offset)]
    return [(cx - spread, cy + offset), (cx + spread, cy + offset)]


class Renderer:
    """Draws a ``Snapshot`` onto a pygame surface.

    The play area is laid out by ``geometry``; the HUD strip sits above it
    and a controls bar below it.
    """

    def __init__(self, surface, geometry):
        self.surface = surface
        self.geometry = geometry
        self.font = get_ui_font(HUD_FONT_SIZE)
        self.small_font = get_ui_font(SMALL_FONT_SIZE)
        self.title_font = get_ui_font(TITLE_FONT_SIZE)

    def cell_rect(self, cell, padding=0):
        left, top = self.geometry.cell_to_canvas(cell)
        size = self.geometry.cell_size
        return pygame.Rect(left + padding, top + padding, size - padding * 2, size - padding * 2)

    @property
    def board_rect(self):
        left, top = self.geometry.origin
        return pygame.Rect(left, top, self.geometry.canvas_width, self.geometry.canvas_height)

    def render(self, snapshot):
        self.surface.fill(HUD_BG)
        self.draw_board()
        if snapshot.food is not None:
            self.draw_food(snapshot.food)
        self.draw_snake(snapshot.snake, snapshot.direction)
        self.draw_hud(snapshot)
        self.draw_bottom_bar(snapshot)
        if snapshot.paused:
            self.draw_paused_overlay()
        elif snapshot.game_over is not None:
            self.draw_game_over(snapshot.game_over)

    def draw_board(self):
        board = self.board_rect
        pygame.draw.rect(self.surface, BG_COLOR, board)
        size = self.geometry.cell_size
        for x in range(board.left, board.right + 1, size):
            pygame.draw.line(self.surface, GRID_LINE, (x, board.top), (x, board.bottom), 1)
        for y in range(board.top, board.bottom + 1, size):
            pygame.draw.line(self.surface, GRID_LINE, (board.left, y), (board.right, y), 1)

    def draw_snake(self, snake, direction):
        length = len(snake)
        # Tail first so the head is painted on top.
        for i in range(length - 1, 0, -1):
            pygame.draw.rect(self.surface, body_color(i, length), self.cell_rect(snake[i], padding=1))

        head_rect = self.cell_rect(snake[0], padding=1)
        pygame.draw.rect(self.surface, HEAD_COLOR, head_rect, border_radius=4)
        eye_radius = max(2, int(head_rect.width * 0.1))
        for ex, ey in eye_positions(head_rect, direction):
            pygame.draw.circle(self.surface, EYE_COLOR, (int(ex), int(ey)), eye_radius)

    def draw_food(self, cell):
        """Draw an apple: round body, leaf and stem."""
        cx, cy = self.geometry.cell_center(cell)
        radius = self.geometry.cell_size * 0.4
        pygame.draw.circle(self.surface, FOOD_COLOR, (int(cx), int(cy)), int(radius))
        leaf_y = cy - radius * 0.7
        pygame.draw.circle(self.surface, LEAF_COLOR, (int(cx), int(leaf_y)), max(1, int(radius * 0.3)))
        pygame.draw.line(
            self.surface,
            STEM_COLOR,
            (int(cx), int(leaf_y)),
            (int(cx + radius * 0.3), int(cy - radius * 0.9)),
            max(1, int(radius * 0.1)),
        )

    def draw_hud(self, snapshot):
        width = self.surface.get_width()
        pygame.draw.rect(self.surface, HUD_BG, (0, 0, width, HUD_HEIGHT))
        score = self.font.render(f"Score: {snapshot.score}", True, WHITE)
        best = self.font.render(f"Best: {snapshot.high_score}", True, WHITE)
        speed = self.small_font.render(
            f"Speed: {speed_label(snapshot.speed)} ({snapshot.speed} ms)", True, WHITE
        )
        center_y = HUD_HEIGHT // 2
        self.surface.blit(score, (10, center_y - score.get_height() // 2))
        self.surface.blit(best, (width - best.get_width() - 10, center_y - best.get_height() // 2))
        self.surface.blit(speed, speed.get_rect(center=(width // 2, center_y)))

    def draw_bottom_bar(self, snapshot):
        if snapshot.running:
            text = "Arrows/WASD: move  |  Space: pause  |  R: reset  |  Esc: quit"
        else:
            text = "Enter: start  |  +/-: speed  |  R: reset  |  Esc: quit"
        label = self.small_font.render(text, True, WHITE)
        top = self.surface.get_height() - BAR_HEIGHT
        self.surface.blit(label, label.get_rect(center=(self.surface.get_width() // 2, top + BAR_HEIGHT // 2)))

    def _shade_board(self):
        board = self.board_rect
        shade = pygame.Surface(board.size, pygame.SRCALPHA)
        shade.fill((0, 0, 0, OVERLAY_ALPHA))
        self.surface.blit(shade, board.topleft)
        return board

    def draw_paused_overlay(self):
        board = self._shade_board()
        title = self.title_font.render("Paused", True, WHITE)
        hint = self.small_font.render("Press Space to continue", True, WHITE)
        self.surface.blit(title, title.get_rect(center=(board.centerx, board.centery - 10)))
        self.surface.blit(hint, hint.get_rect(center=(board.centerx, board.centery + 24)))

    def draw_game_over(self, event):
        board = self._shade_board()
        lines = [
            (self.title_font, "Game Over"),
            (self.font, f"Score: {event.score}"),
            (self.font, f"Best: {event.high_score}" + ("  (new record!)" if event.new_record else "")),
            (self.small_font, "Press Enter to play again"),
        ]
        y = board.centery - 60
        for font, text in lines:
            surf = font.render(text, True, WHITE)
            self.surface.blit(surf, surf.get_rect(centerx=board.centerx, y=y))
            y += surf.get_height() + 10
