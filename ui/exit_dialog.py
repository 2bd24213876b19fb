"""
Modal dialog built from a DialogRequest.
"""

from __future__ import annotations

from typing import Callable, Optional, TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from systems.exit_sequencer import DialogRequest


DIALOG_SIZE = (320, 200)
DIALOG_MAX_SIZE = (800, 600)
DIALOG_MARGIN = 20
DIALOG_BACK_COLOR = (38, 40, 56)
BUTTON_COLOR = (196, 92, 140)


class ExitDialog:
    """
    Renders a DialogRequest and reports which button closed it.

    Enter/Space press the selected button; Esc closes the dialog and is
    reported as the first button's key, so closing always counts as a
    confirm.
    """

    def __init__(self, request: "DialogRequest", on_closed: Callable[[str], None]) -> None:
        self.request = request
        self.on_closed = on_closed
        self.selected_index = 0
        self.closed = False
        self._font: Optional[pygame.font.Font] = None
        self._title_font: Optional[pygame.font.Font] = None

    def close(self, key: str) -> None:
        if self.closed:
            return
        self.closed = True
        self.on_closed(key)

    def handle_event(self, event: pygame.event.Event) -> None:
        if self.closed or event.type != pygame.KEYDOWN:
            return

        buttons = self.request.buttons
        if event.key in (pygame.K_LEFT, pygame.K_a) and buttons:
            self.selected_index = (self.selected_index - 1) % len(buttons)
        elif event.key in (pygame.K_RIGHT, pygame.K_d) and buttons:
            self.selected_index = (self.selected_index + 1) % len(buttons)
        elif event.key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER):
            self.close(buttons[self.selected_index][0] if buttons else "close")
        elif event.key == pygame.K_ESCAPE:
            self.close(buttons[0][0] if buttons else "close")

    def _size(self) -> tuple[int, int]:
        line_w = max((self._font.size(line)[0] for line in self.request.body_lines), default=0)
        width = max(DIALOG_SIZE[0], line_w + DIALOG_MARGIN * 2)
        height = max(DIALOG_SIZE[1], 60 + len(self.request.body_lines) * 40 + 60)
        return min(width, DIALOG_MAX_SIZE[0]), min(height, DIALOG_MAX_SIZE[1])

    def draw(self, screen: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont("consolas", 18)
            self._title_font = pygame.font.SysFont("consolas", 22)

        w, h = screen.get_size()
        overlay = pygame.Surface((w, h))
        overlay.set_alpha(160)
        overlay.fill((0, 0, 0))
        screen.blit(overlay, (0, 0))

        dw, dh = self._size()
        x = w // 2 - dw // 2
        y = h // 2 - dh // 2
        pygame.draw.rect(screen, DIALOG_BACK_COLOR, (x, y, dw, dh))
        pygame.draw.rect(screen, (100, 100, 130), (x, y, dw, dh), 2)

        title_surf = self._title_font.render(self.request.title, True, (255, 255, 210))
        screen.blit(title_surf, (x + dw // 2 - title_surf.get_width() // 2, y + 12))

        text_y = y + 50
        for line in self.request.body_lines:
            text_surf = self._font.render(line, True, (220, 220, 220))
            screen.blit(text_surf, (x + DIALOG_MARGIN, text_y))
            text_y += 40

        # Buttons along the bottom edge
        button_w, button_h = 100, 30
        total_w = len(self.request.buttons) * (button_w + 10) - 10
        bx = x + dw // 2 - total_w // 2
        by = y + dh - button_h - 14
        for idx, (_, label) in enumerate(self.request.buttons):
            rect = pygame.Rect(bx + idx * (button_w + 10), by, button_w, button_h)
            pygame.draw.rect(screen, BUTTON_COLOR, rect)
            if idx == self.selected_index:
                pygame.draw.rect(screen, (255, 255, 255), rect, 2)
            label_surf = self._font.render(label, True, (255, 255, 255))
            screen.blit(label_surf, label_surf.get_rect(center=rect.center))
