from __future__ import annotations

from typing import List, Optional

import pygame

from settings import COLOR_TEXT
from ui.tooltip import TooltipData


class ClockWidget:
    """Text readout of the current time in the meter bar."""

    def __init__(self) -> None:
        self.text: str = ""
        self.tooltip_lines: List[str] = []
        self.rect = pygame.Rect(0, 0, 0, 0)

    def set_text(self, text: str, tooltip_lines: Optional[List[str]] = None) -> None:
        self.text = text
        if tooltip_lines is not None:
            self.tooltip_lines = list(tooltip_lines)

    def preferred_width(self, font: pygame.font.Font) -> int:
        return font.size(self.text or "00:00")[0] + 12

    def tooltip_data(self) -> Optional[TooltipData]:
        if not self.tooltip_lines:
            return None
        return TooltipData(lines=self.tooltip_lines)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        if not self.text:
            return
        text_surf = font.render(self.text, True, COLOR_TEXT)
        surface.blit(text_surf, text_surf.get_rect(center=self.rect.center))
