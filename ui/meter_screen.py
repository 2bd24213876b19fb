"""
Meter bar: the HUD strip across the top of the game screen.

Widgets are laid out right to left. The mod adds its clock widget here.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

import pygame

from settings import COLOR_METER_BG, METER_HEIGHT
from ui.tooltip import Tooltip, TooltipData


class MeterWidget(Protocol):
    rect: pygame.Rect

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        ...

    def preferred_width(self, font: pygame.font.Font) -> int:
        ...

    def tooltip_data(self) -> Optional[TooltipData]:
        ...


class MeterScreen:
    def __init__(self, width: int) -> None:
        self.width = width
        self.widgets: List[MeterWidget] = []
        self.tooltip = Tooltip()
        self._font: Optional[pygame.font.Font] = None

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.SysFont("consolas", 18)
        return self._font

    def add_widget(self, widget: MeterWidget) -> None:
        if widget not in self.widgets:
            self.widgets.append(widget)

    def remove_widget(self, widget: MeterWidget) -> None:
        if widget in self.widgets:
            self.widgets.remove(widget)
            if self.tooltip.hover_target is widget:
                self.tooltip.clear()

    def layout(self) -> None:
        x = self.width - 10
        for widget in self.widgets:
            w = widget.preferred_width(self.font)
            x -= w
            widget.rect = pygame.Rect(x, 0, w, METER_HEIGHT)
            x -= 16

    def widget_at(self, pos: Tuple[int, int]) -> Optional[MeterWidget]:
        for widget in self.widgets:
            if widget.rect.collidepoint(pos):
                return widget
        return None

    def update(self, dt: float, mouse_pos: Tuple[int, int]) -> None:
        self.layout()
        self.tooltip.update(dt, mouse_pos, self.widget_at(mouse_pos))

    def draw(self, screen: pygame.Surface) -> None:
        self.layout()
        pygame.draw.rect(screen, COLOR_METER_BG, (0, 0, self.width, METER_HEIGHT))
        pygame.draw.line(screen, (60, 60, 80), (0, METER_HEIGHT - 1), (self.width, METER_HEIGHT - 1))
        for widget in self.widgets:
            widget.draw(screen, self.font)
        self.tooltip.draw(screen, self.font)
