"""
Tooltip shown while the mouse hovers over a meter bar widget.
"""

from __future__ import annotations

from typing import List, Optional, Tuple, Any
import pygame


class Tooltip:
    """Manages tooltip display and positioning."""

    def __init__(self):
        self.current_tooltip: Optional[TooltipData] = None
        self.mouse_pos: Tuple[int, int] = (0, 0)
        self.show_delay: float = 0.3  # Seconds before showing tooltip
        self.accumulated_time: float = 0.0
        self.hover_target: Optional[Any] = None

    def update(self, dt: float, mouse_pos: Tuple[int, int], hover_target: Optional[Any] = None) -> None:
        """Update tooltip state based on mouse position and hover target."""
        if hover_target is not self.hover_target:
            # Target changed, reset timer
            self.hover_target = hover_target
            self.accumulated_time = 0.0
            self.current_tooltip = None

        if hover_target is not None:
            self.accumulated_time += dt
            if self.accumulated_time >= self.show_delay:
                self.current_tooltip = hover_target.tooltip_data()
            else:
                self.current_tooltip = None
        else:
            self.current_tooltip = None
            self.accumulated_time = 0.0

        self.mouse_pos = mouse_pos

    def clear(self) -> None:
        """Clear the current tooltip."""
        self.current_tooltip = None
        self.hover_target = None
        self.accumulated_time = 0.0

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the tooltip if it should be visible."""
        if self.current_tooltip is None:
            return

        self.current_tooltip.draw(screen, font, self.mouse_pos)


class TooltipData:
    """Data structure for tooltip content."""

    def __init__(self, title: str = "", lines: Optional[List[str]] = None):
        self.title = title
        self.lines = lines or []

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, mouse_pos: Tuple[int, int]) -> None:
        """Draw the tooltip below the cursor, kept on screen."""
        lines_to_render: List[Tuple[str, Tuple[int, int, int]]] = []
        if self.title:
            lines_to_render.append((self.title, (255, 255, 200)))
        for line in self.lines:
            lines_to_render.append((line, (220, 220, 220)))

        if not lines_to_render:
            return

        padding = 8
        line_height = 20

        max_width = max(font.size(line)[0] for line, _ in lines_to_render)
        tooltip_width = max_width + padding * 2
        tooltip_height = len(lines_to_render) * line_height + padding * 2

        # The meter bar sits at the top of the screen, so prefer below the cursor
        mx, my = mouse_pos
        screen_w, screen_h = screen.get_size()

        tooltip_x = mx + 15
        tooltip_y = my + 15

        if tooltip_x + tooltip_width > screen_w:
            tooltip_x = mx - tooltip_width - 15
        if tooltip_y + tooltip_height > screen_h:
            tooltip_y = my - tooltip_height - 5

        bg_surface = pygame.Surface((tooltip_width, tooltip_height), pygame.SRCALPHA)
        bg_surface.fill((20, 20, 30, 240))
        pygame.draw.rect(bg_surface, (100, 100, 130), (0, 0, tooltip_width, tooltip_height), 2)
        screen.blit(bg_surface, (tooltip_x, tooltip_y))

        y_offset = padding
        for line, color in lines_to_render:
            text_surf = font.render(line, True, color)
            screen.blit(text_surf, (tooltip_x + padding, tooltip_y + y_offset))
            y_offset += line_height
