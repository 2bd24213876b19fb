# engine/game.py

from typing import Any, Dict, Optional

import pygame

from settings import COLOR_BG, COLOR_TEXT, METER_HEIGHT

# Real seconds per in-game cycle
CYCLE_LENGTH = 60.0


class Game:
    """
    Core simulation object for the demo host.

    Advances in-game time while active. The forced exit mod deactivates it
    right before showing the exit dialog.
    """

    def __init__(self) -> None:
        self.active: bool = True
        self.cycle: int = 1
        self.cycle_time: float = 0.0
        self._font: Optional[pygame.font.Font] = None

    def update(self, dt: float) -> None:
        if not self.active:
            return
        self.cycle_time += dt
        while self.cycle_time >= CYCLE_LENGTH:
            self.cycle_time -= CYCLE_LENGTH
            self.cycle += 1

    def to_dict(self) -> Dict[str, Any]:
        return {"cycle": self.cycle, "cycle_time": self.cycle_time}

    def draw(self, screen: pygame.Surface) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont("consolas", 24)

        screen.fill(COLOR_BG)
        w, h = screen.get_size()

        # Progress through the current cycle
        fraction = self.cycle_time / CYCLE_LENGTH
        bar_w = w - 200
        pygame.draw.rect(screen, (60, 60, 80), (100, h // 2, bar_w, 12), 1)
        pygame.draw.rect(screen, (140, 170, 240), (100, h // 2, int(bar_w * fraction), 12))

        label = f"Cycle {self.cycle}" + ("" if self.active else " (suspended)")
        text_surf = self._font.render(label, True, COLOR_TEXT)
        screen.blit(text_surf, (100, h // 2 - 40))

        hint = self._font.render("F5: Save   F10: Mod Options   Esc: Pause", True, (150, 150, 150))
        screen.blit(hint, (w // 2 - hint.get_width() // 2, max(METER_HEIGHT + 10, h - 60)))
