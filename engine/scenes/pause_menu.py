"""
Pause screen and mod options screen.
"""

import pygame
from typing import List, Optional, Tuple

from settings import COLOR_BG, FPS
from engine.config import (
    ClockFormat,
    EXIT_AFTER_LIMITS,
    EXIT_AT_LIMITS,
    get_config,
    save_config,
)


class PauseScreen:
    """
    Pause overlay shown when the player presses ESC during gameplay.

    Unlike the options screen this does not run its own loop: the host
    forwards key presses while it is active and draws it over the game,
    so it can be deactivated from outside (the forced exit does this).

    Options:
    - Resume: continue playing
    - Save Game: save to slot 1
    - Mod Options: forced exit settings
    - Quit Game: exit completely
    """

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self._active = False
        self._fonts: Optional[Tuple[pygame.font.Font, ...]] = None

        self.options = [
            ("resume", "Resume"),
            ("save", "Save Game"),
            ("options", "Mod Options"),
            ("quit", "Quit Game"),
        ]
        self.selected_index = 0

    def is_active(self) -> bool:
        return self._active

    def activate(self) -> None:
        self._active = True
        self.selected_index = 0

    def deactivate(self) -> None:
        self._active = False

    def handle_keydown(self, event: pygame.event.Event) -> Optional[str]:
        """
        Handle key presses in the pause menu.

        Returns the chosen option id ("resume", "save", "options", "quit")
        or None to stay in the menu.
        """
        key = event.key

        # ESC always resumes
        if key == pygame.K_ESCAPE:
            return "resume"

        if key in (pygame.K_UP, pygame.K_w):
            self.selected_index = (self.selected_index - 1) % len(self.options)
            return None

        if key in (pygame.K_DOWN, pygame.K_s):
            self.selected_index = (self.selected_index + 1) % len(self.options)
            return None

        if key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER):
            option_id, _ = self.options[self.selected_index]
            return option_id

        return None

    def draw(self) -> None:
        """Draw the pause menu screen (semi-transparent overlay)."""
        if self._fonts is None:
            self._fonts = (
                pygame.font.SysFont("consolas", 32),
                pygame.font.SysFont("consolas", 24),
                pygame.font.SysFont("consolas", 18),
            )
        font_title, font_main, font_small = self._fonts
        w, h = self.screen.get_size()

        overlay = pygame.Surface((w, h))
        overlay.set_alpha(200)
        overlay.fill((0, 0, 0))
        self.screen.blit(overlay, (0, 0))

        title_surf = font_title.render("PAUSED", True, (255, 255, 210))
        self.screen.blit(title_surf, (w // 2 - title_surf.get_width() // 2, 120))

        menu_start_y = h // 2 - 80
        option_spacing = 50

        for idx, (_, option_text) in enumerate(self.options):
            is_selected = (idx == self.selected_index)
            y = menu_start_y + idx * option_spacing

            if is_selected:
                pygame.draw.circle(self.screen, (255, 255, 200), (w // 2 - 250, y + 12), 6)

            color = (255, 255, 210) if is_selected else (180, 180, 180)
            text_surf = font_main.render(option_text, True, color)
            self.screen.blit(text_surf, (w // 2 - text_surf.get_width() // 2, y))

        hint_surf = font_small.render("↑/↓: Navigate   Enter: Select   Esc: Resume", True, (150, 150, 150))
        self.screen.blit(hint_surf, (w // 2 - hint_surf.get_width() // 2, h - 60))


class ModOptionsScene:
    """
    Options screen for the forced exit mod.

    Every change is written straight to the options file. New values are
    read by the next save check; the in-game clock toggle applies the next
    time the meter bar is created.
    """

    CLOCK_FORMATS: List[ClockFormat] = list(ClockFormat)

    def __init__(self, screen: pygame.Surface) -> None:
        self.screen = screen
        self.font_title = pygame.font.SysFont("consolas", 32)
        self.font_main = pygame.font.SysFont("consolas", 20)
        self.font_small = pygame.font.SysFont("consolas", 16)

        self.rows = [
            ("exit_after_enabled", "Exit after (enable)"),
            ("exit_after_hours", "Exit after (hours)"),
            ("exit_at_enabled", "Exit at (enable)"),
            ("exit_at_hour", "Exit at (hour of day)"),
            ("clock_format", "Clock format"),
            ("ingame_clock_enabled", "In-game clock"),
            ("back", "Back"),
        ]
        self.descriptions = {
            "exit_after_enabled": "When enabled, exit after a certain number of hours played.",
            "exit_after_hours": "Force your game to save and exit after this many hours.",
            "exit_at_enabled": "When enabled, exit at a certain time of day.",
            "exit_at_hour": "Force your game to save and exit at this time of day (0 is midnight).",
            "clock_format": "How times are shown in the clock and its tooltip.",
            "ingame_clock_enabled": "Show the current time in the meter bar.",
        }
        self.selected_index = 0

    def run(self) -> None:
        """Main loop for the options screen. Returns when the player backs out."""
        clock = pygame.time.Clock()

        while True:
            clock.tick(FPS)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return

                if event.type == pygame.KEYDOWN:
                    if self.handle_keydown(event) == "back":
                        return

            self.draw()
            pygame.display.flip()

    def handle_keydown(self, event: pygame.event.Event) -> Optional[str]:
        """Handle key presses. Returns "back" when the screen should close."""
        key = event.key

        if key == pygame.K_ESCAPE:
            return "back"

        if key in (pygame.K_UP, pygame.K_w):
            self.selected_index = (self.selected_index - 1) % len(self.rows)
            return None

        if key in (pygame.K_DOWN, pygame.K_s):
            self.selected_index = (self.selected_index + 1) % len(self.rows)
            return None

        option_id, _ = self.rows[self.selected_index]

        if key in (pygame.K_LEFT, pygame.K_a):
            self._adjust(option_id, -1)
        elif key in (pygame.K_RIGHT, pygame.K_d):
            self._adjust(option_id, +1)
        elif key in (pygame.K_RETURN, pygame.K_SPACE, pygame.K_KP_ENTER):
            if option_id == "back":
                return "back"
            self._adjust(option_id, +1)

        return None

    def _adjust(self, option_id: str, step: int) -> None:
        """Change one option by `step` and save."""
        config = get_config()

        if option_id in ("exit_after_enabled", "exit_at_enabled", "ingame_clock_enabled"):
            setattr(config, option_id, not getattr(config, option_id))
        elif option_id == "exit_after_hours":
            low, high = EXIT_AFTER_LIMITS
            config.exit_after_hours = max(low, min(high, config.exit_after_hours + step))
        elif option_id == "exit_at_hour":
            low, high = EXIT_AT_LIMITS
            # Hour of day wraps around midnight
            config.exit_at_hour = (config.exit_at_hour + step - low) % (high - low + 1) + low
        elif option_id == "clock_format":
            idx = self.CLOCK_FORMATS.index(config.clock_format)
            config.clock_format = self.CLOCK_FORMATS[(idx + step) % len(self.CLOCK_FORMATS)]
        else:
            return

        save_config()

    def _value_text(self, option_id: str) -> str:
        config = get_config()
        value = getattr(config, option_id, None)
        if isinstance(value, bool):
            return "On" if value else "Off"
        if isinstance(value, ClockFormat):
            return value.value
        if value is None:
            return ""
        return str(value)

    def draw(self) -> None:
        """Draw the options screen."""
        self.screen.fill(COLOR_BG)
        w, h = self.screen.get_size()

        title_surf = self.font_title.render("Forced Exit Options", True, (255, 255, 210))
        self.screen.blit(title_surf, (w // 2 - title_surf.get_width() // 2, 40))

        menu_start_y = h // 2 - 160
        option_spacing = 44

        for idx, (option_id, label) in enumerate(self.rows):
            is_selected = (idx == self.selected_index)
            y = menu_start_y + idx * option_spacing

            if is_selected:
                pygame.draw.circle(self.screen, (255, 255, 200), (w // 2 - 300, y + 10), 6)

            color = (255, 255, 210) if is_selected else (180, 180, 180)
            value = self._value_text(option_id)
            display_text = f"{label}: {value}" if value else label
            text_surf = self.font_main.render(display_text, True, color)
            self.screen.blit(text_surf, (w // 2 - text_surf.get_width() // 2, y))

        option_id, _ = self.rows[self.selected_index]
        description = self.descriptions.get(option_id, "")
        if description:
            desc_surf = self.font_small.render(description, True, (170, 170, 200))
            self.screen.blit(desc_surf, (w // 2 - desc_surf.get_width() // 2, h - 80))

        hint_surf = self.font_small.render("←/→: Adjust   ↑/↓: Navigate   Esc: Back", True, (150, 150, 150))
        self.screen.blit(hint_surf, (w // 2 - hint_surf.get_width() // 2, h - 40))
