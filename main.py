import sys
from pathlib import Path

import pygame

from settings import WINDOW_WIDTH, WINDOW_HEIGHT, TITLE
from engine.host import PygameHost
from engine.mod import ForcedExitMod
from telemetry.logger import telemetry


def main() -> None:
    pygame.init()
    pygame.display.set_caption(TITLE)

    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))

    telemetry.init(Path(__file__).resolve().parent / "logs" / "telemetry.jsonl")

    host = PygameHost(screen)

    # Mods load before the first screen is built
    mod = ForcedExitMod(host, host.events)
    mod.on_load()

    host.run()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
