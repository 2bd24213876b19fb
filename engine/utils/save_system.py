"""
Save system for the demo host.

Writes the simulation state to JSON slot files. The host fires the
save completed event only after a successful write.
"""

import json
import time
from pathlib import Path

from engine.error_handler import log_error, SaveError


# Save directory (in project root / saves)
SAVE_DIR = Path(__file__).resolve().parent.parent.parent / "saves"
SAVE_DIR.mkdir(exist_ok=True)


def get_save_path(slot: int = 1) -> Path:
    """Get the file path for a save slot."""
    return SAVE_DIR / f"save_{slot}.json"


def save_game(game, slot: int = 1) -> bool:
    """
    Save the current game state to a file.

    Args:
        game: The Game instance to save
        slot: Save slot number (1-9)

    Returns:
        True if save was successful, False otherwise
    """
    try:
        save_data = {"saved_at": time.time(), "game": game.to_dict()}
        save_path = get_save_path(slot)

        # Write to a temporary file first, then rename (atomic write)
        temp_path = save_path.with_suffix(".tmp")
        with temp_path.open("w", encoding="utf-8") as f:
            json.dump(save_data, f, indent=2, ensure_ascii=False)

        # Atomic rename
        temp_path.replace(save_path)
        return True
    except (OSError, TypeError, ValueError) as e:
        log_error(SaveError(str(e), "Saving failed."), "save_game")
        return False

