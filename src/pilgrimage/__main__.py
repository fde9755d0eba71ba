from pathlib import Path
import logging
import os
import sys

from dotenv import load_dotenv

# Ensure the src directory is on sys.path when running as a script
_SRC_DIR = Path(__file__).resolve().parents[1]
if str(_SRC_DIR) not in sys.path:
    sys.path.insert(0, str(_SRC_DIR))

from pilgrimage.bootstrap import create_game_service
from pilgrimage.presentation.main_menu import main_menu

load_dotenv()


def _print_help_surface() -> None:
    print("\nHelp:")
    print("- Main menu: use UP/DOWN (or W/S), ENTER to select, ESC/Q to go back.")
    print("- On the trail: choose Travel, Rest or Forage; encounters ask for a choice.")
    print("- Remote narration: set PILGRIMAGE_REMOTE_NARRATIVE_ENABLED=0 to play fully offline.")


def _configure_logging() -> None:
    level_name = os.getenv("PILGRIMAGE_LOG_LEVEL", "WARNING").strip().upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    _configure_logging()
    try:
        game_service = create_game_service()
        main_menu(game_service)
    except KeyboardInterrupt:
        print("\nThe trail falls silent. Session ended.")
    except Exception as exc:
        logging.getLogger(__name__).debug("Session aborted", exc_info=True)
        print("An unexpected error occurred. The game closed safely.")
        print(f"Reason: {exc}")
        _print_help_surface()


if __name__ == "__main__":
    main()
