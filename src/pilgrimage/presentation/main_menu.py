from rich.console import Console
from rich.panel import Panel

from pilgrimage.application.services.game_service import GameService
from pilgrimage.presentation.game_loop import run_game_loop
from pilgrimage.presentation.menu_controls import arrow_menu, clear_screen


_CONSOLE = Console()
_HELP_BORDER = "cyan"
_EXIT_BORDER = "magenta"

_HELP_LINES = [
    "[bold]How the trail works[/bold]",
    "- Travel covers 15 to 34 miles but costs hunger, warmth and morale.",
    "- Rest restores health and warmth. If hunger drops below 70, Pips eats a fish.",
    "- Forage finds up to three fish at the cost of warmth.",
    "- Blizzards start while travelling and may clear at the start of any turn.",
    "- Encounters pause the journey until you choose how to respond.",
    "- Reach mile 500 to stand on the summit. Let any stat fall to zero and the journey ends.",
    "",
    "[bold]Controls[/bold]",
    "- UP/DOWN (or W/S) to move, ENTER to select, ESC (or Q) to go back.",
]


def main_menu(game_service: GameService) -> None:
    options = ["New Pilgrimage", "Help", "Quit"]

    while True:
        choice_idx = arrow_menu("Pips' Pilgrimage", options)

        if choice_idx == 0:  # New Pilgrimage
            game_service.restart()
            run_game_loop(game_service)

        elif choice_idx == 1:  # Help
            clear_screen()
            _CONSOLE.print(
                Panel.fit(
                    "\n".join(_HELP_LINES),
                    title="[bold cyan]Field Guide[/bold cyan]",
                    border_style=_HELP_BORDER,
                )
            )
            _CONSOLE.input("[dim]Press ENTER to return to the menu...[/dim]")
            clear_screen()

        elif choice_idx == 2 or choice_idx == -1:  # Quit or ESC
            clear_screen()
            _CONSOLE.print(
                Panel.fit(
                    "[bold magenta]The colony will tell stories about you.[/bold magenta]",
                    title="[bold cyan]Farewell[/bold cyan]",
                    border_style=_EXIT_BORDER,
                )
            )
            break
