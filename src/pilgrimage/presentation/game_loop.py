from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from pilgrimage.presentation.menu_controls import arrow_menu, clear_screen


_CONSOLE = Console()
_BORDER_TRAIL = "cyan"
_BORDER_BLIZZARD = "white"
_BORDER_ENCOUNTER = "magenta"
_BORDER_WIN = "green"
_BORDER_LOSS = "red"
_BORDER_MAP = "blue"

_ACTION_LABELS = {
    "travel": "Travel onward",
    "rest": "Rest and recover",
    "forage": "Forage for fish",
}


def _ornate_title(title: str) -> str:
    core = str(title or "").strip() or "Panel"
    return f"[bold cyan]{core}[/bold cyan]"


def _prompt_continue(message: str = "Press ENTER to continue...") -> None:
    _CONSOLE.input(f"[dim]{message}[/dim]")
    clear_screen()


def _stat_bar(value: int, width: int = 20) -> str:
    filled = max(0, min(width, round(width * value / 100)))
    colour = "green" if value > 60 else "yellow" if value >= 30 else "red"
    return f"[{colour}]{'█' * filled}[/{colour}][dim]{'░' * (width - filled)}[/dim] {value:>3}"


def _render_message_panel(title: str, lines: list[str], *, border_style: str = _BORDER_TRAIL) -> None:
    rows = [str(line) for line in lines if str(line).strip()]
    _CONSOLE.print(
        Panel.fit(
            "\n".join(rows) if rows else "The wind carries no news.",
            title=_ornate_title(title),
            border_style=border_style,
        )
    )


def _render_trail_header(view) -> None:
    header = Table.grid(padding=(0, 1))
    header.add_column(style="bold cyan", justify="right")
    header.add_column(style="white")
    header.add_row("Journey", view.journey_title)
    header.add_row("Day", str(view.day))
    header.add_row("Distance", f"{view.distance}/{view.target_distance} miles ({view.progress_percent}%)")
    header.add_row("Terrain", view.band_label)
    header.add_row("Weather", "[bold white]Blizzard[/bold white]" if view.is_blizzard else "Cold and clear")
    header.add_row("Health", _stat_bar(view.health))
    header.add_row("Hunger", _stat_bar(view.hunger))
    header.add_row("Warmth", _stat_bar(view.warmth))
    header.add_row("Morale", _stat_bar(view.morale))
    header.add_row("Fish", str(view.fish))
    _CONSOLE.print(
        Panel.fit(
            header,
            title=_ornate_title("Pips' Pilgrimage"),
            subtitle=f"[dim]{view.journey_flavor}[/dim]",
            subtitle_align="left",
            border_style=_BORDER_BLIZZARD if view.is_blizzard else _BORDER_TRAIL,
        )
    )
    _render_message_panel("Chronicle", [view.last_message])


def _render_markers(view) -> None:
    if not view.markers:
        _render_message_panel("Trail Map", ["No markers placed yet."], border_style=_BORDER_MAP)
        return
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Mile", justify="right")
    table.add_column("Label")
    table.add_column("Type")
    for marker in view.markers:
        label = f"{marker.label} [dim](landmark)[/dim]" if marker.landmark else marker.label
        table.add_row(str(marker.distance), label, marker.type)
    _CONSOLE.print(Panel.fit(table, title=_ornate_title("Trail Map"), border_style=_BORDER_MAP))


def _run_encounter(game_service, encounter) -> bool:
    clear_screen()
    _render_message_panel(
        f"{encounter.event_type}: {encounter.title}",
        [encounter.description],
        border_style=_BORDER_ENCOUNTER,
    )
    options = [choice.text for choice in encounter.choices]
    while True:
        selection = arrow_menu(encounter.title, options, footer_hint="The trail will not wait for an answer.")
        if selection == -1:
            return False
        result = game_service.perform_choice(selection)
        if result.accepted:
            clear_screen()
            _render_message_panel("Outcome", list(result.messages or []), border_style=_BORDER_ENCOUNTER)
            _prompt_continue()
            return True


def _render_ending(view) -> bool:
    clear_screen()
    if view.status == "WIN":
        _render_message_panel(
            "The Summit",
            [
                view.last_message,
                f"Pips reached the peak on day {view.day}, {view.distance} miles from the colony.",
            ],
            border_style=_BORDER_WIN,
        )
    else:
        _render_message_panel(
            "The Journey Ends",
            [
                view.last_message,
                f"The snow claims the pilgrim on day {view.day}, {view.distance} miles from the colony.",
            ],
            border_style=_BORDER_LOSS,
        )
    return arrow_menu("What now?", ["Begin Anew", "Return to Menu"]) == 0


def run_game_loop(game_service) -> None:
    while True:
        view = game_service.get_expedition_view()

        if view.status in {"WIN", "GAMEOVER"}:
            if _render_ending(view):
                game_service.restart()
                continue
            return

        if view.encounter is not None:
            if not _run_encounter(game_service, view.encounter):
                return
            continue

        clear_screen()
        _render_trail_header(view)
        actions = game_service.available_actions()
        labels = [_ACTION_LABELS.get(action, action.title()) for action in actions]
        labels.extend(["Place Marker", "View Map", "Leave the Trail"])
        choice = arrow_menu(f"Day {view.day}: Actions", labels)

        if choice == -1 or choice == len(labels) - 1:
            return
        if choice < len(actions):
            game_service.perform_action(actions[choice])
            continue
        if labels[choice] == "Place Marker":
            marker = game_service.add_marker(view.distance)
            clear_screen()
            _render_message_panel("Marker Placed", [f"{marker.label} set at mile {marker.distance}."], border_style=_BORDER_MAP)
            _prompt_continue()
            continue
        clear_screen()
        _render_markers(view)
        _prompt_continue()
