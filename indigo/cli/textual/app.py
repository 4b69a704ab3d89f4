"""Textual-powered interactive Indigo interface."""

from __future__ import annotations

import random
from contextlib import suppress
from typing import Sequence

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from textual import events, on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widgets import Footer, Header, OptionList, Static
from textual.widgets.option_list import Option

from ...engine import IndigoGame, InputKind, InputRequest
from ...events import GameEvent, Scoreboard
from ...state import GameConfig, Side
from ..render import TITLE, describe_event, format_card, format_hand

MAX_EVENT_LINES = 18


class EventLog(Static):
    """Simple rolling log rendered inside a panel."""

    lines: reactive[tuple[str, ...]] = reactive((), init=False)

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh()

    def add(self, message: str) -> None:
        log = list(self.lines)
        log.append(message)
        self.lines = tuple(log[-MAX_EVENT_LINES:])

    def watch_lines(self, value: tuple[str, ...]) -> None:
        self._refresh(value)

    def _refresh(self, lines: tuple[str, ...] | None = None) -> None:
        content = Table.grid(padding=(0, 1))
        content.expand = True
        content.add_column(justify="left")
        rows = lines if lines is not None else self.lines
        if rows:
            for line in rows:
                content.add_row(Text.from_markup(line))
        else:
            content.add_row(Text.from_markup("[dim]Event log will appear here[/dim]"))
        self.update(Panel(content, title="Events", border_style="magenta"))


class InfoPanel(Static):
    """Reusable wrapper that expects ``update_panel`` calls with Rich renderables."""

    def update_panel(self, title: str, body) -> None:
        self.update(Panel(body, title=title, border_style="cyan"))


class ScorePanel(Static):
    """Displays the running score."""

    def update_scores(self, board: Scoreboard) -> None:
        table = Table(box=box.SIMPLE_HEAVY, expand=True)
        table.add_column("Side", justify="left")
        table.add_column("Points", justify="right")
        table.add_column("Cards", justify="right")
        table.add_row(Side.HUMAN.label, str(board.human_points), str(board.human_cards))
        table.add_row(Side.COMPUTER.label, str(board.computer_points), str(board.computer_cards))
        title = "Final Score" if board.final else "Score"
        self.update(Panel(table, title=title, border_style="bright_blue"))


class StatusStrip(Static):
    """Single line status helper."""

    message: reactive[str] = reactive("", init=False)

    def watch_message(self, value: str) -> None:
        self.update(Panel(Text.from_markup(value or "[dim]Ready[/dim]"), border_style="green"))


class ActionPalette(OptionList):
    """Interactive list used for the first-player and card choices."""

    class Choice(Message):
        def __init__(self, index: int) -> None:
            super().__init__()
            self.index = index

    def __init__(self, entries: Sequence[str]) -> None:
        options = [
            Option(f"[bold]{idx + 1}[/bold] {entry}", id=str(idx))
            for idx, entry in enumerate(entries)
        ]
        super().__init__(*options)
        if options:
            self.highlighted = 0

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:  # pragma: no cover - Textual glue
        event.stop()
        option_id = event.option.id
        if option_id is None:
            return
        self.post_message(self.Choice(int(option_id)))

    def on_key(self, event: events.Key) -> None:  # pragma: no cover - driven by UI interaction
        if event.key.isdigit() and event.key != "0":
            index = int(event.key) - 1
            if 0 <= index < self.option_count:
                self.highlighted = index
                self.post_message(self.Choice(index))
                event.stop()


def palette_entries(game: IndigoGame, request: InputRequest) -> list[str]:
    """Return the option labels offered for ``request``; the last one exits."""

    if request.kind is InputKind.FIRST_PLAYER:
        return ["Yes, I play first", "No, the computer plays first", "Exit"]
    hand = game.state.player(Side.HUMAN).hand
    return [format_card(card) for card in hand] + ["Exit"]


def apply_choice(game: IndigoGame, request: InputRequest, index: int) -> None:
    """Translate a palette selection into the matching engine call."""

    if request.kind is InputKind.FIRST_PLAYER:
        if index == 0:
            game.choose_first(True)
        elif index == 1:
            game.choose_first(False)
        else:
            game.exit()
        return
    if index >= request.hand_size:
        game.exit()
    else:
        game.play_card(index + 1)


class IndigoTextualApp(App):
    """Textual Indigo game UI."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    #main {
        layout: horizontal;
        height: 1fr;
        width: 1fr;
    }

    #left, #right {
        layout: vertical;
        width: 1fr;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }

    #actions {
        layout: vertical;
        min-height: 6;
    }

    ActionPalette {
        border: heavy $accent;
        padding: 1 1;
        width: 100%;
        height: auto;
        max-height: 12;
    }

    InfoPanel, EventLog, ScorePanel {
        width: 100%;
        min-height: 5;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        seed = config.seed
        if seed is None:
            seed = random.SystemRandom().randrange(0, 2**63)
        self.seed = seed
        self.game = IndigoGame(
            rng=random.Random(seed),
            sink=self._on_game_event,
            human_first=config.human_first,
        )
        self._active_palette: ActionPalette | None = None

        # Widgets initialised in compose
        self.status_strip: StatusStrip | None = None
        self.table_panel: InfoPanel | None = None
        self.hand_panel: InfoPanel | None = None
        self.event_log: EventLog | None = None
        self.score_panel: ScorePanel | None = None
        self.actions_container: Vertical | None = None
        self.action_prompt: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        self.status_strip = StatusStrip(id="status")
        yield self.status_strip

        self.table_panel = InfoPanel(id="table")
        self.hand_panel = InfoPanel(id="hand")
        self.table_panel.update_panel("Table", Text.from_markup("[dim]Dealing…[/dim]"))
        self.hand_panel.update_panel("Your Hand", Text.from_markup("[dim]Waiting…[/dim]"))
        self.action_prompt = Static(Text.from_markup("[dim]Waiting for turn…[/dim]"), id="actions-prompt")
        self.actions_container = Vertical(self.action_prompt, id="actions")
        left = Vertical(self.table_panel, self.hand_panel, self.actions_container, id="left")

        self.event_log = EventLog(id="events")
        self.score_panel = ScorePanel(id="scores")
        self.score_panel.update_scores(self.game.scoreboard())
        right = Vertical(self.event_log, self.score_panel, id="right")

        yield Horizontal(left, right, id="main")
        yield Footer()

    async def on_mount(self) -> None:
        self.title = f"{TITLE} • seed {self.seed}"
        await self._pump()

    def _on_game_event(self, event: GameEvent) -> None:
        if self.event_log:
            for line in describe_event(event):
                if line:
                    self.event_log.add(line)
        if isinstance(event, Scoreboard) and self.score_panel:
            self.score_panel.update_scores(event)

    def _set_status(self, message: str) -> None:
        if self.status_strip:
            self.status_strip.message = message

    def _refresh_ui(self) -> None:
        state = self.game.state
        if self.table_panel:
            top = state.top_card
            if top is None:
                body = Text("No cards on the table")
            else:
                body = Text.from_markup(
                    f"{len(state.table)} cards on the table, top card {format_card(top)}\n"
                    f"[dim]{len(state.deck)} card(s) left in the deck[/dim]"
                )
            self.table_panel.update_panel("Table", body)
        if self.hand_panel:
            hand = state.player(Side.HUMAN).hand
            markup = format_hand(hand) if hand else "[dim]empty[/dim]"
            self.hand_panel.update_panel("Your Hand", Text.from_markup(markup))

    async def _pump(self) -> None:
        request = self.game.advance()
        self._refresh_ui()
        if request is None:
            await self._dismiss_palette()
            self._set_status("[green]Game over.[/green] Press [bold]Q[/bold] to quit.")
            return
        if request.kind is InputKind.FIRST_PLAYER:
            prompt = "Play first?"
        else:
            prompt = f"Choose a card to play (1-{request.hand_size})"
        self._set_status(f"[yellow]{prompt}[/yellow]")
        await self._mount_palette(ActionPalette(palette_entries(self.game, request)), prompt)

    async def _mount_palette(self, palette: ActionPalette, prompt: str) -> None:
        await self._dismiss_palette()
        self._active_palette = palette
        if self.actions_container is not None:
            if self.action_prompt:
                self.action_prompt.update(
                    Text.from_markup(f"[bold]{prompt}[/bold]: use arrows or number keys")
                )
            await self.actions_container.mount(palette)
            palette.focus()

    async def _dismiss_palette(self) -> None:
        palette = self._active_palette
        if palette is None:
            return
        self._active_palette = None
        with suppress(Exception):  # pragma: no cover - widget may already be gone
            await palette.remove()
        if self.action_prompt:
            self.action_prompt.update(Text.from_markup("[dim]Waiting for turn…[/dim]"))

    @on(ActionPalette.Choice)
    def _on_palette_choice(self, message: ActionPalette.Choice) -> None:
        message.stop()
        self.run_worker(self._handle_choice(message.index), group="input", exclusive=True)

    async def _handle_choice(self, index: int) -> None:
        request = self.game.pending
        if request is None:
            return
        entries = palette_entries(self.game, request)
        if not 0 <= index < len(entries):
            return
        await self._dismiss_palette()
        apply_choice(self.game, request, index)
        await self._pump()


def run_textual_app(config: GameConfig) -> None:
    """Launch the full-screen Indigo interface."""

    IndigoTextualApp(config).run()
