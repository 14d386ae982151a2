"""Console input and rendering for the grid game."""

from __future__ import annotations

import os
from typing import Callable, List, Optional, Sequence, Tuple

from gridttt.config import EngineConfig
from gridttt.core import BoardState, MatchResult, Player

PAD_CHAR = " "
GRID_VERT_CHAR = "|"
GRID_HORZ_CHAR = "_"
CURRENT_MARKER = "<="


def joinor(items: Sequence[object], delim: str = ", ", last: str = "or") -> str:
    """Join items for a prompt: ``1, 2, 3 or 4``; two items read ``1 or 2``."""
    words = [str(item) for item in items]
    if not words:
        return ""
    if len(words) == 1:
        return words[0]
    if len(words) == 2:
        delim = " "
    return "".join(word + delim for word in words[:-1]) + f"{last} {words[-1]}"


def clear_screen() -> None:
    os.system("cls" if os.name == "nt" else "clear")


class Prompter:
    """Input collaborator. Implementations re-prompt until the answer is valid."""

    def say(self, msg: str) -> None:
        raise NotImplementedError

    def ask_int(self, msg: str, low: int, high: int) -> int:
        raise NotImplementedError

    def ask_int_from(self, msg: str, options: Sequence[int]) -> int:
        raise NotImplementedError

    def ask_choice(self, msg: str, options: Sequence[str]) -> str:
        raise NotImplementedError

    def ask_piece(self, msg: str, pool: Sequence[str]) -> str:
        raise NotImplementedError

    def confirm(self, msg: str) -> bool:
        raise NotImplementedError

    def pause(self, msg: str) -> None:
        raise NotImplementedError


class Renderer:
    """Read-only presentation of the board and scores."""

    def show_board(self, board: BoardState) -> None:
        raise NotImplementedError

    def show_scores(self, players: Sequence[Player], current: Player) -> None:
        raise NotImplementedError

    def show_match_result(self, player: Player, result: MatchResult) -> None:
        raise NotImplementedError

    def show_winners(self, players: Sequence[Player]) -> None:
        raise NotImplementedError


class NullRenderer(Renderer):
    def show_board(self, board: BoardState) -> None:
        pass

    def show_scores(self, players: Sequence[Player], current: Player) -> None:
        pass

    def show_match_result(self, player: Player, result: MatchResult) -> None:
        pass

    def show_winners(self, players: Sequence[Player]) -> None:
        pass


class ConsolePrompter(Prompter):
    def __init__(
        self,
        config: EngineConfig,
        *,
        input_fn: Optional[Callable[[str], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.config = config
        self._input = input_fn or input
        self._output = output_fn or print

    def say(self, msg: str) -> None:
        self._output(f"=> {msg}")

    def _read(self) -> str:
        return self._input("").strip()

    def _invalid(self) -> None:
        self.say(self.config.message("invalid_choice"))

    def ask_int(self, msg: str, low: int, high: int) -> int:
        self.say(msg)
        while True:
            raw = self._read()
            if _is_int(raw) and low <= int(raw) <= high:
                return int(raw)
            self._invalid()

    def ask_int_from(self, msg: str, options: Sequence[int]) -> int:
        self.say(msg)
        while True:
            raw = self._read()
            if _is_int(raw) and int(raw) in options:
                return int(raw)
            self._invalid()

    def ask_choice(self, msg: str, options: Sequence[str]) -> str:
        self.say(msg)
        lowered = [option.lower() for option in options]
        while True:
            raw = self._read().lower()
            if raw in lowered:
                return raw
            self._invalid()

    def ask_piece(self, msg: str, pool: Sequence[str]) -> str:
        while True:
            self.say(msg)
            raw = self._read().upper()
            if raw in pool:
                return raw
            self._invalid()

    def confirm(self, msg: str) -> bool:
        while True:
            self.say(msg)
            raw = self._read().lower()
            if raw in ("y", "n"):
                return raw == "y"

    def pause(self, msg: str) -> None:
        raw = ""
        while not raw:
            self.say(msg)
            raw = self._read()


def _is_int(raw: str) -> bool:
    return raw.isdigit() and str(int(raw)) == raw


class ConsoleRenderer(Renderer):
    """Draws the board, the score table and results to the terminal.

    Each square is ``square_width`` characters wide with the piece centred.
    Column numbers are printed above the board and row numbers to the right.
    """

    def __init__(
        self,
        config: EngineConfig,
        *,
        output_fn: Callable[[str], None] = print,
        clear: bool = True,
    ) -> None:
        self.config = config
        self._output = output_fn
        self._clear = clear

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------
    def _pads(self, text: str) -> Tuple[str, str]:
        width = self.config.square_width
        front = PAD_CHAR * ((width - len(text)) // 2)
        back = PAD_CHAR * (width - len(front) - len(text))
        return front, back

    def format_board(self, board: BoardState) -> str:
        width = self.config.square_width
        n = board.size
        blank = (PAD_CHAR * width + GRID_VERT_CHAR) * (n - 1)
        divider = (GRID_HORZ_CHAR * width + GRID_VERT_CHAR) * (n - 1) + GRID_HORZ_CHAR * width

        lines: List[str] = []
        coords = ""
        for col in range(n):
            front, back = self._pads(str(col))
            coords += f"{front}{col}{back} "
        lines.append(coords.rstrip())

        for row, cells in enumerate(board.rows_of_cells()):
            squares = []
            for cell in cells:
                text = cell or PAD_CHAR
                front, back = self._pads(text)
                squares.append(f"{front}{text}{back}")
            lines.append(blank)
            lines.append(GRID_VERT_CHAR.join(squares) + str(row))
            lines.append(divider if row < n - 1 else blank)
        return "\n".join(lines)

    def format_scores(self, players: Sequence[Player], current: Optional[Player]) -> str:
        msg = self.config.messages
        lines = []
        for player in players:
            kind = msg.get("human", "Human") if player.human else msg.get("ai", "AI")
            label = f"({player.piece}) {msg.get('player', 'Player')} {kind} {player.number}"
            line = f"{label.ljust(20)}| {msg.get('score', 'Score:')} {player.score} "
            if player is current:
                line += CURRENT_MARKER
            lines.append(line)
        lines.append("-" * self.config.screen_length)
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Renderer
    # ------------------------------------------------------------------
    def show_board(self, board: BoardState) -> None:
        if self._clear:
            clear_screen()
        self._output(self.format_board(board))
        self._output("")

    def show_scores(self, players: Sequence[Player], current: Player) -> None:
        self._output(self.format_scores(players, current))

    def show_match_result(self, player: Player, result: MatchResult) -> None:
        if result is MatchResult.WIN:
            self._output(f"=> {self._describe(player)} {self.config.message('won_match')}")
        elif result is MatchResult.TIE:
            self._output(f"=> {self.config.message('tie')}")

    def show_winners(self, players: Sequence[Player]) -> None:
        for player in players:
            self._output(f"=> {self._describe(player)} {self.config.message('won_game')}")

    def _describe(self, player: Player) -> str:
        kind = self.config.message("human") if player.human else self.config.message("ai")
        return f"{self.config.message('player')} {kind} {player.number}"
