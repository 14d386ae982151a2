from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence


@dataclass(eq=False)
class Player:
    number: int  # sequence number within its kind (human 0, human 1, ..., AI 0, ...)
    piece: str
    human: bool = True
    name: str = ""
    score: int = 0

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"{'Human' if self.human else 'AI'} {self.number}"

    @property
    def kind(self) -> str:
        return "human" if self.human else "ai"

    def __repr__(self) -> str:
        return f"Player({self.name!r}, piece={self.piece!r}, score={self.score})"


class PlayerRoster:
    """Fixed sequence of players viewed from a movable start offset.

    ``rotate(1)`` sends the head to the back; ``rotate(-k)`` undoes
    ``rotate(k)``. The underlying tuple never changes.
    """

    def __init__(self, players: Iterable[Player]) -> None:
        self._players = tuple(players)
        if not self._players:
            raise ValueError("A roster needs at least one player.")
        self._offset = 0

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.order())

    def __getitem__(self, position: int) -> Player:
        return self._players[(self._offset + position) % len(self._players)]

    @property
    def head(self) -> Player:
        return self[0]

    @property
    def offset(self) -> int:
        return self._offset

    def rotate(self, steps: int = 1) -> None:
        self._offset = (self._offset + steps) % len(self._players)

    def rotated(self, steps: int) -> List[Player]:
        start = (self._offset + steps) % len(self._players)
        return list(self._players[start:] + self._players[:start])

    def order(self) -> List[Player]:
        return self.rotated(0)

    @property
    def players(self) -> Sequence[Player]:
        """Players in creation order, regardless of rotation."""
        return self._players
