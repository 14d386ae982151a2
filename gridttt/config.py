from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from gridttt.core.errors import InvalidConfig

DEFAULT_CONFIG_PATH = Path(__file__).with_name("configs") / "default.yaml"
MAX_PIECES = 16


@dataclass(frozen=True)
class EngineConfig:
    screen_length: int = 80
    win_condition: int = 5
    min_grid_width: int = 2
    min_players: int = 2
    square_width: int = 5
    pieces: Tuple[str, ...] = ("X", "O")
    messages: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def __post_init__(self) -> None:
        if not isinstance(self.messages, MappingProxyType):
            object.__setattr__(self, "messages", MappingProxyType(dict(self.messages)))
        object.__setattr__(self, "pieces", tuple(self.pieces))
        validate_config(self)

    @property
    def max_grid_width(self) -> int:
        return len(self.pieces)

    def message(self, key: str, **kwargs: Any) -> str:
        try:
            text = self.messages[key]
        except KeyError as exc:
            raise InvalidConfig(f"Message {key!r} is missing from the message table.") from exc
        return text.format(**kwargs) if kwargs else text


def validate_config(config: EngineConfig) -> None:
    if config.win_condition < 1:
        raise InvalidConfig("win_condition must be at least 1.")
    if config.min_grid_width < 2:
        raise InvalidConfig("min_grid_width must be at least 2.")
    if config.min_players < 2:
        raise InvalidConfig("min_players must be at least 2.")
    if config.square_width < 1:
        raise InvalidConfig("square_width must be at least 1.")
    if len(config.pieces) > MAX_PIECES:
        raise InvalidConfig(f"At most {MAX_PIECES} pieces are supported.")
    if any(not isinstance(piece, str) or len(piece) != 1 for piece in config.pieces):
        raise InvalidConfig("Pieces must be single characters.")
    if len(set(config.pieces)) != len(config.pieces):
        raise InvalidConfig("Pieces must be distinct.")
    if config.min_grid_width > len(config.pieces):
        raise InvalidConfig("There are fewer pieces than the minimum grid width.")


def load_config(path: Optional[Union[str, Path]] = None, **overrides: Any) -> EngineConfig:
    """Load settings and messages from a YAML file.

    Keyword overrides replace individual settings after the file is read,
    e.g. ``load_config(win_condition=3)``.
    """
    cfg_path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    try:
        raw = yaml.safe_load(cfg_path.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise InvalidConfig(f"Cannot read config file {cfg_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise InvalidConfig(f"Malformed config file {cfg_path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidConfig(f"Config file {cfg_path} must contain a mapping.")

    settings: Dict[str, Any] = dict(raw.get("settings") or {})
    known = {f.name for f in fields(EngineConfig)} - {"messages"}
    unknown = set(settings) - known
    if unknown:
        raise InvalidConfig(f"Unknown settings: {', '.join(sorted(unknown))}")

    messages = {str(k): str(v) for k, v in (raw.get("messages") or {}).items()}
    config = EngineConfig(messages=messages, **settings)
    overrides = {k: v for k, v in overrides.items() if v is not None}
    return replace(config, **overrides) if overrides else config
