import pytest

from gridttt.config import DEFAULT_CONFIG_PATH, EngineConfig, load_config
from gridttt.core import InvalidConfig


def test_default_config_loads() -> None:
    config = load_config()
    assert config.win_condition == 5
    assert config.min_grid_width == 2
    assert config.min_players == 2
    assert config.screen_length == 80
    assert config.square_width == 5
    assert len(config.pieces) == 16
    assert config.pieces[:2] == ("X", "O")
    assert config.max_grid_width == 16
    assert "invalid_choice" in config.messages


def test_messages_are_read_only() -> None:
    config = load_config()
    with pytest.raises(TypeError):
        config.messages["welcome"] = "hi"


def test_message_formatting() -> None:
    config = load_config()
    assert "3 matches" in config.message("welcome", win_condition=3)
    with pytest.raises(InvalidConfig):
        config.message("no_such_message")


def test_overrides_replace_settings() -> None:
    config = load_config(win_condition=2, square_width=None)
    assert config.win_condition == 2
    assert config.square_width == 5


def test_custom_file(tmp_path) -> None:
    path = tmp_path / "small.yaml"
    path.write_text(
        "settings:\n"
        "  win_condition: 1\n"
        "  pieces: [A, B, C]\n"
        "messages:\n"
        "  tie: Draw\n"
    )
    config = load_config(path)
    assert config.win_condition == 1
    assert config.pieces == ("A", "B", "C")
    assert config.message("tie") == "Draw"


def test_unknown_setting_is_rejected(tmp_path) -> None:
    path = tmp_path / "bad.yaml"
    path.write_text("settings:\n  board_colour: red\n")
    with pytest.raises(InvalidConfig):
        load_config(path)


def test_malformed_file_is_rejected(tmp_path) -> None:
    path = tmp_path / "broken.yaml"
    path.write_text("settings: [unclosed\n")
    with pytest.raises(InvalidConfig):
        load_config(path)
    with pytest.raises(InvalidConfig):
        load_config(tmp_path / "missing.yaml")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"win_condition": 0},
        {"min_grid_width": 1},
        {"min_players": 1},
        {"pieces": ("X", "X")},
        {"pieces": ("XO", "A")},
        {"pieces": tuple("ABCDEFGHIJKLMNOPQ")},
        {"pieces": ("X",)},
    ],
)
def test_invalid_settings(kwargs) -> None:
    with pytest.raises(InvalidConfig):
        EngineConfig(**kwargs)


def test_default_path_exists() -> None:
    assert DEFAULT_CONFIG_PATH.exists()
