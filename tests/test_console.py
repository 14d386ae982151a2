import pytest

from gridttt.config import load_config
from gridttt.console import ConsolePrompter, ConsoleRenderer, joinor
from gridttt.core import BoardState, MatchResult, Player


@pytest.fixture
def config():
    return load_config()


def scripted_input(answers):
    answers = iter(answers)
    return lambda prompt="": next(answers)


def test_joinor() -> None:
    assert joinor([]) == ""
    assert joinor([4]) == "4"
    assert joinor([1, 2]) == "1 or 2"
    assert joinor([1, 2, 3, 4]) == "1, 2, 3 or 4"
    assert joinor(["a", "b", "c"], "; ", "and") == "a; b; and c"


def test_format_board_three_by_three(config) -> None:
    board = BoardState(3, config.pieces)
    board.place(0, "X")
    board.place(4, "O")
    renderer = ConsoleRenderer(config, clear=False)

    assert renderer.format_board(board).split("\n") == [
        "  0     1     2",
        "     |     |",
        "  X  |     |     0",
        "_____|_____|_____",
        "     |     |",
        "     |  O  |     1",
        "_____|_____|_____",
        "     |     |",
        "     |     |     2",
        "     |     |",
    ]


def test_format_scores_marks_current_player(config) -> None:
    players = [Player(0, "X", human=True), Player(0, "O", human=False)]
    players[1].score = 2
    text = ConsoleRenderer(config, clear=False).format_scores(players, players[1])
    lines = text.split("\n")

    assert lines[0] == "(X) Player Human 0  | Score: 0 "
    assert lines[1] == "(O) Player AI 0     | Score: 2 <="
    assert lines[2] == "-" * 80


def test_show_results(config) -> None:
    out = []
    renderer = ConsoleRenderer(config, output_fn=out.append, clear=False)
    player = Player(1, "~", human=False)
    renderer.show_match_result(player, MatchResult.WIN)
    renderer.show_match_result(player, MatchResult.TIE)
    renderer.show_winners([player])
    assert out == [
        "=> Player AI 1 won the match!",
        "=> It's a tie!",
        "=> Player AI 1 won the game!",
    ]


def test_ask_int_reprompts_until_in_range(config) -> None:
    out = []
    prompter = ConsolePrompter(config, input_fn=scripted_input(["abc", "9", "-1", " 3 "]), output_fn=out.append)
    assert prompter.ask_int("Pick", 2, 5) == 3
    assert out.count("=> That's not a valid choice.") == 3


def test_ask_int_from_only_accepts_options(config) -> None:
    prompter = ConsolePrompter(config, input_fn=scripted_input(["1", "02", "2"]), output_fn=lambda s: None)
    assert prompter.ask_int_from("Column", [0, 2]) == 2


def test_ask_piece_is_case_insensitive(config) -> None:
    prompter = ConsolePrompter(config, input_fn=scripted_input(["Q", "o"]), output_fn=lambda s: None)
    assert prompter.ask_piece("Piece", ["X", "O"]) == "O"


def test_ask_choice_lowercases(config) -> None:
    prompter = ConsolePrompter(config, input_fn=scripted_input(["maybe", "R"]), output_fn=lambda s: None)
    assert prompter.ask_choice("Who", ["human", "ai", "r"]) == "r"


def test_confirm_and_pause(config) -> None:
    out = []
    prompter = ConsolePrompter(config, input_fn=scripted_input(["x", "N", "", "go"]), output_fn=out.append)
    assert prompter.confirm("Again?") is False
    prompter.pause("Press a key")
    assert out == ["=> Again?", "=> Again?", "=> Press a key", "=> Press a key"]
