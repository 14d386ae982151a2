from scripts.evaluate_ai import main as evaluate_main
from scripts.play import main as play_main


def test_play_rejects_bad_config(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("settings:\n  win_condition: 0\n")
    assert play_main(["--config", str(path)]) == 2


def test_play_says_goodbye_on_end_of_input(monkeypatch, capsys):
    def no_input(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert play_main(["--no-clear", "--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert "Welcome" in out
    assert "Goodbye!" in out


def test_evaluate_script_prints_summary(capsys):
    assert evaluate_main(["heuristic", "random", "--series", "2", "--win-condition", "1", "--seed", "3"]) == 0
    out = capsys.readouterr().out
    assert '"series": 2' in out
