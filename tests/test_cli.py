from pathlib import Path

import pytest

import apps.cli.run as cli
from apps.cli.run import main
from script.make_corpus import extract_words, unique_preserve_order

WORDS = ["crane", "raise", "stare", "trace", "cared", "taken", "tater", "token", "slate"]


def _corpus(tmp_path: Path) -> Path:
    p = tmp_path / "words_5.txt"
    p.write_text("\n".join(WORDS) + "\n", encoding="utf-8")
    return p


def test_cli_bot_run(tmp_path, capsys):
    corpus = _corpus(tmp_path)
    main(["--corpus", str(corpus), "--strategies", "first_candidate",
          "--goals", "taken", "slate", "--progress", "off"])
    out = capsys.readouterr().out
    assert "Loaded corpus: 9 words" in out
    assert "first_candidate | games=2 wins=2 (100.0%)" in out


def test_cli_all_bots_random_goals_with_outputs(tmp_path, capsys):
    corpus = _corpus(tmp_path)
    outdir = tmp_path / "reports"
    main(["--corpus", str(corpus), "--strategies", "ALL", "--games", "3",
          "--progress", "plain", "--outdir", str(outdir)])
    out = capsys.readouterr().out
    for sid in ("first_candidate", "letter_freq", "linear_scan"):
        assert f"{sid} | games=3" in out
        assert len(list((outdir / sid).glob("run_*.csv"))) == 1
        assert len(list((outdir / sid).glob("run_*_manifest.json"))) == 1
    assert "interactive |" not in out


def test_cli_goal_file(tmp_path, capsys):
    corpus = _corpus(tmp_path)
    goals = tmp_path / "goals.txt"
    goals.write_text("crane\ntater\ntoken\n", encoding="utf-8")
    main(["-c", str(corpus), "-s", "letter_freq", "-g", str(goals), "--progress", "off"])
    assert "letter_freq | games=3 wins=3" in capsys.readouterr().out


def test_cli_interactive_game(tmp_path, capsys, monkeypatch):
    corpus = _corpus(tmp_path)
    guesses = iter(["crane", "taken"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(guesses))
    main(["-c", str(corpus), "-s", "interactive", "-g", "taken"])
    out = capsys.readouterr().out
    assert "New goal word selected" in out
    assert "--ane (0 letters in the correct place)" in out
    assert "Success!" in out


def test_cli_interactive_stops_on_eof(tmp_path, capsys, monkeypatch):
    corpus = _corpus(tmp_path)

    def _eof(prompt=""):
        raise EOFError

    monkeypatch.setattr("builtins.input", _eof)
    main(["-c", str(corpus), "-s", "interactive", "-n", "2"])
    out = capsys.readouterr().out
    assert "Stopped." in out
    assert "interactive | games=0" in out


def test_cli_missing_corpus(tmp_path, capsys):
    main(["--corpus", str(tmp_path / "nope.txt"), "--strategies", "linear_scan"])
    assert "Cannot load word list" in capsys.readouterr().out


def test_cli_empty_corpus(tmp_path, capsys):
    p = tmp_path / "empty.txt"
    p.write_text("", encoding="utf-8")
    main(["--corpus", str(p), "--strategies", "linear_scan"])
    assert "Cannot start" in capsys.readouterr().out


def test_make_corpus_helpers():
    lines = ["Crane", "it", "slate", "crane", "cafés", "ab-cd", "slate"]
    words = extract_words(lines, 5)
    assert words == ["crane", "slate", "crane", "slate"]
    assert unique_preserve_order(words) == ["crane", "slate"]


def test_cli_unknown_strategy_is_printed(tmp_path, capsys):
    corpus = _corpus(tmp_path)
    main(["-c", str(corpus), "-s", "first_candidate", "no_such_bot"])
    out = capsys.readouterr().out
    assert "Unknown strategy ids: ['no_such_bot']" in out
    assert "Loaded corpus" not in out


def test_cli_ctrl_c_stops_a_bot_run(tmp_path, monkeypatch):
    corpus = _corpus(tmp_path)

    def _interrupt(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_goal", _interrupt)
    with pytest.raises(KeyboardInterrupt):
        main(["-c", str(corpus), "-s", "linear_scan", "first_candidate",
              "-g", "taken", "--progress", "off"])


def test_cli_ctrl_c_ends_interactive_play(tmp_path, capsys, monkeypatch):
    corpus = _corpus(tmp_path)

    def _interrupt(prompt=""):
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", _interrupt)
    main(["-c", str(corpus), "-s", "interactive", "-g", "taken"])
    out = capsys.readouterr().out
    assert "Stopped." in out
    assert "interactive | games=0" in out


def test_cli_interactive_shows_feedback_for_last_try(tmp_path, capsys, monkeypatch):
    corpus = _corpus(tmp_path)
    monkeypatch.setattr("builtins.input", lambda prompt="": "crane")
    main(["-c", str(corpus), "-s", "interactive", "-g", "taken", "--max-tries", "1"])
    out = capsys.readouterr().out
    assert "       --ane (0 letters in the correct place)" in out
    assert out.index("--ane") < out.index("Out of tries. The word was taken.")
