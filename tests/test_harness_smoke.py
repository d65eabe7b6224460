import csv
import json

import pytest
from gtw.engine import GameEngine, GuessRecord
from gtw.harness import run_case, run_goal, run_batch, summarize, pretty_stats
from gtw.harness.io import write_csv, write_manifest, timestamp_id
from gtw.solvers import create_solver
from gtw.solvers.base import BaseSolver

WORDS = ["crane", "raise", "stare", "trace", "cared", "taken", "tater", "token", "slate"]


class RecordingSolver(BaseSolver):
    """Plays the first candidate and keeps every state it was shown."""
    id = "recording"

    def reset(self, **kwargs):
        super().reset(**kwargs)
        self.states = []

    def next_guess(self, state):
        self.states.append(state)
        return state["candidates"][0] if state["candidates"] else "zzzzz"


class ShortWordSolver(BaseSolver):
    id = "short"

    def next_guess(self, state):
        return "abc"


@pytest.mark.parametrize("solver_id", ["first_candidate", "letter_freq"])
def test_bots_solve_small_sets(solver_id):
    engine = GameEngine(WORDS, seed=1)
    for goal in WORDS:
        engine.new_fixed_game(goal)
        r = run_case(create_solver(solver_id), engine, allowed=WORDS, seed=42)
        assert r["success"] is True, (solver_id, goal, r["history"])
        assert r["answer"] == goal
        assert r["history"][-1] == GuessRecord(goal, "+++++")


def test_linear_scan_takes_list_position():
    engine = GameEngine(WORDS)
    engine.new_fixed_game("stare")
    r = run_case(create_solver("linear_scan"), engine, allowed=WORDS)
    assert r["success"] is True and r["guesses"] == 3


def test_exhausting_tries_is_a_loss_not_an_error():
    engine = GameEngine(WORDS)
    engine.new_fixed_game("slate")
    r = run_case(create_solver("linear_scan"), engine, allowed=WORDS, max_tries=2)
    assert r["success"] is False
    assert r["guesses"] == 2
    assert [g for g, _ in r["history"]] == ["crane", "raise"]


def test_state_passed_to_solver():
    solver = RecordingSolver()
    engine = GameEngine(WORDS)
    engine.new_fixed_game("taken")
    r = run_case(solver, engine, allowed=WORDS)
    assert r["success"] is True

    first = solver.states[0]
    assert first["history"] == [] and first["n_correct"] == 0 and first["turn"] == 1
    assert first["candidates"] == WORDS
    # candidates only ever shrink, and each turn sees the previous record
    for prev, cur in zip(solver.states, solver.states[1:]):
        assert set(cur["candidates"]) <= set(prev["candidates"])
        assert len(cur["history"]) == len(prev["history"]) + 1
        g, sig = cur["history"][-1]
        assert cur["n_correct"] == sig.count("+")
        assert g not in cur["candidates"]


def test_solver_state_does_not_leak_between_games():
    solver = RecordingSolver()
    r1 = run_batch(solver, ["taken", "crane"], allowed=WORDS, answers=WORDS, seed=5)
    assert all(r["success"] for r in r1)
    # the second game started from an empty history again
    assert solver.states[0]["history"] == []


def test_goal_outside_word_list_is_lost():
    engine = GameEngine(WORDS)
    engine.new_fixed_game("zebra")
    r = run_case(create_solver("first_candidate"), engine, allowed=WORDS)
    assert r["success"] is False


def test_bad_guess_aborts_only_that_game():
    engine = GameEngine(WORDS)
    r = run_goal(ShortWordSolver(), engine, "crane", allowed=WORDS)
    assert r["success"] is False and "error" in r
    assert r["solver_id"] == "short"


def test_run_batch_smoke():
    results = run_batch(create_solver("letter_freq"), ["crane", "tater"], allowed=WORDS,
                        answers=WORDS, seed=7)
    assert [r["answer"] for r in results] == ["crane", "tater"]
    assert all(r["solver_id"] == "letter_freq" for r in results)
    assert run_batch(create_solver("letter_freq"), [], allowed=WORDS) == []


def test_invalid_max_tries():
    engine = GameEngine(WORDS)
    with pytest.raises(ValueError):
        run_case(create_solver("linear_scan"), engine, allowed=WORDS, max_tries=0)


def test_summarize():
    results = [
        {"success": True, "guesses": 3},
        {"success": True, "guesses": 5},
        {"success": False, "guesses": 6},
        {"success": True, "guesses": 3},
    ]
    s = summarize(results, max_tries=6)
    assert s["games"] == 4 and s["wins"] == 3 and s["losses"] == 1
    assert s["win_rate"] == pytest.approx(0.75)
    assert s["mean_guesses"] == pytest.approx(11 / 3)
    assert s["median_guesses"] == 3.0
    assert s["histogram"] == [0, 0, 2, 0, 1, 0]
    line = pretty_stats(s, label="bot")
    assert line.startswith("bot | games=4 wins=3 (75.0%)")

    empty = summarize([], max_tries=6)
    assert empty["wins"] == 0 and empty["mean_guesses"] is None
    assert "mean=n/a" in pretty_stats(empty)


def test_write_csv_and_manifest(tmp_path):
    results = run_batch(create_solver("first_candidate"), ["taken"], allowed=WORDS)
    path = write_csv(results, str(tmp_path / "out" / "run.csv"), max_tries=6, N=5)
    with open(path, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0]["goal"] == "taken" and rows[0]["solver"] == "first_candidate"
    assert rows[0]["sig_1"].startswith("'")

    mpath = write_manifest({"run_id": timestamp_id(), "stats": summarize(results, 6)},
                           str(tmp_path / "out" / "m.json"))
    with open(mpath, encoding="utf-8") as f:
        assert json.load(f)["stats"]["games"] == 1


def test_write_csv_columns_per_turn(tmp_path):
    engine = GameEngine(WORDS)
    r = run_goal(create_solver("linear_scan"), engine, "taken", allowed=WORDS, max_tries=2)
    path = write_csv([r], str(tmp_path / "run.csv"), max_tries=2, N=5)
    with open(path, newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        row = next(reader)
    assert reader.fieldnames[:7] == ["solver", "N", "goal", "success", "guesses",
                                     "time_ms", "error"]
    assert reader.fieldnames[7:11] == ["guess_1", "sig_1", "shown_1", "correct_1"]
    # crane against taken: a, n and e are present, nothing placed
    assert row["guess_1"] == "crane" and row["sig_1"] == "'##***"
    assert row["shown_1"] == "--ane" and row["correct_1"] == "0"
    assert row["error"] == ""


def test_write_csv_keeps_aborted_game_error(tmp_path):
    engine = GameEngine(WORDS)
    r = run_goal(ShortWordSolver(), engine, "crane", allowed=WORDS)
    path = write_csv([r], str(tmp_path / "run.csv"), max_tries=6, N=5)
    with open(path, newline="", encoding="utf-8") as f:
        row = next(csv.DictReader(f))
    assert row["solver"] == "short" and row["success"] == "False"
    assert "length" in row["error"]
    assert row["guess_1"] == "" and row["shown_1"] == ""
