# apps/cli/run.py
"""
CLI entry point for playing Guess the Word.

This script:
  1) Validates the word lists (prints counts + SHA, checks corpus ⊆ word list).
  2) Loads the corpus (goal pool) and the bots' master word list.
  3) Picks the goals: explicit --goals, or --games random draws from the corpus.
  4) Plays every goal with each requested strategy, with live progress, and
     prints per-strategy statistics.
  5) Optionally writes, per strategy:
       - CSV:  per-game results + guess/signature history columns
       - JSON: manifest with config, stats, word list hashes, git commit

Examples:
    python -m apps.cli.run --corpus data/words_5.txt --strategies interactive
    python -m apps.cli.run --corpus data/words_5.txt --strategies ALL --games 200
    python -m apps.cli.run --corpus data/words_5.txt --strategies letter_freq \
        --goals taken cross --max-tries 6 -v
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
import time
from pathlib import Path
from typing import Dict, List

from tqdm import tqdm

from gtw.datasets import validate_wordlists, pretty_summary, load_corpus
from gtw.engine import EmptyCorpusError, GameEngine, humanize
from gtw.harness import MAX_TRIES, run_goal, summarize, pretty_stats
from gtw.harness.io import write_csv, write_manifest, timestamp_id, git_commit_or_unknown
from gtw.solvers import create_solver, get_solver_ids
from gtw.solvers.interactive import HELP as INTERACTIVE_HELP, feedback_line

logger = logging.getLogger("gtw.cli")

DEFAULT_CORPUS = os.environ.get("GTW_CORPUS", "data/words_5.txt")


def _expand_goals(tokens: List[str]) -> List[str]:
    """
    Each --goals token is either a word or a path to a goal-word file
    (one word per line). Read failures propagate.
    """
    goals: List[str] = []
    for tok in tokens:
        if Path(tok).is_file():
            goals.extend(load_corpus(tok))
        else:
            goals.append(tok.strip().lower())
    return goals


def _expand_strategies(requested: List[str], registered: List[str]) -> List[str]:
    """Resolve ALL and check ids; ValueError names any unknown ones."""
    if len(requested) == 1 and requested[0].lower() == "all":
        # ALL means every bot; a person has to ask for interactive explicitly
        return [s for s in registered if s != "interactive"]
    missing = [s for s in requested if s not in registered]
    if missing:
        raise ValueError(f"Unknown strategy ids: {missing}. Registered: {registered}")
    return requested


def _progress_mode(mode: str, interactive: bool) -> str:
    if interactive:
        return "off"
    if mode == "auto":
        return "bar" if sys.stderr.isatty() else "plain"
    return mode


def _report_game(r: Dict, max_tries: int) -> None:
    """Console lines for one finished game (interactive or verbose)."""
    if r["success"]:
        print(f"\nSuccess! ({r['guesses']} of {max_tries} tries)\n")
    elif "error" in r:
        print(f"\nGame aborted: {r['error']}\n")
    else:
        # the solver is not asked again after the last try, so show its feedback here
        if r["history"]:
            print(feedback_line(*r["history"][-1]))
        print(f"\nOut of tries. The word was {r['answer']}.\n")


def _run_one_strategy(solver_id: str, goals: List[str], *, engine: GameEngine,
                      corpus: List[str], wordlist: List[str], max_tries: int,
                      base_seed: int, progress: str, verbose: bool) -> List[Dict]:
    solver = create_solver(solver_id)
    interactive = solver_id == "interactive"
    mode = _progress_mode(progress, interactive)
    if interactive:
        print(INTERACTIVE_HELP)

    results: List[Dict] = []
    total = len(goals)
    iterator = tqdm(goals, ncols=80, desc=solver_id, unit="game") if mode == "bar" else goals
    start = time.time()
    last_print = 0.0

    try:
        for idx, goal in enumerate(iterator, 1):
            # Derive a per-game seed so runs are reproducible and independent
            per_seed = base_seed + idx * 1013904223
            r = run_goal(solver, engine, goal, allowed=wordlist, answers=corpus,
                         max_tries=max_tries, seed=per_seed)
            results.append(r)

            if interactive:
                _report_game(r, max_tries)
            elif verbose:
                trail = " ".join(humanize(sig, g) for g, sig in r["history"])
                print(f"[{solver_id}] {r['answer']}: {'WIN' if r['success'] else 'LOSS'} "
                      f"in {r['guesses']} | {trail}")

            if mode == "plain":
                now = time.time()
                if (now - last_print >= 1.0) or (idx == total):
                    elapsed = now - start
                    rate = (idx / elapsed) if elapsed > 0 else 0.0
                    remaining = (total - idx) / rate if rate > 0 else 0.0
                    pct = 100.0 * idx / max(1, total)
                    sys.stderr.write(
                        f"\r[{solver_id}] {idx}/{total} {pct:5.1f}% | elapsed {elapsed:6.1f}s "
                        f"| ETA {remaining:5.1f}s")
                    sys.stderr.flush()
                    last_print = now
    except EOFError:
        # input ran out; keep what was played
        print("\nStopped.")
    except KeyboardInterrupt:
        # Ctrl-C ends interactive play; for bots it ends the whole run
        if not interactive:
            raise
        print("\nStopped.")
    finally:
        if mode == "plain":
            sys.stderr.write("\n")
            sys.stderr.flush()

    return results


def _write_outputs(solver_id: str, results: List[Dict], stats: Dict, *, outdir: Path,
                   N: int, max_tries: int, config: Dict, wordlists: Dict) -> None:
    run_id = timestamp_id()
    sdir = outdir / solver_id
    csv_path = sdir / f"run_{run_id}.csv"
    manifest_path = sdir / f"run_{run_id}_manifest.json"

    write_csv(results, str(csv_path), max_tries=max_tries, N=N)
    manifest = {
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": config,
        "wordlists": wordlists,
        "num_cases": len(results),
        "solver_id": solver_id,
        "stats": stats,
    }
    write_manifest(manifest, str(manifest_path))
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")


def build_parser() -> argparse.ArgumentParser:
    registered = get_solver_ids()
    ap = argparse.ArgumentParser(description="gtw: play Guess the Word, by hand or by bot")
    ap.add_argument("-c", "--corpus", default=DEFAULT_CORPUS,
                    help="corpus file the goal words are drawn from (env GTW_CORPUS)")
    ap.add_argument("-w", "--wordlist",
                    help="master word list the bots guess from (default: the corpus)")
    ap.add_argument("-s", "--strategies", nargs="+", default=["interactive"],
                    help=f"strategy ids or 'ALL' (bots only). Registered: {', '.join(registered)}")
    ap.add_argument("-n", "--games", type=int, default=1,
                    help="number of random goals (ignored with --goals)")
    ap.add_argument("-g", "--goals", nargs="+",
                    help="explicit goal words, or paths to goal-word files")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--max-tries", type=int, default=MAX_TRIES, help="per-game guess cap")
    ap.add_argument("--seed", type=int, default=123, help="base RNG seed (for reproducibility)")
    ap.add_argument("--outdir", help="write per-strategy CSV + manifest under this directory")
    ap.add_argument("--progress", choices=["auto", "bar", "plain", "off"], default="auto",
                    help="show run progress (auto=bar on a terminal, else plain text)")
    ap.add_argument("-v", "--verbose", action="store_true",
                    help="per-game lines and debug logging")
    return ap


def main(argv: List[str] | None = None) -> None:
    """
    Parse CLI args, validate and load word lists, play, print statistics.
    Problems with the inputs are printed; the function just returns.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.max_tries < 1 or args.games < 0:
        print("--max-tries must be >= 1 and --games must be >= 0")
        return

    try:
        strategies = _expand_strategies(args.strategies, get_solver_ids())
    except ValueError as e:
        print(e)
        return

    # 1) Validate word lists and print a one-liner summary
    rep = validate_wordlists(args.N, args.corpus, args.wordlist)
    print(pretty_summary(rep))
    for issue in rep["issues"]:
        logger.warning(issue)

    # 2) Load lists (lowercased, no blanks, file order, duplicates kept)
    try:
        corpus = [w for w in load_corpus(args.corpus) if len(w) == args.N]
        wordlist = ([w for w in load_corpus(args.wordlist) if len(w) == args.N]
                    if args.wordlist else list(corpus))
        explicit_goals = _expand_goals(args.goals) if args.goals else None
    except OSError as e:
        print(f"Cannot load word list: {e}")
        return
    print(f"Loaded corpus: {len(corpus)} words")

    try:
        engine = GameEngine(corpus, seed=args.seed)
    except EmptyCorpusError as e:
        print(f"Cannot start: {e}")
        return

    # 3) Goals are shared by every strategy
    goals = explicit_goals if explicit_goals is not None else [
        engine.new_game() for _ in range(args.games)]

    outdir = Path(args.outdir) if args.outdir else None

    # 4) Play
    for sid in strategies:
        if args.progress != "off" and sid != "interactive":
            print(f"\n=== Running {sid} on {len(goals)} goals (N={args.N}) ===")
        results = _run_one_strategy(
            sid, goals, engine=engine, corpus=corpus, wordlist=wordlist,
            max_tries=args.max_tries, base_seed=args.seed, progress=args.progress,
            verbose=args.verbose,
        )
        stats = summarize(results, args.max_tries)
        print(pretty_stats(stats, label=sid))

        # 5) Optional outputs
        if outdir is not None:
            _write_outputs(sid, results, stats, outdir=outdir, N=args.N,
                           max_tries=args.max_tries, config=vars(args), wordlists=rep)


if __name__ == "__main__":
    main()
