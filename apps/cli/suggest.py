# apps/cli/suggest.py
"""
Suggest the next guess for a live game.

One-shot mode reads a GuessState in list form (JSON file, or '-' for
stdin) and prints the best next word:

    python -m apps.cli.suggest --lexicon data/lexicon.txt --state state.json
    echo '{"correct": [{"letter": "e", "position": 4}], "absent": ["s"]}' | \
        python -m apps.cli.suggest --lexicon data/lexicon.txt --state - --top 5

Interactive mode keeps the state itself. Each prompt takes the word that
was played and the pattern the game showed (G = green, Y = yellow,
- = gray); an empty line quits:

    python -m apps.cli.suggest --lexicon data/lexicon.txt --interactive
    > raise -Y--G

Exit codes: 0 ok, 1 bad input, 2 no candidates left.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from packages.datasets import load_commonality, load_lexicon
from packages.engine import (
    ALL_GREEN, EngineError, GuessState, NoCandidatesRemaining, WordSolver,
)
from packages.scorers import create_scorer, get_scorer_ids

log = logging.getLogger("suggest")

EXIT_OK, EXIT_BAD_INPUT, EXIT_NO_CANDIDATES = 0, 1, 2


def _read_state(src: str | None) -> GuessState:
    if not src:
        return GuessState()
    if src == "-":
        data = json.load(sys.stdin)
    else:
        with open(src, encoding="utf-8") as f:
            data = json.load(f)
    return GuessState.from_dict(data)


def _print_ranked(solver: WordSolver, state: GuessState, top: int) -> None:
    if top <= 1:
        print(solver.suggest(state))
        return
    ranked = solver.rank(state, top)
    if not ranked:
        raise NoCandidatesRemaining()
    for w, s in ranked:
        print(f"{w}\t{s:.2f}")


def interactive(solver: WordSolver, top: int, stdin=sys.stdin) -> int:
    state = GuessState()
    while True:
        cand = solver.candidates(state)
        print(f"{len(cand)} candidate(s)")
        _print_ranked(solver, state, top)

        print("> ", end="", flush=True)
        line = stdin.readline().strip()
        if not line:
            return EXIT_OK
        parts = line.split()
        if len(parts) != 2:
            print("expected: <word> <pattern>, e.g. 'raise -Y--G'")
            continue
        word, patt = parts[0].lower(), parts[1].upper()
        if patt == ALL_GREEN:
            print(f"solved: {word}")
            return EXIT_OK
        try:
            state.observe(word, patt)
        except ValueError as e:
            print(f"ignored: {e}")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="wordsieve — suggest the next guess")
    ap.add_argument("--lexicon", required=True, help="lexicon file (one word per line)")
    ap.add_argument("--commonality", help="JSON word -> frequency table (positional scorer)")
    ap.add_argument("--scorer", default="positional",
                    help=f"scorer id (one of: {', '.join(get_scorer_ids())})")
    ap.add_argument("--neutral-weight", type=float, default=0.5)
    ap.add_argument("--state", help="GuessState JSON file, or '-' for stdin")
    ap.add_argument("--top", type=int, default=1, help="show the K best words with scores")
    ap.add_argument("--strict", action="store_true", help="reject contradictory states")
    ap.add_argument("--interactive", action="store_true")
    ap.add_argument("--log-level", default="WARNING")
    args = ap.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    try:
        kwargs = {}
        if args.scorer == "positional":
            kwargs["neutral_weight"] = args.neutral_weight
            if args.commonality:
                kwargs["commonality"] = load_commonality(args.commonality)
        elif args.commonality:
            log.warning("--commonality ignored by scorer %r", args.scorer)
        scorer = create_scorer(args.scorer, **kwargs)
        solver = WordSolver.from_words(load_lexicon(args.lexicon), scorer, strict=args.strict)

        if args.interactive:
            return interactive(solver, args.top)

        _print_ranked(solver, _read_state(args.state), args.top)
        return EXIT_OK
    except NoCandidatesRemaining as e:
        log.error("%s", e)
        print("no candidates remain; check the feedback entered", file=sys.stderr)
        return EXIT_NO_CANDIDATES
    except (EngineError, OSError, ValueError, KeyError) as e:
        log.error("%s", e)
        print(f"error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
