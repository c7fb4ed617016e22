"""
Command line entry point for phrase bingo.

Usage:
    python -m src.main build phrases.txt --seed 42
    python -m src.main rank sets.json
    python -m src.main suggest "office party" --config config.yaml --output phrases.txt
"""

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import List

import yaml

from .board import PhraseSet, build_board, render_board
from .ranking import rank_by_score, bayesian_score, prior_mean
from .service import AppConfig, PhraseSuggester


def load_config(config_path: str) -> AppConfig:
    """Load service configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f)

    return AppConfig(**(data or {}))


def load_phrase_sets(sets_path: str) -> List[PhraseSet]:
    """Load a JSON list of phrase sets."""
    with open(sets_path) as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of phrase sets in {sets_path}")

    return [PhraseSet(**item) for item in data]


def cmd_build(args: argparse.Namespace, config: AppConfig) -> int:
    path = Path(args.phrases)
    phrases = path.read_text(encoding="utf-8").splitlines()
    phrase_set = PhraseSet(code=args.code, title=args.title or path.stem, phrases=phrases)

    rng = random.Random(args.seed)
    use_free_center = config.default_free_space and not args.no_free_center

    for i in range(args.reshuffles + 1):
        board = build_board(phrase_set, use_free_center, rng=rng)
        if i:
            print()
        print(f"{board.title} ({board.grid_size}x{board.grid_size})")
        print(render_board(board))

    return 0


def cmd_rank(args: argparse.Namespace, config: AppConfig) -> int:
    sets = load_phrase_sets(args.sets)
    prior = prior_mean(sets)
    ranked = rank_by_score(sets, confidence=config.confidence)

    for position, phrase_set in enumerate(ranked, start=1):
        if prior is None:
            score = "-"
        else:
            score = f"{bayesian_score(phrase_set.rating_total, phrase_set.rating_count, prior, config.confidence):.3f}"
        print(
            f"{position:>3}. {phrase_set.code:<8} {score:>6}  "
            f"avg {phrase_set.rating_average:.2f} ({phrase_set.rating_count})  {phrase_set.title}"
        )

    return 0


def cmd_suggest(args: argparse.Namespace, config: AppConfig) -> int:
    suggester = PhraseSuggester.create(config.suggestion)
    suggestion = suggester.suggest(args.genre)

    if suggestion.from_fallback:
        print("Warning: LLM unavailable, using fallback phrases", file=sys.stderr)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text("\n".join(suggestion.phrases) + "\n", encoding="utf-8")
        print(f"Saved {len(suggestion.phrases)} phrases to: {output_path}")
    else:
        for phrase in suggestion.phrases:
            print(phrase)

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Build, rank and suggest phrase bingo boards",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Phrase file format (one phrase per line):
  *Always on the board
  coffee spill | tea spill
  someone says "synergy"

Example config.yaml:
  confidence: 5
  public_limit: 30
  suggestion:
    model: gpt-4o-mini
    temperature: 0.9
    count: 30
        """
    )
    parser.add_argument(
        "--config", "-c",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    build_parser = subparsers.add_parser("build", help="Build a board from a phrase file")
    build_parser.add_argument("phrases", help="Text file with one phrase per line")
    build_parser.add_argument("--title", help="Board title (default: file name)")
    build_parser.add_argument("--code", default="LOCAL", help="Board code to display")
    build_parser.add_argument("--no-free-center", action="store_true", help="Do not use a free centre cell")
    build_parser.add_argument("--seed", type=int, help="Random seed for a reproducible board")
    build_parser.add_argument("--reshuffles", type=int, default=0, help="Number of extra reshuffled boards to print")
    build_parser.set_defaults(func=cmd_build)

    rank_parser = subparsers.add_parser("rank", help="Rank phrase sets by Bayesian score")
    rank_parser.add_argument("sets", help="JSON file with a list of phrase sets")
    rank_parser.set_defaults(func=cmd_rank)

    suggest_parser = subparsers.add_parser("suggest", help="Suggest phrases for a genre")
    suggest_parser.add_argument("genre", help="Theme to generate phrases for")
    suggest_parser.add_argument("--output", "-o", help="Write phrases to this file instead of stdout")
    suggest_parser.set_defaults(func=cmd_suggest)

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else AppConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    try:
        return args.func(args, config)
    except Exception as e:
        print(f"Error during {args.command}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
