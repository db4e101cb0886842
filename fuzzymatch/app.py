import argparse
import json
from pathlib import Path

from .env import load_env

from . import __version__
from .candidates import load_candidates, parse_candidate_list
from .config import Settings
from .logger import get_logger, reset_logger
from .ranking import rank
from .render import render_html, render_marked
from .scoring import MatchResult, Scorer


def _load_settings() -> Settings:
    try:
        return Settings.from_env()
    except ValueError as e:
        raise SystemExit(f"Invalid configuration: {e}")


def _format_result(result: MatchResult, fmt: str, settings: Settings) -> str:
    if fmt == "html":
        return render_html(result, tag=settings.highlight_tag)
    return render_marked(result)


def _result_dict(candidate: str, result: MatchResult, settings: Settings) -> dict:
    return {
        "candidate": candidate,
        "score": result.score,
        "matched_indices": result.matched_indices,
        "html": render_html(result, tag=settings.highlight_tag),
    }


def cmd_score(args: argparse.Namespace) -> None:
    settings = args.settings
    result = Scorer(settings.delimiters).match(args.text, args.abbreviation)
    get_logger().record_match(result.score)

    if args.format == "json":
        print(json.dumps(_result_dict(args.text, result, settings), ensure_ascii=False))
        return
    print(f"Score: {result.score:.6f}")
    print(f"Match: {_format_result(result, args.format, settings)}")


def cmd_rank(args: argparse.Namespace) -> None:
    settings = args.settings
    if args.input:
        input_path = Path(args.input)
        if not input_path.exists():
            raise SystemExit(f"Input file not found: {input_path}")
        try:
            candidates = load_candidates(input_path)
        except ValueError as e:
            get_logger().record_error(type(e).__name__)
            raise SystemExit(str(e))
    elif args.candidates:
        candidates = parse_candidate_list(args.candidates)
    else:
        raise SystemExit("No candidates specified. Use --input FILE or --candidates \"a,b,c\"")

    if args.limit is not None and args.limit < 1:
        raise SystemExit("--limit must be at least 1")
    limit = args.limit if args.limit is not None else settings.limit
    threshold = args.threshold if args.threshold is not None else settings.threshold
    ranked = rank(
        args.abbreviation,
        candidates,
        limit=limit,
        threshold=threshold,
        scorer=Scorer(settings.delimiters),
    )

    if args.format == "json":
        rows = [_result_dict(r.candidate, r.result, settings) for r in ranked]
        print(json.dumps(rows, indent=2, ensure_ascii=False))
        return
    if not ranked:
        print("No matches.")
        return
    for r in ranked:
        print(f"{r.score:.6f}  {_format_result(r.result, args.format, settings)}")


def cmd_validate(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Input file not found: {input_path}")
    try:
        candidates = load_candidates(input_path)
    except ValueError as e:
        print("Invalid:")
        for message in str(e).split("; "):
            print(f" - {message}")
        raise SystemExit(2)
    print(f"Valid ({len(candidates)} candidates)")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="fuzzymatch", description="Score abbreviations against autocomplete candidates")
    parser.add_argument("--version", action="store_true", help="Show version")

    subparsers = parser.add_subparsers(dest="command")
    formats = ["plain", "html", "json"]

    scr = subparsers.add_parser("score", help="Score one abbreviation against one string")
    scr.add_argument("text", help="Canonical string to match against")
    scr.add_argument("abbreviation", help="Abbreviation the user typed")
    scr.add_argument("--format", choices=formats, default="plain", help="Output format (default: plain)")
    scr.set_defaults(func=cmd_score)

    rnk = subparsers.add_parser("rank", help="Rank candidates against an abbreviation")
    rnk.add_argument("abbreviation", help="Abbreviation the user typed")
    rnk.add_argument("--input", help="Candidate file (.json array, or one candidate per line)")
    rnk.add_argument("--candidates", help="Comma-separated candidates")
    rnk.add_argument("--limit", type=int, help="Maximum number of results (or set FUZZYMATCH_LIMIT)")
    rnk.add_argument("--threshold", type=float, help="Minimum score to keep (or set FUZZYMATCH_THRESHOLD)")
    rnk.add_argument("--format", choices=formats, default="plain", help="Output format (default: plain)")
    rnk.set_defaults(func=cmd_rank)

    val = subparsers.add_parser("validate", help="Validate a candidate file")
    val.add_argument("--input", required=True, help="Candidate file to check")
    val.set_defaults(func=cmd_validate)

    return parser


def main(argv=None):
    # Load .env if present (FUZZYMATCH_LOG_LEVEL, FUZZYMATCH_DELIMITERS, etc.)
    load_env()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return

    if not hasattr(args, "func"):
        parser.print_help()
        return

    settings = _load_settings()
    # Configure a fresh logger even if one was created before main
    reset_logger()
    logger = get_logger(level=settings.log_level, log_dir=settings.log_dir)
    args.settings = settings
    args.func(args)
    logger.debug("Command finished", command=args.command, metrics=logger.get_metrics())


if __name__ == "__main__":
    main()
