"""Command line interface for ddgsearch."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

from ddgsearch.client import DDGS
from ddgsearch.config.loader import get_config_path, load_config, save_config
from ddgsearch.errors import DDGSearchError
from ddgsearch.models import KNOWN_BACKENDS, SAFESEARCH_VALUES, SearchResult
from ddgsearch.utils.logging import set_log_level


def format_results(keywords: str, results: list[SearchResult]) -> str:
    """Render results as a numbered plain-text list."""
    if not results:
        return f"No results for: {keywords}"

    lines = [f"Results for: {keywords}\n"]
    for i, item in enumerate(results, 1):
        lines.append(f"{i}. {item.title}\n   {item.href}")
        if item.body:
            lines.append(f"   {item.body}")
    return "\n".join(lines)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ddgsearch",
        description="Search DuckDuckGo from the command line.",
    )
    parser.add_argument("keywords", nargs="?", help="Search query")
    parser.add_argument("-r", "--region", default=None, help="Region code, e.g. us-en (default: wt-wt)")
    parser.add_argument("-s", "--safesearch", choices=SAFESEARCH_VALUES, default=None)
    parser.add_argument(
        "-t",
        "--timelimit",
        default=None,
        help="d, w, m, y (or day, week, month, year)",
    )
    parser.add_argument("-b", "--backend", choices=KNOWN_BACKENDS, default=None)
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.json")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log retries and soft blocks")
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write the current configuration (defaults if none) to --config or ~/.ddgsearch/config.json and exit",
    )
    args = parser.parse_args(argv)
    if not args.keywords and not args.init_config:
        parser.error("keywords is required")
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(args.config)
    if args.init_config:
        path = args.config or get_config_path()
        save_config(config, path)
        print(f"Config written to {path}")
        return 0

    set_log_level(0 if args.verbose else config.logging.level)

    client = DDGS(config)
    try:
        results = asyncio.run(
            client.text(
                args.keywords,
                region=args.region,
                safesearch=args.safesearch,
                timelimit=args.timelimit,
                backend=args.backend,
            )
        )
    except DDGSearchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([r.to_dict() for r in results], ensure_ascii=False, indent=2))
    else:
        print(format_results(args.keywords, results))
    return 0
