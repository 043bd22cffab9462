"""Command-line front end for the simplifier.

Usage::

    plainsight "The study utilized 45 participants."
    plainsight --file notes.txt --mode bullets --glossary glossary.json
    cat notes.txt | python -m plainsight.cli --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import CONFIG_PATH, load_config, options_from_config, print_config
from .glossary import GlossaryError, load_glossary
from .simplify import MODES, SimplifyConfigError, SimplifyResult, simplify

logger = logging.getLogger(__name__)

console = Console()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plainsight",
        description="Condense text into a short paragraph or a bullet digest",
    )
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to simplify (default: --file or stdin)",
    )
    parser.add_argument(
        "--file",
        default=None,
        help="Read the text from this file",
    )
    parser.add_argument(
        "--mode",
        choices=list(MODES),
        default=None,
        help="Output mode (default: config.txt)",
    )
    parser.add_argument(
        "--inline-glossary",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Insert [definitions] after known terms (default: config.txt)",
    )
    parser.add_argument(
        "--glossary",
        default=None,
        help="JSON glossary file (default: config.txt glossary_path, else the built-in example)",
    )
    parser.add_argument(
        "--config",
        default=CONFIG_PATH,
        help="Path to config.txt",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Print the active configuration before the result",
    )
    return parser


def _read_input(args: argparse.Namespace) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def _log_level(value: object) -> int:
    """Numeric levels pass through; names are looked up, unknown ones fall back to WARNING."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    level = logging.getLevelName(str(value).strip().upper())
    if isinstance(level, int):
        return level
    logger.warning(f"Unknown log_level {value!r}, using WARNING")
    return logging.WARNING


def print_result(result: SimplifyResult) -> None:
    if result.simple:
        console.print(Panel(Text(result.simple), title="Simplified", border_style="green"))
    for b in result.bullets:
        console.print(Text(f"  • {b}"))

    if result.terms:
        table = Table(title="Terms", title_style="bold cyan", show_header=True, header_style="bold")
        table.add_column("Term", style="cyan")
        table.add_column("Definition", style="white")
        for t in result.terms:
            table.add_row(Text(t.term), Text(t.definition))
        console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg = load_config(args.config)
    if args.mode is not None:
        cfg["mode"] = args.mode
    if args.inline_glossary is not None:
        cfg["inline_glossary"] = args.inline_glossary

    logging.basicConfig(
        level=_log_level(cfg.get("log_level", "WARNING")),
        format="%(asctime)s  %(levelname)-8s  %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.show_config:
        print_config(cfg)

    try:
        glossary = load_glossary(args.glossary) if args.glossary else None
        opts = options_from_config(cfg, glossary)
    except (SimplifyConfigError, GlossaryError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        return 2

    try:
        text = _read_input(args)
    except (OSError, UnicodeDecodeError) as e:
        console.print(f"[bold red]Error:[/bold red] Cannot read input: {escape(str(e))}")
        return 2

    logger.info(f"Simplifying {len(text)} characters in {opts.mode} mode ({len(opts.glossary)} glossary entries)")
    result = simplify(text, opts)

    if args.json:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        print_result(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
