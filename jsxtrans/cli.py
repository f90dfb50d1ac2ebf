"""Command-line interface for jsxtrans."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jsxtrans import JsxTrans
from jsxtrans.core.error_handling import JsxTransError


def _entries_table(path: str, entries: List[Dict[str, str]]) -> Table:
    table = Table(title=path, title_justify="left")
    table.add_column("key", style="bold")
    table.add_column("defaultValue")
    table.add_column("namespace")
    table.add_column("count")
    table.add_column("attributes", style="dim")
    for entry in entries:
        extras = {k: v for k, v in entry.items() if k not in ("key", "defaultValue", "namespace", "count")}
        table.add_row(
            escape(entry["key"]),
            escape(entry.get("defaultValue", "")),
            escape(entry.get("namespace", "")),
            escape(entry.get("count", "")),
            escape(", ".join(f"{k}={v}" for k, v in extras.items())),
        )
    return table


def _extract(
    files: List[str],
    extractor: JsxTrans,
    raw_json: bool,
    console: Console,
) -> int:
    """Extract entries from each file in ``files`` and print them."""
    results: Dict[str, Any] = {}
    status = 0
    for path in files:
        if not os.path.isfile(path):
            console.print(f"[bold red]File not found:[/bold red] {path}")
            status = 1
            continue
        try:
            entries = [entry.to_dict() for entry in extractor.extract_file(path)]
        except JsxTransError as e:
            console.print(f"[bold red]{path}:[/bold red] {e}")
            status = 1
            continue
        results[path] = entries
        if not raw_json:
            console.print(_entries_table(path, entries))
    if raw_json:
        print(json.dumps(results, indent=2, ensure_ascii=False))
    return status


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``jsxtrans`` command."""

    console = Console()
    parser = argparse.ArgumentParser(description="Extract i18next keys from JSX/TSX components")
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--quiet", action="store_true", help="Reduce logs to errors only")
    sub = parser.add_subparsers(dest="command")

    extract_p = sub.add_parser("extract", help="Extract translation entries from files")
    extract_p.add_argument("files", nargs="+", help="JSX/TSX source files")
    extract_p.add_argument("--attr", help="Name of the key attribute (default: i18nKey)")
    extract_p.add_argument(
        "--component",
        action="append",
        help="Component name to extract from; repeat or use comma-separated (default: Trans, Interpolate)",
    )
    extract_p.add_argument("--raw-json", action="store_true", help="Output raw JSON")

    args = parser.parse_args(argv)
    if getattr(args, "debug", False):
        log_level = logging.DEBUG
    elif getattr(args, "quiet", False):
        log_level = logging.ERROR
    elif getattr(args, "verbose", False):
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    logging.basicConfig(level=log_level)

    if args.command != "extract":
        parser.print_help()
        sys.exit(2)

    options: Dict[str, Any] = {}
    if args.attr:
        options["attr"] = args.attr
    if args.component:
        parts: list[str] = []
        for item in args.component:
            parts.extend([p.strip() for p in item.split(",") if p.strip()])
        options["componentFunctions"] = parts
    try:
        extractor = JsxTrans(**options)
    except JsxTransError as e:
        console.print(f"[bold red]Invalid options:[/bold red] {e}")
        sys.exit(2)

    sys.exit(_extract(args.files, extractor, args.raw_json, console))


if __name__ == "__main__":
    main()
