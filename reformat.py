"""CLI for parsing SGF files and rewriting them with a chosen layout."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Iterable, Sequence

from scripts.sgftree import SgfFormat, SgfFormatter, parse_sgf_file

DEFAULT_OUTPUT_DIR = Path("out/")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse SGF game records and write them back out with normalized layout."
    )
    parser.add_argument("input", help="Path to an .sgf file or a directory of .sgf files.")
    parser.add_argument(
        "-o",
        "--output-dir",
        default=str(DEFAULT_OUTPUT_DIR),
        help="Directory where formatted files should be written (defaults to out/).",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        default=4,
        help="Spaces per nesting level for child trees (default: 4).",
    )
    parser.add_argument(
        "--tree-newlines",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Put each tree on its own line (default: enabled).",
    )
    parser.add_argument(
        "--node-newlines",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Also put each node on its own line; needs --tree-newlines (default: enabled).",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every token consumed.")
    return parser.parse_args(argv)


def collect_inputs(path: Path) -> list[Path]:
    if path.is_dir():
        files = sorted(p for p in path.glob("*.sgf") if p.is_file())
        if not files:
            raise FileNotFoundError(f"No .sgf files found in directory: {path}")
        return files
    if path.is_file():
        return [path]
    raise FileNotFoundError(f"Input path does not exist: {path}")


def generate(files: Iterable[Path], output_dir: Path, sgf_format: SgfFormat, log_level: int) -> None:
    output_dir.mkdir(parents=True, exist_ok=True)
    formatter = SgfFormatter(sgf_format)
    component_config = {"log_level": log_level}
    for source in files:
        try:
            collection = parse_sgf_file(
                source,
                config={"lexer_config": component_config, "parser_config": component_config},
            )
            formatted = formatter.format_collection(collection)
        except Exception as exc:
            raise RuntimeError(f"Failed to parse {source}") from exc
        destination = output_dir / source.name
        destination.write_text(formatted + "\n", encoding="utf-8")
        try:
            display_path = destination.relative_to(Path.cwd())
        except ValueError:
            display_path = destination
        print(f"Wrote {display_path}")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    sgf_format = SgfFormat(
        newline_between_trees=args.tree_newlines,
        newline_between_nodes=args.node_newlines,
        indent_width=args.indent_width,
    )
    files = collect_inputs(Path(args.input))
    log_level = logging.DEBUG if args.verbose else logging.WARNING
    generate(files, Path(args.output_dir), sgf_format=sgf_format, log_level=log_level)


if __name__ == "__main__":
    main()
