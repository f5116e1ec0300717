"""CLI for writing ninja build files from JSON manifests."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from pydantic import ValidationError

from ninja_writer.errors import ManifestError
from ninja_writer.manifest import build_document, load_manifest

DEFAULT_OUTPUT = Path("build.ninja")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="ninja-writer",
        description="Write a ninja build file from a JSON manifest of rules, build edges and pools.",
    )
    parser.add_argument("manifest", help="Path to the JSON manifest.")
    parser.add_argument(
        "-o",
        "--output",
        default=str(DEFAULT_OUTPUT),
        help="Where to write the ninja file (defaults to build.ninja).",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the ninja file instead of writing it.",
    )
    parser.add_argument(
        "--thread-safe",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Build the document with shared, lock-guarded ownership (default: disabled).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every statement as it is added.",
    )
    return parser.parse_args(argv)


def generate(manifest_path: Path, output: Path | None, thread_safe: bool, verbose: bool) -> str:
    manifest = load_manifest(manifest_path)
    try:
        document = build_document(
            manifest,
            config={
                "thread_safe": thread_safe,
                "enable_logger": verbose,
                "log_level": logging.DEBUG if verbose else logging.WARNING,
            },
        )
    except ManifestError as exc:
        raise RuntimeError(f"Failed to build {manifest_path}") from exc
    if output is None:
        return document.render()
    destination = document.write(output)
    try:
        display_path = destination.relative_to(Path.cwd())
    except ValueError:
        display_path = destination
    return f"Wrote {display_path}"


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    manifest_path = Path(args.manifest)
    output = None if args.stdout else Path(args.output)
    try:
        message = generate(manifest_path, output, thread_safe=args.thread_safe, verbose=args.verbose)
    except ValidationError as exc:
        raise RuntimeError(f"Invalid manifest {manifest_path}") from exc
    print(message, end="" if args.stdout else "\n")


if __name__ == "__main__":
    main()
