"""Command-line interface for wordify.

WHY: Users need a simple way to see a word-level diff of two files from
the terminal, or to regroup a character-level script another tool wrote.
The CLI wires together input loading, the diff engine adapter, the
regrouping core, pluggable formatter output, and file saving.

HOW: Uses argparse to accept either two text files or a JSON chunk
document (--chunks), output format selection, output directory, and diff
engine options. Status messages go to stderr; output files are saved next
to the revised file (or to --output-dir), or a single format is written
to stdout with --stdout.

RULES:
- Positional arguments: OLD and NEW text files (UTF-8), unless --chunks
- --formats: comma-separated formatter keys (default: config, else all)
- Output naming: {stem}{suffix}, numeric suffix for conflicts
  (-wordiff-2.json); stem is the NEW file's (or chunk document's) stem
- --stdout prints the first selected format and saves nothing
- Status output goes to stderr (not stdout)
- Errors print "Error: ..." to stderr and exit with status 1; bad flag
  values (e.g. a negative --timeout) are argparse usage errors (status 2)
"""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
from pathlib import Path
from typing import List, Optional

from wordify.adapters.chunk_document import load_chunk_document
from wordify.adapters.dmp_adapter import diff_chars
from wordify.config import (
    DEFAULT_FORMATS,
    LOG_FORMAT,
    LOG_LEVEL,
    load_diff_timeout,
    load_semantic_cleanup,
    parse_timeout,
)
from wordify.core.ir import Chunk, WordDiff
from wordify.core.pipeline import wordify
from wordify.errors import WordifyError
from wordify.formatters import FORMATTERS
from wordify.formatters.base import FormatterOutput
from wordify.formatters.stats import diff_stats

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr.

    Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _fail(msg: str) -> None:
    print("Error: {}".format(msg), file=sys.stderr)
    sys.exit(1)


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Pick a path in output_dir that does not exist yet.

    draft-wordiff.json is tried first, then draft-wordiff-2.json,
    draft-wordiff-3.json and so on. Existing files are never overwritten.
    """
    path = output_dir / (stem + suffix)
    if not path.exists():
        return path

    head, dot, ext = suffix.rpartition(".")
    if not head:
        head, dot, ext = suffix, "", ""

    for counter in itertools.count(2):
        path = output_dir / "{}{}-{}{}{}".format(stem, head, counter, dot, ext)
        if not path.exists():
            return path


def _timeout_arg(value: str) -> float:
    """argparse type for --timeout, validated like WORDIFY_DIFF_TIMEOUT."""
    try:
        return parse_timeout(value, "--timeout")
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def _save_output(
    output: FormatterOutput,
    stem: str,
    output_dir: Path,
) -> Path:
    """Write one formatter output as UTF-8 and return its path."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _select_formats(formats_arg: Optional[str]) -> List[str]:
    """Resolve the formatter keys to run, exiting on an unknown key."""
    if formats_arg:
        format_keys = [f.strip() for f in formats_arg.split(",") if f.strip()]
    elif DEFAULT_FORMATS:
        format_keys = list(DEFAULT_FORMATS)
    else:
        format_keys = list(FORMATTERS.keys())

    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            _fail("Unknown format '{}'. Available formats: {}".format(key, available))
    return format_keys


def _read_text(path: Path) -> str:
    if not path.is_file():
        _fail("File not found: {}".format(path))
    return path.read_text(encoding="utf-8")


def _load_chunks(args: argparse.Namespace) -> tuple:
    """Load the character-level script from --chunks or by diffing two files.

    Returns:
        Tuple of (chunks, old_label, new_label, source_path).
    """
    if args.chunks:
        if args.files:
            _fail("Pass either two text files or --chunks, not both")
        chunk_path = Path(args.chunks).resolve()
        if not chunk_path.is_file():
            _fail("File not found: {}".format(chunk_path))
        _status("Loading chunk document {}...".format(chunk_path.name))
        chunks: List[Chunk] = load_chunk_document(chunk_path)
        return chunks, chunk_path.name, chunk_path.name, chunk_path

    if len(args.files) != 2:
        _fail("Expected two files to compare (OLD NEW), got {}".format(len(args.files)))

    old_path = Path(args.files[0]).resolve()
    new_path = Path(args.files[1]).resolve()
    old_text = _read_text(old_path)
    new_text = _read_text(new_path)

    timeout = args.timeout if args.timeout is not None else load_diff_timeout()
    semantic = args.semantic if args.semantic is not None else load_semantic_cleanup()
    _status("Diffing {} against {}...".format(old_path.name, new_path.name))
    chunks = diff_chars(old_text, new_text, timeout=timeout, semantic=semantic)
    _status("  {} character-level chunks".format(len(chunks)))
    return chunks, old_path.name, new_path.name, new_path


def _run(args: argparse.Namespace) -> None:
    """Execute load → regroup → format → save."""
    format_keys = _select_formats(args.formats)

    chunks, old_label, new_label, source_path = _load_chunks(args)

    runs = wordify(chunks)
    stats = diff_stats(runs)
    diff = WordDiff(runs=runs, old_label=old_label, new_label=new_label)
    _status("  {} characters old, {} characters new".format(
        len(diff.old_text), len(diff.new_text),
    ))
    _status("  {} word-level runs ({} equal, {} deleted, {} inserted words)".format(
        len(runs), stats["equal"], stats["delete"], stats["insert"],
    ))

    if args.stdout:
        formatter = FORMATTERS[format_keys[0]]()
        for output in formatter.format(diff):
            sys.stdout.write(output.content)
        sys.stdout.flush()
        return

    output_dir = Path(args.output_dir).resolve() if args.output_dir else source_path.parent
    if not output_dir.is_dir():
        _fail("Output directory does not exist: {}".format(output_dir))

    stem = source_path.stem
    saved_files: List[Path] = []
    for key in format_keys:
        formatter = FORMATTERS[key]()
        _status("  Running {} formatter...".format(formatter.name))
        for output in formatter.format(diff):
            saved_path = _save_output(output, stem, output_dir)
            saved_files.append(saved_path)
            _status("  Saved: {}".format(saved_path.name))

    _status("")
    _status("Done! Saved {} file(s) to {}".format(len(saved_files), output_dir))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser without
    running anything.
    """
    parser = argparse.ArgumentParser(
        prog="wordify",
        description="Show the word-level differences between two texts "
                    "(JSON, wdiff markup, HTML).",
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="OLD and NEW text files to compare (UTF-8).",
    )

    parser.add_argument(
        "--chunks",
        default=None,
        help="Path to a JSON character-level chunk document to regroup "
             "instead of diffing two files.",
    )

    parser.add_argument(
        "--formats",
        default=None,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: all.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as the NEW file).",
    )

    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the first selected format to stdout instead of saving files.",
    )

    parser.add_argument(
        "--semantic",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Run semantic cleanup on the character diff "
             "(default: WORDIFY_SEMANTIC_CLEANUP or false).",
    )

    parser.add_argument(
        "--timeout",
        type=_timeout_arg,
        default=None,
        help="Character diff time limit in seconds, 0 for none "
             "(default: WORDIFY_DIFF_TIMEOUT or 1.0).",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.getLevelName(args.log_level.upper())
    if not isinstance(level, int):
        _fail("Unknown log level '{}'".format(args.log_level))

    try:
        logging.basicConfig(level=level, format=LOG_FORMAT)
        _run(args)
    except (WordifyError, ValueError, OSError) as e:
        logger.debug("wordify failed", exc_info=True)
        _fail(str(e))


if __name__ == "__main__":
    main()
