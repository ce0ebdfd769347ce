"""Command-line interface for reviewing vocabulary annotation of a subtitle file.

WHY: Whoever maintains the vocabulary list needs to check how a video's
subtitles will be highlighted before learners see them: which phrases
match, which words are missed, which cue is shown at a given moment.
The CLI wires the engine together behind one command for that review.

HOW: Uses argparse to accept a WebVTT file, an optional vocabulary JSON
file (the vocabulary API's records, bare or wrapped in {"data": [...]}),
output format selection, an optional playback time and an optional
output directory. Parses, builds the index, annotates, runs the selected
formatters and prints or saves the result. Status messages go to stderr.

RULES:
- Positional argument: path to a .vtt file
- --vocab: vocabulary JSON; without it every cue comes back unannotated
- --formats: comma-separated formatter keys (default: KUPU_DEFAULT_FORMATS)
- --at SECONDS: only the active cue at that time is annotated
- Without --output-dir, formatter output goes to stdout
- With --output-dir, files are named {stem}{suffix}; numeric suffix on
  conflicts (-annotated-2.json)
- Exit codes: 0 = success, 1 = user error (bad file, bad format name)
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional

from kupu_transcript.adapters.vocabulary_records import records_to_entries
from kupu_transcript.config import DEFAULT_FORMATS, LOG_LEVEL, parse_format_list
from kupu_transcript.core.annotator import annotate_cues
from kupu_transcript.core.ir import Cue
from kupu_transcript.core.resolver import resolve_active
from kupu_transcript.core.timecode import format_clock
from kupu_transcript.core.vocabulary import VocabularyIndex, build_index
from kupu_transcript.core.vtt import parse_vtt
from kupu_transcript.formatters import FORMATTERS
from kupu_transcript.formatters.base import FormatterOutput

logger = logging.getLogger(__name__)


def _status(msg: str) -> None:
    """Print a status message to stderr, so stdout stays pipeable."""
    print(msg, file=sys.stderr, flush=True)


def load_vocabulary_file(path: Path) -> VocabularyIndex:
    """Read a vocabulary JSON file and build an index from it.

    Accepts a bare list of records or an API envelope ``{"data": [...]}``.

    Raises:
        ValueError: If the file is not JSON or has neither shape.
        OSError: If the file cannot be read.
    """
    try:
        data: Any = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError("Vocabulary file is not valid JSON: {}".format(e)) from e

    if isinstance(data, dict) and isinstance(data.get("data"), list):
        data = data["data"]
    if not isinstance(data, list):
        raise ValueError(
            "Vocabulary file must contain a list of records or {\"data\": [...]}"
        )

    return build_index(records_to_entries(data))


def _resolve_output_path(
    stem: str,
    suffix: str,
    output_dir: Path,
) -> Path:
    """Resolve the output file path, adding numeric suffix on conflict.

    RULES:
    - First attempt: {stem}{suffix} (e.g. episode1-annotated.json)
    - Conflict: split suffix at last dot, insert counter before extension
      (e.g. episode1-annotated-2.json)
    - Counter starts at 2 and increments
    """
    base_path = output_dir / "{}{}".format(stem, suffix)
    if not base_path.exists():
        return base_path

    # "-annotated.json" → ("-annotated", ".json")
    dot_idx = suffix.rfind(".")
    if dot_idx > 0:
        suffix_name = suffix[:dot_idx]
        suffix_ext = suffix[dot_idx:]
    else:
        suffix_name = suffix
        suffix_ext = ""

    counter = 2
    while True:
        candidate = output_dir / "{}{}-{}{}".format(stem, suffix_name, counter, suffix_ext)
        if not candidate.exists():
            return candidate
        counter += 1


def _save_output(output: FormatterOutput, stem: str, output_dir: Path) -> Path:
    """Write one formatter output as UTF-8 and return where it went."""
    path = _resolve_output_path(stem, output.suffix, output_dir)
    path.write_text(output.content, encoding="utf-8")
    return path


def _select_cues(cues: List[Cue], at: Optional[float]) -> List[Cue]:
    if at is None:
        return cues
    active = resolve_active(cues, at)
    if active is None:
        _status("No active cue at {}".format(format_clock(at)))
        return []
    return [active]


def run(args: argparse.Namespace) -> int:
    """Run the review pipeline for parsed arguments; return the exit code."""
    format_keys = parse_format_list(args.formats)
    if not format_keys:
        print("Error: No output formats selected", file=sys.stderr)
        return 1
    for key in format_keys:
        if key not in FORMATTERS:
            available = ", ".join(sorted(FORMATTERS.keys()))
            print(
                "Error: Unknown format '{}'. Available formats: {}".format(key, available),
                file=sys.stderr,
            )
            return 1

    input_path = Path(args.input_file)
    output_dir = Path(args.output_dir) if args.output_dir else None
    if output_dir is not None and not output_dir.is_dir():
        print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
        return 1

    try:
        cues = parse_vtt(input_path.read_text(encoding="utf-8"))
        if args.vocab:
            index = load_vocabulary_file(Path(args.vocab))
        else:
            index = build_index([])
    except (OSError, ValueError) as e:
        print("Error: {}".format(e), file=sys.stderr)
        return 1

    _status("Parsed {} cues, {} vocabulary entries".format(len(cues), len(index)))

    annotated = annotate_cues(_select_cues(cues, args.at), index)
    hits = sum(len(item.tagged) for item in annotated)
    _status("  {} vocabulary hits".format(hits))

    for key in format_keys:
        formatter = FORMATTERS[key]()
        logger.info("Running %s formatter", formatter.name)
        for output in formatter.format(annotated):
            if output_dir is None:
                sys.stdout.write(output.content)
            else:
                saved = _save_output(output, input_path.stem, output_dir)
                _status("  Saved: {}".format(saved.name))

    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    Kept separate from main() so tests can inspect the parser.
    """
    parser = argparse.ArgumentParser(
        prog="kupu-transcript",
        description="Parse a WebVTT subtitle file and annotate its cues "
                    "with vocabulary matches.",
    )

    parser.add_argument(
        "input_file",
        help="Path to the WebVTT (.vtt) subtitle file.",
    )

    parser.add_argument(
        "--vocab",
        default=None,
        help="Path to a vocabulary JSON file (list of records or {\"data\": [...]}).",
    )

    parser.add_argument(
        "--formats",
        default=DEFAULT_FORMATS,
        help="Comma-separated list of output formats. "
             "Available: {}. Default: %(default)s.".format(", ".join(sorted(FORMATTERS.keys()))),
    )

    parser.add_argument(
        "--at",
        type=float,
        default=None,
        metavar="SECONDS",
        help="Only annotate the cue active at this playback time.",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: print to stdout).",
    )

    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: %(default)s).",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for ``python -m kupu_transcript`` and ``kupu-transcript``.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
