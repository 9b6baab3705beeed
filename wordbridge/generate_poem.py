"""
CLI: generate affinity-graph poems from a corpus.

Usage::

    python -m wordbridge.generate_poem \\
        --corpus ./data/corpus.txt \\
        --input "Test the system." \\
        --representation vertices \\
        --summary ./data/poem_summary.json

Without ``--input``, every non-blank line on stdin becomes one poem.
Poems are printed to stdout, one per line.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from wordbridge.extractors.whitespace_extractor import extract_words
from wordbridge.graph import REPRESENTATIONS
from wordbridge.models import PoemRecord, PoemSummary, PoetConfig
from wordbridge.poet import GraphPoet
from wordbridge.utils import setup_logging

logger = logging.getLogger(__name__)


# =========================================================================
# Configuration
# =========================================================================


def load_config(path: str) -> PoetConfig:
    """Load a ``PoetConfig`` from the JSON file at *path*."""
    with open(path, "r", encoding="utf-8") as fh:
        return PoetConfig.model_validate_json(fh.read())


def save_config(config: PoetConfig, path: str) -> None:
    """Write *config* as JSON to *path*, creating parent directories."""
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(config.model_dump_json(indent=2))
    logger.info("Config saved → %s", path)


def resolve_config(
    apply_config: Optional[str] = None,
    representation: Optional[str] = None,
    encoding: Optional[str] = None,
) -> PoetConfig:
    """Merge defaults, an optional config file, and explicit overrides.

    Explicit arguments win over the file, which wins over defaults.
    """
    config = load_config(apply_config) if apply_config else PoetConfig()
    overrides = {}
    if representation is not None:
        overrides["representation"] = representation
    if encoding is not None:
        overrides["encoding"] = encoding
    if overrides:
        config = PoetConfig.model_validate({**config.model_dump(), **overrides})
    return config


# =========================================================================
# Pipeline
# =========================================================================


def run(
    corpus_path: str,
    inputs: List[str],
    config: PoetConfig,
    summary_path: Optional[str] = None,
) -> PoemSummary:
    """Build a poet from *corpus_path* and write a poem for each input.

    Raises:
        OSError: if the corpus cannot be read.
        UnicodeDecodeError: if the corpus is not valid text.
    """
    poet = GraphPoet.from_file(
        corpus_path,
        representation=config.representation,
        encoding=config.encoding,
    )
    logger.info("%s (%s representation).", poet, config.representation)

    summary = PoemSummary(
        corpus=corpus_path,
        representation=config.representation,
        metrics=poet.metrics(),
    )
    for text in inputs:
        poem = poet.poem(text)
        summary.poems.append(
            PoemRecord(
                input=text,
                poem=poem,
                bridges_inserted=len(extract_words(poem)) - len(extract_words(text)),
            )
        )

    if summary_path:
        os.makedirs(os.path.dirname(os.path.abspath(summary_path)), exist_ok=True)
        with open(summary_path, "w", encoding="utf-8") as fh:
            fh.write(summary.model_dump_json(indent=2))
        logger.info("Summary → %s", summary_path)

    return summary


# =========================================================================
# CLI
# =========================================================================


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m wordbridge.generate_poem",
        description="Insert affinity-graph bridge words into text.",
    )
    parser.add_argument("--corpus", help="Path to the corpus text file.")
    parser.add_argument(
        "--input", default=None,
        help="Text to turn into a poem (default: one poem per stdin line).",
    )
    parser.add_argument(
        "--representation", choices=sorted(REPRESENTATIONS), default=None,
        help="Graph representation (default: vertices).",
    )
    parser.add_argument(
        "--encoding", default=None,
        help="Corpus file encoding (default: utf-8).",
    )
    parser.add_argument(
        "--summary", default=None,
        help="Write a JSON run summary to this path.",
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Save the effective settings to a config JSON and exit.",
    )
    parser.add_argument(
        "--apply-config", type=str, default=None,
        help="Load settings from a saved config JSON.",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug logging.")
    return parser


def main(argv=None):
    """CLI entry-point."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = resolve_config(args.apply_config, args.representation, args.encoding)
    except (OSError, ValidationError) as exc:
        logger.error("Invalid config (%s): %s", args.apply_config or "flags", exc)
        sys.exit(1)

    # --save-config: just dump settings and exit
    if args.save_config:
        save_config(config, args.save_config)
        return

    if not args.corpus:
        parser.error("--corpus is required")

    if args.input is not None:
        inputs = [args.input]
    else:
        inputs = [line.rstrip("\r\n") for line in sys.stdin if line.strip()]

    try:
        summary = run(args.corpus, inputs, config, summary_path=args.summary)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Cannot read corpus %s: %s", args.corpus, exc)
        sys.exit(1)

    for record in summary.poems:
        print(record.poem)

    logger.info(
        "✅ Done: words=%d, adjacencies=%d, poems=%d",
        summary.metrics.total_words,
        summary.metrics.total_adjacencies,
        len(summary.poems),
    )
    sys.exit(0)


if __name__ == "__main__":
    main()
