"""
Representation comparison: builds the same corpus with every graph
representation, checks they agree, and reports build/poem timings.

Usage::

    python scripts/compare_representations.py \\
        --corpus ./data/corpus.txt \\
        --input "Test the system." \\
        --repeats 5 --out ./data/representation_report.json

Exit code 1 if any two representations disagree on metrics or poems.
"""

import argparse
import json
import logging
import os
import sys
import time
from typing import Any, Dict, List

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from wordbridge.extractors.whitespace_extractor import iter_lines_as_text
from wordbridge.graph import REPRESENTATIONS
from wordbridge.poet import GraphPoet
from wordbridge.utils import setup_logging

logger = logging.getLogger(__name__)


# =====================================================================
# Helpers
# =====================================================================

def _timing_stats(samples: List[float]) -> Dict[str, float]:
    arr = np.asarray(samples, dtype=np.float64)
    return {
        "runs": int(arr.size),
        "median_s": round(float(np.median(arr)), 6),
        "p90_s": round(float(np.percentile(arr, 90)), 6),
        "min_s": round(float(arr.min()), 6),
    }


def _profile(text: str, inputs: List[str], representation: str, repeats: int) -> Dict[str, Any]:
    build_times, poem_times = [], []
    poet = None
    for _ in range(repeats):
        t0 = time.perf_counter()
        poet = GraphPoet(text, representation=representation)
        build_times.append(time.perf_counter() - t0)

        t0 = time.perf_counter()
        poems = [poet.poem(line) for line in inputs]
        poem_times.append(time.perf_counter() - t0)

    return {
        "representation": representation,
        "build": _timing_stats(build_times),
        "poem": _timing_stats(poem_times),
        "metrics": poet.metrics().model_dump(),
        "poems": poems,
    }


# =====================================================================
# Main
# =====================================================================

def main():
    setup_logging(logging.WARNING)
    parser = argparse.ArgumentParser(description="Compare graph representations")
    parser.add_argument("--corpus", required=True)
    parser.add_argument("--input", action="append", default=[],
                        help="Poem input; repeat for several.")
    parser.add_argument("--repeats", type=int, default=5)
    parser.add_argument("--out", default=None)
    args = parser.parse_args()

    with open(args.corpus, "r", encoding="utf-8") as fh:
        text = "".join(iter_lines_as_text(fh))

    reports = [
        _profile(text, args.input, name, max(args.repeats, 1))
        for name in sorted(REPRESENTATIONS)
    ]

    baseline = reports[0]
    agree = all(
        r["metrics"] == baseline["metrics"] and r["poems"] == baseline["poems"]
        for r in reports[1:]
    )
    report = {"corpus": args.corpus, "agree": agree, "representations": reports}

    if args.out:
        os.makedirs(os.path.dirname(os.path.abspath(args.out)), exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as fh:
            json.dump(report, fh, indent=2)
        print(f"Report → {args.out}")

    for r in reports:
        print(
            f"{r['representation']:>9}: build median {r['build']['median_s']:.4f}s, "
            f"poem median {r['poem']['median_s']:.4f}s"
        )
    if not agree:
        logger.error("Representations disagree on metrics or poems.")
        sys.exit(1)
    print("✅ Representations agree.")


if __name__ == "__main__":
    main()
