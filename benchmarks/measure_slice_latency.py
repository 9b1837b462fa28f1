"""Benchmark helper for grapheme slicing latency.

Compares on-demand boundary walks over plain ``str`` inputs with lookups in a
prebuilt :class:`GraphemeText` boundary table.
"""
from __future__ import annotations

import argparse
import json
import logging
import statistics
from dataclasses import asdict, dataclass
from time import perf_counter
from typing import Callable, Sequence

from stringkit.core import GraphemeText, slice_half_open
from stringkit.utils.logging import PACKAGE_LOGGER, setup_logging

LOGGER = logging.getLogger(f"{PACKAGE_LOGGER}.benchmarks")

_SAMPLE_UNIT = "café 👩‍👩‍👧 naïve 🇧🇷 "


@dataclass(slots=True)
class BenchmarkResult:
    label: str
    graphemes: int
    iterations: int
    median_us: float
    p95_us: float


def _build_text(repeat: int) -> str:
    return _SAMPLE_UNIT * repeat


def _time_calls(call: Callable[[], object], iterations: int) -> list[float]:
    samples: list[float] = []
    for _ in range(iterations):
        start = perf_counter()
        call()
        samples.append((perf_counter() - start) * 1_000_000)
    return samples


def _summarize(label: str, graphemes: int, samples: Sequence[float]) -> BenchmarkResult:
    ordered = sorted(samples)
    p95_index = max(0, int(len(ordered) * 0.95) - 1)
    return BenchmarkResult(
        label=label,
        graphemes=graphemes,
        iterations=len(ordered),
        median_us=statistics.median(ordered),
        p95_us=ordered[p95_index],
    )


def run_benchmarks(repeats: Sequence[int], iterations: int) -> list[BenchmarkResult]:
    results: list[BenchmarkResult] = []
    for repeat in repeats:
        raw = _build_text(repeat)
        cached = GraphemeText(raw)
        length = len(cached)
        lower, upper = length // 4, (length * 3) // 4
        results.append(
            _summarize(
                f"str x{repeat}",
                length,
                _time_calls(lambda: slice_half_open(raw, lower, upper), iterations),
            )
        )
        results.append(
            _summarize(
                f"GraphemeText x{repeat}",
                length,
                _time_calls(lambda: slice_half_open(cached, lower, upper), iterations),
            )
        )
        for result in results[-2:]:
            LOGGER.info(
                "%s: %d graphemes, median %.2fus, p95 %.2fus",
                result.label,
                result.graphemes,
                result.median_us,
                result.p95_us,
            )
    return results


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Measure grapheme slicing latency.")
    parser.add_argument(
        "--repeat",
        type=int,
        action="append",
        help="Number of times the sample text is repeated (can be passed multiple times).",
    )
    parser.add_argument("--iterations", type=int, default=200, help="Timed calls per case.")
    parser.add_argument("--json", action="store_true", help="Emit machine-readable JSON results.")
    parser.add_argument("--log-dir", help="Also write results to stringkit.log in this directory.")
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level.")
    args = parser.parse_args(argv)

    repeats = args.repeat or [10, 100, 1_000]
    if any(value <= 0 for value in repeats):
        parser.error("--repeat values must be positive")
    if args.iterations <= 0:
        parser.error("--iterations must be positive")

    log_path = None
    if args.log_dir or args.verbose:
        log_path = setup_logging(
            logging.DEBUG if args.verbose else logging.INFO,
            log_dir=args.log_dir,
        )
        LOGGER.debug("Benchmarking repeats=%s iterations=%d", repeats, args.iterations)

    results = run_benchmarks(repeats, args.iterations)

    if args.json:
        print(json.dumps([asdict(result) for result in results], indent=2))
        return

    header = f"{'case':<24} {'graphemes':>10} {'median us':>12} {'p95 us':>12}"
    print(header)
    print("-" * len(header))
    for result in results:
        print(
            f"{result.label:<24} {result.graphemes:>10} "
            f"{result.median_us:>12.2f} {result.p95_us:>12.2f}"
        )
    if log_path is not None:
        print(f"\nLog written to {log_path}")


if __name__ == "__main__":
    main()
