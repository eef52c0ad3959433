#!/usr/bin/env python3
"""
Benchmark for the codepoint catalog build and bounded name search.

Builds the catalog once, then times repeated name searches and reports
mean/median/CV. Supports a maximum median latency gate.
"""

from __future__ import annotations

import argparse
import gc
import statistics
import time

from quickchar.resolver import UnicodeResolver
from quickchar.services import CatalogInitializationService, ResolverConfig

DEFAULT_TERMS = ("berry", "cherries", "latin small letter", "arrow", "zzzz-no-such-name")


def _time_searches(resolver: UnicodeResolver, terms: list[str], rounds: int) -> list[float]:
    """Per-term latency in milliseconds for each round."""
    samples = []
    gc.collect()
    for _ in range(rounds):
        for term in terms:
            start = time.perf_counter()
            resolver.get_result_for_text(f"unicode {term}")
            samples.append((time.perf_counter() - start) * 1000.0)
    return samples


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Catalog build and name search benchmark.")
    parser.add_argument("--rounds", type=int, default=5, help="Number of passes over the search terms.")
    parser.add_argument("--term", action="append", help="Search term (repeatable). Defaults to a fixed set.")
    parser.add_argument(
        "--max-median-ms",
        type=float,
        default=0.0,
        help="Optional gate: fail (exit 1) when median search latency exceeds this value.",
    )
    return parser


def main() -> int:
    args = _build_arg_parser().parse_args()

    if args.rounds < 1:
        message = "--rounds must be >= 1"
        raise ValueError(message)

    terms = args.term or list(DEFAULT_TERMS)

    print("=" * 72)
    print("QUICKCHAR SEARCH BENCHMARK")
    print("=" * 72)

    catalog = CatalogInitializationService(ResolverConfig.create_default()).build_catalog()
    print(f"catalog_entries={len(catalog)} blocks={len(catalog.blocks)} build_seconds={catalog.build_seconds:.3f}")

    resolver = UnicodeResolver(catalog=catalog)
    samples = _time_searches(resolver, terms, args.rounds)

    median_ms = statistics.median(samples)
    mean_ms = statistics.mean(samples)
    stdev_ms = statistics.stdev(samples) if len(samples) > 1 else 0.0
    cv = (stdev_ms / mean_ms * 100.0) if mean_ms else 0.0

    print()
    print("Summary")
    print("-" * 72)
    print(f"search_mean_ms={mean_ms:.3f}")
    print(f"search_median_ms={median_ms:.3f}")
    print(f"search_stddev_ms={stdev_ms:.3f}")
    print(f"search_cv_percent={cv:.2f}")
    print(f"search_max_ms={max(samples):.3f}")

    if args.max_median_ms > 0 and median_ms > args.max_median_ms:
        print(f"GATE=FAIL (median {median_ms:.3f}ms > allowed {args.max_median_ms:.3f}ms)")
        return 1

    print("GATE=PASS")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
