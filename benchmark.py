#!/usr/bin/env python3
"""
Benchmark the string algorithms: levenshtein, jaro, cosine, soundex, metaphone,
boyer-moore search and grapheme segmentation.
Runs for input sizes 10, 100, 1000; writes results to benchmark_results.csv.
"""

import sys
from pathlib import Path

# Project root on path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from benchmark import run_benchmark, BENCHMARK_SIZES


def main() -> None:
    out_path = Path(__file__).parent / "benchmark_results.csv"
    print(f"Running sizes {', '.join(map(str, BENCHMARK_SIZES))}...", flush=True)
    out = run_benchmark(BENCHMARK_SIZES, csv_path=out_path)
    for row in out["benchmark_results"]:
        if "error" in row:
            print(f"  {row['algorithm']} n={row['input_size']}: Error: {row['error']}", flush=True)
        else:
            print(f"  {row['algorithm']} n={row['input_size']}: {row['time_ms']} ms", flush=True)
    print(out["scaling_analysis"]["summary"])
    print(f"Wrote {out_path}")


if __name__ == "__main__":
    main()
