"""
String algorithm benchmarking module.

Measures: per-call time of each core algorithm over growing input sizes, and
a scaling check (linear vs quadratic growth) between the smallest and largest size.
Uses synthetic text only; no files are read.
"""

import csv
import sys
import time
from pathlib import Path
from typing import Any, Callable, Dict, List

# Project root on path
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from stringkit import (
    boyer_moore_search,
    cosine_distance,
    graphemes,
    jaro_distance,
    levenshtein_distance,
    metaphone,
    soundex,
)

BENCHMARK_SIZES = (10, 100, 1000)
REPEATS = 5

_WORDS = ["alpha", "beta", "gamma", "delta", "kitten", "sitting", "smith", "smyth", "café", "naïve"]


def _random_text(size: int, shift: int = 0) -> str:
    """Synthetic text of exactly size characters; shift rotates the word list."""
    words = _WORDS[shift:] + _WORDS[:shift]
    line = " ".join(words * 3) + " "
    n = max(1, size // len(line) + 1)
    return (line * n)[:size]


def _algorithms(size: int) -> Dict[str, Callable[[], Any]]:
    a = _random_text(size)
    b = _random_text(size, shift=3)
    word = _random_text(min(size, 12)).strip() or "a"
    return {
        "levenshtein": lambda: levenshtein_distance(a, b),
        "jaro": lambda: jaro_distance(a, b),
        "cosine": lambda: cosine_distance(a, b),
        "soundex": lambda: soundex(word),
        "metaphone": lambda: metaphone(word),
        "boyer_moore": lambda: boyer_moore_search(a, "kitten"),
        "graphemes": lambda: graphemes(a),
    }


def _time_call(fn: Callable[[], Any], repeats: int) -> float:
    """Average seconds per call over repeats runs."""
    t0 = time.perf_counter()
    for _ in range(repeats):
        fn()
    return (time.perf_counter() - t0) / repeats


def _compute_scaling_analysis(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Growth ratio of time vs input size, per algorithm, smallest to largest size."""
    by_algo: Dict[str, List[Dict[str, Any]]] = {}
    for r in results:
        if r.get("error") is None:
            by_algo.setdefault(r["algorithm"], []).append(r)
    if not by_algo:
        return {"summary": "Insufficient data for scaling analysis.", "algorithms": {}}

    algorithms: Dict[str, Any] = {}
    parts = []
    for name, rows in by_algo.items():
        rows.sort(key=lambda r: r["input_size"])
        first, last = rows[0], rows[-1]
        entry: Dict[str, Any] = {"time_ms_at_max_size": last["time_ms"], "growth": None}
        if len(rows) >= 2 and first["time_sec"] > 0:
            ratio_n = last["input_size"] / first["input_size"]
            ratio_t = last["time_sec"] / first["time_sec"]
            if ratio_t <= ratio_n * 2:
                entry["growth"] = "linear"
            elif ratio_t >= ratio_n ** 2 / 2:
                entry["growth"] = "quadratic"
            else:
                entry["growth"] = "superlinear"
            parts.append(f"{name}: {entry['growth']}.")
        algorithms[name] = entry
    return {
        "summary": " ".join(parts) if parts else "See per-run metrics.",
        "algorithms": algorithms,
        "max_size_tested": max(r["input_size"] for r in results),
    }


def run_benchmark(
    sizes: tuple[int, ...] = BENCHMARK_SIZES,
    repeats: int = REPEATS,
    csv_path: Path | None = None,
) -> Dict[str, Any]:
    """
    Time every core algorithm at each input size.
    Returns per-run results and scaling_analysis; optionally writes them to csv_path.
    """
    results: List[Dict[str, Any]] = []
    for size in sizes:
        for name, fn in _algorithms(size).items():
            row: Dict[str, Any] = {"algorithm": name, "input_size": size, "repeats": repeats}
            try:
                row["time_sec"] = round(_time_call(fn, repeats), 6)
                row["time_ms"] = round(row["time_sec"] * 1000, 3)
            except Exception as e:
                row["error"] = str(e)
                row.setdefault("time_sec", -1)
                row.setdefault("time_ms", -1)
            results.append(row)

    out: Dict[str, Any] = {
        "benchmark_results": results,
        "input_sizes": list(sizes),
        "scaling_analysis": _compute_scaling_analysis(results),
    }
    if csv_path:
        fieldnames = ["algorithm", "input_size", "repeats", "time_sec", "time_ms"]
        if any("error" in r for r in results):
            fieldnames.append("error")
        with open(csv_path, "w", newline="", encoding="utf-8") as f:
            w = csv.DictWriter(f, fieldnames=fieldnames, extrasaction="ignore")
            w.writeheader()
            w.writerows(results)
    return out
