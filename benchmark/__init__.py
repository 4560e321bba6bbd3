"""String algorithm benchmarking: per-call time by input size and growth analysis."""

from .benchmark import run_benchmark, BENCHMARK_SIZES

__all__ = ["run_benchmark", "BENCHMARK_SIZES"]
