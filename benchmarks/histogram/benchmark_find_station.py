"""Benchmark histogram bin lookup.

Compares one scalar find_station call per query (O(log n) each, Python
loop) against a single batched find_stations call (torch.searchsorted)
across different station counts.
"""

import time

import torch

from binstat.histogram import StationFinder


def benchmark_find_station(
    n_stations: int,
    n_queries: int = 1000,
    n_iterations: int = 10,
    method: str = "batched",
) -> float:
    """Benchmark bin lookup for a given number of stations.

    Parameters
    ----------
    n_stations : int
        Number of stations (bins + 1).
    n_queries : int
        Number of values looked up per iteration.
    n_iterations : int
        Number of iterations for timing.
    method : str
        'scalar' or 'batched'.

    Returns
    -------
    float
        Average time per iteration in milliseconds.
    """
    stations = torch.linspace(0.0, 1.0, n_stations, dtype=torch.float64)
    finder = StationFinder(stations.tolist())
    values = torch.rand(n_queries, dtype=torch.float64)

    if method == "scalar":
        queries = values.tolist()

        def lookup():
            return [finder.find_station(v) for v in queries]

    elif method == "batched":

        def lookup():
            return finder.find_stations(values)

    else:
        raise ValueError(f"Unknown method: {method}")

    # Warmup
    for _ in range(3):
        _ = lookup()

    start = time.perf_counter()
    for _ in range(n_iterations):
        _ = lookup()

    elapsed = time.perf_counter() - start
    return elapsed / n_iterations * 1000  # ms


def main():
    """Run lookup benchmarks across station counts."""
    sizes = [2, 8, 64, 512, 4096, 32768]

    print("Histogram Station Lookup Benchmark (1000 queries)")
    print("=" * 50)
    print(f"{'Stations':>10} {'Scalar (ms)':>16} {'Batched (ms)':>16}")
    print("-" * 50)

    for n in sizes:
        ms_scalar = benchmark_find_station(n, method="scalar")
        ms_batched = benchmark_find_station(n, method="batched")
        print(f"{n:>10} {ms_scalar:>16.4f} {ms_batched:>16.4f}")


if __name__ == "__main__":
    main()
