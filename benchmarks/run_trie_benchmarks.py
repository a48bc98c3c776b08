"""Benchmark the trie operations over growing word sets."""

import gc
import json
import random
import string
import time
import tracemalloc
from pathlib import Path
from typing import Callable

import matplotlib.pyplot as plt
import psutil

from src.prefix_trie.trie import Trie

DATA_SIZES = [1000, 10000, 50000, 100000]
WORD_LENGTH_RANGE = (3, 12)
PREFIX_LENGTH = 2
RESULTS_DIR = Path(__file__).parent.parent / "static" / "benchmarks" / "trie"
SEED = 1234


def generate_words(count: int, rng: random.Random) -> list[str]:
    """Generate `count` random lowercase words.

    Args:
        count (int): The number of words to generate.
        rng (random.Random): The random generator to draw from.

    Returns:
        list[str]: The generated words, duplicates included.

    """
    low, high = WORD_LENGTH_RANGE
    return [
        "".join(rng.choices(string.ascii_lowercase, k=rng.randint(low, high)))
        for _ in range(count)
    ]


def time_operation(
    operation: Callable[[str], object],
    arguments: list[str],
) -> float:
    """Return the average execution time of `operation` in milliseconds."""
    start = time.perf_counter()
    for argument in arguments:
        operation(argument)
    return (time.perf_counter() - start) * 1000 / max(len(arguments), 1)


def benchmark_size(size: int, rng: random.Random) -> dict[str, float]:
    """Benchmark every trie operation for a word set of `size` words.

    Args:
        size (int): The number of words to insert.
        rng (random.Random): The random generator to draw from.

    Returns:
        dict[str, float]: The average time per call of each operation in
        milliseconds, plus the peak traced memory and the process RSS
        in MiB.

    """
    words = generate_words(size, rng)
    prefixes = [word[:PREFIX_LENGTH] for word in rng.sample(words, 100)]
    trie = Trie()

    tracemalloc.start()
    insert_ms = time_operation(trie.insert, words)
    _, peak = tracemalloc.get_traced_memory()
    tracemalloc.stop()

    results = {
        "insert": insert_ms,
        "contains": time_operation(trie.contains, words),
        "starts_with": time_operation(trie.starts_with, prefixes),
        "remove": time_operation(trie.remove, words),
        "peak_memory_mib": peak / (1024 * 1024),
        "rss_mib": psutil.Process().memory_info().rss / (1024 * 1024),
    }

    del trie
    gc.collect()
    return results


def plot_results(results: dict[int, dict[str, float]]) -> None:
    """Save one bar chart per operation under `RESULTS_DIR`."""
    RESULTS_DIR.mkdir(parents=True, exist_ok=True)

    for operation in ("insert", "contains", "starts_with", "remove"):
        y_values = [results[size][operation] for size in DATA_SIZES]

        try:
            plt.figure(figsize=(8, 5))
            x = range(len(DATA_SIZES))
            plt.bar(x, y_values, color="steelblue")
            plt.xticks(x, [str(size) for size in DATA_SIZES])
            plt.xlabel("Words")
            plt.ylabel("Execution Time per Call (ms)")
            plt.title(f"Trie {operation} benchmark")

            for i, v in enumerate(y_values):
                plt.text(i, v, f"{v:.4f}", ha="center", va="bottom")

            plt.tight_layout()
            plt.savefig(RESULTS_DIR / f"benchmark_{operation}.png")
        finally:
            plt.close("all")


def main() -> None:
    """Main function."""
    rng = random.Random(SEED)
    results: dict[int, dict[str, float]] = {}

    for size in DATA_SIZES:
        print(f"\n--- Benchmarking {size} words ---")
        results[size] = benchmark_size(size, rng)
        for name, value in results[size].items():
            print(f"{name}: {value:.4f}")

    plot_results(results)

    with open(RESULTS_DIR / "results.json", "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)


if __name__ == "__main__":
    main()
