"""Benchmark the R2 indicator on NSGA-II fronts for the ZDT problems.

Pymoo's NSGA-II is run on ZDT1-3; each final front is scored with R2 against
the problem's true Pareto front and, for comparison, with hypervolume. The
time spent computing R2 and the full leave-one-out ranking is recorded.

Usage:
    python benchmarks/zdt/run_benchmark.py
"""

import json
import logging
import sys
import time
from collections import defaultdict
from datetime import UTC, datetime
from pathlib import Path

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import numpy as np
from pymoo.algorithms.moo.nsga2 import NSGA2
from pymoo.optimize import minimize
from pymoo.problems import get_problem
from pymoo.termination import get_termination

from benchmarks.metrics import hypervolume, r2
from r2_indicator import R2

# Configure logging
logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# Experiment parameters
PROBLEMS = ["zdt1", "zdt2", "zdt3"]
POP_SIZE = 100
N_GENERATIONS = 250
N_WEIGHT_VECTORS = [100, 500]
N_RUNS = 5
SEEDS = list(range(N_RUNS))


def run_nsga2(problem_name: str, seed: int) -> tuple[np.ndarray, np.ndarray]:
    """Run pymoo's NSGA-II and return (final front, true Pareto front)."""
    problem = get_problem(problem_name)
    result = minimize(
        problem,
        NSGA2(pop_size=POP_SIZE),
        get_termination("n_gen", N_GENERATIONS),
        seed=seed,
        verbose=False,
    )
    return result.F, problem.pareto_front()


def score_front(front: np.ndarray, reference: np.ndarray, indicator: R2) -> dict:
    """Score one front and time the indicator and the leave-one-out ranking."""
    start_time = time.perf_counter()
    value = r2(front, reference, indicator)
    value_time = time.perf_counter() - start_time

    start_time = time.perf_counter()
    best = indicator.best(front, reference)
    ranking_time = time.perf_counter() - start_time

    return {
        "r2": value,
        "best_index": best,
        "r2_seconds": value_time,
        "ranking_seconds": ranking_time,
    }


def run_benchmark() -> dict:
    """Run the full benchmark suite.

    Returns:
        Dictionary containing metadata and results.
    """
    metadata = {
        "timestamp": datetime.now(UTC).isoformat(),
        "parameters": {
            "pop_size": POP_SIZE,
            "n_generations": N_GENERATIONS,
            "n_weight_vectors": N_WEIGHT_VECTORS,
            "n_runs": N_RUNS,
            "seeds": SEEDS,
        },
    }

    indicators = {n: R2(n) for n in N_WEIGHT_VECTORS}
    results = []

    for problem_name in PROBLEMS:
        for seed in SEEDS:
            logger.info(f"Running NSGA-II on {problem_name.upper()} (seed={seed})")
            front, reference = run_nsga2(problem_name, seed)
            hv = hypervolume(front)

            for n_vectors, indicator in indicators.items():
                scores = score_front(front, reference, indicator)
                results.append(
                    {
                        "problem": problem_name.upper(),
                        "seed": seed,
                        "n_vectors": n_vectors,
                        "front_size": len(front),
                        "hypervolume": hv,
                        **scores,
                    }
                )
                logger.info(
                    f"  N={n_vectors}: R2={scores['r2']:.5f}, HV={hv:.4f}, "
                    f"ranking {scores['ranking_seconds'] * 1000:.1f} ms"
                )

    return {"metadata": metadata, "results": results}


def print_summary(results: dict) -> None:
    """Print a summary table of the benchmark results.

    Args:
        results: The benchmark results dictionary.
    """
    data = defaultdict(lambda: defaultdict(list))
    for r in results["results"]:
        data[r["problem"]][r["n_vectors"]].append(r)

    print("\n" + "=" * 72)
    print("R2 BENCHMARK SUMMARY")
    print("=" * 72)
    print(f"\nParameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={N_RUNS}\n")

    header = f"{'Problem':<10}{'N':>6}{'R2 mean':>14}{'R2 std':>12}{'HV mean':>12}{'rank ms':>12}"
    print(header)
    print("-" * len(header))

    for problem in sorted(data):
        for n_vectors in sorted(data[problem]):
            runs = data[problem][n_vectors]
            values = [r["r2"] for r in runs]
            hvs = [r["hypervolume"] for r in runs]
            ranking_ms = np.mean([r["ranking_seconds"] for r in runs]) * 1000
            print(
                f"{problem:<10}{n_vectors:>6}{np.mean(values):>14.5f}{np.std(values):>12.5f}"
                f"{np.mean(hvs):>12.4f}{ranking_ms:>12.1f}"
            )

    print()


def main() -> None:
    """Main entry point for the benchmark."""
    logger.info("Starting ZDT R2 benchmark")
    logger.info(f"Parameters: pop_size={POP_SIZE}, generations={N_GENERATIONS}, runs={N_RUNS}")

    results = run_benchmark()

    output_path = Path(__file__).parent / "results" / "benchmark_results.json"
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        json.dump(results, f, indent=2)

    logger.info(f"Results saved to {output_path}")

    print_summary(results)


if __name__ == "__main__":
    main()
