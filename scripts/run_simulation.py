"""
Run the Monte Carlo simulation and print a summary.

Engine settings are read from TENSOR_SRS_* environment variables
(or a .env file).

Usage:
    # Default run (500 cards x 20 reviews)
    python -m scripts.run_simulation

    # Smaller, reproducible run
    python -m scripts.run_simulation --cards 50 --reviews 10 --seed 42

    # Also write every simulated review to CSV
    python -m scripts.run_simulation --seed 7 --csv reviews.csv
"""

import argparse
import logging

from tensor_srs.config import load_engine_config
from tensor_srs.errors import InvalidInput
from tensor_srs.simulation import SimulationReport, grade_counts, run_monte_carlo


def display_report(report: SimulationReport) -> None:
    """Print summary figures of a simulation run."""
    print("=" * 60)
    print("Tensor Monte Carlo Summary")
    print("=" * 60)
    print(f"Cards simulated: {report.num_cards}")
    print(f"Reviews per card: {report.reviews_per_card}")
    print()
    print("Final Stability:")
    print(f"  Mean: {report.final_stability.mean:.2f}")
    print(f"  Variance: {report.final_stability.variance:.2f}")
    print()
    print("Intervals:")
    print(f"  Mean: {report.intervals.mean:.2f} days")
    print(f"  Variance: {report.intervals.variance:.2f}")
    print()
    print("Sanity checks:")
    print(f"  Min stability: {report.final_stability.minimum:.2f}")
    print(f"  Max stability: {report.final_stability.maximum:.2f}")
    print(f"  Min interval: {report.intervals.minimum:.2f}")
    print(f"  Max interval: {report.intervals.maximum:.2f}")

    counts = grade_counts(report.reviews)
    if not counts.empty:
        print()
        print("Grades:")
        for grade, count in counts.items():
            print(f"  {grade}: {count}")


def main():
    parser = argparse.ArgumentParser(description="Run the Monte Carlo review simulation")
    parser.add_argument(
        "--cards",
        type=int,
        default=500,
        help="Number of simulated cards (default: 500)"
    )
    parser.add_argument(
        "--reviews",
        type=int,
        default=20,
        help="Reviews per card (default: 20)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible runs"
    )
    parser.add_argument(
        "--csv",
        type=str,
        default=None,
        help="Write every simulated review to this CSV file"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-review pipeline values"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_engine_config()
    try:
        report = run_monte_carlo(
            config,
            num_cards=args.cards,
            reviews_per_card=args.reviews,
            seed=args.seed,
        )
    except InvalidInput as e:
        parser.error(str(e))
    display_report(report)

    if args.csv:
        report.reviews.to_csv(args.csv, index=False)
        print(f"\n✓ Wrote {len(report.reviews)} reviews to {args.csv}")


if __name__ == "__main__":
    main()
