#////////////////////////////////////////////////////////////////////////////////#
# File:         run_demo.py                                                      #
# Date:         2025-06-03                                                       #
# Description:  Command-line consumer of the reorder classifier: trains a model #
#               and prints reorder decisions for a synthetic catalog.           #
#////////////////////////////////////////////////////////////////////////////////#
"""
Run the reorder classifier end to end and print the results.

Usage:
    python -m reorder_net.run_demo --catalog-size 100 --training-size 500
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pandas as pd

from reorder_net import config
from reorder_net.evaluators.accuracy import reorder_rate, rule_agreement, summarize_decisions
from reorder_net.exceptions import ReorderNetError
from reorder_net.pipeline import InitializationResult, initialize
from reorder_net.sample_generator import catalog_to_frame
from reorder_net.utils import save_json, set_random_seed, to_serializable

logger = logging.getLogger(__name__)


def parse_arguments(argv: Optional[List[str]] = None):
    """
    Parse command line arguments.

    Args:
        argv: Argument list, sys.argv[1:] if None

    Returns:
        argparse.Namespace object containing all parsed command line arguments
    """
    parser = argparse.ArgumentParser(
        description="Train the reorder classifier on synthetic data and score a synthetic catalog",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument("--catalog-size", type=int, default=config.CATALOG_SIZE,
                        help="Number of catalog records to score")
    parser.add_argument("--training-size", type=int, default=config.TRAINING_BATCH_SIZE,
                        help="Number of labeled training examples")
    parser.add_argument("--learning-rate", type=float, default=config.DEFAULT_LEARNING_RATE,
                        help=f"Adam learning rate "
                             f"({config.PARITY_LEARNING_RATE} matches the browser demo's Adam step)")
    parser.add_argument("--random-seed", type=int, default=None,
                        help="Seed for reproducible runs (unseeded if omitted)")
    parser.add_argument("--output-json", type=str, default=None,
                        help="Optional path to write catalog, report and decisions as JSON")
    parser.add_argument("--verbose", action="store_true", help="Verbose output")

    return parser.parse_args(argv)


def build_results_frame(result: InitializationResult) -> pd.DataFrame:
    """Catalog table with a decision column."""
    frame = catalog_to_frame(result.catalog)
    frame["decision"] = [result.decisions[record_id] for record_id in frame.index]
    return frame


def build_summary(result: InitializationResult) -> Dict[str, Any]:
    """Plain dict of the run for printing and json export."""
    summary = {
        "accuracy": result.report.accuracy,
        "final_loss": result.report.final_loss,
        "epochs": result.report.epochs,
        "num_training_examples": result.report.num_examples,
        "reorder_rate": reorder_rate(result.decisions),
        "decision_counts": summarize_decisions(result.decisions),
    }
    if result.catalog:
        summary["rule_agreement"] = rule_agreement(result.catalog, result.decisions)
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=config.LOG_FORMAT,
        datefmt=config.LOG_DATE_FORMAT
    )

    rng = set_random_seed(args.random_seed) if args.random_seed is not None else None

    logger.info("=" * 60)
    logger.info("REORDER CLASSIFIER")
    logger.info("=" * 60)

    try:
        result = initialize(
            catalog_size=args.catalog_size,
            training_size=args.training_size,
            learning_rate=args.learning_rate,
            rng=rng,
        )
    except ReorderNetError as e:
        logger.error(f"Initialization failed: {e}")
        return 1

    summary = build_summary(result)

    logger.info("=" * 60)
    logger.info("RESULTS")
    logger.info("=" * 60)
    logger.info(f"Model accuracy: {result.report.accuracy_display}%")
    logger.info(f"Reorder rate: {summary['reorder_rate']}%")
    if "rule_agreement" in summary:
        logger.info(f"Agreement with reorder-point rule: {summary['rule_agreement']:.1f}%")

    if result.catalog:
        print(build_results_frame(result).to_string())

    if args.output_json:
        output_path = Path(args.output_json)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        payload = {
            "summary": summary,
            "catalog": build_results_frame(result).reset_index().to_dict(orient="records"),
        }
        save_json(to_serializable(payload), output_path)
        logger.info(f"Results saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
