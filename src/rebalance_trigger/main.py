"""
Rebalance trigger report

Loads a portfolio from the YAML configuration and reports, for each asset,
how far its price must move before its allocation leaves the rebalance band.
"""
import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

import yaml

from app_config import AppConfig, load_config
from .calculator import RebalanceFactorSolver
from .exceptions import RebalanceTriggerError
from .logger import configure_root_logger
from .models import FactorResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CONFIG_LOAD_FAILED = 1
EXIT_CONFIG_PROBLEM = 2


def describe_result(result: FactorResult) -> str:
    """Render one solver result as a single report line"""
    band = f"target {result.target_ratio:.2%} ± {result.threshold:.2%}"

    if result.rebalance_triggered:
        return (
            f"{result.label}: rebalancing already triggered "
            f"(current {result.current_ratio:.2%}, {band})"
        )

    return (
        f"{result.label}: current {result.current_ratio:.2%} ({band}) | "
        f"up x{result.increase_factor:.6f} ({result.increase_percent:+.2f}%) to {result.upper_ratio:.2%} | "
        f"down x{result.decrease_factor:.6f} ({result.decrease_percent:+.2f}%) to {result.lower_ratio:.2%}"
    )


def run(config: AppConfig, index: Optional[int] = None,
        solver: Optional[RebalanceFactorSolver] = None) -> int:
    """Solve each requested asset and log the report; returns the process exit code"""
    solver = solver or RebalanceFactorSolver(config=config.solver)
    portfolio = config.portfolio
    indices: List[int] = [index] if index is not None else list(range(len(portfolio.values)))

    logger.info(
        f"Rebalance trigger report for {len(portfolio.values)} assets "
        f"(total ${sum(portfolio.values):,.2f}, threshold ±{portfolio.rebalance_threshold:.2%})"
    )

    exit_code = EXIT_OK
    for i in indices:
        symbol = portfolio.symbols[i] if portfolio.symbols and 0 <= i < len(portfolio.symbols) else None
        try:
            result = solver.solve(
                portfolio.values,
                portfolio.targets,
                portfolio.rebalance_threshold,
                i,
                symbol=symbol,
            )
        except RebalanceTriggerError as e:
            logger.error(
                f"{symbol or f'asset {i}'}: configuration problem: {e}",
                extra={'asset_index': i, 'error_type': type(e).__name__}
            )
            exit_code = EXIT_CONFIG_PROBLEM
            continue

        logger.info(describe_result(result), extra={'asset_index': i})

    return exit_code


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="rebalance-trigger",
        description="Report the price move each asset needs to cross its rebalance threshold",
    )
    parser.add_argument(
        "--config",
        default=os.getenv('CONFIG_PATH', 'config.yaml'),
        help="Path to the YAML configuration (default: $CONFIG_PATH or config.yaml)",
    )
    parser.add_argument(
        "--index",
        type=int,
        default=None,
        help="Only report the asset at this index",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = parse_args(argv)

    # Bootstrap logging until the configured handlers are installed
    logging.basicConfig(
        level=getattr(logging, os.getenv('LOG_LEVEL', 'INFO').upper(), logging.INFO),
        format='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    try:
        config = load_config(Path(args.config))
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Failed to load configuration: {e}")
        return EXIT_CONFIG_LOAD_FAILED

    configure_root_logger(config.logging)
    return run(config, index=args.index)


if __name__ == "__main__":
    sys.exit(main())
