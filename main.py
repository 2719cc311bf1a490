#!/usr/bin/env python3
"""
Offline initial UTxO check

Validates the initial UTxO file an offline Hydra node would start from.

Usage:
    python main.py                 # file from settings.initial_utxo_file
    python main.py utxo.json       # explicit file
    python main.py utxo.json --all # report every invalid entry
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from hydra_utxo.config import OfflineChainConfig, settings
from hydra_utxo.errors import InitialUtxoFileError, ValidationError
from hydra_utxo.loading import load_initial_utxo, read_document, summarize
from hydra_utxo.validation import collect_errors

logger = logging.getLogger(__name__)


def check_file(config: OfflineChainConfig, report_all: bool = False) -> bool:
    """Validate the configured file and print the outcome."""
    print(f"Initial UTxO file: {config.initial_utxo_file}")
    print()

    if report_all:
        try:
            errors = collect_errors(read_document(config.initial_utxo_file))
        except InitialUtxoFileError as e:
            print(f"❌ FAILED: {e}")
            return False
        if errors:
            print(f"❌ FAILED: {len(errors)} invalid entr{'y' if len(errors) == 1 else 'ies'}")
            for error in errors:
                print(f"  - {error}")
            return False

    try:
        snapshot = load_initial_utxo(config)
    except (InitialUtxoFileError, ValidationError) as e:
        print(f"❌ FAILED: {e}")
        return False

    summary = summarize(snapshot)
    print("✅ Initial UTxO set is valid")
    print(f"   Entries: {summary.entries:,}")
    print(f"   Lovelace: {summary.lovelace:,} ({summary.ada:,.6f} ADA)")
    print(f"   Policies: {summary.policies:,}")
    print(f"   Native assets: {summary.assets:,}")
    print(f"   Reference scripts: {summary.reference_scripts:,}")
    return True


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate an offline initial UTxO file")
    parser.add_argument("path", nargs="?", help="UTxO JSON file (default: settings.initial_utxo_file)")
    parser.add_argument("--all", action="store_true", help="Report every invalid entry instead of the first")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the check; returns the process exit code."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.path:
        config = OfflineChainConfig(initial_utxo_file=Path(args.path))
    else:
        config = settings.offline_chain_config()
        if config is None:
            print(f"❌ Chain mode is '{settings.chain_mode}', no initial UTxO file to check")
            return 1

    return 0 if check_file(config, report_all=args.all) else 1


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        sys.exit(130)
    except Exception:
        logger.exception("Unexpected error")
        sys.exit(1)
