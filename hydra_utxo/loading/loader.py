"""Load the configured initial UTxO file and summarize it."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Set, Union

from hydra_utxo.config import OfflineChainConfig
from hydra_utxo.errors import InitialUtxoFileError
from hydra_utxo.models import UTxOSnapshot
from hydra_utxo.types import Token
from hydra_utxo.validation import validate_snapshot

logger = logging.getLogger(__name__)


@dataclass
class SnapshotSummary:
    """Totals over a validated snapshot."""
    entries: int
    lovelace: int
    policies: int
    assets: int
    reference_scripts: int

    @property
    def ada(self) -> float:
        return self.lovelace / 1_000_000


def read_document(path: Union[str, Path]) -> str:
    """Read a UTF-8 document from disk. Raises InitialUtxoFileError on failure."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        logger.error(f"Initial UTxO file is not UTF-8: {path}")
        raise InitialUtxoFileError(f"{path} is not valid UTF-8: {e}") from e
    except OSError as e:
        logger.error(f"Failed to read initial UTxO file {path}: {e}")
        raise InitialUtxoFileError(f"Cannot read {path}: {e.strerror or e}") from e


def load_snapshot(path: Union[str, Path]) -> UTxOSnapshot:
    """Read, parse and validate a snapshot file (fail-fast)."""
    snapshot = UTxOSnapshot.from_json(read_document(path))
    validate_snapshot(snapshot)
    logger.info(f"Loaded {len(snapshot)} UTxO entries from {path}")
    return snapshot


def load_initial_utxo(config: OfflineChainConfig) -> UTxOSnapshot:
    """Load the initial UTxO set referenced by an offline chain config."""
    return load_snapshot(config.initial_utxo_file)


def summarize(snapshot: UTxOSnapshot) -> SnapshotSummary:
    """
    Aggregate a validated snapshot.

    Tokens are counted as written in the document, so policy IDs or asset
    names differing only in hex case count separately.
    """
    lovelace = 0
    tokens: Set[Token] = set()
    reference_scripts = 0
    for tx_out in snapshot.entries.values():
        lovelace += tx_out.value.lovelace
        tokens.update(asset.token for asset in tx_out.value.iter_assets())
        if tx_out.has_reference_script:
            reference_scripts += 1

    return SnapshotSummary(
        entries=len(snapshot),
        lovelace=lovelace,
        policies=len({token.policy_id for token in tokens}),
        assets=len(tokens),
        reference_scripts=reference_scripts,
    )
