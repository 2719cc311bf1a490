"""
Initial UTxO set validation for offline Hydra nodes.

Structure:
    hydra_utxo/
    ├── types.py          # Token, Asset, ScriptType, ABSENT
    ├── errors.py         # ValidationError taxonomy
    ├── models/           # UTxOSnapshot, TxOut, Value, Script
    ├── validation/       # validate(), collect_errors()
    ├── loading/          # load_initial_utxo(), summarize()
    └── config/           # Settings, OfflineChainConfig

Usage:
    from hydra_utxo import validate, ValidationError
    from hydra_utxo.loading import load_initial_utxo
    from hydra_utxo.config import settings
"""

from .errors import (
    EmptyAddress,
    EmptyAssetMap,
    InitialUtxoFileError,
    InvalidAssetName,
    InvalidHexField,
    InvalidPolicyId,
    InvalidReferenceFormat,
    InvalidScript,
    MalformedDocument,
    SnapshotError,
    ValidationError,
)
from .models import Script, ScriptDetails, TxOut, UTxOSnapshot, Value
from .types import ABSENT, Asset, ScriptType, Token, is_present
from .validation import collect_errors, is_valid, validate, validate_snapshot

__all__ = [
    # Types
    "ABSENT", "Asset", "ScriptType", "Token", "is_present",
    # Models
    "Script", "ScriptDetails", "TxOut", "UTxOSnapshot", "Value",
    # Validation
    "validate", "validate_snapshot", "collect_errors", "is_valid",
    # Errors
    "SnapshotError", "InitialUtxoFileError", "ValidationError", "MalformedDocument",
    "InvalidReferenceFormat", "EmptyAddress", "InvalidPolicyId", "EmptyAssetMap",
    "InvalidAssetName", "InvalidScript", "InvalidHexField",
]
