"""Validation of the initial UTxO document."""

from .validator import (
    UTXO_REF_PATTERN,
    check_entry,
    collect_errors,
    is_hex,
    is_valid,
    is_valid_utxo_ref,
    iter_errors,
    validate,
    validate_snapshot,
)

__all__ = [
    "UTXO_REF_PATTERN", "check_entry", "collect_errors", "is_hex", "is_valid",
    "is_valid_utxo_ref", "iter_errors", "validate", "validate_snapshot",
]
