"""Format checks for a parsed initial UTxO set."""

import logging
import re
import string
from typing import Iterator, List, Optional

from hydra_utxo.errors import (
    EmptyAddress,
    EmptyAssetMap,
    InvalidAssetName,
    InvalidHexField,
    InvalidPolicyId,
    InvalidReferenceFormat,
    InvalidScript,
    MalformedDocument,
    ValidationError,
)
from hydra_utxo.models import Script, TxOut, UTxOSnapshot, Value
from hydra_utxo.types import is_present

logger = logging.getLogger(__name__)

# Tx hash must be lowercase; payload hex below is case-insensitive.
UTXO_REF_PATTERN = re.compile(r"[0-9a-f]{64}#[0-9]+")

POLICY_ID_LENGTH = 56
MAX_ASSET_NAME_LENGTH = 64

HEX_DIGITS = frozenset(string.hexdigits)

# attribute name -> JSON key, checked in this order
HEX_FIELDS = (
    ("datumhash", "datumhash"),
    ("inline_datumhash", "inlineDatumhash"),
    ("datum", "datum"),
)


def is_hex(s: str) -> bool:
    """ASCII hex digits only, either case. The empty string passes."""
    return all(c in HEX_DIGITS for c in s)


def is_valid_utxo_ref(utxo_ref: str) -> bool:
    return UTXO_REF_PATTERN.fullmatch(utxo_ref) is not None


def _check_value(utxo_ref: str, value: Value) -> Optional[ValidationError]:
    for policy_id, bundle in value.assets.items():
        if len(policy_id) != POLICY_ID_LENGTH or not is_hex(policy_id):
            return InvalidPolicyId(utxo_ref, policy_id)
        if not bundle:
            return EmptyAssetMap(utxo_ref, policy_id)
        for asset_name in bundle:
            if len(asset_name) > MAX_ASSET_NAME_LENGTH or not is_hex(asset_name):
                return InvalidAssetName(utxo_ref, policy_id, asset_name)
    return None


def _check_script(utxo_ref: str, script: Script) -> Optional[ValidationError]:
    if not is_hex(script.script.cbor_hex):
        return InvalidScript(utxo_ref, "Invalid hex in script")
    if not script.script_language:
        return InvalidScript(utxo_ref, "Script language cannot be empty")
    return None


def check_entry(utxo_ref: str, tx_out: TxOut) -> Optional[ValidationError]:
    """Return the first violation in one entry, or None if it is valid."""
    if not is_valid_utxo_ref(utxo_ref):
        return InvalidReferenceFormat(utxo_ref)

    if not tx_out.address:
        return EmptyAddress(utxo_ref)

    error = _check_value(utxo_ref, tx_out.value)
    if error:
        return error

    if is_present(tx_out.reference_script):
        error = _check_script(utxo_ref, tx_out.reference_script)
        if error:
            return error

    for attr, key in HEX_FIELDS:
        field_value = getattr(tx_out, attr)
        if is_present(field_value) and not is_hex(field_value):
            return InvalidHexField(utxo_ref, key)

    return None


def iter_errors(snapshot: UTxOSnapshot) -> Iterator[ValidationError]:
    """Yield the first violation of every invalid entry, in document order."""
    for utxo_ref, tx_out in snapshot.entries.items():
        error = check_entry(utxo_ref, tx_out)
        if error:
            yield error


def validate_snapshot(snapshot: UTxOSnapshot) -> None:
    """Raise the first violation found in an already parsed snapshot."""
    logger.debug(f"Validating {len(snapshot)} UTxO entries")
    for error in iter_errors(snapshot):
        logger.debug(f"Validation failed: {error}")
        raise error


def validate(document: str) -> None:
    """
    Validate an initial UTxO JSON document.

    Returns None on success. Raises MalformedDocument if the text is not a
    well-shaped snapshot, otherwise the first ValidationError encountered.
    """
    validate_snapshot(UTxOSnapshot.from_json(document))


def collect_errors(document: str) -> List[ValidationError]:
    """Every violation in the document (one per entry). Empty list means valid."""
    try:
        snapshot = UTxOSnapshot.from_json(document)
    except MalformedDocument as e:
        return [e]
    return list(iter_errors(snapshot))


def is_valid(document: str) -> bool:
    try:
        validate(document)
    except ValidationError:
        return False
    return True
