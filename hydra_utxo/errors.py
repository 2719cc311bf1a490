"""Exceptions raised while loading and validating an initial UTxO set."""

from typing import Optional


class SnapshotError(Exception):
    """Base exception for initial UTxO set errors."""


class InitialUtxoFileError(SnapshotError):
    """The configured initial UTxO file could not be read."""


class ValidationError(SnapshotError):
    """
    Base of the validation error taxonomy.

    str(error) is the user-facing message. utxo_ref is the offending entry
    key, or None when the document could not be parsed at all.
    """

    def __init__(self, message: str, utxo_ref: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.utxo_ref = utxo_ref


class MalformedDocument(ValidationError):
    """Input is not JSON or does not match the snapshot schema."""

    def __init__(self, detail: str):
        super().__init__(f"Malformed UTxO document: {detail}")
        self.detail = detail


class InvalidReferenceFormat(ValidationError):
    """Top-level key is not <64 lowercase hex>#<index>."""

    def __init__(self, utxo_ref: str):
        super().__init__(f"Invalid UTxO ref: {utxo_ref}", utxo_ref)


class EmptyAddress(ValidationError):
    def __init__(self, utxo_ref: str):
        super().__init__(f"Empty address in UTxO: {utxo_ref}", utxo_ref)


class InvalidPolicyId(ValidationError):
    def __init__(self, utxo_ref: str, policy_id: str):
        super().__init__(
            f"Failed to validate value in UTxO {utxo_ref}: Invalid Policy ID: {policy_id}",
            utxo_ref,
        )
        self.policy_id = policy_id


class EmptyAssetMap(ValidationError):
    def __init__(self, utxo_ref: str, policy_id: str):
        super().__init__(
            f"Failed to validate value in UTxO {utxo_ref}: "
            f"Asset map for policy {policy_id} cannot be empty",
            utxo_ref,
        )
        self.policy_id = policy_id


class InvalidAssetName(ValidationError):
    def __init__(self, utxo_ref: str, policy_id: str, asset_name: str):
        super().__init__(
            f"Failed to validate value in UTxO {utxo_ref}: "
            f"Invalid asset name: {asset_name} (policy {policy_id})",
            utxo_ref,
        )
        self.policy_id = policy_id
        self.asset_name = asset_name


class InvalidScript(ValidationError):
    """Reference script has non-hex CBOR or an empty language tag."""

    def __init__(self, utxo_ref: str, reason: str):
        super().__init__(f"Failed to validate script in UTxO {utxo_ref}: {reason}", utxo_ref)
        self.reason = reason


class InvalidHexField(ValidationError):
    """datumhash, inlineDatumhash or datum is set but not hex."""

    def __init__(self, utxo_ref: str, field: str):
        super().__init__(f"Invalid {field} format in UTxO: {utxo_ref}", utxo_ref)
        self.field = field
