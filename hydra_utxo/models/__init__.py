"""
Data models for the initial UTxO set.

Mirrors the JSON document fed to an offline Hydra node:

    {"<tx hash>#<index>": {"address": ..., "value": {...}, "referenceScript": ..., ...}}

Parsing only enforces the schema shape (types, required fields). Format rules
(hex, lengths, key pattern) are checked by hydra_utxo.validation.
"""

import json
from typing import Annotated, Any, Dict, Iterator, Optional

import pydantic
from pydantic import BaseModel, ConfigDict, Field, RootModel, StrictStr, model_serializer, model_validator
from pycardano import (
    MultiAsset,
    NativeScript,
    PlutusV1Script,
    PlutusV2Script,
    PlutusV3Script,
    Value as CardanoValue,
)

from hydra_utxo.errors import MalformedDocument
from hydra_utxo.types import ABSENT, Asset, ScriptType, Token, is_present

UINT64_MAX = 2**64 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Lovelace = Annotated[int, Field(strict=True, ge=0, le=UINT64_MAX)]
Quantity = Annotated[int, Field(strict=True, ge=INT64_MIN, le=INT64_MAX)]


class SnapshotModel(BaseModel):
    """Base for entry models: camelCase aliases, unknown keys ignored."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ScriptDetails(SnapshotModel):
    """Script body as found in a cardano-cli text envelope."""
    cbor_hex: StrictStr = Field(alias="cborHex")
    description: StrictStr
    script_type: ScriptType = Field(alias="type")

    def to_pycardano(self):
        """Build the matching pycardano script. Only call on validated (hex) data."""
        if not self.script_type.is_plutus:
            return NativeScript.from_cbor(self.cbor_hex)
        script_cls = {
            ScriptType.PLUTUS_V1: PlutusV1Script,
            ScriptType.PLUTUS_V2: PlutusV2Script,
            ScriptType.PLUTUS_V3: PlutusV3Script,
        }[self.script_type]
        return script_cls(bytes.fromhex(self.cbor_hex))


class Script(SnapshotModel):
    """Reference script attached to an output."""
    script_language: StrictStr = Field(alias="scriptLanguage")
    script: ScriptDetails


class Value(BaseModel):
    """
    Lovelace plus native assets.

    In JSON the policies sit next to "lovelace"; here they are gathered in
    assets (policy ID -> asset name -> quantity, both hex). Quantities are
    signed; only the JSON shape is enforced.
    """
    lovelace: Lovelace = 0
    assets: Dict[str, Dict[str, Quantity]] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _gather_policies(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        gathered: Dict[str, Any] = {"assets": {k: v for k, v in data.items() if k != "lovelace"}}
        if "lovelace" in data:
            gathered["lovelace"] = data["lovelace"]
        return gathered

    @model_serializer
    def _flatten_policies(self) -> Dict[str, Any]:
        return {"lovelace": self.lovelace, **self.assets}

    def iter_assets(self) -> Iterator[Asset]:
        """Native assets in document order (ADA excluded)."""
        for policy_id, bundle in self.assets.items():
            for name, amount in bundle.items():
                yield Asset(amount=amount, token=Token(policy_id=policy_id, name=name))

    def to_pycardano(self) -> CardanoValue:
        """
        Convert to a pycardano Value.

        Needs byte-aligned hex: validation accepts odd-length asset names,
        which have no on-chain form and raise ValueError here.
        """
        multi_asset = MultiAsset.from_primitive({
            bytes.fromhex(policy_id): {bytes.fromhex(name): amount for name, amount in bundle.items()}
            for policy_id, bundle in self.assets.items()
        })
        return CardanoValue(self.lovelace, multi_asset)


class TxOut(SnapshotModel):
    """
    One unspent output of the initial set.

    Optional fields default to ABSENT when the key is missing and hold None
    when the key is present as null.
    """
    address: StrictStr
    value: Value
    reference_script: Optional[Script] = Field(default=ABSENT, alias="referenceScript")
    datumhash: Optional[StrictStr] = ABSENT
    inline_datum: Any = Field(default=ABSENT, alias="inlineDatum")
    inline_datumhash: Optional[StrictStr] = Field(default=ABSENT, alias="inlineDatumhash")
    inline_datum_raw: Optional[StrictStr] = Field(default=ABSENT, alias="inlineDatumRaw")
    datum: Optional[StrictStr] = ABSENT

    @property
    def has_reference_script(self) -> bool:
        return is_present(self.reference_script)


def _describe(error: pydantic.ValidationError) -> str:
    """First schema error as '<json path>: <message>'."""
    first = error.errors()[0]
    path = "".join(f"[{part!r}]" for part in first["loc"])
    message = f"${path}: {first['msg']}"
    if isinstance(first.get("input"), (str, int, float)):
        message += f", got {first['input']!r}"
    if error.error_count() > 1:
        message += f" (+{error.error_count() - 1} more)"
    return message


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


class UTxOSnapshot(RootModel[Dict[str, TxOut]]):
    """Ordered mapping of UTxO reference -> TxOut, in document order."""

    @classmethod
    def from_json(cls, document: str) -> "UTxOSnapshot":
        """Parse a JSON document. Raises MalformedDocument on any JSON or schema error."""
        try:
            data = json.loads(document, parse_constant=_reject_constant)
        except RecursionError:
            raise MalformedDocument("document is nested too deeply") from None
        except (TypeError, ValueError) as e:
            raise MalformedDocument(str(e)) from e
        try:
            return cls.model_validate(data)
        except pydantic.ValidationError as e:
            raise MalformedDocument(_describe(e)) from e

    @property
    def entries(self) -> Dict[str, TxOut]:
        return self.root

    def to_dict(self) -> Dict[str, Any]:
        """camelCase dict; missing optional fields stay missing, nulls stay null."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    def __iter__(self) -> Iterator[str]:
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, utxo_ref: str) -> TxOut:
        return self.root[utxo_ref]


__all__ = ["ScriptDetails", "Script", "Value", "TxOut", "UTxOSnapshot"]
