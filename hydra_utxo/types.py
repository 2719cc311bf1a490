"""
Core types for the initial UTxO set.

Token/Asset for native assets, the script type tag, and the ABSENT marker
used for fields that may be missing, null, or set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Missing(Enum):
    """Marker for a JSON key that is not present at all (as opposed to null)."""
    ABSENT = "absent"

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = Missing.ABSENT


def is_present(field: Any) -> bool:
    """True only for a field that carries a value (neither ABSENT nor null)."""
    return field is not ABSENT and field is not None


class ScriptType(str, Enum):
    """Closed set of script kinds accepted in a reference script."""
    SIMPLE = "SimpleScript"
    PLUTUS_V1 = "PlutusScriptV1"
    PLUTUS_V2 = "PlutusScriptV2"
    PLUTUS_V3 = "PlutusScriptV3"

    @property
    def is_plutus(self) -> bool:
        return self is not ScriptType.SIMPLE


@dataclass(frozen=True)
class Token:
    """Native asset key as written in the document: policy ID and hex name."""
    policy_id: str
    name: str


@dataclass(frozen=True)
class Asset:
    """Token with amount."""
    amount: int
    token: Token
