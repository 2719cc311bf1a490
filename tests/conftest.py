"""Shared fixtures: reference keys, policy IDs and document builders."""

import json
from typing import Any, Dict

import pytest

TX_HASH = "a" * 64
UTXO_REF = f"{TX_HASH}#0"
OTHER_REF = f"{'0123456789abcdef' * 4}#12"
POLICY_ID = "5e4a2431a465a00dc5d8181aaff63959bb235d97013e7acb50b55bc4"
OTHER_POLICY_ID = "f0ff48bbb7bbe9d59a40f1ce90e9e9d0ff5002ec48f232b49ca0fb9a"

PLUTUS_V2_CBOR = "4e4d01000033222220051200120011"


def tx_out(**fields: Any) -> Dict[str, Any]:
    """A valid output; keyword arguments replace or add JSON fields."""
    entry: Dict[str, Any] = {"address": "addr_test1vqxyz", "value": {"lovelace": 1_000_000}}
    entry.update(fields)
    return entry


def document(entries: Dict[str, Any]) -> str:
    return json.dumps(entries)


@pytest.fixture
def reference_script() -> Dict[str, Any]:
    return {
        "scriptLanguage": "PlutusScriptLanguage PlutusScriptV2",
        "script": {
            "cborHex": PLUTUS_V2_CBOR,
            "description": "always succeeds",
            "type": "PlutusScriptV2",
        },
    }


@pytest.fixture
def full_entry(reference_script) -> Dict[str, Any]:
    """Entry with every optional field set."""
    return {
        "address": "addr_test1wz8ju6rmj2hsgpn3ds5d2fdxkl8zdjyq4dtutc0jcrs5evsxz9q0s",
        "value": {
            "lovelace": 25_000_000,
            POLICY_ID: {"4e4654": 1, "": 10},
        },
        "referenceScript": reference_script,
        "datumhash": "923918e403bf43c34b4ef6b48eb2ee04babed17320d8d1b9ff9ad086e86f44ec",
        "inlineDatum": {"constructor": 0, "fields": [{"int": 42}]},
        "inlineDatumhash": "ABCDEF0123",
        "inlineDatumRaw": "d8799f182aff",
        "datum": None,
    }


@pytest.fixture
def valid_document(full_entry) -> str:
    return document({
        UTXO_REF: full_entry,
        OTHER_REF: tx_out(value={"lovelace": 2_500_000, OTHER_POLICY_ID: {"746f6b656e": 100}}),
    })


@pytest.fixture
def utxo_file(tmp_path, valid_document):
    path = tmp_path / "utxo.json"
    path.write_text(valid_document, encoding="utf-8")
    return path
