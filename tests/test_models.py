"""Tests for the snapshot model: parsing, tri-state fields and conversions."""

from pycardano import AssetName, PlutusV1Script, PlutusV2Script, PlutusV3Script, ScriptHash, ScriptPubkey
from pycardano import Value as CardanoValue

import pytest

from hydra_utxo import ABSENT, MalformedDocument, ScriptType, Token, TxOut, UTxOSnapshot, Value, is_present
from hydra_utxo.models import ScriptDetails

from conftest import OTHER_POLICY_ID, OTHER_REF, PLUTUS_V2_CBOR, POLICY_ID, UTXO_REF, document, tx_out

KEY_HASH = "0d94e174732ef9aae73f395ab44507bfa983d65023c11a951f0c32e4"
# [0, h'<key hash>'] - a single-signature native script
PUBKEY_SCRIPT_CBOR = "8200581c" + KEY_HASH


class TestTristate:
    """Absent, null and present optional fields."""

    def test_absent_fields(self):
        out = TxOut.model_validate(tx_out())
        assert out.reference_script is ABSENT
        assert out.datumhash is ABSENT
        assert out.inline_datum is ABSENT
        assert not is_present(out.datum)

    def test_null_fields(self):
        out = TxOut.model_validate(tx_out(referenceScript=None, datumhash=None, inlineDatum=None))
        assert out.reference_script is None
        assert out.datumhash is None
        assert out.inline_datum is None
        assert not out.has_reference_script

    def test_present_fields(self, reference_script):
        out = TxOut.model_validate(tx_out(referenceScript=reference_script, datum="00", inlineDatum=0))
        assert out.has_reference_script
        assert out.reference_script.script.script_type is ScriptType.PLUTUS_V2
        assert out.datum == "00"
        # 0 is a value, not a missing field
        assert is_present(out.inline_datum)

    def test_serialization_keeps_null_and_drops_absent(self):
        snapshot = UTxOSnapshot.from_json(document({UTXO_REF: tx_out(datumhash=None)}))
        data = snapshot.to_dict()[UTXO_REF]
        assert data["datumhash"] is None
        assert "datum" not in data
        assert "referenceScript" not in data

    def test_absent_is_falsy(self):
        assert not ABSENT
        assert repr(ABSENT) == "ABSENT"


class TestSnapshot:
    def test_preserves_document_order(self):
        refs = [f"{c * 64}#{i}" for i, c in enumerate("fedcba")]
        snapshot = UTxOSnapshot.from_json(document({ref: tx_out() for ref in refs}))
        assert list(snapshot) == refs
        assert list(snapshot.to_dict()) == refs
        assert len(snapshot) == 6

    def test_unknown_entry_keys_are_ignored(self):
        snapshot = UTxOSnapshot.from_json(document({UTXO_REF: tx_out(extra="ignored")}))
        assert "extra" not in snapshot.to_dict()[UTXO_REF]

    def test_error_path_names_the_entry(self):
        with pytest.raises(MalformedDocument) as exc_info:
            UTxOSnapshot.from_json(document({UTXO_REF: tx_out(value={"lovelace": "1"})}))
        assert UTXO_REF in str(exc_info.value)
        assert "lovelace" in str(exc_info.value)

    def test_empty_snapshot(self):
        assert len(UTxOSnapshot({})) == 0
        assert UTxOSnapshot.from_json("{}").to_json() == "{}"


class TestValue:
    def test_policies_gathered_and_flattened(self):
        value = Value.model_validate({"lovelace": 3, POLICY_ID: {"4e4654": 1}})
        assert value.assets == {POLICY_ID: {"4e4654": 1}}
        assert value.model_dump() == {"lovelace": 3, POLICY_ID: {"4e4654": 1}}

    def test_iter_assets(self):
        value = Value.model_validate({"lovelace": 3, POLICY_ID: {"4e4654": 1}, OTHER_POLICY_ID: {"": 7}})
        assets = list(value.iter_assets())
        assert [a.amount for a in assets] == [1, 7]
        assert assets[0].token == Token(policy_id=POLICY_ID, name="4e4654")

    def test_to_pycardano(self):
        value = Value.model_validate({"lovelace": 2_000_000, POLICY_ID: {"4e4654": 1, "746f6b656e": 50}})
        converted = value.to_pycardano()
        assert isinstance(converted, CardanoValue)
        assert converted.coin == 2_000_000
        bundle = converted.multi_asset[ScriptHash(bytes.fromhex(POLICY_ID))]
        assert bundle[AssetName(b"NFT")] == 1
        assert bundle[AssetName(b"token")] == 50

    def test_lovelace_only_to_pycardano(self):
        converted = Value(lovelace=5).to_pycardano()
        assert converted.coin == 5
        assert len(converted.multi_asset) == 0

    def test_odd_length_name_has_no_pycardano_form(self):
        with pytest.raises(ValueError):
            Value.model_validate({POLICY_ID: {"abc": 1}}).to_pycardano()


class TestScriptDetails:
    @pytest.mark.parametrize("script_type, expected", [
        (ScriptType.PLUTUS_V1, PlutusV1Script),
        (ScriptType.PLUTUS_V2, PlutusV2Script),
        (ScriptType.PLUTUS_V3, PlutusV3Script),
    ])
    def test_plutus_to_pycardano(self, script_type, expected):
        details = ScriptDetails(cbor_hex=PLUTUS_V2_CBOR, description="", script_type=script_type)
        script = details.to_pycardano()
        assert isinstance(script, expected)
        assert bytes(script) == bytes.fromhex(PLUTUS_V2_CBOR)

    def test_simple_script_to_pycardano(self):
        """SimpleScript CBOR decodes to a pycardano native script."""
        details = ScriptDetails(cbor_hex=PUBKEY_SCRIPT_CBOR, description="", script_type=ScriptType.SIMPLE)
        script = details.to_pycardano()
        assert isinstance(script, ScriptPubkey)
        assert script.key_hash.payload == bytes.fromhex(KEY_HASH)

    def test_round_trip_dict(self, reference_script):
        details = ScriptDetails.model_validate(reference_script["script"])
        assert details.model_dump(mode="json", by_alias=True) == reference_script["script"]

    def test_script_type_values(self):
        assert [t.value for t in ScriptType] == [
            "SimpleScript", "PlutusScriptV1", "PlutusScriptV2", "PlutusScriptV3",
        ]
        assert not ScriptType.SIMPLE.is_plutus
        assert ScriptType.PLUTUS_V3.is_plutus
