import pytest

from lwsclient.models import (
    AddressInfo,
    AddressTxs,
    AmountOuts,
    BlockHash,
    ImportResponse,
    LoginResponse,
    Output,
    RandomOutputs,
    Rates,
    SpendObject,
    Status,
    Transaction,
    UnspentOuts,
    number_or_boolean,
    unwrap_ok,
)

HASH_A = "ab" * 32
HASH_B = "cd" * 32
PAYMENT_ID = "0123456789abcdef"


def _spend():
    return {
        "amount": "1000",
        "key_image": HASH_A,
        "tx_pub_key": HASH_B,
        "out_index": 3,
        "mixin": 10,
    }


def _transaction(**extra):
    data = {
        "id": 7,
        "hash": HASH_A,
        "timestamp": "2022-01-01T00:00:00Z",
        "total_received": "500",
        "total_sent": "0",
        "unlock_time": 0,
        "coinbase": 1,
        "mempool": False,
        "mixin": 10,
    }
    data.update(extra)
    return data


def _output():
    return {
        "tx_id": 1,
        "amount": "1000",
        "index": 0,
        "global_index": 42,
        "rct": "rctdata",
        "tx_hash": HASH_A,
        "tx_prefix_hash": HASH_B,
        "public_key": HASH_B,
        "tx_pub_key": HASH_A,
        "spend_key_images": [HASH_A, HASH_B],
        "timestamp": "2022-01-01T00:00:00Z",
        "height": 100,
    }


def test_deserialize_boolean():
    response = LoginResponse.from_dict({"new_address": False, "generated_locally": True})
    assert response.new_address is False
    assert response.generated_locally is True


def test_deserialize_boolean_number():
    response = LoginResponse.from_dict({"new_address": 0, "generated_locally": 1})
    assert response.new_address is False
    assert response.generated_locally is True


def test_login_response_start_height_optional():
    response = LoginResponse.from_dict({"new_address": 1, "generated_locally": 0})
    assert response.start_height is None
    with_height = LoginResponse.from_dict(
        {"new_address": 1, "generated_locally": 0, "start_height": 5}
    )
    assert with_height.start_height == 5


@pytest.mark.parametrize("value", [2, -1, "1", 1.0, None])
def test_number_or_boolean_rejects(value):
    with pytest.raises(ValueError):
        number_or_boolean(value)


@pytest.mark.parametrize("value,expected", [(True, True), (False, False), (1, True), (0, False)])
def test_number_or_boolean_accepts(value, expected):
    assert number_or_boolean(value) is expected


def test_login_response_rejects_bad_flag():
    with pytest.raises(ValueError):
        LoginResponse.from_dict({"new_address": 2, "generated_locally": True})


def test_login_response_missing_field():
    with pytest.raises(ValueError):
        LoginResponse.from_dict({"new_address": True})


def test_unwrap_ok():
    assert unwrap_ok({"status": "OK", "value": 1}) == {"value": 1}
    assert Status("OK") is Status.OK


def test_unwrap_ok_rejects_other_status():
    with pytest.raises(ValueError):
        unwrap_ok({"status": "FAILED"})
    with pytest.raises(ValueError):
        unwrap_ok({"value": 1})


def test_block_hash_round_trip():
    block = BlockHash.from_hex(HASH_A)
    assert block.to_hex() == HASH_A
    with pytest.raises(ValueError):
        BlockHash.from_hex("ab" * 8)
    with pytest.raises(ValueError):
        BlockHash(b"\x00")


def test_spend_object_round_trip():
    data = _spend()
    spend = SpendObject.from_dict(data)
    assert spend.key_image.to_hex() == HASH_A
    assert spend.to_dict() == data


def test_spend_object_out_index_range():
    data = _spend()
    data["out_index"] = 70000
    with pytest.raises(ValueError):
        SpendObject.from_dict(data)


def test_spend_object_bad_hash():
    data = _spend()
    data["key_image"] = "ab"
    with pytest.raises(ValueError):
        SpendObject.from_dict(data)


def test_address_info_round_trip():
    data = {
        "locked_funds": "0",
        "total_received": "100",
        "total_sent": "50",
        "scanned_height": 10,
        "scanned_block_height": 10,
        "start_height": 1,
        "transaction_height": 9,
        "blockchain_height": 11,
        "spent_outputs": [_spend()],
        "rates": {"AUD": 1.5},
    }
    info = AddressInfo.from_dict(data)
    assert info.rates == Rates(aud=1.5)
    assert len(info.spent_outputs) == 1
    assert info.to_dict() == data


def test_address_info_rates_missing():
    data = {
        "locked_funds": "0",
        "total_received": "0",
        "total_sent": "0",
        "scanned_height": 0,
        "scanned_block_height": 0,
        "start_height": 0,
        "transaction_height": 0,
        "blockchain_height": 0,
        "spent_outputs": [],
    }
    assert AddressInfo.from_dict(data).rates is None


def test_transaction_defaults():
    tx = Transaction.from_dict(_transaction())
    assert tx.spent_outputs == []
    assert tx.height is None
    assert tx.payment_id is None
    assert tx.coinbase is True
    assert tx.mempool is False


def test_transaction_round_trip():
    data = _transaction(height=12, payment_id=PAYMENT_ID, spent_outputs=[_spend()], coinbase=True)
    tx = Transaction.from_dict(data)
    assert tx.payment_id.to_hex() == PAYMENT_ID
    assert tx.to_dict() == data


def test_transaction_null_spent_outputs_rejected():
    with pytest.raises(ValueError):
        Transaction.from_dict(_transaction(spent_outputs=None))


def test_transaction_payment_id_size():
    with pytest.raises(ValueError):
        Transaction.from_dict(_transaction(payment_id=HASH_A))


def test_address_txs_missing_transactions():
    data = {
        "total_received": "0",
        "scanned_height": 1,
        "scanned_block_height": 1,
        "start_height": 0,
        "blockchain_height": 2,
    }
    txs = AddressTxs.from_dict(data)
    assert txs.transactions == []
    assert txs.to_dict() == {**data, "transactions": []}


def test_amount_outs_and_random_outputs():
    out = {"global_index": 5, "public_key": HASH_A, "rct": HASH_B}
    amount_outs = AmountOuts.from_dict({"amount_outs": [out]})
    assert amount_outs.amount_outs[0].global_index == 5
    assert amount_outs.to_dict() == {"amount_outs": [out]}
    grouped = RandomOutputs.from_dict({"amount": "0", "outputs": [out, out]})
    assert len(grouped.outputs) == 2
    assert grouped.to_dict() == {"amount": "0", "outputs": [out, out]}


def test_unspent_outs_round_trip():
    data = {"per_kb_fee": 1000, "fee_mask": 10000, "amount": "1000", "outputs": [_output()]}
    outs = UnspentOuts.from_dict(data)
    assert isinstance(outs.outputs[0], Output)
    assert [h.to_hex() for h in outs.outputs[0].spend_key_images] == [HASH_A, HASH_B]
    assert outs.to_dict() == data


def test_unspent_outs_negative_fee_rejected():
    with pytest.raises(ValueError):
        UnspentOuts.from_dict({"per_kb_fee": -1, "fee_mask": 0, "amount": "0", "outputs": []})


def test_import_response():
    data = {
        "payment_address": "made-up-address",
        "payment_id": PAYMENT_ID,
        "import_fee": "0",
        "new_request": 1,
        "request_fulfilled": 0,
        "status": "Accepted, waiting for approval",
    }
    response = ImportResponse.from_dict(data)
    assert response.new_request is True
    assert response.request_fulfilled is False
    assert response.to_dict() == {**data, "new_request": True, "request_fulfilled": False}


def test_import_response_optional_fields():
    response = ImportResponse.from_dict(
        {"new_request": False, "request_fulfilled": True, "status": "Approved"}
    )
    assert response.payment_address is None
    assert response.payment_id is None
    assert response.import_fee is None


def test_from_dict_requires_mapping():
    with pytest.raises(TypeError):
        LoginResponse.from_dict([1, 2])