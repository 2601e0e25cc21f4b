"""Response models of the light wallet server API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

from .util import HashString, parse_hex

HASH_SIZE = 32
PAYMENT_ID_SIZE = 8


@dataclass(frozen=True)
class BlockHash(HashString):
    """A 32-byte block hash."""

    def __post_init__(self):
        if len(self.raw) != HASH_SIZE:
            raise ValueError(f"block hash must be {HASH_SIZE} bytes, got {len(self.raw)}")

    @classmethod
    def from_hex(cls, value):
        return cls(parse_hex(value, HASH_SIZE))

    def to_hex(self):
        return self.raw.hex()


class Status(Enum):
    OK = "OK"


def _mapping(data):
    if not isinstance(data, Mapping):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def unwrap_ok(data):
    """Check that a ``status``-tagged object is OK and return the rest of it."""
    data = _mapping(data)
    status = _get(data, "status")
    try:
        Status(status)
    except ValueError:
        raise ValueError(f"unknown status {status!r}") from None
    return {key: value for key, value in data.items() if key != "status"}


def number_or_boolean(value):
    """Accept a boolean or the integers 0 and 1 as a boolean."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    raise ValueError(f"invalid value {value!r}, expected integer or boolean")


def _get(data, name):
    try:
        return data[name]
    except KeyError:
        raise ValueError(f"missing field `{name}`") from None


def _uint(value, name, bits=64):
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < (1 << bits):
        raise ValueError(f"field `{name}`: expected u{bits}, got {value!r}")
    return value


def _u64(value, name):
    return _uint(value, name, 64)


def _u32(value, name):
    return _uint(value, name, 32)


def _u16(value, name):
    return _uint(value, name, 16)


def _string(value, name):
    if not isinstance(value, str):
        raise ValueError(f"field `{name}`: expected a string, got {value!r}")
    return value


def _float(value, name):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"field `{name}`: expected a number, got {value!r}")
    return float(value)


def _flag(value, name):
    try:
        return number_or_boolean(value)
    except ValueError as exc:
        raise ValueError(f"field `{name}`: {exc}") from None


def _hash(value, name, size=HASH_SIZE):
    if not isinstance(value, str):
        raise ValueError(f"field `{name}`: expected a hex string, got {value!r}")
    try:
        return HashString.from_hex(value, size)
    except ValueError as exc:
        raise ValueError(f"field `{name}`: {exc}") from None


def _payment_id(value, name):
    return _hash(value, name, PAYMENT_ID_SIZE)


def _list(value, name, convert):
    if not isinstance(value, list):
        raise ValueError(f"field `{name}`: expected a list, got {value!r}")
    return [convert(item, name) for item in value]


def _optional(data, name, convert):
    value = data.get(name)
    return None if value is None else convert(value, name)


def _nested(cls):
    def convert(value, name):
        if not isinstance(value, Mapping):
            raise ValueError(f"field `{name}`: expected an object, got {value!r}")
        return cls.from_dict(value)

    return convert


def _hex_or_none(value):
    return None if value is None else value.to_hex()


@dataclass
class Rates:
    aud: float | None = None

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(aud=_optional(data, "AUD", _float))

    def to_dict(self):
        return {"AUD": self.aud}


@dataclass
class SpendObject:
    amount: str
    key_image: HashString
    tx_pub_key: HashString
    out_index: int
    mixin: int

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            amount=_string(_get(data, "amount"), "amount"),
            key_image=_hash(_get(data, "key_image"), "key_image"),
            tx_pub_key=_hash(_get(data, "tx_pub_key"), "tx_pub_key"),
            out_index=_u16(_get(data, "out_index"), "out_index"),
            mixin=_u32(_get(data, "mixin"), "mixin"),
        )

    def to_dict(self):
        return {
            "amount": self.amount,
            "key_image": self.key_image.to_hex(),
            "tx_pub_key": self.tx_pub_key.to_hex(),
            "out_index": self.out_index,
            "mixin": self.mixin,
        }


@dataclass
class AddressInfo:
    locked_funds: str
    total_received: str
    total_sent: str
    scanned_height: int
    scanned_block_height: int
    start_height: int
    transaction_height: int
    blockchain_height: int
    spent_outputs: list[SpendObject]
    rates: Rates | None = None

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            locked_funds=_string(_get(data, "locked_funds"), "locked_funds"),
            total_received=_string(_get(data, "total_received"), "total_received"),
            total_sent=_string(_get(data, "total_sent"), "total_sent"),
            scanned_height=_u64(_get(data, "scanned_height"), "scanned_height"),
            scanned_block_height=_u64(_get(data, "scanned_block_height"), "scanned_block_height"),
            start_height=_u64(_get(data, "start_height"), "start_height"),
            transaction_height=_u64(_get(data, "transaction_height"), "transaction_height"),
            blockchain_height=_u64(_get(data, "blockchain_height"), "blockchain_height"),
            spent_outputs=_list(
                _get(data, "spent_outputs"), "spent_outputs", _nested(SpendObject)
            ),
            rates=_optional(data, "rates", _nested(Rates)),
        )

    def to_dict(self):
        return {
            "locked_funds": self.locked_funds,
            "total_received": self.total_received,
            "total_sent": self.total_sent,
            "scanned_height": self.scanned_height,
            "scanned_block_height": self.scanned_block_height,
            "start_height": self.start_height,
            "transaction_height": self.transaction_height,
            "blockchain_height": self.blockchain_height,
            "spent_outputs": [spend.to_dict() for spend in self.spent_outputs],
            "rates": None if self.rates is None else self.rates.to_dict(),
        }


@dataclass
class Transaction:
    id: int
    hash: HashString
    timestamp: str
    total_received: str
    total_sent: str
    unlock_time: int
    coinbase: bool
    mempool: bool
    mixin: int
    height: int | None = None
    spent_outputs: list[SpendObject] = field(default_factory=list)
    payment_id: HashString | None = None

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        spent = (
            _list(data["spent_outputs"], "spent_outputs", _nested(SpendObject))
            if "spent_outputs" in data
            else []
        )
        return cls(
            id=_u64(_get(data, "id"), "id"),
            hash=_hash(_get(data, "hash"), "hash"),
            timestamp=_string(_get(data, "timestamp"), "timestamp"),
            total_received=_string(_get(data, "total_received"), "total_received"),
            total_sent=_string(_get(data, "total_sent"), "total_sent"),
            unlock_time=_u64(_get(data, "unlock_time"), "unlock_time"),
            height=_optional(data, "height", _u64),
            spent_outputs=spent,
            payment_id=_optional(data, "payment_id", _payment_id),
            coinbase=_flag(_get(data, "coinbase"), "coinbase"),
            mempool=_flag(_get(data, "mempool"), "mempool"),
            mixin=_u32(_get(data, "mixin"), "mixin"),
        )

    def to_dict(self):
        return {
            "id": self.id,
            "hash": self.hash.to_hex(),
            "timestamp": self.timestamp,
            "total_received": self.total_received,
            "total_sent": self.total_sent,
            "unlock_time": self.unlock_time,
            "height": self.height,
            "spent_outputs": [spend.to_dict() for spend in self.spent_outputs],
            "payment_id": _hex_or_none(self.payment_id),
            "coinbase": self.coinbase,
            "mempool": self.mempool,
            "mixin": self.mixin,
        }


@dataclass
class AddressTxs:
    total_received: str
    scanned_height: int
    scanned_block_height: int
    start_height: int
    blockchain_height: int
    transactions: list[Transaction] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        transactions = (
            _list(data["transactions"], "transactions", _nested(Transaction))
            if "transactions" in data
            else []
        )
        return cls(
            total_received=_string(_get(data, "total_received"), "total_received"),
            scanned_height=_u64(_get(data, "scanned_height"), "scanned_height"),
            scanned_block_height=_u64(_get(data, "scanned_block_height"), "scanned_block_height"),
            start_height=_u64(_get(data, "start_height"), "start_height"),
            blockchain_height=_u64(_get(data, "blockchain_height"), "blockchain_height"),
            transactions=transactions,
        )

    def to_dict(self):
        return {
            "total_received": self.total_received,
            "scanned_height": self.scanned_height,
            "scanned_block_height": self.scanned_block_height,
            "start_height": self.start_height,
            "blockchain_height": self.blockchain_height,
            "transactions": [tx.to_dict() for tx in self.transactions],
        }


@dataclass
class RandomOutput:
    global_index: int
    public_key: HashString
    rct: HashString

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            global_index=_u64(_get(data, "global_index"), "global_index"),
            public_key=_hash(_get(data, "public_key"), "public_key"),
            rct=_hash(_get(data, "rct"), "rct"),
        )

    def to_dict(self):
        return {
            "global_index": self.global_index,
            "public_key": self.public_key.to_hex(),
            "rct": self.rct.to_hex(),
        }


@dataclass
class RandomOutputs:
    amount: str
    outputs: list[RandomOutput]

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            amount=_string(_get(data, "amount"), "amount"),
            outputs=_list(_get(data, "outputs"), "outputs", _nested(RandomOutput)),
        )

    def to_dict(self):
        return {"amount": self.amount, "outputs": [out.to_dict() for out in self.outputs]}


@dataclass
class AmountOuts:
    amount_outs: list[RandomOutput]

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            amount_outs=_list(_get(data, "amount_outs"), "amount_outs", _nested(RandomOutput))
        )

    def to_dict(self):
        return {"amount_outs": [out.to_dict() for out in self.amount_outs]}


@dataclass
class Output:
    tx_id: int
    amount: str
    index: int
    global_index: int
    rct: str
    tx_hash: HashString
    tx_prefix_hash: str
    public_key: HashString
    tx_pub_key: HashString
    spend_key_images: list[HashString]
    timestamp: str
    height: int

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            tx_id=_u64(_get(data, "tx_id"), "tx_id"),
            amount=_string(_get(data, "amount"), "amount"),
            index=_u16(_get(data, "index"), "index"),
            global_index=_u64(_get(data, "global_index"), "global_index"),
            rct=_string(_get(data, "rct"), "rct"),
            tx_hash=_hash(_get(data, "tx_hash"), "tx_hash"),
            tx_prefix_hash=_string(_get(data, "tx_prefix_hash"), "tx_prefix_hash"),
            public_key=_hash(_get(data, "public_key"), "public_key"),
            tx_pub_key=_hash(_get(data, "tx_pub_key"), "tx_pub_key"),
            spend_key_images=_list(
                _get(data, "spend_key_images"), "spend_key_images", _hash
            ),
            timestamp=_string(_get(data, "timestamp"), "timestamp"),
            height=_u64(_get(data, "height"), "height"),
        )

    def to_dict(self):
        return {
            "tx_id": self.tx_id,
            "amount": self.amount,
            "index": self.index,
            "global_index": self.global_index,
            "rct": self.rct,
            "tx_hash": self.tx_hash.to_hex(),
            "tx_prefix_hash": self.tx_prefix_hash,
            "public_key": self.public_key.to_hex(),
            "tx_pub_key": self.tx_pub_key.to_hex(),
            "spend_key_images": [image.to_hex() for image in self.spend_key_images],
            "timestamp": self.timestamp,
            "height": self.height,
        }


@dataclass
class UnspentOuts:
    per_kb_fee: int
    fee_mask: int
    amount: str
    outputs: list[Output]

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            per_kb_fee=_u64(_get(data, "per_kb_fee"), "per_kb_fee"),
            fee_mask=_u64(_get(data, "fee_mask"), "fee_mask"),
            amount=_string(_get(data, "amount"), "amount"),
            outputs=_list(_get(data, "outputs"), "outputs", _nested(Output)),
        )

    def to_dict(self):
        return {
            "per_kb_fee": self.per_kb_fee,
            "fee_mask": self.fee_mask,
            "amount": self.amount,
            "outputs": [out.to_dict() for out in self.outputs],
        }


@dataclass
class ImportResponse:
    new_request: bool
    request_fulfilled: bool
    status: str
    payment_address: str | None = None
    payment_id: HashString | None = None
    import_fee: str | None = None

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            payment_address=_optional(data, "payment_address", _string),
            payment_id=_optional(data, "payment_id", _payment_id),
            import_fee=_optional(data, "import_fee", _string),
            new_request=_flag(_get(data, "new_request"), "new_request"),
            request_fulfilled=_flag(_get(data, "request_fulfilled"), "request_fulfilled"),
            status=_string(_get(data, "status"), "status"),
        )

    def to_dict(self):
        return {
            "payment_address": self.payment_address,
            "payment_id": _hex_or_none(self.payment_id),
            "import_fee": self.import_fee,
            "new_request": self.new_request,
            "request_fulfilled": self.request_fulfilled,
            "status": self.status,
        }


@dataclass
class LoginResponse:
    new_address: bool
    generated_locally: bool
    start_height: int | None = None

    @classmethod
    def from_dict(cls, data):
        data = _mapping(data)
        return cls(
            new_address=_flag(_get(data, "new_address"), "new_address"),
            generated_locally=_flag(_get(data, "generated_locally"), "generated_locally"),
            start_height=_optional(data, "start_height", _u64),
        )

    def to_dict(self):
        return {
            "new_address": self.new_address,
            "generated_locally": self.generated_locally,
            "start_height": self.start_height,
        }