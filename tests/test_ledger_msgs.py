import json

import pytest

from ibbchain.keys import ROUTER_KEY
from ibbchain.ledger_msgs import (
    MsgCreateBorrow,
    MsgCreateDeposit,
    MsgCreateRepay,
    MsgCreateWithdraw,
    MsgDeleteBorrow,
    MsgDeleteDeposit,
    MsgDeleteRepay,
    MsgDeleteWithdraw,
    MsgUpdateBorrow,
    MsgUpdateDeposit,
    MsgUpdateRepay,
    MsgUpdateWithdraw,
)
from ibbchain.msg import InvalidAddressError, acc_address_from_bech32

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GEN = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def _polymod(values):
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for bit, gen in enumerate(_GEN):
            if (top >> bit) & 1:
                chk ^= gen
    return chk


def _encode_address(raw, hrp="cosmos"):
    acc = 0
    bits = 0
    data = []
    for byte in raw:
        acc = (acc << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            data.append((acc >> bits) & 31)
    if bits:
        data.append((acc << (5 - bits)) & 31)
    expanded = [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]
    mod = _polymod(expanded + data + [0] * 6) ^ 1
    checksum = [(mod >> 5 * (5 - i)) & 31 for i in range(6)]
    return hrp + "1" + "".join(_CHARSET[d] for d in data + checksum)


RAW = bytes(range(1, 21))
CREATOR = _encode_address(RAW)

CREATE = [
    (MsgCreateBorrow, "CreateBorrow"),
    (MsgCreateDeposit, "CreateDeposit"),
    (MsgCreateRepay, "CreateRepay"),
    (MsgCreateWithdraw, "CreateWithdraw"),
]
UPDATE = [
    (MsgUpdateBorrow, "UpdateBorrow"),
    (MsgUpdateDeposit, "UpdateDeposit"),
    (MsgUpdateRepay, "UpdateRepay"),
    (MsgUpdateWithdraw, "UpdateWithdraw"),
]
DELETE = [
    (MsgDeleteBorrow, "DeleteBorrow"),
    (MsgDeleteDeposit, "DeleteDeposit"),
    (MsgDeleteRepay, "DeleteRepay"),
    (MsgDeleteWithdraw, "DeleteWithdraw"),
]


def _build(cls, creator=CREATOR):
    if cls in dict(CREATE):
        return cls(creator, 12, "atom", 500, "uatom")
    if cls in dict(UPDATE):
        return cls(creator, 7, 12, "atom", 500, "uatom")
    return cls(creator, 7)


ALL = CREATE + UPDATE + DELETE


@pytest.mark.parametrize("cls,name", ALL)
def test_route_and_type(cls, name):
    msg = _build(cls)
    assert msg.route() == ROUTER_KEY
    assert msg.type() == name
    assert msg.get_signers() == [acc_address_from_bech32(CREATOR)]


@pytest.mark.parametrize("cls,name", ALL)
def test_signers_round_trip_creator(cls, name):
    msg = _build(cls)
    assert msg.get_signers() == [acc_address_from_bech32(CREATOR)]
    assert msg.get_signers() == [RAW]
    assert msg.validate_basic() is None


@pytest.mark.parametrize("cls,name", ALL)
def test_invalid_creator_rejected(cls, name):
    with pytest.raises(ValueError):
        acc_address_from_bech32("not-an-address")
    msg = _build(cls, creator="not-an-address")
    with pytest.raises(InvalidAddressError, match="invalid creator address"):
        msg.validate_basic()
    with pytest.raises(ValueError):
        msg.get_signers()


def test_wrong_prefix_rejected():
    msg = MsgCreateDeposit(_encode_address(RAW, hrp="osmo"), 1, "atom", 1, "uatom")
    with pytest.raises(InvalidAddressError):
        msg.validate_basic()


@pytest.mark.parametrize("cls,name", CREATE)
def test_create_sign_bytes_fields(cls, name):
    msg = _build(cls)
    raw = msg.get_sign_bytes()
    decoded = json.loads(raw)
    assert decoded == {
        "creator": CREATOR,
        "blockHeight": 12,
        "asset": "atom",
        "amount": 500,
        "denom": "uatom",
    }
    assert acc_address_from_bech32(decoded["creator"]) == RAW
    assert list(decoded) == sorted(decoded)
    assert b" " not in raw


@pytest.mark.parametrize("cls,name", UPDATE)
def test_update_sign_bytes_carry_id_as_string(cls, name):
    msg = _build(cls)
    decoded = json.loads(msg.get_sign_bytes())
    assert decoded["id"] == "7"
    assert decoded["blockHeight"] == 12
    assert decoded["amount"] == 500
    assert acc_address_from_bech32(decoded["creator"]) == RAW
    assert list(decoded) == sorted(decoded)


def test_delete_sign_bytes_exact():
    assert MsgDeleteBorrow("x", 7).get_sign_bytes() == b'{"creator":"x","id":"7"}'


@pytest.mark.parametrize("cls,name", DELETE)
def test_delete_to_dict(cls, name):
    msg = _build(cls)
    data = msg.to_dict()
    assert data == {"creator": CREATOR, "id": "7"}
    assert acc_address_from_bech32(data["creator"]) == RAW


def test_update_positional_order_matches_fields():
    msg = MsgUpdateWithdraw(CREATOR, 3, 40, "iris", 9, "uiris")
    assert (msg.creator, msg.id, msg.block_height, msg.asset, msg.amount, msg.denom) == (
        CREATOR,
        3,
        40,
        "iris",
        9,
        "uiris",
    )


def test_defaults_are_empty():
    msg = MsgCreateRepay()
    assert msg.to_dict() == {
        "creator": "",
        "blockHeight": 0,
        "asset": "",
        "amount": 0,
        "denom": "",
    }


def test_escaped_characters_in_sign_bytes():
    msg = MsgCreateBorrow(CREATOR, 1, "a<b>&c", 1, "u")
    raw = msg.get_sign_bytes()
    assert b"<" not in raw and b">" not in raw and b"&" not in raw
    assert json.loads(raw)["asset"] == "a<b>&c"