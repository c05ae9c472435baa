"""Transaction messages for NFT offers and the shared message behaviour."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any, ClassVar

from .keys import ROUTER_KEY

BECH32_ACCOUNT_PREFIX = "cosmos"
MAX_ADDRESS_LENGTH = 255

_CHARSET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
_GENERATOR = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)
_MAX_BECH32_LENGTH = 90


class InvalidAddressError(ValueError):
    """Raised when a message carries an address that cannot be decoded."""


def _polymod(values: list[int]) -> int:
    chk = 1
    for value in values:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ value
        for bit, gen in enumerate(_GENERATOR):
            if (top >> bit) & 1:
                chk ^= gen
    return chk


def _hrp_expand(hrp: str) -> list[int]:
    return [ord(c) >> 5 for c in hrp] + [0] + [ord(c) & 31 for c in hrp]


def _bech32_decode(bech: str) -> tuple[str, list[int]]:
    if not 8 <= len(bech) <= _MAX_BECH32_LENGTH:
        raise ValueError(f"invalid bech32 string length {len(bech)}")
    if any(not 33 <= ord(c) <= 126 for c in bech):
        raise ValueError("invalid character in bech32 string")
    if bech.lower() != bech and bech.upper() != bech:
        raise ValueError("string not all lowercase or all uppercase")
    bech = bech.lower()
    sep = bech.rfind("1")
    if sep < 1 or sep + 7 > len(bech):
        raise ValueError("invalid index of 1")
    hrp, encoded = bech[:sep], bech[sep + 1 :]
    data = []
    for char in encoded:
        value = _CHARSET.find(char)
        if value < 0:
            raise ValueError(f"invalid character not part of charset: {char!r}")
        data.append(value)
    if _polymod(_hrp_expand(hrp) + data) != 1:
        raise ValueError("checksum failed")
    return hrp, data[:-6]


def _convert_5_to_8(data: list[int]) -> bytes:
    acc = 0
    bits = 0
    out = bytearray()
    for value in data:
        acc = ((acc << 5) | value) & 0xFFF
        bits += 5
        while bits >= 8:
            bits -= 8
            out.append((acc >> bits) & 0xFF)
    if bits >= 5:
        raise ValueError("illegal zero padding")
    if (acc << (8 - bits)) & 0xFF:
        raise ValueError("non-zero padding")
    return bytes(out)


def acc_address_from_bech32(address: str, prefix: str = BECH32_ACCOUNT_PREFIX) -> bytes:
    """Decode a bech32 account address with the given prefix into raw bytes."""
    if not address.strip():
        raise ValueError("empty address string is not allowed")
    hrp, data = _bech32_decode(address)
    if hrp != prefix:
        raise ValueError(f"invalid Bech32 prefix; expected {prefix}, got {hrp}")
    raw = _convert_5_to_8(data)
    if not raw:
        raise ValueError("addresses cannot be empty")
    if len(raw) > MAX_ADDRESS_LENGTH:
        raise ValueError(
            f"address max length is {MAX_ADDRESS_LENGTH}, got {len(raw)}"
        )
    return raw


def _json_name(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _encode(value: Any, wide: bool) -> Any:
    if isinstance(value, list):
        return [_encode(item, wide) for item in value]
    if hasattr(value, "to_dict"):
        return value.to_dict()
    if wide and isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _sorted_json(payload: Any) -> bytes:
    text = json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    for char, escape in (
        ("<", "\\u003c"),
        (">", "\\u003e"),
        ("&", "\\u0026"),
        ("\u2028", "\\u2028"),
        ("\u2029", "\\u2029"),
    ):
        text = text.replace(char, escape)
    return text.encode()


def wide(default: int = 0, json_name: str | None = None) -> Any:
    """Declare a 64-bit integer field, which is carried as a string in JSON."""
    metadata: dict[str, Any] = {"wide": True}
    if json_name:
        metadata["json"] = json_name
    return field(default=default, metadata=metadata)


def named(default: Any = "", json_name: str = "") -> Any:
    """Declare a field whose JSON name is not the camel-cased attribute name."""
    return field(default=default, metadata={"json": json_name})


@dataclass
class Msg:
    """Common behaviour of every module message signed by its creator."""

    creator: str = ""

    msg_type: ClassVar[str] = ""

    def route(self) -> str:
        return ROUTER_KEY

    def type(self) -> str:
        return self.msg_type

    def to_dict(self) -> dict[str, Any]:
        """Return the message as a JSON-ready mapping with its wire field names."""
        return {
            f.metadata.get("json") or _json_name(f.name): _encode(
                getattr(self, f.name), f.metadata.get("wide", False)
            )
            for f in fields(self)
        }

    def get_signers(self) -> list[bytes]:
        return [acc_address_from_bech32(self.creator)]

    def get_sign_bytes(self) -> bytes:
        return _sorted_json(self.to_dict())

    def validate_basic(self) -> None:
        try:
            acc_address_from_bech32(self.creator)
        except ValueError as exc:
            raise InvalidAddressError(
                f"invalid creator address ({exc}): invalid address"
            ) from exc


@dataclass
class MsgAcceptOffer(Msg):
    nft_id: int = 0
    offer_id: int = 0

    msg_type: ClassVar[str] = "AcceptOffer"


@dataclass
class MsgChooseOffer(Msg):
    nft_id: int = 0
    offer_id: int = 0

    msg_type: ClassVar[str] = "ChooseOffer"


@dataclass
class MsgCreateOffer(Msg):
    denom: str = ""
    amount: int = 0
    payback_amount: int = 0
    payback_duration: int = 0
    offer_start_at: int = wide()
    nft_id: int = wide()
    interest: int = 0

    msg_type: ClassVar[str] = "CreateOffer"


@dataclass
class MsgMintNft(Msg):
    denom_id: str = named(json_name="denomID")
    token_id: str = named(json_name="tokenID")
    token_nm: str = named(json_name="tokenNm")
    token_uri: str = named(json_name="tokenURI")
    token_data: str = named(json_name="tokenData")

    msg_type: ClassVar[str] = "MintNft"