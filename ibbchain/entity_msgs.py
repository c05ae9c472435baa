"""Messages that create, update and delete NFT, pool and user records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar

from .msg import Msg, wide


def _items() -> Any:
    return field(default_factory=list)


@dataclass
class MsgCreateNft(Msg):
    """A new NFT listing with its selected offer and the offers made on it."""

    collection: str = ""
    owner_address: str = ""
    image_url: str = ""
    name: str = ""
    nft_creator_address: str = ""
    selected_offer: Any = None
    offers: list[Any] = _items()

    msg_type: ClassVar[str] = "CreateNft"


@dataclass
class MsgUpdateNft(Msg):
    """Replacement values for the NFT with the given id."""

    id: int = wide()
    collection: str = ""
    owner_address: str = ""
    image_url: str = ""
    name: str = ""

    msg_type: ClassVar[str] = "UpdateNft"


@dataclass
class MsgDeleteNft(Msg):
    """Removal of the NFT with the given id."""

    id: int = wide()

    msg_type: ClassVar[str] = "DeleteNft"


@dataclass
class MsgCreatePool(Msg):
    """A new lending pool for an asset."""

    asset: str = ""
    denom: str = ""
    collatoral_factor: int = 0
    deposit_balance: int = 0
    borrow_balance: int = 0
    users: list[Any] = _items()
    aprs: list[Any] = _items()

    msg_type: ClassVar[str] = "CreatePool"


@dataclass
class MsgUpdatePool(Msg):
    """Replacement values for the pool with the given id."""

    id: int = wide()
    asset: str = ""
    denom: str = ""
    collatoral_factor: int = 0
    borrow_balance: int = 0
    deposit_balance: int = 0
    users: list[Any] = _items()
    aprs: list[Any] = _items()

    msg_type: ClassVar[str] = "UpdatePool"


@dataclass
class MsgDeletePool(Msg):
    """Removal of the pool with the given id."""

    id: int = wide()

    msg_type: ClassVar[str] = "DeletePool"


@dataclass
class MsgCreateUser(Msg):
    """A new user with per-asset collateral flags, positions and history."""

    collateral: list[bool] = _items()
    deposit: list[Any] = _items()
    borrow: list[Any] = _items()
    asset_balances: list[int] = _items()
    deposit_earneds: list[Any] = _items()
    borrow_accrueds: list[Any] = _items()
    tx_histories: list[Any] = _items()

    msg_type: ClassVar[str] = "CreateUser"


@dataclass
class MsgUpdateUser(Msg):
    """Replacement values for the user with the given id."""

    id: int = wide()
    collateral: list[bool] = _items()
    deposit: list[Any] = _items()
    borrow: list[Any] = _items()
    asset_balances: list[int] = _items()
    deposit_earneds: list[Any] = _items()
    borrow_accrueds: list[Any] = _items()
    tx_histories: list[Any] = _items()

    msg_type: ClassVar[str] = "UpdateUser"


@dataclass
class MsgDeleteUser(Msg):
    """Removal of the user with the given id."""

    id: int = wide()

    msg_type: ClassVar[str] = "DeleteUser"