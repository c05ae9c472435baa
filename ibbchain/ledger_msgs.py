"""Messages that create, update and delete borrow, deposit, repay and withdraw records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .msg import Msg, wide


@dataclass
class _CreateEntry(Msg):
    """A new ledger record for an asset at a block height."""

    block_height: int = 0
    asset: str = ""
    amount: int = 0
    denom: str = ""


@dataclass
class _UpdateEntry(Msg):
    """Replacement values for the ledger record with the given id."""

    id: int = wide()
    block_height: int = 0
    asset: str = ""
    amount: int = 0
    denom: str = ""


@dataclass
class _DeleteEntry(Msg):
    """Removal of the ledger record with the given id."""

    id: int = wide()


@dataclass
class MsgCreateBorrow(_CreateEntry):
    msg_type: ClassVar[str] = "CreateBorrow"


@dataclass
class MsgUpdateBorrow(_UpdateEntry):
    msg_type: ClassVar[str] = "UpdateBorrow"


@dataclass
class MsgDeleteBorrow(_DeleteEntry):
    msg_type: ClassVar[str] = "DeleteBorrow"


@dataclass
class MsgCreateDeposit(_CreateEntry):
    msg_type: ClassVar[str] = "CreateDeposit"


@dataclass
class MsgUpdateDeposit(_UpdateEntry):
    msg_type: ClassVar[str] = "UpdateDeposit"


@dataclass
class MsgDeleteDeposit(_DeleteEntry):
    msg_type: ClassVar[str] = "DeleteDeposit"


@dataclass
class MsgCreateRepay(_CreateEntry):
    msg_type: ClassVar[str] = "CreateRepay"


@dataclass
class MsgUpdateRepay(_UpdateEntry):
    msg_type: ClassVar[str] = "UpdateRepay"


@dataclass
class MsgDeleteRepay(_DeleteEntry):
    msg_type: ClassVar[str] = "DeleteRepay"


@dataclass
class MsgCreateWithdraw(_CreateEntry):
    msg_type: ClassVar[str] = "CreateWithdraw"


@dataclass
class MsgUpdateWithdraw(_UpdateEntry):
    msg_type: ClassVar[str] = "UpdateWithdraw"


@dataclass
class MsgDeleteWithdraw(_DeleteEntry):
    msg_type: ClassVar[str] = "DeleteWithdraw"