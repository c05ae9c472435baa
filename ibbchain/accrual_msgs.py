"""Messages that manage APR, accrued borrow, claim, earned deposit and history records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .msg import Msg, wide


@dataclass
class _CreateAccrual(Msg):
    """A new accrual record for an asset at a block height."""

    block_height: int = 0
    asset: str = ""
    amount: int = 0
    denom: str = ""


@dataclass
class _UpdateAccrual(Msg):
    """Replacement values for the accrual record with the given id."""

    id: int = wide()
    block_height: int = 0
    asset: str = ""
    amount: int = 0
    denom: str = ""


@dataclass
class _DeleteRecord(Msg):
    """Removal of the record with the given id."""

    id: int = wide()


@dataclass
class MsgCreateApr(Msg):
    block_height: int = 0
    deposit_apy: int = 0
    borrow_apy: int = 0

    msg_type: ClassVar[str] = "CreateApr"


@dataclass
class MsgUpdateApr(Msg):
    id: int = wide()
    block_height: int = 0
    deposit_apy: int = 0
    borrow_apy: int = 0

    msg_type: ClassVar[str] = "UpdateApr"


@dataclass
class MsgDeleteApr(_DeleteRecord):
    msg_type: ClassVar[str] = "DeleteApr"


@dataclass
class MsgCreateBorrowAccrued(_CreateAccrual):
    msg_type: ClassVar[str] = "CreateBorrowAccrued"


@dataclass
class MsgUpdateBorrowAccrued(_UpdateAccrual):
    msg_type: ClassVar[str] = "UpdateBorrowAccrued"


@dataclass
class MsgDeleteBorrowAccrued(_DeleteRecord):
    msg_type: ClassVar[str] = "DeleteBorrowAccrued"


@dataclass
class MsgCreateClaim(_CreateAccrual):
    msg_type: ClassVar[str] = "CreateClaim"


@dataclass
class MsgUpdateClaim(_UpdateAccrual):
    msg_type: ClassVar[str] = "UpdateClaim"


@dataclass
class MsgDeleteClaim(_DeleteRecord):
    msg_type: ClassVar[str] = "DeleteClaim"


@dataclass
class MsgCreateDepositEarned(_CreateAccrual):
    msg_type: ClassVar[str] = "CreateDepositEarned"


@dataclass
class MsgUpdateDepositEarned(_UpdateAccrual):
    msg_type: ClassVar[str] = "UpdateDepositEarned"


@dataclass
class MsgDeleteDepositEarned(_DeleteRecord):
    msg_type: ClassVar[str] = "DeleteDepositEarned"


@dataclass
class MsgCreateTxHistory(Msg):
    block_height: int = 0
    tx: str = ""
    asset: str = ""
    amount: int = 0
    denom: str = ""

    msg_type: ClassVar[str] = "CreateTxHistory"


@dataclass
class MsgUpdateTxHistory(Msg):
    id: int = wide()
    block_height: int = 0
    tx: str = ""
    asset: str = ""
    amount: int = 0
    denom: str = ""

    msg_type: ClassVar[str] = "UpdateTxHistory"


@dataclass
class MsgDeleteTxHistory(_DeleteRecord):
    msg_type: ClassVar[str] = "DeleteTxHistory"