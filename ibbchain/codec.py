"""Registration of the module's message types under their names and interfaces."""

from __future__ import annotations

from .entity_msgs import (
    MsgCreateNft,
    MsgCreatePool,
    MsgCreateUser,
    MsgDeleteNft,
    MsgDeletePool,
    MsgDeleteUser,
    MsgUpdateNft,
    MsgUpdatePool,
    MsgUpdateUser,
)
from .accrual_msgs import (
    MsgCreateApr,
    MsgCreateBorrowAccrued,
    MsgCreateDepositEarned,
    MsgCreateTxHistory,
    MsgDeleteApr,
    MsgDeleteBorrowAccrued,
    MsgDeleteDepositEarned,
    MsgDeleteTxHistory,
    MsgUpdateApr,
    MsgUpdateBorrowAccrued,
    MsgUpdateDepositEarned,
    MsgUpdateTxHistory,
)
from .ledger_msgs import (
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
from .msg import Msg, MsgAcceptOffer, MsgChooseOffer, MsgCreateOffer, MsgMintNft


class Codec:
    """Maps concrete message types to registered names and back."""

    def __init__(self) -> None:
        self._by_name: dict[str, type] = {}
        self._by_type: dict[type, str] = {}

    def register_concrete(self, cls: type, name: str) -> None:
        """Register a type under a name; each type and name may be used once."""
        if name in self._by_name:
            raise ValueError(f"name {name!r} is already registered")
        if cls in self._by_type:
            raise ValueError(f"type {cls.__name__} is already registered")
        self._by_name[name] = cls
        self._by_type[cls] = name

    def name_of(self, cls: type) -> str:
        try:
            return self._by_type[cls]
        except KeyError:
            raise KeyError(f"type {cls.__name__} is not registered") from None

    def type_of(self, name: str) -> type:
        try:
            return self._by_name[name]
        except KeyError:
            raise KeyError(f"name {name!r} is not registered") from None


class InterfaceRegistry:
    """Records which concrete types implement each interface."""

    def __init__(self) -> None:
        self._impls: dict[type, list[type]] = {}

    def register_implementations(self, interface: type, *args: type) -> None:
        """Register each given type as an implementation of the interface."""
        registered = self._impls.setdefault(interface, [])
        for impl in args:
            if not (isinstance(impl, type) and issubclass(impl, interface)):
                raise TypeError(f"{impl!r} does not implement {interface.__name__}")
            if impl not in registered:
                registered.append(impl)

    def list_implementations(self, interface: type) -> list[type]:
        return list(self._impls.get(interface, ()))


_CONCRETE: tuple[tuple[type, str], ...] = (
    (MsgChooseOffer, "ibb/ChooseOffer"),
    (MsgAcceptOffer, "ibb/AcceptOffer"),
    (MsgCreateOffer, "ibb/CreateOffer"),
    (MsgMintNft, "ibb/MintNft"),
    (MsgCreateNft, "ibb/CreateNft"),
    (MsgUpdateNft, "ibb/UpdateNft"),
    (MsgDeleteNft, "ibb/DeleteNft"),
    (MsgCreateTxHistory, "ibb/CreateTxHistory"),
    (MsgUpdateTxHistory, "ibb/UpdateTxHistory"),
    (MsgDeleteTxHistory, "ibb/DeleteTxHistory"),
    (MsgCreateBorrowAccrued, "ibb/CreateBorrowAccrued"),
    (MsgUpdateBorrowAccrued, "ibb/UpdateBorrowAccrued"),
    (MsgDeleteBorrowAccrued, "ibb/DeleteBorrowAccrued"),
    (MsgCreateDepositEarned, "ibb/CreateDepositEarned"),
    (MsgUpdateDepositEarned, "ibb/UpdateDepositEarned"),
    (MsgDeleteDepositEarned, "ibb/DeleteDepositEarned"),
    (MsgCreateApr, "ibb/CreateApr"),
    (MsgUpdateApr, "ibb/UpdateApr"),
    (MsgDeleteApr, "ibb/DeleteApr"),
    (MsgCreateRepay, "ibb/CreateRepay"),
    (MsgUpdateRepay, "ibb/UpdateRepay"),
    (MsgDeleteRepay, "ibb/DeleteRepay"),
    (MsgCreateWithdraw, "ibb/CreateWithdraw"),
    (MsgUpdateWithdraw, "ibb/UpdateWithdraw"),
    (MsgDeleteWithdraw, "ibb/DeleteWithdraw"),
    (MsgCreateUser, "ibb/CreateUser"),
    (MsgUpdateUser, "ibb/UpdateUser"),
    (MsgDeleteUser, "ibb/DeleteUser"),
    (MsgCreateBorrow, "ibb/CreateBorrow"),
    (MsgUpdateBorrow, "ibb/UpdateBorrow"),
    (MsgDeleteBorrow, "ibb/DeleteBorrow"),
    (MsgCreateDeposit, "ibb/CreateDeposit"),
    (MsgUpdateDeposit, "ibb/UpdateDeposit"),
    (MsgDeleteDeposit, "ibb/DeleteDeposit"),
    (MsgCreatePool, "ibb/CreatePool"),
    (MsgUpdatePool, "ibb/UpdatePool"),
    (MsgDeletePool, "ibb/DeletePool"),
)


def register_codec(cdc: Codec) -> None:
    """Register every module message type with the codec under its name."""
    for cls, name in _CONCRETE:
        cdc.register_concrete(cls, name)


def register_interfaces(registry: InterfaceRegistry) -> None:
    """Register every module message type as an implementation of Msg."""
    registry.register_implementations(Msg, *(cls for cls, _ in _CONCRETE))