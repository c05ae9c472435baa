"""Store keys, query routes, rate constants, errors and shared response types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol, runtime_checkable

MODULE_NAME = "ibb"
STORE_KEY = MODULE_NAME
ROUTER_KEY = MODULE_NAME
QUERIER_ROUTE = MODULE_NAME
MEM_STORE_KEY = "mem_ibb"


def key_prefix(p: str) -> bytes:
    """Return the store prefix bytes for a key string."""
    return p.encode()


POOL_KEY = "Pool-value-"
POOL_COUNT_KEY = "Pool-count-"
DEPOSIT_KEY = "Deposit-value-"
DEPOSIT_COUNT_KEY = "Deposit-count-"
BORROW_KEY = "Borrow-value-"
BORROW_COUNT_KEY = "Borrow-count-"
USER_KEY = "User-value-"
USER_COUNT_KEY = "User-count-"
WITHDRAW_KEY = "Withdraw-value-"
WITHDRAW_COUNT_KEY = "Withdraw-count-"
REPAY_KEY = "Repay-value-"
REPAY_COUNT_KEY = "Repay-count-"
NFT_KEY = "Nft-value-"
NFT_COUNT_KEY = "Nft-count-"
APR_KEY = "Apr-value-"
APR_COUNT_KEY = "Apr-count-"
DEPOSIT_EARNED_KEY = "DepositEarned-value-"
DEPOSIT_EARNED_COUNT_KEY = "DepositEarned-count-"
BORROW_ACCRUED_KEY = "BorrowAccrued-value-"
BORROW_ACCRUED_COUNT_KEY = "BorrowAccrued-count-"
TX_HISTORY_KEY = "TxHistory-value-"
TX_HISTORY_COUNT_KEY = "TxHistory-count-"
CLAIM_KEY = "Claim-value-"
CLAIM_COUNT_KEY = "Claim-count-"

QUERY_GET_POOL = "get-pool"
QUERY_LIST_POOL = "list-pool"
QUERY_LOAD_POOL = "load-pool"
QUERY_LOAD_USER = "load-user"
QUERY_GET_WITHDRAW = "get-withdraw"
QUERY_LIST_WITHDRAW = "list-withdraw"
QUERY_GET_REPAY = "get-repay"
QUERY_LIST_REPAY = "list-repay"
QUERY_LIST_COLLECTION = "list-collection"
QUERY_GET_APR = "get-apr"
QUERY_LIST_APR = "list-apr"
QUERY_GET_DEPOSIT_EARNED = "get-depositEarned"
QUERY_LIST_DEPOSIT_EARNED = "list-depositEarned"
QUERY_GET_BORROW_ACCRUED = "get-borrowAccrued"
QUERY_LIST_BORROW_ACCRUED = "list-borrowAccrued"
QUERY_GET_TX_HISTORY = "get-txHistory"
QUERY_LIST_TX_HISTORY = "list-txHistory"
QUERY_GET_CLAIM = "get-claim"
QUERY_LIST_CLAIM = "list-claim"

TARGET_BORROW_RATIO = 75
DEPOSIT_INTEREST = 0.04
INTEREST_FACTOR = 10
MINIMUM_DEPOSIT_INTEREST = DEPOSIT_INTEREST / 3
LIQUIDATION_RATIO = 75


class RegisteredError(Exception):
    """An error identified by a codespace and a numeric code."""

    def __init__(self, codespace: str, code: int, description: str) -> None:
        super().__init__(description)
        self.codespace = codespace
        self.code = code
        self.description = description

    def wrap(self, message: str) -> "RegisteredError":
        """Return a copy of this error with context prepended to its description."""
        wrapped = RegisteredError(self.codespace, self.code, f"{message}: {self.description}")
        wrapped.__cause__ = self
        return wrapped

    def __str__(self) -> str:
        return self.description


ERR_SAMPLE = RegisteredError(MODULE_NAME, 1100, "sample error")


@dataclass
class LoadPoolRestResponse:
    """Pool summary returned by the load-pool query."""

    asset: str = ""
    collatoral_factor: int = 0
    liquidity: int = 0
    deposit_apy: int = 0
    borrow_apy: int = 0
    asset_price: int = 0


@dataclass
class LoadUserRestResponse:
    """Per-asset user summary returned by the load-user query."""

    asset_apy: int = 0
    asset_denom: str = ""
    asset_balance: int = 0
    asset_deposit: int = 0
    asset_borrow: int = 0
    asset_price: int = 0
    collateral: bool = False
    deposit_earned: int = 0
    borrow_accrued: int = 0
    asset: str = ""
    collatoral_factor: int = 0
    liquidity: int = 0
    deposit_apy: int = 0
    borrow_apy: int = 0


@runtime_checkable
class BankKeeper(Protocol):
    """Account balance operations the module expects from the bank."""

    def validate_balance(self, ctx: Any, addr: bytes) -> None: ...

    def has_balance(self, ctx: Any, addr: bytes, amt: Any) -> bool: ...

    def get_all_balances(self, ctx: Any, addr: bytes) -> Any: ...

    def get_accounts_balances(self, ctx: Any) -> list: ...

    def get_balance(self, ctx: Any, addr: bytes, denom: str) -> Any: ...

    def locked_coins(self, ctx: Any, addr: bytes) -> Any: ...

    def spendable_coins(self, ctx: Any, addr: bytes) -> Any: ...

    def subtract_coins(self, ctx: Any, addr: bytes, amt: Any) -> None: ...

    def add_coins(self, ctx: Any, addr: bytes, amt: Any) -> None: ...

    def iterate_account_balances(
        self, ctx: Any, addr: bytes, cb: Callable[[Any], bool]
    ) -> None: ...

    def iterate_all_balances(self, ctx: Any, cb: Callable[[bytes, Any], bool]) -> None: ...

    def send_coins(self, ctx: Any, from_addr: bytes, to_addr: bytes, amt: Any) -> None: ...