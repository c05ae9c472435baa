"""Message types, codec registration, genesis state and price oracle for the IBB lending module."""

__version__ = "0.1.0"

__all__ = [
    "keys",
    "msg",
    "genesis",
    "oracle",
    "ledger_msgs",
    "accrual_msgs",
    "entity_msgs",
    "codec",
]