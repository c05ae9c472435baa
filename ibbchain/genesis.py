"""Genesis state of the module and its validation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from typing import Any

DEFAULT_INDEX = 1

Entry = dict[str, Any]

# Attribute, JSON name and label, in the order validation checks them.
_LISTS = (
    ("claim_list", "claimList", "claim"),
    ("nft_list", "nftList", "nft"),
    ("tx_history_list", "txHistoryList", "txHistory"),
    ("borrow_accrued_list", "borrowAccruedList", "borrowAccrued"),
    ("deposit_earned_list", "depositEarnedList", "depositEarned"),
    ("apr_list", "aprList", "apr"),
    ("repay_list", "repayList", "repay"),
    ("withdraw_list", "withdrawList", "withdraw"),
    ("user_list", "userList", "user"),
    ("borrow_list", "borrowList", "borrow"),
    ("deposit_list", "depositList", "deposit"),
    ("pool_list", "poolList", "pool"),
)


def _entry_id(entry: Entry) -> int:
    raw = entry.get("id", 0)
    if isinstance(raw, bool):
        raise ValueError(f"invalid id {raw!r}")
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise ValueError(f"invalid id {raw!r}") from None


@dataclass
class GenesisState:
    """The module's records at chain start; each record is a mapping with an id."""

    claim_list: list[Entry] = field(default_factory=list)
    nft_list: list[Entry] = field(default_factory=list)
    tx_history_list: list[Entry] = field(default_factory=list)
    borrow_accrued_list: list[Entry] = field(default_factory=list)
    deposit_earned_list: list[Entry] = field(default_factory=list)
    apr_list: list[Entry] = field(default_factory=list)
    repay_list: list[Entry] = field(default_factory=list)
    withdraw_list: list[Entry] = field(default_factory=list)
    user_list: list[Entry] = field(default_factory=list)
    borrow_list: list[Entry] = field(default_factory=list)
    deposit_list: list[Entry] = field(default_factory=list)
    pool_list: list[Entry] = field(default_factory=list)

    def validate(self) -> None:
        """Raise ValueError if any list holds two records with the same id."""
        for attr, _, label in _LISTS:
            seen: set[int] = set()
            for entry in getattr(self, attr):
                ident = _entry_id(entry)
                if ident in seen:
                    raise ValueError(f"duplicated id for {label}")
                seen.add(ident)

    @classmethod
    def from_json(cls, data: str | bytes) -> "GenesisState":
        """Parse a genesis state from its JSON form."""
        payload = json.loads(data)
        if not isinstance(payload, dict):
            raise ValueError("genesis state must be a JSON object")
        by_json = {json_name: attr for attr, json_name, _ in _LISTS}
        values: dict[str, list[Entry]] = {}
        for key, value in payload.items():
            attr = by_json.get(key)
            if attr is None:
                raise ValueError(f"unknown field {key!r} in genesis state")
            if value is None:
                value = []
            if not isinstance(value, list) or not all(isinstance(e, dict) for e in value):
                raise ValueError(f"field {key!r} must be a list of objects")
            values[attr] = [dict(entry) for entry in value]
        return cls(**values)

    def to_json(self) -> str:
        """Serialise the genesis state to JSON."""
        return json.dumps(
            {json_name: getattr(self, attr) for attr, json_name, _ in _LISTS}
        )


def default_genesis() -> GenesisState:
    """Return the default genesis state with every list empty."""
    return GenesisState()


assert {f.name for f in fields(GenesisState)} == {attr for attr, _, _ in _LISTS}