# ibbchain

Building blocks for an inter-blockchain lending and borrowing ("IBB")
module: the transaction message types, the store and query naming
conventions, codec registration, genesis validation and a USD price
oracle for the supported assets.

## Modules

- `ibbchain.keys` holds the module name (`MODULE_NAME = "ibb"`), the store
  key strings such as `POOL_KEY` and `POOL_COUNT_KEY`, `key_prefix()` to
  turn one into bytes, the query route names (`QUERY_LOAD_POOL` and the
  others), and the rate constants (`TARGET_BORROW_RATIO`,
  `DEPOSIT_INTEREST`, `INTEREST_FACTOR`, `MINIMUM_DEPOSIT_INTEREST`,
  `LIQUIDATION_RATIO`). It also has `RegisteredError`, an exception that
  carries a codespace and a numeric code (`ERR_SAMPLE` is code 1100), the
  response records `LoadPoolRestResponse` and `LoadUserRestResponse`, and
  `BankKeeper`, a runtime-checkable protocol for the balance operations
  the module expects from a bank.
- `ibbchain.msg` holds the `Msg` base class and the offer and minting
  messages `MsgAcceptOffer`, `MsgChooseOffer`, `MsgCreateOffer` and
  `MsgMintNft`. Every message has:
  - `route()`, which returns `"ibb"`
  - `type()`, for example `"CreateOffer"`
  - `to_dict()`, a mapping with the camel-cased wire names, where 64-bit
    fields such as ids are written as strings
  - `get_sign_bytes()`, compact JSON with sorted keys
  - `get_signers()`, the decoded creator address
  - `validate_basic()`, which raises `InvalidAddressError` when the creator
    is not a valid bech32 address

  `acc_address_from_bech32(address, prefix="cosmos")` decodes an address
  to raw bytes. It raises `ValueError` on a bad checksum, a bad prefix or
  a bad length.
- `ibbchain.ledger_msgs` has the create, update and delete messages for
  borrows, deposits, repays and withdrawals, such as `MsgCreateBorrow`,
  `MsgUpdateDeposit` and `MsgDeleteWithdraw`.
- `ibbchain.accrual_msgs` has the messages for APRs, accrued borrow
  interest, claims, earned deposit interest and transaction history, such
  as `MsgCreateApr`, `MsgUpdateClaim` and `MsgDeleteTxHistory`.
- `ibbchain.entity_msgs` has the messages for NFTs, pools and users, such
  as `MsgCreateNft`, `MsgUpdatePool` and `MsgDeleteUser`.
- `ibbchain.codec` has `Codec`, which maps message classes to names and
  back, and `InterfaceRegistry`, which records the implementations of an
  interface. `register_codec(cdc)` registers every message under its name,
  for example `"ibb/CreatePool"`. `register_interfaces(registry)`
  registers every message as an implementation of `Msg`.
- `ibbchain.genesis` has `GenesisState`, a set of record lists (claims,
  NFTs, transaction history, accruals, APRs, repays, withdrawals, users,
  borrows, deposits and pools) in which each record is a mapping with an
  `id`. It also has `default_genesis()`, which returns empty lists,
  `from_json()` and `to_json()`. `validate()` raises `ValueError`, for
  example `"duplicated id for pool"`, when a list repeats an id.
- `ibbchain.oracle` fetches USD prices from the CoinGecko simple price API
  through `fetch_usd_price(coin_id, default, failure_value)` and the
  per-asset helpers `get_atom_price()`, `get_iris_price()`,
  `get_dvpn_price()`, `get_xprt_price()`, `get_cro_price()` and
  `get_akt_price()`. If the service answers without a non-zero price, the
  built-in default (`DEFAULT_ATOM_PRICE` and the others) is returned. If
  the request cannot be made at all, the ATOM helper returns `1.0` and the
  others return `0.0`. `get_all_prices()` returns the six prices in the
  order AKT, ATOM, DVPN, CRO, IRIS, XPRT.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from ibbchain.genesis import GenesisState, default_genesis
from ibbchain.ledger_msgs import MsgCreateDeposit
from ibbchain.msg import InvalidAddressError

msg = MsgCreateDeposit(creator="not-an-address", block_height=10,
                       asset="atom", amount=100, denom="uatom")
print(msg.type())            # CreateDeposit
print(msg.get_sign_bytes())  # sorted compact JSON
try:
    msg.validate_basic()
except InvalidAddressError as exc:
    print(exc)

state = default_genesis()
state.validate()             # an empty state is valid

state = GenesisState.from_json('{"poolList": [{"id": 1}, {"id": 1}]}')
try:
    state.validate()
except ValueError as exc:
    print(exc)               # duplicated id for pool
```

## What this package does not do

It describes and checks messages and genesis documents, but it does not
run a chain. There is no store or keeper that keeps pools, users or
deposits, and nothing that applies messages to them or answers the query
routes named in `ibbchain.keys`. There is also no command-line tool and no
REST or gRPC server.