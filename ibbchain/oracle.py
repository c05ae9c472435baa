"""USD spot prices of the supported assets, with fixed fallbacks."""

from __future__ import annotations

import json
from http.client import HTTPException
from urllib.error import HTTPError, URLError
from urllib.parse import quote
from urllib.request import urlopen

# Fallback prices, used when the price service answers without a usable price.
DEFAULT_ATOM_PRICE = 10.78
DEFAULT_IRIS_PRICE = 0.073045
DEFAULT_DVPN_PRICE = 0.02512019
DEFAULT_XPRT_PRICE = 8.17
DEFAULT_CRO_PRICE = 0.111101
DEFAULT_AKT_PRICE = 3.3

ATOM_ID = "cosmos"
IRIS_ID = "iris-network"
DVPN_ID = "sentinel"
XPRT_ID = "persistence"
CRO_ID = "crypto-com-chain"
AKT_ID = "akash-network"

PRICE_API_URL = "https://api.coingecko.com/api/v3/simple/price"
REQUEST_TIMEOUT = 30.0


def _fetch_body(url: str) -> bytes | None:
    try:
        with urlopen(url, timeout=REQUEST_TIMEOUT) as response:
            return response.read()
    except HTTPError as exc:
        try:
            return exc.read()
        except (OSError, AttributeError):
            return b""
        finally:
            exc.close()
    except (URLError, OSError, HTTPException, ValueError):
        return None


def fetch_usd_price(coin_id: str, default: float, failure_value: float) -> float:
    """Return the USD price of a coin.

    Returns failure_value if the request cannot be made and default if the
    response carries no non-zero price.
    """
    url = f"{PRICE_API_URL}?ids={quote(coin_id)}&vs_currencies=usd"
    body = _fetch_body(url)
    if body is None:
        return failure_value
    try:
        payload = json.loads(body)
    except ValueError:
        return default
    entry = payload.get(coin_id) if isinstance(payload, dict) else None
    price = entry.get("usd") if isinstance(entry, dict) else None
    if isinstance(price, (int, float)) and not isinstance(price, bool) and price:
        return float(price)
    return default


def get_atom_price() -> float:
    return fetch_usd_price(ATOM_ID, DEFAULT_ATOM_PRICE, 1.0)


def get_iris_price() -> float:
    return fetch_usd_price(IRIS_ID, DEFAULT_IRIS_PRICE, 0.0)


def get_dvpn_price() -> float:
    return fetch_usd_price(DVPN_ID, DEFAULT_DVPN_PRICE, 0.0)


def get_xprt_price() -> float:
    return fetch_usd_price(XPRT_ID, DEFAULT_XPRT_PRICE, 0.0)


def get_cro_price() -> float:
    return fetch_usd_price(CRO_ID, DEFAULT_CRO_PRICE, 0.0)


def get_akt_price() -> float:
    return fetch_usd_price(AKT_ID, DEFAULT_AKT_PRICE, 0.0)


def get_all_prices() -> tuple[float, float, float, float, float, float]:
    """Return the prices of AKT, ATOM, DVPN, CRO, IRIS and XPRT, in that order."""
    return (
        get_akt_price(),
        get_atom_price(),
        get_dvpn_price(),
        get_cro_price(),
        get_iris_price(),
        get_xprt_price(),
    )