"""Thin httpx helper that maps transport failures onto TransportError."""

from typing import Any

import httpx

from tickerboard.services.errors import TransportError


async def fetch_json(client: httpx.AsyncClient, url: str, params: dict, *, provider: str) -> Any:
    """GET ``url`` and decode the JSON body.

    Raises TransportError for connection errors, non-2xx statuses and
    undecodable bodies so callers only ever handle the provider taxonomy.
    """
    try:
        resp = await client.get(url, params=params)
        resp.raise_for_status()
        return resp.json()
    except httpx.HTTPStatusError as exc:
        raise TransportError(f"{provider} returned HTTP {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"{provider} request failed: {exc.__class__.__name__}") from exc
    except ValueError as exc:
        raise TransportError(f"{provider} returned a non-JSON body") from exc
