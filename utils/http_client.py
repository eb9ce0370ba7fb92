#!/usr/bin/env python3
"""
Outbound HTTP for FunRec: one pooled client, single-attempt JSON GETs.
"""

import asyncio

import httpx

from config import Config

_http_client: httpx.AsyncClient = None


def _build_client():
    timeout = httpx.Timeout(Config.HTTP_TIMEOUT, connect=Config.HTTP_CONNECT_TIMEOUT)
    return httpx.AsyncClient(timeout=timeout, headers={"User-Agent": Config.USER_AGENT})


def get_http_client() -> httpx.AsyncClient:
    global _http_client
    if _http_client is None:
        _http_client = _build_client()
    return _http_client


async def close_http_client():
    global _http_client
    if _http_client is not None:
        client, _http_client = _http_client, None
        await client.aclose()


async def fetch_json(url, params=None, deadline=None):
    """
    GET a JSON document once.

    The whole request is cancelled when ``deadline`` seconds elapse
    (defaults to Config.PLACES_LOOKUP_TIMEOUT), raising asyncio.TimeoutError.
    Non-2xx responses raise httpx.HTTPStatusError.
    """
    if deadline is None:
        deadline = Config.PLACES_LOOKUP_TIMEOUT
    r = await asyncio.wait_for(
        get_http_client().get(url, params=params), timeout=deadline
    )
    r.raise_for_status()
    return r.json()
