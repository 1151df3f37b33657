"""Shared MongoDB helpers for VenTech services."""

from __future__ import annotations

from typing import Any, Dict, Tuple

from pymongo import MongoClient

_clients: Dict[Tuple[str, frozenset], MongoClient] = {}


def get_client(uri: str, **kwargs: Any) -> MongoClient:
    """
    Return a cached MongoClient keyed by URI and options.
    Driver-level retries are on unless the caller overrides them.
    """
    kwargs.setdefault("retryWrites", True)
    kwargs.setdefault("retryReads", True)
    key = (uri, frozenset(kwargs.items()))
    if key not in _clients:
        _clients[key] = MongoClient(uri, **kwargs)
    return _clients[key]


def get_database(uri: str, db_name: str, **kwargs: Any):
    """Convenience helper to fetch a database handle."""
    client = get_client(uri, **kwargs)
    return client[db_name]


def close_clients() -> None:
    """Close every cached client. Called on application shutdown."""
    while _clients:
        _, client = _clients.popitem()
        client.close()
