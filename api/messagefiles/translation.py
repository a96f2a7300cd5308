"""Lookup helpers over the loaded message tables."""

from __future__ import annotations

from typing import Any

from .store import InMemoryMessageStore, messages


def _active_locale() -> str | None:
    from django.utils import translation  # local import to avoid early settings access

    return translation.get_language()


def t(key: str, locale: str | None = None, *, store: InMemoryMessageStore | None = None, **kwargs: Any) -> str:
    """Fetch a message and format it with kwargs.

    ``locale`` defaults to Django's active language. If the key is missing
    everywhere the key itself is returned (visible sentinel). Missing
    interpolation variables leave the template unformatted.
    """
    store = store if store is not None else messages
    msg = store.get_message(key, locale or _active_locale())
    if msg is None:
        return key
    if not kwargs:
        return msg
    try:
        return msg.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return msg


__all__ = ['t']
