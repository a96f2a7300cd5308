"""In-memory message registry the loader writes into.

``messages`` is the process-wide registry used by the app config, the lookup
helpers and the template tag. The loader only depends on the ``MessageStore``
protocol, so tests hand it a fresh ``InMemoryMessageStore``.
"""

from __future__ import annotations

import threading
from typing import Mapping, Protocol


class MessageStore(Protocol):
    defaults: Mapping[str, str] | None

    def get(self, locale: str) -> Mapping[str, str] | None: ...

    def put(self, locale: str, table: Mapping[str, str]) -> None: ...

    def put_all_defaults(self, entries: Mapping[str, str]) -> None: ...


class InMemoryMessageStore:
    def __init__(self) -> None:
        self._lock = threading.RLock()
        self.locales: dict[str, dict[str, str]] = {}
        self.defaults: dict[str, str] | None = None

    def get(self, locale: str) -> dict[str, str] | None:
        return self.locales.get(locale)

    def put(self, locale: str, table: Mapping[str, str]) -> None:
        # whole-table swap: readers see either the old or the new dict
        self.locales[locale] = dict(table)

    def put_all_defaults(self, entries: Mapping[str, str]) -> None:
        with self._lock:
            merged = dict(self.defaults or {})
            merged.update(entries)
            self.defaults = merged

    def clear(self) -> None:
        with self._lock:
            self.locales = {}
            self.defaults = None

    def locale_codes(self) -> list[str]:
        return list(self.locales)

    def get_message(self, key: str, locale: str | None = None) -> str | None:
        """Resolve ``key`` for ``locale``.

        Fallback order: exact locale, base language (``en-us`` -> ``en``),
        default table. Returns ``None`` when nothing matches.
        """
        if locale:
            candidates = [locale]
            base = locale.replace('_', '-').split('-')[0]
            if base != locale:
                candidates.append(base)
            for code in candidates:
                table = self.locales.get(code)
                if table and key in table:
                    return table[key]
        if self.defaults and key in self.defaults:
            return self.defaults[key]
        return None


messages = InMemoryMessageStore()


__all__ = ['MessageStore', 'InMemoryMessageStore', 'messages']
