"""Settings resolution for the message files loader.

Keys are dotted (``messagefiles.defaultLocale``) and map onto flat Django
settings (``MESSAGEFILES_DEFAULT_LOCALE``). Any object with a ``get(key,
default)`` method can stand in for the Django-backed source, so tests pass a
plain dict.
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from typing import Any, Protocol

PATH_KEY = 'messagefiles.path'
DEFAULT_LOCALE_KEY = 'messagefiles.defaultLocale'
ENABLE_DIAGNOSTICS_KEY = 'messagefiles.enableDiagnostics'
MERGE_POLICY_KEY = 'messagefiles.mergePolicy'
FAIL_ON_FILESYSTEM_ERROR_KEY = 'messagefiles.failOnFilesystemError'
WATCH_KEY = 'messagefiles.watch'
CHECK_INTERVAL_KEY = 'messagefiles.checkInterval'

_TRUTHY = {'1', 'true', 'yes', 'on'}
_HUMP_RE = re.compile(r'(?<=[a-z0-9])(?=[A-Z])')

logger = logging.getLogger(__name__)


class ConfigSource(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...


class MergePolicy(str, enum.Enum):
    ACCUMULATE = 'accumulate'
    REPLACE = 'replace'


def setting_name(key: str) -> str:
    """``messagefiles.defaultLocale`` -> ``MESSAGEFILES_DEFAULT_LOCALE``."""
    return _HUMP_RE.sub('_', key).replace('.', '_').upper()


def as_bool(value: Any, default: bool = False) -> bool:
    if value is None or value == '':
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


DEFAULT_CHECK_INTERVAL = 60.0


def check_interval(source: ConfigSource) -> float:
    """Seconds between periodic change checks; invalid or non-positive values fall back to the default."""
    raw = source.get(CHECK_INTERVAL_KEY)
    try:
        interval = float(raw) if raw not in (None, '') else DEFAULT_CHECK_INTERVAL
    except (TypeError, ValueError):
        logger.warning('%s has invalid value %r, using %s', CHECK_INTERVAL_KEY, raw, DEFAULT_CHECK_INTERVAL)
        return DEFAULT_CHECK_INTERVAL
    return interval if interval > 0 else DEFAULT_CHECK_INTERVAL


class DjangoSettingsSource:
    """Reads dotted keys from ``django.conf.settings`` on every call."""

    def get(self, key: str, default: Any = None) -> Any:
        from django.conf import settings  # local import to avoid early settings access

        return getattr(settings, setting_name(key), default)


@dataclass(frozen=True, slots=True)
class MessageFilesSettings:
    path: str | None
    default_locale: str | None
    diagnostics: bool = False
    merge_policy: MergePolicy = MergePolicy.ACCUMULATE
    fail_on_filesystem_error: bool = False

    @classmethod
    def from_source(cls, source: ConfigSource) -> MessageFilesSettings:
        path = source.get(PATH_KEY)
        default_locale = source.get(DEFAULT_LOCALE_KEY)
        raw_policy = source.get(MERGE_POLICY_KEY) or MergePolicy.ACCUMULATE.value
        try:
            policy = raw_policy if isinstance(raw_policy, MergePolicy) else MergePolicy(str(raw_policy).strip().lower())
        except ValueError:
            logger.warning('%s has unknown value %r, using %s', MERGE_POLICY_KEY, raw_policy, MergePolicy.ACCUMULATE.value)
            policy = MergePolicy.ACCUMULATE
        return cls(
            path=str(path) if path else None,
            default_locale=str(default_locale) if default_locale else None,
            diagnostics=as_bool(source.get(ENABLE_DIAGNOSTICS_KEY)),
            merge_policy=policy,
            fail_on_filesystem_error=as_bool(source.get(FAIL_ON_FILESYSTEM_ERROR_KEY)),
        )


__all__ = [
    'PATH_KEY',
    'DEFAULT_LOCALE_KEY',
    'ENABLE_DIAGNOSTICS_KEY',
    'MERGE_POLICY_KEY',
    'FAIL_ON_FILESYSTEM_ERROR_KEY',
    'WATCH_KEY',
    'CHECK_INTERVAL_KEY',
    'ConfigSource',
    'MergePolicy',
    'MessageFilesSettings',
    'DjangoSettingsSource',
    'setting_name',
    'as_bool',
    'check_interval',
]
