"""Aggregates per-locale ``.properties`` files into the message registry.

Layout consumed::

    <MESSAGEFILES_PATH>/
      en/
        nav.properties      -> en: nav.<key>
        errors.properties   -> en: errors.<key>
      fr/
        ...

Every key is prefixed with its file name minus ``.properties``. Settings are
re-read at the start of each ``load()`` / ``has_changed()`` call, so
``override_settings`` and environment changes apply without a restart.

The load timestamp is recorded once the pass completes but holds the clock
value from when it started, so a file edited while a pass is running is still
seen as stale by the next ``has_changed()``.

Misconfiguration never raises: a missing root, a missing locale folder or an
unreadable file is logged and skipped. The only failure that can reach the
caller is a ``FilesystemFailure`` with ``MESSAGEFILES_FAIL_ON_FILESYSTEM_ERROR``
enabled.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Mapping, Sequence, Union

from .conf import (
    DEFAULT_LOCALE_KEY,
    ENABLE_DIAGNOSTICS_KEY,
    PATH_KEY,
    ConfigSource,
    DjangoSettingsSource,
    MergePolicy,
    MessageFilesSettings,
    as_bool,
)
from .errors import ConfigMissing, DirectoryMissing, FilesystemFailure, FileUnreadable
from .filesystem import LocalFileSystem
from .properties import parse_properties
from .store import MessageStore, messages

PROPERTIES_EXTENSION = '.properties'
DIAGNOSTICS_PREFIX = 'MessageFiles'

logger = logging.getLogger(__name__)

LocaleList = Union[Sequence[str], Callable[[], Iterable[str]]]


def is_properties_file(name: str) -> bool:
    # substring match: "nav.properties.bak" is picked up too
    return PROPERTIES_EXTENSION in name


def prefix_for(name: str) -> str:
    return name.replace(PROPERTIES_EXTENSION, '', 1)


def normalize_value(value: str) -> str:
    """Trim, drop one leading ``=`` left over from ``key==value`` lines, trim again."""
    value = value.strip()
    if value.startswith('='):
        value = value[1:]
    return value.strip()


def prefixed_entries(prefix: str, props: Mapping[str, str]) -> dict[str, str]:
    return {f'{prefix}.{key.strip()}': normalize_value(value) for key, value in props.items()}


@dataclass(slots=True)
class LoadReport:
    ran: bool = False
    files_loaded: int = 0
    messages_loaded: int = 0
    files_failed: list[str] = field(default_factory=list)
    missing_locales: list[str] = field(default_factory=list)
    skipped_locales: list[str] = field(default_factory=list)
    finished_at: float | None = None


def _django_locales() -> list[str]:
    from django.conf import settings

    return [code for code, _name in settings.LANGUAGES]


def _default_filesystem() -> LocalFileSystem:
    from django.conf import settings

    base_dir = getattr(settings, 'BASE_DIR', None) if settings.configured else None
    return LocalFileSystem(base_dir)


class LocaleMessageLoader:
    def __init__(
        self,
        *,
        config: ConfigSource | None = None,
        store: MessageStore | None = None,
        filesystem: LocalFileSystem | None = None,
        locales: LocaleList | None = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config if config is not None else DjangoSettingsSource()
        self.store = store if store is not None else messages
        self.filesystem = filesystem if filesystem is not None else _default_filesystem()
        self.clock = clock
        self.last_loaded = 0.0
        self._locales = locales
        self._lock = threading.RLock()
        self._diagnostics = as_bool(self.config.get(ENABLE_DIAGNOSTICS_KEY))
        self._diag('has been instantiated')

    # Host lifecycle entry points

    def on_start(self) -> LoadReport:
        return self.load()

    def on_change_check(self) -> LoadReport | None:
        return self.reconcile_if_changed()

    # Operations

    def load(self) -> LoadReport:
        with self._lock:
            settings = self._resolve_settings()
            report = LoadReport()
            self._diag('going to load messages')

            if settings.default_locale is None:
                logger.warning('%s is not defined in settings', DEFAULT_LOCALE_KEY)
            try:
                root = self._langs_root(settings)
            except ConfigMissing as exc:
                logger.warning('%s', exc)
                return report
            except DirectoryMissing as exc:
                logger.error('%s', exc)
                return report

            report.ran = True
            started = self.clock()
            for locale in self.known_locales():
                try:
                    self._load_locale(locale, root, settings, report)
                except DirectoryMissing as exc:
                    logger.warning('%s', exc)
                    report.missing_locales.append(locale)
                except FilesystemFailure:
                    if settings.fail_on_filesystem_error:
                        raise
                    logger.exception('Skipping %s locale, its folder could not be scanned', locale)
                    report.skipped_locales.append(locale)

            self.last_loaded = max(self.last_loaded, started)
            report.finished_at = self.last_loaded
            self._diag('loaded %d messages total', report.messages_loaded)
            self._diag('done loading messages')
            return report

    def has_changed(self) -> bool:
        with self._lock:
            settings = self._resolve_settings()
            try:
                root = self._langs_root(settings)
            except (ConfigMissing, DirectoryMissing):
                return False
            for locale in self.known_locales():
                locale_dir = self.filesystem.child(root, locale)
                if not self.filesystem.is_dir(locale_dir):
                    continue
                try:
                    for path in self.filesystem.list_files(locale_dir, is_properties_file):
                        if self.filesystem.mtime(path) > self.last_loaded:
                            self._diag('%s changed since last load', path)
                            return True
                except FilesystemFailure:
                    if settings.fail_on_filesystem_error:
                        raise
                    logger.exception('Could not check %s locale for changes', locale)
            return False

    def reconcile_if_changed(self) -> LoadReport | None:
        with self._lock:
            if self.has_changed():
                return self.load()
            return None

    def known_locales(self) -> list[str]:
        if self._locales is None:
            return _django_locales()
        if callable(self._locales):
            return list(self._locales())
        return list(self._locales)

    # Internals

    def _resolve_settings(self) -> MessageFilesSettings:
        settings = MessageFilesSettings.from_source(self.config)
        self._diagnostics = settings.diagnostics
        return settings

    def _langs_root(self, settings: MessageFilesSettings) -> Path:
        if not settings.path:
            raise ConfigMissing(PATH_KEY)
        root = self.filesystem.resolve(settings.path)
        if not self.filesystem.is_dir(root):
            raise DirectoryMissing(settings.path)
        return root

    def _load_locale(self, locale: str, root: Path, settings: MessageFilesSettings, report: LoadReport) -> None:
        self._diag('found %s locale in known locales', locale)
        locale_dir = self.filesystem.child(root, locale)
        if not self.filesystem.is_dir(locale_dir):
            raise DirectoryMissing(settings.path, locale=locale)
        self._diag('going to load %s messages from %s', locale, locale_dir)

        replace = settings.merge_policy is MergePolicy.REPLACE
        pass_table: dict[str, str] = {}
        for path in self.filesystem.list_files(locale_dir, is_properties_file):
            try:
                entries = self._read_entries(path)
            except FileUnreadable as exc:
                logger.warning('%s', exc, exc_info=exc.__cause__)
                report.files_failed.append(str(path))
                continue

            if replace:
                pass_table.update(entries)
            else:
                merged = dict(self.store.get(locale) or {})
                merged.update(entries)
                self.store.put(locale, merged)
            report.files_loaded += 1
            report.messages_loaded += len(entries)
            self._diag('loaded %d messages', len(entries))

            if locale == settings.default_locale:
                self.store.put_all_defaults(entries)
                self._diag('locale %s is default', locale)

        if replace:
            # one swap per locale so readers never see a half-built table
            self.store.put(locale, pass_table)
        self._diag('done loading %s messages', locale)

    def _read_entries(self, path: Path) -> dict[str, str]:
        self._diag('going to load messages from %s', path)
        try:
            props = parse_properties(self.filesystem.read_text(path))
        except (OSError, ValueError) as exc:
            raise FileUnreadable(path, str(exc)) from exc
        return prefixed_entries(prefix_for(path.name), props)

    def _diag(self, message: str, *args) -> None:
        if self._diagnostics:
            logger.info(f'{DIAGNOSTICS_PREFIX}: {message}', *args)


_loader: LocaleMessageLoader | None = None
_loader_lock = threading.Lock()


def get_loader() -> LocaleMessageLoader:
    """Process-wide loader bound to Django settings and the ``messages`` registry."""
    global _loader
    with _loader_lock:
        if _loader is None:
            _loader = LocaleMessageLoader()
        return _loader


def set_loader(loader: LocaleMessageLoader | None) -> None:
    global _loader
    with _loader_lock:
        _loader = loader


__all__ = [
    'PROPERTIES_EXTENSION',
    'LoadReport',
    'LocaleMessageLoader',
    'get_loader',
    'set_loader',
    'is_properties_file',
    'prefix_for',
    'normalize_value',
    'prefixed_entries',
]
