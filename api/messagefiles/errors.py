"""Failure taxonomy for message file loading.

Only ``FilesystemFailure`` ever reaches a caller, and only when
``MESSAGEFILES_FAIL_ON_FILESYSTEM_ERROR`` is enabled. The other kinds are
raised by the loader's internal steps and caught at the narrowest scope
(file, locale or whole pass), then logged.
"""

from __future__ import annotations


class MessageFilesError(Exception):
    """Base class for message file loading errors."""


class ConfigMissing(MessageFilesError):
    def __init__(self, key: str):
        super().__init__(f'{key} is not defined in settings')
        self.key = key


class DirectoryMissing(MessageFilesError):
    def __init__(self, path, *, locale: str | None = None):
        if locale is None:
            msg = f'messagefiles.path is defined in settings but folder {path} could not be found'
        else:
            msg = f'Could not find {locale} locale in {path}'
        super().__init__(msg)
        self.path = path
        self.locale = locale


class FileUnreadable(MessageFilesError):
    def __init__(self, path, reason: str = ''):
        super().__init__(f'Could not read {path}' + (f': {reason}' if reason else ''))
        self.path = path


class FilesystemFailure(MessageFilesError):
    """Listing a directory or stat-ing a file failed at the OS level."""

    def __init__(self, path, cause: OSError | None = None):
        super().__init__(f'Filesystem failure while scanning {path}' + (f': {cause}' if cause else ''))
        self.path = path
        self.cause = cause


__all__ = ['MessageFilesError', 'ConfigMissing', 'DirectoryMissing', 'FileUnreadable', 'FilesystemFailure']
