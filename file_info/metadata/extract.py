import logging
import os
from pathlib import Path, PurePath
from typing import NoReturn, Optional, Union

import aiofiles.os

from ..exceptions import FileAccessError, InvalidPathError, NotFoundError
from ..formatting.dates import to_iso
from ..models import FileMetadata

PathLike = Union[str, Path]


def extract_blocking(path: Optional[PathLike]) -> FileMetadata:
    """
    Stats `path` and returns its base record (path, size, created, changed).

    Raises:
        InvalidPathError: path is None or empty (no I/O attempted)
        NotFoundError: the file does not exist
        FileAccessError: stat failed for another reason (permissions, ...)
    """
    path = _check_path(path)
    try:
        stats = os.stat(path)
    except OSError as e:
        _raise_stat_error(path, e)
    return _build_record(path, stats)


async def extract_async(path: Optional[PathLike]) -> FileMetadata:
    """
    Awaitable twin of extract_blocking; same record, same errors.
    Suspends only on the stat call.
    """
    path = _check_path(path)
    try:
        stats = await aiofiles.os.stat(path)
    except OSError as e:
        _raise_stat_error(path, e)
    return _build_record(path, stats)


# --- Shared Helpers ---

def _check_path(path: Optional[PathLike]) -> str:
    # Path("") collapses to "."
    if path is None or not str(path) or (isinstance(path, PurePath) and not path.parts):
        raise InvalidPathError("Please provide a valid filepath")
    return str(path)


def _raise_stat_error(path: str, error: OSError) -> NoReturn:
    logging.warning(f"Stat failed for {path}: {error}")
    if isinstance(error, FileNotFoundError):
        raise NotFoundError(f"File not found: {path}") from error
    raise FileAccessError(f"Cannot stat {path}: {error}") from error


def _build_record(path: str, stats: os.stat_result) -> FileMetadata:
    created = getattr(stats, 'st_birthtime', None)
    if created is None:
        # Most Linux filesystems don't expose birth time through stat
        logging.debug(f"No birth time for {path}, using st_ctime")
        created = stats.st_ctime

    logging.debug(f"Extracted {path}: {stats.st_size} bytes")
    return FileMetadata(
        absolute_path=path,
        size=stats.st_size,
        date_created=to_iso(created),
        date_changed=to_iso(stats.st_mtime),
    )
