import logging
import mimetypes
from pathlib import Path
from typing import Callable, Optional

from .. import config
from ..models import FileMetadata

# extension (no dot, case kept) -> mime type
MimeLookup = Callable[[str], Optional[str]]

_mime_table: Optional[mimetypes.MimeTypes] = None


def default_lookup(extension: str) -> Optional[str]:
    """
    Looks the extension up in the stock mime table (plus
    config.EXTRA_MIME_TYPES), exactly as written. The table is loaded
    once per process.
    """
    global _mime_table
    if _mime_table is None:
        table = mimetypes.MimeTypes()
        for ext, mime_type in config.EXTRA_MIME_TYPES.items():
            table.add_type(mime_type, ext)
        _mime_table = table
    return _mime_table.types_map[True].get(f".{extension}")


def lookup_mime_type(path: str, lookup: Optional[MimeLookup] = None) -> Optional[str]:
    """Mime type from the last dot-segment of `path`; None if unknown."""
    extension = Path(path).suffix[1:]
    if not extension:
        return None
    if extension in config.TYPESCRIPT_EXTS:
        return config.TYPESCRIPT_MIME
    return (lookup or default_lookup)(extension)


def add_mime_type_info(record: FileMetadata, lookup: Optional[MimeLookup] = None) -> FileMetadata:
    """
    Adds `mime_type` based on the file extension only (no content sniffing).
    """
    mime_type = lookup_mime_type(record.absolute_path, lookup)
    if mime_type is None:
        logging.debug(f"No mime type known for {record.absolute_path}")
    return record.with_fields(mime_type=mime_type)
