import gzip
import logging
from pathlib import Path
from typing import Callable, Optional

import brotli

from .. import config
from ..exceptions import FileUnavailableError
from ..formatting.size import pretty_size
from ..models import FileMetadata, OptionsLike, resolve_options

# raw bytes -> compressed bytes
Compressor = Callable[[bytes], bytes]


def gzip_compress(data: bytes) -> bytes:
    return gzip.compress(data, compresslevel=config.GZIP_LEVEL)


def brotli_compress(data: bytes) -> bytes:
    return brotli.compress(data)


def compressed_size(path: str, compress: Compressor) -> int:
    """
    Reads the whole file and returns the length of its compressed form.

    Raises:
        FileUnavailableError: the file can no longer be read
    """
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logging.warning(f"Could not re-read {path}: {e}")
        raise FileUnavailableError(f"File is no longer readable: {path}") from e
    return len(compress(data))


def add_gzip_size(record: FileMetadata,
                  options: OptionsLike = None,
                  compress: Optional[Compressor] = None) -> FileMetadata:
    """Adds `gzip_size`, the scaled size of the gzipped file content."""
    opts = resolve_options(options)
    size = compressed_size(record.absolute_path, compress or gzip_compress)
    return record.with_fields(gzip_size=pretty_size(size, opts.use_decimal))


def add_brotli_size(record: FileMetadata,
                    options: OptionsLike = None,
                    compress: Optional[Compressor] = None) -> FileMetadata:
    """Adds `brotli_size`, the scaled size of the brotli-compressed file content."""
    opts = resolve_options(options)
    size = compressed_size(record.absolute_path, compress or brotli_compress)
    return record.with_fields(brotli_size=pretty_size(size, opts.use_decimal))
