import logging

from ..formatting.size import pretty_size
from ..models import FileMetadata, OptionsLike, resolve_options


def add_pretty_size(record: FileMetadata, options: OptionsLike = None) -> FileMetadata:
    """Adds `pretty_size`, scaled by 1000 if options.use_decimal else 1024."""
    opts = resolve_options(options)
    value = pretty_size(record.size, opts.use_decimal)
    logging.debug(f"Pretty size for {record.absolute_path}: {value}")
    return record.with_fields(pretty_size=value)
