from ..formatting.dates import format_pretty_date
from ..models import FileMetadata, OptionsLike, resolve_options


def add_pretty_date_info(record: FileMetadata, options: OptionsLike = None) -> FileMetadata:
    """Adds human readable `pretty_date_created` / `pretty_date_changed`."""
    opts = resolve_options(options)
    return record.with_fields(
        pretty_date_created=format_pretty_date(record.date_created, opts.use_24_hour_format),
        pretty_date_changed=format_pretty_date(record.date_changed, opts.use_24_hour_format),
    )
