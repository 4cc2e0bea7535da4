from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class Dimensions:
    """
    Pixel size and detected format read from an image header.
    """
    width: int
    height: int
    type: str               # jpg/png/gif/bmp/tiff/webp/psd

    def to_dict(self) -> Dict[str, Any]:
        return {'width': self.width, 'height': self.height, 'type': self.type}


@dataclass(frozen=True)
class FileMetadata:
    """
    Metadata for a single file, built by extraction and grown by enrichers.

    Enrichers never mutate a record: they return a copy with their fields
    filled in. A field left at None means its enrichment has not run.
    """
    # Set once at extraction
    absolute_path: str
    size: int
    date_created: str       # ISO-8601, UTC
    date_changed: str       # ISO-8601, UTC

    # Enrichment results
    pretty_size: Optional[str] = None
    mime_type: Optional[str] = None
    dimmensions: Optional[Dimensions] = None
    pretty_date_created: Optional[str] = None
    pretty_date_changed: Optional[str] = None
    gzip_size: Optional[str] = None
    brotli_size: Optional[str] = None

    def with_fields(self, **changes: Any) -> "FileMetadata":
        """Returns a copy carrying every current field plus `changes`."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """
        Renders the record with camelCase keys, leaving out enrichments
        that have not run.
        """
        out: Dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, Dimensions):
                value = value.to_dict()
            out[_camel_case(f.name)] = value
        return out


@dataclass(frozen=True)
class Options:
    """
    Per-call formatting flags.

    use_decimal: scale sizes by 1000 (kB, MB...) instead of 1024 (KiB, MiB...)
    use_24_hour_format: render times as HH:MM:SS instead of h:MM:SS am/pm
    """
    use_decimal: bool = False
    use_24_hour_format: bool = False

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Options":
        """
        Builds options from a camelCase mapping.

        `useKibibyteRepresentation` is still honoured (True means 1024-based)
        but an explicit `useDecimal` takes precedence.
        """
        if 'useDecimal' in data:
            use_decimal = bool(data['useDecimal'])
        elif 'useKibibyteRepresentation' in data:
            use_decimal = not data['useKibibyteRepresentation']
        else:
            use_decimal = False
        return cls(
            use_decimal=use_decimal,
            use_24_hour_format=bool(data.get('use24HourFormat', False)),
        )


OptionsLike = Union[Options, Mapping[str, Any], None]


def resolve_options(options: OptionsLike) -> Options:
    if options is None:
        return Options()
    if isinstance(options, Options):
        return options
    return Options.from_mapping(options)


def _camel_case(name: str) -> str:
    head, *rest = name.split('_')
    return head + ''.join(part.capitalize() for part in rest)
