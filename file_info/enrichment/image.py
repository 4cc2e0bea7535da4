import logging
from typing import Callable, Optional

from PIL import Image, UnidentifiedImageError

from .. import config
from ..exceptions import ImageFormatError
from ..models import Dimensions, FileMetadata

# path -> dimensions, raising on unreadable headers
ImageReader = Callable[[str], Dimensions]


def read_dimensions(path: str) -> Dimensions:
    """
    Reads width, height and format from the image header with Pillow.
    Image.open is lazy, so pixel data is never decoded.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
            fmt = img.format or ''
    except (UnidentifiedImageError, OSError) as e:
        logging.warning(f"Could not read image header for {path}: {e}")
        raise ImageFormatError(f"Cannot read image header: {path}") from e

    return Dimensions(
        width=width,
        height=height,
        type=config.PIL_FORMAT_TO_TYPE.get(fmt, fmt.lower()),
    )


def add_image_info(record: FileMetadata, reader: Optional[ImageReader] = None) -> FileMetadata:
    """
    Adds `dimmensions` when the record's mime type is a supported image.

    Needs add_mime_type_info to have run first; without a mime type the
    record is returned untouched (the same object).
    """
    if not record.mime_type or record.mime_type not in config.IMAGE_FORMATS:
        return record
    dims = (reader or read_dimensions)(record.absolute_path)
    logging.debug(f"Image {record.absolute_path}: {dims.width}x{dims.height} {dims.type}")
    return record.with_fields(dimmensions=dims)
