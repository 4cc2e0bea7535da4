"""
Configuration constants for file info.
"""

# --- Size Scaling ---
KIBIBYTE_BASE = 1024
SI_BASE = 1000

# Nine tiers each: bytes up to yotta/yobi
KIBIBYTE_SUFFIXES = ('bytes', 'KiB', 'MiB', 'GiB', 'TiB', 'PiB', 'EiB', 'ZiB', 'YiB')
SI_SUFFIXES = ('bytes', 'kB', 'MB', 'GB', 'TB', 'PB', 'EB', 'ZB', 'YB')

ZERO_BYTES = "0 bytes"
ONE_BYTE = "1 byte"

# --- Mime Types ---
# Extensions the stock mime table gets wrong (it maps .ts to MPEG transport streams)
TYPESCRIPT_MIME = 'text/typescript'
TYPESCRIPT_EXTS = {'ts', 'tsx'}

# Registered on top of the stock table, which lacks them on older Pythons
EXTRA_MIME_TYPES = {
    '.webp': 'image/webp',
    '.psd': 'image/vnd.adobe.photoshop',
}

# Only these get their header read for dimensions
IMAGE_FORMATS = {
    'image/bmp',
    'image/jpeg',
    'image/png',
    'image/gif',
    'image/tiff',
    'image/x-tiff',
    'image/webp',
    'image/vnd.adobe.photoshop',
}

# Pillow format name -> short type reported in dimensions
PIL_FORMAT_TO_TYPE = {
    'BMP': 'bmp',
    'DIB': 'bmp',
    'JPEG': 'jpg',
    'MPO': 'jpg',
    'PNG': 'png',
    'GIF': 'gif',
    'TIFF': 'tiff',
    'WEBP': 'webp',
    'PSD': 'psd',
}

# --- Dates ---
FORMAT_24_HOUR = "%H:%M:%S"
DATE_PATTERN = "{month} {day}{suffix} {year}, {time}"

# --- Compression ---
# gzip-size measures at maximum compression
GZIP_LEVEL = 9
