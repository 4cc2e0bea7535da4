import pytest
from PIL import Image
from file_info.models import FileMetadata

FIXTURE_SIZE = 574

@pytest.fixture
def text_file(tmp_path):
    """A plain text file of exactly 574 bytes, repetitive enough to compress well."""
    p = tmp_path / "fixture.txt"
    line = b"The quick brown fox jumps over the lazy dog.\n"
    data = (line * (FIXTURE_SIZE // len(line) + 1))[:FIXTURE_SIZE]
    p.write_bytes(data)
    return p

@pytest.fixture
def jpeg_file(tmp_path):
    """A 640x640 JPEG generated on the fly."""
    p = tmp_path / "fixture.jpg"
    Image.new("RGB", (640, 640), color=(200, 30, 30)).save(p, format="JPEG")
    return p

@pytest.fixture
def make_record():
    """Factory for records with sensible defaults for the extraction fields."""
    def _make(**overrides):
        fields = dict(
            absolute_path="/tmp/none.txt",
            size=0,
            date_created="2017-01-10T11:08:48.000Z",
            date_changed="2017-01-10T11:10:00.000Z",
        )
        fields.update(overrides)
        return FileMetadata(**fields)
    return _make
