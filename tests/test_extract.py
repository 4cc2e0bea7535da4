import asyncio
import os
import pytest
from pathlib import Path
from types import SimpleNamespace
from datetime import datetime
from file_info.exceptions import FileAccessError, InvalidPathError, NotFoundError
from file_info.metadata import extract as extract_module
from file_info.metadata.extract import extract_async, extract_blocking
from file_info.models import FileMetadata

def test_extract_blocking_reads_stats(text_file):
    rec = extract_blocking(str(text_file))

    assert isinstance(rec, FileMetadata)
    assert rec.absolute_path == str(text_file)
    assert rec.size == 574
    assert rec.date_created
    assert rec.date_changed

def test_extract_async_reads_stats(text_file):
    rec = asyncio.run(extract_async(str(text_file)))

    assert rec.absolute_path == str(text_file)
    assert rec.size == 574

def test_sync_and_async_agree(text_file):
    sync_rec = extract_blocking(text_file)
    async_rec = asyncio.run(extract_async(text_file))
    assert sync_rec == async_rec

def test_timestamps_are_iso_utc(text_file):
    os.utime(text_file, (1484046600, 1484046600))
    rec = extract_blocking(text_file)

    assert rec.date_changed == "2017-01-10T11:10:00.000Z"
    # Parses back as an aware datetime
    assert datetime.fromisoformat(rec.date_created).tzinfo is not None

def test_no_enrichment_fields_after_extraction(text_file):
    data = extract_blocking(text_file).to_dict()
    assert set(data) == {"absolutePath", "size", "dateCreated", "dateChanged"}

@pytest.mark.parametrize("bad", [None, "", Path("")])
def test_invalid_path_blocking(bad, monkeypatch):
    # Must fail before touching the filesystem
    def boom(*args, **kwargs):
        raise AssertionError("stat should not be called")
    monkeypatch.setattr(extract_module, "os", SimpleNamespace(stat=boom))

    with pytest.raises(InvalidPathError, match="Please provide a valid filepath"):
        extract_blocking(bad)

@pytest.mark.parametrize("bad", [None, "", Path("")])
def test_invalid_path_async(bad):
    with pytest.raises(InvalidPathError, match="Please provide a valid filepath"):
        asyncio.run(extract_async(bad))

def test_missing_file_blocking(tmp_path):
    with pytest.raises(NotFoundError) as exc:
        extract_blocking(tmp_path / "notfound.txt")
    assert isinstance(exc.value.__cause__, FileNotFoundError)

def test_missing_file_async(tmp_path):
    with pytest.raises(NotFoundError):
        asyncio.run(extract_async(tmp_path / "notfound.txt"))

def test_other_stat_errors_are_access_errors(monkeypatch, tmp_path):
    def denied(path, *args, **kwargs):
        raise PermissionError(13, "Permission denied", path)
    monkeypatch.setattr(extract_module, "os", SimpleNamespace(stat=denied))

    with pytest.raises(FileAccessError):
        extract_blocking(tmp_path / "locked.txt")
