import pytest

from shared.utils.blob_storage import LocalBlobStorage


def test_delete_existing_and_missing(tmp_path):
    storage = LocalBlobStorage(str(tmp_path))
    (tmp_path / "a.txt").write_text("x")

    assert storage.delete("a.txt") is True
    assert storage.delete("a.txt") is False


def test_leading_slash_stays_inside_root(tmp_path):
    storage = LocalBlobStorage(str(tmp_path))
    assert storage.resolve("/docs/a.pdf") == str(tmp_path / "docs" / "a.pdf")


def test_escaping_path_is_refused(tmp_path):
    storage = LocalBlobStorage(str(tmp_path))
    with pytest.raises(ValueError):
        storage.resolve("../outside.txt")
