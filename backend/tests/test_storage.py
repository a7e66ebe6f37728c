"""
Tests unitaires du stockage local et des fichiers en attente de commit.
"""
import pytest

from tourcms.services.storage import LocalStorage, remove_quietly
from tourcms.services.uploads import ImageUpload, StagedFiles, generate_filename
from tourcms.utils.text import slugify


def test_put_exists_delete(tmp_path):
    storage = LocalStorage(tmp_path)
    storage.put("states/a.png", b"data")
    assert storage.exists("states/a.png")
    assert (tmp_path / "states" / "a.png").read_bytes() == b"data"

    assert storage.delete("states/a.png") is True
    assert storage.delete("states/a.png") is False
    assert not storage.exists("states/a.png")


def test_key_cannot_escape_root(tmp_path):
    storage = LocalStorage(tmp_path / "uploads")
    with pytest.raises(ValueError):
        storage.put("../outside.png", b"x")


def test_url_is_under_uploads(tmp_path):
    assert LocalStorage(tmp_path).url("wildlife/x.jpg") == "/uploads/wildlife/x.jpg"


def test_remove_quietly_logs_failures(caplog):
    class Broken(LocalStorage):
        def delete(self, key):
            raise PermissionError("denied")

    storage = Broken.__new__(Broken)
    with caplog.at_level("WARNING"):
        assert remove_quietly(storage, ["cultures/a.png"]) == 0
    assert "Could not remove file cultures/a.png" in caplog.text


def test_staged_files_discard(tmp_path):
    storage = LocalStorage(tmp_path)
    staged = StagedFiles(storage)
    upload = ImageUpload(field="images", original_name="a.png", content_type="image/png", extension=".png", data=b"x")
    first = staged.write("seasons", upload)
    second = staged.write("seasons", upload)
    assert first != second
    assert storage.exists(f"seasons/{first}")

    staged.discard()
    assert not storage.exists(f"seasons/{first}")
    assert not storage.exists(f"seasons/{second}")
    assert staged.keys == []


def test_generated_filename_shape():
    name = generate_filename("gallery_images", ".webp")
    prefix, millis, rand = name[: -len(".webp")].rsplit("-", 2)
    assert prefix == "gallery_images"
    assert millis.isdigit() and rand.isdigit()
    assert name.endswith(".webp")


@pytest.mark.parametrize("title,expected", [
    ("Ladakh", "ladakh"),
    ("Leh & Ladakh (UT)", "leh-ladakh-ut"),
    ("Śrī Hemkund Sahib", "sri-hemkund-sahib"),
    ("  ", None),
])
def test_slugify(title, expected):
    assert slugify(title) == expected
