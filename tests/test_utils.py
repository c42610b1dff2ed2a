import pytest
from PIL import Image, UnidentifiedImageError

from papercut.utils import get_basename, get_columns_rows, open_images


def test_get_columns_rows_valid_filenames():
    filenames = [
        "tile_01_01.png",
        "tile_01_02.png",
        "tile_02_01.png",
        "tile_02_02.png",
    ]
    assert get_columns_rows(filenames) == (2, 2)


def test_get_columns_rows_missing_parts():
    filenames = ["tile_01_01.png", "tile_01.png", "tile_02_01.png"]
    num_columns, num_rows = get_columns_rows(filenames)
    assert num_columns == 1
    assert num_rows == 2


def test_get_columns_rows_empty_filenames():
    assert get_columns_rows([]) == (0, 0)


def test_get_columns_rows_ignores_non_numeric():
    assert get_columns_rows(["photo.png", "tile_ab_cd.png"]) == (0, 0)


def test_open_images_valid_directory(tmp_path):
    Image.new("RGB", (100, 100)).save(tmp_path / "image1.png")
    Image.new("RGB", (200, 200)).save(tmp_path / "image2.png")

    images = open_images(tmp_path)

    assert len(images) == 2
    assert sorted(img.size for img in images) == [(100, 100), (200, 200)]


def test_open_images_skips_subdirectories(tmp_path):
    Image.new("RGB", (10, 10)).save(tmp_path / "image1.png")
    (tmp_path / "nested").mkdir()
    assert len(open_images(tmp_path)) == 1


def test_open_images_invalid_directory(tmp_path):
    with pytest.raises(OSError):
        open_images(tmp_path / "non_existent_directory")


def test_open_images_rejects_non_image(tmp_path):
    (tmp_path / "notes.txt").write_text("not an image")
    with pytest.raises(UnidentifiedImageError):
        open_images(tmp_path)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("/path/to/image.png", "image"),
        ("image.jpeg", "image"),
        ("/path/to/image", "image"),
        ("/path/to/.hiddenfile", ".hiddenfile"),
        ("", ""),
    ],
)
def test_get_basename(filename, expected):
    assert get_basename(filename) == expected