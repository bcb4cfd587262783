import pytest

from slimage.display import image_to_ppm
from slimage.image import SLImage, create_empty_image


def test_ppm_header_and_pixels():
    image = SLImage("x.slmg", 2, 1, [0x00112233, 0xFFAABBCC])
    ppm = image_to_ppm(image)
    assert ppm.startswith(b"P6\n2 1\n255\n")
    assert ppm[len(b"P6\n2 1\n255\n"):] == bytes((0x11, 0x22, 0x33, 0xAA, 0xBB, 0xCC))


def test_ppm_length_matches_dimensions():
    image = create_empty_image(7, 5)
    ppm = image_to_ppm(image)
    header = b"P6\n7 5\n255\n"
    assert ppm[: len(header)] == header
    assert len(ppm) == len(header) + 3 * 7 * 5


def test_ppm_white_image_is_all_ff():
    image = create_empty_image(3, 3)
    ppm = image_to_ppm(image)
    body = ppm[len(b"P6\n3 3\n255\n"):]
    assert set(body) == {0xFF}


def test_ppm_rejects_missing_pixels():
    image = SLImage("x.slmg", 2, 2, [1, 2, 3])
    with pytest.raises(ValueError):
        image_to_ppm(image)


def test_ppm_empty_image():
    image = SLImage("x.slmg", 0, 0, [])
    assert image_to_ppm(image) == b"P6\n0 0\n255\n"