import numpy as np

from pixbridge.alpha import bitmap_has_alpha, pixel_format_has_alpha
from pixbridge.bitmap import BitmapFormat, PackedBitmap
from pixbridge.image import GenericImage, GenericImageView
from pixbridge.pixels.formats import get_pixel_format


def test_bitmap_alpha_is_runtime_property_of_the_bitmap():
    assert bitmap_has_alpha(PackedBitmap(1, 1, BitmapFormat.ARGB32)) is True
    assert bitmap_has_alpha(PackedBitmap(1, 1, BitmapFormat.RGB32)) is False


def test_pixel_format_alpha_by_name_and_format():
    assert pixel_format_has_alpha("bgra8") is True
    assert pixel_format_has_alpha(get_pixel_format("graya16")) is True
    assert pixel_format_has_alpha("rgbx8") is False
    assert pixel_format_has_alpha("cmyk8") is False


def test_pixel_format_alpha_ignores_pixel_values():
    # fully opaque contents do not change the static classification
    image = GenericImage(1, 1, "rgba8")
    image.array[:] = 255
    assert pixel_format_has_alpha(image) is True

    view = GenericImageView(np.zeros((1, 1, 3), dtype=np.uint8), "rgb8")
    assert pixel_format_has_alpha(view) is False
