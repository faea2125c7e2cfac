"""
Quick Start Example for pixbridge.

Builds a small ARGB32 bitmap, converts it into a few generic pixel formats and
back, and prints what survives each round trip.
"""

import numpy as np

from pixbridge import GenericImage, PackedBitmap, bitmap_to_generic_image, generic_view_to_bitmap
from pixbridge.codec import q_rgba


def main():
    """Run quick start example."""
    print("=" * 60)
    print("pixbridge Quick Start Example")
    print("=" * 60 + "\n")

    bitmap = PackedBitmap(4, 2, "argb32")
    for x in range(4):
        bitmap.set_pixel(x, 0, q_rgba(255, x * 60, 0, 255))
        bitmap.set_pixel(x, 1, q_rgba(0, 0, 255, x * 80))

    for name in ("rgba8", "bgr8", "rgba16", "gray8", "cmyk8"):
        image = GenericImage(fmt=name)
        bitmap_to_generic_image(bitmap, image)
        back = generic_view_to_bitmap(image.view())

        same = np.array_equal(back.data, bitmap.data)
        print(f"{name:<8} array {image.array.shape} {image.array.dtype}  ->  {back.format.value:<7} lossless={same}")


if __name__ == "__main__":
    main()
