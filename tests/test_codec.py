import numpy as np
import pytest

from pixbridge.codec import (
    decode_rgb,
    decode_rgba,
    encode_rgb,
    encode_rgba,
    packed_rgb_to_pixel,
    packed_rgba_to_pixel,
    pixel_to_packed_rgb,
    pixel_to_packed_rgba,
    q_alpha,
    q_blue,
    q_green,
    q_red,
    q_rgb,
    q_rgba,
)


def test_channel_helpers():
    value = q_rgba(0x11, 0x22, 0x33, 0x44)
    assert value == 0x44112233
    assert (q_red(value), q_green(value), q_blue(value), q_alpha(value)) == (0x11, 0x22, 0x33, 0x44)
    assert q_rgb(1, 2, 3) == 0xFF010203


def test_channel_helpers_mask_out_of_range_input():
    assert q_rgba(0x1FF, 0, 0, 0x100) == 0x00FF0000


def test_decode_single_value():
    assert decode_rgb(0x80FF0010).tolist() == [255, 0, 16]
    assert decode_rgba(0x80FF0010).tolist() == [255, 0, 16, 128]


def test_decode_rows():
    packed = np.asarray([[0xFF010203, 0x00040506]], dtype=np.uint32)
    out = decode_rgba(packed)
    assert out.shape == (1, 2, 4)
    assert out.dtype == np.uint8
    assert out[0, 1].tolist() == [4, 5, 6, 0]


def test_encode_rgb_forces_opaque():
    assert int(encode_rgb(np.asarray([1, 2, 3], dtype=np.uint8))) == 0xFF010203
    assert int(encode_rgb(np.asarray([1, 2, 3, 4], dtype=np.uint8))) == 0xFF010203


def test_encode_rgba_carries_alpha():
    assert int(encode_rgba(np.asarray([1, 2, 3, 4], dtype=np.uint8))) == 0x04010203
    assert int(encode_rgba(np.asarray([1, 2, 3], dtype=np.uint8))) == 0xFF010203


def test_encode_row_dtype():
    row = np.asarray([[255, 255, 255, 255], [0, 0, 0, 0]], dtype=np.uint8)
    out = encode_rgba(row)
    assert out.dtype == np.uint32
    assert out.tolist() == [0xFFFFFFFF, 0]


def test_encode_rejects_bad_shape():
    with pytest.raises(ValueError, match="canonical"):
        encode_rgb(np.zeros(2, dtype=np.uint8))


def test_packed_to_pixel_helpers():
    assert packed_rgba_to_pixel(0x80FF0000, "bgra8").tolist() == [0, 0, 255, 128]
    assert packed_rgb_to_pixel(0x80FF0000, "rgba8").tolist() == [255, 0, 0, 255]
    assert packed_rgba_to_pixel(0x80FF0000, "rgb8").tolist() == [255, 0, 0]


def test_pixel_to_packed_helpers():
    bgra = np.asarray([0, 0, 255, 128], dtype=np.uint8)
    assert pixel_to_packed_rgb(bgra, "bgra8") == 0xFFFF0000
    assert pixel_to_packed_rgba(bgra, "bgra8") == 0x80FF0000

    rgb = np.asarray([10, 20, 30], dtype=np.uint8)
    packed = pixel_to_packed_rgba(rgb, "rgb8")
    assert isinstance(packed, int)
    assert packed == 0xFF0A141E


def test_pixel_to_packed_accepts_other_depths():
    px = np.asarray([65535, 0, 0, 0], dtype=np.uint16)
    assert pixel_to_packed_rgba(px, "rgba16") == 0x00FF0000
