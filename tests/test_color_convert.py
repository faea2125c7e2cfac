import numpy as np
import pytest

from pixbridge.pixels.color_convert import from_canonical, to_canonical


def _u8(values):
    return np.asarray(values, dtype=np.uint8)


def test_to_canonical_rgb8_is_exact():
    px = _u8([[10, 20, 30], [0, 128, 255]])
    out = to_canonical(px, "rgb8")
    assert out.dtype == np.uint8
    assert out.tolist() == [[10, 20, 30], [0, 128, 255]]


def test_to_canonical_reorders_bgr():
    assert to_canonical(_u8([30, 20, 10]), "bgr8").tolist() == [10, 20, 30]


def test_to_canonical_alpha_synthesized_for_formats_without_alpha():
    assert to_canonical(_u8([1, 2, 3]), "rgb8", alpha=True).tolist() == [1, 2, 3, 255]


def test_to_canonical_alpha_kept_or_dropped():
    px = _u8([1, 2, 3, 4])
    assert to_canonical(px, "rgba8", alpha=True).tolist() == [1, 2, 3, 4]
    assert to_canonical(px, "rgba8").tolist() == [1, 2, 3]
    assert to_canonical(_u8([4, 1, 2, 3]), "argb8", alpha=True).tolist() == [1, 2, 3, 4]


def test_to_canonical_gray_replicates_luminance():
    assert to_canonical(_u8([100]), "gray8").tolist() == [100, 100, 100]
    assert to_canonical(_u8([100, 7]), "graya8", alpha=True).tolist() == [100, 100, 100, 7]


def test_to_canonical_scales_16_bit():
    px = np.asarray([65535, 32896, 0], dtype=np.uint16)
    assert to_canonical(px, "rgb16").tolist() == [255, 128, 0]


def test_to_canonical_scales_and_clips_float():
    px = np.asarray([0.5, -1.0, 2.0], dtype=np.float32)
    assert to_canonical(px, "rgb32f").tolist() == [128, 0, 255]


def test_to_canonical_cmyk():
    assert to_canonical(_u8([0, 255, 255, 0]), "cmyk8").tolist() == [255, 0, 0]
    assert to_canonical(_u8([0, 0, 0, 255]), "cmyk8").tolist() == [0, 0, 0]


def test_to_canonical_rejects_wrong_channel_count():
    with pytest.raises(ValueError, match="channels"):
        to_canonical(_u8([1, 2, 3]), "rgba8")


def test_from_canonical_reorders_and_drops_alpha():
    can = _u8([10, 20, 30, 40])
    assert from_canonical(can, "bgra8").tolist() == [30, 20, 10, 40]
    assert from_canonical(can, "bgr8").tolist() == [30, 20, 10]


def test_from_canonical_rgb_input_is_opaque():
    assert from_canonical(_u8([10, 20, 30]), "abgr8").tolist() == [255, 30, 20, 10]


def test_from_canonical_padding_channel_is_full_scale():
    assert from_canonical(_u8([1, 2, 3]), "rgbx8").tolist() == [1, 2, 3, 255]


def test_from_canonical_gray_uses_luminance():
    assert from_canonical(_u8([100, 100, 100]), "gray8").tolist() == [100]
    assert from_canonical(_u8([0, 0, 0]), "gray16").tolist() == [0]
    assert from_canonical(_u8([255, 255, 255]), "gray16").tolist() == [65535]


def test_from_canonical_scales_16_bit_exactly():
    out = from_canonical(_u8([255, 128, 0]), "rgb16")
    assert out.dtype == np.uint16
    assert out.tolist() == [65535, 32896, 0]


def test_from_canonical_float():
    out = from_canonical(_u8([255, 0, 51]), "rgb32f")
    assert out.dtype == np.float32
    assert np.allclose(out, [1.0, 0.0, 0.2])


def test_from_canonical_cmyk():
    assert from_canonical(_u8([255, 0, 0]), "cmyk8").tolist() == [0, 255, 255, 0]
    assert from_canonical(_u8([0, 0, 0]), "cmyk8").tolist() == [0, 0, 0, 255]
    assert from_canonical(_u8([255, 255, 255]), "cmyk8").tolist() == [0, 0, 0, 0]


def test_from_canonical_keeps_leading_shape():
    can = np.zeros((2, 5, 4), dtype=np.uint8)
    assert from_canonical(can, "gray8").shape == (2, 5, 1)


def test_from_canonical_rejects_bad_shape():
    with pytest.raises(ValueError, match="canonical"):
        from_canonical(_u8([1, 2]), "rgb8")


def test_to_canonical_float_nan_and_inf():
    px = np.array([[np.nan, 0.5, 1.0], [np.inf, -np.inf, 0.0]], dtype=np.float32)
    assert to_canonical(px, "rgb32f").tolist() == [[0, 128, 255], [255, 0, 0]]
