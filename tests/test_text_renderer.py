# PIP3 modules
import numpy as np
import pytest
from PIL import Image, ImageChops

# local repo modules
from text_on_image_tool import (
    AnchorBox,
    FontBundle,
    InvalidConfig,
    LayoutConfig,
    RenderingError,
    load_font,
    text_on_array,
    text_on_image,
    text_on_image_draw_debug,
)

WHITE = (255, 255, 255)


#============================================
def _changed_bbox(before, after):
    return ImageChops.difference(before.convert("RGB"), after.convert("RGB")).getbbox()


#============================================
def test_text_on_image_draws_inside_lines() -> None:
    """
    Pixels change only around the placed lines.
    """
    image = Image.new("RGB", (240, 120), WHITE)
    before = image.copy()
    bundle = FontBundle(size=20, color=(0, 0, 0))
    config = LayoutConfig(justify="left", anchor="top", font_size=20)
    lines = text_on_image(image, "HELLO\nWORLD", bundle, AnchorBox(10, 10, 200, 100), config)

    assert [line.text for line in lines] == ["HELLO", "WORLD"]
    bbox = _changed_bbox(before, image)
    assert bbox is not None
    assert bbox[0] >= 10 - 2
    assert bbox[1] >= 10 - 2
    assert bbox[2] <= max(line.right for line in lines) + 3
    assert bbox[3] <= lines[-1].bottom + 3


#============================================
def test_text_on_image_defaults_to_bundle_size() -> None:
    image = Image.new("RGB", (200, 100), WHITE)
    bundle = FontBundle(size=16)
    lines = text_on_image(image, "centered", bundle, AnchorBox(0, 0, 200, 100))
    assert len(lines) == 1
    assert lines[0].height == bundle.metrics().line_height(16)
    assert abs(lines[0].x - (200 - lines[0].width) / 2) <= 1


#============================================
def test_empty_text_leaves_image_untouched() -> None:
    image = Image.new("RGB", (50, 50), WHITE)
    before = image.copy()
    assert text_on_image(image, "", FontBundle(size=12), AnchorBox(0, 0, 50, 50)) == []
    assert _changed_bbox(before, image) is None


#============================================
def test_wrapped_text_on_image() -> None:
    image = Image.new("RGBA", (300, 300), (255, 255, 255, 255))
    bundle = FontBundle(size=24, color=(0, 255, 0, 255))
    config = LayoutConfig(wrap_width=120, font_size=24)
    lines = text_on_image(image, "This is Line 1\nThisislinewithextralong 2", bundle,
                          AnchorBox.from_point(150, 150), config)
    assert len(lines) >= 3
    assert "Thisislinewithextralong" in [line.text for line in lines]


#============================================
def test_debug_draw_marks_anchor_box() -> None:
    image = Image.new("RGB", (200, 100), WHITE)
    bundle = FontBundle(size=12)
    text_on_image_draw_debug(image, "HI", bundle, AnchorBox(10, 10, 180, 80))
    assert image.getpixel((10, 10)) == (255, 0, 0)
    assert image.getpixel((12, 10)) == (255, 0, 0)
    assert image.getpixel((100, 90)) == (255, 0, 0)


#============================================
def test_debug_draw_validates_before_drawing() -> None:
    image = Image.new("RGB", (50, 50), WHITE)
    before = image.copy()
    with pytest.raises(InvalidConfig):
        text_on_image_draw_debug(image, "HI", FontBundle(size=12), AnchorBox(5, 5, 40, 40),
                                 LayoutConfig(wrap_width=0))
    assert _changed_bbox(before, image) is None


#============================================
def test_debug_draw_leaves_image_untouched_on_narrow_wrap() -> None:
    """
    No box outline or cross is drawn when wrapping cannot fit a character.
    """
    image = Image.new("RGB", (100, 100), WHITE)
    before = image.copy()
    with pytest.raises(InvalidConfig):
        text_on_image_draw_debug(image, "HELLO", FontBundle(size=20), AnchorBox(10, 10, 50, 50),
                                 LayoutConfig(font_size=20, wrap_width=1))
    assert _changed_bbox(before, image) is None


#============================================
def test_text_on_bgr_array() -> None:
    """
    Red text (RGB) lands in the red channel of a BGR buffer.
    """
    array = np.full((100, 200, 3), 255, dtype=np.uint8)
    bundle = FontBundle(size=30, color=(255, 0, 0))
    lines = text_on_array(array, "RED", bundle, AnchorBox(0, 0, 200, 100))
    assert len(lines) == 1
    reddish = (array[:, :, 0] < 128) & (array[:, :, 1] < 128) & (array[:, :, 2] > 200)
    assert reddish.any()


#============================================
def test_text_on_bgra_and_gray_arrays() -> None:
    bgra = np.zeros((60, 120, 4), dtype=np.uint8)
    bgra[:, :, 3] = 255
    text_on_array(bgra, "Hi", FontBundle(size=24, color=(255, 255, 255)), AnchorBox(0, 0, 120, 60))
    assert bgra[:, :, :3].max() > 0

    gray = np.full((60, 120), 255, dtype=np.uint8)
    text_on_array(gray, "Hi", FontBundle(size=24), AnchorBox(0, 0, 120, 60), debug=True)
    assert gray.min() < 128
    assert gray.shape == (60, 120)


#============================================
def test_text_on_array_rejects_non_arrays() -> None:
    with pytest.raises(RenderingError):
        text_on_array([[0, 0], [0, 0]], "x", FontBundle(size=10), AnchorBox(0, 0, 2, 2))
    with pytest.raises(RenderingError):
        text_on_array(np.zeros((4, 4, 2), dtype=np.uint8), "x", FontBundle(size=10), AnchorBox(0, 0, 4, 4))
    with pytest.raises(RenderingError):
        text_on_array(np.zeros((4, 4, 3), dtype=np.float32), "x", FontBundle(size=10), AnchorBox(0, 0, 4, 4))


#============================================
def test_load_font_falls_back_without_raising() -> None:
    font = load_font("No Such Font Family", 18, custom_fonts={"No Such Font Family": "missing.ttf"})
    assert font.getlength("HELLO") > 0


#============================================
def test_load_font_from_path(tmp_path) -> None:
    assert load_font(str(tmp_path / "missing.ttf"), 18).getlength("A") > 0
