# PIP3 modules
import pytest
from PIL import ImageFont

# local repo modules
from text_on_image_tool import FontError, FontMetrics, MonospaceMetrics, PillowFontMetrics


#============================================
def test_monospace_metrics() -> None:
    metrics = MonospaceMetrics(advance_ratio=0.5, height_ratio=1.2)
    assert metrics.advance_width("W", 20) == 10
    assert metrics.text_width("HELLO", 20) == 50
    assert metrics.text_width("", 20) == 0
    assert metrics.line_height(20) == pytest.approx(24)


#============================================
def test_monospace_rejects_bad_ratios() -> None:
    with pytest.raises(ValueError):
        MonospaceMetrics(advance_ratio=0)


#============================================
def test_base_text_width_sums_advances() -> None:
    class TableMetrics(FontMetrics):
        widths = {"i": 2, "m": 9, " ": 3}

        def advance_width(self, char, size):
            return self.widths[char] * size

        def line_height(self, size):
            return size

    metrics = TableMetrics()
    assert metrics.text_width("mi mi", 2) == 50
    assert metrics.narrowest_width("mi mi", 1) == 2
    assert metrics.narrowest_width("   ", 1) is None


#============================================
def test_pillow_default_font_measures_text() -> None:
    metrics = PillowFontMetrics()
    short = metrics.text_width("HELLO", 20)
    long = metrics.text_width("HELLO WORLD", 20)
    assert 0 < short < long
    assert metrics.text_width("", 20) == 0
    assert metrics.line_height(20) > 0
    assert metrics.text_width("HELLO", 40) > short


#============================================
def test_pillow_metrics_cache_font_variants() -> None:
    metrics = PillowFontMetrics(ImageFont.load_default(size=12))
    assert metrics.font_for_size(30) is metrics.font_for_size(30)
    assert metrics.font_for_size(30) is not metrics.font_for_size(31)
    assert "30" in repr(metrics)


#============================================
def test_pillow_metrics_narrowest_width() -> None:
    metrics = PillowFontMetrics()
    narrowest = metrics.narrowest_width("iW", 20)
    assert narrowest == pytest.approx(metrics.advance_width("i", 20))
    assert narrowest < metrics.advance_width("W", 20)


#============================================
def test_pillow_metrics_missing_font_file(tmp_path) -> None:
    with pytest.raises(FontError):
        PillowFontMetrics(str(tmp_path / "missing.ttf"))


#============================================
def test_pillow_metrics_unreadable_font_file(tmp_path) -> None:
    bogus = tmp_path / "bogus.ttf"
    bogus.write_bytes(b"not a font")
    metrics = PillowFontMetrics(str(bogus))
    with pytest.raises(FontError):
        metrics.text_width("HELLO", 12)
