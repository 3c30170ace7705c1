# PIP3 modules
import pytest

# local repo modules
from text_on_image_tool import InvalidConfig, Settings, load_settings, save_settings
from text_on_image_tool.models import TextJustify, VerticalAnchor


#============================================
def test_missing_file_gives_defaults(tmp_path) -> None:
    settings = load_settings(str(tmp_path / "missing.ini"))
    assert settings.font_size == 18
    assert settings.wrap_width is None
    assert load_settings(None).justify == "center"


#============================================
def test_save_and_load(tmp_path) -> None:
    path = str(tmp_path / "settings.ini")
    settings = Settings()
    settings.justify = "left"
    settings.anchor = "bottom"
    settings.wrap_width = 250
    settings.font_size = 40
    settings.line_spacing = 2.5
    settings.color = (0, 255, 0)
    save_settings(settings, path)

    loaded = load_settings(path)
    assert loaded.justify == "left"
    assert loaded.anchor == "bottom"
    assert loaded.wrap_width == 250
    assert loaded.font_size == 40
    assert loaded.line_spacing == 2.5
    assert loaded.line_height is None
    assert loaded.color == (0, 255, 0)

    config = loaded.layout_config()
    assert config.justify is TextJustify.LEFT
    assert config.anchor is VerticalAnchor.BOTTOM
    assert config.wrap_width == 250


#============================================
def test_malformed_values_keep_defaults(tmp_path) -> None:
    path = tmp_path / "settings.ini"
    path.write_text(
        "[layout]\n"
        "font_size = big\n"
        "wrap_width = none\n"
        "line_spacing =\n"
        "[render]\n"
        "color_r = red\n"
        "color_g = 0\n"
        "color_b = 0\n",
        encoding="utf-8",
    )
    settings = load_settings(str(path))
    assert settings.font_size == 18
    assert settings.wrap_width is None
    assert settings.line_spacing == 0
    assert settings.color == (0, 0, 0)


#============================================
def test_layout_config_validation(tmp_path) -> None:
    path = tmp_path / "settings.ini"
    path.write_text("[layout]\nwrap_width = 0\n", encoding="utf-8")
    with pytest.raises(InvalidConfig):
        load_settings(str(path)).layout_config()

    path.write_text("[layout]\nfont_size = 0\n", encoding="utf-8")
    settings = load_settings(str(path))
    with pytest.raises(InvalidConfig):
        settings.layout_config()
    assert settings.layout_config(validate=False).font_size == 0


#============================================
def test_unknown_layout_choices_fall_back(tmp_path) -> None:
    """
    Unknown justify or anchor names keep the defaults instead of failing later.
    """
    path = tmp_path / "settings.ini"
    path.write_text("[layout]\njustify = middle\nanchor = sideways\nwrap_width = 80\n", encoding="utf-8")
    settings = load_settings(str(path))
    assert settings.justify == "center"
    assert settings.anchor == "center"
    assert settings.wrap_width == 80
    config = settings.layout_config()
    assert config.justify.value == "center"
    assert config.anchor.value == "center"
