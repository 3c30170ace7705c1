"""
INI settings for text on image tool
텍스트 이미지 툴 INI 설정

Example / 예시:

    [layout]
    justify = left
    anchor = top
    wrap_width = 250
    font_size = 40
    line_spacing = 4

    [render]
    font_family = DejaVu Sans
    color_r = 0
    color_g = 255
    color_b = 0
    log_level = WARNING
    log_file = text_on_image.log
"""

import configparser
import os

from .exceptions import InvalidConfig
from .logger import logger


class Settings:
    """
    Default layout and render settings
    기본 배치 및 렌더링 설정
    """

    def __init__(self):
        """Initialize with built-in defaults / 기본값으로 초기화"""
        # 배치 설정 / Layout settings
        self.justify = "center"
        self.anchor = "center"
        self.wrap_width = None
        self.font_size = 18
        self.line_spacing = 0
        self.line_height = None
        # 렌더링 설정 / Render settings
        self.font_family = "DejaVu Sans"
        self.color = (0, 0, 0)  # RGB
        self.log_level = "WARNING"
        self.log_file = "text_on_image.log"

    def layout_config(self, validate=True):
        """
        Build a LayoutConfig from these settings
        이 설정으로 LayoutConfig 생성

        Args / 인자:
            validate (bool): Validate before returning; pass False to apply
                             overrides first / 반환 전 검증 여부

        Raises / 예외:
            InvalidConfig: Settings describe an impossible layout / 잘못된 배치 설정
        """
        from ..models import LayoutConfig

        config = LayoutConfig(
            justify=self.justify,
            anchor=self.anchor,
            wrap_width=self.wrap_width,
            font_size=self.font_size,
            line_spacing=self.line_spacing,
            line_height=self.line_height,
        )
        return config.validate() if validate else config


def _number(value):
    number = float(value)
    return int(number) if number.is_integer() else number


def _read_number(section, key, cast, current):
    value = section.get(key)
    if value is None or value.strip() == "":
        return current
    if value.strip().lower() == "none":
        return None
    try:
        return cast(value)
    except ValueError:
        logger.warning(f"INI 설정 값 오류: {key}={value!r}, 기본값 {current!r} 사용")
        return current


def _read_choice(section, key, choice, current):
    value = section.get(key)
    if value is None or value.strip() == "":
        return current
    try:
        return choice.from_string(value).value
    except InvalidConfig as e:
        logger.warning(f"INI 설정 값 오류: {e}, 기본값 {current!r} 사용")
        return current


def load_settings(path):
    """
    Load settings from an INI file
    INI 설정 파일에서 설정 로드

    Missing files, sections or keys keep their defaults; malformed values are
    logged and ignored.
    파일, 섹션, 키가 없으면 기본값을 유지하고, 잘못된 값은 기록 후 무시합니다.

    Args / 인자:
        path (str): INI file path / INI 파일 경로

    Returns / 반환값:
        Settings: Loaded settings / 로드된 설정
    """
    settings = Settings()
    if not path or not os.path.exists(path):
        return settings

    config = configparser.ConfigParser()
    try:
        config.read(path, encoding="utf-8")
    except configparser.Error as e:
        logger.error(f"INI 설정 로드 오류: {e}")
        return settings

    if "layout" in config:
        from ..models import TextJustify, VerticalAnchor

        section = config["layout"]
        settings.justify = _read_choice(section, "justify", TextJustify, settings.justify)
        settings.anchor = _read_choice(section, "anchor", VerticalAnchor, settings.anchor)
        settings.wrap_width = _read_number(section, "wrap_width", _number, settings.wrap_width)
        settings.font_size = _read_number(section, "font_size", _number, settings.font_size)
        settings.line_spacing = _read_number(section, "line_spacing", _number, settings.line_spacing)
        settings.line_height = _read_number(section, "line_height", _number, settings.line_height)

    if "render" in config:
        section = config["render"]
        settings.font_family = section.get("font_family", settings.font_family)
        # 기본 색상 (RGB) / Default color (RGB)
        if section.get("color_r") and section.get("color_g") and section.get("color_b"):
            try:
                r = int(section.get("color_r"))
                g = int(section.get("color_g"))
                b = int(section.get("color_b"))
                settings.color = (r, g, b)
            except ValueError:
                logger.warning("INI 색상 값 오류, 기본 색상 사용")
        settings.log_level = section.get("log_level", settings.log_level)
        settings.log_file = section.get("log_file", settings.log_file)

    return settings


def _format_number(value):
    if value is None:
        return "none"
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def save_settings(settings, path):
    """
    Save settings to an INI file
    설정을 INI 파일에 저장
    """
    config = configparser.ConfigParser()
    config["layout"] = {
        "justify": str(settings.justify),
        "anchor": str(settings.anchor),
        "wrap_width": _format_number(settings.wrap_width),
        "font_size": _format_number(settings.font_size),
        "line_spacing": _format_number(settings.line_spacing),
        "line_height": _format_number(settings.line_height),
    }
    r, g, b = settings.color[:3]
    config["render"] = {
        "font_family": settings.font_family,
        "color_r": str(r),
        "color_g": str(g),
        "color_b": str(b),
        "log_level": settings.log_level,
        "log_file": settings.log_file,
    }
    with open(path, "w", encoding="utf-8") as f:
        config.write(f)
