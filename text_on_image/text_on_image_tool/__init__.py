"""
Text On Image Tool - multi-line text placement for raster images
텍스트 이미지 툴 - 래스터 이미지용 여러 줄 텍스트 배치

A modular package for laying out justified, anchored and wrapped text and
drawing it onto Pillow images or OpenCV image arrays.
정렬, 기준 위치, 줄바꿈이 적용된 텍스트를 배치하고 Pillow 이미지 또는 OpenCV 배열에
그리는 모듈화된 패키지입니다.
"""

__version__ = "0.3.0"

from .utils import (
    logger,
    resource_path,
    TextOnImageError,
    InvalidConfig,
    FontError,
    RenderingError,
    Settings,
    load_settings,
    save_settings,
)
from .models import TextJustify, VerticalAnchor, AnchorBox, LayoutConfig, PlacedLine, FontBundle
from .metrics import FontMetrics, MonospaceMetrics, PillowFontMetrics
from .render import (
    layout_text,
    wrap_lines,
    block_size,
    load_font,
    text_on_image,
    text_on_image_draw_debug,
    text_on_array,
)

__all__ = [
    'logger',
    'resource_path',
    'TextOnImageError',
    'InvalidConfig',
    'FontError',
    'RenderingError',
    'Settings',
    'load_settings',
    'save_settings',
    'TextJustify',
    'VerticalAnchor',
    'AnchorBox',
    'LayoutConfig',
    'PlacedLine',
    'FontBundle',
    'FontMetrics',
    'MonospaceMetrics',
    'PillowFontMetrics',
    'layout_text',
    'wrap_lines',
    'block_size',
    'load_font',
    'text_on_image',
    'text_on_image_draw_debug',
    'text_on_array',
]
