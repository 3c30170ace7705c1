"""
Text rendering utilities for text on image tool
텍스트 이미지 툴 텍스트 렌더링 유틸리티

This module loads fonts and draws laid out lines onto Pillow images and
OpenCV (BGR numpy) image buffers.
이 모듈은 폰트를 로드하고 배치된 줄을 Pillow 이미지와 OpenCV(BGR numpy) 버퍼에 그립니다.
"""

import os

import cv2
import numpy as np
from PIL import Image, ImageDraw, ImageFont

from ..models import LayoutConfig
from ..utils import logger, resource_path
from ..utils.exceptions import RenderingError
from .text_layout import layout_text


DEBUG_CROSS_COLOR = (255, 0, 0)
DEBUG_CROSS_ARM = 2

# 폰트 패밀리별 후보 경로 / Candidate paths per font family
FONT_PATHS = {
    "DejaVu Sans": [
        "fonts/DejaVuSans.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
        "/usr/share/fonts/dejavu/DejaVuSans.ttf",
    ],
    "DejaVu Sans Mono": [
        "fonts/DejaVuSansMono.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
        "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    ],
    "Bitstream Vera Sans Mono": [
        "fonts/VeraMoBd.ttf",
        "/usr/share/fonts/truetype/ttf-bitstream-vera/VeraMoBd.ttf",
    ],
    "Arial": [
        "fonts/arial.ttf",
        "C:/Windows/Fonts/arial.ttf",
        "/Library/Fonts/Arial.ttf",
        "/System/Library/Fonts/Supplemental/Arial.ttf",
    ],
    "Times New Roman": [
        "fonts/times.ttf",
        "C:/Windows/Fonts/times.ttf",
        "/System/Library/Fonts/Supplemental/Times New Roman.ttf",
    ],
    "Courier New": [
        "fonts/cour.ttf",
        "C:/Windows/Fonts/cour.ttf",
        "/System/Library/Fonts/Supplemental/Courier New.ttf",
    ],
    "나눔고딕": [
        "fonts/NanumGothic.ttf",
        "C:/Windows/Fonts/NanumGothic.ttf",
        "/usr/share/fonts/truetype/nanum/NanumGothic.ttf",
    ],
}

DEFAULT_FONT_FAMILIES = ["DejaVu Sans", "Arial", "나눔고딕"]


def _try_truetype(font_path, font_size):
    path = resource_path(font_path)
    if not os.path.exists(path):
        return None
    try:
        return ImageFont.truetype(path, font_size)
    except OSError as e:
        logger.error(f"폰트 로딩 실패: {path}, 오류: {e}")
        return None


def load_font(font_family, font_size, custom_fonts=None):
    """
    Load a font for rendering
    렌더링용 폰트 로드

    Lookup order: custom fonts, a direct font file path, known family paths,
    default families, then Pillow's built-in default font.
    조회 순서: 사용자 폰트, 폰트 파일 경로, 알려진 패밀리 경로, 기본 패밀리, Pillow 기본 폰트.

    Args / 인자:
        font_family (str): Font family name or font file path / 폰트 패밀리 이름 또는 파일 경로
        font_size (int): Font size / 폰트 크기
        custom_fonts (dict): Custom fonts dictionary {name: path} / 사용자 정의 폰트 딕셔너리

    Returns / 반환값:
        ImageFont: PIL font object / PIL 폰트 객체
    """
    # 사용자 추가 폰트 확인 (우선순위) / Check custom fonts first (priority)
    if custom_fonts and font_family in custom_fonts:
        font = _try_truetype(custom_fonts[font_family], font_size)
        if font is not None:
            return font
        logger.warning(f"사용자 추가 폰트 로딩 실패: {custom_fonts[font_family]}")

    if font_family:
        candidates = [font_family] + FONT_PATHS.get(font_family, [])
        for font_path in candidates:
            font = _try_truetype(font_path, font_size)
            if font is not None:
                return font

    # 기본 폰트 패밀리 시도 / Try default families
    for family in DEFAULT_FONT_FAMILIES:
        for font_path in FONT_PATHS[family]:
            font = _try_truetype(font_path, font_size)
            if font is not None:
                if font_family:
                    logger.warning(f"폰트 '{font_family}'를 찾을 수 없어 '{family}' 사용")
                return font

    # 모든 시도가 실패하면 기본 폰트 사용 / Use default font if all attempts fail
    logger.warning("모든 폰트 로딩 실패, 기본 폰트 사용")
    return ImageFont.load_default(size=font_size)


def draw_placed_lines(image, placed_lines, font_bundle, font_size=None):
    """
    Draw laid out lines onto a Pillow image, in order
    배치된 줄을 순서대로 Pillow 이미지에 그리기

    Args / 인자:
        image (PIL.Image.Image): Target image, modified in place / 대상 이미지 (직접 수정)
        placed_lines (list[PlacedLine]): Output of layout_text / layout_text 결과
        font_bundle (FontBundle): Font and color / 폰트 및 색상
        font_size (float): Size the lines were laid out with (bundle size by default)
                           / 배치에 사용된 크기 (기본값: 번들 크기)
    """
    font = font_bundle.pil_font(font_size)
    try:
        draw = ImageDraw.Draw(image)
        for line in placed_lines:
            if not line.text.strip():
                continue
            draw.text(line.origin, line.text, font=font, fill=font_bundle.color, anchor="la")
        del draw  # Explicitly release Pillow object / Pillow 객체 명시 해제
    except Exception as e:
        logger.error(f"텍스트 그리기 오류: {e}")
        raise RenderingError(f"Failed to draw text: {e}") from e


def _resolve(font_bundle, config, metrics):
    if config is None:
        config = LayoutConfig(font_size=font_bundle.size)
    if metrics is None:
        metrics = font_bundle.metrics()
    return config, metrics


def text_on_image(image, text, font_bundle, anchor_box, config=None, metrics=None):
    """
    Draw text on an image with justification, vertical anchor and wrapping
    가로 정렬, 세로 기준, 줄바꿈을 적용하여 이미지에 텍스트 그리기

    Args / 인자:
        image (PIL.Image.Image): Target image, modified in place / 대상 이미지
        text (str): Text to draw / 그릴 텍스트
        font_bundle (FontBundle): Font and color / 폰트 및 색상
        anchor_box (AnchorBox): Frame of reference / 기준 박스
        config (LayoutConfig): Layout preferences; defaults to centered text at
                               the bundle size / 배치 설정 (기본값: 번들 크기, 가운데 정렬)
        metrics (FontMetrics): Metrics provider; defaults to the bundle's / 메트릭 제공자

    Returns / 반환값:
        list[PlacedLine]: The lines that were drawn / 그려진 줄 목록
    """
    config, metrics = _resolve(font_bundle, config, metrics)
    placed_lines = layout_text(text, config, anchor_box, metrics)
    draw_placed_lines(image, placed_lines, font_bundle, config.font_size)
    return placed_lines


def draw_debug_cross(image, x, y, color=DEBUG_CROSS_COLOR):
    """Mark a pixel position with a small cross / 작은 십자로 픽셀 위치 표시"""
    x, y = int(x), int(y)
    draw = ImageDraw.Draw(image)
    draw.line([(x - DEBUG_CROSS_ARM, y), (x + DEBUG_CROSS_ARM, y)], fill=color)
    draw.line([(x, y - DEBUG_CROSS_ARM), (x, y + DEBUG_CROSS_ARM)], fill=color)


def text_on_image_draw_debug(image, text, font_bundle, anchor_box, config=None, metrics=None):
    """
    Draw text like text_on_image and mark the anchor box
    text_on_image와 같이 그리고 기준 박스를 표시

    A cross marks the anchor box origin; a non-empty box also gets an outline.
    The image is left untouched when the layout fails.
    """
    config, metrics = _resolve(font_bundle, config, metrics)
    placed_lines = layout_text(text, config, anchor_box, metrics)
    if anchor_box.width > 0 and anchor_box.height > 0:
        draw = ImageDraw.Draw(image)
        draw.rectangle(
            [anchor_box.x, anchor_box.y, anchor_box.right, anchor_box.bottom],
            outline=DEBUG_CROSS_COLOR,
        )
    draw_debug_cross(image, anchor_box.x, anchor_box.y)
    draw_placed_lines(image, placed_lines, font_bundle, config.font_size)
    return placed_lines


def text_on_array(image_array, text, font_bundle, anchor_box, config=None, metrics=None, debug=False):
    """
    Draw text onto an OpenCV image array in place
    OpenCV 이미지 배열에 텍스트 그리기 (직접 수정)

    Args / 인자:
        image_array (np.ndarray): BGR (H, W, 3), BGRA (H, W, 4) or grayscale (H, W) uint8 image
                                  / BGR, BGRA 또는 그레이스케일 uint8 이미지
        debug (bool): Mark the anchor box like text_on_image_draw_debug / 기준 박스 표시 여부

    Returns / 반환값:
        list[PlacedLine]: The lines that were drawn / 그려진 줄 목록
    """
    if not isinstance(image_array, np.ndarray) or image_array.ndim not in (2, 3):
        raise RenderingError("image_array must be a 2D or 3D numpy array")
    if image_array.dtype != np.uint8:
        raise RenderingError(f"image_array must be uint8, got {image_array.dtype}")

    channels = 1 if image_array.ndim == 2 else image_array.shape[2]
    conversions = {
        1: (cv2.COLOR_GRAY2RGB, cv2.COLOR_RGB2GRAY),
        3: (cv2.COLOR_BGR2RGB, cv2.COLOR_RGB2BGR),
        4: (cv2.COLOR_BGRA2RGBA, cv2.COLOR_RGBA2BGRA),
    }
    if channels not in conversions:
        raise RenderingError(f"Unsupported channel count: {channels}")
    to_pil, from_pil = conversions[channels]

    try:
        pil_image = Image.fromarray(cv2.cvtColor(image_array, to_pil))
    except (cv2.error, TypeError, ValueError) as e:
        raise RenderingError(f"Failed to convert image array: {e}") from e

    draw_func = text_on_image_draw_debug if debug else text_on_image
    placed_lines = draw_func(pil_image, text, font_bundle, anchor_box, config, metrics)

    # PIL 이미지를 OpenCV 형식으로 변환 / Convert PIL image back to OpenCV format
    image_array[:] = cv2.cvtColor(np.array(pil_image), from_pil)
    return placed_lines
