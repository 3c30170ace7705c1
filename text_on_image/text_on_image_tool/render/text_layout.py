"""
Text layout engine for text on image tool
텍스트 이미지 툴 텍스트 배치 엔진

This module splits text into paragraphs, wraps them by word and places every
line inside an anchor box. It never touches an image; drawing is done by
text_renderer with the placed lines returned here.
이 모듈은 텍스트를 단락으로 나누고 단어 단위로 줄바꿈한 뒤 각 줄을 기준 박스 안에
배치합니다. 이미지는 다루지 않으며, 그리기는 text_renderer가 담당합니다.
"""

import math

from ..models import TextJustify, VerticalAnchor, PlacedLine
from ..utils import logger
from ..utils.exceptions import InvalidConfig


def split_paragraphs(text):
    """
    Split text on line breaks, keeping blank lines
    줄바꿈 문자로 단락 분할 (빈 줄 유지)

    Args / 인자:
        text (str): Text block / 텍스트 블록

    Returns / 반환값:
        list[str]: Paragraphs in reading order / 읽는 순서의 단락 목록
    """
    if not text:
        return []
    # "\n"만 줄바꿈으로 취급 (\r\n 허용) / Only "\n" breaks lines, "\r\n" included
    paragraphs = [line[:-1] if line.endswith("\r") else line for line in text.split("\n")]
    if text.endswith("\n"):
        paragraphs.pop()
    return paragraphs


def wrap_paragraph(paragraph, wrap_width, font_size, metrics):
    """
    Greedy word wrapping of a single paragraph
    단락 하나를 단어 단위로 줄바꿈

    Words are joined by one space while the measured line stays within
    wrap_width. A word wider than wrap_width is kept whole on its own line.
    측정된 줄 너비가 wrap_width 이하인 동안 단어를 공백 하나로 이어 붙입니다.
    wrap_width보다 긴 단어는 자르지 않고 한 줄에 단독으로 둡니다.

    Args / 인자:
        paragraph (str): Paragraph without line breaks / 줄바꿈 없는 단락
        wrap_width (float): Maximum line width in pixels / 최대 줄 너비(픽셀)
        font_size (float): Font size in pixels / 폰트 크기(픽셀)
        metrics (FontMetrics): Metrics provider / 메트릭 제공자

    Returns / 반환값:
        list[str]: Wrapped lines, [""] for a blank paragraph / 줄바꿈된 줄 목록
    """
    words = paragraph.split()
    if not words:
        # 빈 단락은 빈 줄 하나 / A blank paragraph renders as one blank line
        return [""]

    lines = []
    current_line = ""
    for word in words:
        test_line = f"{current_line} {word}" if current_line else word
        width = metrics.text_width(test_line, font_size)
        logger.debug(f"\"{test_line}\" has width {width}. Compare to wrap_width {wrap_width}")

        if width <= wrap_width:
            current_line = test_line
            continue

        if current_line:
            lines.append(current_line)
        # 너무 긴 단어는 다음 단어가 올 때 단독 줄로 확정됨
        # An over-wide word becomes its own line once the next word arrives
        current_line = word

    lines.append(current_line)
    return lines


def wrap_lines(text, config, metrics):
    """
    Validate config and turn text into visual lines
    설정을 검증하고 텍스트를 화면상의 줄 목록으로 변환

    Without a wrap width every paragraph is one line, kept verbatim.
    줄바꿈 너비가 없으면 각 단락이 그대로 한 줄이 됩니다.

    Raises / 예외:
        InvalidConfig: Invalid config, or wrap width narrower than every character
    """
    config.validate()
    paragraphs = split_paragraphs(text)
    if not config.wraps:
        return paragraphs

    narrowest = metrics.narrowest_width(text, config.font_size)
    if narrowest is not None and config.wrap_width < narrowest:
        raise InvalidConfig(
            f"wrap_width {config.wrap_width} is narrower than any single character "
            f"(narrowest is {narrowest}); try at least {math.ceil(narrowest)}"
        )

    lines = []
    for paragraph in paragraphs:
        lines.extend(wrap_paragraph(paragraph, config.wrap_width, config.font_size, metrics))
    logger.debug(f"Lines altered: {lines}")
    return lines


def measure_line(line, config, metrics):
    """
    Measure (width, height) of one line in pixels
    한 줄의 (너비, 높이) 측정

    Height is config.line_height when set, otherwise the provider's line height.
    """
    width = metrics.text_width(line, config.font_size) if line else 0
    if config.line_height is not None:
        height = config.line_height
    else:
        height = metrics.line_height(config.font_size)
    return width, height


def _block_top(anchor_box, anchor, block_height):
    if anchor is VerticalAnchor.TOP:
        return anchor_box.y
    if anchor is VerticalAnchor.BOTTOM:
        return anchor_box.y + anchor_box.height - block_height
    return anchor_box.y + (anchor_box.height - block_height) / 2


def _line_x(anchor_box, justify, line_width):
    if justify is TextJustify.LEFT:
        return anchor_box.x
    if justify is TextJustify.RIGHT:
        return anchor_box.x + anchor_box.width - line_width
    return anchor_box.x + (anchor_box.width - line_width) / 2


def layout_text(text, config, anchor_box, metrics):
    """
    Compute the position of every line of text inside an anchor box
    기준 박스 안에서 텍스트 각 줄의 위치 계산

    The vertical anchor moves the whole block; justification is applied to
    each line on its own. Coordinates are floored to whole pixels. Text that
    does not fit the box is still laid out in full and may extend past it.
    세로 기준은 블록 전체를 이동하고, 가로 정렬은 줄마다 따로 적용됩니다.
    좌표는 정수 픽셀로 내림합니다. 박스를 넘치는 텍스트도 자르지 않습니다.

    Args / 인자:
        text (str): Text block / 텍스트 블록
        config (LayoutConfig): Layout preferences / 배치 설정
        anchor_box (AnchorBox): Frame of reference / 기준 박스
        metrics (FontMetrics): Metrics provider / 메트릭 제공자

    Returns / 반환값:
        list[PlacedLine]: Lines in top-to-bottom order, empty for empty text
                          / 위에서 아래 순서의 줄 목록 (빈 텍스트는 빈 목록)

    Raises / 예외:
        InvalidConfig: See wrap_lines / wrap_lines 참조
    """
    lines = wrap_lines(text, config, metrics)
    if not lines:
        return []

    measured = [measure_line(line, config, metrics) for line in lines]
    block_height = sum(height for _, height in measured) + (len(lines) - 1) * config.line_spacing

    y = _block_top(anchor_box, config.anchor, block_height)
    placed_lines = []
    for line, (width, height) in zip(lines, measured):
        x = _line_x(anchor_box, config.justify, width)
        placed_lines.append(PlacedLine(math.floor(x), math.floor(y), line, width, height))
        y += height + config.line_spacing

    logger.debug(f"Placed {len(placed_lines)} line(s), block height {block_height}")
    return placed_lines


def block_size(placed_lines):
    """
    Bounding (width, height) of laid out lines
    배치된 줄 전체의 (너비, 높이)
    """
    if not placed_lines:
        return (0, 0)
    left = min(line.x for line in placed_lines)
    top = min(line.y for line in placed_lines)
    right = max(line.right for line in placed_lines)
    bottom = max(line.bottom for line in placed_lines)
    return (right - left, bottom - top)
