"""
Text layout and rendering module for text on image tool
텍스트 이미지 툴 텍스트 배치 및 렌더링 모듈
"""

from .text_layout import (
    split_paragraphs,
    wrap_paragraph,
    wrap_lines,
    measure_line,
    layout_text,
    block_size
)
from .text_renderer import (
    load_font,
    draw_placed_lines,
    text_on_image,
    text_on_image_draw_debug,
    text_on_array
)

__all__ = [
    'split_paragraphs',
    'wrap_paragraph',
    'wrap_lines',
    'measure_line',
    'layout_text',
    'block_size',
    'load_font',
    'draw_placed_lines',
    'text_on_image',
    'text_on_image_draw_debug',
    'text_on_array'
]
