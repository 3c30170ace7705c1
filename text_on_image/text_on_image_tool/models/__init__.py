"""
Models module for text on image tool
텍스트 이미지 툴 모델 모듈
"""

from .layout import TextJustify, VerticalAnchor, AnchorBox, LayoutConfig, PlacedLine
from .font_bundle import FontBundle

__all__ = ['TextJustify', 'VerticalAnchor', 'AnchorBox', 'LayoutConfig', 'PlacedLine', 'FontBundle']
