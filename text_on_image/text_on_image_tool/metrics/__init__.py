"""
Font metrics module for text on image tool
텍스트 이미지 툴 폰트 메트릭 모듈
"""

from .font_metrics import FontMetrics, MonospaceMetrics, PillowFontMetrics

__all__ = ['FontMetrics', 'MonospaceMetrics', 'PillowFontMetrics']
