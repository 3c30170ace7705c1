"""
Font bundle model class
폰트 번들 모델 클래스
"""

from ..metrics import PillowFontMetrics
from ..utils.exceptions import InvalidConfig


def _check_size(size):
    if size is None or size <= 0:
        raise InvalidConfig(f"FontBundle size cannot be <= 0, got {size}")
    return size


def _check_color(color):
    color = tuple(color)
    if len(color) not in (3, 4) or any(not 0 <= int(c) <= 255 for c in color):
        raise InvalidConfig(f"FontBundle color must be RGB or RGBA in 0-255, got {color}")
    return tuple(int(c) for c in color)


class FontBundle:
    """
    A bundle of font related values
    폰트 관련 값 묶음

    Holds the font, the pixel size it is drawn at and the fill color. The
    bundle owns one PillowFontMetrics so measurements for every size drawn
    with this font share a cache.
    폰트, 그리기 크기, 채우기 색상을 보관합니다.
    """

    def __init__(self, font=None, size=18, color=(0, 0, 0)):
        """
        Initialize font bundle / 폰트 번들 초기화

        Args / 인자:
            font: PIL FreeTypeFont, font file path, or None for Pillow's default font
                  / PIL 폰트 객체, 폰트 파일 경로 또는 기본 폰트(None)
            size (float): Font size in pixels / 폰트 크기(픽셀)
            color (tuple): Text color (R, G, B) or (R, G, B, A) / 텍스트 색상
        """
        self.size = _check_size(size)
        self.color = _check_color(color)
        self._metrics = PillowFontMetrics(font)

    @property
    def font(self):
        return self._metrics.font

    def set_size(self, size):
        self.size = _check_size(size)

    def set_color(self, color):
        self.color = _check_color(color)

    def metrics(self):
        """Metrics provider for this bundle's font / 이 번들 폰트의 메트릭 제공자"""
        return self._metrics

    def pil_font(self, size=None):
        """PIL font object at the bundle size (or an explicit size) / 번들 크기의 PIL 폰트 객체"""
        return self._metrics.font_for_size(self.size if size is None else size)

    def __repr__(self):
        return f"FontBundle{{font: {self.font!r}, size: {self.size}, color: {self.color}}}"
