"""
Font metrics providers for text layout
텍스트 배치를 위한 폰트 메트릭 제공자

The layout engine never measures text itself; it asks a caller-owned metrics
provider. Any font cache lives on the provider instance, not in the module.
배치 엔진은 직접 텍스트를 측정하지 않고 호출자가 소유한 메트릭 제공자에 질의합니다.
폰트 캐시는 모듈이 아닌 제공자 인스턴스에 저장됩니다.
"""

import os

from PIL import ImageFont

from ..utils import logger
from ..utils.exceptions import FontError


class FontMetrics:
    """
    Base metrics provider
    기본 메트릭 제공자

    Subclasses answer two questions for a given font size: the advance width
    of a character and the height of a line.
    """

    def advance_width(self, char, size):
        raise NotImplementedError

    def line_height(self, size):
        raise NotImplementedError

    def text_width(self, text, size):
        """Sum of glyph advances / 글리프 advance 합계"""
        return sum(self.advance_width(char, size) for char in text)

    def narrowest_width(self, text, size):
        """
        Smallest advance among the visible characters of text
        텍스트의 보이는 문자 중 가장 작은 advance

        Returns / 반환값:
            float or None: None when text has no visible character / 보이는 문자가 없으면 None
        """
        widths = [self.advance_width(char, size) for char in set(text) if not char.isspace()]
        return min(widths) if widths else None


class MonospaceMetrics(FontMetrics):
    """
    Fixed-advance metrics, independent of any font file
    폰트 파일과 무관한 고정폭 메트릭
    """

    def __init__(self, advance_ratio=0.6, height_ratio=1.0):
        if advance_ratio <= 0 or height_ratio <= 0:
            raise ValueError("advance_ratio and height_ratio must be > 0")
        self.advance_ratio = advance_ratio
        self.height_ratio = height_ratio

    def advance_width(self, char, size):
        return size * self.advance_ratio

    def text_width(self, text, size):
        return len(text) * size * self.advance_ratio

    def line_height(self, size):
        return size * self.height_ratio

    def __repr__(self):
        return f"MonospaceMetrics(advance_ratio={self.advance_ratio}, height_ratio={self.height_ratio})"


class PillowFontMetrics(FontMetrics):
    """
    Metrics backed by a Pillow font
    Pillow 폰트 기반 메트릭

    Args / 인자:
        font: PIL FreeTypeFont, path to a TrueType/OpenType file, or None for
              Pillow's default font / PIL 폰트 객체, 폰트 파일 경로 또는 기본 폰트(None)
    """

    def __init__(self, font=None):
        if isinstance(font, (str, os.PathLike)) and not os.path.exists(font):
            raise FontError(f"Font file not found: {font}")
        self.font = font
        self._variants = {}

    def font_for_size(self, size):
        """
        Get a font object at the given size (cached per instance)
        지정한 크기의 폰트 객체 반환 (인스턴스별 캐시)
        """
        cached = self._variants.get(size)
        if cached is not None:
            return cached

        try:
            if self.font is None:
                variant = ImageFont.load_default(size=size)
            elif isinstance(self.font, (str, os.PathLike)):
                variant = ImageFont.truetype(os.fspath(self.font), size)
            elif hasattr(self.font, "font_variant"):
                variant = self.font.font_variant(size=size)
            else:
                # 비트맵 폰트는 크기 변경 불가 / Bitmap fonts have a single size
                logger.debug(f"Bitmap font {self.font!r} cannot be resized, using it as-is")
                variant = self.font
        except OSError as e:
            raise FontError(f"폰트 로딩 실패: {self.font}, 오류: {e}") from e

        self._variants[size] = variant
        return variant

    def advance_width(self, char, size):
        return self.font_for_size(size).getlength(char)

    def text_width(self, text, size):
        # getlength는 커닝을 포함한 advance 값 / getlength includes kerning
        return self.font_for_size(size).getlength(text)

    def line_height(self, size):
        font = self.font_for_size(size)
        if hasattr(font, "getmetrics"):
            ascent, descent = font.getmetrics()
            return ascent + descent
        left, top, right, bottom = font.getbbox("Ag")
        return bottom - top

    def __repr__(self):
        return f"PillowFontMetrics(font={self.font!r}, cached_sizes={sorted(self._variants)})"
