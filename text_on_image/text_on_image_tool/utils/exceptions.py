"""
Exception types for text layout and rendering
텍스트 배치 및 렌더링 예외 클래스
"""


class TextOnImageError(Exception):
    """Base class for all errors raised by this package."""

    pass


class InvalidConfig(TextOnImageError, ValueError):
    """Layout configuration that cannot produce a layout (bad wrap width, font size, names)."""

    pass


class FontError(TextOnImageError, RuntimeError):
    """An explicitly requested font could not be opened."""

    pass


class RenderingError(TextOnImageError, RuntimeError):
    """Drawing placed lines onto an image buffer failed."""

    pass
