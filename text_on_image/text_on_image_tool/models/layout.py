"""
Layout model classes
텍스트 배치 모델 클래스들

Value types shared by the layout engine and the renderer.
배치 엔진과 렌더러가 공유하는 값 타입입니다.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Tuple

from ..utils.exceptions import InvalidConfig


class StrEnum(str, Enum):
    """Enum where members are also strings."""

    def __str__(self):
        return self.value

    @classmethod
    def from_string(cls, name):
        """
        Parse a member from its name or value, case-insensitively
        이름 또는 값으로 멤버 파싱 (대소문자 무시)

        Args / 인자:
            name (str or StrEnum): Name such as "left" / "LEFT" / 이름

        Returns / 반환값:
            StrEnum: Matching member / 일치하는 멤버

        Raises / 예외:
            InvalidConfig: Unknown name / 알 수 없는 이름
        """
        if isinstance(name, cls):
            return name
        normalized = str(name).strip().lower()
        for member in cls:
            if member.value == normalized:
                return member
        choices = ", ".join(member.value for member in cls)
        raise InvalidConfig(f"Unknown {cls.__name__} '{name}' (expected one of: {choices})")


class TextJustify(StrEnum):
    """Defines how each line extends from the anchor box horizontally."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAnchor(StrEnum):
    """Defines where the text block sits relative to the anchor box vertically."""
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"


@dataclass(frozen=True)
class AnchorBox:
    """
    Bounding rectangle the text block is positioned in
    텍스트 블록이 배치되는 기준 사각형

    A zero-sized box placed with from_point() positions text around a single
    point: centered text straddles it, right-justified text ends at it.
    """

    x: float
    y: float
    width: float = 0
    height: float = 0

    @classmethod
    def from_point(cls, x, y):
        return cls(x, y, 0, 0)

    @classmethod
    def from_bbox(cls, bbox):
        """Build from an (x1, y1, x2, y2) bounding box / (x1, y1, x2, y2) 박스로부터 생성"""
        x1, y1, x2, y2 = bbox
        return cls(min(x1, x2), min(y1, y2), abs(x2 - x1), abs(y2 - y1))

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    def contains(self, x, y):
        return self.x <= x <= self.right and self.y <= y <= self.bottom


@dataclass(frozen=True)
class LayoutConfig:
    """
    Layout preferences for one layout call
    한 번의 배치 호출에 대한 배치 설정

    Attributes / 속성:
        justify (TextJustify): Horizontal justification per line / 줄별 가로 정렬
        anchor (VerticalAnchor): Vertical anchoring of the whole block / 블록 세로 기준
        wrap_width (float or None): Maximum line width in pixels, None disables wrapping
                                    / 최대 줄 너비(픽셀), None이면 줄바꿈 없음
        font_size (float): Font size in pixels / 폰트 크기(픽셀)
        line_spacing (float): Extra pixels between consecutive lines / 줄 사이 추가 간격(픽셀)
        line_height (float or None): Fixed line height, None asks the metrics provider
                                     / 고정 줄 높이, None이면 메트릭 제공자 사용
    """

    justify: TextJustify = TextJustify.CENTER
    anchor: VerticalAnchor = VerticalAnchor.CENTER
    wrap_width: Optional[float] = None
    font_size: float = 18
    line_spacing: float = 0
    line_height: Optional[float] = None

    def __post_init__(self):
        # 문자열 입력 허용 / Accept plain strings such as "left"
        object.__setattr__(self, "justify", TextJustify.from_string(self.justify))
        object.__setattr__(self, "anchor", VerticalAnchor.from_string(self.anchor))

    @property
    def wraps(self):
        return self.wrap_width is not None

    def validate(self):
        """
        Check the configuration before any layout work
        배치 작업 전에 설정 검증

        Raises / 예외:
            InvalidConfig: Non-positive font size, wrap width or line height,
                           or negative line spacing
        """
        if self.font_size is None or self.font_size <= 0:
            raise InvalidConfig(f"font_size must be > 0, got {self.font_size}")
        if self.wrap_width is not None and self.wrap_width <= 0:
            raise InvalidConfig(f"wrap_width must be > 0 when wrapping, got {self.wrap_width}")
        if self.line_height is not None and self.line_height <= 0:
            raise InvalidConfig(f"line_height must be > 0, got {self.line_height}")
        if self.line_spacing is None or self.line_spacing < 0:
            raise InvalidConfig(f"line_spacing cannot be negative, got {self.line_spacing}")
        return self

    def replace(self, **changes):
        return replace(self, **changes)


@dataclass(frozen=True)
class PlacedLine:
    """
    One visual line ready for the rasterizer
    래스터라이저로 전달할 한 줄

    (x, y) is the top-left corner of the line box, which is where Pillow's
    "la" text anchor puts the text.
    """

    x: int
    y: int
    text: str
    width: float
    height: float

    @property
    def origin(self) -> Tuple[int, int]:
        return (self.x, self.y)

    @property
    def right(self):
        return self.x + self.width

    @property
    def bottom(self):
        return self.y + self.height

    @property
    def bbox(self):
        return (self.x, self.y, self.right, self.bottom)
