"""
Main entry point for Text On Image Tool
텍스트 이미지 툴 메인 진입점

Opens an image, places text on it and saves the result.
이미지를 열어 텍스트를 배치하고 결과를 저장합니다.

Usage / 사용법:
    python text_on_image/main.py assets/background.png output/out.png "This is Line 1
    This is Line 2" --size 40 --point 400 0 --justify center --anchor top
"""

import argparse
import os
import sys

# Add this directory to sys.path so we can import the package
# 이 디렉토리를 sys.path에 추가하여 패키지를 import할 수 있도록 함
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from PIL import Image

from text_on_image_tool import (
    AnchorBox,
    FontBundle,
    TextOnImageError,
    InvalidConfig,
    load_font,
    load_settings,
    logger,
    text_on_image,
    text_on_image_draw_debug,
)
from text_on_image_tool.models import TextJustify, VerticalAnchor


def build_parser():
    """Build the command line parser / 명령줄 파서 생성"""
    parser = argparse.ArgumentParser(
        description="Place justified, anchored and wrapped text on an image."
    )
    parser.add_argument("input", help="Input image path")
    parser.add_argument("output", help="Output image path")
    parser.add_argument("text", help="Text to draw; line breaks start new lines")
    parser.add_argument("-c", "--config", help="INI settings file with defaults")
    parser.add_argument("-f", "--font", help="Font family name or TrueType file path")
    parser.add_argument("-s", "--size", type=float, help="Font size in pixels")
    placement = parser.add_mutually_exclusive_group()
    placement.add_argument(
        "--box", nargs=4, type=float, metavar=("X", "Y", "W", "H"),
        help="Anchor box (default: the whole image)",
    )
    placement.add_argument(
        "--point", nargs=2, type=float, metavar=("X", "Y"),
        help="Anchor point; text extends from it",
    )
    parser.add_argument("-j", "--justify", choices=[member.value for member in TextJustify])
    parser.add_argument("-a", "--anchor", choices=[member.value for member in VerticalAnchor])
    parser.add_argument("-w", "--wrap", type=float, help="Wrap width in pixels")
    parser.add_argument("--spacing", type=float, help="Extra pixels between lines")
    parser.add_argument("--color", nargs=3, type=int, metavar=("R", "G", "B"), help="Text color")
    parser.add_argument("--debug", action="store_true", help="Mark the anchor box on the output")
    parser.add_argument("--log-file", help="Log file path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log layout decisions")
    return parser


def _whole_number(value):
    return int(value) if float(value).is_integer() else value


def build_layout(args, settings):
    """
    Merge settings file values with command line overrides
    설정 파일 값과 명령줄 옵션 병합

    Settings values are only checked after the overrides are applied, so a
    flag can replace a bad file value.
    옵션 적용 후 한 번만 검증하므로 잘못된 파일 값을 옵션으로 대체할 수 있습니다.

    Returns / 반환값:
        LayoutConfig: Validated layout configuration / 검증된 배치 설정
    """
    config = settings.layout_config(validate=False)
    overrides = {}
    if args.justify:
        overrides["justify"] = args.justify
    if args.anchor:
        overrides["anchor"] = args.anchor
    if args.wrap is not None:
        overrides["wrap_width"] = args.wrap
    if args.size is not None:
        overrides["font_size"] = _whole_number(args.size)
    if args.spacing is not None:
        overrides["line_spacing"] = args.spacing
    return config.replace(**overrides).validate()


def build_anchor_box(args, image):
    if args.box:
        x, y, width, height = args.box
        if width < 0 or height < 0:
            raise InvalidConfig("--box width and height cannot be negative")
        return AnchorBox(x, y, width, height)
    if args.point:
        return AnchorBox.from_point(*args.point)
    return AnchorBox(0, 0, image.width, image.height)


def run(args):
    """
    Draw text on the input image and save it
    입력 이미지에 텍스트를 그리고 저장
    """
    settings = load_settings(args.config)
    logger.setup_logging(
        args.log_file or settings.log_file,
        "DEBUG" if args.verbose else settings.log_level,
    )

    config = build_layout(args, settings)
    color = tuple(args.color) if args.color else settings.color
    font = load_font(args.font or settings.font_family, config.font_size)
    font_bundle = FontBundle(font, config.font_size, color)

    with Image.open(args.input) as source:
        mode = "RGBA" if "A" in source.getbands() else "RGB"
        image = source.convert(mode)

    anchor_box = build_anchor_box(args, image)
    draw_func = text_on_image_draw_debug if args.debug else text_on_image
    placed_lines = draw_func(image, args.text, font_bundle, anchor_box, config)
    logger.info(f"{len(placed_lines)}줄을 그렸습니다: {args.output}")

    output_dir = os.path.dirname(os.path.abspath(args.output))
    os.makedirs(output_dir, exist_ok=True)
    image.save(args.output)
    return placed_lines


def main(argv=None):
    """
    Main entry point for the command line
    명령줄 메인 진입점

    Returns / 반환값:
        int: Exit code, 0 on success / 종료 코드 (성공 시 0)
    """
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except (TextOnImageError, OSError, ValueError) as e:
        logger.error(f"텍스트 그리기 실패: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1
    finally:
        logger.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
