import sys
import logging
import argparse
from typing import Callable, List, Optional

from PySide6.QtWidgets import QApplication
from pixelbrush.backend.controller import PixelEditController
from pixelbrush.backend.models.color import Color
from pixelbrush.backend.models.palette import PixelPalette
from pixelbrush.definitions import (
    DEMO_BACKGROUND, DEMO_BRUSH_COLOR, DEMO_BRUSH_SIZE, DEMO_HEIGHT, DEMO_WIDTH,
    LOG_LEVELS, PALETTES
)
from pixelbrush.frontend.main_window import MainWindow


def blue_gradient(y: float) -> Color:
    """Black at the top fading to opaque blue at the bottom"""
    return Color(0, 0, int(255 * y), 255)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="pixelbrush - Editable pixel-art image demo"
    )
    parser.add_argument("--width", type=int, default=DEMO_WIDTH, help="Image width in pixels")
    parser.add_argument("--height", type=int, default=DEMO_HEIGHT, help="Image height in pixels")
    parser.add_argument("--brush-size", type=int, default=DEMO_BRUSH_SIZE, help="Brush diameter in pixels")
    parser.add_argument("--brush-color", type=str, default=DEMO_BRUSH_COLOR, help="Brush colour, e.g. '#ff000064'")
    parser.add_argument("--background", type=str, default=DEMO_BACKGROUND, help="Solid background colour")
    parser.add_argument(
        "--gradient",
        action="store_true",
        help="Start from a vertical blue gradient instead of the solid background"
    )
    parser.add_argument("--palette", choices=sorted(PALETTES.keys()), default="none",
                        help="Quantize the displayed image to a palette")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    return parser


def create_controller(args: argparse.Namespace, background: Optional[Color] = None) -> PixelEditController:
    """
    Build the controller described by the parsed command line.

    Raises:
        ValueError: On a bad size, brush or colour argument.
    """
    if background is None:
        background = Color.from_string(args.background)

    palette_factory: Optional[str] = PALETTES[args.palette]
    palette = getattr(PixelPalette, palette_factory)() if palette_factory else None

    gradient: Optional[Callable[[float], Color]] = blue_gradient if args.gradient else None
    bg_color = None if args.gradient else background

    return PixelEditController(
        width=args.width,
        height=args.height,
        palette=palette,
        gradient=gradient,
        bg_color=bg_color,
        brush_size=args.brush_size,
        brush_color=args.brush_color,
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    try:
        background = Color.from_string(args.background)
        controller = create_controller(args, background)
    except ValueError as e:
        parser.error(str(e))

    # Create application
    app = QApplication(sys.argv[:1])

    window = MainWindow(controller, background)
    window.resize(640, 640)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
