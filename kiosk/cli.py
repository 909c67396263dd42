#!/usr/bin/env python3
"""
Kiosk CLI - Command line access to the face region and image geometry tools.
"""
import logging
import sys
from pathlib import Path
from typing import Tuple

import click
from rich.console import Console

from kiosk.config import DEFAULT_RESIZE_HEIGHT
from kiosk.errors import KioskError
from kiosk.image import ImageCropper, ImageResizer, PillowCodec
from kiosk.region import Rectangle, find_closest_match
from kiosk.utils import format_error, setup_logging

console = Console()
logger = logging.getLogger(__name__)


class RectangleParamType(click.ParamType):
    """Parses LEFT,TOP,WIDTH,HEIGHT into a Rectangle."""
    name = "rectangle"

    def convert(self, value, param, ctx):
        if isinstance(value, Rectangle):
            return value
        try:
            left, top, width, height = (int(part) for part in value.split(","))
            return Rectangle(left, top, width, height)
        except (ValueError, KioskError) as e:
            self.fail(f"{value!r} is not a valid LEFT,TOP,WIDTH,HEIGHT rectangle ({e})", param, ctx)


RECTANGLE = RectangleParamType()


def _fail(e: Exception) -> None:
    """Show the error and exit non-zero."""
    format_error(e)
    sys.exit(1)


@click.group()
@click.version_option(package_name="kiosk")
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
def main(verbose):
    """Kiosk - Face region matching, cropping and resizing."""
    setup_logging(verbose)


@main.command()
@click.argument('image', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--left', type=int, required=True, help='Left edge of the crop')
@click.option('--top', type=int, required=True, help='Top edge of the crop')
@click.option('--width', type=click.IntRange(min=0), required=True, help='Crop width')
@click.option('--height', type=click.IntRange(min=0), required=True, help='Crop height')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), required=True,
              help='Where to write the crop (.png or .jpg)')
def crop(image, left, top, width, height, output):
    """Crop a region out of IMAGE."""
    codec = PillowCodec()
    cropper = ImageCropper(codec)
    rect = Rectangle(left, top, width, height)

    try:
        buffer = cropper.crop(image.read_bytes(), rect)
        image_format = 'PNG' if output.suffix.lower() == '.png' else 'JPEG'
        output.write_bytes(codec.encode(buffer, format=image_format))
    except KioskError as e:
        _fail(e)

    console.print(f"✂️  Cropped {buffer.width}x{buffer.height} to {output}")


@main.command()
@click.argument('image', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--height', '-h', 'target_height', type=click.IntRange(min=1),
              default=DEFAULT_RESIZE_HEIGHT, show_default=True, help='Maximum output height')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), required=True,
              help='Where to write the resized JPEG')
def resize(image, target_height, output):
    """Downscale IMAGE to at most the given height."""
    resizer = ImageResizer()

    try:
        with image.open('rb') as f:
            data, scale = resizer.resize(f, target_height)
    except KioskError as e:
        _fail(e)

    output.write_bytes(data)
    console.print(f"📐 Wrote {output}")
    console.print(f"scale_x={scale.scale_x:.6f} scale_y={scale.scale_y:.6f}")


@main.command()
@click.option('--candidate', '-c', type=RECTANGLE, required=True,
              help='Region to match, as LEFT,TOP,WIDTH,HEIGHT')
@click.option('--known', '-k', type=RECTANGLE, multiple=True,
              help='Tracked region, as LEFT,TOP,WIDTH,HEIGHT (repeatable)')
def match(candidate: Rectangle, known: Tuple[Rectangle, ...]):
    """Find the tracked region closest to CANDIDATE."""
    index = find_closest_match(candidate, list(enumerate(known)))

    if index is None:
        console.print("no match")
    else:
        console.print(f"match {index}: {known[index]}")


@main.command()
def deps():
    """Check if all dependencies are properly installed."""
    console.print("🔍 Checking dependencies...")

    checks = [
        ("cv2", "OpenCV"),
        ("PIL", "Pillow"),
        ("numpy", "NumPy"),
        ("rich", "Rich"),
    ]

    all_good = True
    for module, name in checks:
        try:
            __import__(module)
            console.print(f"✅ {name}")
        except ImportError:
            console.print(f"❌ {name} - not installed")
            all_good = False

    if all_good:
        console.print("\n🎉 All dependencies are installed!", style="bold green")
    else:
        console.print("\n💡 Run: pip install -e .", style="bold yellow")
        sys.exit(1)


if __name__ == "__main__":
    main()
