#!/usr/bin/env python3
"""
Image to ASCII Rasterizer - Command Line
========================================
Convert an image file to ASCII art from the terminal.

Features:
- Simple and complex character ramps, or a custom ramp
- Monochrome or sampled-color glyphs
- Brightness inversion and custom channel weights
- Text, PNG, HTML and ANSI output files
"""

import logging
import sys
from typing import List, Optional

from PIL import Image

from ascii_rasterizer import (
    AnsiColorFormatter,
    AsciiArtwork,
    AsciiRasterizer,
    ChannelWeights,
    CharacterSet,
    ColorMode,
    ConversionError,
    HtmlFormatter,
    RasterConfig,
    RenderingUnavailable,
    Resample,
    load_bitmap,
)


LOG = logging.getLogger("ascii_rasterizer")


def setup_logging(verbose: bool, log_path: Optional[str] = None) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    LOG.setLevel(level)

    handlers: List[logging.Handler] = []

    sh = logging.StreamHandler(sys.stderr)
    sh.setLevel(level)
    sh.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    handlers.append(sh)

    if log_path:
        fh = logging.FileHandler(log_path, encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s: %(message)s"))
        handlers.append(fh)

    LOG.handlers[:] = handlers
    LOG.propagate = False


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================

def image_to_ascii(image: Image.Image,
                   width: int = 100,
                   charset: str = 'simple',
                   colored: bool = False,
                   invert: bool = False,
                   **kwargs) -> AsciiArtwork:
    """
    Convenience function to convert an image to ASCII art.

    Args:
        image: PIL Image
        width: Output width in characters
        charset: 'simple', 'complex' or a custom ramp
        colored: Color glyphs with the sampled pixel color
        invert: Invert brightness
        **kwargs: Additional RasterConfig options

    Returns:
        AsciiArtwork
    """
    if charset in ('simple', 'complex'):
        charset = CharacterSet.get_preset(charset)

    config = RasterConfig(
        width=width,
        charset=charset,
        color_mode=ColorMode.SAMPLED if colored else ColorMode.MONOCHROME,
        invert=invert,
        **kwargs
    )
    return AsciiRasterizer(config).convert(image)


def save_text(artwork: AsciiArtwork, output_path: str) -> None:
    """Save the plain-text art."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(artwork.text)


def save_png(artwork: AsciiArtwork, output_path: str = 'ascii-art.png') -> None:
    """Save the rendered bitmap as PNG."""
    with open(output_path, 'wb') as f:
        f.write(artwork.to_png())


def save_html(artwork: AsciiArtwork, output_path: str) -> None:
    """Save the art as an HTML page with colored spans."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(HtmlFormatter.format_artwork(artwork))


def save_ansi(artwork: AsciiArtwork, output_path: str, color_mode: str = '24bit') -> None:
    """Save the art with ANSI color codes."""
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(AnsiColorFormatter.format_artwork(artwork, color_mode=color_mode))


# =============================================================================
# COMMAND LINE INTERFACE
# =============================================================================

def create_argument_parser():
    """Create command line argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog='ascii-rasterizer',
        description='Convert images to ASCII art',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s image.png                          # Basic conversion
  %(prog)s image.png -w 80                    # Set width to 80 chars
  %(prog)s image.png --complex -i             # Long ramp, inverted
  %(prog)s image.png -c -o art.png            # Colored glyphs, rendered bitmap
  %(prog)s image.png --weights 33 34 33 --percent
        """
    )

    # Input/Output
    parser.add_argument('input', help='Input image file')
    parser.add_argument('-o', '--output', help='Output file (txt, png, html or ansi)')
    parser.add_argument('--data-uri', action='store_true',
                        help='Print the rendered bitmap as a data URI')

    # Size
    parser.add_argument('-w', '--width', type=int, default=100, help='Output width in characters')

    # Character set options
    ramp = parser.add_mutually_exclusive_group()
    ramp.add_argument('--complex', action='store_true', help='Use the long character ramp')
    ramp.add_argument('--charset', help='Custom ramp, sparse to dense')
    parser.add_argument('-i', '--invert', action='store_true', help='Invert brightness')

    # Color options
    parser.add_argument('-c', '--colored', action='store_true',
                        help='Color glyphs with the sampled pixel color')
    parser.add_argument('--fg', default='black', help='Glyph color in monochrome mode')
    parser.add_argument('--bg', default='white', help='Background color')
    parser.add_argument('--color-mode', choices=['24bit', '256'], default='24bit',
                        help='Terminal color mode')

    # Brightness options
    parser.add_argument('--weights', type=float, nargs=3, metavar=('R', 'G', 'B'),
                        help='Channel weights, summing to 1 (or 100 with --percent)')
    parser.add_argument('--percent', action='store_true',
                        help='Read --weights as whole percentages')
    parser.add_argument('--nearest', action='store_true',
                        help='Nearest-neighbour instead of bilinear downsampling')
    parser.add_argument('--font', help='TrueType font for the rendered bitmap')

    # Other options
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')
    parser.add_argument('--log-file', help='Also write debug logs to this file')

    return parser


def build_config(args) -> RasterConfig:
    """Turn parsed arguments into a RasterConfig."""
    if args.charset:
        charset = args.charset
    else:
        charset = CharacterSet.COMPLEX if args.complex else CharacterSet.SIMPLE

    weights = ChannelWeights()
    if args.weights:
        red, green, blue = args.weights
        if args.percent:
            weights = ChannelWeights.from_percentages(int(red), int(green), int(blue))
        else:
            weights = ChannelWeights(red, green, blue)

    return RasterConfig(
        width=args.width,
        color_mode=ColorMode.SAMPLED if args.colored else ColorMode.MONOCHROME,
        invert=args.invert,
        charset=charset,
        foreground=args.fg,
        background=args.bg,
        weights=weights,
        resample=Resample.NEAREST if args.nearest else Resample.BILINEAR,
        font_path=args.font,
    )


def write_output(artwork: AsciiArtwork, output_path: str, color_mode: str) -> None:
    ext = output_path.lower().rsplit('.', 1)[-1]
    if ext == 'png':
        save_png(artwork, output_path)
    elif ext in ('html', 'htm'):
        save_html(artwork, output_path)
    elif ext == 'ansi':
        save_ansi(artwork, output_path, color_mode)
    else:
        save_text(artwork, output_path)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    try:
        config = build_config(args)
        image = load_bitmap(args.input)
        LOG.info("Loaded image: %s, size %s, mode %s", args.input, image.size, image.mode)
        artwork = AsciiRasterizer(config).convert(image)
    except RenderingUnavailable as e:
        print(f"Rendering unavailable: {e}", file=sys.stderr)
        return 2
    except ConversionError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    LOG.info("Output size: %dx%d characters", artwork.columns, artwork.rows)

    if args.output:
        try:
            write_output(artwork, args.output, args.color_mode)
        except OSError as e:
            print(f"Error writing {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"Saved to {args.output}")
    elif args.colored:
        print(AnsiColorFormatter.format_artwork(artwork, color_mode=args.color_mode))
    else:
        sys.stdout.write(artwork.text)

    if args.data_uri:
        print(artwork.data_uri)

    return 0


# =============================================================================
# ENTRY POINT
# =============================================================================

if __name__ == '__main__':
    sys.exit(main())
