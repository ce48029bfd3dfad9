#!/usr/bin/env python3
"""
CS2 Crosshair - Main Entry Point

Renders a crosshair share code into a PNG preview.

Usage:
    python main.py CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB              # Write <code>.png
    python main.py CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB -o xhair.png # Custom output file
    python main.py CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB --size 256   # Larger preview
"""

import argparse
import logging
import sys
from pathlib import Path


def check_requirements():
    """Check if all required dependencies are installed."""
    missing_deps = []

    try:
        from PIL import Image
    except ImportError:
        missing_deps.append("Pillow")

    try:
        import numpy
    except ImportError:
        missing_deps.append("numpy")

    if missing_deps:
        print("❌ Missing required dependencies:")
        for dep in missing_deps:
            print(f"  - {dep}")
        print("\n💡 Install them with: pip install -e .")
        return False

    return True


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a CS2 crosshair share code into a PNG preview",
    )
    parser.add_argument("code", help="Crosshair share code (CSGO-xxxxx-xxxxx-xxxxx-xxxxx-xxxxx)")
    parser.add_argument("--output", "-o", help="Output PNG file (default: <code>.png)")
    parser.add_argument("--size", type=int, default=64, help="Canvas size in pixels (default: 64)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the crosshair renderer."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )

    if not check_requirements():
        return 1

    from cs2_crosshair import CrosshairError, decode, render
    from cs2_crosshair.utils.image_utils import decode_png, opaque_bbox

    try:
        settings = decode(args.code)
        png = render(settings, args.size)
    except CrosshairError as e:
        logging.error(f"Cannot render {args.code}: {e}")
        return 1

    output = Path(args.output) if args.output else Path(f"{args.code}.png")
    try:
        output.write_bytes(png)
    except OSError as e:
        logging.error(f"Cannot write {output}: {e}")
        return 1

    logging.debug(f"Decoded settings: {settings.to_dict()}")
    logging.debug(f"Drawn area: {opaque_bbox(decode_png(png))}")
    print(f"✓ Rendered {args.code} ({args.size}x{args.size}) to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
