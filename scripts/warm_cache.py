#!/usr/bin/env python3
"""CS2 Crosshair - Render Cache Warmer"""

import sys
import argparse
import logging
from pathlib import Path

# Add parent directory to path to import from cs2_crosshair
sys.path.insert(0, str(Path(__file__).parent.parent))

from cs2_crosshair import DecodeError
from cs2_crosshair.models.settings_manager import ConfigurationError, SettingsManager


def main():
    parser = argparse.ArgumentParser(
        description="Render every share code listed in a file into the render cache",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python warm_cache.py codes.txt                       # One share code per line
  python warm_cache.py codes.txt --settings config     # Custom settings directory
  python warm_cache.py codes.txt --purge               # Drop expired entries first

Blank lines and lines starting with '#' are ignored.
        """
    )

    parser.add_argument("codes_file", help="Text file with one share code per line")
    parser.add_argument("--settings", default="settings",
                        help="Settings directory (default: settings)")
    parser.add_argument("--purge", action="store_true", help="Purge expired cache entries first")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")

    args = parser.parse_args()

    settings = SettingsManager(args.settings)
    try:
        level = logging.DEBUG if args.verbose else settings.get_log_level()
        cache = settings.create_render_cache()
    except ConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    logging.basicConfig(level=level, format='%(asctime)s - %(levelname)s - %(message)s')
    logger = logging.getLogger("warm_cache")

    codes_file = Path(args.codes_file)
    if not codes_file.exists():
        print(f"Error: Codes file '{codes_file}' does not exist.")
        sys.exit(1)

    print("CS2 Crosshair - Render Cache Warmer")
    print("=" * 50)
    print(f"Codes file:       {codes_file}")
    print(f"Cache directory:  {cache.directory}")
    print(f"Canvas size:      {cache.canvas_size}")

    if args.purge:
        print(f"Purged:           {cache.purge_expired()} expired entries")

    rendered = 0
    failed = 0
    for line in codes_file.read_text(encoding='utf-8').splitlines():
        code = line.strip()
        if not code or code.startswith('#'):
            continue
        try:
            cache.get_or_render(code)
            rendered += 1
        except DecodeError as e:
            logger.warning(f"Skipping {code}: {type(e).__name__}: {e}")
            failed += 1

    print(f"\n✅ Cached {rendered} crosshairs ({failed} failed)")
    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
