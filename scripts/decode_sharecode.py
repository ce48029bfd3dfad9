#!/usr/bin/env python3
"""CS2 Crosshair - Share Code Decoder"""

import sys
import argparse
from pathlib import Path

# Add parent directory to path to import from cs2_crosshair
sys.path.insert(0, str(Path(__file__).parent.parent))

from cs2_crosshair import DecodeError, decode, encode
from cs2_crosshair.utils.json_utils import dumps


def main():
    parser = argparse.ArgumentParser(
        description="Decode CS2 crosshair share codes and print their settings as JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python decode_sharecode.py CSGO-O4Jsi-V36wY-rTMGK-9w7qF-jQ8WB
  python decode_sharecode.py CODE1 CODE2 --canonical   # Also print the re-encoded code

Exit status is 1 if any code fails to decode.
        """
    )

    parser.add_argument("codes", nargs="+", help="Crosshair share codes")
    parser.add_argument("--canonical", action="store_true",
                        help="Include the canonical re-encoded share code in the output")

    args = parser.parse_args()

    results = {}
    failed = False
    for code in args.codes:
        try:
            settings = decode(code)
        except DecodeError as e:
            print(f"Error: {code}: {type(e).__name__}: {e}", file=sys.stderr)
            failed = True
            continue

        entry = settings.to_dict()
        if args.canonical:
            entry['canonical_code'] = encode(settings)
        results[code] = entry

    if results:
        print(dumps(results))

    sys.exit(1 if failed else 0)


if __name__ == "__main__":
    main()
