"""
Check whether a piece of text looks like gibberish.

Usage: python3 detect.py [--model gib_model.npz] [--raw] some text to check
"""

import argparse
import logging
import sys

from gibberish_detector.constants import MODEL_FILE
from gibberish_detector.detector import test as run_detector
from gibberish_detector.errors import GibberishError


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument("text", nargs='+')
    parser.add_argument("--model", default=MODEL_FILE)
    parser.add_argument("--raw", action="store_true", help="Print the score instead of the verdict")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(format="%(levelname)s - %(message)s",
                        level=logging.INFO if args.debug else logging.WARNING)

    text = ' '.join(args.text)
    try:
        result = run_detector(text, args.model, raw=args.raw)
    except GibberishError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    if args.raw:
        print(result)
    else:
        print("gibberish" if result else "ok")


if __name__ == "__main__":
    main()
