"""
Train a gibberish model from a large text corpus and calibrate its threshold
on known good and bad lines.

Usage: python3 train.py [--big data/big.txt] [--good data/good.txt] [--bad data/bad.txt] [--out gib_model.npz]
"""

import argparse
import logging
import sys

from gibberish_detector.constants import BIG_TEXT_FILE, GOOD_TEXT_FILE, BAD_TEXT_FILE, MODEL_FILE
from gibberish_detector.errors import GibberishError
from gibberish_detector.trainer import train


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument("--big", default=BIG_TEXT_FILE, help="Large corpus of natural text")
    parser.add_argument("--good", default=GOOD_TEXT_FILE, help="Lines that must not be flagged")
    parser.add_argument("--bad", default=BAD_TEXT_FILE, help="Lines that must be flagged")
    parser.add_argument("--out", default=MODEL_FILE)
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(format="%(levelname)s - %(message)s",
                        level=logging.INFO if args.debug else logging.WARNING)

    try:
        ok = train(args.big, args.good, args.bad, args.out)
    except GibberishError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    if not ok:
        print("Training failed: the model can't tell the good lines from the bad ones.")
        sys.exit(1)
    print(f"Saved model to {args.out}")


if __name__ == "__main__":
    main()
