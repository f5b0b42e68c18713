"""
Script for checking a trained model against labeled good and bad lines.

Usage: python3 evaluate.py [--model gib_model.npz] [--good data/good.txt] [--bad data/bad.txt]
                           [--csv scores.csv] [--plot scores.png] [--show_errors]
"""

import argparse
import logging
import sys

from gibberish_detector.constants import GOOD_TEXT_FILE, BAD_TEXT_FILE, MODEL_FILE
from gibberish_detector.errors import GibberishError
from gibberish_detector.evaluate import evaluate, summarize, plot_scores
from gibberish_detector.model import load_model
from gibberish_detector.utils import check_input, read_examples


def parse_args():
    parser = argparse.ArgumentParser()
    parser.add_argument("--model", default=MODEL_FILE)
    parser.add_argument("--good", default=GOOD_TEXT_FILE)
    parser.add_argument("--bad", default=BAD_TEXT_FILE)
    parser.add_argument("--csv", help="Write per-line scores to this CSV file")
    parser.add_argument("--plot", help="Save a histogram of the scores to this image file")
    parser.add_argument("--show_errors", action="store_true", help="Print every misclassified line")
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main():
    args = parse_args()
    logging.basicConfig(format="%(levelname)s - %(message)s",
                        level=logging.INFO if args.debug else logging.WARNING)

    try:
        model = load_model(args.model)
        check_input(args.good, "good")
        check_input(args.bad, "bad")
    except GibberishError as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)

    frame = evaluate(model, read_examples(args.good), read_examples(args.bad))
    summary = summarize(frame)

    print(f"Threshold: {model.threshold}")
    print()
    if args.show_errors:
        for row in frame[~frame["correct"]].itertuples():
            print(f"MISSED ({row.label}, score {row.score:.6f}): {row.text}")
        print()
    print(f"Good lines: {summary['good_total']}, accuracy {summary['good_accuracy']:.4f}")
    print(f"Bad lines: {summary['bad_total']}, accuracy {summary['bad_accuracy']:.4f}")
    print(f"Total: {int(frame['correct'].sum())}/{summary['total']} = {summary['accuracy']}")

    if args.csv:
        frame.to_csv(args.csv, index=False)
        print(f"Saved scores to {args.csv}")
    if args.plot:
        plot_scores(frame, model.threshold, args.plot)
        print(f"Saved plot to {args.plot}")


if __name__ == "__main__":
    main()
