"""
Command-line entry point: process an FNOL file or a sample claim and print the JSON output.
Usage: python -m fnol_claims claim.pdf
       python -m fnol_claims --sample sample-auto-collision
"""

import argparse
import logging
import os
import sys

from .documents import extract_text_from_file
from .errors import UnsupportedInputError
from .output_format import to_json
from .processor import process_sample, process_text
from .samples import SAMPLE_FNOL_DATA, SAMPLE_LABELS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fnol_claims",
        description="Extract, validate and route a First Notice of Loss document.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("file", nargs="?", help="PDF or TXT FNOL document")
    source.add_argument("--sample", choices=list(SAMPLE_FNOL_DATA), help="process a sample claim")
    source.add_argument("--list-samples", action="store_true", help="list sample claims and exit")
    return parser


def main(argv=None) -> int:
    logging.basicConfig(
        level=os.environ.get("FNOL_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    args = build_parser().parse_args(argv)

    if args.list_samples:
        for name, label in SAMPLE_LABELS.items():
            print(f"{name}\t{label}")
        return 0

    if args.sample:
        output = process_sample(args.sample)
    else:
        try:
            output = process_text(extract_text_from_file(args.file))
        except UnsupportedInputError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    print(to_json(output))
    return 0


if __name__ == "__main__":
    sys.exit(main())
