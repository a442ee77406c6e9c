"""
Command line interface: print the values or the description of a spec.

    numseq "1,3,5,...,13"
    numseq --describe "2,6,18,..."
    numseq --limit 5 "1,3,9,..."
"""

import argparse
import itertools
import json
import logging
import math
import sys
from typing import Any, Dict, Iterable, List, Optional, TextIO

from . import __version__
from .api import numseq_iter, numseq_parse
from .lexer.errors import NumSeqError

DEFAULT_LIMIT = 100

EXIT_OK = 0
EXIT_PARSE_FAIL = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numseq",
        description="Expand a number sequence specification such as '1,3,5,...,13'.",
    )
    parser.add_argument("spec", help="number sequence, e.g. '1,3,5,...' or '10,8,6,...,0'")
    parser.add_argument(
        "--describe", action="store_true",
        help="print the parsed description as JSON instead of the values",
    )
    parser.add_argument(
        "--limit", type=int, default=DEFAULT_LIMIT,
        help=f"maximum number of values to print (default: {DEFAULT_LIMIT}, 0 for no limit)",
    )
    parser.add_argument(
        "--separator", default="\n",
        help="string printed between values (default: newline)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def format_number(value) -> str:
    """Print integral floats without the trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def json_number(value):
    """JSON has no infinity; spell infinite bounds the way specs do."""
    if isinstance(value, float) and math.isinf(value):
        return "Inf" if value > 0 else "-Inf"
    return value


def describe_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    result = dict(payload)
    for key in ("last_number", "inc"):
        if key in result:
            result[key] = json_number(result[key])
    return result


def write_values(values: Iterable, separator: str, stream: TextIO) -> None:
    """Write values as they are produced so unlimited sequences stream."""
    for i, value in enumerate(values):
        if i:
            stream.write(separator)
        stream.write(format_number(value))
        stream.flush()
    stream.write("\n")
    stream.flush()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.describe:
        response = numseq_parse(args.spec)
        if not response.ok:
            print(f"numseq: {response.message}", file=sys.stderr)
            return EXIT_PARSE_FAIL
        print(json.dumps({"status": response.status, "message": response.message,
                          "payload": describe_payload(response.payload)},
                         indent=2, allow_nan=False))
        return EXIT_OK

    try:
        values = numseq_iter(args.spec)
    except NumSeqError as e:
        print(f"numseq: {e.message}", file=sys.stderr)
        return EXIT_PARSE_FAIL

    if args.limit > 0:
        values = itertools.islice(values, args.limit)
    try:
        write_values(values, args.separator, sys.stdout)
    except BrokenPipeError:
        # Reader went away, e.g. `numseq --limit 0 "1,2,3,..." | head`
        return EXIT_OK
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
