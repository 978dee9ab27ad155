#!/usr/bin/env python3
"""
rle_file.py

Run-length encode or decode a .txt file in place.

  rle_file.py -e notes.txt    # encode
  rle_file.py -d notes.txt    # decode

Encoded format (see hashrle.codec):
  aaa         -> 3a
  aaaaaaaaaa  -> #10a   (runs of 10+ get a leading '#')
  ###         -> 3##    ('#' runs get a trailing '#')
  111aa       -> 31#2a  (a run after a digit run gets a leading '#')

Exit codes: 0 ok, 1 I/O or malformed encoding, 2 bad arguments.
"""

from __future__ import annotations
import argparse
import sys
from typing import List, Optional

from hashrle.errors import ConfigurationError, MalformedEncodingError
from hashrle.runners.file_job import CodecJobOptions, run_file_job


def parse_args(argv: List[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Run-length encode or decode a .txt file in place.")
    mx = p.add_mutually_exclusive_group(required=True)
    mx.add_argument("-e", "--encode", dest="mode", action="store_const", const="encode", help="Encode the file")
    mx.add_argument("-d", "--decode", dest="mode", action="store_const", const="decode", help="Decode the file")
    p.add_argument("path", help="Path to a .txt file (rewritten in place)")
    p.add_argument("--no-report", dest="report", action="store_false", help="Do not print the compression report")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    try:
        opts = CodecJobOptions(mode=args.mode, path=args.path, report=args.report)
    except ConfigurationError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 2

    try:
        report = run_file_job(opts)
    except MalformedEncodingError as e:
        print(f"[error] {e}", file=sys.stderr)
        return 1
    except UnicodeDecodeError:
        print(f"[error] File '{opts.path}' is not UTF-8 text", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"[error] Error opening file '{opts.path}' - {e.strerror or e}", file=sys.stderr)
        return 1

    if opts.report:
        print(report.format())
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
