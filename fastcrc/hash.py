#!/usr/bin/env python3
import os
import sys
import time
import argparse

from . import utility as util
from .variants import ALGORITHMS, crc_file

VERBOSITY = 0

# Display names for the checksum column
HASH_NAMES = {
    'crc32': 'CRC-32',
    'crc32c': 'CRC-32C',
}

def hash_main(argv=None):
    """Argument parsing and output for the file checksum command line tool.

    Params:
        argv - argument list to parse (defaults to sys.argv[1:])

    Returns:
        The process exit status: 0 if every file was checksummed, 1 otherwise.
    """
    global VERBOSITY

    # Handle argument parsing
    parser = argparse.ArgumentParser(prog='fastcrc')
    parser.add_argument('file', metavar='INFILE', nargs='+', default=[], help='file(s) to compute the checksum for')
    parser.add_argument('-a', '--algorithm', choices=sorted(ALGORITHMS), default='crc32', help='CRC variant to compute (default: %(default)s)')
    parser.add_argument('-v', '--verbosity', action='count', default=0, help='increase output verbosity')
    args = parser.parse_args(argv)

    VERBOSITY = args.verbosity

    algorithm = ALGORITHMS[args.algorithm]
    hash_name = HASH_NAMES[args.algorithm]
    status = 0

    # Loop through file list
    for inpath in args.file:
        if not os.path.isfile(inpath):
            print(f'{hash_name} error: {inpath} is not a regular file', file=sys.stderr)
            status = 1
            continue

        # Save start time and file size, then compute the checksum
        try:
            size = os.path.getsize(inpath)
            timediff = time.perf_counter()
            h = crc_file(inpath, algorithm)
        except OSError as e:
            print(f'{hash_name} error: {e}', file=sys.stderr)
            status = 1
            continue

        # Calculate elapsed time
        timediff = time.perf_counter() - timediff

        # Print to stdout
        out_str = f'{inpath} {util.size_fmt(size)}B : <{hash_name}> {hash_str(h)}'

        if VERBOSITY > 0:
            rate = size / timediff if timediff > 0 else 0
            out_str += ' [%.2f s (%sB/s)]' % (timediff, util.size_fmt(rate))

        print(out_str)

    return status


def hash_str(hash: int) -> str:
    """Convert a 32-bit checksum to a printable string.
    """
    return '0x%08x' % hash


def main():
    sys.exit(hash_main())
