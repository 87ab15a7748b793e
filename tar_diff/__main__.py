"""
Command-line interface to the tar-diff module.
"""

import argparse
import logging
import pathlib as pl
import sys

from tar_diff import TarDiffer, TarDiffError, print_diff
from tar_diff.content_comparison import DEFAULT_CHUNK_SIZE


def positive_int(value: str) -> int:
    """
    Argument type for strictly positive integers.
    """
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f'{value} is not a positive integer')
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser('tar-diff', description='''Positional diff tool for tar
                                     archives.''')
    parser.add_argument('file1',
                        type=pl.Path,
                        metavar='FILE_1',
                        help='First tar archive.')
    parser.add_argument('file2',
                        type=pl.Path,
                        metavar='FILE_2',
                        help='Second tar archive.')
    parser.add_argument('--chunk-size',
                        type=positive_int,
                        default=DEFAULT_CHUNK_SIZE,
                        help='Number of bytes compared per step when checking entry contents.')
    parser.add_argument('--report-unpaired',
                        action='store_true',
                        help='Reports the trailing entries of the longer archive. By default the'
                             ' comparison silently stops at the end of the shorter archive.')
    parser.add_argument('--quiet', '-q',
                        action='store_true',
                        help='Only print a summary line if the archives differ.')
    parser.add_argument('--verbose', '-v',
                        action='store_true',
                        help='Print debug messages to stderr.')
    return parser


def main(argv=None) -> int:
    """
    Main method that handles the command line interface of tar-diff
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        stream=sys.stderr)

    differ = TarDiffer(chunk_size=args.chunk_size, report_unpaired=args.report_unpaired)
    try:
        tar_diff = differ.compute_diff(args.file1, args.file2)
    except TarDiffError as error:
        print(f'Error comparing tar files: {error}', file=sys.stderr)
        return 1

    print_diff(tar_diff, quiet=args.quiet)
    return 0


if __name__ == '__main__':
    sys.exit(main())
