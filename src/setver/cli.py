import argparse
import logging
import sys

from logzero import logger

from setver.codec import IntegralternativeOverflowError, string_to_bytes, bytes_to_integer
from setver.comparator import setver_ordering
from setver.objects.utils import natural_number
from setver.objects.version import format_version
from setver.parser.parser import SetVerParseError, parse


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Work with SetVer versions, i.e., versions that are hereditarily finite sets')
    parser.add_argument('--debug', '-d', action='store_true', help='debug mode')
    subparsers = parser.add_subparsers(dest='command', required=True)

    represent = subparsers.add_parser('represent', help='show the alternative representations of a version')
    represent.add_argument('version', type=str, help='the version, "-" to read it from stdin')

    number = subparsers.add_parser('number', help='convert a natural number to a version')
    number.add_argument('number', type=int, help='a non-negative integer')

    compare = subparsers.add_parser('compare', help='compare two versions, 0 for older, 1 for equal, '
                                    'inf for newer and nan for unrelated')
    compare.add_argument('left', type=str, help='the first version, "-" to read it from stdin')
    compare.add_argument('right', type=str, help='the second version, "-" to read it from stdin')
    return parser.parse_args(argv)


def read_version(text: str) -> str:
    if text == '-':
        return sys.stdin.readline().strip()
    return text


def integralternative_str(text: str) -> str:
    data = string_to_bytes(text)
    try:
        return str(bytes_to_integer(data))
    except IntegralternativeOverflowError as e:
        logger.warning(f'{e} Showing the bytes instead.')
        return '0x' + data.hex()


def represent(version: str) -> str:
    canonicalized = format_version(parse(version))
    original_width = max(len(version), len('direct'))
    canonical_width = max(len(canonicalized), len('canonicalized'))
    rows = [
        ('', 'direct', 'canonicalized'),
        ('set representation', version, canonicalized),
        ('integralternative', integralternative_str(version), integralternative_str(canonicalized)),
    ]
    return '\n'.join(
        f'{title:<20}{direct:>{original_width}} {canonical:>{canonical_width}}'
        for title, direct, canonical in rows
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    if args.debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(logging.INFO)
    try:
        if args.command == 'represent':
            version = read_version(args.version)
            logger.info(f'Version: {version}')
            print(represent(version))
        elif args.command == 'number':
            logger.info(f'Number: {args.number}')
            print(natural_number(args.number))
        elif args.command == 'compare':
            left, right = read_version(args.left), read_version(args.right)
            logger.info(f'Comparing {left} with {right}')
            print(f'{setver_ordering(parse(left), parse(right)):g}')
    except (SetVerParseError, ValueError) as e:
        logger.error(f'Invalid input: {e}')
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
