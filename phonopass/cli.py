#!/usr/bin/env python3
"""
phonopass CLI
=============
Command-line interface compatible with ``pwgen``.

Usage:
    phonopass                 # a screenful of 8 character passwords
    phonopass 12 5            # five 12 character passwords
    phonopass -sy 16 1        # one completely random password with symbols
    phonopass -B -H ~/.ssh/id_rsa#github.com 10 1
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from . import __version__
from .entropy import RandomSource, Sha1Random, get_rng, seeded_rng
from .exceptions import PhonopassError
from .generators.phoneme_generator import PhonemeGenerator
from .generators.random_generator import RandomGenerator
from .policy import Policy
from .settings import require_setting
from .ui import PasswordPrinter, configure_logging

logger = logging.getLogger(__name__)


# =============================================================================
# Utilities
# =============================================================================

class Output:
    """Handles CLI output."""

    def __init__(self, printer: PasswordPrinter):
        self.printer = printer

    def passwords(self, passwords: List[str], length: int):
        self.printer.print_passwords(passwords, length)

    def error(self, msg: str):
        print(f"Error: {msg}", file=sys.stderr)


@dataclass
class Request:
    """What to generate, after applying the pwgen defaults."""
    policy: Policy
    use_random: bool
    count: Optional[int]


def resolve_request(args) -> Request:
    """Turn parsed arguments into a policy and a generator choice.

    Short passwords leave too little room for the phoneme rules, so they
    use the random generator; very short ones drop the uppercase and digit
    requirements. Avoiding vowels or removing characters also needs the
    random generator.
    """
    length = args.length if args.length is not None else int(require_setting('defaults.length'))
    use_random = (
        args.secure
        or args.no_vowels
        or bool(args.remove_chars)
        or length < int(require_setting('defaults.min_phoneme_length'))
    )

    require_upper = args.uppers
    require_digit = args.digits
    if length <= 2:
        require_upper = False
    if length <= 1:
        require_digit = False

    policy = Policy(
        length=length,
        require_digit=require_digit,
        require_upper=require_upper,
        require_symbol=args.symbols,
        exclude_vowels=args.no_vowels,
        exclude_ambiguous=args.ambiguous,
        remove_chars=args.remove_chars or "",
    )
    return Request(policy=policy, use_random=use_random, count=args.count)


def build_rng(args) -> RandomSource:
    if args.sha1:
        return Sha1Random.from_argument(args.sha1)
    if args.seed is not None:
        return seeded_rng(args.seed)
    return get_rng()


# =============================================================================
# Main
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='phonopass',
        description='phonopass - pronounceable password generator',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s 12 5
  %(prog)s -sy 16 1
  %(prog)s -B -H ~/.ssh/id_rsa#github.com 10 1
"""
    )

    parser.add_argument('length', nargs='?', type=int, help='Password length (default: 8)')
    parser.add_argument('count', nargs='?', type=int, help='Number of passwords')

    parser.set_defaults(uppers=True, digits=True, columns=None)
    parser.add_argument('-c', '--capitalize', dest='uppers', action='store_true',
                        help='Include at least one capital letter in the password')
    parser.add_argument('-A', '--no-capitalize', dest='uppers', action='store_false',
                        help="Don't include capital letters in the password")
    parser.add_argument('-n', '--numerals', dest='digits', action='store_true',
                        help='Include at least one number in the password')
    parser.add_argument('-0', '--no-numerals', dest='digits', action='store_false',
                        help="Don't include numbers in the password")
    parser.add_argument('-y', '--symbols', action='store_true',
                        help='Include at least one special symbol in the password')
    parser.add_argument('-r', '--remove-chars', metavar='CHARS',
                        help='Remove characters from the set of characters to generate passwords')
    parser.add_argument('-s', '--secure', action='store_true',
                        help='Generate completely random passwords')
    parser.add_argument('-B', '--ambiguous', action='store_true',
                        help="Don't include ambiguous characters in the password")
    parser.add_argument('-v', '--no-vowels', action='store_true',
                        help='Do not use any vowels so as to avoid accidental nasty words')
    parser.add_argument('-C', dest='columns', action='store_true',
                        help='Print the generated passwords in columns')
    parser.add_argument('-1', dest='columns', action='store_false',
                        help="Don't print the generated passwords in columns")

    source = parser.add_mutually_exclusive_group()
    source.add_argument('-H', '--sha1', metavar='FILE#SEED',
                        help='Use sha1 hash of given file (plus optional #seed) as a (not so) random generator')
    source.add_argument('--seed', type=int,
                        help='Seed a pseudo random generator (reproducible, not secure)')

    parser.add_argument('--verbose', action='store_true', help='Show debug logging')
    parser.add_argument('--version', '-V', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None, printer: Optional[PasswordPrinter] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    out = Output(printer or PasswordPrinter(columns=args.columns))

    try:
        request = resolve_request(args)
        count = request.count
        if count is None:
            count = out.printer.default_count(request.policy.length,
                                              int(require_setting('defaults.rows')))
        if count <= 0:
            out.error("Invalid number of passwords.")
            return 1

        rng = build_rng(args)
        if request.use_random:
            generator = RandomGenerator(request.policy, rng=rng)
        else:
            generator = PhonemeGenerator(request.policy, rng=rng)
        logger.debug(f"Generating {count} passwords with {type(generator).__name__}: {request.policy}")

        out.passwords(generator.generate_many(count), request.policy.length)
    except KeyboardInterrupt:
        return 130
    except PhonopassError as e:
        out.error(str(e))
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
