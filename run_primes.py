#!/usr/bin/env python3
"""
Command-line front end for primality tests and prime enumeration.

Usage:
    python run_primes.py --test 91
    python run_primes.py --list 30
    python run_primes.py --list 1000 --csv data/results/primes.csv
    python run_primes.py --nth 100
    python run_primes.py --nth 100 --config config/custom.yaml
"""

import argparse
import sys

from primality.config import load_config, resolve_dtype, setup_logging
from primality.nth_prime import ConvergenceError
from primality.report import list_terms, nth_term, test_candidate, write_primes_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Prime number tests and listings')
    mode = parser.add_mutually_exclusive_group(required=True)
    mode.add_argument('-t', '--test', type=int, metavar='N',
                      help='Report whether N is prime, composite or neither')
    mode.add_argument('-l', '--list', type=int, metavar='CEILING',
                      help='List every prime <= CEILING')
    mode.add_argument('-n', '--nth', type=int, metavar='INDEX',
                      help='Find the INDEX-th prime (1-based)')
    parser.add_argument('--csv', type=str, default=None,
                        help='With --list, also write the table to this CSV file')
    parser.add_argument('--config', type=str, default='config/default.yaml',
                        help='Path to config file')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log every sieve round')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.csv is not None and args.list is None:
        parser.error("--csv requires --list")

    config = load_config(args.config)
    setup_logging('DEBUG' if args.verbose else config['logging']['level'])

    try:
        if args.test is not None:
            print(test_candidate(args.test))

        elif args.list is not None:
            dtype = resolve_dtype(config['output']['dtype'])
            for line in list_terms(args.list, dtype):
                print(line)
            if args.csv is not None:
                write_primes_csv(args.list, args.csv, dtype)
                print(f"Table saved to {args.csv}", file=sys.stderr)

        else:
            settings = config['nth_prime']
            print(nth_term(args.nth,
                           floor=settings['floor'],
                           growth=settings['growth'],
                           max_rounds=settings['max_rounds']))

    except ConvergenceError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except (ValueError, TypeError, OverflowError) as e:
        parser.error(str(e))

    return 0


if __name__ == '__main__':
    sys.exit(main())
