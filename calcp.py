#!/usr/bin/env python3

import argparse as arg
import logging
import sys
from pathlib import Path
import calc.repl as repl

def main(argv=None):
    parser = arg.ArgumentParser(
        prog='calcp',
        description='Parses arithmetic expressions, one per line, into syntax trees',
        epilog='Version 0.1.0')

    parser.add_argument('source', type=Path, nargs='?',
                        help='file of expressions, stdin if omitted')
    parser.add_argument('-f', '--format', dest='format', choices=sorted(repl.formatters),
                        default='tree')
    parser.add_argument('-q', '--quiet', dest='quiet', action='store_true', default=False)
    parser.add_argument('-v', '--verbose', dest='verbose', action='store_true', default=False)
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if args.source:
        with open(args.source, 'r') as src:
            return repl.run(src, sys.stdout, sys.stderr, args.format, args.quiet)
    return repl.run(sys.stdin, sys.stdout, sys.stderr, args.format, args.quiet)

if __name__ == '__main__':
    sys.exit(main())
