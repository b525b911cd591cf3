#!/usr/bin/env python3
"""
Runs a Brainfuck program from a file (or from -c), with the program's input
taken from stdin and its output going to stdout.

Exit status is 0 when the program runs off its end, 1 when it faults while
running, and 2 when it can't be started at all (bad brackets, bad arguments).
"""
import argparse
import logging
import sys

import brainfuck

EXIT_SUCCESS = 0
EXIT_FAULT = 1
EXIT_STRUCTURE = 2


def make_parser():
    parser = argparse.ArgumentParser(prog='bf', description='Run a brainfuck program')

    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('program', nargs='?', type=argparse.FileType('rb'),
                        help='the brainfuck program to run')
    source.add_argument('--command', '-c', metavar='TEXT',
                        help='run TEXT as the program instead of reading a file')

    parser.add_argument('--eof-behaviour', '-e', dest='eof',
                        default=brainfuck.EOF_ZERO, choices=brainfuck.EOF_POLICIES,
                        help='behaviour on EOF (set to 0 or -1 or leave unchanged)')
    parser.add_argument('--input', '-i', metavar='FILE', type=argparse.FileType('rb'),
                        help='read program input from FILE instead of stdin')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='log interpreter diagnostics to stderr')
    return parser


def main(argv=None):
    args = make_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr,
                            format='%(levelname)5s %(name)s: %(message)s')

    if args.command is not None:
        text = args.command
    else:
        text = args.program.read()
        # "-" is stdin, which stays open for the program's own input.
        if args.program is not sys.stdin.buffer:
            args.program.close()

    instream = args.input if args.input is not None else sys.stdin.buffer
    channel = brainfuck.Channel(instream, sys.stdout.buffer)

    try:
        status = brainfuck.execute(text, channel, eof=args.eof)
    finally:
        if args.input is not None and args.input is not sys.stdin.buffer:
            args.input.close()

    if status == brainfuck.SUCCESS:
        return EXIT_SUCCESS

    sys.stderr.write('bf: %s\n' % status.message)
    if isinstance(status, brainfuck.StructuralError):
        return EXIT_STRUCTURE
    return EXIT_FAULT


if __name__ == '__main__':
    sys.exit(main())
