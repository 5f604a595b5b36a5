#!/usr/bin/env python3
'''
Dump the header of a pquads file and count its quads without decoding them
(when the file is written in full mode).
'''
import logging
import sys
import os

from pquads import Reader, PQuadsError


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <pquads file>')
    sys.exit(1)


def count_quads(reader):
    count = 0
    while True:
        try:
            reader.skip_quad()
        except EOFError:
            return count
        count += 1


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    with Reader(sys.argv[1]) as reader:
        if reader.error is not None:
            print(f'not a valid pquads file: {reader.error}')
            sys.exit(1)

        print(f'''pquads header:
  Full:                              {reader.options.full}
  Strict:                            {reader.options.strict}''')

        try:
            count = count_quads(reader)
        except PQuadsError:
            logger.error('stream is corrupted', exc_info=True)
            sys.exit(1)

        print(f'''  Quads:                             {count}''')
