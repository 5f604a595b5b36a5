#!/usr/bin/env python3
'''
Print the content of a pquads file as N-Quads.
'''
import logging
import sys
import os

from pquads.convert import load_dataset


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <input.pq>')
    sys.exit(1)


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    dataset = load_dataset(sys.argv[1])

    print(dataset.serialize(format='nquads'))
