#!/usr/bin/env python3
'''
Convert an N-Quads file into a pquads file.

 $ nq2pq.py dump.nq dump.pq --strict
'''
import logging
import sys
import os

from rdflib import Dataset

from pquads import Options
from pquads.convert import dump_dataset


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print(f'usage: {progname} <input.nq> <output.pq> [--full] [--strict]')
    sys.exit(1)


if __name__ == '__main__':
    args = [_ for _ in sys.argv[1:] if not _.startswith('--')]
    flags = [_ for _ in sys.argv[1:] if _.startswith('--')]

    if len(args) != 2 or set(flags) - {'--full', '--strict'}:
        usage(sys.argv[0])

    path_input, path_output = args

    dataset = Dataset()
    dataset.parse(path_input, format='nquads')

    options = Options(full='--full' in flags, strict='--strict' in flags)

    count = dump_dataset(dataset, path_output, options)

    print(f'{count} quads written to {path_output}')
