"""Command line interface: compute the covering edges of a record file, or of
a canned or random debug corpus, and write them to a file.

Examples::

    hasse-cover -o edges.txt on records.txt
    hasse-cover -o edges.txt debug run sample
    hasse-cover -o edges.txt --representation sorted debug generate 20 1000
"""

import argparse
import logging
import sys
from time import perf_counter
from typing import Iterable, Optional, Sequence

from sklearn_hasse import datasets
from sklearn_hasse.concrete import REPRESENTATIONS
from sklearn_hasse.covering import HasseEstimator
from sklearn_hasse.util import RecordParseError, read_records, write_edges

logger = logging.getLogger('sklearn_hasse.cli')

DEBUG_CORPORA = {
    'one-to4': datasets.load_one_to_four,
    'sample': datasets.load_sample,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hasse-cover',
        description="Find, for every set in a corpus, its minimal-length "
                    "supersets in the corpus.")
    parser.add_argument('-o', dest='out_file', required=True,
                        help="Path to the output file from the program")
    parser.add_argument('--representation', default='bitset',
                        choices=sorted(REPRESENTATIONS),
                        help="Set representation (default: %(default)s)")
    parser.add_argument('--no-progress', dest='progress',
                        action='store_false', help="Hide the progress bar")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true')
    verbosity.add_argument('-q', '--quiet', action='store_true')
    commands = parser.add_subparsers(dest='command', required=True)

    on = commands.add_parser('on', help="Run the program on a file")
    on.add_argument('in_file', help="Path to the input file")

    debug = commands.add_parser('debug', help="Run the program in debug mode")
    modes = debug.add_subparsers(dest='mode', required=True)
    run = modes.add_parser('run', help="Run on a pre-programmed corpus")
    run.add_argument('corpus', choices=sorted(DEBUG_CORPORA))
    generate = modes.add_parser('generate', help="Run on a random corpus")
    generate.add_argument('length', type=int, help="Maximal record length")
    generate.add_argument('entries', type=int, help="Number of records")
    generate.add_argument('--seed', type=int, default=None,
                          help="Random seed")
    return parser


def load_records(args: argparse.Namespace) -> Iterable:
    """:return: The records selected by the parsed command line `args`."""
    if args.command == 'on':
        return read_records(args.in_file)
    if args.mode == 'run':
        return DEBUG_CORPORA[args.corpus]()
    return datasets.make_random_records(args.length, args.entries,
                                        random_state=args.seed)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=(logging.DEBUG if args.verbose
               else logging.WARNING if args.quiet
               else logging.INFO),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s')

    estimator = HasseEstimator(representation=args.representation,
                               progress=args.progress and not args.quiet)
    try:
        then = perf_counter()
        estimator.fit(load_records(args))
        logger.info("Finished crunching %d sets, took %.0fms. Writing %d "
                    "edges.", estimator.n_sets_,
                    (perf_counter() - then) * 1000, len(estimator.edges_))
        then = perf_counter()
        write_edges(estimator.edges_, args.out_file)
        logger.info("Finished! (took %.0fms)", (perf_counter() - then) * 1000)
    except RecordParseError as e:
        logger.error("%s", e)
        return 1
    except (OSError, ValueError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
