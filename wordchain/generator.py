#!/usr/bin/env python
import sys
import argparse
import logging
import markovify

from .chain import DEFAULT_PREFIX_LENGTH, Chain
from .errors import ChainError
from .random_source import RandomSource


def build_parser():
    parser = argparse.ArgumentParser(description="Generate text using a word level Markov chain")
    parser.add_argument("files", nargs="*", help="Training text files; stdin is read when none are given")
    parser.add_argument("--end", "-n", type=int, default=25, help="Number of words to generate (0 to skip generating)")
    parser.add_argument("--prefix-length", "-p", type=int, default=DEFAULT_PREFIX_LENGTH,
                        help="Number of words in each chain prefix")
    parser.add_argument("--start", help="Space separated prefix to start generating from")
    parser.add_argument("--load", metavar="CHAIN", help="Read a saved chain before training")
    parser.add_argument("--save", metavar="CHAIN", help="Write the chain to this file after training")
    parser.add_argument("--sentences", action="store_true",
                        help="Split training text into sentences and train each one separately")
    parser.add_argument("--seed", type=int, help="Seed the random generator for repeatable output")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debugging output to stderr")
    return parser


def train(chain, text, sentences=False):
    """Add one document to the chain, optionally sentence by sentence."""
    if not sentences:
        return chain.add_text(text, reset_window=True)
    count = 0
    for sentence in markovify.split_into_sentences(text):
        count += chain.add_text(sentence, reset_window=True)
    return count


def read_corpora(files):
    if not files:
        # Read the entire corpus from stdin
        return [sys.stdin.read()]
    corpora = []
    for name in files:
        with open(name, "r", encoding="utf-8") as fh:
            corpora.append(fh.read())
    return corpora


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if args.end < 0:
        parser.error("--end must not be negative")
    if args.prefix_length < 1:
        parser.error("--prefix-length must be at least 1")

    random_source = RandomSource(args.seed) if args.seed is not None else RandomSource()
    chain = Chain(args.prefix_length, random_source)

    try:
        if args.load:
            with open(args.load, "r", encoding="utf-8") as fh:
                report = chain.read(fh)
            if report.skipped:
                print(f"Skipped {len(report.skipped)} malformed line(s) in {args.load}", file=sys.stderr)
            if not chain.prefix_length():
                # Nothing parsed, keep the requested length for training
                chain.prefix_length(args.prefix_length)

        # Only stdin training is implicit; a loaded chain may be used as is
        if args.files or not args.load:
            corpora = read_corpora(args.files)
            if not any(corpus.strip() for corpus in corpora):
                sys.exit("Error: No input text provided.")
            for corpus in corpora:
                train(chain, corpus, args.sentences)

        if args.save:
            with open(args.save, "w", encoding="utf-8") as fh:
                chain.write(fh)

        if args.end:
            start = args.start.split() if args.start else None
            chain.generate(sys.stdout, args.end, start)
    except OSError as e:
        sys.exit(f"Error: {e}")
    except ChainError as e:
        sys.exit(f"Error generating text: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
