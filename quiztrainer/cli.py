#!/usr/bin/env python3
"""
Command line entry point for the quiz trainer.
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import QuizCollection, __version__
from .config import load_config
from .errors import QuizError
from .output import ConsolePrompter, Presenter
from .quiz import RandomIndexSource
from .shell import QuizShell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog='quiztrainer',
                                 description='Interactive question/answer quiz trainer')
    ap.add_argument('--store', default=None, help='JSON file holding the quizzes')
    ap.add_argument('--config', default=None, help='JSON config file')
    ap.add_argument('--seed', type=int, default=None, help='Seed for reproducible play order')
    ap.add_argument('--no-color', action='store_true', help='Disable colored output')
    ap.add_argument('--import', dest='import_file', default=None,
                    help='Add quizzes from a CSV or spreadsheet file before starting')
    ap.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    ap.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, ValueError) as e:
        print(f"Could not load config: {e}", file=sys.stderr)
        return 1

    if args.store is not None:
        config.store_path = args.store
    if args.seed is not None:
        config.seed = args.seed
    if args.no_color:
        config.use_color = False

    level = logging.DEBUG if args.verbose else getattr(logging, str(config.log_level).upper(), logging.WARNING)
    logging.basicConfig(level=level, format='%(asctime)s %(name)s %(levelname)s: %(message)s')

    try:
        store = QuizCollection.load(config.store_path, defaults=config.default_quizzes)
        if args.import_file:
            store.load_from_spreadsheet(args.import_file)
    except (QuizError, OSError, ValueError, ImportError) as e:
        print(f"Could not load quizzes: {e}", file=sys.stderr)
        return 1

    presenter = Presenter(use_color=config.use_color)
    prompter = ConsolePrompter(presenter)
    shell = QuizShell(store, presenter, prompter, config, RandomIndexSource(config.seed))

    logger.debug("Starting shell with %d quizzes from %s", len(store), config.store_path)
    shell.run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
