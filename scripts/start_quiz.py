#!/usr/bin/env python3

import sys

from quiztrainer.cli import main

if __name__ == "__main__":
    sys.exit(main(["--store", "./data/quizzes.json"] + sys.argv[1:]))
