#!/usr/bin/env python3
import sys, logging
from .explain import explain

def main(argv=None):
    logging.basicConfig(level=logging.WARNING, format='%(levelname)s: %(message)s')
    for token in (sys.argv[1:] if argv is None else argv):  # not argparse: '-96.125' and '-inf' are values, not options
        for line in explain(token): print(line)
    return 0

if __name__ == '__main__': sys.exit(main())
