#!/usr/bin/env python3
"""A wrapper script for building the pass-2 transcript database. Reads DATA_DIR, GENOME_RELEASE and CDOT_FILENAME from
the environment."""

import argparse
import logging
import sys

from txdb_build import pipeline
from txdb_build.exceptions import PipelineError

logger = logging.getLogger('build_tx_db_pass2')

parser = argparse.ArgumentParser(description=__doc__)
parser.add_argument(
    '--gene-symbols-file', required=False,
    help='YAML file with a gene_symbols list, or a text file with whitespace-separated symbols. '
         'Defaults to the list bundled with the package'
)
parser.add_argument('--mehari-bin', default=pipeline.MEHARI_BIN, help='mehari executable')
parser.add_argument('--zstd-bin', default=pipeline.ZSTD_BIN, help='zstd executable')
parser.add_argument(
    '--check', required=False, action='store_true',
    help='Only verify the checksum files of a previous run'
)


if __name__ == '__main__':
    args = parser.parse_args()
    try:
        ok = pipeline.main(args.gene_symbols_file, args.mehari_bin, args.zstd_bin, check_only=args.check)
    except PipelineError as e:
        logger.error(e)
        sys.exit(1)
    sys.exit(0 if ok else 1)
