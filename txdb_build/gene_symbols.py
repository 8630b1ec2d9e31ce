import logging
import os

import yaml

from txdb_build.exceptions import GeneSymbolsFormatError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

DEFAULT_GENE_SYMBOLS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'resources', 'gene_symbols.yml')
GENE_SYMBOLS_FLAG = '--gene-symbols'


def parse_gene_symbols(text):
    """Splits whitespace-delimited text into gene symbols, preserving their order. Symbols are not validated; mehari is
    the authority on which of them it knows."""
    return text.split()


def load_gene_symbols(path=None):
    """Loads an ordered list of gene symbols. YAML files are expected to contain a top-level `gene_symbols` list, any
    other file is read as whitespace-delimited text. Without a path, the list bundled with the package is used."""
    if path is None:
        path = DEFAULT_GENE_SYMBOLS_FILE
    with open(path, 'rt') as f:
        if path.endswith(('.yml', '.yaml')):
            # BaseLoader keeps every scalar as written, so symbols such as NO or 1.10 are not turned into other types.
            data = yaml.load(f, Loader=yaml.BaseLoader) or {}
            if not isinstance(data, dict):
                raise GeneSymbolsFormatError(f'{path} must be a mapping with a `gene_symbols:` key')
            symbols = data.get('gene_symbols') or []
            if not isinstance(symbols, list) or not all(isinstance(symbol, str) for symbol in symbols):
                raise GeneSymbolsFormatError(f'`gene_symbols:` in {path} must be a list of symbols')
        else:
            symbols = parse_gene_symbols(f.read())
    logger.info(f'Loaded {len(symbols)} gene symbols from {path}')
    return symbols


def gene_symbol_flags(symbols):
    return [f'{GENE_SYMBOLS_FLAG}={symbol}' for symbol in symbols]
