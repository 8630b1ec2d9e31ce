"""Builders for the external command lines used by the pipeline. These functions do no I/O."""

from txdb_build.config import ArtifactPaths
from txdb_build.gene_symbols import gene_symbol_flags

MEHARI_BIN = 'mehari'
ZSTD_BIN = 'zstd'


def build_mehari_command(paths: ArtifactPaths, genome_release: str, symbols, mehari_bin=MEHARI_BIN):
    """Returns the argument list for building the transcript database restricted to the given gene symbols."""
    return [
        mehari_bin, 'db', 'create', 'txs',
        '--path-out', paths.artifact,
        '--path-seqrepo-instance', paths.seqrepo_instance,
        '--path-cdot-json', paths.cdot_json,
        '--genome-release', genome_release,
        *gene_symbol_flags(symbols),
    ]


def build_zstd_verify_command(artifact: str, zstd_bin=ZSTD_BIN):
    """Returns the argument list which decompresses the artifact to standard output."""
    return [zstd_bin, '-c', '-d', artifact]
