#!/usr/bin/env python3
"""Builds the pass-2 transcript database with mehari for a fixed set of gene symbols, checks that the result can be
decompressed and writes SHA-256 checksums for the database and its report.

Every step either succeeds or raises a PipelineError; the first error stops the run and no later step is attempted."""

import logging
import os
import subprocess

from txdb_build.checksum import verify_checksum_file, write_checksum_file
from txdb_build.commands import MEHARI_BIN, ZSTD_BIN, build_mehari_command, build_zstd_verify_command
from txdb_build.config import ArtifactPaths, PipelineConfig, ensure_output_dir
from txdb_build.exceptions import ExternalToolError, IntegrityError, MissingFileError
from txdb_build.gene_symbols import load_gene_symbols
from txdb_build.process import run_command

logging.basicConfig()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def build_database(config: PipelineConfig, paths: ArtifactPaths, gene_symbols, runner=run_command,
                   mehari_bin=MEHARI_BIN):
    runner(build_mehari_command(paths, config.genome_release, gene_symbols, mehari_bin=mehari_bin))
    logger.info(f'Transcript database written to {paths.artifact}')


def verify_artifact(paths: ArtifactPaths, runner=run_command, zstd_bin=ZSTD_BIN):
    """Ensures that the output can be decompressed. The decompressed stream itself is discarded."""
    try:
        runner(build_zstd_verify_command(paths.artifact, zstd_bin=zstd_bin), stdout=subprocess.DEVNULL)
    except ExternalToolError as e:
        raise IntegrityError(f'{paths.artifact} could not be decompressed: {e}') from e
    logger.info(f'{paths.artifact} decompressed successfully')


def check_expected_outputs(paths: ArtifactPaths):
    """The report is a side product of mehari. Both files must be present before anything is hashed, so that a
    missing report never leaves a lone database checksum behind."""
    for path in (paths.artifact, paths.report):
        if not os.path.isfile(path):
            raise MissingFileError(path)


def write_checksums(paths: ArtifactPaths):
    check_expected_outputs(paths)
    return [write_checksum_file(paths.artifact), write_checksum_file(paths.report)]


def run_pipeline(config: PipelineConfig, gene_symbols=None, runner=None, mehari_bin=MEHARI_BIN,
                 zstd_bin=ZSTD_BIN):
    """Runs all steps in order and returns the paths of the produced files.

    Args:
        config: resolved environment configuration.
        gene_symbols: ordered gene symbols to restrict the database to; the bundled list is used if not given.
        runner: callable which runs an argument list and raises ExternalToolError on failure; defaults to run_command.
        mehari_bin, zstd_bin: names or paths of the external executables.
    """
    if runner is None:
        runner = run_command
    if gene_symbols is None:
        gene_symbols = load_gene_symbols()
    paths = config.artifact_paths()

    ensure_output_dir(paths)
    build_database(config, paths, gene_symbols, runner=runner, mehari_bin=mehari_bin)
    verify_artifact(paths, runner=runner, zstd_bin=zstd_bin)
    write_checksums(paths)

    logger.info('Done')
    return paths


def check_outputs(config: PipelineConfig):
    """Verifies the checksum files of a previous run. Returns True if both match."""
    paths = config.artifact_paths()
    results = [verify_checksum_file(paths.artifact_checksum), verify_checksum_file(paths.report_checksum)]
    if all(results):
        logger.info(f'Checksums in {paths.output_dir} are valid')
    return all(results)


def main(gene_symbols_file=None, mehari_bin=MEHARI_BIN, zstd_bin=ZSTD_BIN, check_only=False):
    config = PipelineConfig.from_environment()
    if check_only:
        return check_outputs(config)
    run_pipeline(config, load_gene_symbols(gene_symbols_file), mehari_bin=mehari_bin, zstd_bin=zstd_bin)
    return True
