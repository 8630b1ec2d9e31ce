import logging
import os
from dataclasses import dataclass

from txdb_build.checksum import CHECKSUM_SUFFIX
from txdb_build.exceptions import ConfigurationError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

REQUIRED_VARIABLES = ('DATA_DIR', 'GENOME_RELEASE', 'CDOT_FILENAME')

OUTPUT_SUBDIR = 'pass-2'
ARTIFACT_NAME = 'txs.bin.zst'
REPORT_SUFFIX = '.report'


@dataclass(frozen=True)
class ArtifactPaths:
    """Locations of everything read or written by one build, derived from a PipelineConfig."""
    output_dir: str
    artifact: str
    artifact_checksum: str
    report: str
    report_checksum: str
    seqrepo_instance: str
    cdot_json: str


@dataclass(frozen=True)
class PipelineConfig:
    data_dir: str
    genome_release: str
    cdot_filename: str

    @classmethod
    def from_environment(cls, environ=None):
        """Reads the configuration from environment variables. All missing or empty variables are reported at once,
        and nothing else is done if any of them is absent."""
        if environ is None:
            environ = os.environ
        missing = [name for name in REQUIRED_VARIABLES if not environ.get(name)]
        if missing:
            raise ConfigurationError(missing)
        return cls(data_dir=environ['DATA_DIR'], genome_release=environ['GENOME_RELEASE'],
                   cdot_filename=environ['CDOT_FILENAME'])

    @property
    def cdot_json_path(self):
        return os.path.join(self.data_dir, 'tmp', self.genome_release, self.cdot_filename)

    def artifact_paths(self):
        output_dir = os.path.join(self.data_dir, OUTPUT_SUBDIR)
        artifact = os.path.join(output_dir, ARTIFACT_NAME)
        report = artifact + REPORT_SUFFIX
        return ArtifactPaths(
            output_dir=output_dir,
            artifact=artifact,
            artifact_checksum=artifact + CHECKSUM_SUFFIX,
            report=report,
            report_checksum=report + CHECKSUM_SUFFIX,
            seqrepo_instance=os.path.join(self.data_dir, 'seqrepo', 'master'),
            cdot_json=self.cdot_json_path,
        )


def ensure_output_dir(paths: ArtifactPaths):
    """Creates the output directory if it does not exist yet."""
    os.makedirs(paths.output_dir, exist_ok=True)
    logger.info(f'Output directory {paths.output_dir} is ready')
