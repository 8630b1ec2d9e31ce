import hashlib
import logging
import os

from txdb_build.exceptions import ChecksumFormatError, MissingFileError

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)

CHECKSUM_SUFFIX = '.sha256'
CHUNK_SIZE = 1024 * 1024


def sha256_digest(path):
    if not os.path.isfile(path):
        raise MissingFileError(path)
    sha256 = hashlib.sha256()
    with open(path, 'rb') as f:
        for chunk in iter(lambda: f.read(CHUNK_SIZE), b''):
            sha256.update(chunk)
    return sha256.hexdigest()


def format_checksum_line(digest, filename):
    """Formats a digest the way sha256sum does in text mode: the digest, two spaces, and the file name."""
    return f'{digest}  {filename}\n'


def write_checksum_file(path):
    """Writes `<path>.sha256` next to the file, naming the file relative to its own directory. Returns the path of the
    checksum file."""
    digest = sha256_digest(path)
    checksum_path = path + CHECKSUM_SUFFIX
    with open(checksum_path, 'wt') as f:
        f.write(format_checksum_line(digest, os.path.basename(path)))
    logger.info(f'Wrote {checksum_path}')
    return checksum_path


def verify_checksum_file(checksum_path):
    """Checks a one-line checksum file against the file it names, resolved relative to the checksum file's directory.
    Returns True if the digests match."""
    if not os.path.isfile(checksum_path):
        raise MissingFileError(checksum_path)
    with open(checksum_path, 'rt') as f:
        fields = f.readline().rstrip('\n').split(maxsplit=1)
    if len(fields) != 2:
        raise ChecksumFormatError(f'{checksum_path} does not contain a "<digest>  <filename>" line')
    expected_digest, filename = fields
    # sha256sum marks binary mode with a leading asterisk.
    if filename.startswith('*'):
        filename = filename[1:]
    target = os.path.join(os.path.dirname(checksum_path), filename)
    actual_digest = sha256_digest(target)
    if actual_digest != expected_digest.lower():
        logger.error(f'Checksum mismatch for {target}: expected {expected_digest}, got {actual_digest}')
        return False
    return True
