import logging
import shlex
import subprocess

from txdb_build.exceptions import ExternalToolError

logging.basicConfig()
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def run_command(command, stdout=None):
    """Runs an external command to completion and returns its exit status.

    Args:
        command: argument list, the first element being the executable.
        stdout: passed through to subprocess; None inherits the parent's standard output, subprocess.DEVNULL discards
            it.

    Raises ExternalToolError if the executable cannot be started or exits with a non-zero status. There is no timeout:
    the command is allowed to run for as long as it needs.
    """
    logger.info(f'+ {shlex.join(command)}')
    try:
        result = subprocess.run(command, stdout=stdout)
    except OSError as e:
        raise ExternalToolError(command, message=f'Could not run {command[0]}: {e}') from e
    if result.returncode != 0:
        logger.error(f'{command[0]} exited with status {result.returncode}')
        raise ExternalToolError(command, result.returncode)
    return result.returncode
