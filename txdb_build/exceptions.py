class PipelineError(Exception):
    """Base class for all errors which abort a transcript database build."""


class ConfigurationError(PipelineError):
    """A required environment variable is unset or empty."""

    def __init__(self, missing_variables):
        self.missing_variables = list(missing_variables)
        super().__init__(f'Required environment variable(s) not set: {", ".join(self.missing_variables)}')


class ExternalToolError(PipelineError):
    """An external command could not be run or exited with a non-zero status."""

    def __init__(self, command, returncode=None, message=None):
        self.command = list(command)
        self.returncode = returncode
        if message is None:
            message = f'Command {self.command[0]} exited with status {returncode}'
        super().__init__(message)


class IntegrityError(PipelineError):
    """The produced database artifact could not be decompressed."""


class MissingFileError(PipelineError):
    """A file that should have been produced by an earlier step is absent."""

    def __init__(self, path):
        self.path = path
        super().__init__(f'Expected file does not exist: {path}')


class ChecksumFormatError(PipelineError):
    """A checksum file does not contain a `<digest>  <filename>` line."""


class GeneSymbolsFormatError(PipelineError):
    """A gene symbols file does not have the expected layout."""
