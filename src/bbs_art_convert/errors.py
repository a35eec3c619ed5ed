"""
Error hierarchy for bbs-art-convert.

ConvertError (base)
├── InvalidOptionError - option value outside its allowed range
├── InputNotFoundError - input path does not exist
├── InputUnreadableError - input exists but cannot be opened or stat'ed
├── MappingError - input could not be memory-mapped
├── MalformedRecordError - SAUCE geometry disagrees with the file (recoverable)
├── RendererUnavailableError - no renderer registered for a format
└── RenderFailedError - renderer raised, reported failure, or wrote nothing

Every fatal error carries the process exit code the CLI should use.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Process exit statuses."""
    SUCCESS = 0
    INVALID_OPTION = 1
    # 2 is click's own usage error status.
    INPUT_NOT_FOUND = 3
    INPUT_UNREADABLE = 4
    MAPPING_FAILED = 5
    RENDERER_UNAVAILABLE = 6
    RENDER_FAILED = 7
    FAILURE = 8


class ConvertError(Exception):
    """Base exception for all conversion errors."""
    exit_code: ExitCode = ExitCode.FAILURE


class InvalidOptionError(ConvertError):
    """An option value failed validation."""
    exit_code = ExitCode.INVALID_OPTION

    def __init__(self, option: str, message: str):
        self.option = option
        super().__init__(message)


class InputNotFoundError(ConvertError):
    exit_code = ExitCode.INPUT_NOT_FOUND

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File {path} not found.")


class InputUnreadableError(ConvertError):
    exit_code = ExitCode.INPUT_UNREADABLE

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"File error: {path}: {reason}")


class MappingError(ConvertError):
    exit_code = ExitCode.MAPPING_FAILED

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Memory error: {path}: {reason}")


class MalformedRecordError(ConvertError):
    """
    The SAUCE record claims more trailing metadata than the file holds.

    Not fatal: callers treat the file as having no usable record.
    """

    def __init__(self, message: str, file_size: int = 0, metadata_size: int = 0):
        self.file_size = file_size
        self.metadata_size = metadata_size
        super().__init__(message)


class RendererUnavailableError(ConvertError):
    exit_code = ExitCode.RENDERER_UNAVAILABLE

    def __init__(self, format_name: str):
        self.format_name = format_name
        super().__init__(f"No renderer installed for {format_name} files.")


class RenderFailedError(ConvertError):
    exit_code = ExitCode.RENDER_FAILED


class RenderError(Exception):
    """Raised by renderer implementations to signal a failed render."""
