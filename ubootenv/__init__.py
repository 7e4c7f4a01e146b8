from .errors import (
    CapacityExceededError,
    ChecksumMismatchError,
    MalformedEntryError,
    MalformedLineError,
    MissingTerminatorError,
    PreconditionViolation,
    SizeMismatchError,
    UBootEnvError,
)
from .store import Env, create_env_file
from .text_import import import_text

__all__ = [
    'CapacityExceededError',
    'ChecksumMismatchError',
    'Env',
    'MalformedEntryError',
    'MalformedLineError',
    'MissingTerminatorError',
    'PreconditionViolation',
    'SizeMismatchError',
    'UBootEnvError',
    'create_env_file',
    'import_text',
]
