class UBootEnvError(Exception):
    """Base class for recoverable environment store failures."""

class ChecksumMismatchError(UBootEnvError):
    def __init__(self, stored, computed):
        super().__init__(f'bad CRC: stored 0x{stored:08x} != computed 0x{computed:08x}')
        self.stored = stored
        self.computed = computed

class MalformedEntryError(UBootEnvError, ValueError):
    def __init__(self, entry, message=None):
        super().__init__(message or f'cannot parse entry {entry!r} as key=value pair')
        self.entry = entry

class MissingTerminatorError(MalformedEntryError):
    def __init__(self, payload_size):
        super().__init__(b'', f'no end-of-environment marker in {payload_size} byte payload')
        self.payload_size = payload_size

class MalformedLineError(UBootEnvError, ValueError):
    def __init__(self, line, lineno):
        super().__init__(f'invalid line {lineno}: {line!r}')
        self.line = line
        self.lineno = lineno

class CapacityExceededError(UBootEnvError, ValueError):
    def __init__(self, needed, capacity):
        super().__init__(f'environment data is too large: {needed} bytes > {capacity} bytes')
        self.needed = needed
        self.capacity = capacity

class SizeMismatchError(UBootEnvError):
    pass

class PreconditionViolation(RuntimeError):
    """
    A caller broke the store's contract (for instance an empty key).

    Not a UBootEnvError on purpose: it signals a bug in the caller, and
    handlers for storage errors must not swallow it.
    """
