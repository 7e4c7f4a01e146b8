import logging
import os

from . import codec
from .errors import PreconditionViolation, SizeMismatchError
from .text_import import import_text

logger = logging.getLogger(__name__)

class Env:
    """
    A fixed-size U-Boot environment backed by a file or raw partition.

    The size covers header and payload and never changes after create or
    open; save always rewrites exactly that many bytes in place.
    """

    def __init__(self, path, size, data=None, header_size=codec.HEADER_SIZE):
        # header plus an empty list terminator
        if size < header_size + len(codec.TERMINATOR):
            raise SizeMismatchError(f'size {size} is too small for an environment')
        self.path = path
        self.size = size
        self.header_size = header_size
        self._data = dict(data or {})

    @classmethod
    def create(cls, path, size, header_size=codec.HEADER_SIZE):
        """
        Create a new empty environment file of the given size.

        The file is created (or truncated) right away; nothing is written
        until the first save.
        """
        env = cls(path, size, header_size=header_size)
        with open(path, 'wb'):
            pass
        logger.debug('Created empty environment %s (%d bytes)', path, size)
        return env

    @classmethod
    def open(cls, path, best_effort=False, size=None, header_size=codec.HEADER_SIZE):
        with open(path, 'rb') as f:
            content = f.read()
        if size is not None and len(content) != size:
            raise SizeMismatchError(f'{path} is {len(content)} bytes, expected {size}')
        if len(content) < header_size + len(codec.TERMINATOR):
            raise SizeMismatchError(f'{path} is too small for an environment ({len(content)} bytes)')
        data = codec.decode(content, best_effort=best_effort, header_size=header_size)
        logger.debug('Loaded %d variables from %s', len(data), path)
        return cls(path, len(content), data, header_size=header_size)

    def get(self, key):
        """
        Return the value of key, or '' when it is not set.
        """
        return self._data.get(key, '')

    def set(self, key, value):
        """
        Set key to value. An empty value removes the key.
        """
        if not key:
            raise PreconditionViolation(f'set() called with an empty key for value {value!r}')
        if '=' in key or '\0' in key:
            raise PreconditionViolation(f'key {key!r} must not contain "=" or NUL')
        if '\0' in value:
            raise PreconditionViolation(f'value for {key!r} must not contain NUL')
        if not value:
            self._data.pop(key, None)
            return
        self._data[key] = value

    def items(self):
        for key in codec.sorted_keys(self._data):
            if not key:
                raise PreconditionViolation('environment holds an empty key')
            yield key, self._data[key]

    def __iter__(self):
        return (key for key, _ in self.items())

    def __contains__(self, key):
        return key in self._data

    def __len__(self):
        return len(self._data)

    def render(self):
        return ''.join(f'{key}={value}\n' for key, value in self.items())

    __str__ = render

    def __repr__(self):
        return f'{type(self).__name__}({self.path!r}, size={self.size}, entries={len(self._data)})'

    def import_text(self, stream):
        import_text(self, stream)

    def encode(self):
        return codec.encode(self._data, self.size, self.header_size)

    def save(self):
        """
        Write the environment back to its file.

        The buffer is fully encoded before the file is touched, so a
        capacity error never reaches the disk. The file is overwritten in
        place and never truncated or replaced, since bootloaders read it
        from a fixed location.
        """
        buffer = self.encode()
        with open(self.path, 'r+b') as f:
            f.write(buffer)
            f.flush()
            os.fsync(f.fileno())
        logger.debug('Saved %d variables to %s', len(self._data), self.path)

def create_env_file(env_dict, size, file_path):
    """
    Create a U-Boot environment holding env_dict and write it to a file.
    """
    env = Env(file_path, size)
    for key, value in env_dict.items():
        env.set(key, value)
    # fail on oversized data before the file is truncated
    env.encode()
    with open(file_path, 'wb'):
        pass
    env.save()
    return env
