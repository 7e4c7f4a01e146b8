import struct
import zlib

import pytest


def make_buffer(payload, size=None):
    """Wrap a raw payload with a valid little-endian CRC-32 header."""
    if size is not None:
        payload = payload.ljust(size - 4, b'\xff')
    return struct.pack('<I', zlib.crc32(payload)) + payload


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    path = tmp_path / 'config'
    monkeypatch.setenv('UBOOTENV_CONFIG_DIRECTORY', str(path))
    return path
