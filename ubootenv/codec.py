import logging
import struct
import zlib

from .errors import (
    CapacityExceededError,
    ChecksumMismatchError,
    MalformedEntryError,
    MissingTerminatorError,
    PreconditionViolation,
    SizeMismatchError,
)

logger = logging.getLogger(__name__)

# Width of the header region in front of the payload. Only the first
# CRC_SIZE bytes are used, the rest is reserved and written as zeros.
HEADER_SIZE = 4
CRC_SIZE = struct.calcsize('<I')
FILL_BYTE = 0xFF
TERMINATOR = b'\0\0'
ENCODING = 'utf-8'

def crc32(payload):
    """
    Calculate the IEEE CRC-32 of a payload region.
    """
    return zlib.crc32(payload) & 0xFFFFFFFF

def pack_header(crc, header_size=HEADER_SIZE):
    if header_size < CRC_SIZE:
        raise PreconditionViolation(f'header size {header_size} cannot hold a {CRC_SIZE} byte checksum')
    return struct.pack('<I', crc).ljust(header_size, b'\0')

def parse_header(buffer, header_size=HEADER_SIZE):
    if len(buffer) < header_size:
        raise SizeMismatchError(f'buffer of {len(buffer)} bytes is smaller than the {header_size} byte header')
    crc, = struct.unpack_from('<I', buffer)
    return crc

def _to_text(raw):
    return raw.decode(ENCODING, 'surrogateescape')

def _to_bytes(text):
    return text.encode(ENCODING, 'surrogateescape')

def sorted_keys(env_dict):
    """
    Keys in the order they are stored: ascending by their encoded bytes.
    """
    return sorted(env_dict, key=_to_bytes)

def parse_payload(payload, best_effort=False):
    """
    Parse the NUL separated key=value list at the start of a payload.

    Everything after the first double NUL is filler and ignored. A payload
    without that marker is rejected, or read as empty in best effort mode.
    Entries without '=' (or with an empty key) are rejected unless
    best_effort is set, in which case they are skipped.
    """
    eof = payload.find(TERMINATOR)
    if eof < 0:
        if not best_effort:
            raise MissingTerminatorError(len(payload))
        logger.debug('No end-of-environment marker, treating payload as empty')
        eof = 0

    env = {}
    for entry in payload[:eof].split(b'\0'):
        # filler leaking into the entry list
        if not entry or entry[0] in (0, FILL_BYTE):
            continue
        key, sep, value = entry.partition(b'=')
        if not sep or not key:
            if best_effort:
                logger.debug('Skipping malformed entry %r', entry)
                continue
            raise MalformedEntryError(entry)
        if not value:
            # an empty value is the same as an unset variable
            env.pop(_to_text(key), None)
            continue
        env[_to_text(key)] = _to_text(value)
    return env

def pack_env(env_dict, size):
    """
    Pack the environment dictionary into a payload of exactly size bytes.

    Entries are written sorted by key so unchanged environments always
    produce identical bytes; unused space is filled with 0xFF.
    """
    chunks = []
    for key in sorted_keys(env_dict):
        if not key:
            raise PreconditionViolation('cannot pack an entry with an empty key')
        chunks.append(_to_bytes(f'{key}={env_dict[key]}') + b'\0')

    # one more NUL closes the list; an empty list needs both
    chunks.append(b'\0' if chunks else TERMINATOR)
    env_data = b''.join(chunks)

    if len(env_data) > size:
        raise CapacityExceededError(len(env_data), size)

    return env_data.ljust(size, bytes([FILL_BYTE]))

def decode(buffer, best_effort=False, header_size=HEADER_SIZE):
    """
    Validate the checksum of a raw environment buffer and parse its entries.

    The checksum is always verified, best_effort only relaxes entry parsing.
    """
    stored = parse_header(buffer, header_size)
    payload = bytes(buffer[header_size:])
    computed = crc32(payload)
    if stored != computed:
        raise ChecksumMismatchError(stored, computed)
    return parse_payload(payload, best_effort)

def encode(env_dict, target_size, header_size=HEADER_SIZE):
    """
    Encode an environment into a complete buffer of target_size bytes.
    """
    env_data = pack_env(env_dict, target_size - header_size)
    return pack_header(crc32(env_data), header_size) + env_data
