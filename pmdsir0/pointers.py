"""Reading and writing the SIR0 pointer table.

The table is a list of absolute positions in the file, stored as the deltas
between consecutive positions.  Each delta is written big-end first in 7-bit
groups; every byte except the last of a delta has its high bit set.  A lone
zero byte ends the table.

For a normal SIR0 file the first two positions are 4 and 8, the two offsets
in the SIR0 header itself, so a table usually starts with `04 04`.
"""
import logging

from .checked import checked_add, checked_shl, checked_sub
from .defaults import get_default_zero_delta, ZERO_DELTA_POLICIES
from .errors import Sir0Error, Sir0ErrorKind

log = logging.getLogger(__name__)


def _scan(data):
    """Decode as much of `data` as possible.

    Returns the positions and whether a terminating zero byte was hit.
    """
    pointers = []
    position = 0
    accumulator = 0
    in_group = False

    for byte in data:
        if byte >= 0x80 or in_group:
            shifted = checked_shl(accumulator, 7)
            if shifted is None:
                raise Sir0Error(
                    Sir0ErrorKind.DELTA_OVERFLOW, (accumulator, byte))
            accumulator = shifted | (byte & 0x7f)
            if byte >= 0x80:
                in_group = True
                continue
            delta = accumulator
            accumulator = 0
            in_group = False
        elif byte == 0:
            return pointers, True
        else:
            delta = byte

        new_position = checked_add(position, delta)
        if new_position is None:
            raise Sir0Error(
                Sir0ErrorKind.ABSOLUTE_POINTER_OVERFLOW, (position, delta))
        position = new_position
        pointers.append(position)

    # An unfinished group at the very end is dropped
    return pointers, False


def decode_pointers(data):
    """Decode a pointer table from a bytes-like object.

    Stops at the first standalone zero byte, or at the end of `data`.
    """
    pointers, _ = _scan(data)
    return pointers


def read_pointer_table(stream, remaining):
    """Read and decode a pointer table from the current position of `stream`,
    consuming at most `remaining` bytes.
    """
    data = bytearray()
    while len(data) < remaining:
        chunk = stream.read(remaining - len(data))
        if not chunk:
            break
        data += chunk

    pointers, terminated = _scan(data)
    if not terminated and len(data) < remaining:
        raise Sir0Error(
            Sir0ErrorKind.IO_ERROR,
            ("unexpected end of file after {} of {} pointer table bytes"
             .format(len(data), remaining),))
    return pointers


def _encode_delta(delta):
    groups = []
    while delta >= 0x80:
        groups.append(delta & 0x7f)
        delta >>= 7
    groups.append(delta)

    out = bytearray(group | 0x80 for group in reversed(groups[1:]))
    out.append(groups[0])
    return out


def encode_pointers(positions, zero_delta=None):
    """Encode absolute positions as a pointer table.

    `positions` must be sorted from smallest to biggest.  No terminating zero
    byte is added; that's up to the caller.

    `zero_delta` decides what happens when a position repeats; see
    `pmdsir0.defaults.get_default_zero_delta_with_origin`.
    """
    if zero_delta is None:
        zero_delta = get_default_zero_delta()
    if zero_delta not in ZERO_DELTA_POLICIES:
        raise ValueError("Unknown zero delta policy {!r}".format(zero_delta))

    out = bytearray()
    previous = 0
    for position in positions:
        delta = checked_sub(position, previous)
        if delta is None:
            if position < previous:
                raise Sir0Error(
                    Sir0ErrorKind.NOT_SORTED, (position, previous))
            raise Sir0Error(
                Sir0ErrorKind.ABSOLUTE_POINTER_OVERFLOW,
                (previous, position - previous))
        previous = position

        if delta == 0:
            if zero_delta == 'emit':
                log.warning(
                    "Writing a zero byte for repeated pointer %d; readers "
                    "will stop the pointer table there", position)
                out.append(0)
            continue

        out += _encode_delta(delta)

    return bytes(out)
