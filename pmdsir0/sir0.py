"""Support for the SIR0 container format used by Pokémon Mystery Dungeon on
the 3DS (and the DS).

A SIR0 file wraps some other data, called the header here, together with a
list of every place in the file that holds a pointer, so the game can
relocate them after loading.  The layout is:

    0x00  b'SIR0'
    0x04  header offset (u32)
    0x08  pointer list offset (u32)
    ...   the header, up to the pointer list offset
    ...   the pointer list (see `pmdsir0.pointers`)

Only tested against the 3DS games.
"""
import io
import logging

import construct as c

from .base import clone_range, Substream
from .checked import checked_add, checked_sub
from .errors import Sir0Error, Sir0ErrorKind
from .pointers import encode_pointers, read_pointer_table

log = logging.getLogger(__name__)

SIR0_MAGIC = b'SIR0'
PADDING_BYTE = 0xaa

sir0_header_struct = c.Struct(
    'magic' / c.Const(SIR0_MAGIC),
    'header_offset' / c.Int32ul,
    'pointer_offset' / c.Int32ul,
)


def is_sir0(stream):
    """Check the magic without moving the stream."""
    return Substream(stream).peek(len(SIR0_MAGIC)) == SIR0_MAGIC


class Sir0:
    """A parsed SIR0 file.

    The header is copied out of the stream, but the stream itself is kept
    around (and shouldn't be used by anyone else) so the data the pointers
    point at can still be read.
    """
    def __init__(self, stream):
        self.stream = stream

        stream.seek(0)
        raw_header = stream.read(sir0_header_struct.sizeof())
        magic = bytes(raw_header[:len(SIR0_MAGIC)])
        if magic != SIR0_MAGIC:
            raise Sir0Error(Sir0ErrorKind.INVALID_MAGIC, (magic,))
        if len(raw_header) < sir0_header_struct.sizeof():
            raise Sir0Error(
                Sir0ErrorKind.IO_ERROR,
                ("unexpected end of file in the SIR0 header",))

        fixed = sir0_header_struct.parse(raw_header)
        self.header_offset = fixed.header_offset
        self.pointer_offset = fixed.pointer_offset

        header_length = checked_sub(
            self.pointer_offset, self.header_offset, bits=32)
        if header_length is None:
            raise Sir0Error(
                Sir0ErrorKind.POINTER_BEFORE_HEADER,
                (self.header_offset, self.pointer_offset))

        try:
            self._header = clone_range(
                stream, self.header_offset, header_length)
        except (OSError, EOFError) as exc:
            raise Sir0Error(
                Sir0ErrorKind.CLONE_HEADER_ERROR,
                (self.header_offset, header_length)) from exc

        file_length = stream.seek(0, io.SEEK_END)
        # There must be room for at least one table byte before the last
        # byte of the file
        remaining = checked_sub(file_length, self.pointer_offset)
        if remaining is not None:
            remaining = checked_sub(remaining, 1)
        if not remaining:
            raise Sir0Error(
                Sir0ErrorKind.POINTER_OFFSET_POST_OR_AT_FILE_END,
                (self.pointer_offset, file_length))

        log.debug(
            "SIR0 header at %#x (%d bytes), pointer list at %#x, "
            "file is %d bytes",
            self.header_offset, header_length, self.pointer_offset,
            file_length)

        stream.seek(self.pointer_offset)
        self.offsets = tuple(read_pointer_table(stream, remaining))
        log.debug("Read %d pointers", len(self.offsets))

    def __repr__(self):
        return "<{} with {} pointers, {} byte header>".format(
            type(self).__name__, len(self.offsets), len(self._header))

    def __len__(self):
        return len(self.offsets)

    def __iter__(self):
        return iter(self.offsets)

    def __getitem__(self, key):
        return self.offsets[key]

    def offsets_len(self):
        return len(self.offsets)

    def get_offset(self, index):
        """Return offset number `index`, or None if there's no such offset."""
        if 0 <= index < len(self.offsets):
            return self.offsets[index]
        return None

    @property
    def header(self):
        """The wrapped data.  Its format has nothing to do with SIR0."""
        return self._header

    def get_file(self):
        """The whole SIR0 file, header and pointer list included."""
        return self.stream

    def partition(self, offset, length):
        """Return a `Substream` over part of the file, e.g. the data a
        pointer points to.
        """
        file_length = len(Substream(self.stream))
        end = checked_add(offset, length)
        if end is None or end > file_length:
            raise Sir0Error(
                Sir0ErrorKind.CREATE_PARTITION_ERROR,
                (offset, length)) from EOFError(
                    "the file is only {} bytes long".format(file_length))
        return Substream(self.stream, offset, length)


def write_sir0_header(stream, header_offset, pointer_offset):
    """Write the 12 byte SIR0 header at the current position of `stream`.

    It belongs at the start of the file, but both offsets are only known once
    the rest is written: reserve 12 bytes, write the header data, call
    `write_sir0_footer`, then seek back to the start and call this.
    """
    sir0_header_struct.build_stream(
        dict(header_offset=header_offset, pointer_offset=pointer_offset),
        stream)


def write_sir0_footer(stream, positions, zero_delta=None):
    """Write the pointer list for `positions`, which are relative to the start
    of the file.  For a normal SIR0 file the first two are [4, 8].

    No terminating zero byte is written.
    """
    data = encode_pointers(positions, zero_delta=zero_delta)
    stream.write(data)
    log.debug("Wrote a %d byte pointer list", len(data))


def _pad(stream, base, alignment=16):
    misalignment = (stream.tell() - base) % alignment
    if misalignment:
        stream.write(bytes([PADDING_BYTE]) * (alignment - misalignment))


def write_sir0(stream, header, positions, zero_delta=None):
    """Write a complete SIR0 file wrapping `header`, starting at the current
    position of `stream`.

    The header data starts at offset 16 and is padded to a multiple of 16
    bytes, as is the terminated pointer list.  `positions` are relative to the
    start of the SIR0 file.  Returns the header and pointer list offsets.
    """
    pointer_list = encode_pointers(positions, zero_delta=zero_delta)

    base = stream.tell()
    stream.write(bytes(16))

    header_offset = stream.tell() - base
    stream.write(header)
    _pad(stream, base)

    pointer_offset = stream.tell() - base
    stream.write(pointer_list)
    stream.write(b'\x00')
    _pad(stream, base)

    end = stream.tell()
    stream.seek(base)
    write_sir0_header(stream, header_offset, pointer_offset)
    stream.seek(end)

    return header_offset, pointer_offset
