"""Helpers for reading byte ranges out of a larger seekable stream."""
import io


class Substream:
    """Wraps a stream and pretends it starts at an offset other than 0.

    Partly implements the file interface.

    This type always seeks before reading, but doesn't do so afterwards, so
    interleaving reads with the underlying stream may not do what you want.
    """
    def __init__(self, stream, offset=0, length=-1):
        if isinstance(stream, Substream):
            self.stream = stream.stream
            self.offset = offset + stream.offset
        else:
            self.stream = stream
            self.offset = offset

        self.length = length
        self.pos = 0

    def __repr__(self):
        return "<{} of {} at {}>".format(
            type(self).__name__, self.stream, self.offset)

    def read(self, n=-1):
        self.stream.seek(self.offset + self.pos)
        maxread = self.length - self.pos
        if n < 0 or 0 <= maxread < n:
            n = maxread
        data = self.stream.read(n)
        self.pos += len(data)
        return data

    def seek(self, offset, whence=io.SEEK_SET):
        if whence == io.SEEK_CUR:
            offset += self.pos
        elif whence == io.SEEK_END:
            offset += len(self)
        offset = max(offset, 0)
        if self.length >= 0:
            offset = min(offset, self.length)
        self.stream.seek(self.offset + offset)
        self.pos = offset
        return self.pos

    def tell(self):
        return self.pos

    def __len__(self):
        if self.length < 0:
            pos = self.stream.tell()
            parent_length = self.stream.seek(0, io.SEEK_END)
            self.stream.seek(pos)
            return max(parent_length - self.offset, 0)
        else:
            return self.length

    def peek(self, n):
        pos = self.stream.tell()
        self.stream.seek(self.offset + self.pos)
        maxread = self.length - self.pos
        if 0 <= maxread < n:
            n = maxread
        data = self.stream.read(n)
        self.stream.seek(pos)
        return data

    def slice(self, offset, length=-1):
        return Substream(self, offset, length)


def clone_range(stream, offset, length):
    """Copy `length` bytes starting at `offset` out of `stream`.

    Unlike a `Substream`, the result doesn't depend on the stream afterwards.
    Raises EOFError if the stream ends before enough bytes could be read.
    """
    data = Substream(stream, offset, length).read()
    if len(data) != length:
        raise EOFError(
            "wanted {} bytes at offset {}, but only {} were available"
            .format(length, offset, len(data)))
    return bytes(data)
