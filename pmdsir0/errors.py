"""Everything that can go wrong while reading or writing a SIR0 file."""
import enum

import attr


class Sir0ErrorKind(enum.Enum):
    IO_ERROR = 'io-error'
    INVALID_MAGIC = 'invalid-magic'
    CREATE_PARTITION_ERROR = 'create-partition-error'
    CLONE_HEADER_ERROR = 'clone-header-error'
    POINTER_BEFORE_HEADER = 'pointer-before-header'
    POINTER_OFFSET_POST_OR_AT_FILE_END = 'pointer-offset-post-or-at-file-end'
    ABSOLUTE_POINTER_OVERFLOW = 'absolute-pointer-overflow'
    DELTA_OVERFLOW = 'delta-overflow'
    NOT_SORTED = 'not-sorted'


_MESSAGES = {
    Sir0ErrorKind.IO_ERROR:
        "An error happened while performing an IO operation: {}",
    Sir0ErrorKind.INVALID_MAGIC:
        "The magic of the SIR0 file is not recognized: found {!r}",
    Sir0ErrorKind.CREATE_PARTITION_ERROR:
        "An error happened while creating a partition of the file "
        "(offset {}, length {})",
    Sir0ErrorKind.CLONE_HEADER_ERROR:
        "An error happened while copying the header of the file "
        "(offset {}, length {})",
    Sir0ErrorKind.POINTER_BEFORE_HEADER:
        "The header is at offset {0}, after the pointer list at offset {1}",
    Sir0ErrorKind.POINTER_OFFSET_POST_OR_AT_FILE_END:
        "The offset of the pointer list ({}) is either past or at the end "
        "of the file ({})",
    Sir0ErrorKind.ABSOLUTE_POINTER_OVERFLOW:
        "The absolute position overflows an unsigned 64-bit integer "
        "(absolute position: {}, sum to add: {})",
    Sir0ErrorKind.DELTA_OVERFLOW:
        "A multi-byte pointer delta overflows an unsigned 64-bit integer "
        "(accumulated: {}, next byte: {:#04x})",
    Sir0ErrorKind.NOT_SORTED:
        "The pointers to write aren't sorted: {} comes after {}",
}


@attr.s(auto_exc=True, str=False)
class Sir0Error(Exception):
    """Raised for any malformed SIR0 file or bad input to the writers.

    `kind` says what went wrong; `values` holds the numbers (or bytes) that
    explain it, in the order shown in the message.  When another error caused
    this one, it's chained as `__cause__`.
    """
    kind = attr.ib(validator=attr.validators.instance_of(Sir0ErrorKind))
    values = attr.ib(default=(), converter=tuple)

    def __str__(self):
        return _MESSAGES[self.kind].format(*self.values)
