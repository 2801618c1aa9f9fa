"""Read and write SIR0 files, the pointer-carrying container used by Pokémon
Mystery Dungeon on the 3DS.
"""
from .base import clone_range, Substream
from .errors import Sir0Error, Sir0ErrorKind
from .pointers import decode_pointers, encode_pointers, read_pointer_table
from .sir0 import (
    is_sir0, Sir0, SIR0_MAGIC, write_sir0, write_sir0_footer,
    write_sir0_header,
)
