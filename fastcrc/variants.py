#!/usr/bin/env python3
from .core import Algorithm32, Crc32Engine
from .utility import BLOCK_SIZE, filepath_blocks

# CRC-32 (IEEE)
# Uses CRC polynomial 0x04C11DB7 (or 0xEDB88320 in reversed form)
# This is used in Ethernet, SATA, zlib, and other protocols, formats, and systems.
CRC32 = Algorithm32('crc32', 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True)

# CRC-32C (Castagnoli)
# Uses CRC polynomial 0x1EDC6F41 (or 0x82F63B78 in reversed form)
# This is used in SCTP, iSCSI, ext4, Btrfs, and other protocols, formats, and systems.
CRC32C = Algorithm32('crc32c', 0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True, True)

ALGORITHMS = {
    CRC32.name: CRC32,
    CRC32C.name: CRC32C,
}


class Crc32Digest:
    """Streaming CRC32 digest following the hashlib object interface.

    Subclasses pick the variant by setting ALGORITHM. The output of
    digest()/finalize() is the checksum encoded as 4 big-endian bytes.
    """
    ALGORITHM = CRC32

    digest_size = 4
    block_size = 1

    def __init__(self, data: bytes = b''):
        """Initialize a digest, optionally absorbing some initial data.
        """
        self._engine = Crc32Engine(self.ALGORITHM)

        if data:
            self._engine.update(data)

    @property
    def name(self) -> str:
        return self.ALGORITHM.name

    def update(self, data: bytes) -> None:
        """Absorb more input.
        """
        self._engine.update(data)

    def reset(self) -> None:
        """Return to the initial state.
        """
        self._engine.reset()

    def finalize_u32(self) -> int:
        """Return the checksum as a plain 32-bit integer.
        """
        return self._engine.finalize_u32()

    def finalize(self) -> bytes:
        """Return the checksum as 4 big-endian bytes.
        """
        return self.finalize_u32().to_bytes(self.digest_size, 'big')

    def finalize_and_reset(self) -> bytes:
        """Return the checksum bytes and reset the digest for reuse.
        """
        out = self.finalize()
        self.reset()
        return out

    def digest(self) -> bytes:
        return self.finalize()

    def hexdigest(self) -> str:
        return self.finalize().hex()

    def copy(self):
        """Return an independent clone of the digest state.
        """
        other = self.__class__.__new__(self.__class__)
        other._engine = self._engine.copy()
        return other

    def __repr__(self):
        return f'{self.__class__.__name__}(state=0x{self._engine.state:08x})'


class Crc32(Crc32Digest):
    """CRC-32 (IEEE) digest.
    """
    ALGORITHM = CRC32


class Crc32c(Crc32Digest):
    """CRC-32C (Castagnoli) digest.
    """
    ALGORITHM = CRC32C


def crc32(data: bytes) -> int:
    """Calculate the CRC-32 value for the provided input bytes.
    """
    return Crc32(data).finalize_u32()


def crc32c(data: bytes) -> int:
    """Calculate the CRC-32C (Castagnoli) value for the provided input bytes.
    """
    return Crc32c(data).finalize_u32()


def crc_file(file_path, algorithm: Algorithm32 = CRC32, block_size: int = BLOCK_SIZE) -> int:
    """Calculate the CRC value for the provided input file.

    Params:
        file_path  - path of the file to checksum
        algorithm  - CRC32 variant to compute
        block_size - the maximum number of bytes to read from the file at a time

    Returns:
        The finalized 32-bit checksum.
    """
    engine = Crc32Engine(algorithm)

    for block in filepath_blocks(file_path, block_size=block_size):
        engine.update(block)

    return engine.finalize_u32()
