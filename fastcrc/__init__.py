"""CRC-32 and CRC-32C checksums with one-shot and streaming interfaces.
"""
from .core import Algorithm32, Crc32Engine
from .variants import CRC32, CRC32C, Crc32, Crc32c, Crc32Digest, crc32, crc32c, crc_file

__version__ = '0.1.0'

__all__ = [
    'Algorithm32',
    'Crc32Engine',
    'CRC32',
    'CRC32C',
    'Crc32',
    'Crc32c',
    'Crc32Digest',
    'crc32',
    'crc32c',
    'crc_file',
]
