#!/usr/bin/env python3
# Read 1 MiB from a file at a time
BLOCK_SIZE = (1 << 20)

def filepath_blocks(filepath, block_size = BLOCK_SIZE):
    """Generator function for reading blocks of bytes from a filepath in a for loop.

    Params:
        filepath   - file path to read from
        block_size - the maximum number of bytes to read from the file at a time

    Returns:
        The iterator over memoryview blocks of the file.
    """
    with open(filepath, 'rb') as file:
        yield from file_blocks(file, block_size)


def file_blocks(file, block_size = BLOCK_SIZE):
    """Generator function for reading blocks of bytes from a file object in a for loop.

    Every block is a view into one reused buffer, so it is only valid until
    the next block is requested.

    Params:
        file       - binary file object to read from
        block_size - the maximum number of bytes to read from the file at a time

    Returns:
        The iterator over memoryview blocks of the file.
    """
    # An empty buffer would read nothing and end the file early
    if block_size < 1:
        raise ValueError(f'block_size must be at least 1, not {block_size}')

    buffer = bytearray(block_size)

    while True:
        read_size = file.readinto(buffer)

        if not read_size:
            break

        with memoryview(buffer)[:read_size] as view:
            yield view


def size_fmt(size: int, scale: int = 1024) -> str:
    """Format a size into a more human readable format.

    Params:
        size  - integer number to scale
        scale - the scaling factor between units

    Returns:
        The formatted size string.
    """
    for unit in ['', 'K', 'M', 'G', 'T', 'P', 'E', 'Z']:
        if abs(size) < scale:
            return '%3.1f %s' % (size, unit)

        size /= scale

    return '%.1f Y' % (size)
