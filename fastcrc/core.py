#!/usr/bin/env python3
"""Generic table-driven CRC32 engine.

An Algorithm32 describes a CRC32 variant using the usual parameter model
(polynomial in MSB-first form, initial register, final XOR mask and the two
reflection flags). A Crc32Engine hosts any such description.
"""
from dataclasses import dataclass
from functools import lru_cache
from typing import Tuple

U32_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class Algorithm32:
    """Describes a CRC32 variant.

    Fields:
        name        - human friendly name, used for diagnostics only
        polynomial  - standard (non-reflected) polynomial without the top bit
        init        - initial register value
        xor_out     - final XOR mask applied after the optional reflection step
        reflect_in  - whether input bytes are processed in reflected form
        reflect_out - whether the register is reflected before xor_out is applied
    """
    name: str
    polynomial: int
    init: int
    xor_out: int
    reflect_in: bool
    reflect_out: bool


def reflect_bits(value: int, width: int = 32) -> int:
    """Return the given integer with its lowest width bits reversed.

    Params:
        value - integer to reverse
        width - number of bits to reverse (at most 32)

    Returns:
        The reversed integer.
    """
    rev = 0

    for i in range(width):
        if value & (1 << i):
            rev |= 1 << (width - i - 1)

    return rev


@lru_cache(maxsize=None)
def build_table(polynomial: int, reflect: bool) -> Tuple[int, ...]:
    """Generate the lookup table holding the 32-bit CRC values of all 8-bit
    inputs for the given standard form polynomial.

    Reflected tables shift the register towards the least significant bit
    and use the bit reversed polynomial, standard tables shift towards the
    most significant bit. Tables are cached per (polynomial, reflect) and
    shared between engines, so they are returned as tuples.
    """
    polynomial &= U32_MASK
    table = []

    if reflect:
        reflected = reflect_bits(polynomial, 32)

        for i in range(256):
            crc = i

            for _ in range(8):
                if crc & 1: crc = (crc >> 1) ^ reflected
                else: crc >>= 1

            table.append(crc)

    else:
        for i in range(256):
            crc = i << 24

            for _ in range(8):
                if crc & 0x80000000: crc = ((crc << 1) & U32_MASK) ^ polynomial
                else: crc = (crc << 1) & U32_MASK

            table.append(crc)

    return tuple(table)


def update_reflected(state: int, table: Tuple[int, ...], data) -> int:
    """Absorb data into a register that shifts right (LSB-first input)."""
    for b in data:
        state = (state >> 8) ^ table[(state ^ b) & 0xFF]

    return state


def update_standard(state: int, table: Tuple[int, ...], data) -> int:
    """Absorb data into a register that shifts left (MSB-first input)."""
    for b in data:
        state = ((state << 8) & U32_MASK) ^ table[((state >> 24) ^ b) & 0xFF]

    return state


def finalize_value(state: int, params: Algorithm32) -> int:
    """Turn a raw register value into the externally visible checksum."""
    crc = state

    # Output reflection only undoes a mismatch with the table direction
    if params.reflect_in != params.reflect_out:
        crc = reflect_bits(crc, 32)

    return (crc ^ params.xor_out) & U32_MASK


class Crc32Engine:
    """Streaming CRC32 engine that can host any Algorithm32.
    """

    def __init__(self, params: Algorithm32):
        """Build an engine for the provided algorithm description.
        """
        self.params = params
        self.table = build_table(params.polynomial, bool(params.reflect_in))
        self.state = params.init & U32_MASK

    def update(self, data) -> None:
        """Absorb additional bytes into the register.
        """
        if self.params.reflect_in:
            self.state = update_reflected(self.state, self.table, data)
        else:
            self.state = update_standard(self.state, self.table, data)

    def reset(self) -> None:
        """Return the register to the initial value.
        """
        self.state = self.params.init & U32_MASK

    def finalize_u32(self) -> int:
        """Return the checksum for everything absorbed so far.

        This does not modify the register, so it may be called repeatedly.
        """
        return finalize_value(self.state, self.params)

    def copy(self) -> 'Crc32Engine':
        other = Crc32Engine.__new__(Crc32Engine)
        other.params = self.params
        other.table = self.table
        other.state = self.state
        return other

    def __repr__(self):
        return f'Crc32Engine(algorithm={self.params.name!r}, state=0x{self.state:08x})'
