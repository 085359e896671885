import dataclasses

import pytest

from fastcrc.core import Algorithm32, Crc32Engine, build_table, finalize_value, reflect_bits

IEEE = Algorithm32('crc32', 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True)

# Non-reflected variants from the RevEng CRC catalogue
BZIP2 = Algorithm32('crc32/bzip2', 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, False, False)
MPEG2 = Algorithm32('crc32/mpeg-2', 0x04C11DB7, 0xFFFFFFFF, 0x00000000, False, False)
POSIX = Algorithm32('crc32/cksum', 0x04C11DB7, 0x00000000, 0xFFFFFFFF, False, False)
CASTAGNOLI = Algorithm32('crc32c', 0x1EDC6F41, 0xFFFFFFFF, 0xFFFFFFFF, True, True)

CHECK = b'123456789'


def test_reflect_known_values():
    assert reflect_bits(0b1001, 4) == 0b1001
    assert reflect_bits(0b0011, 4) == 0b1100


@pytest.mark.parametrize('value', range(16))
def test_reflect_twice_is_identity(value):
    assert reflect_bits(reflect_bits(value, 4), 4) == value


def test_reflect_polynomials():
    assert reflect_bits(0x04C11DB7, 32) == 0xEDB88320
    assert reflect_bits(0x1EDC6F41, 32) == 0x82F63B78
    assert reflect_bits(0x80000000, 32) == 1


def test_reflected_table_entries():
    table = build_table(0x04C11DB7, True)
    assert len(table) == 256
    assert table[0] == 0
    assert table[1] == 0x77073096
    assert table[255] == 0x2D02EF8D


def test_standard_table_entries():
    table = build_table(0x04C11DB7, False)
    assert len(table) == 256
    assert table[0] == 0
    assert table[1] == 0x04C11DB7
    assert all(0 <= entry <= 0xFFFFFFFF for entry in table)


def test_table_construction_is_deterministic():
    first = build_table(0x1EDC6F41, True)
    build_table.cache_clear()
    second = build_table(0x1EDC6F41, True)
    assert first is not second
    assert first == second


def test_tables_differ_by_direction():
    assert build_table(0x04C11DB7, True) != build_table(0x04C11DB7, False)


def test_engines_share_table():
    assert Crc32Engine(IEEE).table is Crc32Engine(IEEE).table


@pytest.mark.parametrize('params, expected', [
    (IEEE, 0xCBF43926),
    (BZIP2, 0xFC891918),
    (MPEG2, 0x0376E6E7),
    (POSIX, 0x765E7680),
])
def test_engine_check_values(params, expected):
    engine = Crc32Engine(params)
    engine.update(CHECK)
    assert engine.finalize_u32() == expected


@pytest.mark.parametrize('params', [IEEE, CASTAGNOLI, BZIP2])
def test_streaming_matches_one_shot(params):
    data = bytes(range(256)) * 3 + b'The quick brown fox jumps over the lazy dog'

    whole = Crc32Engine(params)
    whole.update(data)

    for size in (1, 2, 3, 7, 64, 1000):
        engine = Crc32Engine(params)

        for i in range(0, len(data), size):
            engine.update(data[i:i + size])

        assert engine.finalize_u32() == whole.finalize_u32()


@pytest.mark.parametrize('params', [IEEE, CASTAGNOLI, BZIP2, MPEG2])
def test_irregular_chunks_match_one_shot(params):
    data = bytes(range(256)) * 2 + CHECK

    whole = Crc32Engine(params)
    whole.update(data)

    engine = Crc32Engine(params)
    start = 0

    for size in (0, 1, 5, 0, 250, 0, 2, 129):
        engine.update(data[start:start + size])
        start += size

    engine.update(data[start:])
    engine.update(b'')

    assert engine.finalize_u32() == whole.finalize_u32()


def test_empty_update_is_noop():
    engine = Crc32Engine(IEEE)
    engine.update(b'')
    assert engine.state == IEEE.init
    assert engine.finalize_u32() == 0


def test_finalize_is_idempotent():
    engine = Crc32Engine(BZIP2)
    engine.update(CHECK)
    assert engine.finalize_u32() == engine.finalize_u32() == 0xFC891918


def test_reset_restores_initial_state():
    engine = Crc32Engine(IEEE)
    engine.update(b'some unrelated input')
    engine.reset()
    assert engine.state == IEEE.init

    engine.update(CHECK)
    assert engine.finalize_u32() == 0xCBF43926


def test_accepts_bytes_like_input():
    engine = Crc32Engine(IEEE)
    engine.update(bytearray(b'1234'))
    engine.update(memoryview(b'56789'))
    assert engine.finalize_u32() == 0xCBF43926


def test_copy_is_independent():
    engine = Crc32Engine(IEEE)
    engine.update(b'1234')
    clone = engine.copy()
    clone.update(b'56789')
    engine.update(b'xyz')
    assert clone.finalize_u32() == 0xCBF43926
    assert engine.finalize_u32() != clone.finalize_u32()


def test_finalize_value_reflects_on_mismatched_flags():
    params = Algorithm32('mixed', 0x04C11DB7, 0, 0, True, False)
    assert finalize_value(0x00000001, params) == 0x80000000
    assert finalize_value(0x00000001, IEEE) == 0xFFFFFFFE


def test_algorithm_value_semantics():
    other = Algorithm32('crc32', 0x04C11DB7, 0xFFFFFFFF, 0xFFFFFFFF, True, True)
    assert other == IEEE
    assert hash(other) == hash(IEEE)
    assert dataclasses.replace(IEEE, init=0) != IEEE


def test_repr_shows_state():
    engine = Crc32Engine(IEEE)
    assert repr(engine) == "Crc32Engine(algorithm='crc32', state=0xffffffff)"
