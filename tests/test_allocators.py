import struct

import pytest

from smlkit.allocators import (
    ULLONG_MAX,
    alloc,
    calloc,
    malloc,
    realloc,
    realloc_change_place_bytes,
    realloc_change_place_elements,
    simulated_failure,
)

INT_SIZE = 4


# --- malloc ---


def test_malloc_basic_allocation():
    buf = malloc(100)
    assert len(buf) == 100


def test_malloc_zero_size_allocation():
    assert malloc(0) is None


def test_malloc_negative_size_raises():
    with pytest.raises(ValueError):
        malloc(-1)


def test_malloc_too_large_raises_overflow():
    with pytest.raises(OverflowError):
        malloc(ULLONG_MAX + 1)


# --- calloc ---


def test_calloc_basic_allocation_and_zeroing():
    buf = calloc(10, INT_SIZE)
    assert buf == bytearray(10 * INT_SIZE)


def test_calloc_zero_size_allocation():
    assert calloc(0, INT_SIZE) is None
    assert calloc(10, 0) is None


def test_calloc_overflow_check():
    with pytest.raises(OverflowError):
        calloc(ULLONG_MAX, 2)


# --- alloc ---


def test_alloc_delegates_correctly():
    buf = alloc(10, INT_SIZE)
    assert len(buf) == 10 * INT_SIZE


def test_alloc_zero_size():
    assert alloc(0, 10) is None
    assert alloc(10, 0) is None


def test_alloc_overflow_check():
    with pytest.raises(OverflowError):
        alloc(ULLONG_MAX, 2)


# --- realloc ---


def test_realloc_from_none_behaves_like_malloc():
    buf = realloc(None, 100, 0)
    assert len(buf) == 100


def test_realloc_to_zero_behaves_like_free():
    buf = malloc(100)
    assert len(buf) == 100
    assert realloc(buf, 0, 0) is None


def test_realloc_grow_and_preserve_data():
    buf = malloc(10)
    buf[:8] = b"testing\x00"
    grown = realloc(buf, 20, 0)
    assert len(grown) == 20
    assert grown[:8] == b"testing\x00"


def test_realloc_shrink_and_preserve_data():
    buf = malloc(20)
    buf[:16] = b"testing realloc\x00"
    shrunk = realloc(buf, 8, 0)
    assert len(shrunk) == 8
    assert shrunk[:7] == b"testing"


def test_realloc_bytearray_resized_in_place():
    buf = bytearray(b"abc")
    assert realloc(buf, 5, 2) is buf
    assert buf == bytearray(b"abc\x00\x00")


def test_realloc_copies_immutable_bytes():
    assert realloc(b"hello", 3) == bytearray(b"hel")


def test_realloc_negative_retry_raises():
    with pytest.raises(ValueError):
        realloc(None, 10, -1)


# --- realloc_change_place_bytes ---


def test_realloc_change_place_bytes_grow():
    buf = malloc(5 * INT_SIZE)
    buf[:] = struct.pack("<5i", 1, 2, 3, 4, 5)
    moved = realloc_change_place_bytes(buf, 5 * INT_SIZE, 10 * INT_SIZE)
    assert moved is not buf
    assert len(moved) == 10 * INT_SIZE
    assert struct.unpack_from("<5i", moved) == (1, 2, 3, 4, 5)


def test_realloc_change_place_bytes_shrink():
    buf = bytearray(b"0123456789")
    moved = realloc_change_place_bytes(buf, 10, 4)
    assert moved == bytearray(b"0123")


def test_realloc_change_place_bytes_from_none():
    assert len(realloc_change_place_bytes(None, 0, 12)) == 12


def test_realloc_change_place_bytes_to_zero():
    assert realloc_change_place_bytes(bytearray(4), 4, 0) is None


def test_realloc_change_place_bytes_old_size_too_large():
    with pytest.raises(ValueError):
        realloc_change_place_bytes(bytearray(4), 8, 16)


def test_realloc_change_place_bytes_failure_keeps_original():
    buf = bytearray(b"keep")
    with simulated_failure("malloc"):
        with pytest.raises(MemoryError):
            realloc_change_place_bytes(buf, 4, 8)
    assert buf == bytearray(b"keep")


# --- realloc_change_place_elements ---


def test_realloc_change_place_elements_shrink():
    buf = alloc(10, 1)
    buf[:] = b"123456789\x00"
    moved = realloc_change_place_elements(buf, 10, 1, 5)
    assert moved[:5] == b"12345"
    assert len(moved) == 5


def test_realloc_change_place_elements_grow_zero_fills():
    buf = bytearray(struct.pack("<2i", 10, 20))
    moved = realloc_change_place_elements(buf, 2, INT_SIZE, 4)
    assert struct.unpack("<4i", moved) == (10, 20, 0, 0)


def test_realloc_change_place_elements_zero_element_size():
    buf = bytearray(b"0123456789")
    with pytest.raises(ValueError):
        realloc_change_place_elements(buf, 10, 0, 5)
    assert buf == bytearray(b"0123456789")


def test_realloc_change_place_elements_to_zero():
    assert realloc_change_place_elements(bytearray(8), 2, INT_SIZE, 0) is None


def test_realloc_change_place_elements_overflow():
    with pytest.raises(OverflowError):
        realloc_change_place_elements(None, 0, 2, ULLONG_MAX)


def test_realloc_change_place_elements_failure_keeps_original():
    buf = bytearray(b"abcd")
    with simulated_failure("calloc"):
        with pytest.raises(MemoryError):
            realloc_change_place_elements(buf, 4, 1, 8)
    assert buf == bytearray(b"abcd")


# --- simulated failures ---


def test_malloc_simulated_failure():
    with simulated_failure("malloc"):
        with pytest.raises(MemoryError):
            malloc(100)


def test_calloc_simulated_failure():
    with simulated_failure("calloc"):
        with pytest.raises(MemoryError):
            calloc(10, INT_SIZE)


@pytest.mark.parametrize("call", [lambda: malloc(100), lambda: calloc(10, INT_SIZE)])
def test_alloc_kind_fails_both(call):
    with simulated_failure("alloc"):
        with pytest.raises(MemoryError):
            call()


def test_malloc_failure_does_not_affect_calloc():
    with simulated_failure("malloc"):
        assert calloc(2, 2) == bytearray(4)


def test_simulated_failure_ends_with_block():
    with simulated_failure("malloc"):
        pass
    assert len(malloc(3)) == 3


def test_simulated_failure_unknown_kind():
    with pytest.raises(ValueError):
        with simulated_failure("free"):
            pass


def test_realloc_unaffected_by_simulated_failure():
    with simulated_failure("alloc"):
        assert len(realloc(None, 16)) == 16