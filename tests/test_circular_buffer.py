import pytest

from aesdkit.circular_buffer import (
    MAX_WRITE_OPERATIONS_SUPPORTED,
    BufferEntry,
    CircularBuffer,
)


def test_single_entry_lookup_from_source_case():
    buffer = CircularBuffer()
    entry = BufferEntry(b"Dirka")
    assert entry.size == 5
    assert entry.data[4:5] == b"a"

    buffer.add_entry(entry)
    found = buffer.find_entry_offset_for_fpos(1)
    assert found is not None
    assert found[0] is entry
    assert found[1] == 1


def test_empty_buffer_finds_nothing():
    buffer = CircularBuffer()
    assert buffer.find_entry_offset_for_fpos(0) is None
    assert len(buffer) == 0
    assert list(buffer) == []


def test_lookup_spans_entries():
    buffer = CircularBuffer()
    first = BufferEntry(b"abc\n")
    second = BufferEntry(b"de\n")
    buffer.add_entry(first)
    buffer.add_entry(second)

    assert buffer.find_entry_offset_for_fpos(3) == (first, 3)
    assert buffer.find_entry_offset_for_fpos(4) == (second, 0)
    assert buffer.find_entry_offset_for_fpos(6) == (second, 2)
    assert buffer.find_entry_offset_for_fpos(7) is None


def test_fill_and_overwrite_oldest():
    buffer = CircularBuffer()
    entries = [BufferEntry(f"write{i}\n".encode()) for i in range(1, 11)]
    for entry in entries:
        assert buffer.add_entry(entry) is None
    assert buffer.full
    assert len(buffer) == MAX_WRITE_OPERATIONS_SUPPORTED
    assert list(buffer) == entries

    extra = BufferEntry(b"write11\n")
    evicted = buffer.add_entry(extra)
    assert evicted is entries[0]
    assert buffer.full
    assert list(buffer) == entries[1:] + [extra]
    assert buffer.find_entry_offset_for_fpos(0) == (entries[1], 0)
    assert buffer.out_offs == 1
    assert buffer.in_offs == 1


def test_none_entry_is_ignored():
    buffer = CircularBuffer()
    assert buffer.add_entry(None) is None
    assert len(buffer) == 0
    assert buffer.in_offs == 0


def test_bytes_are_accepted_as_entries():
    buffer = CircularBuffer()
    buffer.add_entry(b"hello\n")
    found = buffer.find_entry_offset_for_fpos(4)
    assert found is not None
    assert found[0].data == b"hello\n"
    assert found[1] == 4


def test_empty_entry_stops_search():
    buffer = CircularBuffer()
    buffer.add_entry(b"ab")
    buffer.add_entry(b"")
    buffer.add_entry(b"cd")
    assert buffer.find_entry_offset_for_fpos(1)[1] == 1
    assert buffer.find_entry_offset_for_fpos(2) is None


def test_negative_offset_rejected():
    buffer = CircularBuffer()
    with pytest.raises(ValueError):
        buffer.find_entry_offset_for_fpos(-1)


def test_bad_entry_type_rejected():
    buffer = CircularBuffer()
    with pytest.raises(TypeError):
        buffer.add_entry("text")


def test_clear_resets_state():
    buffer = CircularBuffer(capacity=2)
    buffer.add_entry(b"a")
    buffer.add_entry(b"b")
    assert buffer.full
    buffer.clear()
    assert not buffer.full
    assert len(buffer) == 0
    assert buffer.find_entry_offset_for_fpos(0) is None


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularBuffer(capacity=0)