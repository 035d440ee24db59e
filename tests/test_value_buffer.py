import pytest

from chartkit.value_buffer import ValueBuffer


def test_buffer_enqueue_dequeue():
    buffer = ValueBuffer()
    for n in range(1, 9):
        buffer.enqueue(n)
        assert len(buffer) == n
        assert buffer.peek() == 1
        assert buffer.peek_back() == n

    for n in range(1, 9):
        value = buffer.dequeue()
        assert value == n
        assert len(buffer) == 8 - n
        if n < 8:
            assert buffer.peek() == n + 1
            assert buffer.peek_back() == 8

    assert len(buffer) == 0
    assert buffer.peek() == 0
    assert buffer.peek_back() == 0


def test_buffer_clear():
    buffer = ValueBuffer()
    for _ in range(8):
        buffer.enqueue(1)
    assert len(buffer) == 8

    buffer.clear()
    assert len(buffer) == 0
    assert buffer.peek() == 0
    assert buffer.peek_back() == 0


def test_buffer_array():
    buffer = ValueBuffer()
    for n in (1, 2, 3, 4, 5):
        buffer.enqueue(n)
    contents = buffer.to_list()
    assert len(contents) == 5
    assert contents == [1, 2, 3, 4, 5]


def test_buffer_each():
    buffer = ValueBuffer()
    for x in range(1, 17):
        buffer.enqueue(float(x))

    seen = list(enumerate(buffer))
    assert seen == [(i, float(i + 1)) for i in range(16)]


def test_new_buffer():
    empty = ValueBuffer()
    assert len(empty) == 0
    assert empty.capacity() == 4
    assert empty.peek() == 0
    assert empty.peek_back() == 0


def test_new_buffer_with_values():
    values = ValueBuffer(1, 2, 3, 4, 5)
    assert len(values) == 5
    assert values.peek() == 1
    assert values.peek_back() == 5


def test_buffer_growth():
    values = ValueBuffer(1, 2, 3, 4, 5)
    for i in range(1 << 10):
        values.enqueue(float(i))
    assert values.peek_back() == (1 << 10) - 1
    assert len(values) == 5 + (1 << 10)


def test_buffer_wraps_around():
    buffer = ValueBuffer()
    for n in (1, 2, 3, 4):
        buffer.enqueue(n)
    buffer.dequeue()
    buffer.dequeue()
    buffer.enqueue(5)
    buffer.enqueue(6)
    assert buffer.capacity() == 4
    assert buffer.to_list() == [3, 4, 5, 6]
    assert buffer[0] == 3
    assert buffer[-1] == 6
    assert buffer.peek_back() == 6


def test_buffer_getitem_out_of_range():
    buffer = ValueBuffer(1, 2)
    assert buffer[1] == 2
    with pytest.raises(IndexError):
        buffer[2]
    assert buffer.to_list() == [1, 2]


def test_buffer_with_values_then_dequeue_enqueue():
    buffer = ValueBuffer(1, 2, 3, 4)
    buffer.dequeue()
    buffer.enqueue(9)
    assert buffer.to_list() == [2, 3, 4, 9]


def test_with_capacity():
    buffer = ValueBuffer.with_capacity(10)
    assert buffer.capacity() == 10
    assert len(buffer) == 0
    buffer.enqueue(3)
    assert buffer.to_list() == [3]


def test_with_capacity_zero_grows():
    buffer = ValueBuffer.with_capacity(0)
    buffer.enqueue(7)
    assert buffer.to_list() == [7]
    assert buffer.capacity() >= 1


def test_set_capacity_too_small_raises():
    buffer = ValueBuffer(1, 2, 3)
    with pytest.raises(ValueError):
        buffer.set_capacity(2)


def test_trim_excess_keeps_contents():
    buffer = ValueBuffer()
    for n in (1, 2, 3, 4, 5):
        buffer.enqueue(n)
    assert buffer.capacity() > len(buffer)
    buffer.trim_excess()
    assert buffer.capacity() == len(buffer)
    assert buffer.to_list() == [1, 2, 3, 4, 5]


def test_str():
    buffer = ValueBuffer(1, 2, 3)
    assert str(buffer) == "1 <= 2 <= 3"