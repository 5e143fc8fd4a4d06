import io

import hypothesis.strategies as st
import pytest
from hypothesis import given

from _repa.lexer.buffer import InputBuffer, escape_non_printable

from .generators.lexer_input import min_buffers, printable_text
from .streams import RecordingStream, TrickleStream


def test_grow_reads_twice_min_buffer():
    stream = RecordingStream("abcdefghij")
    buffer = InputBuffer(stream, min_buffer=2)
    assert buffer.grow()
    assert buffer.text == "abcd"
    assert stream.reads == [4]


def test_grow_appends():
    buffer = InputBuffer(io.StringIO("abcdefghij"), min_buffer=2)
    buffer.grow()
    buffer.grow()
    assert buffer.text == "abcdefgh"


def test_may_grow_until_empty_read():
    stream = RecordingStream("abcd")
    buffer = InputBuffer(stream, min_buffer=2)
    assert buffer.grow()
    assert buffer.may_grow
    assert not buffer.grow()
    assert not buffer.may_grow
    assert buffer.text == "abcd"


def test_no_reads_after_end_of_stream():
    stream = RecordingStream("")
    buffer = InputBuffer(stream, min_buffer=2)
    assert not buffer.grow()
    assert not buffer.grow()
    assert stream.reads == [4]


def test_min_buffer_zero_reads_everything():
    text = "word " * 10000
    stream = RecordingStream(text)
    buffer = InputBuffer(stream, min_buffer=0)
    assert not buffer.grow()
    assert buffer.text == text
    assert stream.reads == [-1]


def test_min_buffer_zero_may_grow_is_independent_of_threshold():
    buffer = InputBuffer(io.StringIO(""), min_buffer=0)
    assert buffer.may_grow
    buffer.refill()
    assert not buffer.may_grow
    assert buffer.text == ""


def test_refill_reaches_min_buffer_on_short_reads():
    stream = TrickleStream("abcdefghij", trickle=1)
    buffer = InputBuffer(stream, min_buffer=3)
    assert buffer.refill()
    assert buffer.text == "abc"


def test_refill_stops_at_end_of_stream():
    buffer = InputBuffer(io.StringIO("ab"), min_buffer=3)
    assert not buffer.refill()
    assert buffer.text == "ab"


def test_consume_removes_prefix():
    buffer = InputBuffer(io.StringIO("hello world"), min_buffer=0)
    buffer.refill()
    buffer.consume(6)
    assert buffer.text == "world"
    assert len(buffer) == 5
    assert buffer.consumed == 6


def test_filter_rewrites_buffer():
    stream = io.StringIO("ab\r\ncd\r\nef")
    buffer = InputBuffer(
        stream, min_buffer=4, buffer_filter=lambda text: text.replace("\r\n", "")
    )
    buffer.refill()
    assert buffer.text == "abcd"


def test_filter_sees_line_ending_split_by_chunks():
    stream = RecordingStream("abc\r\nd")
    buffer = InputBuffer(
        stream, min_buffer=2, buffer_filter=lambda text: text.replace("\r\n", "\n")
    )
    buffer.refill()
    assert buffer.text == "abc\r"
    buffer.grow()
    assert buffer.text == "abc\nd"
    assert stream.reads == [4, 4]


def test_filter_only_sees_unconsumed_text():
    seen = []

    def record(text):
        seen.append(text)
        return text

    buffer = InputBuffer(io.StringIO("abcdef"), min_buffer=1, buffer_filter=record)
    buffer.refill()
    buffer.consume(2)
    buffer.grow()
    buffer.grow()
    assert seen == ["ab", "cd", "cdef"]


def test_filter_dropping_a_chunk_keeps_reading():
    stream = io.StringIO("\n\n\n\nabcd")
    buffer = InputBuffer(
        stream, min_buffer=2, buffer_filter=lambda chunk: chunk.replace("\n", "")
    )
    buffer.refill()
    assert buffer.text == "abcd"
    assert buffer.may_grow


@pytest.mark.parametrize(
    "text, show, expected",
    [
        ("hello world", 5, "hello"),
        ("hello world", 0, "hello world"),
        ("a\nb", 0, "a\\x{000a}b"),
        ("tab\there", 20, "tab\\x{0009}here"),
        ("σ", 20, "\\x{03c3}"),
        ("", 20, ""),
    ],
)
def test_preview(text, show, expected):
    buffer = InputBuffer(io.StringIO(text), min_buffer=0)
    buffer.refill()
    assert buffer.preview(show) == expected
    assert buffer.text == text


def test_preview_default_length():
    buffer = InputBuffer(io.StringIO("x" * 100), min_buffer=0)
    buffer.refill()
    assert buffer.preview() == "x" * 20


@given(printable_text)
def test_escaped_preview_is_printable_ascii(text):
    escaped = escape_non_printable(text)
    assert all(" " <= c <= "~" for c in escaped)


@given(printable_text, min_buffers, st.integers(min_value=1, max_value=5))
def test_consuming_everything_returns_input(text, min_buffer, take):
    buffer = InputBuffer(io.StringIO(text), min_buffer=min_buffer)
    buffer.refill()
    read = ""
    while len(buffer):
        read += buffer.text[:take]
        buffer.consume(min(take, len(buffer)))
        if len(buffer) < min_buffer:
            buffer.refill()
        elif not len(buffer):
            buffer.refill()
    assert read == text
    assert buffer.consumed == len(text)
