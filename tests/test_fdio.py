import os

import pytest

from sigtalk.fdio import putchar_fd, putendl_fd, putnbr_fd, putstr_fd


class _Pipe:
    def __init__(self):
        self.read_fd, self.write_fd = os.pipe()
        self._write_open = True
        self._read_open = True

    def read(self):
        self._close_write()
        with os.fdopen(self.read_fd, "rb") as reader:
            self._read_open = False
            return reader.read()

    def _close_write(self):
        if self._write_open:
            os.close(self.write_fd)
            self._write_open = False

    def close(self):
        self._close_write()
        if self._read_open:
            os.close(self.read_fd)
            self._read_open = False


@pytest.fixture
def pipe():
    channel = _Pipe()
    yield channel
    channel.close()


def test_putchar_fd_writes_one_char(pipe):
    putchar_fd("a", pipe.write_fd)
    assert pipe.read() == b"a"


def test_putchar_fd_rejects_multi_char(pipe):
    with pytest.raises(ValueError):
        putchar_fd("ab", pipe.write_fd)


@pytest.mark.parametrize("text", ["", "abc", "hello world"])
def test_putstr_fd_round_trip(pipe, text):
    putstr_fd(text, pipe.write_fd)
    assert pipe.read().decode() == text


def test_putendl_fd_appends_newline(pipe):
    putendl_fd("line", pipe.write_fd)
    output = pipe.read()
    assert output.endswith(b"\n")
    assert output[:-1].decode() == "line"


def test_putendl_fd_empty_is_newline(pipe):
    putendl_fd("", pipe.write_fd)
    assert pipe.read() == b"\n"


def test_putnbr_fd_int_min(pipe):
    putnbr_fd(-2147483648, pipe.write_fd)
    assert pipe.read() == b"-2147483648"


@pytest.mark.parametrize("number", [0, 7, 42, -1, -905, 2147483647])
def test_putnbr_fd_round_trip(pipe, number):
    putnbr_fd(number, pipe.write_fd)
    assert int(pipe.read()) == number


def test_putnbr_fd_negative_has_sign(pipe):
    putnbr_fd(-12, pipe.write_fd)
    output = pipe.read()
    assert output.startswith(b"-")
    assert output[1:].isdigit()


def test_large_string_written_completely(pipe):
    text = "x" * 5000
    putstr_fd(text, pipe.write_fd)
    assert len(pipe.read()) == len(text)