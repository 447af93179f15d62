# sigtalk

sigtalk sends a text message from one process to another. It uses only the
POSIX signals `SIGUSR1` and `SIGUSR2`. Each byte goes out as eight signals,
least significant bit first. `SIGUSR1` stands for a set bit and `SIGUSR2` for a
clear bit. The server puts the bits back together and writes each byte to its
standard output as soon as all eight bits have arrived.

It needs a POSIX system, because Windows has no `SIGUSR1` or `SIGUSR2`.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Usage

Start the server in one terminal. It prints its process id and then waits for
signals until you interrupt it with Ctrl-C:

```
$ sigtalk-server
PID: 12345
```

From another terminal, send it a message:

```
$ sigtalk-client 12345 "hello there"
```

The message is sent as its raw bytes. After each signal the client waits
0.0005 seconds. The text appears in the server's terminal.

The client expects exactly two arguments. With any other number it prints a
usage error to standard output and exits with status 1. The process id is read
the way C's `atoi` reads a number: leading whitespace and one sign are allowed,
and reading stops at the first non-digit. Text that does not start with a
number gives 0, and signalling process id 0 reaches the client's whole process
group. If the process does not exist, `os.kill` raises `ProcessLookupError`.

## Library use

The bit encoding and decoding live in `sigtalk.protocol`:

```python
from sigtalk.protocol import BitDecoder, message_bits

decoder = BitDecoder()
received = [byte for bit in message_bits(b"hi") if (byte := decoder.feed(bit)) is not None]
assert bytes(received) == b"hi"
```

- `char_to_bits(byte)` returns the eight bits of a value between -128 and 255,
  least significant first.
- `message_bits(message)` yields the bits of a `str` or `bytes` message. A
  `str` is encoded as UTF-8.
- `signal_for_bit(bit)` returns `SIGUSR1` or `SIGUSR2`.
- `BitDecoder.feed(bit)` returns the finished byte once eight bits have
  arrived. `BitDecoder.reset()` throws away the bits collected so far, and
  `BitDecoder.pending` tells how many there are.

To send from your own code, use `sigtalk.client.send_char(pid, byte, delay)` or
`sigtalk.client.send_message(pid, message, delay)`. `delay` defaults to
`DEFAULT_DELAY`, which is 0.0005 seconds.

On the receiving side, `sigtalk.server.Receiver(stream)` is a signal handler.
It takes `SIGUSR1` as a one bit and any other signal as a zero bit, and writes
each finished byte to a binary stream. `sigtalk.server.serve(stream)` writes
`PID: <pid>` to the stream, installs a `Receiver` for both signals and waits
forever. When an exception stops the wait, it puts the previous handlers back.

## Helper modules

The package also has small helpers that the programs use:

- `sigtalk.printf`: `render(template, *args)` returns the formatted text and
  `printf(template, *args)` writes it to file descriptor 1 and returns the
  number of bytes written. The conversions are `%c %s %p %d %i %u %x %X %%`.
  Integers wrap to 32 bits. `%s` of `None` gives `(null)`. `%p` of `None` or
  0 gives `(nil)`. An unknown conversion is dropped.
- `sigtalk.strtools`: `atoi`, `itoa`, `split`, `strdup`, `striteri`,
  `strjoin`, `strmapi`, `strtrim`, `substr`.
- `sigtalk.search`: `strlen`, `strchr`, `strrchr`, `strnstr` and `strncmp`.
  The search functions return indices, or `None` when nothing is found.
  `strlcpy` and `strlcat` return a `(text, length)` pair.
- `sigtalk.memory`: `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`
  and `memmove`, working on `bytearray` buffers.
- `sigtalk.chartype`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower` and `toupper`, working on ASCII character codes.
- `sigtalk.fdio`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  write straight to a file descriptor.

## Limitations

- The server sends no acknowledgement. The client cannot tell whether a bit
  arrived. Whether delivery works depends on the delay being long enough for
  the server to handle each signal.
- Messages from two clients at the same time get mixed together.
- The server takes no options and ignores its arguments.