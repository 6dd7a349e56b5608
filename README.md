# minitalk

A pair of commands that pass a text message from one process to another
using only two POSIX signals. Each byte of the message is sent as eight
bits, most significant bit first. `SIGUSR1` carries a 0 and `SIGUSR2`
carries a 1. Text is encoded as UTF-8. The server acknowledges each bit
with `SIGUSR2`, and the client waits for that acknowledgement before it
sends the next bit.

## Requirements

A POSIX system. The server waits for signals with `signal.sigwaitinfo`,
which Python does not provide on every POSIX platform (it is missing on
macOS, for example). Linux works.

## Installation

```
pip install .
```

## Usage

Start the server in one terminal. It prints its process id and then waits
until it is interrupted with Ctrl-C:

```
$ minitalk-server
Server PID: 4242
```

Send a message from another terminal:

```
$ minitalk-client 4242 "Hello, world"
```

The server writes each byte to standard output, and flushes it, as soon as
all eight of its bits have arrived. If bits start coming from a different
process part of the way through a byte, the bits received so far are
dropped.

The client prints one of these messages and sends nothing, with exit
status 0, when its arguments are invalid:

- the number of arguments is not two: `Error Arguments`
- the PID is not a positive number: `Error PID`
- the message is empty: `Error Message`

The PID is read the way C's `atoi` reads it: leading whitespace and one
sign are accepted and parsing stops at the first non-digit. If the target
process cannot be signalled, the client reports the error on standard
error and exits with status 1.

## Library use

### The protocol

`minitalk.protocol` encodes and decodes bits without any signals:

```python
from minitalk.protocol import Decoder, encode_bits

decoder = Decoder()
received = bytearray()
for bit in encode_bits("hi"):
    byte = decoder.feed(sender=1234, bit=bit)
    if byte is not None:
        received.append(byte)
assert bytes(received) == b"hi"
```

`Decoder.feed` raises `ValueError` for a bit other than 0 or 1, and
`Decoder.bit_count` tells how many bits of the current byte have arrived.

### Client and server

- `minitalk.client.parse_args(argv)` takes the two arguments (PID and
  message) and returns them as `(server_pid, message)`, raising
  `minitalk.client.ClientError` with one of the messages above.
- `minitalk.client.send_message(server_pid, message, delay=10e-6)` sends
  the message, waiting for an acknowledgement after every bit and then
  sleeping `delay` seconds. It returns the number of bits sent.
- `minitalk.server.Server(output=None)` decodes signals into bytes written
  to `output` (standard output's binary buffer by default).
  `Server.handle(signum, sender_pid)` processes one signal and acknowledges
  it; `Server.serve()` blocks `SIGUSR1` and `SIGUSR2`, handles them until
  `Server.stop()` is called, and restores the signal mask on return.

### Helpers

The package also carries small helpers in the style of the C library:

- `minitalk.ascii`: `atoi`, `itoa`, `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_lower`, `to_upper`.
- `minitalk.memory`: `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy`,
  `memmove`, `memset` on bytes and bytearrays; out-of-range spans raise
  `ValueError`.
- `minitalk.strings`: `split`, `strchr`, `strrchr`, `strncmp`, `strnstr`,
  `strlcpy`, `strlcat`, `substr`, `strjoin`, `strtrim`, `strmapi`,
  `striteri`; positions are indexes and "not found" is `None`.
- `minitalk.output`: `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd`,
  each writing to a file descriptor and returning the bytes written.
- `minitalk.printf`: `format(fmt, *args)` and
  `printf(fmt, *args, file=None)` supporting `%c %s %p %d %i %u %x %X %%`
  with no flags, widths or precisions.

## Tests

```
pip install ".[test]"
pytest
```