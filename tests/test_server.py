import io
import os
import signal
import threading
from unittest.mock import patch

import pytest

from minitalk.protocol import encode_bits
from minitalk.server import Server, main


def _signal_for(bit):
    return signal.SIGUSR2 if bit else signal.SIGUSR1


def test_handle_writes_completed_bytes_and_acknowledges():
    out = io.BytesIO()
    server = Server(output=out)
    with patch("os.kill") as kill:
        results = [server.handle(_signal_for(bit), 4242) for bit in encode_bits("ok")]
    assert out.getvalue() == b"ok"
    assert [r for r in results if r is not None] == [ord("o"), ord("k")]
    assert kill.call_count == 16
    assert all(call.args == (4242, signal.SIGUSR2) for call in kill.call_args_list)


def test_handle_interleaved_sender_restarts_byte():
    out = io.BytesIO()
    server = Server(output=out)
    with patch("os.kill"):
        for bit in list(encode_bits("a"))[:4]:
            server.handle(_signal_for(bit), 1)
        for bit in encode_bits("b"):
            server.handle(_signal_for(bit), 2)
    assert out.getvalue() == b"b"


def test_handle_rejects_other_signals():
    server = Server(output=io.BytesIO())
    with patch("os.kill") as kill:
        with pytest.raises(ValueError):
            server.handle(signal.SIGINT, 1)
    assert kill.call_count == 0


def test_serve_decodes_signals_sent_to_the_process():
    out = io.BytesIO()
    server = Server(output=out)
    bits = list(encode_bits("hi"))
    main_thread = threading.main_thread().ident
    remaining = iter(bits[1:])
    acknowledged = []

    def fake_kill(pid, sig):
        acknowledged.append((pid, sig))
        following = next(remaining, None)
        if following is None:
            server.stop()
        else:
            signal.pthread_kill(main_thread, _signal_for(following))

    previous = signal.pthread_sigmask(
        signal.SIG_BLOCK, {signal.SIGUSR1, signal.SIGUSR2}
    )
    try:
        signal.pthread_kill(main_thread, _signal_for(bits[0]))
        with patch("os.kill", side_effect=fake_kill):
            server.serve()
    finally:
        signal.pthread_sigmask(signal.SIG_SETMASK, previous)

    assert out.getvalue() == b"hi"
    assert len(acknowledged) == len(bits)
    assert all(ack == (os.getpid(), signal.SIGUSR2) for ack in acknowledged)


def test_main_prints_pid_and_restores_mask(capsys):
    with patch("signal.sigwaitinfo", side_effect=KeyboardInterrupt):
        status = main([])
    assert status == 0
    assert f"Server PID: {os.getpid()}\n" in capsys.readouterr().out
    blocked = signal.pthread_sigmask(signal.SIG_BLOCK, [])
    assert signal.SIGUSR1 not in blocked
    assert signal.SIGUSR2 not in blocked