import signal
import threading
from unittest.mock import patch

import pytest

from minitalk.client import ClientError, main, parse_args, send_message
from minitalk.protocol import Decoder


def _acknowledging_kill(record):
    main_thread = threading.main_thread().ident

    def fake_kill(pid, sig):
        record.append((pid, sig))
        signal.pthread_kill(main_thread, signal.SIGUSR2)

    return fake_kill


def _decode(record):
    decoder = Decoder()
    out = bytearray()
    for pid, sig in record:
        byte = decoder.feed(pid, 1 if sig == signal.SIGUSR2 else 0)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_parse_args_valid():
    assert parse_args(["42", "hello"]) == (42, "hello")


def test_parse_args_uses_leading_number():
    assert parse_args(["  42abc", "m"]) == (42, "m")


@pytest.mark.parametrize("argv", [[], ["42"], ["42", "a", "b"]])
def test_parse_args_wrong_count(argv):
    with pytest.raises(ClientError, match="Error Arguments"):
        parse_args(argv)


@pytest.mark.parametrize("pid", ["0", "-5", "abc"])
def test_parse_args_bad_pid(pid):
    with pytest.raises(ClientError, match="Error PID"):
        parse_args([pid, "hello"])


def test_parse_args_empty_message():
    with pytest.raises(ClientError, match="Error Message"):
        parse_args(["42", ""])


def test_send_message_round_trip_and_restores_mask():
    record = []
    with patch("os.kill", side_effect=_acknowledging_kill(record)):
        sent = send_message(1234, "hi there", 0)
    assert sent == len(record) == 8 * len("hi there")
    assert _decode(record) == b"hi there"
    assert {pid for pid, _ in record} == {1234}
    assert signal.SIGUSR2 not in signal.pthread_sigmask(signal.SIG_BLOCK, [])


def test_send_message_rejects_bad_pid():
    with patch("os.kill") as kill:
        with pytest.raises(ClientError):
            send_message(0, "x", 0)
    assert kill.call_count == 0


def test_main_reports_argument_error(capsys):
    assert main(["1"]) == 0
    assert capsys.readouterr().out == "Error Arguments\n"


def test_main_reports_pid_error(capsys):
    assert main(["0", "hello"]) == 0
    assert capsys.readouterr().out == "Error PID\n"


def test_main_sends_message():
    record = []
    with patch("os.kill", side_effect=_acknowledging_kill(record)):
        status = main(["777", "yo"])
    assert status == 0
    assert _decode(record) == b"yo"


def test_main_reports_missing_process():
    with patch("os.kill", side_effect=ProcessLookupError(3, "No such process")):
        assert main(["99999", "hey"]) == 1
    assert signal.SIGUSR2 not in signal.pthread_sigmask(signal.SIG_BLOCK, [])