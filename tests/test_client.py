import signal
from unittest import mock

import pytest

from sigtalk.client import USAGE, main, send_char, send_message
from sigtalk.protocol import BitDecoder


def _decode_calls(kill_mock):
    decoder = BitDecoder()
    out = bytearray()
    for call in kill_mock.call_args_list:
        byte = decoder.feed(call.args[1] == signal.SIGUSR1)
        if byte is not None:
            out.append(byte)
    return bytes(out)


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_send_char_signals_bits(kill, sleep):
    send_char(4321, ord("A"), 0)
    signals = [call.args[1] for call in kill.call_args_list]
    assert signals == [
        signal.SIGUSR1,
        signal.SIGUSR2,
        signal.SIGUSR2,
        signal.SIGUSR2,
        signal.SIGUSR2,
        signal.SIGUSR2,
        signal.SIGUSR1,
        signal.SIGUSR2,
    ]
    assert [call.args[0] for call in kill.call_args_list] == [4321] * 8
    assert sleep.call_count == 8
    assert _decode_calls(kill) == b"A"


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_send_char_default_delay(kill, sleep):
    send_char(7, 0)
    assert [call.args[0] for call in sleep.call_args_list] == [0.0005] * 8
    assert [call.args[1] for call in kill.call_args_list] == [signal.SIGUSR2] * 8
    assert _decode_calls(kill) == b"\x00"


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_send_message_round_trip(kill, sleep):
    send_message(99, "Hello!", 0)
    assert kill.call_count == 6 * 8
    assert _decode_calls(kill) == b"Hello!"


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_send_char_rejects_bad_byte(kill, sleep):
    with pytest.raises(ValueError):
        send_char(99, 300, 0)
    assert kill.call_count == 0


@pytest.mark.parametrize("argv", [[], ["123"], ["123", "a", "b"]])
@mock.patch("sigtalk.client.os.kill")
def test_main_wrong_arguments(kill, argv, capfd):
    assert main(argv) == 1
    assert capfd.readouterr().out == USAGE
    assert kill.call_count == 0


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_main_sends_message(kill, sleep):
    assert main(["42", "hi"]) == 0
    assert {call.args[0] for call in kill.call_args_list} == {42}
    assert _decode_calls(kill) == b"hi"


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_main_parses_pid_leniently(kill, sleep):
    assert main(["  +42abc", "x"]) == 0
    assert {call.args[0] for call in kill.call_args_list} == {42}


@mock.patch("sigtalk.client.time.sleep")
@mock.patch("sigtalk.client.os.kill")
def test_main_empty_message_sends_nothing(kill, sleep):
    assert main(["42", ""]) == 0
    assert kill.call_count == 0