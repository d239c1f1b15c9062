import io
import socket
import threading

import pytest

from guessnet.udpclient import main, play

FINAL = "Correct carol, you guessed the right number in 2 Guesses!"


def _scripted_server(server, replies, received):
    def run():
        for reply in replies:
            data, peer = server.recvfrom(5000)
            received.append(data.decode())
            server.sendto(reply.encode(), peer)

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


def _sockets():
    server = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    server.bind(("127.0.0.1", 0))
    server.settimeout(5)
    client = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    client.settimeout(5)
    return server, client


def test_play_full_game():
    server, client = _sockets()
    received = []
    with server, client:
        thread = _scripted_server(server, ["Server: Low", FINAL], received)
        stdout = io.StringIO()
        result = play(client, server.getsockname(), io.StringIO("carol 10\n60\n"), stdout)
        thread.join(5)
    assert result == FINAL
    assert received == ["carol 10", "60"]
    assert stdout.getvalue().splitlines() == [
        "What is Your Name?",
        "Pick a number 1-100",
        "Server: Low",
        "Pick a number 1-100",
        FINAL,
    ]


def test_play_empty_reply_is_disconnect():
    server, client = _sockets()
    received = []
    with server, client:
        thread = _scripted_server(server, [""], received)
        with pytest.raises(ConnectionError):
            play(client, server.getsockname(), io.StringIO("dave 3\n"), io.StringIO())
        thread.join(5)
    assert received == ["dave 3"]


def test_play_input_ends():
    server, client = _sockets()
    with server, client, pytest.raises(EOFError):
        play(client, server.getsockname(), io.StringIO(""), io.StringIO())


def test_main_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["a", "b", "c"])
    assert "Usage" in str(info.value.code)