import io
import socket
import threading

import pytest

from guessnet.tcpclient import main, play

FINAL = "Correct alice, you guessed the right number in 3 Guesses!"


def _scripted_server(sock, replies, received):
    def run():
        with sock:
            for reply in replies:
                received.append(sock.recv(5000).decode())
                sock.sendall(reply.encode())

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    return thread


def test_play_full_game():
    client_side, server_side = socket.socketpair()
    client_side.settimeout(5)
    received = []
    thread = _scripted_server(server_side, ["Server: High", "Server: Low", FINAL], received)
    stdout = io.StringIO()
    with client_side:
        result = play(client_side, io.StringIO("alice\n70\n30\n50\n"), stdout)
    thread.join(5)
    assert result == FINAL
    assert received == ["alice 70", "30", "50"]
    assert stdout.getvalue().splitlines() == [
        "What is Your Name?",
        "Pick a number 1-100",
        "Server: High",
        "Pick a number 1-100",
        "Server: Low",
        "Pick a number 1-100",
        FINAL,
    ]


def test_play_server_disconnects():
    client_side, server_side = socket.socketpair()
    client_side.settimeout(5)
    received = []

    def run():
        received.append(server_side.recv(5000).decode())
        server_side.close()

    thread = threading.Thread(target=run, daemon=True)
    thread.start()
    with client_side, pytest.raises(ConnectionError):
        play(client_side, io.StringIO("bob 12\n"), io.StringIO())
    thread.join(5)
    assert received == ["bob 12"]


def test_play_input_ends():
    client_side, server_side = socket.socketpair()
    with client_side, server_side, pytest.raises(EOFError):
        play(client_side, io.StringIO("alice\n"), io.StringIO())


def test_play_guess_not_a_number():
    client_side, server_side = socket.socketpair()
    with client_side, server_side, pytest.raises(ValueError):
        play(client_side, io.StringIO("alice abc\n"), io.StringIO())


def test_main_usage_error():
    with pytest.raises(SystemExit) as info:
        main(["a", "b", "c"])
    assert "Usage" in str(info.value.code)


def test_main_connect_failed():
    probe = socket.socket()
    probe.bind(("127.0.0.1", 0))
    port = probe.getsockname()[1]
    probe.close()
    with pytest.raises(SystemExit) as info:
        main(["127.0.0.1", str(port)])
    assert "connect failed" in str(info.value.code)