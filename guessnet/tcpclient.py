"""TCP client that lets a player guess the server's number."""

from __future__ import annotations

import socket
import sys
from typing import TextIO

from guessnet.game import (
    CLIENT_BUFSIZE,
    DEFAULT_HOST,
    DEFAULT_PORT,
    _Console,
    _parse_port,
    first_message,
    is_hint,
)


def play(sock: socket.socket, stdin: TextIO, stdout: TextIO) -> str:
    """Play one game over a connected socket and return the final reply."""
    console = _Console(stdin, stdout)
    name = console.ask_name()
    guess = console.ask_guess()
    message = first_message(name, guess)
    while True:
        sock.sendall(message.encode())
        data = sock.recv(CLIENT_BUFSIZE)
        if not data:
            raise ConnectionError("Server disconnected")
        reply = data.decode(errors="replace")
        console.say(reply)
        if not is_hint(reply):
            return reply
        message = str(console.ask_guess())


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 2:
        raise SystemExit("Usage: client <hostname> <port>")
    host = args[0] if args else DEFAULT_HOST
    port = _parse_port(args[1]) if len(args) == 2 else DEFAULT_PORT
    try:
        address = socket.gethostbyname(host)
    except OSError:
        raise SystemExit("invalid host") from None
    try:
        sock = socket.create_connection((address, port))
    except OSError as exc:
        raise SystemExit(f"connect failed: {exc}") from None
    with sock:
        try:
            play(sock, sys.stdin, sys.stdout)
        except ConnectionError as exc:
            raise SystemExit(str(exc)) from None
        except (EOFError, ValueError) as exc:
            raise SystemExit(f"bad input: {exc}") from None
    return 0


if __name__ == "__main__":
    sys.exit(main())