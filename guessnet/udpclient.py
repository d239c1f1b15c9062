"""UDP client that lets a player guess the server's number."""

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


def play(sock: socket.socket, address: tuple[str, int], stdin: TextIO, stdout: TextIO) -> str:
    """Play one game against the server at ``address``; return the final reply."""
    console = _Console(stdin, stdout)
    name = console.ask_name()
    guess = console.ask_guess()
    message = first_message(name, guess)
    while True:
        sock.sendto(message.encode(), address)
        data, _ = sock.recvfrom(CLIENT_BUFSIZE)
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
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as sock:
        try:
            play(sock, (address, port), sys.stdin, sys.stdout)
        except ConnectionError as exc:
            raise SystemExit(f"Server disconnected: {exc}") from None
        except (EOFError, ValueError) as exc:
            raise SystemExit(f"bad input: {exc}") from None
    return 0


if __name__ == "__main__":
    sys.exit(main())