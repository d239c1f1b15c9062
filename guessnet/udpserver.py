"""UDP server that runs a single guessing game."""

from __future__ import annotations

import random
import socket
import sys

from guessnet.game import DEFAULT_PORT, SERVER_BUFSIZE, GuessGame, _parse_port, random_secret


def create_socket(port: int) -> socket.socket:
    """Open a UDP socket bound to every interface at ``port``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
    except OSError:
        sock.close()
        raise
    return sock


def serve_game(sock: socket.socket, secret: int) -> int:
    """Answer datagrams until the number is guessed; return the guess count.

    Each reply goes to the sender of the datagram it answers. Datagrams
    holding no readable guess are ignored.
    """
    game = GuessGame(secret)
    while True:
        data, address = sock.recvfrom(SERVER_BUFSIZE)
        try:
            reply = game.handle(data.decode(errors="replace"))
        except ValueError:
            continue
        sock.sendto(reply.encode(), address)
        if game.finished:
            return game.count


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        raise SystemExit("Usage: server <port>")
    port = _parse_port(args[0]) if args else DEFAULT_PORT
    secret = random_secret(random.Random())
    try:
        sock = create_socket(port)
    except OSError as exc:
        raise SystemExit(f"Bind failed: {exc}") from None
    with sock:
        try:
            serve_game(sock, secret)
        except OSError as exc:
            raise SystemExit(f"recvfrom failed: {exc}") from None
    return 0


if __name__ == "__main__":
    sys.exit(main())