"""TCP server that runs the guessing game for one client after another."""

from __future__ import annotations

import random
import socket
import sys

from guessnet.game import DEFAULT_PORT, SERVER_BUFSIZE, GuessGame, _parse_port, random_secret


def create_server(port: int) -> socket.socket:
    """Open a listening TCP socket on every interface at ``port``."""
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind(("", port))
        sock.listen(10)
    except OSError:
        sock.close()
        raise
    return sock


def serve_client(conn: socket.socket, secret: int) -> int | None:
    """Play one game over ``conn`` and close it.

    Returns the number of guesses it took, or None if the client went
    away or sent something that is not a guess.
    """
    game = GuessGame(secret)
    with conn:
        while True:
            data = conn.recv(SERVER_BUFSIZE)
            if not data:
                return None
            try:
                reply = game.handle(data.decode(errors="replace"))
            except ValueError:
                return None
            conn.sendall(reply.encode())
            if game.finished:
                return game.count


def serve_forever(sock: socket.socket, secret: int) -> None:
    """Accept clients one at a time, each guessing the same secret."""
    while True:
        conn, _ = sock.accept()
        serve_client(conn, secret)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) > 1:
        raise SystemExit("Usage: server <port>")
    port = _parse_port(args[0]) if args else DEFAULT_PORT
    secret = random_secret(random.Random())
    try:
        sock = create_server(port)
    except OSError as exc:
        raise SystemExit(f"bind failed: {exc}") from None
    with sock:
        serve_forever(sock, secret)
    return 0


if __name__ == "__main__":
    sys.exit(main())