"""Rules of the number guessing game, shared by the servers and clients."""

from __future__ import annotations

import random
import re
from typing import Iterator, TextIO

DEFAULT_PORT = 1212
DEFAULT_HOST = "localhost"
SERVER_BUFSIZE = 1000
CLIENT_BUFSIZE = 5000

HIGH = "Server: High"
LOW = "Server: Low"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read a leading integer the way ``%d`` does, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"expected a number, got {text!r}")
    return int(match.group(1))


def _parse_port(text: str) -> int:
    try:
        port = int(text)
    except ValueError:
        raise SystemExit(f"invalid port: {text}") from None
    if not 0 <= port <= 65535:
        raise SystemExit(f"invalid port: {text}")
    return port


def random_secret(rng: random.Random) -> int:
    """Pick the number to guess, between 1 and 100 inclusive."""
    return rng.randint(1, 100)


def is_hint(reply: str) -> bool:
    """Tell whether a server reply asks for another guess."""
    return reply in (HIGH, LOW)


def first_message(name: str, guess: int) -> str:
    """Build the opening message a client sends: its name and first guess."""
    return f"{name} {guess}"


class GuessGame:
    """One player's game against a fixed secret number."""

    def __init__(self, secret: int) -> None:
        self.secret = secret
        self.name: str | None = None
        self.count = 0
        self.finished = False

    def handle(self, message: str) -> str:
        """Take one message from the player and return the server's reply.

        The first message carries the player's name and a guess; later
        messages carry only a guess. A message without a readable guess
        raises ValueError and does not count as a guess.
        """
        if self.finished:
            raise RuntimeError("the game is already over")
        if self.name is None:
            parts = message.split(None, 1)
            if not parts:
                raise ValueError("expected a name and a number")
            name = parts[0]
            guess = _parse_int(parts[1] if len(parts) > 1 else "")
            self.name = name
        else:
            guess = _parse_int(message)

        self.count += 1
        if guess > self.secret:
            return HIGH
        if guess < self.secret:
            return LOW
        self.finished = True
        noun = "Guess!" if self.count == 1 else "Guesses!"
        return f"Correct {self.name}, you guessed the right number in {self.count} {noun}"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


class _Console:
    """Prompts the player and reads whitespace-separated answers."""

    def __init__(self, stdin: TextIO, stdout: TextIO) -> None:
        self._tokens = _tokens(stdin)
        self._out = stdout

    def say(self, text: str) -> None:
        print(text, file=self._out, flush=True)

    def _next(self) -> str:
        try:
            return next(self._tokens)
        except StopIteration:
            raise EOFError("input ended") from None

    def ask_name(self) -> str:
        self.say("What is Your Name?")
        return self._next()

    def ask_guess(self) -> int:
        self.say("Pick a number 1-100")
        return _parse_int(self._next())