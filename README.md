# guessnet

A small number guessing game for two machines, or two terminals on one machine.
The server picks a secret number between 1 and 100. The client asks for your name
and a guess, and the server answers with `Server: High` or `Server: Low` until you
find the number.

The game runs over TCP or over UDP. Each transport has its own server and client.

## Installation

```
pip install .
```

## Playing over TCP

Start the server. The port is optional and defaults to 1212:

```
guessnet-tcp-server [port]
```

The server listens on every interface. It keeps running after a game ends and
accepts the next player, one player at a time. Every player guesses the same
secret number. If a client disconnects, or sends something that holds no
readable number, the server closes that connection and waits for the next one.

In another terminal, connect a client. The host defaults to `localhost` and the
port defaults to 1212:

```
guessnet-tcp-client [hostname [port]]
```

## Playing over UDP

```
guessnet-udp-server [port]
guessnet-udp-client [hostname [port]]
```

The UDP server plays a single game and exits once the number is guessed. All
datagrams it receives count towards that one game, and each reply goes back to
the sender of the datagram it answers. Datagrams with no readable number are
ignored.

## A session

```
What is Your Name?
alice
Pick a number 1-100
50
Server: High
Pick a number 1-100
25
Server: Low
Pick a number 1-100
37
Correct alice, you guessed the right number in 3 Guesses!
```

A first-try win ends with `1 Guess!`.

The clients exit with an error message if the host cannot be resolved, the
connection fails, the server goes away, or the input ends or is not a number.

## Protocol

The first message a client sends is its name and guess, separated by a space,
for example `alice 50`. Later messages hold only the guess. The server replies
with `Server: High`, `Server: Low`, or a final line that starts with `Correct`.

The game logic lives in `guessnet.game.GuessGame`. It is independent of any
socket and can be driven directly:

```python
from guessnet.game import GuessGame, first_message

game = GuessGame(42)
game.handle(first_message("alice", 50))   # "Server: High"
game.handle("42")                         # "Correct alice, you guessed the right number in 2 Guesses!"
```

`handle` raises `ValueError` for a message with no readable number (it does not
count as a guess) and `RuntimeError` once the game is over. `game.count` holds
the number of guesses so far and `game.finished` tells whether the number was
found. `guessnet.game.random_secret(rng)` picks a secret from a `random.Random`,
and `guessnet.game.is_hint(reply)` tells whether a reply asks for another guess.

## Limits

The servers keep no scores or history between runs, set no timeouts, and serve
no more than one game at a time.

## Running the tests

```
pip install .[test]
pytest
```