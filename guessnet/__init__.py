"""A number guessing game played over TCP or UDP, with servers, clients and game rules."""

__version__ = "0.1.0"