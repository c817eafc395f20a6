"""Console helpers shared by the client and the server."""

from __future__ import annotations

import random
import sys

_CLIENT_HELP = """Possible commands:
* move <location> <unitID> <unitID> <unitID>...
    example:
    move asia 1
* spawn <location> <rank>
    example:
    spawn europe infantry
* status
* spam <n>
    example:
    spam 5
* quit
* help
"""

_SERVER_HELP = """Possible commands:
* pause
* resume
* quit
* help
"""

_QUIT_MESSAGE = "I hate this game! (╯°□°)╯︵ ┻━┻\n"

_MALICIOUS_LOGS = (
    "Never interrupt your enemy when he is making a mistake.",
    "The hardest thing of all for a soldier is to retreat.",
    "A soldier will fight long and hard for a bit of colored ribbon.",
    "It is well that war is so terrible, otherwise we should grow too fond of it.",
    "The art of war is simple enough. Find out where your enemy is. "
    "Get at him as soon as you can. Strike him as hard as you can, "
    "and keep moving on.",
    "All warfare is based on deception.",
)


def _emit(text: str) -> str:
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def print_client_help() -> str:
    """Print the commands a client understands and return the printed text."""
    return _emit(_CLIENT_HELP)


def client_welcome() -> str:
    """Greet the player and ask for a username; ValueError if none is entered."""
    _emit("Welcome to the Peril client!\nPlease enter your username:\n")
    words = get_input()
    if not words:
        raise ValueError("you must enter a username. goodbye")
    username = words[0]
    _emit(f"Welcome, {username}!\n")
    print_client_help()
    return username


def print_server_help() -> str:
    """Print the commands the server understands and return the printed text."""
    return _emit(_SERVER_HELP)


def get_input() -> list[str]:
    """Prompt for a line on standard input and split it into words ([] at EOF)."""
    _emit("> ")
    return sys.stdin.readline().split()


def get_malicious_log() -> str:
    """Return a randomly chosen quotation for spamming the logs."""
    return random.choice(_MALICIOUS_LOGS)


def print_quit() -> str:
    """Print the farewell message and return the printed text."""
    return _emit(_QUIT_MESSAGE)