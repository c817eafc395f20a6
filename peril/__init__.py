"""Game state, message models, console and RabbitMQ helpers for the Peril war game."""

__version__ = "0.1.0"