"""Dice-driven discipline command for Discord guilds."""

__version__ = "0.1.0"
