"""Flappy Shield: a flappy-bird style arcade game with a timed shield."""

__version__ = "0.1.0"
