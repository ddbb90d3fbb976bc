"""Bomby Explody: a pygame arcade game of throwing bombs and chaining their blasts."""

__version__ = "0.1.0"