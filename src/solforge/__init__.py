"""Solforge - stateless HTTP facade for building Solana instructions."""

__version__ = "0.1.0"
