"""bitfour - bitboard rules engine for two-player Connect Four."""

__version__ = "0.1.0"
