"""SUBLEQ battle royale arena with a token grammar, ELO ranking, Hall of Fame and replay buffer."""

__version__ = "0.1.0"