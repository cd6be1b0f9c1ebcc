"""Lines of Action: board engine, minimax search and game orchestration."""

__version__ = "0.1.0"
