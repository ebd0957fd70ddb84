"""chessrules: chess rules engine with FEN/notation export and advisory hooks."""

__version__ = "0.1.0"
