"""chessfen — chess position model with a Forsyth-Edwards Notation codec.

The public API lives in :mod:`chessfen.core`.
"""

__version__ = "0.1.0"
