"""Small console programs that teach programming fundamentals: snake, tic-tac-toe, iterators, polymorphism and callbacks."""

__version__ = "0.1.0"