from backend.models.board import Board
from backend.models.messages import Click, Message, Reset, Resize, Shuffle, Solve, Swap

__all__ = ["Board", "Click", "Message", "Reset", "Resize", "Shuffle", "Solve", "Swap"]
