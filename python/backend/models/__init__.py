from backend.models.board import Board, Direction, IllegalMoveError, InvalidBoardError

__all__ = ["Board", "Direction", "IllegalMoveError", "InvalidBoardError"]
