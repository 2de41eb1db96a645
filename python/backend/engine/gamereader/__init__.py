from backend.engine.gamereader.reader import PuzzleFormatError, parse_puzzle, read_puzzle

__all__ = ["PuzzleFormatError", "parse_puzzle", "read_puzzle"]
