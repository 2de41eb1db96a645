from backend.engine.gamegenerator.generator import DEFAULT_SHUFFLES_PER_CELL, GameGenerator

__all__ = ["DEFAULT_SHUFFLES_PER_CELL", "GameGenerator"]
