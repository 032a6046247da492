from src.domain.entities.game import Game

__all__ = ["Game"]
