from src.domain.entities import Game
from src.domain.ports import GameListingFetcher, GamePageSource, PlaceDetailsFetcher, ThumbnailFetcher
from src.domain.value_objects import GameListState, GamePage, SortOrder

__all__ = [
    "Game",
    "GameListState",
    "GamePage",
    "SortOrder",
    "GameListingFetcher",
    "GamePageSource",
    "PlaceDetailsFetcher",
    "ThumbnailFetcher",
]
