from src.domain.value_objects.game_list_state import GameListState
from src.domain.value_objects.game_page import GamePage
from src.domain.value_objects.place_metadata import PlaceDetails, PlaceThumbnail
from src.domain.value_objects.reference import CreatorRef, PlaceRef
from src.domain.value_objects.sort_order import SortOrder

__all__ = [
    "CreatorRef",
    "GameListState",
    "GamePage",
    "PlaceDetails",
    "PlaceRef",
    "PlaceThumbnail",
    "SortOrder",
]
