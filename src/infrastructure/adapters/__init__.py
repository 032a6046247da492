from src.infrastructure.adapters.games_api_client import GamesApiClient
from src.infrastructure.adapters.roblox_games_adapter import RobloxGamesAdapter
from src.infrastructure.adapters.roblox_place_details_adapter import RobloxPlaceDetailsAdapter
from src.infrastructure.adapters.roblox_thumbnail_adapter import RobloxThumbnailAdapter

__all__ = ["GamesApiClient", "RobloxGamesAdapter", "RobloxPlaceDetailsAdapter", "RobloxThumbnailAdapter"]
