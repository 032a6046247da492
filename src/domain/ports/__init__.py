from src.domain.ports.game_listing_fetcher import GameListingFetcher
from src.domain.ports.game_page_source import GamePageSource
from src.domain.ports.place_details_fetcher import PlaceDetailsFetcher
from src.domain.ports.thumbnail_fetcher import ThumbnailFetcher

__all__ = ["GameListingFetcher", "GamePageSource", "PlaceDetailsFetcher", "ThumbnailFetcher"]
