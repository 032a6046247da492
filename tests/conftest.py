"""pytest 공통 픽스처 정의"""

from typing import Any, Callable
from unittest.mock import MagicMock

import pytest

from src.domain.entities.game import Game
from src.domain.ports.game_listing_fetcher import GameListingFetcher
from src.domain.ports.game_page_source import GamePageSource
from src.domain.ports.place_details_fetcher import PlaceDetailsFetcher
from src.domain.ports.thumbnail_fetcher import ThumbnailFetcher
from src.domain.value_objects.reference import CreatorRef, PlaceRef


@pytest.fixture
def make_game() -> Callable[..., Game]:
    """게임 엔티티 팩토리 픽스처 (place_id 미지정 시 게임 ID와 동일)"""

    def _make_game(game_id: int, place_id: int | None = -1, name: str | None = None) -> Game:
        if place_id == -1:
            place_id = game_id
        return Game(
            id=game_id,
            name=name or f"Game {game_id}",
            description=f"Description of game {game_id}",
            creator=CreatorRef(id=123, type="Group"),
            root_place=PlaceRef(id=place_id, type="Place") if place_id is not None else None,
            created="2021-05-14T18:35:33.997Z",
            updated="2024-01-02T03:04:05.000Z",
            place_visits=1234567,
        )

    return _make_game


@pytest.fixture
def sample_game(make_game: Callable[..., Game]) -> Game:
    """샘플 게임 엔티티 픽스처"""
    return make_game(10, name="Test Game")


@pytest.fixture
def sample_raw_game_data() -> dict[str, Any]:
    """Roblox gamesV2 API에서 반환되는 원시 게임 데이터 픽스처"""
    return {
        "id": 10,
        "name": "Test Game",
        "description": "A test experience",
        "creator": {"id": 123, "type": "Group"},
        "rootPlace": {"id": 1010, "type": "Place"},
        "created": "2021-05-14T18:35:33.997Z",
        "updated": "2024-01-02T03:04:05.000Z",
        "placeVisits": 1234567,
    }


@pytest.fixture
def sample_listing_response(sample_raw_game_data: dict[str, Any]) -> dict[str, Any]:
    """그룹 게임 목록 응답 픽스처 (2개, 다음 커서 있음)"""
    second = {
        **sample_raw_game_data,
        "id": 20,
        "name": "Second Game",
        "rootPlace": {"id": 2020, "type": "Place"},
    }
    return {
        "previousPageCursor": None,
        "nextPageCursor": "abc",
        "data": [sample_raw_game_data, second],
    }


@pytest.fixture
def listing_fetcher() -> MagicMock:
    return MagicMock(spec=GameListingFetcher)


@pytest.fixture
def thumbnail_fetcher() -> MagicMock:
    fetcher = MagicMock(spec=ThumbnailFetcher)
    fetcher.fetch_thumbnails.return_value = []
    return fetcher


@pytest.fixture
def details_fetcher() -> MagicMock:
    fetcher = MagicMock(spec=PlaceDetailsFetcher)
    fetcher.fetch_place_details.return_value = []
    return fetcher


@pytest.fixture
def page_source() -> MagicMock:
    return MagicMock(spec=GamePageSource)
