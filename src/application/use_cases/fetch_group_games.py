import logging
from dataclasses import replace

from src.config.settings import PLACEHOLDER_THUMBNAIL_URL
from src.domain.entities.game import Game
from src.domain.exceptions import ValidationError
from src.domain.ports.game_listing_fetcher import GameListingFetcher
from src.domain.ports.game_page_source import GamePageSource
from src.domain.ports.place_details_fetcher import PlaceDetailsFetcher
from src.domain.ports.thumbnail_fetcher import ThumbnailFetcher
from src.domain.value_objects.game_page import GamePage
from src.domain.value_objects.place_metadata import PlaceDetails, PlaceThumbnail
from src.domain.value_objects.sort_order import SortOrder

logger = logging.getLogger(__name__)


class FetchGroupGamesUseCase(GamePageSource):
    """그룹 게임 목록에 썸네일/플레이 가능 여부를 병합하는 Use Case

    1. 게임 목록 조회 (실패 시 UpstreamError 전파)
    2. rootPlace.id 기준으로 상세 정보, 썸네일 조회 (실패 시 빈 결과)
    3. 목록 순서를 유지한 채 병합
    """

    def __init__(
        self,
        listing_fetcher: GameListingFetcher,
        thumbnail_fetcher: ThumbnailFetcher,
        details_fetcher: PlaceDetailsFetcher,
    ):
        self.listing_fetcher = listing_fetcher
        self.thumbnail_fetcher = thumbnail_fetcher
        self.details_fetcher = details_fetcher

    def execute(
        self,
        group_id: str | None,
        cursor: str | None = None,
        sort_order: str | SortOrder | None = None,
    ) -> GamePage:
        # 입력 검증은 네트워크 호출 전에
        if group_id is None or not group_id.strip():
            raise ValidationError("Group ID is required")
        order = sort_order if isinstance(sort_order, SortOrder) else SortOrder.parse(sort_order)

        listing = self.listing_fetcher.fetch_group_games(group_id.strip(), cursor or None, order)
        if listing.is_empty():
            return GamePage(data=[], next_page_cursor=None)

        # 중복 포함, 목록 순서 그대로
        place_ids = [game.place_id for game in listing.data if game.place_id is not None]

        thumbnails: dict[int, str] = {}
        details: dict[int, bool] = {}
        if place_ids:
            details = self._index_details(self.details_fetcher.fetch_place_details(place_ids))
            thumbnails = self._index_thumbnails(self.thumbnail_fetcher.fetch_thumbnails(place_ids))

        merged = [self._merge(game, thumbnails, details) for game in listing.data]
        logger.debug(
            f"Merged {len(merged)} games for group {group_id}: "
            f"thumbnails={len(thumbnails)}, details={len(details)}"
        )

        return GamePage(data=merged, next_page_cursor=listing.next_page_cursor)

    def fetch_page(
        self,
        group_id: str,
        cursor: str | None = None,
        sort_order: str | None = None,
    ) -> GamePage:
        """GamePageSource 구현 (프로세스 내 조회)"""
        return self.execute(group_id, cursor, sort_order)

    def _merge(self, game: Game, thumbnails: dict[int, str], details: dict[int, bool]) -> Game:
        """게임 하나에 썸네일 URL과 플레이 가능 여부 부여 (없으면 기본값)"""
        place_id = game.place_id
        return replace(
            game,
            thumbnail_url=thumbnails.get(place_id, PLACEHOLDER_THUMBNAIL_URL),
            is_playable=details.get(place_id, False),
        )

    def _index_thumbnails(self, thumbnails: list[PlaceThumbnail]) -> dict[int, str]:
        """place_id → image_url (중복 시 첫 번째, 빈 URL은 제외)"""
        index: dict[int, str] = {}
        for thumbnail in thumbnails:
            if thumbnail.place_id in index or not thumbnail.image_url:
                continue
            index[thumbnail.place_id] = thumbnail.image_url
        return index

    def _index_details(self, details: list[PlaceDetails]) -> dict[int, bool]:
        """place_id → is_playable (중복 시 첫 번째)"""
        index: dict[int, bool] = {}
        for detail in details:
            index.setdefault(detail.place_id, detail.is_playable)
        return index
