"""Roblox Games API를 통한 그룹 게임 목록 조회 어댑터

GET /v2/groups/{groupId}/gamesV2
- accessFilter=1 (공개 게임), limit=100, sortOrder=Asc|Desc, cursor(선택)
- 응답: {"previousPageCursor", "nextPageCursor", "data": [...]}
"""

import logging

import httpx

from src.config.settings import ACCESS_FILTER, GAMES_PAGE_LIMIT, HTTP_TIMEOUT, ROBLOX_GAMES_API_URL
from src.domain.exceptions import UpstreamError
from src.domain.ports.game_listing_fetcher import GameListingFetcher
from src.domain.value_objects.game_page import GamePage
from src.domain.value_objects.sort_order import SortOrder
from src.infrastructure.serializers import dict_to_page

logger = logging.getLogger(__name__)


class RobloxGamesAdapter(GameListingFetcher):
    """그룹 게임 목록 조회 (API 키 불필요)"""

    def __init__(
        self,
        base_url: str = ROBLOX_GAMES_API_URL,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def fetch_group_games(
        self,
        group_id: str,
        cursor: str | None,
        sort_order: SortOrder,
    ) -> GamePage:
        """그룹 게임 한 페이지 조회 (2xx가 아니면 UpstreamError)"""
        params = {
            "accessFilter": ACCESS_FILTER,
            "limit": GAMES_PAGE_LIMIT,
            "sortOrder": sort_order.value,
        }
        # 커서는 해석하지 않고 그대로 전달
        if cursor:
            params["cursor"] = cursor

        with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
            response = client.get(f"{self.base_url}/v2/groups/{group_id}/gamesV2", params=params)

        if not response.is_success:
            logger.error(f"Roblox games API returned {response.status_code} for group {group_id}")
            raise UpstreamError(response.status_code)

        data = response.json()
        if not isinstance(data, dict):
            return GamePage()

        return dict_to_page(data)
