from abc import ABC, abstractmethod

from src.domain.value_objects.game_page import GamePage
from src.domain.value_objects.sort_order import SortOrder


class GameListingFetcher(ABC):
    """Roblox 그룹의 게임 목록을 페이지 단위로 가져오는 Port"""

    @abstractmethod
    def fetch_group_games(
        self,
        group_id: str,
        cursor: str | None,
        sort_order: SortOrder,
    ) -> GamePage:
        """그룹 게임 한 페이지 조회 (실패 시 UpstreamError)"""
        pass
