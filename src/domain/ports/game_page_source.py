from abc import ABC, abstractmethod

from src.domain.value_objects.game_page import GamePage


class GamePageSource(ABC):
    """병합된 게임 페이지를 제공하는 Port (클라이언트 측에서 사용)"""

    @abstractmethod
    def fetch_page(
        self,
        group_id: str,
        cursor: str | None = None,
        sort_order: str | None = None,
    ) -> GamePage:
        """게임 페이지 조회 (실패 시 예외의 메시지가 사용자에게 표시됨)"""
        pass
