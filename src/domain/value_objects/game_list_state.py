from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.entities.game import Game


@dataclass(frozen=True)
class GameListState:
    """클라이언트 게임 목록 상태 스냅샷

    idle → loading → (success | error) → idle 전이마다 새 스냅샷을 만든다.
    """

    group_id: str = ""
    games: tuple[Game, ...] = ()
    is_loading: bool = False
    error: str | None = None
    next_page_cursor: str | None = None
    has_searched: bool = False

    def can_load_more(self) -> bool:
        """다음 페이지 요청 가능 여부"""
        return self.next_page_cursor is not None and not self.is_loading

    def is_empty_result(self) -> bool:
        """검색은 했지만 결과가 없는 상태인지 확인"""
        return self.has_searched and not self.is_loading and self.error is None and not self.games

    def with_group_id(self, group_id: str) -> GameListState:
        return replace(self, group_id=group_id)
