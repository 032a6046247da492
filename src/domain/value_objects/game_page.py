from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.domain.entities.game import Game


@dataclass(frozen=True)
class GamePage:
    """게임 목록 한 페이지

    next_page_cursor는 Roblox API가 준 불투명 토큰으로, 해석하지 않고 그대로 전달한다.
    None이면 다음 페이지가 없다.
    """

    data: list[Game] = field(default_factory=list)
    next_page_cursor: str | None = None

    def is_empty(self) -> bool:
        return not self.data
