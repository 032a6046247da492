import logging
from dataclasses import replace
from typing import Callable

from src.domain.ports.game_page_source import GamePageSource
from src.domain.value_objects.game_list_state import GameListState

logger = logging.getLogger(__name__)

EMPTY_GROUP_ID_MESSAGE = "Please enter a Roblox Group ID."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."

StateListener = Callable[[GameListState], None]


class GameListController:
    """검색 / 더 보기 동작으로 게임 목록을 누적하는 Pagination Controller

    상태는 GameListState 스냅샷으로 주고받으며, 각 동작은 새 스냅샷을 반환한다.
    로딩 중 들어온 요청은 무시한다 (요청은 항상 순차적).
    """

    def __init__(
        self,
        page_source: GamePageSource,
        sort_order: str | None = "Desc",
        listeners: list[StateListener] | None = None,
    ):
        self.page_source = page_source
        self.sort_order = sort_order
        self.listeners = listeners or []

    def set_group_id(self, state: GameListState, group_id: str) -> GameListState:
        return self._publish(state.with_group_id(group_id))

    def search(self, state: GameListState) -> GameListState:
        """첫 페이지부터 새로 검색 (이전 결과는 버림)"""
        if state.is_loading:
            logger.debug("Search ignored: fetch already in progress")
            return state

        if not state.group_id.strip():
            return self._publish(replace(state, error=EMPTY_GROUP_ID_MESSAGE))

        loading = self._publish(
            replace(
                state,
                games=(),
                next_page_cursor=None,
                is_loading=True,
                error=None,
                has_searched=True,
            )
        )
        return self._fetch(loading, cursor=None)

    def load_more(self, state: GameListState) -> GameListState:
        """다음 페이지를 조회하여 기존 목록 뒤에 추가"""
        if not state.can_load_more():
            return state

        loading = self._publish(replace(state, is_loading=True, error=None))
        return self._fetch(loading, cursor=state.next_page_cursor)

    def _fetch(self, loading: GameListState, cursor: str | None) -> GameListState:
        try:
            page = self.page_source.fetch_page(loading.group_id.strip(), cursor, self.sort_order)
        except Exception as e:
            logger.error(f"Failed to fetch games for group {loading.group_id}: {e}")
            return self._publish(
                replace(loading, is_loading=False, error=str(e) or UNKNOWN_ERROR_MESSAGE)
            )

        return self._publish(
            replace(
                loading,
                games=loading.games + tuple(page.data),
                next_page_cursor=page.next_page_cursor,
                is_loading=False,
            )
        )

    def _publish(self, state: GameListState) -> GameListState:
        for listener in self.listeners:
            listener(state)
        return state
