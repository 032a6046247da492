"""GameListController 단위 테스트"""

from unittest.mock import call

import pytest

from src.application.use_cases.paginate_games import (
    EMPTY_GROUP_ID_MESSAGE,
    UNKNOWN_ERROR_MESSAGE,
    GameListController,
)
from src.domain.value_objects.game_list_state import GameListState
from src.domain.value_objects.game_page import GamePage


@pytest.fixture
def published() -> list[GameListState]:
    return []


@pytest.fixture
def controller(page_source, published) -> GameListController:
    return GameListController(page_source, sort_order="Desc", listeners=[published.append])


class TestSearch:
    """search 동작 테스트"""

    def test_empty_group_id_sets_error_without_fetch(self, controller, page_source):
        state = controller.search(GameListState(group_id="  "))

        assert state.error == EMPTY_GROUP_ID_MESSAGE
        assert state.is_loading is False
        page_source.fetch_page.assert_not_called()

    def test_search_fetches_first_page(self, controller, page_source, make_game):
        page_source.fetch_page.return_value = GamePage(data=[make_game(1), make_game(2)], next_page_cursor="abc")

        state = controller.search(GameListState(group_id="123"))

        page_source.fetch_page.assert_called_once_with("123", None, "Desc")
        assert [game.id for game in state.games] == [1, 2]
        assert state.next_page_cursor == "abc"
        assert state.is_loading is False
        assert state.error is None
        assert state.has_searched is True

    def test_search_publishes_loading_snapshot(self, controller, page_source, published, make_game):
        """로딩 스냅샷은 이전 결과가 비워진 상태"""
        page_source.fetch_page.return_value = GamePage(data=[make_game(3)])
        previous = GameListState(group_id="123", games=(make_game(1),), next_page_cursor="old")

        controller.search(previous)

        loading = published[0]
        assert loading.is_loading is True
        assert loading.games == ()
        assert loading.next_page_cursor is None
        assert published[-1].is_loading is False

    def test_second_search_discards_first_results(self, controller, page_source, make_game):
        """다른 그룹으로 재검색하면 이전 결과와 섞이지 않음"""
        page_source.fetch_page.side_effect = [
            GamePage(data=[make_game(1), make_game(2)], next_page_cursor="abc"),
            GamePage(data=[make_game(9)], next_page_cursor=None),
        ]

        state = controller.search(GameListState(group_id="111"))
        state = controller.search(state.with_group_id("222"))

        assert [game.id for game in state.games] == [9]
        assert state.next_page_cursor is None
        assert page_source.fetch_page.call_args_list == [
            call("111", None, "Desc"),
            call("222", None, "Desc"),
        ]

    def test_search_failure_sets_error_message(self, controller, page_source):
        page_source.fetch_page.side_effect = RuntimeError("Failed to fetch games from Roblox API")

        state = controller.search(GameListState(group_id="123"))

        assert state.error == "Failed to fetch games from Roblox API"
        assert state.is_loading is False
        assert state.games == ()

    def test_failure_without_message_uses_generic_error(self, controller, page_source):
        page_source.fetch_page.side_effect = RuntimeError()

        state = controller.search(GameListState(group_id="123"))

        assert state.error == UNKNOWN_ERROR_MESSAGE

    def test_empty_result_clears_loading(self, controller, page_source):
        page_source.fetch_page.return_value = GamePage()

        state = controller.search(GameListState(group_id="123"))

        assert state.is_loading is False
        assert state.is_empty_result() is True

    def test_search_ignored_while_loading(self, controller, page_source):
        """진행 중인 요청이 있으면 새 검색 무시"""
        state = GameListState(group_id="123", is_loading=True)

        assert controller.search(state) is state
        page_source.fetch_page.assert_not_called()

    def test_search_clears_previous_error(self, controller, page_source, make_game):
        page_source.fetch_page.return_value = GamePage(data=[make_game(1)])

        state = controller.search(GameListState(group_id="123", error="old error"))

        assert state.error is None


class TestLoadMore:
    """load_more 동작 테스트"""

    def test_noop_without_cursor(self, controller, page_source, published, make_game):
        """커서가 없으면 호출 없이 상태 그대로"""
        state = GameListState(group_id="123", games=(make_game(1),), next_page_cursor=None)

        assert controller.load_more(state) is state
        page_source.fetch_page.assert_not_called()
        assert published == []

    def test_noop_while_loading(self, controller, page_source):
        state = GameListState(group_id="123", next_page_cursor="abc", is_loading=True)

        assert controller.load_more(state) is state
        page_source.fetch_page.assert_not_called()

    def test_appends_next_page_in_order(self, controller, page_source, make_game):
        page_source.fetch_page.return_value = GamePage(data=[make_game(3), make_game(4)], next_page_cursor="def")
        state = GameListState(group_id="123", games=(make_game(1), make_game(2)), next_page_cursor="abc")

        state = controller.load_more(state)

        page_source.fetch_page.assert_called_once_with("123", "abc", "Desc")
        assert [game.id for game in state.games] == [1, 2, 3, 4]
        assert state.next_page_cursor == "def"
        assert state.is_loading is False

    def test_last_page_clears_cursor(self, controller, page_source, make_game):
        page_source.fetch_page.return_value = GamePage(data=[make_game(2)], next_page_cursor=None)
        state = GameListState(group_id="123", games=(make_game(1),), next_page_cursor="abc")

        state = controller.load_more(state)

        assert state.next_page_cursor is None
        assert state.can_load_more() is False

    def test_failure_keeps_existing_games(self, controller, page_source, make_game):
        """실패해도 이미 불러온 목록은 유지"""
        page_source.fetch_page.side_effect = RuntimeError("Internal Server Error")
        state = GameListState(group_id="123", games=(make_game(1),), next_page_cursor="abc")

        state = controller.load_more(state)

        assert [game.id for game in state.games] == [1]
        assert state.error == "Internal Server Error"
        assert state.next_page_cursor == "abc"
        assert state.is_loading is False


class TestSetGroupId:

    def test_set_group_id_publishes_snapshot(self, controller, published):
        state = controller.set_group_id(GameListState(), "123")

        assert state.group_id == "123"
        assert published == [state]
