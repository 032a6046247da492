"""Roblox 그룹 게임 조회 CLI

사용법:
    python -m src.main                       # 프로세스 내에서 Roblox API 직접 조회
    python -m src.main --api-url URL         # 실행 중인 서버(/api/roblox-games) 사용
    python -m src.main serve                 # FastAPI 서버 실행
"""

import argparse
import logging
import sys

from src.application.use_cases.fetch_group_games import FetchGroupGamesUseCase
from src.application.use_cases.paginate_games import GameListController
from src.config.settings import GAMES_FINDER_API_URL, LOG_LEVEL, SERVER_HOST, SERVER_PORT
from src.domain.ports.game_page_source import GamePageSource
from src.domain.value_objects.game_list_state import GameListState
from src.infrastructure.adapters.games_api_client import GamesApiClient
from src.infrastructure.adapters.roblox_games_adapter import RobloxGamesAdapter
from src.infrastructure.adapters.roblox_place_details_adapter import RobloxPlaceDetailsAdapter
from src.infrastructure.adapters.roblox_thumbnail_adapter import RobloxThumbnailAdapter
from src.presentation.game_formatter import format_state


def create_page_source(api_url: str) -> GamePageSource:
    """페이지 소스 생성 (서버 URL이 있으면 HTTP, 없으면 프로세스 내 조회)"""
    if api_url:
        print(f"✓ 서버 사용: {api_url}")
        return GamesApiClient(api_url)

    return FetchGroupGamesUseCase(
        listing_fetcher=RobloxGamesAdapter(),
        thumbnail_fetcher=RobloxThumbnailAdapter(),
        details_fetcher=RobloxPlaceDetailsAdapter(),
    )


def show_loading(state: GameListState) -> None:
    if state.is_loading:
        print(format_state(state))


def run_interactive(controller: GameListController) -> None:
    """그룹 ID 입력 → 검색, 'm' → 더 보기, 'q' → 종료"""
    state = GameListState()
    print("Roblox Group Games Finder")
    print("그룹 ID를 입력하세요 ('m': 더 보기, 'q': 종료)")

    while True:
        command = input("> ").strip()
        if command == "q":
            return

        if command == "m":
            if not state.can_load_more():
                print("ℹ️  더 불러올 게임이 없습니다.")
                continue
            state = controller.load_more(state)
        else:
            state = controller.set_group_id(state, command)
            state = controller.search(state)

        print(format_state(state))


def serve(host: str, port: int) -> None:
    import uvicorn

    from src.infrastructure.web.app import app

    uvicorn.run(app, host=host, port=port)


def run(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Roblox 그룹 게임 조회")
    parser.add_argument("command", nargs="?", choices=["search", "serve"], default="search")
    parser.add_argument("--api-url", default=GAMES_FINDER_API_URL, help="Games Finder 서버 URL")
    parser.add_argument("--sort-order", default="Desc", choices=["Asc", "Desc"])
    parser.add_argument("--host", default=SERVER_HOST)
    parser.add_argument("--port", type=int, default=SERVER_PORT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    if args.command == "serve":
        serve(args.host, args.port)
        return

    controller = GameListController(
        create_page_source(args.api_url),
        sort_order=args.sort_order,
        listeners=[show_loading],
    )
    run_interactive(controller)


def main(argv: list[str] | None = None) -> None:
    """콘솔 진입점 (Ctrl-C / Ctrl-D 및 오류 시 종료 코드 1)"""
    try:
        run(argv)
    except (KeyboardInterrupt, EOFError):
        print("\n⚠️  사용자에 의해 중단되었습니다.")
        sys.exit(1)
    except Exception as e:
        print(f"\n❌ 오류 발생: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
