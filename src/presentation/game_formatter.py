"""게임 카드 텍스트 렌더링"""

from datetime import datetime

from src.domain.entities.game import Game
from src.domain.value_objects.game_list_state import GameListState

NO_GAMES_MESSAGE = "No games found for this group."


def format_datetime(iso_string: str) -> str:
    """ISO 8601 문자열을 로컬 시간으로 표시 (파싱 실패 시 원문 그대로)"""
    if not iso_string:
        return ""
    try:
        parsed = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
    except ValueError:
        return iso_string

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone()
    return parsed.strftime("%Y-%m-%d %H:%M:%S")


def format_number(value: int) -> str:
    return f"{value:,}"


def format_game(game: Game) -> str:
    lines = [
        f"{game.name}",
        f"  {game.description}" if game.description else None,
        f"  Created: {format_datetime(game.created)}",
        f"  Updated: {format_datetime(game.updated)}",
        f"  Visits: {format_number(game.place_visits)}",
        f"  Playable: {'yes' if game.is_playable else 'no'}",
        f"  Thumbnail: {game.thumbnail_url}",
        f"  Play Game: {game.play_url()}" if game.play_url() else None,
    ]
    return "\n".join(line for line in lines if line is not None)


def format_state(state: GameListState) -> str:
    """현재 목록 상태 전체를 텍스트로 렌더링"""
    if state.is_loading:
        return "Searching..." if not state.games else "Loading..."

    if state.error:
        return f"❌ {state.error}"

    if state.is_empty_result():
        return NO_GAMES_MESSAGE

    blocks = [format_game(game) for game in state.games]
    if state.next_page_cursor:
        blocks.append(f"({len(state.games)}개 표시 중, 'm' 입력 시 더 보기)")
    return "\n\n".join(blocks)
