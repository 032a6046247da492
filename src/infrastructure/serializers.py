"""Game / GamePage <-> JSON 딕셔너리 변환 (Roblox API와 동일한 camelCase 키)"""

import logging
from typing import Any

from src.config.settings import PLACEHOLDER_THUMBNAIL_URL
from src.domain.entities.game import Game
from src.domain.value_objects.game_page import GamePage
from src.domain.value_objects.reference import CreatorRef, PlaceRef

logger = logging.getLogger(__name__)


def game_to_dict(game: Game) -> dict[str, Any]:
    """Game 엔티티를 딕셔너리로 변환"""
    return {
        "id": game.id,
        "name": game.name,
        "description": game.description,
        "creator": {"id": game.creator.id, "type": game.creator.type},
        "rootPlace": (
            {"id": game.root_place.id, "type": game.root_place.type} if game.root_place else None
        ),
        "created": game.created,
        "updated": game.updated,
        "placeVisits": game.place_visits,
        "thumbnailUrl": game.thumbnail_url,
        "isPlayable": game.is_playable,
    }


def dict_to_game(game_dict: Any) -> Game | None:
    """딕셔너리를 Game 엔티티로 변환 (id가 없거나 형식이 잘못되면 None)"""
    if not isinstance(game_dict, dict) or game_dict.get("id") is None:
        logger.warning(f"Skipping malformed game record: {game_dict!r}")
        return None

    try:
        creator = game_dict.get("creator") or {}
        root_place = game_dict.get("rootPlace")

        return Game(
            id=int(game_dict["id"]),
            name=game_dict.get("name") or "",
            description=game_dict.get("description"),
            creator=CreatorRef(id=int(creator.get("id") or 0), type=creator.get("type") or ""),
            root_place=_dict_to_place(root_place),
            created=game_dict.get("created") or "",
            updated=game_dict.get("updated") or "",
            place_visits=int(game_dict.get("placeVisits") or 0),
            thumbnail_url=game_dict.get("thumbnailUrl") or PLACEHOLDER_THUMBNAIL_URL,
            is_playable=bool(game_dict.get("isPlayable", False)),
        )
    except (TypeError, ValueError, AttributeError) as e:
        logger.warning(f"Failed to parse game record (id: {game_dict.get('id')}): {e}")
        return None


def parse_place_id(value: Any) -> int | None:
    """플레이스 ID 정수 변환 (변환 불가 시 None)"""
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def _dict_to_place(place: Any) -> PlaceRef | None:
    if not isinstance(place, dict) or place.get("id") is None:
        return None
    return PlaceRef(id=int(place["id"]), type=place.get("type") or "")


def page_to_dict(page: GamePage) -> dict[str, Any]:
    return {
        "data": [game_to_dict(game) for game in page.data],
        "nextPageCursor": page.next_page_cursor,
    }


def dict_to_page(page_dict: dict[str, Any]) -> GamePage:
    games = []
    for raw_game in page_dict.get("data") or []:
        game = dict_to_game(raw_game)
        if game:
            games.append(game)

    return GamePage(data=games, next_page_cursor=page_dict.get("nextPageCursor") or None)
