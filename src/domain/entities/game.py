from dataclasses import dataclass

from src.config.settings import PLACEHOLDER_THUMBNAIL_URL, ROBLOX_GAME_URL
from src.domain.value_objects.reference import CreatorRef, PlaceRef


@dataclass(eq=False)
class Game:
    """Roblox 그룹이 소유한 게임(Experience)을 나타내는 Entity"""

    id: int
    name: str
    description: str | None
    creator: CreatorRef
    root_place: PlaceRef | None
    created: str  # ISO 8601, 표시용
    updated: str  # ISO 8601, 표시용
    place_visits: int
    thumbnail_url: str = PLACEHOLDER_THUMBNAIL_URL
    is_playable: bool = False

    def __eq__(self, other: object) -> bool:
        """ID 기반 동등성 비교"""
        if not isinstance(other, Game):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        """ID 기반 해시"""
        return hash(self.id)

    @property
    def place_id(self) -> int | None:
        """썸네일/상세 정보 조인 키 (rootPlace.id)"""
        return self.root_place.id if self.root_place else None

    def play_url(self) -> str:
        """Roblox 게임 페이지 URL (루트 플레이스가 없으면 빈 문자열)"""
        if self.place_id is None:
            return ""
        return ROBLOX_GAME_URL.format(place_id=self.place_id)
