from dataclasses import dataclass


@dataclass(frozen=True)
class PlaceThumbnail:
    """플레이스 썸네일 조회 결과"""

    place_id: int
    image_url: str | None


@dataclass(frozen=True)
class PlaceDetails:
    """플레이스 상세 조회 결과 (플레이 가능 여부)"""

    place_id: int
    is_playable: bool
