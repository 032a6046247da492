from dataclasses import dataclass


@dataclass(frozen=True)
class CreatorRef:
    """게임 소유자(유저 또는 그룹) 참조 Value Object"""

    id: int
    type: str


@dataclass(frozen=True)
class PlaceRef:
    """게임의 접속 가능한 루트 플레이스 참조 Value Object"""

    id: int
    type: str
