from enum import Enum

from src.domain.exceptions import ValidationError


class SortOrder(str, Enum):
    """게임 목록 정렬 순서"""

    ASC = "Asc"
    DESC = "Desc"

    @classmethod
    def parse(cls, value: str | None) -> "SortOrder":
        """쿼리 문자열을 SortOrder로 변환 (미지정 시 Asc)"""
        if value is None or not value.strip():
            return cls.ASC

        for member in cls:
            if member.value.lower() == value.strip().lower():
                return member

        raise ValidationError(f"sortOrder must be one of Asc, Desc: {value}")
