from abc import ABC, abstractmethod

from src.domain.value_objects.place_metadata import PlaceThumbnail


class ThumbnailFetcher(ABC):
    """플레이스 썸네일을 일괄 조회하는 Port"""

    @abstractmethod
    def fetch_thumbnails(self, place_ids: list[int]) -> list[PlaceThumbnail]:
        """플레이스 ID 목록으로 썸네일 조회 (실패 시 빈 리스트)"""
        pass
