from abc import ABC, abstractmethod

from src.domain.value_objects.place_metadata import PlaceDetails


class PlaceDetailsFetcher(ABC):
    """플레이스 상세 정보(플레이 가능 여부)를 일괄 조회하는 Port"""

    @abstractmethod
    def fetch_place_details(self, place_ids: list[int]) -> list[PlaceDetails]:
        """플레이스 ID 목록으로 상세 정보 조회 (실패 시 빈 리스트)"""
        pass
