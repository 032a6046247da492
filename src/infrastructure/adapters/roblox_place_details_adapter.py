"""Roblox Games API를 통한 플레이스 상세 정보(플레이 가능 여부) 조회 어댑터"""

import logging

import httpx

from src.config.settings import HTTP_TIMEOUT, ROBLOX_GAMES_API_URL
from src.domain.ports.place_details_fetcher import PlaceDetailsFetcher
from src.domain.value_objects.place_metadata import PlaceDetails
from src.infrastructure.serializers import parse_place_id

logger = logging.getLogger(__name__)


class RobloxPlaceDetailsAdapter(PlaceDetailsFetcher):
    """GET /v1/games/multiget-place-details (placeIds 반복 파라미터)"""

    def __init__(
        self,
        base_url: str = ROBLOX_GAMES_API_URL,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def fetch_place_details(self, place_ids: list[int]) -> list[PlaceDetails]:
        if not place_ids:
            return []

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(
                    f"{self.base_url}/v1/games/multiget-place-details",
                    params={"placeIds": place_ids},
                )
                response.raise_for_status()
                data = response.json()

        except (httpx.HTTPError, ValueError) as e:
            # 상세 정보 실패 시 isPlayable=false로 대체
            logger.error(f"Failed to fetch place details from Roblox API: {e}")
            return []

        # 응답은 배열이지만 {"data": [...]} 형태도 허용
        items = data.get("data") if isinstance(data, dict) else data
        if not isinstance(items, list):
            logger.error(f"Unexpected place details response from Roblox API: {data!r}")
            return []

        details = []
        for item in items:
            if not isinstance(item, dict):
                continue
            place_id = parse_place_id(item.get("placeId"))
            if place_id is None:
                logger.warning(f"Skipping place details record without valid place id: {item!r}")
                continue
            details.append(PlaceDetails(place_id=place_id, is_playable=item.get("isPlayable") is True))

        return details
