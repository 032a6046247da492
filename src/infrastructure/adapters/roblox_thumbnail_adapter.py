"""Roblox Thumbnails API를 통한 플레이스 썸네일 조회 어댑터"""

import logging

import httpx

from src.config.settings import HTTP_TIMEOUT, ROBLOX_THUMBNAILS_API_URL, THUMBNAIL_FORMAT, THUMBNAIL_SIZE
from src.domain.ports.thumbnail_fetcher import ThumbnailFetcher
from src.domain.value_objects.place_metadata import PlaceThumbnail
from src.infrastructure.serializers import parse_place_id

logger = logging.getLogger(__name__)


class RobloxThumbnailAdapter(ThumbnailFetcher):
    """GET /v1/places/place-thumbnails (placeIds 쉼표 구분)"""

    def __init__(
        self,
        base_url: str = ROBLOX_THUMBNAILS_API_URL,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def fetch_thumbnails(self, place_ids: list[int]) -> list[PlaceThumbnail]:
        if not place_ids:
            return []

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(
                    f"{self.base_url}/v1/places/place-thumbnails",
                    params={
                        "placeIds": ",".join(str(place_id) for place_id in place_ids),
                        "size": THUMBNAIL_SIZE,
                        "format": THUMBNAIL_FORMAT,
                    },
                )
                response.raise_for_status()
                data = response.json()

        except (httpx.HTTPError, ValueError) as e:
            # 썸네일 실패는 전체 요청을 막지 않음 → placeholder로 대체
            logger.error(f"Failed to fetch thumbnails from Roblox API: {e}")
            return []

        items = data.get("data") if isinstance(data, dict) else None
        if not isinstance(items, list):
            logger.error(f"Unexpected thumbnails response from Roblox API: {data!r}")
            return []

        thumbnails = []
        for item in items:
            if not isinstance(item, dict):
                continue
            # 응답은 targetId를 쓰지만 구버전 응답은 placeId
            place_id = parse_place_id(item.get("targetId", item.get("placeId")))
            if place_id is None:
                logger.warning(f"Skipping thumbnail record without valid place id: {item!r}")
                continue
            thumbnails.append(PlaceThumbnail(place_id=place_id, image_url=item.get("imageUrl")))

        return thumbnails
