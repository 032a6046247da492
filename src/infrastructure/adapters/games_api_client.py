"""Games Finder 서버(/api/roblox-games)를 호출하는 HTTP 클라이언트"""

import logging

import httpx

from src.config.settings import HTTP_TIMEOUT
from src.domain.ports.game_page_source import GamePageSource
from src.domain.value_objects.game_page import GamePage
from src.infrastructure.serializers import dict_to_page

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "An unknown error occurred."


class GamesApiError(Exception):
    """서버가 오류 응답을 반환함 (메시지는 응답의 error 필드)"""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class GamesApiClient(GamePageSource):
    """GamePageSource를 원격 서버 호출로 구현"""

    ENDPOINT = "/api/roblox-games"

    def __init__(
        self,
        base_url: str,
        timeout: float = HTTP_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def fetch_page(
        self,
        group_id: str,
        cursor: str | None = None,
        sort_order: str | None = None,
    ) -> GamePage:
        params = {"groupId": group_id}
        if cursor:
            params["cursor"] = cursor
        if sort_order:
            params["sortOrder"] = sort_order

        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                response = client.get(f"{self.base_url}{self.ENDPOINT}", params=params)
        except httpx.HTTPError as e:
            logger.error(f"Request to {self.base_url} failed: {e}")
            raise GamesApiError(f"Could not reach games server: {e}") from e

        if not response.is_success:
            raise GamesApiError(self._error_message(response), status_code=response.status_code)

        return dict_to_page(response.json())

    def _error_message(self, response: httpx.Response) -> str:
        """오류 응답 본문의 error 필드 추출 (읽을 수 없으면 기본 메시지)"""
        try:
            body = response.json()
        except ValueError:
            return GENERIC_ERROR_MESSAGE

        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return GENERIC_ERROR_MESSAGE
