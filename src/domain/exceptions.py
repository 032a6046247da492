"""게임 조회 과정에서 발생하는 예외 계층"""


class GamesFinderError(Exception):
    """모든 도메인 예외의 기반 클래스"""

    message = "Internal Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class ValidationError(GamesFinderError):
    """잘못되었거나 누락된 입력 (클라이언트가 수정 가능)"""

    message = "Invalid request"


class UpstreamError(GamesFinderError):
    """필수 외부 API 호출 실패 (Roblox 응답 상태 코드 포함)"""

    message = "Failed to fetch games from Roblox API"

    def __init__(self, status_code: int, message: str | None = None):
        super().__init__(message)
        self.status_code = status_code


class InternalError(GamesFinderError):
    """예상하지 못한 오류"""
