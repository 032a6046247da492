"""GET /api/roblox-games 엔드포인트 (FastAPI)

서버 측에서 Roblox API를 호출하여 CORS 제약 없이 병합된 게임 페이지를 반환한다.
"""

import logging

from fastapi import Depends, FastAPI, Query, Request, status
from fastapi.responses import JSONResponse

from src.application.use_cases.fetch_group_games import FetchGroupGamesUseCase
from src.domain.exceptions import GamesFinderError, InternalError, UpstreamError, ValidationError
from src.infrastructure.adapters.roblox_games_adapter import RobloxGamesAdapter
from src.infrastructure.adapters.roblox_place_details_adapter import RobloxPlaceDetailsAdapter
from src.infrastructure.adapters.roblox_thumbnail_adapter import RobloxThumbnailAdapter
from src.infrastructure.serializers import page_to_dict

logger = logging.getLogger(__name__)

app = FastAPI(title="Roblox Group Games Finder")


def get_fetch_group_games_use_case() -> FetchGroupGamesUseCase:
    """요청마다 새 Use Case 생성 (요청 간 공유 상태 없음)"""
    return FetchGroupGamesUseCase(
        listing_fetcher=RobloxGamesAdapter(),
        thumbnail_fetcher=RobloxThumbnailAdapter(),
        details_fetcher=RobloxPlaceDetailsAdapter(),
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": exc.message})


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    logger.error(f"Internal error on {request.url.path}: {exc.__cause__!r}", exc_info=exc.__cause__)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": exc.message})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # 엔드포인트 밖(의존성 생성 등)에서 발생한 예외
    logger.exception(f"Unhandled error on {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": InternalError.message},
    )


@app.get("/api/roblox-games")
def get_roblox_games(
    group_id: str | None = Query(None, alias="groupId", description="Roblox 그룹 ID"),
    cursor: str | None = Query(None, description="다음 페이지 커서 (불투명 토큰)"),
    sort_order: str | None = Query(None, alias="sortOrder", description="Asc 또는 Desc"),
    use_case: FetchGroupGamesUseCase = Depends(get_fetch_group_games_use_case),
):
    """그룹 게임 한 페이지 + 썸네일 / 플레이 가능 여부"""
    try:
        page = use_case.execute(group_id, cursor, sort_order)
    except GamesFinderError:
        raise
    except Exception as e:
        raise InternalError() from e
    return page_to_dict(page)
