import os

# Roblox API 엔드포인트
ROBLOX_GAMES_API_URL = os.environ.get("ROBLOX_GAMES_API_URL", "https://games.roblox.com")
ROBLOX_THUMBNAILS_API_URL = os.environ.get("ROBLOX_THUMBNAILS_API_URL", "https://thumbnails.roblox.com")

# 게임 목록 조회 파라미터
GAMES_PAGE_LIMIT = 100
ACCESS_FILTER = 1  # 공개 게임만

# 썸네일 조회 파라미터
THUMBNAIL_SIZE = "150x150"
THUMBNAIL_FORMAT = "Png"
PLACEHOLDER_THUMBNAIL_URL = "https://placehold.co/150x150/png?text=No+Image"

# 게임 페이지 링크
ROBLOX_GAME_URL = "https://www.roblox.com/games/{place_id}"

# HTTP 타임아웃 (초)
HTTP_TIMEOUT = float(os.environ.get("HTTP_TIMEOUT", "10.0"))

# 웹 서버 / CLI 클라이언트
SERVER_HOST = os.environ.get("GAMES_FINDER_HOST", "127.0.0.1")
SERVER_PORT = int(os.environ.get("GAMES_FINDER_PORT", "8000"))
GAMES_FINDER_API_URL = os.environ.get("GAMES_FINDER_API_URL", "")

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
