from typing import Optional
from fastapi import APIRouter, Query, Depends
from fastapi.responses import RedirectResponse, JSONResponse, PlainTextResponse
from moodtunes.config.settings import Settings
from moodtunes.dto.auth import SpotifyTokenRequest, SpotifyRefreshingTokenRequest
from moodtunes.router.deps import get_settings, get_spotify_service
from moodtunes.service.errors import SpotifyApiError
from moodtunes.service.spotify_service import SpotifyApiService
from moodtunes.utils.utils import create_authorize_url, create_redirect_url
import logging

router = APIRouter()
logger = logging.getLogger("uvicorn")

@router.get("/login")
async def login(setting: Settings = Depends(get_settings)):
    return RedirectResponse(url=create_authorize_url(setting), status_code=302)

@router.get("/callback")
async def callback(
    code: Optional[str] = Query(None, description="Authorization code from Spotify"),
    setting: Settings = Depends(get_settings),
    spotify_service: SpotifyApiService = Depends(get_spotify_service),
):
    '''
    Exchange the authorization code for tokens and hand them to the frontend
    '''
    token_request = SpotifyTokenRequest(
        code=code,
        redirect_uri=setting.REDIRECT_URI
    )

    try:
        tokens = await spotify_service.get_tokens(token_request)
    except SpotifyApiError as e:
        logger.error(f"Error fetching Spotify token: {e}")
        return PlainTextResponse(status_code=500, content="Failed to retrieve access token")

    return RedirectResponse(url=create_redirect_url(setting, tokens), status_code=302)

@router.get("/refresh_token")
async def refresh_access_token(
    refresh_token: Optional[str] = Query(None),
    spotify_service: SpotifyApiService = Depends(get_spotify_service),
):
    try:
        tokens = await spotify_service.refresh_access_token(
            SpotifyRefreshingTokenRequest(refresh_token=refresh_token)
        )
    except SpotifyApiError as e:
        logger.error(f"Error refreshing Spotify token: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to refresh access token"})

    return JSONResponse(status_code=200, content=tokens.as_payload())
