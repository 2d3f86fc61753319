from pydantic import BaseModel
from typing import Optional
from moodtunes.dto.common import SpotifyPayload

class SpotifyTokenRequest(BaseModel):
    code: Optional[str] = None
    redirect_uri: str
    grant_type: str = "authorization_code"

class SpotifyRefreshingTokenRequest(BaseModel):
    refresh_token: Optional[str] = None
    grant_type: str = "refresh_token"

class SpotifyTokenResponse(SpotifyPayload):
    access_token: str
    token_type: Optional[str] = None
    scope: Optional[str] = None
    expires_in: Optional[int] = None
    refresh_token: Optional[str] = None
