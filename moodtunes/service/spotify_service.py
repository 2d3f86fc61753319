import base64
import json
import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import ValidationError

from moodtunes.config.settings import Settings
from moodtunes.dto.auth import (
    SpotifyTokenRequest,
    SpotifyRefreshingTokenRequest,
    SpotifyTokenResponse,
)
from moodtunes.dto.common import SpotifyPayload
from moodtunes.dto.recommendation import RecommendationQuery, SpotifyRecommendationsResponse
from moodtunes.service.errors import (
    SpotifyRequestError,
    SpotifyTransportError,
    SpotifyStatusError,
    SpotifyDecodeError,
    SpotifySchemaError,
)

logger = logging.getLogger("uvicorn")
ResponseModel = TypeVar("ResponseModel", bound=SpotifyPayload)

class SpotifyApiService:
    def __init__(self, setting: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.setting = setting
        self.transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, timeout=self.setting.HTTP_TIMEOUT)

    def _basic_authorization(self) -> str:
        authorization = f"{self.setting.CLIENT_ID}:{self.setting.CLIENT_SECRET}"
        authorization_encoding = base64.b64encode(authorization.encode()).decode('utf-8')
        return f"Basic {authorization_encoding}"

    async def get_tokens(self, token_request: SpotifyTokenRequest) -> SpotifyTokenResponse:
        return await self._make_request(
            "POST",
            f"{self.setting.SPOTIFY_AUTHENTICATION_URL}/api/token",
            SpotifyTokenResponse,
            headers={
                "Authorization": self._basic_authorization(),
                "Content-Type": "application/x-www-form-urlencoded"
            },
            data=token_request.model_dump(),
        )

    async def refresh_access_token(self, refresh_request: SpotifyRefreshingTokenRequest) -> SpotifyTokenResponse:
        return await self._make_request(
            "POST",
            f"{self.setting.SPOTIFY_AUTHENTICATION_URL}/api/token",
            SpotifyTokenResponse,
            headers={
                "Authorization": self._basic_authorization(),
                "Content-Type": "application/x-www-form-urlencoded"
            },
            data=refresh_request.model_dump(),
        )

    async def get_recommendations(self, access_token: Optional[str], query: RecommendationQuery) -> SpotifyRecommendationsResponse:
        return await self._make_request(
            "GET",
            f"{self.setting.SPOTIFY_API_URL}/recommendations",
            SpotifyRecommendationsResponse,
            headers={"Authorization": f"Bearer {access_token}"},
            params=query.to_params(),
        )

    async def _make_request(self, method: str, url: str, model: Type[ResponseModel], **kwargs) -> ResponseModel:
        async with self._client() as client:
            try:
                response = await client.request(method, url, **kwargs)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise SpotifyStatusError(
                    f"Spotify API responded with {e.response.status_code}",
                    url=url,
                    status_code=e.response.status_code,
                    body=e.response.text,
                ) from e
            except httpx.RequestError as e:
                raise SpotifyTransportError(f"{type(e).__name__}: {e}", url=url) from e
            except (httpx.InvalidURL, UnicodeEncodeError) as e:
                # raised while building the request, before anything is sent
                raise SpotifyRequestError(f"{type(e).__name__}: {e}", url=url) from e

        try:
            payload = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise SpotifyDecodeError(f"response body is not JSON: {e}", url=url) from e

        try:
            result = model.from_payload(payload)
        except ValidationError as e:
            raise SpotifySchemaError(f"unexpected {model.__name__} payload: {e.error_count()} error(s)", url=url) from e

        logger.debug(f"{method} {url} -> {response.status_code}")
        return result
