from fastapi import Request
from moodtunes.config.settings import Settings
from moodtunes.service.spotify_service import SpotifyApiService

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def get_spotify_service(request: Request) -> SpotifyApiService:
    return request.app.state.spotify_service
