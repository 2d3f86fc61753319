from urllib.parse import urlencode, quote
from moodtunes.config.settings import Settings
from moodtunes.dto.auth import SpotifyTokenResponse

SCOPES = (
    "user-read-playback-state",
    "user-modify-playback-state",
    "streaming",
    "app-remote-control",
    "user-read-currently-playing",
    "user-read-private",
    "user-read-recently-played",
    "playlist-read-private",
    "playlist-read-collaborative",
    "playlist-modify-public",
    "playlist-modify-private",
    "user-read-email",
)

def create_authorize_url(setting: Settings) -> str:
    query = urlencode(
        {
            "response_type": "code",
            "client_id": setting.CLIENT_ID,
            "scope": " ".join(SCOPES),
            "redirect_uri": setting.REDIRECT_URI,
        },
        quote_via=quote,
    )
    return f"{setting.SPOTIFY_AUTHENTICATION_URL}/authorize?{query}"

def create_redirect_url(setting: Settings, tokens: SpotifyTokenResponse) -> str:
    # values missing from the token response are sent as empty parameters
    query = urlencode(
        {
            "access_token": tokens.access_token,
            "refresh_token": tokens.refresh_token or "",
            "scope": tokens.scope or "",
        },
        quote_via=quote,
    )
    return f"{setting.FRONT_BASE_URL}/emotion-detection?{query}"
