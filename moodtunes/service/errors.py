class SpotifyApiError(Exception):
    """Base class for failed calls to the Spotify Web API."""

    kind = "unknown"

    def __init__(self, message: str, url: str = ""):
        super().__init__(message)
        self.url = url

    def __str__(self):
        return f"[{self.kind}] {self.args[0]} ({self.url})" if self.url else f"[{self.kind}] {self.args[0]}"

class SpotifyRequestError(SpotifyApiError):
    kind = "request"

class SpotifyTransportError(SpotifyApiError):
    kind = "transport"

class SpotifyStatusError(SpotifyApiError):
    kind = "status"

    def __init__(self, message: str, url: str = "", status_code: int = 0, body: str = ""):
        super().__init__(message, url)
        self.status_code = status_code
        self.body = body

class SpotifyDecodeError(SpotifyApiError):
    kind = "decode"

class SpotifySchemaError(SpotifyApiError):
    kind = "schema"
