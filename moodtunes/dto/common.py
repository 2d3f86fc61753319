from typing import Any
from pydantic import BaseModel, ConfigDict, PrivateAttr

class SpotifyPayload(BaseModel):
    """Typed view over a Spotify JSON body that also keeps the body as received."""

    model_config = ConfigDict(extra="allow")

    _payload: dict[str, Any] = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any):
        result = cls.model_validate(payload)
        result._payload = payload
        return result

    def as_payload(self) -> dict[str, Any]:
        return self._payload
