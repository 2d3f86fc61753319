from pydantic import BaseModel, ConfigDict
from typing import Any
from moodtunes.dto.common import SpotifyPayload

class EmotionSeeds(BaseModel):
    model_config = ConfigDict(frozen=True)

    seed_genres: tuple[str, ...]
    seed_artists: tuple[str, ...]

class RecommendationQuery(BaseModel):
    seed_genres: tuple[str, ...]
    seed_artists: tuple[str, ...]
    limit: int = 10

    def to_params(self) -> dict:
        return {
            "seed_genres": ",".join(self.seed_genres),
            "seed_artists": ",".join(self.seed_artists),
            "limit": self.limit,
        }

class SpotifyRecommendationsResponse(SpotifyPayload):
    tracks: list[dict[str, Any]]
    seeds: list[dict[str, Any]] = []
