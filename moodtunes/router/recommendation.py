import logging
from typing import Optional
from fastapi import APIRouter, Query, Depends
from fastapi.responses import JSONResponse
from moodtunes.dto.recommendation import RecommendationQuery
from moodtunes.router.deps import get_spotify_service
from moodtunes.service.emotion_service import EmotionService
from moodtunes.service.errors import SpotifyApiError
from moodtunes.service.spotify_service import SpotifyApiService

router = APIRouter()
logger = logging.getLogger("uvicorn")

@router.get("/recommendations")
async def get_recommendations_by_emotion(
    access_token: Optional[str] = Query(None),
    emotion: Optional[str] = Query(None),
    spotify_service: SpotifyApiService = Depends(get_spotify_service),
):
    '''
    Spotify recommendations seeded by the genres and artists mapped to an emotion
    '''
    seeds = EmotionService.get_seeds(emotion)
    query = RecommendationQuery(seed_genres=seeds.seed_genres, seed_artists=seeds.seed_artists)

    try:
        response = await spotify_service.get_recommendations(access_token, query)
    except SpotifyApiError as e:
        logger.error(f"Error fetching Spotify recommendations: {e}")
        return JSONResponse(status_code=500, content={"error": "Failed to retrieve recommendations"})

    return JSONResponse(status_code=200, content=response.as_payload())
