from types import MappingProxyType
from typing import Optional
from moodtunes.dto.recommendation import EmotionSeeds

DEFAULT_EMOTION = "default"

EMOTION_SEEDS = MappingProxyType({
    # Arijit Singh, Shreya Ghoshal
    "happy": EmotionSeeds(
        seed_genres=("bollywood", "indian"),
        seed_artists=("3tD5dCEq52Ud27zi9iNT6L", "0LyfQWJT6nXafLPZqxe9Of"),
    ),
    # A. R. Rahman, Lata Mangeshkar
    "sad": EmotionSeeds(
        seed_genres=("indian", "acoustic"),
        seed_artists=("0LyfQWJT6nXafLPZqxe9Of", "1mYsTxnqsietFxj1OgoGbG"),
    ),
    # Amit Trivedi, Arijit Singh
    "angry": EmotionSeeds(
        seed_genres=("indian", "chill"),
        seed_artists=("7rZR0ugcLEhNrFYOrUtZii", "3tD5dCEq52Ud27zi9iNT6L"),
    ),
    DEFAULT_EMOTION: EmotionSeeds(
        seed_genres=("bollywood", "indian"),
        seed_artists=("3tD5dCEq52Ud27zi9iNT6L", "0LyfQWJT6nXafLPZqxe9Of"),
    ),
})

class EmotionService:
    @staticmethod
    def get_seeds(emotion: Optional[str]) -> EmotionSeeds:
        '''
        Seed genres and artists for an emotion label; unknown labels get the default entry
        '''
        return EMOTION_SEEDS.get(emotion or DEFAULT_EMOTION, EMOTION_SEEDS[DEFAULT_EMOTION])
