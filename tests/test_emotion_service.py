import pytest
from pydantic import ValidationError
from moodtunes.service.emotion_service import EMOTION_SEEDS, DEFAULT_EMOTION, EmotionService

def test_table_covers_closed_label_set():
    assert set(EMOTION_SEEDS) == {"happy", "sad", "angry", DEFAULT_EMOTION}

@pytest.mark.parametrize("emotion, genres, artists", [
    ("happy", ("bollywood", "indian"), ("3tD5dCEq52Ud27zi9iNT6L", "0LyfQWJT6nXafLPZqxe9Of")),
    ("sad", ("indian", "acoustic"), ("0LyfQWJT6nXafLPZqxe9Of", "1mYsTxnqsietFxj1OgoGbG")),
    ("angry", ("indian", "chill"), ("7rZR0ugcLEhNrFYOrUtZii", "3tD5dCEq52Ud27zi9iNT6L")),
    ("default", ("bollywood", "indian"), ("3tD5dCEq52Ud27zi9iNT6L", "0LyfQWJT6nXafLPZqxe9Of")),
])
def test_get_seeds(emotion, genres, artists):
    seeds = EmotionService.get_seeds(emotion)
    assert seeds.seed_genres == genres
    assert seeds.seed_artists == artists

@pytest.mark.parametrize("emotion", [None, "", "HAPPY", "calm"])
def test_unmatched_labels_fall_back_to_default(emotion):
    assert EmotionService.get_seeds(emotion) == EMOTION_SEEDS[DEFAULT_EMOTION]

def test_table_is_read_only():
    with pytest.raises(TypeError):
        EMOTION_SEEDS["calm"] = EMOTION_SEEDS["sad"]
    with pytest.raises(ValidationError):
        EMOTION_SEEDS["sad"].seed_genres = ("rock",)
