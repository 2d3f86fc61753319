import logging
from typing import Optional
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from moodtunes.config.formatter import setup_logging
from moodtunes.config.settings import Settings
from moodtunes.router import auth, recommendation
from moodtunes.service.spotify_service import SpotifyApiService

logger = logging.getLogger("uvicorn")

def create_app(setting: Optional[Settings] = None, spotify_service: Optional[SpotifyApiService] = None) -> FastAPI:
    setting = setting or Settings()
    setup_logging(setting)

    app = FastAPI()
    app.state.settings = setting
    app.state.spotify_service = spotify_service or SpotifyApiService(setting)

    # CORS: any origin
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(auth.router)
    app.include_router(recommendation.router)
    return app

class MoodtunesServer(uvicorn.Server):
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        # only once the listening socket is bound
        if self.started:
            logger.info(f"Backend server running on http://localhost:{self.config.port}")

def run():
    setting = Settings()
    app = create_app(setting)
    config = uvicorn.Config(app, host="0.0.0.0", port=setting.PORT, log_config=None)
    MoodtunesServer(config).run()

if __name__ == "__main__":
    run()
