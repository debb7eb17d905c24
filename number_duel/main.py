from apscheduler.schedulers.asyncio import AsyncIOScheduler
import logging
from fastapi import FastAPI
from contextlib import asynccontextmanager

from number_duel.load_settings import log_level, session_prune_interval_minutes
from number_duel.routers import game
from number_duel.routers.game import session_manager

logging.basicConfig(level=log_level)


@asynccontextmanager
async def lifespan(app):
    """Start the job that drops idle sessions.
    This function is called to start the server.
    """
    scheduler = AsyncIOScheduler()
    # If a session has not been used for the TTL, delete it
    scheduler.add_job(
        session_manager.prune_expired,
        "interval",
        minutes=session_prune_interval_minutes,
    )
    scheduler.start()
    logging.info("Start Server")
    try:
        yield
    finally:
        scheduler.shutdown()
        logging.info("Stop Server")


app = FastAPI(lifespan=lifespan)
app.include_router(game.game_router)
