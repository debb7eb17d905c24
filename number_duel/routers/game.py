import logging
from typing import List
from uuid import UUID

from fastapi import APIRouter, HTTPException, Response, status

from number_duel.converter import DataConverter
from number_duel.domain.modes import MODES
from number_duel.domain.randomness import default_uniform_source
from number_duel.load_settings import round_seed, session_ttl_hours
from number_duel.models.game_models import (
    ModeModel,
    NumberLineModel,
    PickModel,
    SessionStateModel,
)
from number_duel.session import GameSession, SessionManager, SessionNotFoundError

game_router = APIRouter()
data_converter = DataConverter()
session_manager = SessionManager(
    uniform=default_uniform_source(round_seed), ttl_hours=session_ttl_hours
)


def session_not_found(session_id: UUID) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Session {session_id} not found",
    )


class ModeAPI:
    @staticmethod
    @game_router.get("/modes", response_model=List[ModeModel])
    async def get_modes():
        return [data_converter.convert_mode_to_modemodel(mode) for mode in MODES]


class SessionAPI:
    @staticmethod
    @game_router.post(
        "/sessions",
        response_model=SessionStateModel,
        status_code=status.HTTP_201_CREATED,
    )
    async def create_session() -> SessionStateModel:
        """Create a session. The first round is drawn immediately.

        Returns:
            SessionStateModel: The new session with its first round
        """
        session: GameSession = await session_manager.create_session()
        return data_converter.convert_session_to_sessionstatemodel(session)

    @staticmethod
    @game_router.get("/sessions/{session_id}", response_model=SessionStateModel)
    async def get_session(session_id: UUID) -> SessionStateModel:
        try:
            session = await session_manager.get_session(session_id)
        except SessionNotFoundError:
            raise session_not_found(session_id)
        return data_converter.convert_session_to_sessionstatemodel(session)

    @staticmethod
    @game_router.delete("/sessions/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_session(session_id: UUID) -> Response:
        try:
            await session_manager.delete_session(session_id)
        except SessionNotFoundError:
            raise session_not_found(session_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


class RoundAPI:
    @staticmethod
    @game_router.post("/sessions/{session_id}/rounds", response_model=SessionStateModel)
    async def start_round(session_id: UUID) -> SessionStateModel:
        """Replace the current round with a new one and clear the pick

        Args:
            session_id (UUID): To identify the session

        Returns:
            SessionStateModel: The session with its new round
        """
        try:
            session = await session_manager.start_round(session_id)
        except SessionNotFoundError:
            raise session_not_found(session_id)
        return data_converter.convert_session_to_sessionstatemodel(session)

    @staticmethod
    @game_router.post("/sessions/{session_id}/pick", response_model=SessionStateModel)
    async def pick(session_id: UUID, pick: PickModel) -> SessionStateModel:
        """Receive the player's choice for the current round

        Args:
            session_id (UUID): To identify the session
            pick (PickModel): 0 for card A, 1 for card B

        Returns:
            SessionStateModel: The session with the winner, verdicts and number line
        """
        try:
            session = await session_manager.pick(session_id, pick.side)
        except SessionNotFoundError:
            raise session_not_found(session_id)
        logging.info(f"session {session_id}: picked side {pick.side}")
        return data_converter.convert_session_to_sessionstatemodel(session)

    @staticmethod
    @game_router.get("/sessions/{session_id}/number-line", response_model=NumberLineModel)
    async def get_number_line(session_id: UUID) -> NumberLineModel:
        try:
            session = await session_manager.get_session(session_id)
        except SessionNotFoundError:
            raise session_not_found(session_id)

        number_line = session.layout()
        if number_line is None:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Pick a side before requesting the number line.",
            )
        return data_converter.convert_numberline_to_numberlinemodel(number_line)
