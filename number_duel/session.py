import logging
from asyncio import Lock
from datetime import datetime, timedelta
from typing import Dict, Optional, Tuple
from uuid import UUID

from uuid6 import uuid7

from number_duel.domain.modes import ModeCatalog
from number_duel.domain.number_line import NumberLine, layout_for
from number_duel.domain.randomness import UniformSource, default_uniform_source
from number_duel.domain.rationals import RationalGenerator
from number_duel.domain.round_rules import SIDES, Round, card_verdicts, generate_round


class SessionNotFoundError(KeyError):
    pass


class GameSession:
    """One player's game: owns the current round and the optional selection.

    The session is created with a round already drawn, so it is never empty
    from the caller's point of view. ``start_round`` and ``pick`` are the only
    mutators; the round object itself is replaced, never modified.
    """

    def __init__(
        self,
        catalog: ModeCatalog,
        generator: RationalGenerator,
        session_id: Optional[UUID] = None,
    ):
        self.session_id: UUID = session_id or uuid7()
        self.catalog = catalog
        self.generator = generator
        self.created_at: datetime = datetime.now()
        self.last_access: datetime = self.created_at
        self._round: Optional[Round] = None
        self._selection: Optional[int] = None
        self.start_round()

    def start_round(self) -> Round:
        """Draw a new decisive round and clear the selection

        Returns:
            Round: The new round. ``exhausted`` is set when every attempt tied.
        """
        round_ = generate_round(self.catalog, self.generator)
        if round_.exhausted:
            logging.warning(
                f"session {self.session_id}: no decisive round after {round_.attempts} attempts, keeping a tie"
            )
        else:
            logging.debug(
                f"session {self.session_id}: {round_.mode.mode_id} {round_.left.display} vs {round_.right.display} "
                f"(attempts={round_.attempts})"
            )
        self._round = round_
        self._selection = None
        self.touch()
        return round_

    def pick(self, side: int) -> None:
        """Record the player's choice. Last call wins; the winner never changes.

        Args:
            side (int): 0 for card A, 1 for card B

        Raises:
            ValueError: side is neither 0 nor 1
        """
        if side not in SIDES:
            raise ValueError("side must be 0 or 1")
        if self._round is None:
            return
        self._selection = side
        self.touch()

    def current_round(self) -> Optional[Round]:
        return self._round

    def current_selection(self) -> Optional[int]:
        return self._selection

    @property
    def is_active(self) -> bool:
        return self._round is not None

    def layout(self) -> Optional[NumberLine]:
        if self._round is None:
            return None
        return layout_for(self._round, self._selection)

    def verdicts(self) -> Optional[Tuple[str, str]]:
        if self._round is None:
            return None
        return card_verdicts(self._round, self._selection)

    def touch(self) -> None:
        self.last_access = datetime.now()


class SessionManager:
    def __init__(self, uniform: Optional[UniformSource] = None, ttl_hours: float = 24):
        uniform = uniform or default_uniform_source()
        self.catalog = ModeCatalog(uniform)
        self.generator = RationalGenerator(uniform)
        self.ttl = timedelta(hours=ttl_hours)
        self.sessions: Dict[UUID, GameSession] = {}
        self.session_locks: Dict[UUID, Lock] = {}
        self.lock = Lock()  # protects sessions and session_locks

    async def create_session(self) -> GameSession:
        """Create a session with its first round already drawn

        Returns:
            GameSession: The new session
        """
        session = GameSession(self.catalog, self.generator)
        async with self.lock:
            self.sessions[session.session_id] = session
            self.session_locks[session.session_id] = Lock()
        logging.info(f"Created session: {session.session_id}")
        return session

    async def get_session(self, session_id: UUID) -> GameSession:
        """Get the session of the specified session_id

        Args:
            session_id (UUID): ID to identify the session

        Raises:
            SessionNotFoundError: No such session, or it has expired

        Returns:
            GameSession: The session
        """
        async with self.lock:
            if session_id not in self.sessions:
                raise SessionNotFoundError(session_id)
            session = self.sessions[session_id]
        session.touch()
        return session

    async def _session_and_lock(self, session_id: UUID) -> Tuple[GameSession, Lock]:
        async with self.lock:
            if session_id not in self.sessions:
                raise SessionNotFoundError(session_id)
            return self.sessions[session_id], self.session_locks[session_id]

    async def start_round(self, session_id: UUID) -> GameSession:
        session, session_lock = await self._session_and_lock(session_id)
        async with session_lock:
            session.start_round()
        return session

    async def pick(self, session_id: UUID, side: int) -> GameSession:
        session, session_lock = await self._session_and_lock(session_id)
        async with session_lock:
            session.pick(side)
        return session

    async def delete_session(self, session_id: UUID) -> None:
        """Delete the specified session

        Args:
            session_id (UUID): ID to identify the session

        Raises:
            SessionNotFoundError: No such session
        """
        async with self.lock:
            if session_id not in self.sessions:
                raise SessionNotFoundError(session_id)
            del self.sessions[session_id]
            del self.session_locks[session_id]
        logging.info(f"Deleted session: {session_id}")

    async def prune_expired(self, now: Optional[datetime] = None) -> int:
        """Drop sessions idle for longer than the TTL

        Args:
            now (Optional[datetime], optional): Reference time. Defaults to datetime.now().

        Returns:
            int: Number of sessions removed
        """
        now = now or datetime.now()
        async with self.lock:
            expired = [
                session_id
                for session_id, session in self.sessions.items()
                if now - session.last_access > self.ttl
            ]
            for session_id in expired:
                del self.sessions[session_id]
                del self.session_locks[session_id]
        if expired:
            logging.info(f"Pruned {len(expired)} expired sessions")
        return len(expired)
