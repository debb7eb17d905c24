from typing import Optional

from number_duel.domain.modes import Mode
from number_duel.domain.number_line import NumberLine
from number_duel.domain.rationals import Rational
from number_duel.domain.round_rules import Round
from number_duel.models.game_models import (
    ModeModel,
    NumberLineModel,
    RationalModel,
    RoundModel,
    SessionStateModel,
    TickModel,
    VerdictModel,
)
from number_duel.session import GameSession


class DataConverter:
    """This class is used to convert domain objects into models sent to the client."""

    def convert_mode_to_modemodel(self, mode: Mode) -> ModeModel:
        return ModeModel.model_validate(mode)

    def convert_rational_to_rationalmodel(self, rational: Rational) -> RationalModel:
        return RationalModel(
            display=rational.display,
            value=rational.value,
            denom_hint=rational.denom_hint,
            kind=rational.kind,
        )

    def convert_round_to_roundmodel(self, round_: Round, reveal_winner: bool) -> RoundModel:
        """Convert the Round to the RoundModel to send client

        Args:
            round_ (Round): The current round of the session
            reveal_winner (bool): False while the player has not picked yet

        Returns:
            RoundModel: The round, with the winner hidden unless revealed
        """
        return RoundModel(
            mode=self.convert_mode_to_modemodel(round_.mode),
            left=self.convert_rational_to_rationalmodel(round_.left),
            right=self.convert_rational_to_rationalmodel(round_.right),
            winner=round_.winner if reveal_winner else None,
            attempts=round_.attempts,
            exhausted=round_.exhausted,
        )

    def convert_numberline_to_numberlinemodel(self, number_line: NumberLine) -> NumberLineModel:
        return NumberLineModel(
            domain_min=number_line.domain_min,
            domain_max=number_line.domain_max,
            step_denominator=number_line.step_denominator,
            ticks=[TickModel.model_validate(tick) for tick in number_line.ticks],
            plot_left=number_line.plot_left,
            plot_right=number_line.plot_right,
            position_left=number_line.position_left,
            position_right=number_line.position_right,
        )

    def convert_session_to_sessionstatemodel(self, session: GameSession) -> SessionStateModel:
        """Convert the GameSession to the SessionStateModel to send client

        Verdicts and the number line are only included once a side was picked.
        """
        selection: Optional[int] = session.current_selection()
        picked = selection is not None

        verdicts = None
        number_line = None
        if picked:
            verdicts = [VerdictModel(verdict) for verdict in session.verdicts()]
            number_line = self.convert_numberline_to_numberlinemodel(session.layout())

        return SessionStateModel(
            session_id=session.session_id,
            round=self.convert_round_to_roundmodel(session.current_round(), reveal_winner=picked),
            selection=selection,
            verdicts=verdicts,
            number_line=number_line,
        )
