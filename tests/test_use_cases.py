import pytest
from prometheus_client import REGISTRY

from slot_engine.application.dto import BetRequest, SpinRequest, parse_bet
from slot_engine.application.ports.session_repository_port import SessionNotFoundError
from slot_engine.application.use_cases import (
    AdjustBetUseCase,
    CloseSessionUseCase,
    GetSessionUseCase,
    OpenSessionUseCase,
    PlaySpinUseCase
)
from slot_engine.metrics import BusinessMetrics
from conftest import ScriptedRandom


def spins_total(result):
    return REGISTRY.get_sample_value('slot_spins_total', {'result': result}) or 0.0


@pytest.fixture
def open_session(session_repository, paytable):
    def _open(indices=(0,), credits=100, bet=1):
        use_case = OpenSessionUseCase(
            session_repository=session_repository,
            paytable=paytable,
            random_source_factory=lambda: ScriptedRandom(indices),
            initial_credits=credits,
            opening_bet=bet
        )
        return use_case.execute()
    return _open


def test_open_session_uses_configured_state(open_session, session_repository):
    session = open_session()

    assert session.credits == 100
    assert session.bet == 1
    assert session.can_spin
    assert session.reel_count == 3
    assert session_repository.count() == 1
    assert REGISTRY.get_sample_value('slot_active_sessions') == 1


def test_sessions_are_independent(open_session, session_repository):
    first = open_session()
    second = open_session()
    assert first.session_id != second.session_id
    assert session_repository.get(first.session_id) is not session_repository.get(second.session_id)


def test_get_and_close_session(open_session, session_repository):
    session = open_session()
    assert GetSessionUseCase(session_repository).execute(session.session_id).credits == 100

    CloseSessionUseCase(session_repository).execute(session.session_id)
    with pytest.raises(SessionNotFoundError):
        GetSessionUseCase(session_repository).execute(session.session_id)
    with pytest.raises(SessionNotFoundError):
        CloseSessionUseCase(session_repository).execute(session.session_id)


def test_winning_spin_response(open_session, session_repository):
    session = open_session(indices=[1, 1, 1], bet=4)
    before = spins_total('win')

    result = PlaySpinUseCase(session_repository).execute(SpinRequest(session.session_id))

    assert result.error is None
    assert result.spun and result.win
    assert result.symbols == ['🍋', '🍋', '🍋']
    assert result.amount_won == 20
    assert result.credits_after == 116
    assert result.bet == 4
    assert spins_total('win') == before + 1


def test_declined_spin_response(open_session, session_repository):
    session = open_session(credits=5, bet=10)
    before = spins_total('declined')

    result = PlaySpinUseCase(session_repository).execute(SpinRequest(session.session_id))

    assert not result.spun
    assert result.to_dict()["symbols"] is None
    assert result.amount_won == 0
    assert result.credits_after == 5
    assert spins_total('declined') == before + 1


def test_metrics_failure_keeps_spin_result(open_session, session_repository, monkeypatch):
    session = open_session(indices=[0, 1, 2], bet=5)

    def broken_track_spin(outcome, bet):
        raise RuntimeError("registry unavailable")

    monkeypatch.setattr(BusinessMetrics, "track_spin", broken_track_spin)
    result = PlaySpinUseCase(session_repository).execute(SpinRequest(session.session_id))

    assert result.error is None
    assert result.spun
    assert result.symbols == ['🍒', '🍋', '🍊']
    assert result.credits_after == 95
    assert session_repository.get(session.session_id).credits == 95


def test_spin_unknown_session(session_repository):
    with pytest.raises(SessionNotFoundError):
        PlaySpinUseCase(session_repository).execute(SpinRequest('missing'))


def test_adjust_bet(open_session, session_repository):
    session = open_session(credits=2)
    use_case = AdjustBetUseCase(session_repository)

    result = use_case.execute(BetRequest(session.session_id, adjustment=1))
    assert result.changed and result.bet == 2

    result = use_case.execute(BetRequest(session.session_id, adjustment=1))
    assert not result.changed and result.bet == 2

    result = use_case.execute(BetRequest(session.session_id, adjustment=-1, base=parse_bet("oops")))
    assert not result.changed and result.bet == 2
    assert result.credits == 2


@pytest.mark.parametrize("text,expected", [
    ("12", 12),
    (" 3 ", 3),
    ("-2", -2),
    ("", 0),
    ("ten", 0),
    ("2.5", 0),
    (None, 0),
    (True, 0),
    (8, 8),
])
def test_parse_bet(text, expected):
    assert parse_bet(text) == expected
