import dataclasses
from collections import Counter

import pytest

from slot_engine.domain.entities.paytable import CLASSIC_SYMBOLS, Paytable
from slot_engine.domain.entities.symbol import Symbol
from slot_engine.infrastructure.rng import NumpyRandomSource, PythonRandomSource
from conftest import ScriptedRandom


def test_classic_table_order_and_multipliers(paytable):
    assert paytable.size == 4
    assert len(paytable) == 4
    assert [s.token for s in paytable] == ['🍒', '🍋', '🍊', '⭐']
    assert paytable.multiplier_of('🍒') == 10
    assert paytable.multiplier_of('🍋') == 5
    assert paytable.multiplier_of('🍊') == 3
    assert paytable.multiplier_of('⭐') == 1


def test_empty_table_rejected():
    with pytest.raises(ValueError):
        Paytable([])


def test_accepts_symbols_and_pairs():
    table = Paytable([Symbol('A', 2), ('B', 7)])
    assert table.symbols == (Symbol('A', 2), Symbol('B', 7))
    assert table.multiplier_of('B') == 7


def test_duplicate_tokens_allowed_first_wins_lookup():
    table = Paytable([('A', 2), ('A', 9), ('B', 1)])
    assert table.size == 3
    assert table.multiplier_of('A') == 2


def test_unknown_token_lookup_raises():
    with pytest.raises(KeyError):
        Paytable.classic().multiplier_of('💎')


def test_draw_uses_rng_index(paytable):
    rng = ScriptedRandom([2])
    assert paytable.draw(rng).token == '🍊'
    assert rng.calls == [4]


@pytest.mark.parametrize("size", [1, 2, 4, 7])
def test_draw_always_returns_configured_symbol(size):
    table = Paytable([(f"S{i}", i + 1) for i in range(size)])
    rng = PythonRandomSource(seed=size)
    tokens = {s.token for s in table}
    for _ in range(500):
        assert table.draw(rng).token in tokens


def test_draw_covers_every_symbol(paytable):
    rng = PythonRandomSource(seed=7)
    seen = {paytable.draw(rng).token for _ in range(2000)}
    assert seen == {token for token, _ in CLASSIC_SYMBOLS}


@pytest.mark.parametrize("source_cls", [PythonRandomSource, NumpyRandomSource])
def test_draw_frequencies_are_uniform(paytable, source_cls):
    rng = source_cls(seed=2024)
    draws = 40000
    counts = Counter(paytable.draw(rng).token for _ in range(draws))

    assert set(counts) == {token for token, _ in CLASSIC_SYMBOLS}
    for token, count in counts.items():
        assert count / draws == pytest.approx(1 / paytable.size, abs=0.01), token

    # Chi-square with 3 degrees of freedom; 21.11 is the 0.0001 critical value
    expected = draws / paytable.size
    chi_square = sum((count - expected) ** 2 / expected for count in counts.values())
    assert chi_square < 21.11


def test_return_to_player(paytable):
    assert paytable.return_to_player(3) == pytest.approx(19 / 64)
    assert paytable.return_to_player(1) == pytest.approx(19 / 4)


def test_symbol_identity_is_token():
    assert Symbol('🍒', 10) == Symbol('🍒', 3)
    assert Symbol('🍒', 10) != Symbol('🍋', 10)
    assert len({Symbol('🍒', 10), Symbol('🍒', 1)}) == 1


def test_symbol_and_table_are_immutable(paytable):
    with pytest.raises(dataclasses.FrozenInstanceError):
        paytable.symbols[0].multiplier = 99
    assert isinstance(paytable.symbols, tuple)


def test_to_dict(paytable):
    data = paytable.to_dict()
    assert data["size"] == 4
    assert data["symbols"][0] == {"token": '🍒', "multiplier": 10}
