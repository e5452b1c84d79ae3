"""Slot machine paytable"""
from typing import Iterable, Iterator, Tuple, Union

from slot_engine.domain.entities.symbol import Symbol

# Classic three-reel table: cherry pays most, star least
CLASSIC_SYMBOLS: Tuple[Tuple[str, int], ...] = (
    ('🍒', 10),
    ('🍋', 5),
    ('🍊', 3),
    ('⭐', 1),
)


class Paytable:
    """Ordered, immutable set of symbols shared by every reel.

    Each reel draws from the whole table with equal probability per entry,
    so duplicated tokens weigh proportionally more.
    """

    def __init__(self, entries: Iterable[Union[Symbol, Tuple[str, int]]]):
        symbols = []
        for entry in entries:
            if isinstance(entry, Symbol):
                symbols.append(entry)
            else:
                token, multiplier = entry
                symbols.append(Symbol(token, multiplier))

        if not symbols:
            raise ValueError("Paytable requires at least one symbol")

        self._symbols = tuple(symbols)

    @classmethod
    def classic(cls) -> 'Paytable':
        """Create the default four-symbol table"""
        return cls(CLASSIC_SYMBOLS)

    @property
    def symbols(self) -> Tuple[Symbol, ...]:
        return self._symbols

    @property
    def size(self) -> int:
        return len(self._symbols)

    def __len__(self) -> int:
        return len(self._symbols)

    def __iter__(self) -> Iterator[Symbol]:
        return iter(self._symbols)

    def draw(self, rng) -> Symbol:
        """Draw one symbol uniformly.

        ``rng`` is any object exposing ``randrange(n)`` returning an int in
        ``[0, n)``: a ``random.Random`` or a ``RandomSourcePort``.
        """
        return self._symbols[rng.randrange(len(self._symbols))]

    def multiplier_of(self, token: str) -> int:
        """Get payout multiplier for a token (first matching entry)"""
        for symbol in self._symbols:
            if symbol.token == token:
                return symbol.multiplier
        raise KeyError(token)

    def return_to_player(self, reel_count: int) -> float:
        """Theoretical payout per credit wagered with ``reel_count`` reels"""
        line_probability = len(self._symbols) ** -reel_count
        return sum(symbol.multiplier for symbol in self._symbols) * line_probability

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {
            "symbols": [symbol.to_dict() for symbol in self._symbols],
            "size": len(self._symbols)
        }
