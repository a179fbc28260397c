"""Transfer result — what a collect or deposit hands back to the UI."""

from __future__ import annotations

from dataclasses import dataclass

from geocoin.core.enums import TransferOutcome
from geocoin.core.models import Coin, GridCell


@dataclass(frozen=True, slots=True)
class TransferResult:
    """Outcome of one transfer between the player and a cache.

    Expected refusals (empty cache, nothing to deposit) are reported here
    rather than raised; the state is unchanged whenever ``ok`` is False.
    """

    outcome: TransferOutcome
    cell: GridCell
    coin: Coin | None = None

    @property
    def ok(self) -> bool:
        return self.outcome == TransferOutcome.OK

    def __repr__(self) -> str:
        return f"Transfer({self.outcome.name}, cell={self.cell}, coin={self.coin})"
