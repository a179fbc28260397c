"""Action system: movement and coin transfers."""

from geocoin.actions.base import TransferResult
from geocoin.actions.collect import CollectAction
from geocoin.actions.deposit import DepositAction
from geocoin.actions.move import MoveAction

__all__ = ["CollectAction", "DepositAction", "MoveAction", "TransferResult"]
