"""Models package - Domain types consumed and produced by the splitting engine."""
from app.models.participant import Participant
from app.models.split import Split, SplitMode
from app.models.cost_item import CostItem, CostItemKind
from app.models.settlement import ParticipantBalance, Settlement, TripSettlement

__all__ = [
    "Participant",
    "Split",
    "SplitMode",
    "CostItem",
    "CostItemKind",
    "ParticipantBalance",
    "Settlement",
    "TripSettlement",
]
