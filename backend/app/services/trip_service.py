"""
Trip service for settling an already-loaded trip snapshot.
"""
from decimal import Decimal
from typing import List
import logging
from app.core.config import settings
from app.models.cost_item import CostItem, CostItemKind
from app.models.settlement import TripSettlement
from app.schemas.trip import TripSnapshot
from app.services.settlement_service import (
    calculate_balances, calculate_settlements, build_summary
)

logger = logging.getLogger(__name__)


def collect_cost_items(snapshot: TripSnapshot) -> List[CostItem]:
    """
    Pick the cost items that take part in balance calculation.

    Flight options and transport items count only when selected; at most one
    per category is expected to be selected, which is not checked here.
    Every lodging stay counts. Items without a split are left out.
    """
    cost_items = []
    for flight in snapshot.flight_options:
        if flight.is_selected and flight.split:
            cost_items.append(flight.to_cost_item(CostItemKind.FLIGHT_OPTION))
    for transport in snapshot.transport_items:
        if transport.is_selected and transport.split:
            cost_items.append(transport.to_cost_item(CostItemKind.TRANSPORT_ITEM))
    for lodging in snapshot.lodging_stays:
        if lodging.split:
            cost_items.append(lodging.to_cost_item(CostItemKind.LODGING_STAY))
    return cost_items


def get_currency(snapshot: TripSnapshot) -> str:
    """Trip currency, falling back to the configured default."""
    if snapshot.currency:
        return snapshot.currency
    return settings.DEFAULT_CURRENCY


def settle_trip(snapshot: TripSnapshot) -> TripSettlement:
    """Calculate balances, transfers and summary for a trip snapshot."""
    currency = get_currency(snapshot)
    participants = [p.to_participant() for p in snapshot.participants]
    cost_items = collect_cost_items(snapshot)

    balances = calculate_balances(cost_items, participants)
    settlements = calculate_settlements(balances)

    logger.info(
        f"Settled trip snapshot: {len(cost_items)} cost items, "
        f"{len(participants)} participants, {len(settlements)} transfers"
    )

    return TripSettlement(
        currency=currency,
        cost_item_count=len(cost_items),
        total_paid=sum((b.paid for b in balances), Decimal(0)),
        balances=balances,
        settlements=settlements,
        summary=build_summary(balances, settlements, currency)
    )
