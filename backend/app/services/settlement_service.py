"""
Settlement service for balance calculation and debt settlement.
"""
from typing import List, Dict, Sequence
from decimal import Decimal
import logging
from app.core.utils import round_to_cents, format_amount
from app.models.cost_item import CostItem
from app.models.participant import Participant
from app.models.settlement import ParticipantBalance, Settlement
from app.services.split_service import split_shares

logger = logging.getLogger(__name__)

# Balances within this distance of zero count as settled
SETTLED_TOLERANCE = Decimal("0.01")


def calculate_balances(
    cost_items: Sequence[CostItem],
    participants: Sequence[Participant]
) -> List[ParticipantBalance]:
    """
    Calculate paid, owed and net balance for each participant.

    Only cost items carrying a split are counted. Participant ids that are
    not in ``participants`` are ignored wherever a split mentions them.
    Output follows the order of ``participants``.
    """
    paid: Dict[str, Decimal] = {p.id: Decimal(0) for p in participants}
    owed: Dict[str, Decimal] = {p.id: Decimal(0) for p in participants}

    for item in cost_items:
        split = item.split
        if split is None:
            continue

        # Add what payer paid
        if split.paid_by_participant_id in paid:
            paid[split.paid_by_participant_id] += item.amount

        # Add what each participant owes
        for participant_id, share in split_shares(item.amount, split).items():
            if participant_id in owed:
                owed[participant_id] += share

    balances = [
        ParticipantBalance(
            participant_id=p.id,
            participant_name=p.name,
            paid=paid[p.id],
            owed=owed[p.id],
            balance=paid[p.id] - owed[p.id]
        )
        for p in participants
    ]

    logger.debug(f"Calculated balances for {len(balances)} participants from {len(cost_items)} cost items")
    return balances


def calculate_settlements(balances: Sequence[ParticipantBalance]) -> List[Settlement]:
    """
    Work out transfers that bring every balance back to zero.
    Uses a greedy algorithm: the largest debtor pays the largest creditor
    until one of them is settled, then moves on. This keeps the number of
    transfers low but is not guaranteed to be the minimum.
    """
    # Separate debtors (negative balance) and creditors (positive balance)
    debtors = [(b, -b.balance) for b in balances if b.balance < -SETTLED_TOLERANCE]  # Store as positive
    creditors = [(b, b.balance) for b in balances if b.balance > SETTLED_TOLERANCE]

    # Sort in descending order
    debtors.sort(key=lambda x: x[1], reverse=True)
    creditors.sort(key=lambda x: x[1], reverse=True)

    settlements = []
    debt_idx = 0
    cred_idx = 0

    while debt_idx < len(debtors) and cred_idx < len(creditors):
        debtor, debt_amount = debtors[debt_idx]
        creditor, cred_amount = creditors[cred_idx]

        # Transfer the minimum of what's owed and what's needed
        transfer_amount = min(debt_amount, cred_amount)
        settlements.append(Settlement(
            from_participant_id=debtor.participant_id,
            to_participant_id=creditor.participant_id,
            from_name=debtor.participant_name,
            to_name=creditor.participant_name,
            amount=round_to_cents(transfer_amount)
        ))

        debtors[debt_idx] = (debtor, debt_amount - transfer_amount)
        creditors[cred_idx] = (creditor, cred_amount - transfer_amount)

        if debtors[debt_idx][1] < SETTLED_TOLERANCE:
            debt_idx += 1
        if creditors[cred_idx][1] < SETTLED_TOLERANCE:
            cred_idx += 1

    logger.debug(f"Resolved {len(debtors)} debtors and {len(creditors)} creditors into {len(settlements)} transfers")
    return settlements


def build_summary(
    balances: Sequence[ParticipantBalance],
    settlements: Sequence[Settlement],
    currency: str
) -> str:
    """Render balances and transfers as plain text."""
    total_paid = sum((b.paid for b in balances), Decimal(0))

    summary_lines = []
    summary_lines.append(f"Total paid: {format_amount(total_paid, currency)}")
    summary_lines.append(f"Participants: {len(balances)}")
    summary_lines.append("\nNet balances:")
    for balance in balances:
        summary_lines.append(
            f"  {balance.participant_name}: {format_amount(balance.balance, currency, signed=True)}"
        )
    summary_lines.append("\nTransfers:")
    if not settlements:
        summary_lines.append("  Everyone is settled up")
    for settlement in settlements:
        summary_lines.append(
            f"  {settlement.from_name} -> {settlement.to_name}: "
            f"{format_amount(settlement.amount, currency)}"
        )
    return "\n".join(summary_lines)
