"""
Tests for settlement calculation.
"""
from decimal import Decimal
from app.models import CostItem, Participant, ParticipantBalance, Split, SplitMode
from app.services.settlement_service import (
    calculate_balances, calculate_settlements, build_summary
)


def make_balance(participant_id, name, paid, owed):
    paid = Decimal(paid)
    owed = Decimal(owed)
    return ParticipantBalance(
        participant_id=participant_id,
        participant_name=name,
        paid=paid,
        owed=owed,
        balance=paid - owed
    )


def apply_settlements(balances, settlements):
    adjusted = {b.participant_id: b.balance for b in balances}
    for s in settlements:
        adjusted[s.from_participant_id] += s.amount
        adjusted[s.to_participant_id] -= s.amount
    return adjusted


def test_simple_settlement():
    """Test one debtor paying one creditor."""
    balances = [
        make_balance("1", "Sérgio", "100", "50"),
        make_balance("2", "Vini", "0", "50"),
    ]

    settlements = calculate_settlements(balances)

    assert len(settlements) == 1
    assert settlements[0].from_participant_id == "2"
    assert settlements[0].to_participant_id == "1"
    assert settlements[0].from_name == "Vini"
    assert settlements[0].to_name == "Sérgio"
    assert settlements[0].amount == Decimal("50.00")


def test_two_debtors_one_creditor():
    """Test that each debtor pays the creditor once."""
    balances = [
        make_balance("1", "Sérgio", "300", "100"),
        make_balance("2", "Vini", "0", "100"),
        make_balance("3", "Pai", "0", "100"),
    ]

    settlements = calculate_settlements(balances)

    assert len(settlements) == 2
    assert settlements[0].amount == Decimal("100")
    assert settlements[1].amount == Decimal("100")
    assert sum(s.amount for s in settlements) == Decimal("200")


def test_balanced_participants():
    """Test that nothing is owed when everyone is even."""
    balances = [
        make_balance("1", "Sérgio", "100", "100"),
        make_balance("2", "Vini", "100", "100"),
    ]

    assert calculate_settlements(balances) == []


def test_empty_balances():
    assert calculate_settlements([]) == []


def test_complex_settlement():
    """Test total transferred matches total credit."""
    balances = [
        make_balance("1", "Sérgio", "200", "100"),
        make_balance("2", "Vini", "50", "100"),
        make_balance("3", "Pai", "50", "100"),
    ]

    settlements = calculate_settlements(balances)

    assert sum(s.amount for s in settlements) == Decimal("100")
    assert all(s.to_participant_id == "1" for s in settlements)


def test_largest_debtor_pays_largest_creditor_first():
    """Test greedy matching order."""
    balances = [
        make_balance("a", "Ana", "0", "25"),
        make_balance("b", "Bea", "0", "25"),
        make_balance("c", "Caio", "30", "0"),
        make_balance("d", "Duda", "20", "0"),
    ]

    settlements = calculate_settlements(balances)

    assert [(s.from_participant_id, s.to_participant_id, s.amount) for s in settlements] == [
        ("a", "c", Decimal("25")),
        ("b", "c", Decimal("5")),
        ("b", "d", Decimal("20")),
    ]


def test_balances_within_a_cent_are_settled():
    """Test that tiny leftovers produce no transfers."""
    balances = [
        make_balance("1", "Sérgio", "0.005", "0"),
        make_balance("2", "Vini", "0", "0.005"),
        make_balance("3", "Pai", "0.01", "0"),
    ]

    assert calculate_settlements(balances) == []


def test_settlement_amounts_are_rounded_to_cents():
    """Test half-up rounding of transfer amounts."""
    balances = [
        make_balance("1", "Sérgio", "10.005", "0"),
        make_balance("2", "Vini", "0", "10.005"),
    ]

    settlements = calculate_settlements(balances)

    assert len(settlements) == 1
    assert settlements[0].amount == Decimal("10.01")


def test_settlements_zero_out_trip_balances():
    """Test that applying every transfer leaves all balances near zero."""
    participants = [
        Participant(id="s", name="Sérgio"),
        Participant(id="v", name="Vini"),
        Participant(id="p", name="Pai"),
    ]
    items = [
        CostItem(id="flight", amount=Decimal("661.93"), split=Split(
            paid_by_participant_id="s",
            split_mode=SplitMode.EQUAL,
            participant_ids=("s", "v", "p")
        )),
        CostItem(id="car", amount=Decimal("340.24"), split=Split(
            paid_by_participant_id="v",
            split_mode=SplitMode.EQUAL,
            participant_ids=("s", "v")
        )),
        CostItem(id="villa", amount=Decimal("1293.00"), split=Split(
            paid_by_participant_id="p",
            split_mode=SplitMode.CUSTOM,
            participant_ids=("s", "v", "p"),
            allocations={"s": Decimal("400"), "v": Decimal("400"), "p": Decimal("493")}
        )),
    ]

    balances = calculate_balances(items, participants)
    settlements = calculate_settlements(balances)

    assert [(s.from_participant_id, s.to_participant_id) for s in settlements] == [("v", "p"), ("s", "p")]
    assert [s.amount for s in settlements] == [Decimal("450.52"), Decimal("128.83")]
    for remaining in apply_settlements(balances, settlements).values():
        assert abs(remaining) < Decimal("0.01")


def test_settlement_count_bound():
    """Test at most n - 1 transfers for n unsettled participants."""
    balances = [
        make_balance("1", "A", "70", "0"),
        make_balance("2", "B", "0", "15"),
        make_balance("3", "C", "0", "35"),
        make_balance("4", "D", "40", "0"),
        make_balance("5", "E", "0", "60"),
    ]

    settlements = calculate_settlements(balances)

    assert len(settlements) <= len(balances) - 1
    for remaining in apply_settlements(balances, settlements).values():
        assert abs(remaining) < Decimal("0.01")


def test_build_summary():
    """Test the plain-text summary."""
    balances = [
        make_balance("1", "Sérgio", "100", "50"),
        make_balance("2", "Vini", "0", "50"),
    ]
    settlements = calculate_settlements(balances)

    summary = build_summary(balances, settlements, "EUR")

    assert "Total paid: 100.00 EUR" in summary
    assert "Participants: 2" in summary
    assert "Sérgio: +50.00 EUR" in summary
    assert "Vini: -50.00 EUR" in summary
    assert "Vini -> Sérgio: 50.00 EUR" in summary


def test_build_summary_when_settled():
    balances = [make_balance("1", "Sérgio", "10", "10")]

    summary = build_summary(balances, [], "EUR")

    assert "Sérgio: +0.00 EUR" in summary
    assert "Everyone is settled up" in summary
