"""Per-vehicle cost position: break-even, target price and realised profit."""

from decimal import Decimal

from autoledger.core.entities.money import round_currency
from autoledger.core.entities.report import VehicleSummary
from autoledger.core.entities.vehicle import Vehicle
from autoledger.core.services.expense_aggregator import aggregate_expenses


def summarize_vehicle(vehicle: Vehicle) -> VehicleSummary:
    """
    Summarize what a vehicle has cost so far.

    target price = break-even cost * (1 + margin / 100). Profit is only
    reported for a sold vehicle with a recorded sold price.
    """
    breakdown = aggregate_expenses(vehicle.expenses)
    break_even = round_currency(vehicle.purchase_price + breakdown.total)
    target = round_currency(break_even * (1 + vehicle.profit_margin / Decimal(100)))

    profit = None
    if vehicle.is_sold and vehicle.sold_price is not None:
        profit = round_currency(vehicle.sold_price - break_even)

    return VehicleSummary(
        vehicle_id=vehicle.id,
        expenses=breakdown,
        break_even_cost=break_even,
        profit_margin=vehicle.profit_margin,
        target_price=target,
        profit=profit,
    )
