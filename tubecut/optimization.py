import logging
from dataclasses import replace
from typing import Dict, Iterable, List, Optional, Sequence

from tubecut.config import default_stock_length
from tubecut.details import apply_usage, decrement_amount, sort_by_length_descending
from tubecut.models import (
    EXCEEDS_STOCK_LENGTH, INVALID_LENGTH,
    CuttingPlan, Detail, PatternGroup, StockUnit, UnplaceableDetail,
)

logger = logging.getLogger(__name__)

class CuttingOptimizer:
    @staticmethod
    def find_best_fit(details: Sequence[Detail], remaining: float) -> Optional[Detail]:
        """Detail leaving the smallest gap in `remaining`; the first one wins a tie."""
        best = None
        smallest_gap = float('inf')
        for detail in details:
            if detail.amount <= 0 or detail.length > remaining:
                continue
            gap = remaining - detail.length
            if gap < smallest_gap:
                smallest_gap = gap
                best = detail
        return best

    @staticmethod
    def fill_unit_optimally(available_details: Sequence[Detail], capacity: float) -> StockUnit:
        """
        Fills a single stock unit (Best Fit).
        Picks the best fitting detail again and again until nothing fits any more.
        """
        placed: List[Detail] = []
        used = 0
        working = list(available_details)

        while working:
            best = CuttingOptimizer.find_best_fit(working, capacity - used)
            if best is None:
                break
            placed.append(replace(best, amount=1))
            used += best.length
            working = decrement_amount(working, best.name, best.length)

        return StockUnit(capacity=capacity, remaining_capacity=capacity - used, placed_pieces=tuple(placed))

    @staticmethod
    def pattern_signature(unit: StockUnit) -> str:
        pieces = sorted(unit.placed_pieces, key=lambda d: (d.name, d.length))
        return "|".join(f"{d.name}:{d.length}" for d in pieces)

    @staticmethod
    def group_similar_units(units: Iterable[StockUnit]) -> List[PatternGroup]:
        by_signature: Dict[str, List[StockUnit]] = {}
        for unit in units:
            by_signature.setdefault(CuttingOptimizer.pattern_signature(unit), []).append(unit)

        groups = []
        for index, (signature, members) in enumerate(by_signature.items()):
            names = dict.fromkeys(d.name for d in members[0].placed_pieces)
            groups.append(PatternGroup(
                label=f"Type {index + 1} ({', '.join(names)})",
                units=tuple(members),
                total_waste=sum(u.remaining_capacity for u in members),
                unit_count=len(members),
                signature=signature,
            ))
        return groups

    @staticmethod
    def optimize_cutting(details: Iterable[Detail], capacity: float = None) -> CuttingPlan:
        if capacity is None:
            capacity = default_stock_length()
        if capacity <= 0:
            raise ValueError(f"Stangenlänge muss positiv sein: {capacity}")

        # 1. Split off rows that can never be cut, sort the rest descending
        details = [d for d in details if d.amount > 0]
        invalid = [d for d in details if d.length <= 0]
        demand = sort_by_length_descending(d for d in details if d.length > 0)

        # 2. One stock unit per pass until the demand is used up
        units: List[StockUnit] = []
        while demand:
            unit = CuttingOptimizer.fill_unit_optimally(demand, capacity)
            if not unit.placed_pieces:
                # Everything left is longer than a fresh unit
                break
            units.append(unit)
            demand = apply_usage(demand, unit.placed_pieces)

        # 3. Report what could not be placed
        unplaceable = [UnplaceableDetail(d.name, d.length, d.amount, INVALID_LENGTH) for d in invalid]
        unplaceable += [UnplaceableDetail(d.name, d.length, d.amount, EXCEEDS_STOCK_LENGTH) for d in demand]
        for item in unplaceable:
            logger.warning("Nicht zuschneidbar: %s", item.message)

        groups = CuttingOptimizer.group_similar_units(units)
        plan = CuttingPlan(
            groups=tuple(groups),
            leftover_details=tuple(invalid) + tuple(demand),
            total_waste=sum(g.total_waste for g in groups),
            total_units_used=len(units),
            capacity=capacity,
            unplaceable=tuple(unplaceable),
        )
        logger.info("Schnittplan: %d Stangen, %d Typen, Rest %.1f mm, vollständig=%s",
                    plan.total_units_used, len(groups), plan.total_waste, plan.complete)
        return plan

optimize_cutting = CuttingOptimizer.optimize_cutting
