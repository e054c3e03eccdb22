from dataclasses import dataclass, field
from typing import List, Tuple

INVALID_LENGTH = "invalid_length"
EXCEEDS_STOCK_LENGTH = "exceeds_stock_length"

@dataclass(frozen=True)
class Detail:
    name: str
    length: float
    amount: int = 1

@dataclass(frozen=True)
class StockUnit:
    capacity: float
    remaining_capacity: float
    placed_pieces: Tuple[Detail, ...] = ()

    @property
    def used_length(self) -> float:
        return self.capacity - self.remaining_capacity

@dataclass(frozen=True)
class PatternGroup:
    label: str
    units: Tuple[StockUnit, ...]
    total_waste: float
    unit_count: int
    signature: str = ""

    @property
    def pieces(self) -> Tuple[Detail, ...]:
        return self.units[0].placed_pieces if self.units else ()

@dataclass(frozen=True)
class UnplaceableDetail:
    name: str
    length: float
    amount: int
    reason: str = EXCEEDS_STOCK_LENGTH

    @property
    def message(self) -> str:
        if self.reason == INVALID_LENGTH:
            return f"{self.name}: ungültige Länge {self.length:g} ({self.amount} Stk)"
        return f"{self.name}: {self.length:g} mm länger als Stange ({self.amount} Stk)"

@dataclass(frozen=True)
class CuttingPlan:
    groups: Tuple[PatternGroup, ...] = ()
    leftover_details: Tuple[Detail, ...] = ()
    total_waste: float = 0
    total_units_used: int = 0
    capacity: float = 0
    unplaceable: Tuple[UnplaceableDetail, ...] = field(default_factory=tuple)

    @property
    def complete(self) -> bool:
        return len(self.leftover_details) == 0

    @property
    def units(self) -> List[StockUnit]:
        return [unit for group in self.groups for unit in group.units]

    @property
    def efficiency(self) -> float:
        """Share of consumed stock length that ends up in pieces (1.0 when nothing is cut)."""
        if self.total_units_used == 0 or self.capacity <= 0:
            return 1.0
        return 1 - self.total_waste / (self.total_units_used * self.capacity)

    @property
    def errors(self) -> List[str]:
        return [u.message for u in self.unplaceable]
