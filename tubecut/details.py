from dataclasses import replace
from typing import Iterable, List, Mapping

import pandas as pd

from tubecut.models import Detail

def sort_by_length_descending(details: Iterable[Detail]) -> List[Detail]:
    return sorted(details, key=lambda d: d.length, reverse=True)

def decrement_amount(details: Iterable[Detail], name: str, length: float = None) -> List[Detail]:
    """
    Takes one piece of the first detail called `name` (and of `length`, if given).
    Details that run out are dropped. An unknown name changes nothing.
    """
    updated = []
    done = False
    for detail in details:
        if not done and detail.name == name and (length is None or detail.length == length):
            detail = replace(detail, amount=detail.amount - 1)
            done = True
        if detail.amount > 0:
            updated.append(detail)
    return updated

def apply_usage(remaining: Iterable[Detail], used: Iterable[Detail]) -> List[Detail]:
    updated = list(remaining)
    for piece in used:
        updated = decrement_amount(updated, piece.name, piece.length)
    return updated

def total_demand_length(details: Iterable[Detail]) -> float:
    return sum(d.length * d.amount for d in details if d.amount > 0)

def details_from_records(records: Iterable[Mapping]) -> List[Detail]:
    """Stored input rows look like {id, name, length, quantity}; the id is not needed here."""
    return [Detail(name=str(r['name']), length=r['length'], amount=int(r['quantity'])) for r in records]

def details_from_frame(df: pd.DataFrame) -> List[Detail]:
    if df.empty: return []
    return details_from_records(df[['name', 'length', 'quantity']].to_dict('records'))
