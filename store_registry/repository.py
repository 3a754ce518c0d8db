"""
Design (repository.py)
- Purpose: Encapsulate the in-memory store list behind a tiny API, so the shell and
           automation mode don't touch a bare list directly.
- Inputs: Store objects and predicates.
- Outputs: Iteration in insertion order; selections; removal counts.
- Side effects: Mutates the internal list.
- Thread-safety: None; the program is single-threaded.
"""

from typing import Callable, Iterable, Iterator, List, Optional

from .models import Store


class Repo:
    """
    Design (Repo)
    - State:
        _stores: [Store] in insertion order; duplicate names allowed
    """

    def __init__(self, stores: Optional[Iterable[Store]] = None) -> None:
        self._stores: List[Store] = list(stores) if stores is not None else []

    def __iter__(self) -> Iterator[Store]:
        return iter(list(self._stores))

    def __len__(self) -> int:
        return len(self._stores)

    # -------- Mutations --------

    def add(self, store: Store) -> None:
        """
        Purpose: Append a store at the end of the list.
        Inputs: store (Store)
        Outputs: None
        """
        self._stores.append(store)

    def remove_where(self, predicate: Callable[[Store], bool]) -> int:
        """
        Purpose: Remove every store for which predicate(store) is true.
        Inputs: predicate (Store -> bool)
        Outputs: Number of stores removed.
        Side effects: Survivors keep their relative order.
        """
        kept = [s for s in self._stores if not predicate(s)]
        removed = len(self._stores) - len(kept)
        self._stores = kept
        return removed

    def remove_by_name(self, name: str) -> int:
        """Remove ALL stores whose name matches case-insensitively."""
        return self.remove_where(lambda s: s.matches_name(name))

    # -------- Queries --------

    def select(self, predicate: Callable[[Store], bool]) -> List[Store]:
        return [s for s in self._stores if predicate(s)]

    def featured(self) -> List[Store]:
        """Stores open 24/7 with both a short number and a domestic mobile number."""
        return self.select(Store.is_featured)
