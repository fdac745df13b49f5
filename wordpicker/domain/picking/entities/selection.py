"""Selection set of individually clicked word positions."""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from wordpicker.domain.common.value_object import ValueObject


@dataclass(frozen=True)
class SelectionSet(ValueObject):
    """
    Selected token positions in the order they were selected.

    Independent of phrase membership; the session decides how phrase
    membership overrides a selection bit.
    """

    positions: tuple[int, ...] = ()

    def __contains__(self, position: object) -> bool:
        return position in self.positions

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)

    def __len__(self) -> int:
        return len(self.positions)

    def with_position(self, position: int) -> "SelectionSet":
        if position in self.positions:
            return self
        return SelectionSet(positions=(*self.positions, position))

    def without_positions(self, positions: Iterable[int]) -> "SelectionSet":
        dropped = set(positions)
        return SelectionSet(positions=tuple(p for p in self.positions if p not in dropped))

    def sorted(self) -> list[int]:
        return sorted(self.positions)
