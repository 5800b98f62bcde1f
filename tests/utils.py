from __future__ import annotations

from typing import Any, Iterable

from typing_extensions import Self


class InstanceAutoTracker:
    """Track cls instances: useful for @pytest.mark.parametrize dataclasses"""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        cls.INSTANCES: list[Self] = []

    def __post_init__(self) -> None:
        self.__class__.INSTANCES.append(self)


class ResumableIterator:
    """Iterator that raises `StopIteration` after each burst, then carries on
    with the next one: bursts [1, 2], [3] -> 1, 2, stop, 3, stop."""

    def __init__(self, *bursts: Iterable[Any]) -> None:
        self.bursts = [list(burst) for burst in bursts]

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Any:
        if not self.bursts:
            raise StopIteration
        if not self.bursts[0]:
            self.bursts.pop(0)
            raise StopIteration
        return self.bursts[0].pop(0)


def failing_after(*items: Any, exception: type = ValueError):
    """Generator yielding `items`, then raising `exception`."""
    yield from items
    raise exception('source failure')


class RaisingOnceIterator:
    """Iterator over `items` that raises `exception` once, before the item at
    index `at`, then carries on."""

    def __init__(self, items: Iterable[Any], at: int, exception: type = OSError) -> None:
        self.items = list(items)
        self.at = at
        self.exception = exception
        self.index = 0
        self.raised = False

    def __iter__(self) -> Self:
        return self

    def __next__(self) -> Any:
        if self.index == self.at and not self.raised:
            self.raised = True
            raise self.exception('source hiccup')
        if self.index >= len(self.items):
            raise StopIteration
        self.index += 1
        return self.items[self.index - 1]


class DuplicateFailingOnce:
    """Identity duplicate that raises `ValueError` the first time it sees
    `value`."""

    def __init__(self, value: Any) -> None:
        self.value = value
        self.calls: list = []

    def __call__(self, item: Any) -> Any:
        self.calls.append(item)
        if item == self.value and self.calls.count(item) == 1:
            raise ValueError(f'cannot duplicate {item!r}')
        return item
