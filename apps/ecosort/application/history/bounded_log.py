"""BoundedLog - 용량 제한 최신순 로그."""

from __future__ import annotations

from collections import deque
from typing import Generic, Iterable, Iterator, TypeVar

T = TypeVar("T")


class BoundedLog(Generic[T]):
    """삽입 순서만으로 정렬되는 용량 제한 로그.

    - push: 맨 앞(최신)에 추가
    - 용량 초과 시 가장 오래된 항목 제거 (LRU 아님)
    - 순회: 최신 → 오래된 순
    """

    def __init__(self, capacity: int, items: Iterable[T] = ()):
        """초기화.

        Args:
            capacity: 최대 항목 수 (1 이상)
            items: 초기 항목 (최신순), 용량 초과분은 버림
        """
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: deque[T] = deque(maxlen=capacity)
        for item in items:
            if len(self._items) == capacity:
                break
            self._items.append(item)

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, item: T) -> T | None:
        """최신 항목 추가.

        Returns:
            밀려난 가장 오래된 항목 (없으면 None)
        """
        evicted = self._items[-1] if len(self._items) == self._capacity else None
        self._items.appendleft(item)
        return evicted

    def clear(self) -> None:
        self._items.clear()

    def snapshot(self) -> list[T]:
        """현재 항목 복사본 (최신순)."""
        return list(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
