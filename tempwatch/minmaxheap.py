"""A min-max heap over indices into a shared list of sensor readings."""

from __future__ import annotations

import warnings
from collections.abc import Sequence

from tempwatch.reading import SensorReading


class MinMaxHeap:
    """Min-max heap ordered by reading temperature.

    The heap stores indices into ``readings``. ``positions`` maps each reading
    index to its slot in the heap, or -1 when the reading is not in the heap;
    the heap keeps it up to date as elements move.
    """

    def __init__(self, readings: Sequence[SensorReading], positions: list[int]) -> None:
        self._readings = readings
        self._positions = positions
        self._heap: list[int] = []

    # -- internal helpers -------------------------------------------------

    def _temp(self, heap_index: int) -> float:
        return self._readings[self._heap[heap_index]].temperature

    def _swap(self, a: int, b: int) -> None:
        heap = self._heap
        reading_a, reading_b = heap[a], heap[b]
        heap[a], heap[b] = reading_b, reading_a
        self._positions[reading_a] = b
        self._positions[reading_b] = a

    @staticmethod
    def _is_min_level(node: int) -> bool:
        if node < 0:
            return False
        return ((node + 1).bit_length() - 1) % 2 == 0

    def _bubble_up(self, index: int) -> None:
        while index > 0:
            parent = (index - 1) // 2
            temp = self._temp(index)
            if self._is_min_level(index):
                if temp > self._temp(parent):
                    self._swap(index, parent)
                    index = parent
                    continue
                if parent > 0:
                    grandparent = (parent - 1) // 2
                    if temp < self._temp(grandparent):
                        self._swap(index, grandparent)
                        index = grandparent
                        continue
            else:
                if temp < self._temp(parent):
                    self._swap(index, parent)
                    index = parent
                    continue
                if parent > 0:
                    grandparent = (parent - 1) // 2
                    if temp > self._temp(grandparent):
                        self._swap(index, grandparent)
                        index = grandparent
                        continue
            return

    def _descendants(self, node: int) -> list[int]:
        size = len(self._heap)
        children = [2 * node + 1, 2 * node + 2]
        grandchildren = [4 * node + 3 + offset for offset in range(4)]
        return [i for i in children + grandchildren if i < size]

    def _bubble_down(self, index: int) -> None:
        if self._is_min_level(index):
            self._bubble_down_with(index, pick=min, better=lambda a, b: a < b)
        else:
            self._bubble_down_with(index, pick=max, better=lambda a, b: a > b)

    def _bubble_down_with(self, node: int, pick, better) -> None:
        while 2 * node + 1 < len(self._heap):
            candidates = self._descendants(node)
            if not candidates:
                return
            target = pick(candidates, key=self._temp)
            if not better(self._temp(target), self._temp(node)):
                return
            parent_of_target = (target - 1) // 2
            self._swap(node, target)
            if parent_of_target != node and better(
                self._temp(parent_of_target), self._temp(target)
            ):
                self._swap(target, parent_of_target)
            node = target

    def _max_slot(self) -> int:
        if len(self._heap) == 1:
            return 0
        if len(self._heap) > 2 and self._temp(2) > self._temp(1):
            return 2
        return 1

    # -- public interface -------------------------------------------------

    def insert(self, reading_index: int) -> None:
        """Add the reading with the given index to the heap."""
        if reading_index < 0 or reading_index >= len(self._positions):
            raise IndexError(
                f"reading index {reading_index} out of bounds for positions list"
            )
        if self._positions[reading_index] != -1:
            warnings.warn(
                f"reading index {reading_index} is already in the heap",
                RuntimeWarning,
                stacklevel=2,
            )
            return
        self._heap.append(reading_index)
        new_index = len(self._heap) - 1
        self._positions[reading_index] = new_index
        self._bubble_up(new_index)

    def find_min(self) -> int | None:
        """Return the reading index with the lowest temperature, or None if empty."""
        return self._heap[0] if self._heap else None

    def find_max(self) -> int | None:
        """Return the reading index with the highest temperature, or None if empty."""
        if not self._heap:
            return None
        return self._heap[self._max_slot()]

    def delete_min(self) -> None:
        """Remove the coldest reading; does nothing on an empty heap."""
        if self._heap:
            self.delete_at(0)

    def delete_max(self) -> None:
        """Remove the hottest reading; does nothing on an empty heap."""
        if self._heap:
            self.delete_at(self._max_slot())

    def delete_at(self, heap_index: int) -> None:
        """Remove the element at a heap slot; out-of-range slots are ignored."""
        if heap_index < 0 or heap_index >= len(self._heap):
            return
        last = len(self._heap) - 1
        removed = self._heap[heap_index]
        self._swap(heap_index, last)
        self._heap.pop()
        self._positions[removed] = -1
        if heap_index >= len(self._heap):
            return
        moved = self._heap[heap_index]
        self._bubble_down(heap_index)
        if self._positions[moved] == heap_index:
            self._bubble_up(heap_index)

    def _take(self, k: int, find, delete) -> list[int]:
        taken: list[int] = []
        while len(taken) < k and self._heap:
            taken.append(find())
            delete()
        for reading_index in taken:
            self.insert(reading_index)
        return taken

    def top_k_min(self, k: int) -> list[int]:
        """Return up to k coldest reading indices, coldest first; the heap is unchanged."""
        return self._take(k, self.find_min, self.delete_min)

    def top_k_max(self, k: int) -> list[int]:
        """Return up to k hottest reading indices, hottest first; the heap is unchanged."""
        return self._take(k, self.find_max, self.delete_max)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)