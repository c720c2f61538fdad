"""
策略模式示範：兩種可互換的原地快速排序。

Hoare 與 Lomuto 分區方案實現同一個 QuicksortStrategy 介面，
QuicksortContext 在運行時選擇使用哪一個。
"""
import logging
import random
from abc import ABC, abstractmethod
from typing import Any, Dict, List, MutableSequence, Optional, Tuple, Type

from rich.console import Console

logger = logging.getLogger(__name__)

Range = Tuple[int, int]


class QuicksortStrategy(ABC):
    """快速排序策略的共同介面。"""

    name = ""

    @abstractmethod
    def partition(self, array: MutableSequence[Any], lowest_index: int, highest_index: int) -> int:
        """
        對 array[lowest_index..highest_index] 分區。

        Args:
            array: 要排序的序列（原地修改）
            lowest_index: 區間起點（含）
            highest_index: 區間終點（含）

        Returns:
            分區點的索引
        """

    @abstractmethod
    def subranges(self, lowest_index: int, highest_index: int, pivot_point: int) -> Tuple[Range, Range]:
        """返回分區後需要繼續排序的左右兩個區間。"""

    def quicksorted(self, array: MutableSequence[Any], lowest_index: int, highest_index: int) -> None:
        """
        原地排序 array[lowest_index..highest_index]，兩端皆包含。

        lowest_index >= highest_index 時不做任何事（例如空列表時傳入 0 和 -1）。

        Raises:
            IndexError: 區間超出序列範圍
        """
        if lowest_index >= highest_index:
            return
        if lowest_index < 0 or highest_index >= len(array):
            raise IndexError(
                f"sort bounds [{lowest_index}, {highest_index}] out of range for length {len(array)}"
            )

        # 只遞歸較小的一半，較大的一半在迴圈中處理，遞歸深度為 O(log n)
        while lowest_index < highest_index:
            pivot_point = self.partition(array, lowest_index, highest_index)
            left, right = self.subranges(lowest_index, highest_index, pivot_point)
            if left[1] - left[0] < right[1] - right[0]:
                self.quicksorted(array, *left)
                lowest_index, highest_index = right
            else:
                self.quicksorted(array, *right)
                lowest_index, highest_index = left

    def sort(self, array: MutableSequence[Any]) -> MutableSequence[Any]:
        """原地排序整個序列並返回它。"""
        self.quicksorted(array, 0, len(array) - 1)
        return array


class HoareQuicksortStrategy(QuicksortStrategy):
    """以區間第一個元素為樞紐的 Hoare 分區。"""

    name = "hoare"

    def partition(self, array: MutableSequence[Any], lowest_index: int, highest_index: int) -> int:
        pivot = array[lowest_index]
        start_index = lowest_index - 1
        end_index = highest_index + 1

        while True:
            end_index -= 1
            while array[end_index] > pivot:
                end_index -= 1
            start_index += 1
            while array[start_index] < pivot:
                start_index += 1

            if start_index < end_index:
                array[start_index], array[end_index] = array[end_index], array[start_index]
            else:
                return end_index

    def subranges(self, lowest_index: int, highest_index: int, pivot_point: int) -> Tuple[Range, Range]:
        # 樞紐不一定在最終位置，左區間包含 pivot_point
        return (lowest_index, pivot_point), (pivot_point + 1, highest_index)


class LomutoQuicksortStrategy(QuicksortStrategy):
    """以區間最後一個元素為樞紐的 Lomuto 分區。"""

    name = "lomuto"

    def partition(self, array: MutableSequence[Any], lowest_index: int, highest_index: int) -> int:
        pivot = array[highest_index]
        start_index = lowest_index

        for index in range(lowest_index, highest_index):
            if array[index] <= pivot:
                array[start_index], array[index] = array[index], array[start_index]
                start_index += 1

        array[start_index], array[highest_index] = array[highest_index], array[start_index]
        return start_index

    def subranges(self, lowest_index: int, highest_index: int, pivot_point: int) -> Tuple[Range, Range]:
        return (lowest_index, pivot_point - 1), (pivot_point + 1, highest_index)


QUICKSORT_STRATEGIES: Dict[str, Type[QuicksortStrategy]] = {
    HoareQuicksortStrategy.name: HoareQuicksortStrategy,
    LomutoQuicksortStrategy.name: LomutoQuicksortStrategy,
}


def get_quicksort_strategy(name: str) -> QuicksortStrategy:
    """
    按名稱建立排序策略。

    Args:
        name: 策略名稱（'hoare' 或 'lomuto'，不分大小寫）

    Returns:
        策略實例

    Raises:
        ValueError: 未知的策略名稱
    """
    strategy_class = QUICKSORT_STRATEGIES.get(name.strip().lower())
    if strategy_class is None:
        available = ", ".join(sorted(QUICKSORT_STRATEGIES))
        raise ValueError(f"Unknown quicksort strategy: {name} (available: {available})")
    return strategy_class()


def random_sample(size: int = 4, max_value: int = 10, rng: Optional[random.Random] = None) -> List[int]:
    """產生 size 個 0..max_value 之間的隨機整數。"""
    rng = rng or random.Random()
    return [rng.randint(0, max_value) for _ in range(size)]


class QuicksortContext:
    """使用排序策略的對象，策略可在運行時替換。"""

    def __init__(self, strategy: Optional[QuicksortStrategy] = None):
        self.strategy = strategy or HoareQuicksortStrategy()

    def sort(self, array: MutableSequence[Any]) -> MutableSequence[Any]:
        logger.debug(f"使用 {self.strategy.name} 策略排序 {len(array)} 個元素")
        return self.strategy.sort(array)

    def quicksorted_with(self, strategy: QuicksortStrategy, array: MutableSequence[Any]) -> MutableSequence[Any]:
        """替換策略後排序。"""
        self.strategy = strategy
        return self.sort(array)


def run_demo(console: Console, rng: Optional[random.Random] = None) -> None:
    """分別以 Hoare 和 Lomuto 策略排序同一組隨機數。"""
    rng = rng or random.Random()
    context = QuicksortContext()
    sample = random_sample(4, 10, rng)
    console.print(f"原始數組: {sample}")

    for strategy in (HoareQuicksortStrategy(), LomutoQuicksortStrategy()):
        array = list(sample)
        context.quicksorted_with(strategy, array)
        console.print(f"[bold]{strategy.name}[/] Quicksorted array: {array}")
