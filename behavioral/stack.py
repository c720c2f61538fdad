"""
迭代器模式示範：可迭代的泛型堆疊。
"""
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

from rich.console import Console

T = TypeVar("T")


class Stack(Generic[T]):
    """
    後進先出的堆疊，列表尾端為棧頂。

    以 for 迴圈迭代時從棧頂走到棧底，不會修改堆疊本身；
    需要邊取邊刪時使用 drain()。
    """

    def __init__(self, elements: Optional[Iterable[T]] = None):
        self._elements: List[T] = list(elements) if elements is not None else []

    @property
    def is_empty(self) -> bool:
        return not self._elements

    def push(self, element: T) -> None:
        self._elements.append(element)

    def pop(self) -> Optional[T]:
        """
        彈出棧頂元素。

        Returns:
            棧頂元素，堆疊為空時返回 None
        """
        if not self._elements:
            return None
        return self._elements.pop()

    def last_element(self) -> Optional[T]:
        """查看棧頂元素但不彈出。"""
        if not self._elements:
            return None
        return self._elements[-1]

    def drain(self) -> Iterator[T]:
        """逐個彈出元素直到堆疊為空。"""
        while self._elements:
            yield self._elements.pop()

    def __iter__(self) -> Iterator[T]:
        # 迭代快照，迭代期間的 push/pop 不影響本次遍歷
        return iter(self._elements[::-1])

    def __len__(self) -> int:
        return len(self._elements)

    def __str__(self) -> str:
        body = "\n".join(str(element) for element in reversed(self._elements))
        return f"StackTop\n{body}\nStackBot\n"

    def __repr__(self) -> str:
        return f"Stack({self._elements!r})"


def run_demo(console: Console) -> None:
    """示範以標準迭代工具遍歷自訂堆疊。"""
    collection_one = Stack([5, 2, 3, 1, 5, 4])
    collection_two = Stack(["Swift", "Ruby", "C", "NASM"])
    collection_three = Stack([2.2, 2.5, 2.7])

    for element in collection_one:
        console.print(f"Element: {element}")

    for element in collection_two:
        console.print(element.upper())

    # drain 會清空堆疊
    for element in collection_three.drain():
        console.print(element)

    console.print(f"collection_three 已清空: {collection_three.is_empty}")
    console.print(str(collection_one), markup=False)
