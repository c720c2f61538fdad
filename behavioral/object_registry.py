"""
同時支持強引用與弱引用的對象註冊表。

多播委託與中介者都建立在這個註冊表之上：
弱引用的對象被回收後，其條目會在下一次訪問時被清除。
"""
import logging
import weakref
from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ObjectWrapper(Generic[T]):
    """
    包裝單個對象的引用。

    強引用會讓對象一直存活；弱引用在對象被回收後 object 返回 None。
    """

    def __init__(self, obj: T, strong: bool = True):
        if obj is None:
            raise TypeError("cannot register None")
        self.strong = strong
        self._strong_reference: Optional[T] = None
        self._weak_reference: Optional[weakref.ref] = None
        if strong:
            self._strong_reference = obj
        else:
            try:
                self._weak_reference = weakref.ref(obj)
            except TypeError as e:
                raise TypeError(
                    f"{type(obj).__name__} object does not support weak references"
                ) from e

    @property
    def object(self) -> Optional[T]:
        if self._weak_reference is not None:
            return self._weak_reference()
        return self._strong_reference

    @property
    def is_alive(self) -> bool:
        return self.object is not None

    def refers_to(self, obj: Any) -> bool:
        return obj is not None and self.object is obj


class ObjectRegistry(Generic[T]):
    """
    按註冊順序保存對象的註冊表。

    同一個對象可以被註冊多次，每次註冊都會在調用時收到一次回調。
    """

    def __init__(self):
        self._wrappers: List[ObjectWrapper[T]] = []

    def add_object(self, obj: T, strong: bool = True) -> None:
        """
        註冊對象。

        Args:
            obj: 要註冊的對象
            strong: True 使用強引用，False 使用弱引用

        Raises:
            TypeError: obj 為 None，或以弱引用註冊不支持弱引用的對象
        """
        self._wrappers.append(ObjectWrapper(obj, strong=strong))

    def remove_object(self, obj: T) -> bool:
        """
        移除第一個指向 obj 的條目（按身份比較）。

        Returns:
            是否找到並移除了條目
        """
        for index, wrapper in enumerate(self._wrappers):
            if wrapper.refers_to(obj):
                del self._wrappers[index]
                return True
        return False

    def _prune(self) -> List[T]:
        objects: List[T] = []
        alive: List[ObjectWrapper[T]] = []
        for wrapper in self._wrappers:
            obj = wrapper.object
            if obj is None:
                continue
            objects.append(obj)
            alive.append(wrapper)

        removed = len(self._wrappers) - len(alive)
        if removed:
            logger.debug(f"Pruned {removed} stale registry entries")
        self._wrappers = alive
        return objects

    @property
    def live_objects(self) -> List[T]:
        """清除已失效的條目，並按註冊順序返回仍然存活的對象。"""
        return self._prune()

    def invoke_objects(self, closure: Callable[[T], Any]) -> None:
        """
        對每個存活的對象調用 closure。

        遍歷的是調用開始時的快照，closure 中增刪條目不影響本輪調用。
        closure 拋出的異常會直接傳給調用者。
        """
        for obj in self._prune():
            closure(obj)

    def __len__(self) -> int:
        return len(self._prune())

    def __contains__(self, obj: Any) -> bool:
        return any(wrapper.refers_to(obj) for wrapper in self._wrappers)
