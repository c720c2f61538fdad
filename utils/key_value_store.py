"""
用於保存備忘錄的鍵值存儲介面。
只提供記憶體實現，不寫入磁碟。
"""
import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional


class KeyValueStore(ABC):
    """以字串為鍵、位元組為值的簡單存儲。"""

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """保存值，若鍵已存在則覆蓋。"""

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """讀取值，鍵不存在時返回 None。"""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """刪除鍵，返回是否真的刪除了。"""

    @abstractmethod
    def keys(self) -> List[str]:
        """返回所有鍵。"""

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None


class InMemoryKeyValueStore(KeyValueStore):
    """以字典實現的鍵值存儲。"""

    def __init__(self):
        self._data: Dict[str, bytes] = {}

    def set(self, key: str, value: bytes) -> None:
        if not isinstance(value, (bytes, bytearray)):
            raise TypeError(f"value must be bytes, got {type(value).__name__}")
        logging.debug(f"保存鍵: {key} ({len(value)} bytes)")
        self._data[key] = bytes(value)

    def get(self, key: str) -> Optional[bytes]:
        return self._data.get(key)

    def delete(self, key: str) -> bool:
        if key not in self._data:
            return False
        del self._data[key]
        return True

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def __len__(self) -> int:
        return len(self._data)
