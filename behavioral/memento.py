"""
備忘錄模式示範：文字編輯器的保存與撤銷。

Originator 是要保存的文字狀態，Caretaker 把它序列化為 JSON
（即備忘錄本身）存入鍵值存儲，TextHistory 記錄保存過的狀態順序。
"""
import json
import logging
from dataclasses import asdict, dataclass
from typing import List, Optional

from rich.console import Console

from utils.key_value_store import InMemoryKeyValueStore, KeyValueStore


class MementoDecodeError(Exception):
    """備忘錄不存在或無法解碼。"""


@dataclass
class TextOriginator:
    text: str


class TextCaretaker:
    """在鍵值存儲中保存和讀取文字狀態。"""

    def __init__(self, store: Optional[KeyValueStore] = None):
        self.store = store if store is not None else InMemoryKeyValueStore()
        self.logger = logging.getLogger(__name__)

    def save(self, text_state: TextOriginator, title: str) -> None:
        """
        將文字狀態保存為備忘錄。

        Args:
            text_state: 要保存的狀態
            title: 備忘錄的鍵
        """
        memento = json.dumps(asdict(text_state), ensure_ascii=False).encode("utf-8")
        self.store.set(title, memento)
        self.logger.debug(f"已保存備忘錄: {title!r}")

    def load(self, title: str) -> TextOriginator:
        """
        讀取備忘錄並還原文字狀態。

        Args:
            title: 備忘錄的鍵

        Returns:
            還原出的 TextOriginator

        Raises:
            MementoDecodeError: 鍵不存在或內容無法解碼
        """
        memento = self.store.get(title)
        if memento is None:
            raise MementoDecodeError(f"No memento saved under {title!r}")
        try:
            data = json.loads(memento.decode("utf-8"))
            return TextOriginator(**data)
        except (UnicodeDecodeError, ValueError, TypeError) as e:
            raise MementoDecodeError(f"Cannot decode memento {title!r}: {e}") from e

    def delete(self, title: str) -> bool:
        deleted = self.store.delete(title)
        if deleted:
            self.logger.debug(f"已刪除備忘錄: {title!r}")
        return deleted


class TextHistory:
    """按保存順序記錄文字狀態，支持撤銷。"""

    def __init__(self, caretaker: Optional[TextCaretaker] = None, initial_text: Optional[str] = "Initial State"):
        self.caretaker = caretaker or TextCaretaker()
        self.states: List[str] = []
        if initial_text is not None:
            self.save(initial_text)

    def save(self, text: str) -> bool:
        """
        保存文字，與最近一次保存的內容相同時忽略。

        Returns:
            是否真的保存了
        """
        if self.states and self.states[-1] == text:
            return False
        self.caretaker.save(TextOriginator(text=text), title=text)
        self.states.append(text)
        return True

    def undo(self, current_text: str) -> Optional[str]:
        """
        撤銷到上一個保存的狀態。

        當前文字等於最近一次保存的內容時，先丟棄該狀態，
        再彈出並還原之前的狀態。讀取成功後才修改歷史，
        被彈出的備忘錄隨即從存儲中刪除。

        Returns:
            還原出的文字，沒有可撤銷的狀態時返回 None

        Raises:
            MementoDecodeError: 備忘錄不存在或無法解碼，此時歷史保持不變
        """
        drop_current = bool(self.states) and self.states[-1] == current_text
        remaining = self.states[:-1] if drop_current else self.states
        if not remaining:
            if drop_current:
                self._discard(self.states.pop())
            return None

        restored = self.caretaker.load(remaining[-1])
        if drop_current:
            self._discard(self.states.pop())
        self._discard(self.states.pop())
        return restored.text

    def _discard(self, title: str) -> None:
        # 相同文字可能在歷史中出現多次，共用同一個鍵
        if title not in self.states:
            self.caretaker.delete(title)


def run_demo(console: Console) -> None:
    history = TextHistory()
    text = history.states[-1]

    for edit in ("Hello", "Hello, world", "Hello, world!"):
        text = edit
        history.save(text)
        console.print(f"Saved states: {history.states}")

    while True:
        restored = history.undo(text)
        if restored is None:
            console.print("沒有可撤銷的狀態")
            break
        text = restored
        console.print(f"Undo -> {text!r}, saved states: {history.states}")
