"""
中介者模式示範：設備之間通過中介者共享剪貼簿內容。

與多播委託不同，中介者默認以強引用保存對象，
也可以按需改為弱引用。
"""
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple, TypeVar

from rich.console import Console

from behavioral.object_registry import ObjectRegistry

T = TypeVar("T")


class Mediator(ObjectRegistry[T]):
    """默認使用強引用的中介者。"""

    @property
    def non_nil_objects(self) -> List[T]:
        return self.live_objects


class Colleague(ABC):
    """可以接收中介者轉發消息的對象。"""

    @abstractmethod
    def receive(self, sender: Optional["Colleague"], message: str) -> None:
        pass


class AppleTechMediator(Mediator[Colleague]):
    """在所有已註冊設備之間廣播剪貼簿內容。"""

    def send_clipboard_contents(self, message: str, sender: Optional[Colleague]) -> None:
        # 發送者本身也會收到消息
        self.invoke_objects(lambda colleague: colleague.receive(sender, message))


class AppleTech(Colleague):
    """在建立時向中介者註冊自己的設備。"""

    def __init__(self, mediator: AppleTechMediator, name: str, strong: bool = True):
        self.mediator = mediator
        self.name = name
        self.received: List[Tuple[Optional[Colleague], str]] = []
        self.logger = logging.getLogger(__name__)
        mediator.add_object(self, strong=strong)

    def send_message(self, message: str) -> None:
        self.logger.info(f"{self.name} sent message {message}")
        self.mediator.send_clipboard_contents(message, self)

    def receive(self, sender: Optional[Colleague], message: str) -> None:
        self.received.append((sender, message))
        self.logger.info(f"{self.name} received: {message}")

    @property
    def last_message(self) -> Optional[str]:
        if not self.received:
            return None
        return self.received[-1][1]

    def __repr__(self) -> str:
        return f"AppleTech({self.name!r})"


def run_demo(console: Console) -> None:
    """iPad 發出的剪貼簿內容經中介者轉發給所有設備。"""
    mediator = AppleTechMediator()

    ipad = AppleTech(mediator, "iPad")
    iphone = AppleTech(mediator, "iPhone")
    macbook = AppleTech(mediator, "MacBook")

    console.print(f"{ipad.name} sent message Hey! i'm clipboard!\n")
    ipad.send_message("Hey! i'm clipboard!")
    for device in (ipad, iphone, macbook):
        console.print(f"{device.name} received: {device.last_message}")

    console.print()
    mediator.invoke_objects(lambda colleague: colleague.receive(None, "Initial clipboard state"))
    for device in mediator.non_nil_objects:
        console.print(f"{device.name} received: {device.last_message}")
