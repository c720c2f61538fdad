"""
多播委託模式示範：一對多的委託關係。

委託以弱引用保存，委託對象被回收後會自動從列表中消失。
"""
import logging
from typing import Any, Callable, List, Optional, TypeVar

from rich.console import Console

from behavioral.object_registry import ObjectRegistry

T = TypeVar("T")


class MulticastDelegate(ObjectRegistry[T]):
    """只以弱引用保存委託的註冊表。"""

    def add_delegate(self, delegate: T) -> None:
        self.add_object(delegate, strong=False)

    def remove_delegate(self, delegate: T) -> bool:
        return self.remove_object(delegate)

    def invoke_delegates(self, closure: Callable[[T], Any]) -> None:
        self.invoke_objects(closure)

    @property
    def delegates(self) -> List[T]:
        return self.live_objects

    def __iadd__(self, delegate: T) -> "MulticastDelegate[T]":
        self.add_delegate(delegate)
        return self

    def __isub__(self, delegate: T) -> "MulticastDelegate[T]":
        self.remove_delegate(delegate)
        return self


class ClipboardDevice:
    """帶有剪貼簿的設備。"""

    device_name = "device"

    def __init__(self, clipboard: Optional[str] = None):
        self.clipboard = clipboard
        self.logger = logging.getLogger(__name__)

    def copy_to_clipboard(self, text: str) -> str:
        self.clipboard = text
        message = f"Now {self.device_name} clipboard contains '{text}'"
        self.logger.debug(message)
        return message


class Macbook(ClipboardDevice):
    device_name = "macbook"


class Iphone(ClipboardDevice):
    device_name = "iPhone"


class Ipad(ClipboardDevice):
    device_name = "iPad"


def run_demo(console: Console) -> None:
    """把一條通知同步到所有設備的剪貼簿。"""
    multicast_delegate: MulticastDelegate[ClipboardDevice] = MulticastDelegate()

    macbook = Macbook()
    iphone = Iphone()
    ipad = Ipad()

    multicast_delegate += macbook
    multicast_delegate += iphone
    multicast_delegate += ipad

    multicast_delegate.invoke_delegates(
        lambda device: console.print(device.copy_to_clipboard("I got a notification!"))
    )
    console.print()

    multicast_delegate.invoke_delegates(
        lambda device: console.print(device.clipboard) if device.clipboard else None
    )
    console.print()

    multicast_delegate -= iphone
    multicast_delegate.invoke_delegates(
        lambda device: console.print(device.copy_to_clipboard("iPhone has gone :("))
    )
    console.print(f"\n{iphone.clipboard}")

    # 弱引用：設備被釋放後不再收到回調
    del ipad
    console.print(f"剩餘委託數量: {len(multicast_delegate)}")
