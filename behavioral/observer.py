"""
觀察者模式示範。

Publisher/Subscriber 是傳統的手寫實現；
ObservableValue 是「發布值 + sink 訂閱」風格的實現，訂閱可以隨時取消。
"""
import logging
from typing import Any, Callable, Generic, List, Optional, TypeVar

from rich.console import Console

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Subscriber:
    """接收年齡變化通知的訂閱者，以名字判斷相等。"""

    def __init__(self, name: str):
        self.name = name
        self.notifications: List[int] = []

    def age_changed(self, age: int) -> str:
        self.notifications.append(age)
        message = f"(Observer) {self.name}'s mother's age is {age} now"
        logger.info(message)
        return message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subscriber):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Subscriber({self.name!r})"


class Publisher:
    """年齡一旦變化就通知所有訂閱者的發布者。"""

    def __init__(self, age: int):
        self._age = age
        self.subscribers: List[Subscriber] = []

    @property
    def age(self) -> int:
        return self._age

    @age.setter
    def age(self, value: int) -> None:
        self._age = value
        self.notify_all_subscribers()

    def age_increased(self, years: int = 1) -> None:
        self.age += years

    def add_subscriber(self, subscriber: Subscriber) -> bool:
        """
        添加訂閱者，已有同名訂閱者時忽略。

        Returns:
            是否添加成功
        """
        if subscriber in self.subscribers:
            return False
        self.subscribers.append(subscriber)
        return True

    def remove_subscriber(self, subscriber: Subscriber) -> bool:
        if subscriber not in self.subscribers:
            return False
        self.subscribers.remove(subscriber)
        return True

    def notify_all_subscribers(self, subscribers: Optional[List[Subscriber]] = None) -> None:
        for subscriber in list(subscribers if subscribers is not None else self.subscribers):
            self.notify_concrete_subscriber(subscriber)

    def notify_concrete_subscriber(self, subscriber: Subscriber) -> None:
        subscriber.age_changed(self._age)


class Subscription:
    """sink() 返回的訂閱句柄。"""

    def __init__(self, owner: "ObservableValue[Any]", callback: Callable[[Any], None]):
        self._owner = owner
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        """取消訂閱，重複調用無副作用。"""
        if self.cancelled:
            return
        self.cancelled = True
        self._owner._remove(self)


class ObservableValue(Generic[T]):
    """
    可被訂閱的值。

    sink() 會立即以當前值調用回調一次，之後每次賦值再調用。
    """

    def __init__(self, value: T):
        self._value = value
        self._subscriptions: List[Subscription] = []

    @property
    def value(self) -> T:
        return self._value

    @value.setter
    def value(self, new_value: T) -> None:
        self._value = new_value
        for subscription in list(self._subscriptions):
            if not subscription.cancelled:
                subscription.callback(new_value)

    def sink(self, callback: Callable[[T], None]) -> Subscription:
        subscription = Subscription(self, callback)
        self._subscriptions.append(subscription)
        callback(self._value)
        return subscription

    def _remove(self, subscription: Subscription) -> None:
        if subscription in self._subscriptions:
            self._subscriptions.remove(subscription)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)


class Mother:
    def __init__(self, age: int):
        self.age = ObservableValue(age)


def run_demo(console: Console) -> None:
    """父親訂閱母親的年齡變化。"""
    mother = Publisher(age=25)
    father = Subscriber(name="Anthony")
    mother.add_subscriber(father)

    for _ in range(2):
        mother.age_increased()
        console.print(f"Mom's age is {mother.age}")
        console.print(f"(Observer) {father.name}'s mother's age is {father.notifications[-1]} now")

    console.print("\n[bold]Published value based implementation[/]\n")
    published_mother = Mother(age=55)
    father_subscription = published_mother.age.sink(
        lambda age: console.print(f"(Published) mother's age is {age} now")
    )
    published_mother.age.value += 1

    # 取消後不再收到更新
    father_subscription.cancel()
    published_mother.age.value += 1
    console.print(f"mother's age without subscribers: {published_mother.age.value}")
