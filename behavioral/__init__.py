"""
行為型設計模式。
迭代器、策略、多播委託、中介者、觀察者、備忘錄、命令、責任鏈與狀態模式的示範。
"""

from behavioral.stack import Stack
from behavioral.quicksort import (
    QuicksortStrategy,
    HoareQuicksortStrategy,
    LomutoQuicksortStrategy,
    QuicksortContext,
    get_quicksort_strategy,
)
from behavioral.object_registry import ObjectRegistry, ObjectWrapper
from behavioral.multicast_delegate import MulticastDelegate
from behavioral.mediator import Mediator
