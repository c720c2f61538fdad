"""
外觀模式示範：以一個簡單介面完成購票流程。
"""
import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List, Optional

from rich.console import Console

logger = logging.getLogger(__name__)


class Direction(IntEnum):
    LA = 0
    NYC = 1


@dataclass(frozen=True)
class Customer:
    name: str
    id: int


@dataclass
class Ticket:
    customer: Customer
    seat: int

    def __str__(self) -> str:
        return f"seat number {self.seat} belongs to customer {self.customer.name} with id {self.customer.id}"


class Airplane:
    def __init__(self, seats: int, id: int, cost: int, tickets: Optional[Iterable[Ticket]] = None):
        self.seats = seats
        self.id = id
        self.cost = cost
        tickets = list(tickets or [])
        # 票數超過座位數時視為無效數據
        self.tickets: List[Ticket] = tickets if len(tickets) <= seats else []

    @property
    def is_full(self) -> bool:
        return len(self.tickets) >= self.seats


class AirplaneStorage:
    def __init__(self, airplanes: Optional[Iterable[Airplane]] = None):
        self.airplanes: List[Airplane] = list(airplanes or [])

    def find(self, airplane_id: int) -> Optional[Airplane]:
        for airplane in self.airplanes:
            if airplane.id == airplane_id:
                return airplane
        return None


class TicketFacade:
    """隱藏查找航班、分配座位與開票細節。"""

    def __init__(self, storage: AirplaneStorage):
        self.storage = storage

    def buy_ticket(self, direction: Direction, customer: Customer) -> Optional[Ticket]:
        """
        為顧客購買指定方向的機票。

        Returns:
            開出的機票；沒有該航班或座位已滿時返回 None
        """
        airplane = self.storage.find(int(direction))
        if airplane is None:
            logger.warning(f"No airplane for direction {direction.name}")
            return None
        if airplane.is_full:
            logger.info("All seats were purchased")
            return None

        ticket = Ticket(customer=customer, seat=len(airplane.tickets))
        airplane.tickets.append(ticket)
        return ticket


def run_demo(console: Console) -> None:
    storage = AirplaneStorage([
        Airplane(seats=43, id=Direction.LA, cost=150),
        Airplane(seats=56, id=Direction.NYC, cost=340),
    ])
    facade = TicketFacade(storage)

    for customer in (Customer("Alex", 0), Customer("Kate", 1)):
        ticket = facade.buy_ticket(Direction.LA, customer)
        if ticket is None:
            console.print("All seats were purchased")
        else:
            console.print(f"Ticket was successfully bought! \n{ticket}\n")
