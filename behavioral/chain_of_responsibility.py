"""
責任鏈模式示範：簽證申請依次交給各地部門處理。
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from rich.console import Console

logger = logging.getLogger(__name__)


class Direction(Enum):
    LA = "LA"
    NYC = "NYC"
    VANCOUVER = "VANCOUVER"
    DUBAI = "DUBAI"


@dataclass
class Request:
    direction: Direction
    name: str
    age: int
    id: int


class Handler:
    """責任鏈中的一個節點，無法處理的請求交給下一個節點。"""

    def __init__(self):
        self.next_handler: Optional["Handler"] = None

    def set_next(self, handler: "Handler") -> "Handler":
        """
        設置下一個處理者。

        Returns:
            傳入的處理者，以便鏈式調用
        """
        self.next_handler = handler
        return handler

    def handle_request(self, request: Request) -> Optional[bool]:
        """
        處理請求。

        Returns:
            True 表示已批准，None 表示整條鏈都無法處理
        """
        if self.next_handler is None:
            return None
        return self.next_handler.handle_request(request)


class DepartmentHandler(Handler):
    """只批准特定方向請求的部門。"""

    direction: Direction

    def handle_request(self, request: Request) -> Optional[bool]:
        if request.direction != self.direction:
            return super().handle_request(request)
        logger.info(f"request number {request.id} was approved in {self.direction.value} department")
        return True


class LAHandler(DepartmentHandler):
    direction = Direction.LA


class NYCHandler(DepartmentHandler):
    direction = Direction.NYC


class VancouverHandler(DepartmentHandler):
    direction = Direction.VANCOUVER


class Client:
    def __init__(self, handler: Handler, requests: Optional[List[Request]] = None):
        self.handler = handler
        self.requests: List[Request] = list(requests or [])

    def add_request(self, request: Request) -> None:
        self.requests.append(request)

    def approve_requests(self) -> List[Tuple[Request, bool]]:
        """把所有請求交給責任鏈，返回每個請求是否被批准。"""
        results = []
        for request in self.requests:
            approved = self.handler.handle_request(request) is not None
            if not approved:
                logger.info(f"Request {request.id} declined")
            results.append((request, approved))
        return results


def run_demo(console: Console) -> None:
    requests = [
        Request(Direction.NYC, "Anna", 15, 0),
        Request(Direction.LA, "John", 26, 1),
        Request(Direction.VANCOUVER, "Anthony", 53, 2),
        Request(Direction.DUBAI, "Khalib", 46, 3),
    ]

    la_handler = LAHandler()
    la_handler.set_next(NYCHandler()).set_next(VancouverHandler())

    client = Client(la_handler, requests)
    for request, approved in client.approve_requests():
        console.print(f"Checking request with id {request.id}")
        if approved:
            console.print("[green]Request approved.[/]\n")
        else:
            console.print("Cannot approve the request.")
            console.print("[red]Request declined.[/]\n")
