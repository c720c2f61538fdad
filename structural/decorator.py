"""
裝飾器模式示範：在不修改價目表的情況下疊加貨幣換算。

與適配器不同，裝飾器和被裝飾對象實現同一個介面，因此可以層層疊加。
"""
from abc import ABC, abstractmethod

from rich.console import Console

from structural.adapter import Service


class PriceList(ABC):
    @abstractmethod
    def pay_for_service(self, service: Service) -> float:
        pass


class EuroPriceList(PriceList):
    PRICES = {Service.HAIRCUT: 10.0, Service.MASSAGE: 16.0}

    def pay_for_service(self, service: Service) -> float:
        return self.PRICES[service]


class PriceDecorator(PriceList):
    """包裝另一個價目表的裝飾器。"""

    def __init__(self, component: PriceList):
        self.component = component

    def pay_for_service(self, service: Service) -> float:
        return self.component.pay_for_service(service)


class CurrencyDecorator(PriceDecorator):
    rate = 1.0

    def pay_for_service(self, service: Service) -> float:
        return round(self.rate * super().pay_for_service(service), 2)


class DollarDecorator(CurrencyDecorator):
    rate = 1.10


class RubleDecorator(CurrencyDecorator):
    rate = 65


class DiscountDecorator(PriceDecorator):
    def __init__(self, component: PriceList, percent: float):
        super().__init__(component)
        if not 0 <= percent <= 100:
            raise ValueError(f"discount percent must be within 0..100, got {percent}")
        self.percent = percent

    def pay_for_service(self, service: Service) -> float:
        return round(super().pay_for_service(service) * (100 - self.percent) / 100, 2)


def run_demo(console: Console) -> None:
    euros = EuroPriceList()
    console.print(f"Person paid {DollarDecorator(euros).pay_for_service(Service.HAIRCUT)} Dollars for the haircut")
    console.print(f"Person paid {RubleDecorator(euros).pay_for_service(Service.MASSAGE)} Rubles for the massage")

    discounted = DiscountDecorator(DollarDecorator(euros), percent=20)
    console.print(f"Person paid {discounted.pay_for_service(Service.HAIRCUT)} Dollars for the haircut with 20% discount")
    console.print(f"Person paid {euros.pay_for_service(Service.HAIRCUT)} Euros for haircut")
