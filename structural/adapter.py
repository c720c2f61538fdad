"""
適配器模式示範：讓只支持歐元的舊收費系統以其他貨幣報價。
"""
from abc import ABC, abstractmethod
from enum import Enum

from rich.console import Console


class Service(Enum):
    HAIRCUT = "haircut"
    MASSAGE = "massage"


class Currency(Enum):
    DOLLARS = "Dollars"
    RUBLES = "Rubles"


class LegacyPaymentSystem:
    """舊系統，價格以歐元計。"""

    PRICES = {Service.HAIRCUT: 10.0, Service.MASSAGE: 16.0}

    def pay_for_service(self, service: Service) -> float:
        return self.PRICES[service]


class PaymentAdapter(ABC):
    def __init__(self, adaptee: LegacyPaymentSystem):
        self.adaptee = adaptee

    @abstractmethod
    def pay_for_service(self, service: Service) -> float:
        pass


class DollarAdapter(PaymentAdapter):
    RATE = 1.10

    def pay_for_service(self, service: Service) -> float:
        return round(self.RATE * self.adaptee.pay_for_service(service), 2)


class RubleAdapter(PaymentAdapter):
    RATE = 65

    def pay_for_service(self, service: Service) -> float:
        return round(self.RATE * self.adaptee.pay_for_service(service), 2)


ADAPTERS = {
    Currency.DOLLARS: DollarAdapter,
    Currency.RUBLES: RubleAdapter,
}


class Person:
    """按偏好貨幣選擇適配器的顧客。"""

    def __init__(self, preferred_currency: Currency):
        self.preferred_currency = preferred_currency
        self._adapter = ADAPTERS[preferred_currency](LegacyPaymentSystem())

    def use_service(self, service: Service) -> str:
        amount = self._adapter.pay_for_service(service)
        return f"Person paid {amount} {self.preferred_currency.value} for the {service.value}"


def run_demo(console: Console) -> None:
    console.print(Person(Currency.DOLLARS).use_service(Service.HAIRCUT))
    console.print(Person(Currency.RUBLES).use_service(Service.MASSAGE))

    legacy_payment = LegacyPaymentSystem().pay_for_service(Service.HAIRCUT)
    console.print(f"Person paid {legacy_payment} Euros for haircut")
