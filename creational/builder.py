"""
建造者模式示範：一步步配置汽車，再由 Director 組裝預設型號。
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from rich.console import Console

logger = logging.getLogger(__name__)


class Material(Enum):
    IRON = "iron"
    PLATINUM = "platinum"
    GOLD = "gold"
    CHROME = "chrome"


class Complectation(Enum):
    ECONOM = "econom"
    STANDART = "standart"
    BUSINESS = "business"
    PRO = "pro"


class AdditionalComponent(Enum):
    AUDIO_SYSTEM = "audioSystem"
    SEAT_HEATING = "seatHeating"


@dataclass(frozen=True)
class Car:
    material: Material
    doors_amount: int
    complectation: Complectation
    additional_components: Tuple[AdditionalComponent, ...] = ()
    car_length: float = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "car_length", (self.doors_amount // 2) * 0.45)

    def __str__(self) -> str:
        return (
            f"The car made with {self.material.value}, it has {self.doors_amount} doors, "
            f"it comes with {self.complectation.value} complectation, "
            f"it has {len(self.additional_components)} additionalComponents "
            f"and it has {self.car_length} length in meters.\n"
        )


class CarBuilder:
    """逐步設置汽車參數的建造者。"""

    MIN_DOORS = 2

    def __init__(self):
        self.material = Material.IRON
        self.doors_amount = self.MIN_DOORS
        self.complectation = Complectation.STANDART
        self.additional_components: List[AdditionalComponent] = []

    def set_material(self, material: Material) -> "CarBuilder":
        self.material = material
        return self

    def increase_doors_amount_on_two(self, times: int = 1) -> "CarBuilder":
        self.doors_amount += 2 * max(times, 0)
        return self

    def decrease_doors_amount_on_two(self) -> bool:
        """
        減少兩扇門。

        Returns:
            門數已為最小值時返回 False
        """
        if self.doors_amount < self.MIN_DOORS + 2:
            logger.warning("Doors amount cannot be less than two")
            return False
        self.doors_amount -= 2
        return True

    def set_complectation(self, complectation: Complectation) -> "CarBuilder":
        self.complectation = complectation
        return self

    def add_component(self, component: AdditionalComponent) -> "CarBuilder":
        if component not in self.additional_components:
            self.additional_components.append(component)
        return self

    def remove_component(self, component: AdditionalComponent) -> "CarBuilder":
        if component in self.additional_components:
            self.additional_components.remove(component)
        return self

    def remove_all_components(self) -> "CarBuilder":
        self.additional_components.clear()
        return self

    def build_product(self) -> Car:
        return Car(
            material=self.material,
            doors_amount=self.doors_amount,
            complectation=self.complectation,
            additional_components=tuple(self.additional_components),
        )


class Director:
    """按固定配方使用建造者。"""

    def create_econom_class_car(self) -> Car:
        return CarBuilder().set_complectation(Complectation.ECONOM).build_product()

    def create_standart_class_car(self) -> Car:
        builder = CarBuilder()
        builder.increase_doors_amount_on_two()
        builder.add_component(AdditionalComponent.AUDIO_SYSTEM)
        return builder.build_product()

    def create_ultra_super_pro_class_car(self) -> Car:
        builder = CarBuilder()
        builder.increase_doors_amount_on_two(times=10)
        builder.set_material(Material.PLATINUM)
        builder.set_complectation(Complectation.PRO)
        builder.add_component(AdditionalComponent.AUDIO_SYSTEM)
        builder.add_component(AdditionalComponent.SEAT_HEATING)
        return builder.build_product()


class Human:
    def __init__(self, car: Optional[Car] = None):
        self.car = car


def run_demo(console: Console) -> None:
    director = Director()
    for create in (
        director.create_econom_class_car,
        director.create_standart_class_car,
        director.create_ultra_super_pro_class_car,
    ):
        human = Human(car=create())
        console.print(str(human.car))

    human = Human()
    if human.car is None:
        console.print("Human doesn't have a car")
