"""
工廠模式示範：按城市建立區域對象。
"""
from dataclasses import dataclass
from enum import Enum
from typing import List

from rich.console import Console


class City(Enum):
    LOS_ANGELES = "LosAngeles"
    NEW_YORK = "NewYork"


@dataclass
class District:
    name: str
    code: int

    def __str__(self) -> str:
        return f"District name: {self.name}, district code: {self.code}"


@dataclass
class WestHollywood(District):
    name: str = "West Hollywood"
    code: int = 144


@dataclass
class BeverlyHills(District):
    name: str = "Beverly Hills"
    code: int = 15


@dataclass
class Manhattan(District):
    name: str = "Manhattan"
    code: int = 4


@dataclass
class Brooklyn(District):
    name: str = "Brooklyn"
    code: int = 5


class DistrictFactory:
    """根據城市返回該城市的區域列表。"""

    def districts(self, city: City) -> List[District]:
        """
        Args:
            city: 城市

        Returns:
            新建立的區域對象列表

        Raises:
            ValueError: 不支持的城市
        """
        if city is City.LOS_ANGELES:
            return [WestHollywood(), BeverlyHills()]
        if city is City.NEW_YORK:
            return [Manhattan(), Brooklyn()]
        raise ValueError(f"Unsupported city: {city}")


def run_demo(console: Console) -> None:
    factory = DistrictFactory()
    for city in (City.NEW_YORK, City.LOS_ANGELES):
        for district in factory.districts(city):
            console.print(str(district))
