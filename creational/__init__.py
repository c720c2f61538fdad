"""
創建型設計模式：建造者、工廠、原型與單例。
"""

from creational.builder import Car, CarBuilder, Director
from creational.factory import DistrictFactory
from creational.prototype import Recipe
from creational.singleton import Settings
