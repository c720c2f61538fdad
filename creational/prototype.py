"""
原型模式示範：複製現有食譜再修改。
"""
import copy
from typing import Iterable, List

from rich.console import Console


class Recipe:
    def __init__(self, name: str, ingredients: Iterable[str]):
        self.name = name
        self._ingredients: List[str] = []
        for ingredient in ingredients:
            self.add_ingredient(ingredient)

    @property
    def ingredients(self) -> List[str]:
        return list(self._ingredients)

    def add_ingredient(self, ingredient: str) -> bool:
        if ingredient in self._ingredients:
            return False
        self._ingredients.append(ingredient)
        return True

    def remove_ingredient(self, ingredient: str) -> bool:
        if ingredient not in self._ingredients:
            return False
        self._ingredients.remove(ingredient)
        return True

    def clone(self) -> "Recipe":
        """返回獨立的副本，修改副本不影響原型。"""
        return Recipe(self.name, self._ingredients)

    def __copy__(self) -> "Recipe":
        return self.clone()

    def __str__(self) -> str:
        return f"Ingredients in {self.name} recipe: {self._ingredients}"


def run_demo(console: Console) -> None:
    eggs_and_bacon = Recipe("Eggs with bacon", ["Eggs", "Bacon"])
    console.print(str(eggs_and_bacon), markup=False)

    eggs_and_bacon_in_avocado = copy.copy(eggs_and_bacon)
    console.print(str(eggs_and_bacon_in_avocado), markup=False)

    eggs_and_bacon_in_avocado.name = "Eggs with bacon in avocado"
    eggs_and_bacon_in_avocado.add_ingredient("Avocado")
    console.print(str(eggs_and_bacon_in_avocado), markup=False)
    console.print(str(eggs_and_bacon), markup=False)
