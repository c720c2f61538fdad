"""
組合模式示範：部門可以包含員工，也可以包含其他部門。
"""
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

from rich.console import Console


class Component(ABC):
    name: str

    @abstractmethod
    def description(self) -> List[str]:
        pass


class Worker(Component):
    def __init__(self, name: str):
        self.name = name

    def description(self) -> List[str]:
        return [f"Worker with name {self.name}"]


class Department(Component):
    def __init__(self, name: str, components: Optional[Iterable[Component]] = None):
        self.name = name
        self.components: List[Component] = []
        for component in components or []:
            self.add_component(component)

    def add_component(self, component: Component) -> bool:
        """添加組件，已有同名組件時返回 False。"""
        if any(existing.name == component.name for existing in self.components):
            return False
        self.components.append(component)
        return True

    def remove_component(self, component: Component) -> bool:
        for index, existing in enumerate(self.components):
            if existing.name == component.name:
                del self.components[index]
                return True
        return False

    def workers(self) -> Iterator[Worker]:
        """遞歸遍歷所有子部門中的員工。"""
        for component in self.components:
            if isinstance(component, Department):
                yield from component.workers()
            elif isinstance(component, Worker):
                yield component

    def description(self) -> List[str]:
        return [f"Department name: {self.name}"] + [component.name for component in self.components]


def run_demo(console: Console) -> None:
    john = Worker("John Worker")
    mary = Worker("Mary Worker")

    security = Department("Security Department")
    security.add_component(john)
    console.print("\n".join(security.description()))

    security_with_gun = Department("Gun Security Department")
    security_with_gun.add_component(mary)
    console.print("\n" + "\n".join(security_with_gun.description()))

    security.add_component(security_with_gun)
    console.print("\n" + "\n".join(security.description()))
    console.print(f"\n全部員工: {[worker.name for worker in security.workers()]}")
