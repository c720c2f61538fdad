"""
設計模式目錄：保存每個模式的說明與示範頁面，並提供 rich 格式的顯示。
"""
import inspect
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from behavioral import chain_of_responsibility, command, mediator, memento, multicast_delegate
from behavioral import observer, quicksort, stack, state
from creational import builder, factory, prototype, singleton
from structural import adapter, composite, decorator, facade, flyweight

console = Console()

CATEGORIES: Dict[str, str] = {
    "creational": "創建型模式",
    "structural": "結構型模式",
    "behavioral": "行為型模式",
}


class PatternInfo:
    """設計模式的相關資訊與示範頁面。"""

    def __init__(self,
                 key: str,
                 name: str,
                 category: str,
                 description: str,
                 when_to_use: List[str],
                 demo: Callable[..., None],
                 demo_options: Tuple[str, ...] = (),
                 related: Optional[Dict[str, str]] = None):
        if category not in CATEGORIES:
            raise ValueError(f"Unknown pattern category: {category}")
        self.key = key
        self.name = name
        self.category = category
        self.description = description
        self.when_to_use = when_to_use
        self.demo = demo
        self.demo_options = demo_options
        self.related = related or {}

    @property
    def example(self) -> str:
        """示範頁面的原始碼。"""
        return inspect.getsource(self.demo)


def normalize_pattern_name(pattern_name: str) -> str:
    """'Chain of responsibility'、'chain-of-responsibility' 都轉為 'chain_of_responsibility'。"""
    return "_".join(pattern_name.strip().lower().replace("-", " ").replace("_", " ").split())


class PatternsRegistry:
    """包含所有示範頁面的註冊表，按註冊順序保存。"""

    def __init__(self):
        self._patterns: Dict[str, PatternInfo] = {}
        self.logger = logging.getLogger(__name__)
        self._initialize_patterns()

    def register(self, pattern_info: PatternInfo) -> None:
        key = normalize_pattern_name(pattern_info.key)
        if key in self._patterns:
            raise ValueError(f"Pattern already registered: {key}")
        self._patterns[key] = pattern_info

    def _initialize_patterns(self):
        """註冊三類模式的示範頁面。"""
        # 創建型模式
        self.register(PatternInfo(
            key="singleton",
            name="Singleton",
            category="creational",
            description="確保一個 class 只有一個 instance，並提供一個 global point。",
            when_to_use=["整個程序只需要一份設定對象時", "多處需要讀寫同一份狀態時"],
            demo=singleton.run_demo,
            related={"Factory": "工廠可以使用單例來管理創建的對象"},
        ))
        self.register(PatternInfo(
            key="builder",
            name="Builder",
            category="creational",
            description="將複雜對象的構建與其表示分離，逐步配置後一次建立。",
            when_to_use=["對象有大量可選參數時", "需要以固定配方建立多種預設產品時"],
            demo=builder.run_demo,
        ))
        self.register(PatternInfo(
            key="factory",
            name="Factory",
            category="creational",
            description="由工廠決定建立哪些具體對象，調用方只依賴共同介面。",
            when_to_use=["調用方不關心具體類型時", "建立邏輯需要集中管理時"],
            demo=factory.run_demo,
        ))
        self.register(PatternInfo(
            key="prototype",
            name="Prototype",
            category="creational",
            description="複製現有對象來建立新對象，而不是從頭構建。",
            when_to_use=["新對象與現有對象只有少量差異時"],
            demo=prototype.run_demo,
        ))

        # 結構型模式
        self.register(PatternInfo(
            key="adapter",
            name="Adapter",
            category="structural",
            description="將舊介面轉換為調用方期望的介面。",
            when_to_use=["整合無法修改的遺留系統時"],
            demo=adapter.run_demo,
            related={"Decorator": "裝飾器增加功能，適配器改變介面"},
        ))
        self.register(PatternInfo(
            key="decorator",
            name="Decorator",
            category="structural",
            description="在不修改對象的前提下動態疊加職責。",
            when_to_use=["需要在運行時組合多種附加行為時"],
            demo=decorator.run_demo,
            related={"Adapter": "適配器改變介面，裝飾器保持介面"},
        ))
        self.register(PatternInfo(
            key="composite",
            name="Composite",
            category="structural",
            description="以樹狀結構表示部分與整體，統一對待單個對象與組合。",
            when_to_use=["數據天然是層級結構時"],
            demo=composite.run_demo,
        ))
        self.register(PatternInfo(
            key="facade",
            name="Facade",
            category="structural",
            description="為複雜子系統提供一個簡單的入口。",
            when_to_use=["調用方只需要少數高層操作時"],
            demo=facade.run_demo,
        ))
        self.register(PatternInfo(
            key="flyweight",
            name="Flyweight",
            category="structural",
            description="大量對象共享不變的內部狀態以節省內存。",
            when_to_use=["需要建立大量相似對象時"],
            demo=flyweight.run_demo,
            demo_options=("count", "rng"),
        ))

        # 行為型模式
        self.register(PatternInfo(
            key="chain_of_responsibility",
            name="Chain of responsibility",
            category="behavioral",
            description="請求沿著處理者鏈傳遞，直到有處理者處理它。",
            when_to_use=["有多個可能的處理者且事先不知道由誰處理時"],
            demo=chain_of_responsibility.run_demo,
        ))
        self.register(PatternInfo(
            key="command",
            name="Command",
            category="behavioral",
            description="將請求封裝為對象，以便排隊執行。",
            when_to_use=["需要把操作排隊或記錄時"],
            demo=command.run_demo,
        ))
        self.register(PatternInfo(
            key="iterator",
            name="Iterator",
            category="behavioral",
            description="讓自訂集合可以使用標準迭代工具遍歷。",
            when_to_use=["希望以 for 迴圈遍歷自訂類型（例如堆疊）時"],
            demo=stack.run_demo,
        ))
        self.register(PatternInfo(
            key="strategy",
            name="Strategy",
            category="behavioral",
            description="定義一系列算法，將每個算法封裝起來，並使它們可互換。",
            when_to_use=["同一件事有兩種以上做法時", "用來替代 if/else 與 switch 時"],
            demo=quicksort.run_demo,
            demo_options=("rng",),
            related={"State": "狀態模式和策略模式在結構上相似但目的不同"},
        ))
        self.register(PatternInfo(
            key="memento",
            name="Memento",
            category="behavioral",
            description="保存對象的狀態，以便之後還原。",
            when_to_use=["需要保存與撤銷功能時（例如文字編輯器）"],
            demo=memento.run_demo,
        ))
        self.register(PatternInfo(
            key="observer",
            name="Observer",
            category="behavioral",
            description="定義對象之間的一對多依賴關係，狀態改變時自動通知所有訂閱者。",
            when_to_use=["一個對象需要得知另一個對象的變化時"],
            demo=observer.run_demo,
            related={"Mediator": "中介者經常作為觀察者模式的替代方案"},
        ))
        self.register(PatternInfo(
            key="state",
            name="State",
            category="behavioral",
            description="對象的行為隨內部狀態對象改變。",
            when_to_use=["行為取決於狀態且狀態轉換明確時"],
            demo=state.run_demo,
        ))
        self.register(PatternInfo(
            key="multicast_delegate",
            name="Multicast delegate",
            category="behavioral",
            description="建立一對多的委託關係，委託以弱引用保存。",
            when_to_use=["需要把同一個事件轉發給多個委託時"],
            demo=multicast_delegate.run_demo,
            related={"Mediator": "中介者可以選擇強引用或弱引用"},
        ))
        self.register(PatternInfo(
            key="mediator",
            name="Mediator",
            category="behavioral",
            description="以中介者封裝對象之間的交互，對象之間不再直接引用。",
            when_to_use=["多個對象需要互相通信時"],
            demo=mediator.run_demo,
            related={"Multicast delegate": "兩者都持有對象列表，中介者默認使用強引用"},
        ))

    def get_pattern(self, pattern_name: str) -> Optional[PatternInfo]:
        """
        獲取設計模式的資訊。

        Args:
            pattern_name: 模式名稱，不分大小寫，空格、連字號與底線等價

        Returns:
            PatternInfo 對象，如果未找到模式則返回 None
        """
        return self._patterns.get(normalize_pattern_name(pattern_name))

    def get_all_patterns(self) -> List[str]:
        """
        獲取所有已註冊模式的名稱。

        Returns:
            模式鍵的列表
        """
        return list(self._patterns.keys())

    def get_patterns_by_category(self, category: str) -> List[PatternInfo]:
        category = category.strip().lower()
        if category not in CATEGORIES:
            raise ValueError(f"Unknown pattern category: {category}")
        return [info for info in self._patterns.values() if info.category == category]

    def run_demo(self, pattern_name: str, console: Console, **options: Any) -> None:
        """
        執行模式的示範頁面。

        Args:
            pattern_name: 模式名稱
            console: 輸出用的 rich Console
            **options: 示範頁面接受的額外參數，其他參數會被忽略

        Raises:
            ValueError: 未找到模式
        """
        pattern_info = self.get_pattern(pattern_name)
        if pattern_info is None:
            raise ValueError(f"Unknown pattern: {pattern_name}")

        accepted = {k: v for k, v in options.items() if k in pattern_info.demo_options and v is not None}
        self.logger.debug(f"執行示範頁面: {pattern_info.key} {accepted}")
        pattern_info.demo(console, **accepted)


def show_pattern_details(patterns_registry: PatternsRegistry, pattern_name: str,
                         output: Optional[Console] = None) -> bool:
    """顯示模式的詳細資訊，未找到模式時返回 False。"""
    output = output or console
    pattern_info = patterns_registry.get_pattern(pattern_name)
    if not pattern_info:
        output.print(f"[bold red]錯誤:[/] 未找到名為 '{pattern_name}' 的模式。")
        return False

    output.print(Panel.fit(
        f"[bold]{pattern_info.name}[/]\n\n{pattern_info.description}",
        title=CATEGORIES[pattern_info.category],
        border_style="cyan",
    ))

    output.print("\n[bold yellow]適用場景:[/]")
    for point in pattern_info.when_to_use:
        output.print(f"• {point}")

    # 使用語法高亮顯示示範頁面
    output.print("\n[bold cyan]示範程式碼:[/]")
    output.print(Syntax(pattern_info.example.strip(), "python", theme="monokai", line_numbers=True))

    if pattern_info.related:
        output.print("\n[bold yellow]相關模式:[/]")
        for related, relation in pattern_info.related.items():
            output.print(f"• [bold]{related}[/] - {relation}")
    return True
