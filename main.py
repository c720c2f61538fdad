"""
設計模式遊樂場
以命令列執行創建型、結構型與行為型設計模式的示範頁面。
"""
import logging
import random
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from behavioral.quicksort import QuicksortContext, get_quicksort_strategy, random_sample
from config import load_config
from design_patterns.patterns_registry import CATEGORIES, PatternsRegistry, show_pattern_details

# 初始化 Typer 應用程序和控制台
app = typer.Typer(help="設計模式遊樂場")
console = Console()

# 全局狀態
config = None


def get_config() -> dict:
    global config
    if config is None:
        config = load_config()
    return config


def make_rng() -> random.Random:
    """按配置中的隨機種子建立隨機數生成器。"""
    return random.Random(get_config().get("random_seed"))


def _check_category(category: Optional[str]) -> Optional[str]:
    if category is None:
        return None
    category = category.strip().lower()
    if category not in CATEGORIES:
        console.print(f"[bold red]錯誤:[/] 未知的分類 '{category}'，可選: {', '.join(CATEGORIES)}")
        raise typer.Exit(code=1)
    return category


@app.callback()
def main(config_path: str = typer.Option("config.json", help="配置文件的路徑"),
         verbose: bool = typer.Option(False, "--verbose", "-v", help="顯示詳細信息")):
    """
    設計模式遊樂場 - 執行每個設計模式的示範頁面。
    """
    global config

    # 加載配置
    config = load_config(config_path)

    # 設置日誌記錄
    log_level = getattr(logging, str(config.get('log_level', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(
        level=log_level if not verbose else logging.DEBUG,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


@app.command("patterns")
def list_design_patterns(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="只顯示指定分類 (creational, structural, behavioral)"),
    detail: bool = typer.Option(False, "--detail", "-d", help="顯示模式的詳細資訊"),
    pattern_name: Optional[str] = typer.Option(None, "--pattern", "-p", help="指定要詳細查看的模式名稱")
):
    """
    列出所有示範頁面，按分類分組。
    """
    patterns_registry = PatternsRegistry()

    # 如果指定了特定模式名稱
    if pattern_name:
        if not show_pattern_details(patterns_registry, pattern_name, console):
            raise typer.Exit(code=1)
        return

    category = _check_category(category)
    categories = [category] if category else list(CATEGORIES)

    if detail:
        for name in categories:
            for pattern_info in patterns_registry.get_patterns_by_category(name):
                show_pattern_details(patterns_registry, pattern_info.key, console)
                console.print("\n" + "=" * 80 + "\n")
        return

    console.print(Panel.fit("[bold]支持的設計模式[/]", border_style="blue"))

    for name in categories:
        table = Table(title=CATEGORIES[name], show_lines=False)
        table.add_column("名稱", style="bold green")
        table.add_column("鍵", style="cyan")
        table.add_column("說明")
        for pattern_info in patterns_registry.get_patterns_by_category(name):
            table.add_row(pattern_info.name, pattern_info.key, pattern_info.description)
        console.print(table)

    # 顯示使用提示
    console.print("\n[bold yellow]查看更多資訊:[/]")
    console.print("• 查看特定模式詳情: [cyan]python3 main.py patterns -p <模式名稱>[/]")
    console.print("• 執行示範頁面: [cyan]python3 main.py run <模式名稱>[/]")


@app.command("run")
def run_pattern(
    pattern_name: str = typer.Argument(..., help="要執行的設計模式名稱")
):
    """
    執行單個設計模式的示範頁面。
    """
    patterns_registry = PatternsRegistry()
    pattern_info = patterns_registry.get_pattern(pattern_name)
    if pattern_info is None:
        console.print(f"[bold red]錯誤:[/] 未找到名為 '{pattern_name}' 的模式。")
        raise typer.Exit(code=1)

    settings = get_config()
    console.print(Panel.fit(pattern_info.name, title=CATEGORIES[pattern_info.category], border_style="blue"))
    patterns_registry.run_demo(
        pattern_info.key,
        console,
        rng=make_rng(),
        count=settings.get("flyweight_objects"),
    )


@app.command("run-all")
def run_all_patterns(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="只執行指定分類")
):
    """
    依次執行所有示範頁面。
    """
    category = _check_category(category)
    patterns_registry = PatternsRegistry()
    settings = get_config()
    categories = [category] if category else list(CATEGORIES)

    failures = 0
    for name in categories:
        for pattern_info in patterns_registry.get_patterns_by_category(name):
            console.print(Panel.fit(pattern_info.name, title=CATEGORIES[name], border_style="blue"))
            try:
                patterns_registry.run_demo(
                    pattern_info.key,
                    console,
                    rng=make_rng(),
                    count=settings.get("flyweight_objects"),
                )
            except Exception as e:
                failures += 1
                console.print(f"[bold red]錯誤:[/] {pattern_info.name} 執行失敗: {str(e)}")
            console.print()

    if failures:
        raise typer.Exit(code=1)


@app.command("sort")
def sort_values(
    values: Optional[List[int]] = typer.Argument(None, help="要排序的整數，省略時使用隨機樣本；含負數時先寫 -- 再列出數值"),
    strategy: Optional[str] = typer.Option(None, "--strategy", "-s", help="排序策略 (hoare 或 lomuto)")
):
    """
    以選定的快速排序策略排序整數。
    """
    settings = get_config()
    strategy_name = strategy or settings.get("quicksort_strategy", "hoare")

    try:
        quicksort_strategy = get_quicksort_strategy(strategy_name)
    except ValueError as e:
        console.print(f"[bold red]錯誤:[/] {str(e)}")
        raise typer.Exit(code=1)

    if values:
        array = list(values)
    else:
        array = random_sample(
            int(settings.get("sample_size", 4)),
            int(settings.get("sample_max", 10)),
            make_rng(),
        )

    console.print(f"策略: [bold]{quicksort_strategy.name}[/]")
    console.print(f"原始數組: {array}")
    QuicksortContext(quicksort_strategy).sort(array)
    console.print(f"Quicksorted array: {array}")


if __name__ == "__main__":
    app()
