"""
設計模式遊樂場的模式目錄。
提供所有示範頁面的說明、分類與執行入口。
"""

from design_patterns.patterns_registry import PatternsRegistry, PatternInfo, show_pattern_details
