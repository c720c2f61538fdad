"""
單例模式示範：全局唯一的設定對象。
"""
import random
from typing import Optional, Tuple

from rich.console import Console

Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


def random_color(rng: Optional[random.Random] = None) -> Color:
    """隨機 RGBA 顏色，透明度不低於 0.5。"""
    rng = rng or random.Random()
    return (rng.uniform(0, 1), rng.uniform(0, 1), rng.uniform(0, 1), rng.uniform(0.5, 1))


class Settings:
    """整個程序共享的設定，Settings() 總是返回同一個實例。"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.background_color = WHITE
        return cls._instance

    @classmethod
    def shared(cls) -> "Settings":
        return cls()

    def set_random_background_color(self, rng: Optional[random.Random] = None) -> Color:
        self.background_color = random_color(rng)
        return self.background_color


def run_demo(console: Console) -> None:
    settings = Settings.shared()
    color = settings.set_random_background_color()
    console.print(f"背景顏色已設為 RGBA{tuple(round(c, 2) for c in color)}")
    console.print(f"Settings() is Settings.shared(): {Settings() is Settings.shared()}")
    console.print(f"其他地方讀到的顏色相同: {Settings().background_color == color}")
