import os
import json
import logging
from typing import Dict, Any, Optional
from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str) -> Optional[int]:
    value = os.environ.get(name, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        logging.warning(f"環境變量 {name} 不是整數: {value!r}，已忽略")
        return None


def default_config() -> Dict[str, Any]:
    """默認配置，部分值可以由環境變量覆蓋。"""
    return {
        "log_level": os.environ.get("PATTERNS_LOG_LEVEL", "INFO"),
        "quicksort_strategy": os.environ.get("QUICKSORT_STRATEGY", "hoare"),
        "sample_size": 4,
        "sample_max": 10,
        "random_seed": _env_int("PATTERNS_RANDOM_SEED"),
        "flyweight_objects": 20,
    }


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    加載配置文件

    Args:
        config_path: 配置文件路徑，如果為None則使用默認值

    Returns:
        配置字典
    """
    defaults = default_config()

    if not config_path or not os.path.exists(config_path):
        return defaults

    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            user_config = json.load(file)
    except (OSError, ValueError) as e:
        logging.warning(f"讀取配置文件時出錯: {str(e)}，使用默認配置")
        return defaults

    if not isinstance(user_config, dict):
        logging.warning(f"配置文件 {config_path} 的內容不是 JSON 對象，使用默認配置")
        return defaults

    # 合併默認配置和用戶配置
    return {**defaults, **user_config}
