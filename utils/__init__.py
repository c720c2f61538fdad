"""
遊樂場共用的實用工具。
"""

from utils.key_value_store import KeyValueStore, InMemoryKeyValueStore
