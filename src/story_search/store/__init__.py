from story_search.store.base import ValueStore
from story_search.store.json_file import JsonFileStore
from story_search.store.memory import MemoryStore

__all__ = ["JsonFileStore", "MemoryStore", "ValueStore"]
