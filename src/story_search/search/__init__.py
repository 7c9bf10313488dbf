from story_search.search.base import StorySearcher
from story_search.search.hn import HN_API_ENDPOINT, HNSearcher

__all__ = ["HN_API_ENDPOINT", "HNSearcher", "StorySearcher"]
