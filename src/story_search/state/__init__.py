from story_search.state.container import StateContainer
from story_search.state.reducer import stories_reducer
from story_search.state.selectors import filter_stories

__all__ = ["StateContainer", "filter_stories", "stories_reducer"]
