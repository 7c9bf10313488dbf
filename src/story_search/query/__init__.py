from story_search.query.controller import DEFAULT_QUERY, DEFAULT_QUERY_KEY, QueryController

__all__ = ["DEFAULT_QUERY", "DEFAULT_QUERY_KEY", "QueryController"]
