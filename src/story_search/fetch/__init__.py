from story_search.fetch.orchestrator import FetchOrchestrator

__all__ = ["FetchOrchestrator"]
