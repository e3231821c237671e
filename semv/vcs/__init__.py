from .git import GitMetadata, list_local_tags

__all__ = ["GitMetadata", "list_local_tags"]
