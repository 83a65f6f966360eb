"""Core module pour post_builder."""
from .schemas import Post, EditorProfile, EDITOR_PROFILES, SortOrder
from .i18n import t, DEFAULT_LANG

__all__ = [
    "Post",
    "EditorProfile",
    "EDITOR_PROFILES",
    "SortOrder",
    "t",
    "DEFAULT_LANG",
]
