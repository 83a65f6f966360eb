"""
Schémas du document post.
Structure : Post → [BlockUnion] (ordre = position dans la liste)

EDITOR_PROFILES décrit les deux configurations de l'éditeur rich-text externe :
"full" pour les descriptions, "restricted" (sans liens ni images) pour les
faces de flip card.
"""
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..blocks import BlockUnion, PostModel, new_id
from .i18n import DEFAULT_LANG

SortOrder = Literal["asc", "desc"]


class Post(PostModel):
    """Document complet : séquence ordonnée de blocs hétérogènes."""
    id: str = Field(default_factory=new_id)
    title: str = ""
    lang: str = DEFAULT_LANG
    active_sort: Optional[SortOrder] = "asc"
    blocks: List[BlockUnion] = Field(default_factory=list)

    def find(self, block_id: str):
        """Bloc d'id donné, None si absent."""
        return next((b for b in self.blocks if b.id == block_id), None)


class EditorProfile(BaseModel):
    """Configuration toolbar + formats autorisés de l'éditeur rich-text."""
    toolbar: List[List] = Field(default_factory=list)
    formats: List[str] = Field(default_factory=list)


EDITOR_PROFILES: Dict[str, EditorProfile] = {
    "full": EditorProfile(
        toolbar=[
            [{"header": [1, 2, 3, False]}],
            ["bold", "italic", "underline", "strike"],
            [{"list": "ordered"}, {"list": "bullet"}],
            [{"align": []}],
            [{"color": []}, {"background": []}],
            ["link", "image", "video"],
            ["clean"],
            ["blockquote", "code-block"],
        ],
        formats=[
            "header",
            "bold", "italic", "underline", "strike",
            "list", "bullet", "align",
            "color", "background",
            "link", "image", "video",
            "blockquote", "code-block",
        ],
    ),
    "restricted": EditorProfile(
        toolbar=[
            [{"header": [1, 2, 3, False]}],
            [{"size": ["small", False, "large", "huge"]}],
            ["bold", "italic", "underline", "strike"],
            [{"list": "ordered"}, {"list": "bullet"}],
            [{"color": []}, {"background": []}],
            ["clean"],
        ],
        formats=[
            "header", "size",
            "bold", "italic", "underline", "strike",
            "list",
            "color", "background",
        ],
    ),
}
