"""
Bloc de base pour post_builder.
Champs communs + payload variant (variant_data) propre à chaque kind.

Sérialisation : noms camelCase (orderNumber, mediaUrl, variantData…),
construction acceptée en snake_case ou camelCase.
"""
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def new_id() -> str:
    """Identifiant opaque, stable sur toute la vie de l'élément."""
    return str(uuid.uuid4())


class PostModel(BaseModel):
    """Modèle racine : alias camelCase pour le document persisté."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VariantData(PostModel):
    """Payload spécifique à un kind de bloc."""
    pass


class BaseBlock(PostModel):
    """Bloc de base (classe parente de tous les blocs d'un post)."""
    kind: str
    id: str = Field(default_factory=new_id)
    order_number: Optional[int] = None
    title: str = ""
    description: str = ""        # HTML (éditeur rich-text)
    source: str = ""
    media_url: str = ""
    show_on_homepage: bool = False
    is_deletable: bool = True
