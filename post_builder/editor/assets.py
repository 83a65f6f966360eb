"""
Assets — retour des outils externes (file manager, mode URL, éditeur d'image).

Les outils sont invoqués avec (block_id, sub_field?, option_id?) et rappellent
apply_asset avec l'URL choisie. sub_field est un chemin pointé :
  "mediaUrl"                       → champ du bloc
  "frontImage"                     → champ du payload variant
  "reviewData.productImage"        → payload variant (préfixe historique)
  "questions.0.answers.1.image"    → chemin imbriqué dans le payload
  "options" + option_id            → image d'une option de sondage/duel
"""
import logging
from typing import Any, List, Optional

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from ..core.schemas import Post
from .mutator import update_block
from .poll import update_option

log = logging.getLogger(__name__)

# Anciens noms de payload par kind, tous rabattus sur variantData
_PAYLOAD_PREFIXES = {
    "variantData", "variant_data",
    "reviewData", "quizData", "flipData", "beforeAfterData", "pollData", "socialData",
}


class AssetTarget(BaseModel):
    block_id: str
    sub_field: Optional[str] = None
    option_id: Optional[str] = None


def _path_keys(block, path: str) -> List[str]:
    parts = path.split(".")
    if parts[0] in _PAYLOAD_PREFIXES:
        return ["variantData", *parts[1:]]
    fields = type(block).model_fields
    for name, info in fields.items():
        if parts[0] in (name, info.alias):
            return [info.alias or name, *parts[1:]]
    return ["variantData", *parts]


def _child_key(node: dict, key: str) -> Optional[str]:
    if key in node:
        return key
    camel = to_camel(key)
    return camel if camel in node else None


def set_path(post: Post, block_id: str, path: str, value: Any) -> Post:
    """Écrit `value` au chemin pointé du bloc (read-merge-write). Chemin invalide → no-op."""
    block = post.find(block_id)
    if block is None:
        return post

    data = block.model_dump(by_alias=True)
    keys = _path_keys(block, path)
    node: Any = data
    for i, key in enumerate(keys):
        last = i == len(keys) - 1
        if isinstance(node, list):
            if not key.isdigit() or int(key) >= len(node):
                log.debug("set_path: index %r hors limites (%s), no-op", key, path)
                return post
            if last:
                node[int(key)] = value
            else:
                node = node[int(key)]
        elif isinstance(node, dict):
            child = _child_key(node, key)
            if child is None:
                log.debug("set_path: clé %r inconnue (%s), no-op", key, path)
                return post
            if last:
                node[child] = value
            else:
                node = node[child]
        else:
            log.debug("set_path: chemin %s traverse une valeur scalaire, no-op", path)
            return post

    head = keys[0]
    if head == "variantData":
        payload = type(block.variant_data).model_validate(data[head])
        return update_block(post, block_id, "variant_data", payload)
    return update_block(post, block_id, head, data[head])


def apply_asset(post: Post, target: AssetTarget, url: str) -> Post:
    """Rappel d'un outil externe : écrit l'URL choisie à l'emplacement ciblé."""
    if target.option_id:
        return update_option(post, target.block_id, target.option_id, "image", url)
    if target.sub_field:
        return set_path(post, target.block_id, target.sub_field, url)
    return update_block(post, target.block_id, "media_url", url)
