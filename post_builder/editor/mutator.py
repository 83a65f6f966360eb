"""
Mutator — protocole d'édition commun à tous les blocs d'un post.

Chaque opération retourne un NOUVEAU Post (aucune mutation en place).
Discipline "rebuild-and-replace" : on reconstruit la liste entière avec un seul
élément remplacé, puis on la réécrit comme unique champ modifié.

Id inconnu → no-op silencieux (idempotence, pas une erreur).
"""
import logging
from typing import Any, List, Optional, Sequence, TypeVar

from pydantic import BaseModel

from ..blocks import BaseBlock, ReviewBlock, VersusBlock
from ..core.schemas import Post, SortOrder
from ..errors import BlockFieldError, BlockNotDeletableError

log = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

_IMMUTABLE_FIELDS = {"id", "kind"}


# ── Helpers génériques (listes indexées par id) ──────────────────────────────

def field_name(model: type[BaseModel], name: str) -> str:
    """Nom Python d'un champ, depuis son nom snake_case ou son alias camelCase."""
    if name in model.model_fields:
        return name
    for fname, info in model.model_fields.items():
        if info.alias == name:
            return fname
    raise BlockFieldError(f"Champ inconnu pour {model.__name__} : {name!r}")


def with_changes(item: T, **changes: Any) -> T:
    """Copie validée de `item` avec les champs modifiés (dicts acceptés pour les sous-modèles)."""
    cls = type(item)
    data = item.model_dump()
    for name, value in changes.items():
        data[field_name(cls, name)] = value
    return cls.model_validate(data)


def replace_item(items: Sequence[T], item_id: str, **changes: Any) -> List[T]:
    """Reconstruit la liste avec l'élément `item_id` modifié."""
    return [with_changes(it, **changes) if it.id == item_id else it for it in items]


def remove_item(items: Sequence[T], item_id: str) -> List[T]:
    return [it for it in items if it.id != item_id]


def append_item(items: Sequence[T], item: T) -> List[T]:
    return [*items, item]


def _with_blocks(post: Post, blocks: List[BaseBlock]) -> Post:
    return post.model_copy(update={"blocks": blocks})


def settle_block(block: BaseBlock, lang: Optional[str] = None) -> BaseBlock:
    """
    Invariants de payload réappliqués à chaque écriture :
    note review = moyenne du breakdown, duel = exactement 2 options.
    """
    from .poll import seed_versus
    from .review import apply_score

    if isinstance(block, ReviewBlock):
        data = apply_score(block.variant_data)
        if data is not block.variant_data:
            return block.model_copy(update={"variant_data": data})
    if isinstance(block, VersusBlock):
        return seed_versus(block, lang)
    return block


def settle_post(post: Post) -> Post:
    """Rétablit les invariants de tous les blocs (post reçu hors manifest, relu en base…)."""
    settled = [settle_block(b, post.lang) for b in post.blocks]
    if all(s is b for s, b in zip(settled, post.blocks)):
        return post
    return _with_blocks(post, settled)


# ── Opérations bloc ───────────────────────────────────────────────────────────

def update_block(post: Post, block_id: str, field: str, value: Any) -> Post:
    """Remplace un champ de premier niveau du bloc `block_id`."""
    block = post.find(block_id)
    if block is None:
        log.debug("update_block: bloc %s absent, no-op", block_id)
        return post

    name = field_name(type(block), field)
    if name in _IMMUTABLE_FIELDS:
        raise BlockFieldError(f"Champ immuable : {name}")

    updated = settle_block(with_changes(block, **{name: value}), post.lang)
    return _with_blocks(post, [updated if b.id == block_id else b for b in post.blocks])


def update_variant(post: Post, block_id: str, **changes: Any) -> Post:
    """
    Read-merge-write du payload variant : lecture (ou défaut), fusion
    superficielle des sous-champs, réécriture via update_block.
    """
    block = post.find(block_id)
    if block is None:
        log.debug("update_variant: bloc %s absent, no-op", block_id)
        return post
    merged = with_changes(block.variant_data, **changes)
    return update_block(post, block_id, "variant_data", merged)


def remove_block(post: Post, block_id: str) -> Post:
    """Retire le bloc. Le refus des blocs non supprimables se fait en amont (ensure_deletable)."""
    if post.find(block_id) is None:
        return post
    log.info("Bloc %s supprimé du post %s", block_id, post.id)
    remaining = [b for b in post.blocks if b.id != block_id]
    return _with_blocks(post, _sorted(remaining, post.active_sort))


def ensure_deletable(post: Post, block_id: str) -> None:
    """Garde côté UI/API : lève BlockNotDeletableError si le bloc est protégé."""
    block = post.find(block_id)
    if block is not None and not block.is_deletable:
        raise BlockNotDeletableError(block_id)


def _swap(post: Post, index: int, target: int) -> Post:
    blocks = list(post.blocks)
    if not (0 <= index < len(blocks)) or not (0 <= target < len(blocks)):
        log.debug("move: index %s → %s hors limites, no-op", index, target)
        return post
    current, other = blocks[index], blocks[target]
    # Les numéros affichés suivent les blocs déplacés
    blocks[index]  = other.model_copy(update={"order_number": current.order_number})
    blocks[target] = current.model_copy(update={"order_number": other.order_number})
    return _with_blocks(post, blocks)


def move_up(post: Post, index: int) -> Post:
    return _swap(post, index, index - 1)


def move_down(post: Post, index: int) -> Post:
    return _swap(post, index, index + 1)


# ── Numérotation / tri ────────────────────────────────────────────────────────

def display_number(block: BaseBlock, index: int) -> int:
    """Numéro affiché : orderNumber s'il est défini, sinon position + 1."""
    return block.order_number or index + 1


def next_order_number(post: Post) -> int:
    if not post.blocks:
        return 1
    return max(b.order_number or 0 for b in post.blocks) + 1


def _sorted(blocks: Sequence[BaseBlock], order: Optional[SortOrder]) -> List[BaseBlock]:
    if order is None:
        return list(blocks)
    return sorted(blocks, key=lambda b: b.order_number or 0, reverse=(order == "desc"))


def add_block(post: Post, block: BaseBlock) -> Post:
    """Ajoute un bloc (orderNumber = max + 1), re-trié si un tri est actif."""
    numbered = block.model_copy(update={"order_number": next_order_number(post)})
    log.info("Bloc %s (%s) ajouté au post %s", numbered.id, numbered.kind, post.id)
    return _with_blocks(post, _sorted([*post.blocks, numbered], post.active_sort))


def sort_blocks(post: Post, order: SortOrder) -> Post:
    """Fige les numéros manquants (position + 1) puis trie asc/desc."""
    numbered = [
        b.model_copy(update={"order_number": display_number(b, i)})
        for i, b in enumerate(post.blocks)
    ]
    return post.model_copy(update={"blocks": _sorted(numbered, order), "active_sort": order})
