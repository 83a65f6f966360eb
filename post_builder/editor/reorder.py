"""
Drag reorder — réordonnancement live par index ("move-before", pas de swap).

Chaque "over" retire l'élément glissé de sa position courante et le réinsère à
l'index cible ; les éléments intermédiaires se décalent d'un cran. Le moteur
ne connaît que des index : réutilisable pour toute sous-collection ordonnée.
"""
import logging
from typing import Generic, List, Optional, Sequence, TypeVar

log = logging.getLogger(__name__)

T = TypeVar("T")


def _clamp(index: int, size: int) -> int:
    return max(0, min(index, size - 1))


def move_before(items: Sequence[T], source: int, target: int) -> List[T]:
    """Retire items[source] et le réinsère à `target` (bornes ramenées dans la liste)."""
    result = list(items)
    if not result:
        return result
    source = _clamp(source, len(result))
    target = _clamp(target, len(result))
    if source == target:
        return result
    moved = result.pop(source)
    result.insert(target, moved)
    return result


class DragReorder(Generic[T]):
    """
    Geste de drag sur une liste ordonnée.

    Usage:
        >>> drag = DragReorder(options)
        >>> drag.start(0)
        >>> drag.over(2)
        >>> options = drag.end()
    """

    def __init__(self, items: Sequence[T]):
        self.items: List[T] = list(items)
        self.dragged: Optional[int] = None

    @property
    def active(self) -> bool:
        return self.dragged is not None

    def start(self, index: int) -> None:
        if not self.items:
            return
        self.dragged = _clamp(index, len(self.items))

    def over(self, index: int) -> List[T]:
        """Événement "drag over" : déplace l'élément glissé à l'index survolé."""
        if self.dragged is None:
            return self.items
        target = _clamp(index, len(self.items))
        if target != self.dragged:
            self.items = move_before(self.items, self.dragged, target)
            self.dragged = target
        return self.items

    def end(self) -> List[T]:
        """Fin du geste : ordre courant validé, état de drag effacé."""
        if self.dragged is not None:
            log.debug("drag terminé à l'index %s", self.dragged)
        self.dragged = None
        return self.items


def drag(items: Sequence[T], source: int, *over: int) -> List[T]:
    """Rejoue un geste complet : start(source), over(t) pour chaque t, end()."""
    gesture = DragReorder(items)
    gesture.start(source)
    for target in over:
        gesture.over(target)
    return gesture.end()
