"""Exceptions post_builder — erreurs d'appelant uniquement (jamais sur le chemin de rendu)."""


class PostBuilderError(Exception):
    """Erreur de base du module."""


class UnknownBlockKindError(PostBuilderError, ValueError):
    def __init__(self, kind: str, known: list):
        super().__init__(f"Bloc inconnu : {kind!r}. Registry : {known}")
        self.kind = kind


class UnknownOperationError(PostBuilderError, ValueError):
    def __init__(self, op: str, known: list):
        super().__init__(f"Opération inconnue : {op!r}. Disponibles : {known}")
        self.op = op


class BlockFieldError(PostBuilderError, ValueError):
    """Champ inexistant ou immuable (id, kind)."""


class BlockNotDeletableError(PostBuilderError):
    def __init__(self, block_id: str):
        super().__init__(f"Bloc non supprimable : {block_id}")
        self.block_id = block_id
