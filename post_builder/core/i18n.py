"""
i18n — résolution des clés de traduction.

Clés pointées "versus.left" → texte localisé (catalog i18n/{lang}.json)
Clé absente → "[missing:versus.left]"
"""
import json
import os
from pathlib import Path

DEFAULT_LANG = os.getenv("POST_BUILDER_LANG", "tr")

_I18N_CACHE: dict = {}
_I18N_DIR = Path(__file__).parent.parent / "i18n"


def _load_lang(lang: str) -> dict:
    """Charge le fichier i18n/{lang}.json (lazy, mis en cache)."""
    if lang not in _I18N_CACHE:
        path = _I18N_DIR / f"{lang}.json"
        if path.exists():
            with open(path, encoding="utf-8") as f:
                _I18N_CACHE[lang] = json.load(f)
        else:
            _I18N_CACHE[lang] = {}
    return _I18N_CACHE[lang]


def t(key: str, lang: str | None = None) -> str:
    """
    Résout une clé i18n.
    t("versus.left", "tr") → "Sol Taraf"
    """
    catalog = _load_lang(lang or DEFAULT_LANG)

    # Navigation dans le dict imbriqué : "versus.left" → catalog["versus"]["left"]
    node = catalog
    for part in key.split("."):
        if isinstance(node, dict) and part in node:
            node = node[part]
        else:
            return f"[missing:{key}]"

    return str(node) if not isinstance(node, dict) else f"[missing:{key}]"


def catalog(lang: str) -> dict | None:
    """Catalog brut d'une langue, None si le fichier n'existe pas."""
    if not (_I18N_DIR / f"{lang}.json").exists():
        return None
    return _load_lang(lang)


def reload_cache():
    """Force le rechargement du cache i18n (utile en dev)."""
    _I18N_CACHE.clear()
