"""
Embed — normalisation des embeds sociaux + reconnaissance des URL vidéo.

normalize_embed(raw) → markup embarquable, largeur verrouillée à 552px :
  1. URL nue (commence par http, aucun tag) → dispatch par plateforme
  2. Snippet HTML existant → réécriture des largeurs + hauteur iframe par défaut

ATTENTION — le chemin "snippet" ne nettoie PAS le HTML : les <script> et
attributs arbitraires sont conservés tels quels. C'est un choix produit assumé.
Un hôte qui accepte des auteurs non fiables doit placer sa propre couche de
sanitization devant ce module.

parse_video_url(url) → VideoInfo | None (bloc audio : YouTube / YouTube Music).
"""
import html
import logging
import os
import re
from typing import Callable, Dict, List, Optional, Protocol

from bs4 import BeautifulSoup
from pydantic import BaseModel, Field

from .core.i18n import t

log = logging.getLogger(__name__)

CANONICAL_WIDTH = 552
DEFAULT_HEIGHT  = 600
LABEL_MAX_CHARS = 60

# Origine transmise au lecteur YouTube (window.location.origin côté navigateur)
EMBED_ORIGIN = os.getenv("POST_BUILDER_ORIGIN", "")

PINTEREST_LOADER = "//assets.pinterest.com/js/pinit.js"
TWITTER_LOADER   = "https://platform.twitter.com/widgets.js"
INSTAGRAM_LOADER = "//www.instagram.com/embed.js"

# Hooks globaux des widgets plateformes, invoqués après ré-insertion
PLATFORM_HOOKS = ("twttr.widgets.load", "instgrm.Embeds.process")

_WIDTH_ATTR_RE  = re.compile(r'width="\d+"')
_WIDTH_STYLE_RE = re.compile(r"width:\s*\d+px")

_VIDEO_URL_RE = re.compile(
    r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=|music\.youtube\.com/watch\?v=)([^#&?]*).*"
)
_VIDEO_ID_LEN = 11


# ── Normalisation ─────────────────────────────────────────────────────────────

def normalize_embed(raw: str, lang: str | None = None) -> str:
    """Fonction pure : saisie auteur (URL ou snippet) → markup embarquable."""
    if not raw:
        return ""
    processed = raw.strip()

    if processed.startswith("http") and "<" not in processed:
        return _embed_url(processed, lang)

    return lock_width(processed)


def lock_width(snippet: str) -> str:
    """Réécrit toutes les largeurs en px à 552 ; ajoute height=600 aux iframes sans hauteur."""
    processed = _WIDTH_ATTR_RE.sub(f'width="{CANONICAL_WIDTH}"', snippet)
    processed = _WIDTH_STYLE_RE.sub(f"width:{CANONICAL_WIDTH}px", processed)

    if "<iframe" in processed and "height=" not in processed:
        processed = processed.replace("<iframe", f'<iframe height="{DEFAULT_HEIGHT}"', 1)

    return processed


def _last_segment(url: str) -> str:
    """Dernier segment non vide du chemin, query retirée."""
    parts = [p for p in url.split("/") if p]
    return parts[-1].split("?")[0] if parts else ""


def _iframe(src: str) -> str:
    return (
        f'<iframe src="{html.escape(src)}" width="{CANONICAL_WIDTH}" height="{DEFAULT_HEIGHT}" '
        f'style="border:none; border-radius:3px; overflow:hidden; width:{CANONICAL_WIDTH}px;" '
        f'frameborder="0" scrolling="no" allowfullscreen="true"></iframe>'
    )


def _embed_url(url: str, lang: str | None) -> str:
    """Dispatch URL nue → markup plateforme. Premier motif reconnu gagnant."""
    safe_url = html.escape(url)

    if "nsosyal.com" in url:
        return _iframe(f"https://nsosyal.com/embed/{_last_segment(url)}")

    if "pin.it" in url or "pinterest.com" in url:
        # Lien court : id non résolvable côté client → widget officiel
        if "pin.it" in url:
            return (
                f'<div style="width:{CANONICAL_WIDTH}px; display:flex; justify-content:center;">'
                f'<a data-pin-do="embedPin" data-pin-width="large" href="{safe_url}"></a></div>'
                f'<script async defer src="{PINTEREST_LOADER}"></script>'
            )
        return _iframe(f"https://assets.pinterest.com/ext/embed.html?id={_last_segment(url)}")

    if "twitter.com" in url or "x.com" in url:
        return (
            f'<blockquote class="twitter-tweet" data-width="{CANONICAL_WIDTH}">'
            f'<a href="{safe_url}"></a></blockquote>'
            f'<script async src="{TWITTER_LOADER}" charset="utf-8"></script>'
        )

    if "instagram.com/p/" in url:
        return (
            f'<blockquote class="instagram-media" data-instgrm-permalink="{safe_url}" '
            f'data-instgrm-version="14" style="width:{CANONICAL_WIDTH}px; border-radius:3px; '
            f'border:1px solid #dbdbdb; background:#fff; margin:1px; max-width:{CANONICAL_WIDTH}px; '
            f'min-width:326px; padding:0;"></blockquote>'
            f'<script async src="{INSTAGRAM_LOADER}"></script>'
        )

    log.debug("embed non reconnu, carte de repli : %s", url)
    return fallback_card(url, lang)


def fallback_card(url: str, lang: str | None = None) -> str:
    """Carte "ouvrir le lien" : libellé tronqué + lien sortant, aucun embed."""
    label = url if len(url) <= LABEL_MAX_CHARS else url[:LABEL_MAX_CHARS - 1] + "…"
    return (
        f'<div class="embed-fallback">'
        f'<p class="embed-fallback__label">{html.escape(label)}</p>'
        f'<a class="embed-fallback__link" href="{html.escape(url)}" target="_blank" '
        f'rel="noopener noreferrer">{html.escape(t("social.open_link", lang))}</a>'
        f'</div>'
    )


# ── Ré-exécution des scripts (capacité fournie par l'hôte) ────────────────────

class ScriptSpec(BaseModel):
    """Script à recréer à l'identique : mêmes attributs, même texte inline."""
    attrs: Dict[str, str] = Field(default_factory=dict)
    text: str = ""

    def to_html(self) -> str:
        attrs = "".join(
            f" {name}" if value == "" else f' {name}="{html.escape(value)}"'
            for name, value in self.attrs.items()
        )
        return f"<script{attrs}>{self.text}</script>"


class EmbedHost(Protocol):
    """
    Environnement d'affichage (DOM, webview…).

    insert() place le markup et recrée chaque script depuis sa ScriptSpec
    (un script inline déjà parsé ne se ré-exécute pas à la ré-insertion).
    widget_hooks() expose les hooks globaux présents ("twttr.widgets.load"…).
    """

    def insert(self, markup: str, scripts: List[ScriptSpec]) -> None: ...

    def widget_hooks(self) -> Dict[str, Callable[[], None]]: ...


def extract_scripts(markup: str) -> List[ScriptSpec]:
    """Liste ordonnée des <script> du markup, attributs et texte inline inclus."""
    soup = BeautifulSoup(markup, "html.parser")
    specs = []
    for tag in soup.find_all("script"):
        attrs = {
            name: " ".join(value) if isinstance(value, list) else str(value)
            for name, value in tag.attrs.items()
        }
        specs.append(ScriptSpec(attrs=attrs, text=str(tag.string or "")))
    return specs


def refresh_embed(raw: str, host: EmbedHost, lang: str | None = None) -> List[str]:
    """
    Normalise, insère via l'hôte avec scripts recréés, puis invoque les hooks
    plateformes disponibles. Retourne les noms des hooks invoqués.
    """
    markup = normalize_embed(raw, lang)
    host.insert(markup, extract_scripts(markup))

    hooks = host.widget_hooks()
    called = []
    for name in PLATFORM_HOOKS:
        hook = hooks.get(name)
        if hook is not None:
            hook()
            called.append(name)
    return called


class EmbedRefresher:
    """
    Relance refresh_embed uniquement quand la saisie brute change.
    Une instance par bloc social ; les blocs sont indépendants.
    """

    def __init__(self, host: EmbedHost, lang: str | None = None):
        self.host = host
        self.lang = lang
        self._last_raw: Optional[str] = None

    def refresh(self, raw: str) -> bool:
        """True si un cycle normalisation + ré-insertion a eu lieu."""
        if raw == self._last_raw:
            return False
        refresh_embed(raw, self.host, self.lang)
        self._last_raw = raw
        return True


# ── URL vidéo (bloc audio) ────────────────────────────────────────────────────

class VideoInfo(BaseModel):
    id: str
    embed_url: str
    thumbnail_url: str
    fallback_thumbnail_url: str
    is_music: bool = False


def parse_video_url(url: str, origin: str | None = None) -> VideoInfo | None:
    """
    Extrait l'id YouTube (11 caractères) d'une URL.
    None → l'appelant traite media_url comme un fichier audio direct.
    """
    if not url:
        return None
    match = _VIDEO_URL_RE.match(url)
    if not match or len(match.group(2)) != _VIDEO_ID_LEN:
        return None

    video_id = match.group(2)
    origin = EMBED_ORIGIN if origin is None else origin
    return VideoInfo(
        id=video_id,
        embed_url=(
            f"https://www.youtube.com/embed/{video_id}?autoplay=1&mute=0&controls=0&rel=0"
            f"&showinfo=0&modestbranding=1&disablekb=1&fs=0&iv_load_policy=3&origin={origin}"
        ),
        thumbnail_url=f"https://img.youtube.com/vi/{video_id}/maxresdefault.jpg",
        fallback_thumbnail_url=f"https://img.youtube.com/vi/{video_id}/hqdefault.jpg",
        is_music="music.youtube.com" in url,
    )
