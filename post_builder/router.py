"""
Router FastAPI — endpoints post_builder.

POST /post-builder/render          → ManifestPost → HTMLResponse (aperçu)
POST /post-builder/validate        → ManifestPost → {"valid": bool, "error"?}
GET  /post-builder/catalog         → blocs (JSON schemas) + profils éditeur + opérations
POST /post-builder/embed/normalize → {"raw"} → markup + scripts à recréer
POST /post-builder/audio/parse     → {"url"} → VideoInfo | null
POST /post-builder/apply           → {"post", "action"} → nouveau Post
GET  /post-builder/i18n/{lang}     → catalog i18n pour une langue
PUT  /post-builder/posts/{post_id} → enregistre un post
GET  /post-builder/posts/{post_id} → relit un post
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import HTMLResponse, JSONResponse
from pydantic import BaseModel, ValidationError
from sqlalchemy.orm import Session

from .actions import EditAction, apply_action, operations
from .blocks import BLOCK_CLASSES
from .core.i18n import catalog as i18n_catalog_for
from .core.schemas import EDITOR_PROFILES, Post
from .database import get_db, load_post, save_post
from .embed import extract_scripts, normalize_embed, parse_video_url
from .errors import BlockNotDeletableError, PostBuilderError
from .manifest.parser import parse_post
from .manifest.schema import ManifestPost
from .renderer.html import render_post

log = logging.getLogger(__name__)

router = APIRouter(prefix="/post-builder", tags=["post_builder"])


class EmbedRequest(BaseModel):
    raw: str = ""
    lang: Optional[str] = None


class AudioRequest(BaseModel):
    url: str = ""
    origin: Optional[str] = None


class ApplyRequest(BaseModel):
    post: Post
    action: EditAction


def _dump(post: Post) -> dict:
    return post.model_dump(mode="json", by_alias=True)


def _parse_or_422(manifest: ManifestPost) -> Post:
    try:
        return parse_post(manifest)
    except (ValidationError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))


# ── Aperçu / validation ──────────────────────────────────────────────────────

@router.post("/render", response_class=HTMLResponse, summary="Rend un post en HTML")
def render(manifest: ManifestPost) -> HTMLResponse:
    """Reçoit un ManifestPost JSON, retourne l'aperçu HTML complet du post."""
    post = _parse_or_422(manifest)
    return HTMLResponse(content=render_post(post))


@router.post("/validate", summary="Valide un post sans le rendre")
def validate(manifest: ManifestPost) -> dict:
    """Valide la structure d'un post (kinds connus, payloads typés)."""
    try:
        parse_post(manifest)
        return {"valid": True}
    except (ValidationError, ValueError) as e:
        return {"valid": False, "error": str(e)}


@router.get("/catalog", summary="Liste les blocs, profils éditeur et opérations")
def catalog() -> JSONResponse:
    """Catalogue des blocs avec leurs JSON schemas Pydantic."""
    blocks = [
        {"kind": cls.model_fields["kind"].default, "schema": cls.model_json_schema(by_alias=True)}
        for cls in BLOCK_CLASSES
    ]
    editors = {name: profile.model_dump() for name, profile in EDITOR_PROFILES.items()}
    return JSONResponse({"blocks": blocks, "editors": editors, "operations": operations()})


# ── Embeds / médias ──────────────────────────────────────────────────────────

@router.post("/embed/normalize", summary="Normalise une saisie d'embed social")
def embed_normalize(req: EmbedRequest) -> dict:
    markup = normalize_embed(req.raw, req.lang)
    return {
        "markup": markup,
        "scripts": [s.model_dump() for s in extract_scripts(markup)],
    }


@router.post("/audio/parse", summary="Reconnaît une URL YouTube / YouTube Music")
def audio_parse(req: AudioRequest) -> dict:
    video = parse_video_url(req.url, req.origin)
    return {"video": video.model_dump() if video else None}


# ── Édition ──────────────────────────────────────────────────────────────────

@router.post("/apply", summary="Applique une opération d'édition à un post")
def apply(req: ApplyRequest) -> JSONResponse:
    """Retourne le post résultant ; le post reçu n'est jamais modifié."""
    try:
        post = apply_action(req.post, req.action)
    except BlockNotDeletableError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except (PostBuilderError, ValidationError, ValueError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    except TypeError as e:
        # Arguments manquants ou en trop pour l'opération
        raise HTTPException(status_code=400, detail=f"Arguments invalides pour {req.action.op} : {e}")
    return JSONResponse(_dump(post))


@router.get("/i18n/{lang}", summary="Retourne le catalog i18n pour une langue")
def i18n_catalog(lang: str) -> JSONResponse:
    data = i18n_catalog_for(lang)
    if data is None:
        return JSONResponse({"error": f"Langue '{lang}' non disponible"}, status_code=404)
    return JSONResponse(data)


# ── Stockage ─────────────────────────────────────────────────────────────────

@router.put("/posts/{post_id}", summary="Enregistre un post")
def put_post(post_id: str, manifest: ManifestPost, db: Session = Depends(get_db)) -> JSONResponse:
    post = _parse_or_422(manifest.model_copy(update={"id": post_id}))
    save_post(db, post)
    return JSONResponse(_dump(post))


@router.get("/posts/{post_id}", summary="Relit un post enregistré")
def get_post(post_id: str, db: Session = Depends(get_db)) -> JSONResponse:
    post = load_post(db, post_id)
    if post is None:
        return JSONResponse({"error": f"Post '{post_id}' introuvable"}, status_code=404)
    return JSONResponse(_dump(post))
