"""
Schéma du manifest JSON — format d'échange d'un post (éditeur ↔ stockage).
ManifestPost → parse_post() → Post (blocs typés + seedés)

Exemple minimal :
{
  "title": "Les meilleurs casques 2026",
  "lang": "tr",
  "activeSort": "asc",
  "blocks": [
    {"kind": "review", "title": "Verdict"},
    {"kind": "poll", "variantData": {"columns": 3}},
    {"kind": "social", "variantData": {"embedSource": "https://x.com/user/status/1"}}
  ]
}
"""
from typing import List, Optional

from pydantic import ConfigDict, Field

from ..blocks import PostModel
from ..core.i18n import DEFAULT_LANG
from ..core.schemas import SortOrder


class ManifestBlock(PostModel):
    """Bloc brut : `kind` + champs libres validés ensuite par la classe du kind."""
    model_config = ConfigDict(extra="allow")
    kind: str


class ManifestPost(PostModel):
    id: Optional[str] = None
    title: str = ""
    lang: str = DEFAULT_LANG
    active_sort: Optional[SortOrder] = "asc"
    blocks: List[ManifestBlock] = Field(default_factory=list)
