"""Option de sondage / duel — partagée par PollBlock et VersusBlock."""
from pydantic import Field

from .base import PostModel, new_id


class Option(PostModel):
    id: str = Field(default_factory=new_id)
    text: str = ""
    image: str = ""
    votes: int = 0
