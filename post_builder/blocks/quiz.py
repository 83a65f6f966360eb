"""
Bloc Quiz — graphe questions → réponses + liste de résultats.

Les réponses référencent un résultat par id (resultId). Aucune intégrité
référentielle : un resultId orphelin vaut "aucun résultat" à la lecture.
"""
from typing import List, Literal, Optional

from pydantic import Field

from .base import BaseBlock, PostModel, VariantData, new_id

QuizType = Literal["personality", "trivia", "checklist"]
QuestionSorting = Literal["asc", "desc", "hidden"]
QuestionLayout = Literal["list", "grid2", "grid3"]


class QuizResult(PostModel):
    id: str = Field(default_factory=new_id)
    title: str = ""
    image: str = ""
    description: str = ""
    min_score: int = 0
    max_score: int = 0
    answer_count: int = 0


class QuizAnswer(PostModel):
    id: str = Field(default_factory=new_id)
    text: str = ""
    image: str = ""
    result_id: str = ""        # quiz personality uniquement
    is_correct: bool = False   # quiz trivia uniquement


class QuizQuestion(PostModel):
    id: str = Field(default_factory=new_id)
    title: str = ""
    image: str = ""
    description: str = ""
    show_on_cover: bool = True
    layout: QuestionLayout = "list"
    answers: List[QuizAnswer] = []


class QuizData(VariantData):
    quiz_type: QuizType = "personality"
    results: List[QuizResult] = []
    questions: List[QuizQuestion] = []
    question_sorting: QuestionSorting = "asc"
    allow_multiple: bool = False
    show_results: bool = True
    end_date: Optional[str] = None   # date ISO (YYYY-MM-DD)


class QuizBlock(BaseBlock):
    kind: Literal["quiz"] = "quiz"
    variant_data: QuizData = QuizData()
