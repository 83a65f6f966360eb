"""
Renderer HTML — aperçu sémantique d'un Post (aucun thème, classes BEM).
Dispatch par type de bloc ; les champs rich-text (description, verdict…) sont
émis tels quels, les champs texte sont échappés.
"""
from html import escape as _e
from typing import Any

from ..blocks import (
    AudioBlock, BeforeAfterBlock, FileBlock, FlipCardBlock, PollBlock,
    QuizBlock, QuoteBlock, ReviewBlock, SocialBlock, VersusBlock,
)
from ..core.i18n import t
from ..core.schemas import Post
from ..editor.mutator import display_number
from ..editor.quiz import question_ordinals, resolve_result
from ..embed import CANONICAL_WIDTH, normalize_embed, parse_video_url


# ── Point d'entrée public ───────────────────────────────────────────────────

def render_post(post: Post, show_numbers: bool = True, extra_head: str = "", extra_body_end: str = "") -> str:
    """Génère le HTML complet d'un post."""
    blocks_html = "\n".join(
        render_block(block, index, show_numbers=show_numbers, lang=post.lang)
        for index, block in enumerate(post.blocks)
    )
    return f"""<!DOCTYPE html>
<html lang="{_e(post.lang)}">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{_e(post.title)}</title>
  {extra_head}
</head>
<body>
<article class="post">
{blocks_html}
</article>
{extra_body_end}
</body>
</html>"""


# ── Dispatch bloc ────────────────────────────────────────────────────────────

def render_block(block: Any, index: int = 0, show_numbers: bool = False, lang: str | None = None) -> str:
    """Enveloppe commune (numéro, titre, source) + corps propre au kind."""
    if isinstance(block, AudioBlock):         body = render_audio_block(block)
    elif isinstance(block, BeforeAfterBlock): body = render_before_after_block(block)
    elif isinstance(block, FileBlock):        body = render_file_block(block)
    elif isinstance(block, FlipCardBlock):    body = render_flip_card_block(block)
    elif isinstance(block, PollBlock):        body = render_poll_block(block)
    elif isinstance(block, QuizBlock):        body = render_quiz_block(block, lang)
    elif isinstance(block, QuoteBlock):       body = render_quote_block(block)
    elif isinstance(block, ReviewBlock):      body = render_review_block(block, lang)
    elif isinstance(block, SocialBlock):      body = render_social_block(block, lang)
    elif isinstance(block, VersusBlock):      body = render_versus_block(block)
    else:
        return f"<!-- Bloc non implémenté : {getattr(block, 'kind', '?')} -->"

    number_html = (
        f'<span class="block__number">{display_number(block, index)}</span>' if show_numbers else ""
    )
    title_html = f'<h2 class="block__title">{number_html}{_e(block.title)}</h2>' if block.title or show_numbers else ""
    source_html = f'<p class="block__source">{_e(block.source)}</p>' if block.source else ""

    return f"""<section id="block-{_e(block.id)}" class="block block--{block.kind}">
  {title_html}
  {body}
  {source_html}
</section>"""


def _img(src: str, alt: str = "", css: str = "") -> str:
    if not src:
        return ""
    class_attr = f' class="{css}"' if css else ""
    return f'<img src="{_e(src)}" alt="{_e(alt)}"{class_attr}>'


# ── Renderers par kind ───────────────────────────────────────────────────────

def render_audio_block(b: AudioBlock) -> str:
    url = b.variant_data.media_url or b.media_url
    video = parse_video_url(url)
    if video is not None:
        classes = "audio audio--youtube" + (" audio--music" if video.is_music else "")
        return (
            f'<div class="{classes}">'
            f'{_img(video.thumbnail_url, b.title, "audio__cover")}'
            f'<iframe class="audio__player" src="{_e(video.embed_url)}" allow="autoplay" frameborder="0"></iframe>'
            f'</div>'
        )
    if not url:
        return '<div class="audio audio--empty"></div>'
    return f'<div class="audio"><audio class="audio__player" controls src="{_e(url)}"></audio></div>{b.description}'


def render_before_after_block(b: BeforeAfterBlock) -> str:
    d = b.variant_data
    return f"""<figure class="before-after">
  <div class="before-after__side before-after__side--before">{_img(d.before_image, d.before_label)}<span class="before-after__label">{_e(d.before_label)}</span></div>
  <div class="before-after__side before-after__side--after">{_img(d.after_image, d.after_label)}<span class="before-after__label">{_e(d.after_label)}</span></div>
</figure>{b.description}"""


def render_file_block(b: FileBlock) -> str:
    if not b.media_url:
        return f'<div class="file file--empty"></div>{b.description}'
    name = b.media_url.rstrip("/").rsplit("/", 1)[-1]
    return f'<div class="file"><a class="file__link" href="{_e(b.media_url)}" download>{_e(name)}</a></div>{b.description}'


def _flip_face(side: str, image: str, title: str, link: str, description: str) -> str:
    title_html = _e(title)
    if link:
        title_html = f'<a href="{_e(link)}" target="_blank" rel="noopener">{title_html}</a>'
    return f"""<div class="flip-card__face flip-card__face--{side}">
    {_img(image, title)}
    <h3 class="flip-card__title">{title_html}</h3>
    <div class="flip-card__description">{description}</div>
  </div>"""


def render_flip_card_block(b: FlipCardBlock) -> str:
    d = b.variant_data
    front = _flip_face("front", d.front_image, d.front_title, d.front_link, d.front_description)
    back = _flip_face("back", d.back_image, d.back_title, d.back_link, d.back_description)
    return f'<div class="flip-card">\n  {front}\n  {back}\n</div>{b.description}'


def _option_html(option, with_image: bool, css: str) -> str:
    image_html = _img(option.image, option.text, f"{css}__image") if with_image else ""
    return (
        f'<li class="{css}__option" data-option-id="{_e(option.id)}">'
        f'{image_html}<span class="{css}__text">{_e(option.text)}</span>'
        f'<span class="{css}__votes">{option.votes}</span></li>'
    )


def render_poll_block(b: PollBlock) -> str:
    d = b.variant_data
    kind = "image" if d.is_image_poll else "text"
    options_html = "".join(_option_html(o, d.is_image_poll, "poll") for o in d.options)
    return f'{_img(b.media_url, b.title, "poll__cover")}<ul class="poll poll--{kind} poll__grid--{d.columns}col">{options_html}</ul>{b.description}'


def render_versus_block(b: VersusBlock) -> str:
    d = b.variant_data
    if d.left is None:
        return '<div class="versus versus--empty"></div>'
    return (
        f'{_img(b.media_url, b.title, "versus__cover")}<ul class="versus">'
        f'{_option_html(d.left, True, "versus")}'
        f'<li class="versus__separator">VS</li>'
        f'{_option_html(d.right, True, "versus")}</ul>{b.description}'
    )


def render_quiz_block(b: QuizBlock, lang: str | None = None) -> str:
    d = b.variant_data
    ordinals = question_ordinals(d.question_sorting, len(d.questions))

    questions_html = ""
    for question, ordinal in zip(d.questions, ordinals):
        answers_html = ""
        for answer in question.answers:
            extra = ""
            if d.quiz_type == "personality":
                result = resolve_result(d, answer.result_id)
                label = result.title if result is not None else t("quiz.no_result", lang)
                extra = f'<span class="quiz__result">{_e(label)}</span>'
            elif d.quiz_type == "trivia" and answer.is_correct:
                extra = f'<span class="quiz__correct">{_e(t("quiz.correct", lang))}</span>'
            answers_html += (
                f'<li class="quiz__answer">{_img(answer.image, answer.text)}'
                f'<span class="quiz__answer-text">{_e(answer.text)}</span>{extra}</li>'
            )
        ordinal_html = f'<span class="quiz__ordinal">{ordinal}</span>' if ordinal is not None else ""
        questions_html += f"""<div class="quiz__question quiz__question--{question.layout}">
  <h3 class="quiz__question-title">{ordinal_html}{_e(question.title)}</h3>
  {_img(question.image, question.title)}
  <ul class="quiz__answers">{answers_html}</ul>
</div>"""

    results_html = ""
    if d.show_results and d.results:
        results_html = '<div class="quiz__results">' + "".join(
            f'<div class="quiz__result-card">{_img(r.image, r.title)}<h4>{_e(r.title)}</h4>{r.description}</div>'
            for r in d.results
        ) + "</div>"

    return f'<div class="quiz quiz--{d.quiz_type}">{questions_html}{results_html}</div>{b.description}'


def render_quote_block(b: QuoteBlock) -> str:
    cite = f"<cite>{_e(b.source)}</cite>" if b.source else ""
    return f'<blockquote class="quote">{b.description}{cite}</blockquote>'


def render_review_block(b: ReviewBlock, lang: str | None = None) -> str:
    d = b.variant_data
    pros = "".join(f"<li>{_e(p)}</li>" for p in d.pros)
    cons = "".join(f"<li>{_e(c)}</li>" for c in d.cons)
    rows = "".join(
        f'<li class="review__row"><span class="review__row-label">{_e(r.label)}</span>'
        f'<span class="review__row-score">{r.score}</span></li>'
        for r in d.breakdown
    )
    return f"""<div class="review">
  <div class="review__product">{_img(d.product_image, d.product_name)}<h3>{_e(d.product_name)}</h3></div>
  <div class="review__score">{d.score}</div>
  <ul class="review__breakdown">{rows}</ul>
  <div class="review__pros"><h4>{_e(t("review.pros", lang))}</h4><ul>{pros}</ul></div>
  <div class="review__cons"><h4>{_e(t("review.cons", lang))}</h4><ul>{cons}</ul></div>
  <div class="review__verdict">{d.verdict}</div>
</div>{b.description}"""


def render_social_block(b: SocialBlock, lang: str | None = None) -> str:
    markup = normalize_embed(b.variant_data.embed_source, lang)
    return f'<div class="social" style="max-width:{CANONICAL_WIDTH}px">{markup}</div>{b.description}'
