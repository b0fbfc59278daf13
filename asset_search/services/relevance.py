"""Weighted multi-field relevance scoring."""

from ..models.common import AssetRecord

NAME_MATCH = 10
NAME_EXACT_BONUS = 20
NAME_PREFIX_BONUS = 5
TAG_MATCH = 5
TAG_EXACT_BONUS = 10
DESCRIPTION_MATCH = 3
AI_DESCRIPTION_MATCH = 2
AI_TEXT_MATCH = 1
VIEW_WEIGHT = 0.1
MAX_VIEW_BONUS = 2


def calculate_relevance_score(asset: AssetRecord, query: str) -> float:
    """Additive score of ``asset`` against the raw query; higher is more relevant.

    Tag bonuses repeat for every matching tag. Popular assets get up to
    ``MAX_VIEW_BONUS`` extra regardless of any text match.
    """
    q = query.lower()
    score = 0.0

    name = asset.name.lower()
    if q in name:
        score += NAME_MATCH
        if name == q:
            score += NAME_EXACT_BONUS
        if name.startswith(q):
            score += NAME_PREFIX_BONUS

    for tag in asset.tags:
        tag = tag.lower()
        if q in tag:
            score += TAG_MATCH
            if tag == q:
                score += TAG_EXACT_BONUS

    if q in asset.description.lower():
        score += DESCRIPTION_MATCH
    if asset.ai_description and q in asset.ai_description.lower():
        score += AI_DESCRIPTION_MATCH
    if asset.ai_text_content and q in asset.ai_text_content.lower():
        score += AI_TEXT_MATCH

    if asset.view_count > 0:
        score += min(asset.view_count * VIEW_WEIGHT, MAX_VIEW_BONUS)

    return score
