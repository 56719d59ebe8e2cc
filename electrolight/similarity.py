"""
Heuristic "similar products" ranking.

A candidate's score against a subject is a weighted sum of four signals:

    category match        0.4
    brand match           0.3
    specification overlap 0.2 * ratio
    name word overlap     0.1 * ratio

Items may be ORM rows, pydantic models or plain dicts; only
``category_slug``, ``brand``, ``specification_list`` and ``name`` are read.
"""
from typing import Any, Iterable, List

from .errors import NotFound
from .normalize import field, first_token, name_words

CATEGORY_WEIGHT = 0.4
BRAND_WEIGHT = 0.3
SPEC_WEIGHT = 0.2
NAME_WEIGHT = 0.1

SIMILARITY_THRESHOLD = 0.3
SIMILAR_LIMIT = 3
MIN_NAME_WORD_LEN = 3


def _specs_match(subject_spec: str, candidate_spec: str) -> bool:
    a = subject_spec.lower()
    b = candidate_spec.lower()
    return first_token(candidate_spec) in a or first_token(subject_spec) in b


def _spec_overlap(subject_specs: List[str], candidate_specs: List[str]) -> float:
    # the subject's list drives the count; the denominator is the longer list
    common = sum(
        1 for spec in subject_specs
        if any(_specs_match(spec, other) for other in candidate_specs)
    )
    return common / max(len(subject_specs), len(candidate_specs))


def _name_overlap(subject_name, candidate_name) -> float:
    words1 = name_words(subject_name)
    words2 = name_words(candidate_name)
    common = [w for w in words1 if len(w) > MIN_NAME_WORD_LEN and w in words2]
    if not common:
        return 0.0
    return len(common) / max(len(words1), len(words2))


def calculate_similarity_score(subject: Any, candidate: Any) -> float:
    """Score in [0, 1] of how alike `candidate` is to `subject`."""
    score = 0.0

    if field(subject, "category_slug") == field(candidate, "category_slug"):
        score += CATEGORY_WEIGHT

    brand1 = field(subject, "brand")
    brand2 = field(candidate, "brand")
    if brand1 and brand2 and brand1 == brand2:
        score += BRAND_WEIGHT

    specs1 = [str(s) for s in field(subject, "specification_list") or []]
    specs2 = [str(s) for s in field(candidate, "specification_list") or []]
    if specs1 and specs2:
        score += SPEC_WEIGHT * _spec_overlap(specs1, specs2)

    score += NAME_WEIGHT * _name_overlap(field(subject, "name"), field(candidate, "name"))

    return min(score, 1.0)


def find_similar_items(
    subject: Any,
    candidates: Iterable[Any],
    limit: int = SIMILAR_LIMIT,
    threshold: float = SIMILARITY_THRESHOLD,
) -> List[Any]:
    """
    Rank `candidates` against `subject` and return the best `limit` items
    scoring strictly above `threshold`. The subject (matched by id) is skipped
    and equal scores keep their catalog order.
    """
    subject_id = field(subject, "id")
    scored = []
    for item in candidates:
        if field(item, "id") == subject_id:
            continue
        score = calculate_similarity_score(subject, item)
        if score > threshold:
            scored.append((score, item))

    scored.sort(key=lambda pair: pair[0], reverse=True)
    return [item for _, item in scored[:limit]]


def similar_products(repository, product_id: str) -> List[Any]:
    """Similar products for `product_id`; raises NotFound for unknown ids."""
    product = repository.get_product(product_id)
    if product is None:
        raise NotFound("Product not found")
    return find_similar_items(product, repository.list_products())
