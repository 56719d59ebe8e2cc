from typing import Any, Dict, Iterable, List, Optional

from .normalize import contains, field, normalize_query

PRODUCT_LIMIT = 3
ACCESSORY_LIMIT = 2

PRODUCT_FIELDS = ("name", "description", "brand")
ACCESSORY_FIELDS = ("name", "description", "brand", "model_number")


def _matches(item: Any, term: str, fields) -> bool:
    return any(contains(field(item, f), term) for f in fields)


def _first_matches(items: Iterable[Any], term: str, fields, limit: int) -> List[Any]:
    out: List[Any] = []
    for item in items:
        if len(out) >= limit:
            break
        if _matches(item, term, fields):
            out.append(item)
    return out


def combined_search(
    q: Optional[str],
    products: Iterable[Any],
    accessories: Iterable[Any],
    product_limit: int = PRODUCT_LIMIT,
    accessory_limit: int = ACCESSORY_LIMIT,
) -> Dict[str, List[Any]]:
    """
    Plain substring filter over products and accessories.

    No ranking: the first matches in catalog order are returned, capped per
    type. A blank or missing query returns empty lists.
    """
    term = normalize_query(q)
    if not term:
        return {"products": [], "accessories": []}

    return {
        "products": _first_matches(products, term, PRODUCT_FIELDS, product_limit),
        "accessories": _first_matches(accessories, term, ACCESSORY_FIELDS, accessory_limit),
    }
