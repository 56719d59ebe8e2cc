# scripts/load_catalog.py
import os, sys, json, logging
import pandas as pd
from sqlalchemy import select
from sqlalchemy.orm import Session

from electrolight.db import Base, make_engine, DATABASE_URL
from electrolight.models import Product, Accessory, new_id

logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

# column in the file -> model attribute
PRODUCT_COLUMNS = {
    "name": "name", "description": "description", "specifications": "specifications",
    "specificationList": "specification_list", "categorySlug": "category_slug",
    "brand": "brand", "imageUrl": "image_url", "imageUrls": "image_urls",
    "accessories": "accessories", "inStock": "in_stock", "featured": "featured",
}
ACCESSORY_COLUMNS = {
    "name": "name", "modelNumber": "model_number", "description": "description",
    "imageUrl": "image_url", "imageUrls": "image_urls", "brand": "brand",
    "compatibleWith": "compatible_with",
}
LIST_FIELDS = {"specification_list", "image_urls", "accessories", "compatible_with"}
BOOL_FIELDS = {"in_stock", "featured"}

KINDS = {
    "products": (Product, PRODUCT_COLUMNS),
    "accessories": (Accessory, ACCESSORY_COLUMNS),
}


def is_missing(v) -> bool:
    if v is None:
        return True
    if isinstance(v, float) and pd.isna(v):
        return True
    return False


def parse_list(v):
    """Accept list as-is; if string that looks like JSON list -> json.loads; if comma string -> split; else None"""
    if is_missing(v): return None
    if isinstance(v, list): return [str(x) for x in v]
    if isinstance(v, str):
        v = v.strip()
        if not v: return None
        if v.startswith("[") and v.endswith("]"):
            try: return [str(x) for x in json.loads(v)]
            except json.JSONDecodeError: pass
        if "," in v:
            return [p.strip() for p in v.split(",") if p.strip()]
        return [v]
    return None


def parse_bool(v, default=None):
    if is_missing(v): return default
    if isinstance(v, bool): return v
    return str(v).strip().lower() in {"1", "true", "yes", "y"}


def row_to_fields(row, columns) -> dict:
    """Only map known columns; missing ones are left out so upserts keep stored values."""
    fields = {}
    for col, attr in columns.items():
        if col not in row:
            continue
        v = row[col]
        if attr in LIST_FIELDS:
            v = parse_list(v)
        elif attr in BOOL_FIELDS:
            v = parse_bool(v)
        elif is_missing(v):
            v = None
        else:
            v = str(v)
        if v is not None:
            fields[attr] = v
    return fields


def read_frame(path: str) -> pd.DataFrame:
    if path.lower().endswith(".json"):
        return pd.read_json(path, orient="records", dtype=False)
    return pd.read_csv(path)


def load_frame(session: Session, kind: str, df: pd.DataFrame) -> int:
    """Upsert every row of `df` by id; returns the number of rows written."""
    model, columns = KINDS[kind]
    count = 0
    for _, r in df.iterrows():
        row = r.to_dict()
        raw_id = row.get("id")
        item_id = str(raw_id) if not is_missing(raw_id) and str(raw_id).strip() else None
        fields = row_to_fields(row, columns)

        existing = None
        if item_id:
            existing = session.execute(select(model).where(model.id == item_id)).scalar_one_or_none()
        if existing is not None:
            for k, v in fields.items():
                setattr(existing, k, v)
        else:
            session.add(model(id=item_id or new_id(), **fields))
        count += 1
    session.commit()
    return count


def main(kind: str, path: str):
    if kind not in KINDS:
        raise SystemExit(f"Unknown kind '{kind}', expected one of: {', '.join(KINDS)}")
    engine = make_engine(os.getenv("DATABASE_URL", DATABASE_URL))
    Base.metadata.create_all(bind=engine)
    df = read_frame(path)
    with Session(engine) as session:
        n = load_frame(session, kind, df)
    logging.info(f"✅ {n} {kind} loaded from {path}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python scripts/load_catalog.py <products|accessories> data/sample_products.json")
        sys.exit(1)
    main(sys.argv[1], sys.argv[2])
