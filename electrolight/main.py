# electrolight/main.py
import os
import logging
from contextlib import asynccontextmanager
from typing import Any, List, Optional, Union

from fastapi import FastAPI, Body, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .db import Base, engine, SessionLocal
from .models import Accessory
from .schemas import (
    ProductOut, AccessoryOut, CategoryOut, BrandOut,
    ProjectOut, HeroImageOut, SiteSettingsOut,
    ContactMessageCreate, ContactMessageOut, SearchResponse,
)
from .repository import CatalogRepository
from .deps import add_cors, add_sessions, add_request_logging, get_repository
from .errors import CatalogError, InvalidRequest, NotFound
from .normalize import normalize_id
from .similarity import similar_products
from .search import combined_search
from .seed import seed_basic_data
from . import admin

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s",
)

SEED_ON_STARTUP = os.getenv("SEED_ON_STARTUP", "true").lower() in {"1", "true", "yes"}

# ---------------------------------------------------------
# 🚀 Initialization
# ---------------------------------------------------------
Base.metadata.create_all(bind=engine)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_basic_data(CatalogRepository(db))
        except SQLAlchemyError:
            logging.exception("❌ Error seeding database")
        finally:
            db.close()
    yield


app = FastAPI(title="ElectroLight Catalog API", version="1.0.0", lifespan=lifespan)
add_cors(app)
add_sessions(app)
add_request_logging(app)
app.include_router(admin.router)


# ---------------------------------------------------------
# ⚠️ Error responses: always {"message": ...}
# ---------------------------------------------------------
@app.exception_handler(CatalogError)
async def catalog_error_handler(request: Request, exc: CatalogError):
    return JSONResponse(status_code=exc.status_code, content={"message": str(exc)})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": "Invalid request data"})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logging.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": "Internal Server Error"})


# ---------------------------------------------------------
# 🩺 Health check
# ---------------------------------------------------------
@app.get("/health")
def health():
    return {"status": "ok"}


# ---------------------------------------------------------
# 💡 Products
# ---------------------------------------------------------
def _accessory_as_product(accessory: Accessory) -> ProductOut:
    """Accessory detail rendered in product shape for the product page."""
    return ProductOut(
        id=accessory.id,
        name=accessory.name,
        description=accessory.description,
        brand=accessory.brand,
        image_url=accessory.image_url,
        image_urls=[],
        category_slug="accessories",
        specification_list=[f"Model: {accessory.model_number}"] if accessory.model_number else [],
        accessories=[],
        similar_products=[],
        in_stock=True,
        featured=False,
    )


@app.get("/api/products", response_model=List[ProductOut])
def list_products(category: Optional[str] = None, repo: CatalogRepository = Depends(get_repository)):
    return repo.list_products(category)


@app.get("/api/products/{id}/similar", response_model=List[ProductOut])
def get_similar_products(id: str, repo: CatalogRepository = Depends(get_repository)):
    clean_id = normalize_id(id)
    try:
        return similar_products(repo, clean_id)
    except NotFound:
        logging.warning(f"❌ Similar lookup for unknown product id='{clean_id}'")
        raise
    except SQLAlchemyError as e:
        logging.exception("❌ Error fetching similar products")
        raise HTTPException(status_code=500, detail="Failed to fetch similar products") from e


@app.get("/api/products/{id}", response_model=ProductOut)
def get_product(id: str, repo: CatalogRepository = Depends(get_repository)):
    clean_id = normalize_id(id)

    product = repo.get_product(clean_id)
    if product is not None:
        return product

    # not a product; maybe an accessory opened from search results
    accessory = repo.get_accessory(clean_id)
    if accessory is not None:
        return _accessory_as_product(accessory)

    logging.warning(f"❌ Product not found. raw='{id}' normalized='{clean_id}'")
    raise NotFound("Product not found")


# ---------------------------------------------------------
# 🔍 Search Endpoint
# ---------------------------------------------------------
@app.get("/api/search", response_model=SearchResponse)
def search(q: Union[str, None] = None, repo: CatalogRepository = Depends(get_repository)):
    if not q or not q.strip():
        return SearchResponse(products=[], accessories=[])
    try:
        found = combined_search(q, repo.list_products(), repo.list_accessories())
    except SQLAlchemyError as e:
        logging.exception("❌ Error in search")
        raise HTTPException(status_code=500, detail="Search failed") from e
    return SearchResponse(
        products=[ProductOut.model_validate(p) for p in found["products"]],
        accessories=[AccessoryOut.model_validate(a) for a in found["accessories"]],
    )


# ---------------------------------------------------------
# 🔌 Accessories / Categories / Brands
# ---------------------------------------------------------
@app.get("/api/accessories", response_model=List[AccessoryOut])
def list_accessories(repo: CatalogRepository = Depends(get_repository)):
    return repo.list_accessories()


@app.get("/api/accessories/{id}", response_model=AccessoryOut)
def get_accessory(id: str, repo: CatalogRepository = Depends(get_repository)):
    accessory = repo.get_accessory(normalize_id(id))
    if accessory is None:
        raise NotFound("Accessory not found")
    return accessory


@app.get("/api/categories", response_model=List[CategoryOut])
def list_categories(repo: CatalogRepository = Depends(get_repository)):
    return repo.list_categories()


@app.get("/api/brands", response_model=List[BrandOut])
def list_brands(repo: CatalogRepository = Depends(get_repository)):
    return repo.list_brands()


# ---------------------------------------------------------
# 🏗️ Projects / Hero images / Site settings
# ---------------------------------------------------------
@app.get("/api/projects", response_model=List[ProjectOut])
def list_projects(repo: CatalogRepository = Depends(get_repository)):
    return repo.list_projects()


@app.get("/api/projects/{id}", response_model=ProjectOut)
def get_project(id: str, repo: CatalogRepository = Depends(get_repository)):
    project = repo.get_project(normalize_id(id))
    if project is None:
        raise NotFound("Project not found")
    return project


@app.get("/api/hero-images", response_model=List[HeroImageOut])
def list_hero_images(repo: CatalogRepository = Depends(get_repository)):
    return repo.list_hero_images()


@app.get("/api/hero-images/{id}", response_model=HeroImageOut)
def get_hero_image(id: str, repo: CatalogRepository = Depends(get_repository)):
    hero = repo.get_hero_image(normalize_id(id))
    if hero is None:
        raise NotFound("Hero image not found")
    return hero


@app.get("/api/site-settings", response_model=SiteSettingsOut)
def get_site_settings(repo: CatalogRepository = Depends(get_repository)):
    return repo.get_site_settings()


# ---------------------------------------------------------
# ✉️ Contact form
# ---------------------------------------------------------
@app.post("/api/contact", response_model=ContactMessageOut, status_code=201)
def submit_contact(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    try:
        message = ContactMessageCreate.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequest("Invalid contact message data") from e
    return repo.create_contact_message(message.model_dump())


if __name__ == "__main__":
    import uvicorn

    port = int(os.environ.get("PORT", 10000))
    uvicorn.run("electrolight.main:app", host="0.0.0.0", port=port, log_level="info")
