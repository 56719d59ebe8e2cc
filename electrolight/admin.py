# electrolight/admin.py
import logging
from typing import Any, Dict, List, Type

from fastapi import APIRouter, Body, Depends, HTTPException, Request, Response
from pydantic import BaseModel, ValidationError

from .auth import authenticate, login_session, logout_session, session_admin
from .deps import get_repository, require_admin
from .errors import InvalidRequest, NotFound
from .normalize import normalize_id
from .repository import CatalogRepository
from .schemas import (
    AdminLogin, AdminOut,
    ProductCreate, ProductUpdate, ProductOut,
    AccessoryCreate, AccessoryUpdate, AccessoryOut,
    CategoryCreate, CategoryUpdate, CategoryOut,
    BrandCreate, BrandUpdate, BrandOut,
    ProjectCreate, ProjectUpdate, ProjectOut,
    HeroImageCreate, HeroImageUpdate, HeroImageOut,
    SiteSettingsUpdate, SiteSettingsOut,
    ContactMessageOut,
)

router = APIRouter(prefix="/api", tags=["admin"])
admin_only = [Depends(require_admin)]


def _parse(schema: Type[BaseModel], payload: Any, label: str) -> BaseModel:
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequest(f"Invalid {label} data: {e}") from e


def _changes(schema: Type[BaseModel], payload: Any, label: str) -> Dict[str, Any]:
    return _parse(schema, payload, label).model_dump(exclude_unset=True)


def _clean_id(id: str, label: str) -> str:
    clean_id = normalize_id(id)
    if not clean_id or clean_id == "undefined":
        raise InvalidRequest(f"Invalid {label} ID provided")
    return clean_id


# ---------------------------------------------------------
# 🔐 Session auth
# ---------------------------------------------------------
@router.post("/admin/login")
def login(request: Request, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    try:
        creds = AdminLogin.model_validate(payload)
    except ValidationError as e:
        raise InvalidRequest("Invalid login data") from e

    admin = authenticate(repo, creds.username, creds.password)
    if admin is None:
        logging.warning(f"❌ Failed admin login for '{creds.username}'")
        raise HTTPException(status_code=401, detail="Invalid credentials")

    login_session(request, admin)
    logging.info(f"✅ Admin '{admin.username}' logged in")
    return {"message": "Login successful", "admin": AdminOut.model_validate(admin).model_dump()}


@router.post("/admin/logout")
def logout(request: Request):
    logout_session(request)
    return {"message": "Logout successful"}


@router.get("/admin/check")
def check(request: Request):
    admin = session_admin(request)
    if admin is None:
        return {"authenticated": False}
    return {"authenticated": True, "admin": admin}


# ---------------------------------------------------------
# 💡 Products
# ---------------------------------------------------------
@router.post("/products", response_model=ProductOut, status_code=201, dependencies=admin_only)
def create_product(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    data = _parse(ProductCreate, payload, "product").model_dump()
    return repo.create_product(data)


@router.put("/products/{id}", response_model=ProductOut, dependencies=admin_only)
def update_product(id: str, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    product = repo.update_product(_clean_id(id, "product"), _changes(ProductUpdate, payload, "product"))
    if product is None:
        raise NotFound("Product not found")
    return product


@router.delete("/products/{id}", dependencies=admin_only)
def delete_product(id: str, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_product(_clean_id(id, "product")):
        raise NotFound("Product not found")
    return {"message": "Product deleted successfully"}


# ---------------------------------------------------------
# 🔌 Accessories
# ---------------------------------------------------------
@router.post("/accessories", response_model=AccessoryOut, status_code=201, dependencies=admin_only)
def create_accessory(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    data = _parse(AccessoryCreate, payload, "accessory").model_dump()
    return repo.create_accessory(data)


@router.put("/accessories/{id}", response_model=AccessoryOut, dependencies=admin_only)
def update_accessory(id: str, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    accessory = repo.update_accessory(_clean_id(id, "accessory"), _changes(AccessoryUpdate, payload, "accessory"))
    if accessory is None:
        raise NotFound("Accessory not found")
    return accessory


@router.delete("/accessories/{id}", dependencies=admin_only)
def delete_accessory(id: str, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_accessory(_clean_id(id, "accessory")):
        raise NotFound("Accessory not found")
    return {"message": "Accessory deleted successfully"}


# ---------------------------------------------------------
# 🗂️ Categories
# ---------------------------------------------------------
@router.post("/categories", response_model=CategoryOut, status_code=201, dependencies=admin_only)
def create_category(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    return repo.create_category(_parse(CategoryCreate, payload, "category").model_dump())


@router.put("/categories/{id}", response_model=CategoryOut, dependencies=admin_only)
def update_category(id: str, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    category = repo.update_category(_clean_id(id, "category"), _changes(CategoryUpdate, payload, "category"))
    if category is None:
        raise NotFound("Category not found")
    return category


@router.delete("/categories/{id}", status_code=204, dependencies=admin_only)
def delete_category(id: str, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_category(_clean_id(id, "category")):
        raise NotFound("Category not found")
    return Response(status_code=204)


# ---------------------------------------------------------
# 🏷️ Brands
# ---------------------------------------------------------
@router.post("/brands", response_model=BrandOut, status_code=201, dependencies=admin_only)
def create_brand(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    return repo.create_brand(_parse(BrandCreate, payload, "brand").model_dump())


@router.put("/brands/{id}", response_model=BrandOut, dependencies=admin_only)
def update_brand(id: str, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    brand = repo.update_brand(_clean_id(id, "brand"), _changes(BrandUpdate, payload, "brand"))
    if brand is None:
        raise NotFound("Brand not found")
    return brand


@router.delete("/brands/{id}", status_code=204, dependencies=admin_only)
def delete_brand(id: str, repo: CatalogRepository = Depends(get_repository)):
    if not repo.deactivate_brand(_clean_id(id, "brand")):
        raise NotFound("Brand not found")
    return Response(status_code=204)


# ---------------------------------------------------------
# 🏗️ Projects
# ---------------------------------------------------------
@router.post("/admin/projects", response_model=ProjectOut, status_code=201, dependencies=admin_only)
def create_project(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    return repo.create_project(_parse(ProjectCreate, payload, "project").model_dump())


@router.put("/admin/projects/{id}", response_model=ProjectOut, dependencies=admin_only)
def update_project(id: str, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    project = repo.update_project(_clean_id(id, "project"), _changes(ProjectUpdate, payload, "project"))
    if project is None:
        raise NotFound("Project not found")
    return project


@router.delete("/admin/projects/{id}", status_code=204, dependencies=admin_only)
def delete_project(id: str, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_project(_clean_id(id, "project")):
        raise NotFound("Project not found")
    return Response(status_code=204)


# ---------------------------------------------------------
# 🖼️ Hero images
# ---------------------------------------------------------
@router.post("/hero-images", response_model=HeroImageOut, status_code=201, dependencies=admin_only)
def create_hero_image(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    return repo.create_hero_image(_parse(HeroImageCreate, payload, "hero image").model_dump())


@router.put("/hero-images/{id}", response_model=HeroImageOut, dependencies=admin_only)
def update_hero_image(id: str, payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    hero = repo.update_hero_image(_clean_id(id, "hero image"), _changes(HeroImageUpdate, payload, "hero image"))
    if hero is None:
        raise NotFound("Hero image not found")
    return hero


@router.delete("/hero-images/{id}", dependencies=admin_only)
def delete_hero_image(id: str, repo: CatalogRepository = Depends(get_repository)):
    if not repo.delete_hero_image(_clean_id(id, "hero image")):
        raise NotFound("Hero image not found")
    return {"message": "Hero image deleted successfully"}


# ---------------------------------------------------------
# ⚙️ Site settings
# ---------------------------------------------------------
@router.post("/site-settings", response_model=SiteSettingsOut, dependencies=admin_only)
def save_site_settings(payload: Any = Body(None), repo: CatalogRepository = Depends(get_repository)):
    settings = repo.save_site_settings(_changes(SiteSettingsUpdate, payload, "settings"))
    logging.info("✅ Site settings updated")
    return settings


# ---------------------------------------------------------
# ✉️ Contact messages
# ---------------------------------------------------------
@router.get("/contact-messages", response_model=List[ContactMessageOut], dependencies=admin_only)
def list_contact_messages(repo: CatalogRepository = Depends(get_repository)):
    return repo.list_contact_messages()
