import logging
from typing import Any, Dict, List, Optional, Type

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from .db import Base
from .errors import InvalidRequest
from .models import (
    Product, Accessory, Category, Brand, AdminUser, ContactMessage,
    Project, HeroImage, SiteSettings, SITE_SETTINGS_ID, new_id, now_iso,
)


class CatalogRepository:
    """
    Read/write access to the catalog tables for one request.

    Lists come back in storage order (`pk`) unless noted otherwise; ranking
    and search rely on that order.
    """

    def __init__(self, db: Session):
        self.db = db

    # ---- generic helpers ----
    def _all(self, model: Type[Base], *where, order_by=None) -> List[Any]:
        ordering = order_by if order_by is not None else model.pk
        if not isinstance(ordering, tuple):
            ordering = (ordering,)
        stmt = select(model).where(*where).order_by(*ordering)
        return list(self.db.execute(stmt).scalars().all())

    def _get(self, model: Type[Base], id: str):
        if not id:
            return None
        return self.db.execute(select(model).where(model.id == id)).scalar_one_or_none()

    def _commit(self, model: Type[Base]) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logging.warning(f"❌ {model.__name__} write rejected: {e.orig}")
            raise InvalidRequest(f"{model.__name__} conflicts with an existing record") from e

    def _create(self, model: Type[Base], data: Dict[str, Any]):
        obj = model(id=new_id(), **data)
        self.db.add(obj)
        self._commit(model)
        self.db.refresh(obj)
        logging.info(f"✅ Created {model.__name__} id={obj.id}")
        return obj

    def _update(self, model: Type[Base], id: str, data: Dict[str, Any]):
        obj = self._get(model, id)
        if obj is None:
            return None
        for key, value in data.items():
            setattr(obj, key, value)
        if hasattr(model, "updated_at"):
            obj.updated_at = now_iso()
        self._commit(model)
        self.db.refresh(obj)
        return obj

    def _delete(self, model: Type[Base], id: str) -> bool:
        obj = self._get(model, id)
        if obj is None:
            return False
        self.db.delete(obj)
        self.db.commit()
        logging.info(f"🗑️ Deleted {model.__name__} id={id}")
        return True

    # ---- products ----
    def list_products(self, category_slug: Optional[str] = None) -> List[Product]:
        if category_slug and category_slug != "undefined":
            return self._all(Product, Product.category_slug == category_slug)
        return self._all(Product)

    def get_product(self, id: str) -> Optional[Product]:
        return self._get(Product, id)

    def create_product(self, data: Dict[str, Any]) -> Product:
        return self._create(Product, data)

    def update_product(self, id: str, data: Dict[str, Any]) -> Optional[Product]:
        return self._update(Product, id, data)

    def delete_product(self, id: str) -> bool:
        return self._delete(Product, id)

    # ---- accessories ----
    def list_accessories(self) -> List[Accessory]:
        return self._all(Accessory)

    def get_accessory(self, id: str) -> Optional[Accessory]:
        return self._get(Accessory, id)

    def create_accessory(self, data: Dict[str, Any]) -> Accessory:
        return self._create(Accessory, data)

    def update_accessory(self, id: str, data: Dict[str, Any]) -> Optional[Accessory]:
        return self._update(Accessory, id, data)

    def delete_accessory(self, id: str) -> bool:
        return self._delete(Accessory, id)

    # ---- categories ----
    def list_categories(self) -> List[Category]:
        return self._all(Category)

    def get_category_by_slug(self, slug: str) -> Optional[Category]:
        return self.db.execute(select(Category).where(Category.slug == slug)).scalar_one_or_none()

    def count_categories(self) -> int:
        return self.db.execute(select(func.count()).select_from(Category)).scalar_one()

    def create_category(self, data: Dict[str, Any]) -> Category:
        return self._create(Category, data)

    def update_category(self, id: str, data: Dict[str, Any]) -> Optional[Category]:
        return self._update(Category, id, data)

    def delete_category(self, id: str) -> bool:
        return self._delete(Category, id)

    # ---- brands ----
    def list_brands(self) -> List[Brand]:
        """Active brands only, alphabetical."""
        return self._all(Brand, Brand.is_active.is_(True), order_by=Brand.name)

    def count_brands(self) -> int:
        return self.db.execute(select(func.count()).select_from(Brand)).scalar_one()

    def create_brand(self, data: Dict[str, Any]) -> Brand:
        return self._create(Brand, data)

    def update_brand(self, id: str, data: Dict[str, Any]) -> Optional[Brand]:
        return self._update(Brand, id, data)

    def deactivate_brand(self, id: str) -> bool:
        # soft delete: the row stays, it just drops out of list_brands
        brand = self._get(Brand, id)
        if brand is None or not brand.is_active:
            return False
        brand.is_active = False
        self.db.commit()
        return True

    # ---- contact messages ----
    def create_contact_message(self, data: Dict[str, Any]) -> ContactMessage:
        return self._create(ContactMessage, data)

    def list_contact_messages(self) -> List[ContactMessage]:
        """Newest first."""
        return self._all(ContactMessage, order_by=ContactMessage.pk.desc())

    # ---- admin users ----
    def get_admin_by_username(self, username: str) -> Optional[AdminUser]:
        stmt = select(AdminUser).where(AdminUser.username == username, AdminUser.is_active.is_(True))
        return self.db.execute(stmt).scalar_one_or_none()

    def get_admin(self, id: str) -> Optional[AdminUser]:
        return self._get(AdminUser, id)

    def create_admin(self, data: Dict[str, Any]) -> AdminUser:
        return self._create(AdminUser, data)

    # ---- projects ----
    def list_projects(self) -> List[Project]:
        """Newest first."""
        return self._all(Project, order_by=Project.pk.desc())

    def get_project(self, id: str) -> Optional[Project]:
        return self._get(Project, id)

    def create_project(self, data: Dict[str, Any]) -> Project:
        return self._create(Project, data)

    def update_project(self, id: str, data: Dict[str, Any]) -> Optional[Project]:
        return self._update(Project, id, data)

    def delete_project(self, id: str) -> bool:
        return self._delete(Project, id)

    # ---- hero images ----
    def list_hero_images(self) -> List[HeroImage]:
        """Carousel order, newest first within the same slot."""
        return self._all(HeroImage, order_by=(HeroImage.order.asc(), HeroImage.pk.desc()))

    def get_hero_image(self, id: str) -> Optional[HeroImage]:
        return self._get(HeroImage, id)

    def create_hero_image(self, data: Dict[str, Any]) -> HeroImage:
        return self._create(HeroImage, data)

    def update_hero_image(self, id: str, data: Dict[str, Any]) -> Optional[HeroImage]:
        return self._update(HeroImage, id, data)

    def delete_hero_image(self, id: str) -> bool:
        return self._delete(HeroImage, id)

    # ---- site settings ----
    def get_site_settings(self) -> SiteSettings:
        # single record, created empty on first read
        settings = self._get(SiteSettings, SITE_SETTINGS_ID)
        if settings is None:
            settings = SiteSettings(id=SITE_SETTINGS_ID)
            self.db.add(settings)
            self._commit(SiteSettings)
            self.db.refresh(settings)
        return settings

    def save_site_settings(self, data: Dict[str, Any]) -> SiteSettings:
        self.get_site_settings()
        return self._update(SiteSettings, SITE_SETTINGS_ID, data)
