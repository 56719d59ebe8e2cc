import uuid
from datetime import datetime, timezone

from sqlalchemy import Column, String, Text, Integer, Boolean
from sqlalchemy.types import JSON
from .db import Base


def new_id() -> str:
    return str(uuid.uuid4())


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class Product(Base):
    __tablename__ = "products"

    # pk is the storage order; id is what the API exposes
    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, nullable=False, index=True)
    description = Column(Text, nullable=False)
    specifications = Column(Text, nullable=True)     # legacy free text
    specification_list = Column(JSON, nullable=True) # list[str] for the spec table
    category_slug = Column(String, nullable=False, index=True)
    brand = Column(String, nullable=True, index=True)

    # Images
    image_url = Column(Text, nullable=False)
    image_urls = Column(JSON, nullable=True)

    accessories = Column(JSON, nullable=True)        # accessory ids
    similar_products = Column(JSON, nullable=True)   # unused cache, kept for compatibility
    in_stock = Column(Boolean, default=True)
    featured = Column(Boolean, default=False)


class Accessory(Base):
    __tablename__ = "accessories"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, nullable=False, index=True)
    model_number = Column(String, nullable=True)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)
    image_urls = Column(JSON, nullable=True)
    brand = Column(String, nullable=True)
    compatible_with = Column(JSON, nullable=True)    # category slugs
    created_at = Column(String, default=now_iso)


class Category(Base):
    __tablename__ = "categories"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, nullable=False)
    slug = Column(String, unique=True, nullable=False)
    image_url = Column(Text, nullable=False)
    featured = Column(Boolean, default=False)


class Brand(Base):
    __tablename__ = "brands"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    name = Column(String, unique=True, nullable=False)
    description = Column(Text, nullable=True)
    website = Column(String, nullable=True)
    is_active = Column(Boolean, default=True)
    created_at = Column(String, default=now_iso)


class AdminUser(Base):
    __tablename__ = "admin_users"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    username = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)        # bcrypt hash
    email = Column(String, unique=True, nullable=False)
    is_active = Column(Boolean, default=True)
    created_at = Column(String, default=now_iso)


class ContactMessage(Base):
    __tablename__ = "contact_messages"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=True)
    message = Column(Text, nullable=False)
    submitted_at = Column(String, default=now_iso)


class Project(Base):
    __tablename__ = "projects"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String, nullable=False)        # Commercial, Industrial, Residential...
    location = Column(String, nullable=False)
    completed_date = Column(String, nullable=False)
    client_type = Column(String, nullable=False)

    # Media
    primary_media_url = Column(Text, nullable=True)
    additional_media_urls = Column(JSON, nullable=True)
    image_urls = Column(JSON, nullable=True)         # legacy gallery

    products_used = Column(JSON, nullable=True)      # product ids
    featured = Column(Boolean, default=False)
    created_at = Column(String, default=now_iso)
    updated_at = Column(String, default=now_iso)


class HeroImage(Base):
    __tablename__ = "hero_images"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, index=True, nullable=False, default=new_id)
    title = Column(String, nullable=False)
    image_url = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True)
    order = Column(Integer, default=0)
    created_at = Column(String, default=now_iso)
    updated_at = Column(String, default=now_iso)


SITE_SETTINGS_ID = "default_settings"


class SiteSettings(Base):
    __tablename__ = "site_settings"

    pk = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False, default=SITE_SETTINGS_ID)
    phone_number = Column(String, nullable=True)
    email = Column(String, nullable=True)
    address = Column(Text, nullable=True)
    hours = Column(String, nullable=True)
    facebook_url = Column(String, nullable=True)
    twitter_url = Column(String, nullable=True)
    linkedin_url = Column(String, nullable=True)
    instagram_url = Column(String, nullable=True)
    footer_text = Column(Text, nullable=True)
    updated_at = Column(String, default=now_iso)
