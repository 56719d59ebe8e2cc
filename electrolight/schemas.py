from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List


class CamelModel(BaseModel):
    """Storefront JSON uses camelCase keys; attributes stay snake_case."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _list_or_empty(v):
    return [] if v is None else v


def _not_null(v):
    # explicit null on a required column
    if v is None:
        raise ValueError("may not be null")
    return v


# ---------------------------------------------------------
# Products
# ---------------------------------------------------------
class ProductOut(CamelModel):
    id: str
    name: str
    description: str
    specifications: Optional[str] = None
    specification_list: List[str] = []
    category_slug: str
    brand: Optional[str] = None
    image_url: str
    image_urls: List[str] = []
    accessories: List[str] = []
    similar_products: List[str] = []
    in_stock: bool = True
    featured: bool = False

    @field_validator(
        "specification_list", "image_urls", "accessories", "similar_products", mode="before"
    )
    @classmethod
    def lists_default_empty(cls, v):
        return _list_or_empty(v)


class ProductCreate(CamelModel):
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    specification_list: List[str] = []
    category_slug: str = Field(min_length=1)
    brand: Optional[str] = None
    image_url: str = Field(min_length=1)
    image_urls: List[str] = []
    accessories: List[str] = []
    similar_products: List[str] = []
    in_stock: bool = True
    featured: bool = False


class ProductUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    specification_list: Optional[List[str]] = None
    category_slug: Optional[str] = Field(default=None, min_length=1)
    brand: Optional[str] = None
    image_url: Optional[str] = Field(default=None, min_length=1)
    image_urls: Optional[List[str]] = None
    accessories: Optional[List[str]] = None
    similar_products: Optional[List[str]] = None
    in_stock: Optional[bool] = None
    featured: Optional[bool] = None

    @field_validator("name", "description", "category_slug", "image_url", "in_stock", "featured")
    @classmethod
    def required_not_null(cls, v):
        return _not_null(v)


# ---------------------------------------------------------
# Accessories
# ---------------------------------------------------------
class AccessoryOut(CamelModel):
    id: str
    name: str
    model_number: Optional[str] = None
    description: str
    image_url: str
    image_urls: List[str] = []
    brand: Optional[str] = None
    compatible_with: List[str] = []
    created_at: Optional[str] = None

    @field_validator("image_urls", "compatible_with", mode="before")
    @classmethod
    def lists_default_empty(cls, v):
        return _list_or_empty(v)


class AccessoryCreate(CamelModel):
    name: str = Field(min_length=1)
    model_number: Optional[str] = None
    description: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    image_urls: List[str] = []
    brand: Optional[str] = None
    compatible_with: List[str] = []


class AccessoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    model_number: Optional[str] = None
    description: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = Field(default=None, min_length=1)
    image_urls: Optional[List[str]] = None
    brand: Optional[str] = None
    compatible_with: Optional[List[str]] = None

    @field_validator("name", "description", "image_url")
    @classmethod
    def required_not_null(cls, v):
        return _not_null(v)


# ---------------------------------------------------------
# Categories / Brands
# ---------------------------------------------------------
class CategoryOut(CamelModel):
    id: str
    name: str
    slug: str
    image_url: str
    featured: bool = False


class CategoryCreate(CamelModel):
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    featured: bool = False


class CategoryUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    slug: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = Field(default=None, min_length=1)
    featured: Optional[bool] = None

    @field_validator("name", "slug", "image_url", "featured")
    @classmethod
    def required_not_null(cls, v):
        return _not_null(v)


class BrandOut(CamelModel):
    id: str
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    is_active: bool = True
    created_at: Optional[str] = None


class BrandCreate(CamelModel):
    name: str = Field(min_length=1)
    description: Optional[str] = None
    website: Optional[str] = None
    is_active: bool = True


class BrandUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    website: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("name", "is_active")
    @classmethod
    def required_not_null(cls, v):
        return _not_null(v)


# ---------------------------------------------------------
# Projects / Hero images / Site settings
# ---------------------------------------------------------
def _client_type_from_category(data):
    # older admin forms send only `category`; it wins over clientType
    if isinstance(data, dict) and data.get("category"):
        data = {**data, "clientType": data["category"]}
        data.pop("client_type", None)
    return data


class ProjectOut(CamelModel):
    id: str
    title: str
    description: str
    category: str
    location: str
    primary_media_url: Optional[str] = None
    additional_media_urls: List[str] = []
    completed_date: str
    client_type: str
    image_urls: List[str] = []
    products_used: List[str] = []
    featured: bool = False
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @field_validator("additional_media_urls", "image_urls", "products_used", mode="before")
    @classmethod
    def lists_default_empty(cls, v):
        return _list_or_empty(v)


class ProjectCreate(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: str = Field(min_length=1)
    location: str = Field(min_length=1)
    primary_media_url: Optional[str] = None
    additional_media_urls: List[str] = []
    completed_date: str = Field(min_length=1)
    client_type: str = Field(min_length=1)
    image_urls: List[str] = []
    products_used: List[str] = []
    featured: bool = False

    @model_validator(mode="before")
    @classmethod
    def map_category(cls, data):
        return _client_type_from_category(data)


class ProjectUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    primary_media_url: Optional[str] = None
    additional_media_urls: Optional[List[str]] = None
    completed_date: Optional[str] = Field(default=None, min_length=1)
    client_type: Optional[str] = Field(default=None, min_length=1)
    image_urls: Optional[List[str]] = None
    products_used: Optional[List[str]] = None
    featured: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def map_category(cls, data):
        return _client_type_from_category(data)

    @field_validator("title", "description", "category", "location", "completed_date", "client_type", "featured")
    @classmethod
    def required_not_null(cls, v):
        return _not_null(v)


class HeroImageOut(CamelModel):
    id: str
    title: str
    image_url: str
    description: Optional[str] = None
    is_active: bool = True
    order: int = 0
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


class HeroImageCreate(CamelModel):
    title: str = Field(min_length=1)
    image_url: str = Field(min_length=1)
    description: Optional[str] = None
    is_active: bool = True
    order: int = 0


class HeroImageUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    image_url: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    is_active: Optional[bool] = None
    order: Optional[int] = None

    @field_validator("title", "image_url", "is_active", "order")
    @classmethod
    def required_not_null(cls, v):
        return _not_null(v)


class SiteSettingsUpdate(CamelModel):
    phone_number: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    hours: Optional[str] = None
    facebook_url: Optional[str] = None
    twitter_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    instagram_url: Optional[str] = None
    footer_text: Optional[str] = None


class SiteSettingsOut(SiteSettingsUpdate):
    id: str
    updated_at: Optional[str] = None


# ---------------------------------------------------------
# Contact / Admin
# ---------------------------------------------------------
class ContactMessageCreate(CamelModel):
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: Optional[str] = None
    message: str = Field(min_length=1)


class ContactMessageOut(ContactMessageCreate):
    id: str
    submitted_at: Optional[str] = None


class AdminLogin(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str
    email: Optional[str] = None


# ---------------------------------------------------------
# Search
# ---------------------------------------------------------
class SearchResponse(BaseModel):
    products: List[ProductOut]
    accessories: List[AccessoryOut]
