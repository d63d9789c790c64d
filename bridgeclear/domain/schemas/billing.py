"""Pydantic schemas for the billing catalog and checkout."""

from typing import Any, Generic, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

T = TypeVar("T")


class PriceRead(BaseModel):
    id: str
    product: Optional[str] = None
    active: Optional[bool] = None
    currency: Optional[str] = None
    unit_amount: Optional[int] = None
    recurring: Optional[dict[str, Any]] = None
    type: Optional[str] = None
    metadata: Optional[dict[str, Any]] = Field(None, validation_alias=AliasChoices("metadata_", "metadata"))

    model_config = ConfigDict(from_attributes=True)


class ProductRead(BaseModel):
    id: str
    name: Optional[str] = None
    description: Optional[str] = None
    active: Optional[bool] = None
    metadata: Optional[dict[str, Any]] = Field(None, validation_alias=AliasChoices("metadata_", "metadata"))

    model_config = ConfigDict(from_attributes=True)


class ProductWithPrices(ProductRead):
    prices: list[PriceRead] = []


class SubscriptionRead(BaseModel):
    id: str
    customer: Optional[str] = None
    status: Optional[str] = None
    current_period_end: Optional[int] = None
    metadata: Optional[dict[str, Any]] = Field(None, validation_alias=AliasChoices("metadata_", "metadata"))

    model_config = ConfigDict(from_attributes=True)


class DataEnvelope(BaseModel, Generic[T]):
    data: list[T]


class CatalogPage(BaseModel):
    active: bool = True
    limit: int = Field(20, ge=1, le=100)
    offset: int = Field(0, ge=0)


class CheckoutRequest(BaseModel):
    price_id: str = Field(..., alias="priceId", min_length=1)
    email: str = Field(..., min_length=3)

    model_config = ConfigDict(populate_by_name=True)


class CheckoutResponse(BaseModel):
    url: str
