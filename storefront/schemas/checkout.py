from pydantic import BaseModel, Field
from typing import List, Optional

from storefront.schemas.shipping import ShippingQuote


class CartItem(BaseModel):
    product_id: str
    name: str
    price: int = Field(ge=0)
    quantity: int = Field(ge=1)
    variant: Optional[str] = None


class CheckoutRequest(BaseModel):
    items: List[CartItem]
    city: str = ""


class CheckoutSummary(BaseModel):
    subtotal: int
    city: str
    shipping: Optional[ShippingQuote] = None
    known_city: bool = False
    total: int
