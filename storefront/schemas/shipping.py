from pydantic import BaseModel, ConfigDict, Field

from storefront.core.config import Settings


class CityDistance(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    distance_km: int = Field(ge=0)


class ShippingRates(BaseModel):
    model_config = ConfigDict(frozen=True)

    base_fee: int
    rate_per_km: float
    min_fee: int
    default_distance_km: int = Field(ge=0)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ShippingRates":
        return cls(
            base_fee=settings.BASE_FEE,
            rate_per_km=settings.RATE_PER_KM,
            min_fee=settings.MIN_FEE,
            default_distance_km=settings.DEFAULT_DISTANCE_KM,
        )


class ShippingQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    fee: int
    distance_km: int


class ShippingQuoteOut(BaseModel):
    city: str
    fee: int
    distance_km: int
    known_city: bool


class CityOption(BaseModel):
    name: str
    distance_km: int
    fee: int
