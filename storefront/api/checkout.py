from fastapi import APIRouter, Depends

from storefront.core.enums import QuoteSource
from storefront.core.metrics import shipping_quotes
from storefront.core.rate_limit import rate_limit
from storefront.schemas.checkout import CheckoutRequest, CheckoutSummary
from storefront.services.checkout import build_summary

router = APIRouter(prefix="/checkout", tags=["checkout"], dependencies=[Depends(rate_limit)])


@router.post("/summary", response_model=CheckoutSummary)
async def checkout_summary(payload: CheckoutRequest):
    summary = build_summary(payload.items, payload.city)

    if summary.shipping is not None:
        source = QuoteSource.TABLE if summary.known_city else QuoteSource.DEFAULT
        shipping_quotes.labels(source=source.value).inc()

    return summary
