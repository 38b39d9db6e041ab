"""
Variant router configuration
"""
from fastapi import APIRouter

from shop.api.endpoints import catch_all, routed, switch

# Router serving each variant
VARIANT_ROUTERS = {
    1: catch_all.router,
    2: switch.router,
    3: routed.router,
}


def get_variant_router(variant: int) -> APIRouter:
    try:
        return VARIANT_ROUTERS[variant]
    except KeyError:
        raise ValueError(f"unknown variant: {variant}") from None
