"""
Seed catalog — static mock data for demos and tests.
"""

from __future__ import annotations

from decimal import Decimal

from storefront.catalog._types import Product, Review


def seed_products() -> tuple[Product, ...]:
    return (
        Product(
            id="p1",
            name="Wireless Headphones",
            description="Over-ear noise cancelling headphones with 30h battery",
            price=Decimal("199.99"),
            category="electronics",
            subcategory="audio",
            images=("/images/headphones-1.jpg", "/images/headphones-2.jpg"),
            stock=5,
            reviews=(
                Review("r1", "u1", "Alice", 5, "Great sound, very comfortable.", "2024-01-12"),
                Review("r2", "u2", "Bob", 4, "Battery lasts forever.", "2024-02-03"),
            ),
        ),
        Product(
            id="p2",
            name="Smart Watch",
            description="Fitness tracking, heart rate and notifications",
            price=Decimal("149.50"),
            category="electronics",
            subcategory="wearables",
            images=("/images/watch-1.jpg",),
            stock=10,
            reviews=(
                Review("r3", "u3", "Carol", 3, "Decent, strap feels cheap.", "2024-03-18"),
            ),
        ),
        Product(
            id="p3",
            name="Leather Backpack",
            description="Handmade leather backpack with laptop sleeve",
            price=Decimal("89.00"),
            category="fashion",
            subcategory="bags",
            images=("/images/backpack-1.jpg", "/images/backpack-2.jpg"),
            stock=3,
        ),
        Product(
            id="p4",
            name="Running Shoes",
            description="Lightweight trainers for road running",
            price=Decimal("120.00"),
            category="fashion",
            subcategory="shoes",
            images=("/images/shoes-1.jpg",),
            stock=0,
        ),
        Product(
            id="p5",
            name="Ceramic Coffee Mug",
            description="Stoneware mug, dishwasher safe",
            price=Decimal("12.50"),
            category="home",
            subcategory="kitchen",
            images=("/images/mug-1.jpg",),
            stock=40,
            reviews=(
                Review("r4", "u4", "Dan", 5, "Keeps coffee warm.", "2024-04-01"),
                Review("r5", "u5", "Eve", 4, "Nice glaze.", "2024-04-20"),
            ),
        ),
    )


__all__ = ("seed_products",)
