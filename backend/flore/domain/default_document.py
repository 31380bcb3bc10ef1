"""Seed dataset written the first time the store boots on empty storage."""

from typing import Any

from flore.domain.entities import Category, Product

PRODUCTS = "products"
CATEGORIES = "categories"
ORDERS = "orders"
ANALYTICS = "analytics"
SETTINGS = "settings"
ADMIN = "admin"

# Top-level keys of the document, in serialisation order.
TOP_LEVEL_KEYS = (PRODUCTS, CATEGORIES, ORDERS, ANALYTICS, SETTINGS, ADMIN)

# Keys holding an object rather than a list.
OBJECT_KEYS = frozenset({SETTINGS, ADMIN})

_DEFAULT_PRODUCTS = [
    Product(
        id="1",
        name="Buquê de Rosas Vermelhas",
        description="Elegante buquê com 12 rosas vermelhas frescas, perfeito para demonstrar amor e carinho.",
        price=89.9,
        category="buques",
        image_url="https://images.unsplash.com/photo-1518895949257-7621c3c786d7?w=400&h=300&fit=crop",
        featured=True,
        views=156,
        tags=["romântico", "clássico", "vermelho"],
        active=True,
    ),
    Product(
        id="2",
        name="Arranjo de Girassóis",
        description="Arranjo vibrante com girassóis frescos que trazem alegria e energia positiva.",
        price=65.0,
        category="arranjos",
        image_url="https://images.unsplash.com/photo-1471194402529-8e0f5a675de6?w=400&h=300&fit=crop",
        featured=False,
        views=189,
        tags=["alegre", "amarelo", "energia"],
        active=True,
    ),
]

_DEFAULT_CATEGORIES = [
    Category(id="buques", name="Buquês", description="Buquês elegantes para todas as ocasiões"),
    Category(id="arranjos", name="Arranjos", description="Arranjos florais únicos e criativos"),
]

_DEFAULT_SETTINGS = {
    "siteName": "Florê",
    "siteTagline": "PREMIUM COLLECTION",
    "heroTitle": "Flores que encantam, momentos que marcam.",
    "heroSubtitle": "Arranjos feitos à mão com as flores mais frescas para celebrar a vida.",
    "whatsapp": "5564999999999",
    "address": "Av. Hermógenes Coelho, 812 - Centro\nSão Luís de Montes Belos - GO",
    "hours": "Seg - Sex: 08:00 às 18:00\nSáb: 08:00 às 12:00",
}


def build_default_document(password_hash: str) -> dict[str, Any]:
    """Return a fresh copy of the seed document with the given admin hash."""
    return {
        PRODUCTS: [p.to_document() for p in _DEFAULT_PRODUCTS],
        CATEGORIES: [c.to_document() for c in _DEFAULT_CATEGORIES],
        ORDERS: [],
        ANALYTICS: [],
        SETTINGS: dict(_DEFAULT_SETTINGS),
        ADMIN: {"passwordHash": password_hash},
    }
