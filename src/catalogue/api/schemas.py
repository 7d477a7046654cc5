"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- Request Schemas ---


class VariantSchema(BaseModel):
    id: str | None = Field(None, max_length=100)
    label: str = Field(..., max_length=40)
    price: float | str


class UpsertProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "id": "pao-milho",
                    "name": "Pão de Milho Caseiro",
                    "description": "Fubá moído na hora, casquinha dourada.",
                    "price": "14,50",
                    "category": "Pães",
                    "image_url": "https://images.example.com/pao-milho.jpg",
                },
                {
                    "id": "tempero-roca",
                    "name": "Tempero da Roça",
                    "category": "Temperos",
                    "image_url": "data:image/jpeg;base64,/9j/4AAQ...",
                    "variants": [
                        {"id": "tempero-roca-p", "label": "P", "price": 8.0},
                        {"id": "tempero-roca-g", "label": "G", "price": 15.0},
                    ],
                },
            ]
        }
    }

    id: str | None = Field(None, max_length=100)
    name: str | None = Field(None, max_length=255)
    description: str | None = None
    price: float | str | None = None
    category: str | None = Field(None, max_length=100)
    image_url: str | None = None
    variants: list[VariantSchema] | None = None


# --- Response Schemas ---


class VariantResponse(BaseModel):
    id: str
    label: str
    price: float


class ProductResponse(BaseModel):
    id: str
    name: str
    description: str
    price: float | None
    display_price: float | None
    category: str
    image_url: str
    variants: list[VariantResponse] = []


class CategoryGroupResponse(BaseModel):
    category: str
    products: list[ProductResponse]


class StatusResponse(BaseModel):
    status: str = "ok"
