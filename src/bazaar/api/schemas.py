"""Pydantic request/response schemas for the Chef Bazaar API."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

OrderStatusValue = Literal["pending", "accepted", "preparing", "ready", "delivered", "cancelled"]


class StatusResponse(BaseModel):
    status: str = "ok"


class IdResponse(BaseModel):
    id: str


# --- Session ---


class SessionRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"id_token": "eyJhbGciOiJSUzI1NiIsImtpZCI6..."}]}}

    id_token: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    success: bool = True
    email: str
    token: str


class LogoutResponse(BaseModel):
    success: bool = True


# --- Accounts ---


class ProfileSyncRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "rina@example.com",
                    "name": "Rina Akter",
                    "photo_url": "https://cdn.example.com/u/rina.jpg",
                    "address": "House 12, Road 4, Dhanmondi, Dhaka",
                }
            ]
        }
    }

    email: str = Field(..., max_length=254)
    name: str | None = Field(None, max_length=200)
    photo_url: str | None = Field(None, max_length=1000)
    address: str | None = Field(None, max_length=500)


class AccountResponse(BaseModel):
    email: str
    name: str | None = None
    photo_url: str | None = None
    address: str | None = None
    role: str
    status: str
    chef_id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProfileSyncResponse(BaseModel):
    user: AccountResponse


class RoleResponse(BaseModel):
    role: str


# --- Elevation requests ---


class ElevationRequestCreate(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"request_type": "chef", "user_name": "Rina Akter"}]}}

    request_type: Literal["chef", "admin"]
    user_name: str | None = Field(None, max_length=200)


class ElevationReviewRequest(BaseModel):
    status: str


class ElevationRequestResponse(BaseModel):
    id: str
    user_email: str
    user_name: str | None = None
    request_type: str
    request_status: str
    request_time: datetime | None = None
    reviewed_by: str | None = None
    reviewed_at: datetime | None = None


# --- Orders ---


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "chef_id": "chef-4821",
                    "meal_id": "6f1c2a9e-0d4b-4f7a-9a51-3d2b8c7e1f00",
                    "meal_name": "Kacchi Biryani",
                    "price": 12.5,
                    "quantity": 2,
                    "delivery_address": "House 12, Road 4, Dhanmondi, Dhaka",
                }
            ]
        }
    }

    price: float = Field(..., ge=0)
    quantity: int = Field(..., ge=1)
    chef_id: str | None = Field(None, max_length=9)
    meal_id: str | None = Field(None, max_length=50)
    meal_name: str | None = Field(None, max_length=255)
    delivery_address: str | None = Field(None, max_length=500)


class UpdateOrderStatusRequest(BaseModel):
    order_status: OrderStatusValue


class OrderResponse(BaseModel):
    id: str
    user_email: str
    chef_id: str | None = None
    meal_id: str | None = None
    meal_name: str | None = None
    price: float
    quantity: int
    delivery_address: str | None = None
    order_status: str
    payment_status: str
    order_time: datetime | None = None
    updated_at: datetime | None = None


# --- Payments & admin ---


class PaymentIntentRequest(BaseModel):
    """``total_amount`` is expressed in the currency's smallest unit (cents for usd)."""

    total_amount: int = Field(..., gt=0)


class PaymentIntentResponse(BaseModel):
    client_secret: str


class PlatformStatsResponse(BaseModel):
    total_users: int
    total_orders: int
    pending_orders: int
    delivered_orders: int
    total_payment: float


# --- Meals ---


class CreateMealRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "food_name": "Kacchi Biryani",
                    "price": 12.5,
                    "image": "https://cdn.example.com/meals/kacchi.jpg",
                    "ingredients": ["basmati rice", "mutton", "potato", "saffron"],
                    "delivery_area": "Dhanmondi",
                    "estimated_delivery_time": "45 minutes",
                    "chef_experience": "12 years of home cooking",
                }
            ]
        }
    }

    food_name: str = Field(..., max_length=255)
    price: float = Field(..., ge=0)
    image: str | None = Field(None, max_length=1000)
    ingredients: list[str] | None = None
    delivery_area: str | None = Field(None, max_length=255)
    estimated_delivery_time: str | None = Field(None, max_length=100)
    chef_experience: str | None = Field(None, max_length=500)


class UpdateMealRequest(BaseModel):
    food_name: str | None = Field(None, max_length=255)
    price: float | None = Field(None, ge=0)
    image: str | None = Field(None, max_length=1000)
    ingredients: list[str] | None = None
    delivery_area: str | None = Field(None, max_length=255)
    estimated_delivery_time: str | None = Field(None, max_length=100)
    chef_experience: str | None = Field(None, max_length=500)


class MealResponse(BaseModel):
    id: str
    food_name: str
    price: float
    rating: float | None = None
    image: str | None = None
    ingredients: list[str] = []
    delivery_area: str | None = None
    estimated_delivery_time: str | None = None
    chef_experience: str | None = None
    chef_name: str | None = None
    chef_id: str | None = None
    chef_email: str | None = None
    created_at: datetime | None = None


class MealListResponse(BaseModel):
    meals: list[MealResponse]
    total: int


# --- Reviews ---


class PostReviewRequest(BaseModel):
    meal_id: str = Field(..., max_length=50)
    rating: int = Field(..., ge=1, le=5)
    comment: str | None = None
    reviewer_name: str | None = Field(None, max_length=200)
    reviewer_image: str | None = Field(None, max_length=1000)


class ReviewResponse(BaseModel):
    id: str
    meal_id: str
    reviewer_email: str
    reviewer_name: str | None = None
    reviewer_image: str | None = None
    rating: int
    comment: str | None = None
    reviewed_at: datetime | None = None


# --- Favorites ---


class AddFavoriteRequest(BaseModel):
    meal_id: str = Field(..., max_length=50)
    meal_name: str | None = Field(None, max_length=255)
    chef_id: str | None = Field(None, max_length=9)
    price: float | None = Field(None, ge=0)


class AddFavoriteResponse(BaseModel):
    id: str
    created: bool
    message: str | None = None


class FavoriteResponse(BaseModel):
    id: str
    user_email: str
    meal_id: str
    meal_name: str | None = None
    chef_id: str | None = None
    price: float | None = None
    added_at: datetime | None = None
