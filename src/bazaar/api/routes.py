"""FastAPI endpoints for Chef Bazaar.

Every protected route declares its capability through
``Depends(require(...))``; the gate has run by the time the body executes.
Writes go through domain commands, after which the route reloads the
aggregate and returns it as a plain record.
"""

import json

import structlog
from fastapi import APIRouter, Depends, Query, Response
from protean.utils.globals import current_domain

from bazaar import config
from bazaar.account.account import Account, Role
from bazaar.account.fraud import MarkAccountFraud
from bazaar.account.sync import SyncProfile
from bazaar.admin.stats import platform_stats
from bazaar.api.schemas import (
    AccountResponse,
    AddFavoriteRequest,
    AddFavoriteResponse,
    CreateMealRequest,
    ElevationRequestCreate,
    ElevationRequestResponse,
    ElevationReviewRequest,
    FavoriteResponse,
    IdResponse,
    LogoutResponse,
    MealListResponse,
    MealResponse,
    OrderResponse,
    PaymentIntentRequest,
    PaymentIntentResponse,
    PlaceOrderRequest,
    PlatformStatsResponse,
    PostReviewRequest,
    ProfileSyncRequest,
    ProfileSyncResponse,
    ReviewResponse,
    RoleResponse,
    SessionRequest,
    SessionResponse,
    UpdateMealRequest,
    UpdateOrderStatusRequest,
)
from bazaar.auth import session
from bazaar.auth.dependencies import require
from bazaar.auth.errors import Forbidden
from bazaar.auth.gate import CallerContext, Capability, ensure_owner_or_admin
from bazaar.auth.identity import get_identity_provider
from bazaar.elevation.moderation import ReviewElevationRequest
from bazaar.elevation.request import ElevationRequest
from bazaar.elevation.submission import SubmitElevationRequest
from bazaar.favorite.bookmarks import AddFavorite, RemoveFavorite
from bazaar.favorite.favorite import Favorite
from bazaar.meal.management import CreateMeal, DeleteMeal, UpdateMeal
from bazaar.meal.meal import Meal
from bazaar.meal_review.posting import PostMealReview
from bazaar.meal_review.review import MealReview
from bazaar.order.fulfillment import UpdateOrderStatus
from bazaar.order.order import Order
from bazaar.order.payment import MarkOrderPaid
from bazaar.order.placement import PlaceOrder
from bazaar.payments import get_gateway

logger = structlog.get_logger(__name__)

session_router = APIRouter(tags=["session"])
account_router = APIRouter(tags=["accounts"])
elevation_router = APIRouter(prefix="/requests", tags=["elevation requests"])
order_router = APIRouter(prefix="/orders", tags=["orders"])
payment_router = APIRouter(tags=["payments"])
admin_router = APIRouter(prefix="/admin", tags=["admin"])
meal_router = APIRouter(tags=["meals"])
review_router = APIRouter(prefix="/reviews", tags=["reviews"])
favorite_router = APIRouter(prefix="/favorites", tags=["favorites"])


# --- Record mapping ---


def _account(account: Account) -> AccountResponse:
    return AccountResponse(
        email=account.email,
        name=account.name,
        photo_url=account.photo_url,
        address=account.address,
        role=account.role,
        status=account.status,
        chef_id=account.chef_id,
        created_at=account.created_at,
        updated_at=account.updated_at,
    )


def _elevation_request(request: ElevationRequest) -> ElevationRequestResponse:
    return ElevationRequestResponse(
        id=str(request.id),
        user_email=request.user_email,
        user_name=request.user_name,
        request_type=request.request_type,
        request_status=request.request_status,
        request_time=request.request_time,
        reviewed_by=request.reviewed_by,
        reviewed_at=request.reviewed_at,
    )


def _order(order: Order) -> OrderResponse:
    return OrderResponse(
        id=str(order.id),
        user_email=order.user_email,
        chef_id=order.chef_id,
        meal_id=order.meal_id,
        meal_name=order.meal_name,
        price=order.price,
        quantity=order.quantity,
        delivery_address=order.delivery_address,
        order_status=order.order_status,
        payment_status=order.payment_status,
        order_time=order.order_time,
        updated_at=order.updated_at,
    )


def _meal(meal: Meal) -> MealResponse:
    return MealResponse(
        id=str(meal.id),
        food_name=meal.food_name,
        price=meal.price,
        rating=meal.rating,
        image=meal.image,
        ingredients=meal.ingredient_list,
        delivery_area=meal.delivery_area,
        estimated_delivery_time=meal.estimated_delivery_time,
        chef_experience=meal.chef_experience,
        chef_name=meal.chef_name,
        chef_id=meal.chef_id,
        chef_email=meal.chef_email,
        created_at=meal.created_at,
    )


def _review(review: MealReview) -> ReviewResponse:
    return ReviewResponse(
        id=str(review.id),
        meal_id=review.meal_id,
        reviewer_email=review.reviewer_email,
        reviewer_name=review.reviewer_name,
        reviewer_image=review.reviewer_image,
        rating=review.rating,
        comment=review.comment,
        reviewed_at=review.reviewed_at,
    )


def _favorite(favorite: Favorite) -> FavoriteResponse:
    return FavoriteResponse(
        id=str(favorite.id),
        user_email=favorite.user_email,
        meal_id=favorite.meal_id,
        meal_name=favorite.meal_name,
        chef_id=favorite.chef_id,
        price=favorite.price,
        added_at=favorite.added_at,
    )


def _ingredients_json(ingredients: list[str] | None) -> str | None:
    return json.dumps(ingredients) if ingredients is not None else None


# --- Session endpoints ---


def _set_session_cookie(response: Response, token: str) -> None:
    production = config.is_production()
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=token,
        max_age=config.SESSION_TTL_DAYS * 24 * 60 * 60,
        path="/",
        httponly=True,
        secure=production,
        samesite="none" if production else "lax",
    )


@session_router.post("/jwt", response_model=SessionResponse)
async def exchange_id_token(body: SessionRequest, response: Response) -> SessionResponse:
    identity = get_identity_provider().verify_id_token(body.id_token)
    token = session.issue(identity.email)
    _set_session_cookie(response, token)
    logger.info("Session issued", email=identity.email)
    return SessionResponse(email=identity.email, token=token)


@session_router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response) -> LogoutResponse:
    production = config.is_production()
    response.delete_cookie(
        key=config.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        secure=production,
        samesite="none" if production else "lax",
    )
    return LogoutResponse()


# --- Account endpoints ---


@account_router.put("/users", response_model=ProfileSyncResponse)
async def sync_profile(
    body: ProfileSyncRequest,
    caller: CallerContext = Depends(require(Capability.VERIFIED)),
) -> ProfileSyncResponse:
    if body.email != caller.email:
        raise Forbidden("Profiles can only be synced for the signed-in user")

    command = SyncProfile(
        email=body.email,
        name=body.name,
        photo_url=body.photo_url,
        address=body.address,
    )
    email = current_domain.process(command, asynchronous=False)
    account = current_domain.repository_for(Account).get(email)
    return ProfileSyncResponse(user=_account(account))


@account_router.get("/user/{email}", response_model=AccountResponse)
async def get_account(email: str, caller: CallerContext = Depends(require(Capability.SELF_ONLY, target="email"))):
    return _account(current_domain.repository_for(Account).get(email))


@account_router.get("/user/role/{email}", response_model=RoleResponse)
async def get_role(email: str, caller: CallerContext = Depends(require(Capability.SELF_ONLY, target="email"))):
    account = current_domain.repository_for(Account).find_by_email(email)
    return RoleResponse(role=account.role if account is not None else Role.USER.value)


@account_router.patch("/users/fraud/{email}", response_model=AccountResponse)
async def mark_fraud(email: str, caller: CallerContext = Depends(require(Capability.ADMIN))) -> AccountResponse:
    command = MarkAccountFraud(email=email, marked_by=caller.email)
    current_domain.process(command, asynchronous=False)
    return _account(current_domain.repository_for(Account).get(email))


# --- Elevation request endpoints ---


@elevation_router.post("", status_code=201, response_model=ElevationRequestResponse)
async def submit_elevation_request(
    body: ElevationRequestCreate,
    caller: CallerContext = Depends(require(Capability.ACTIVE)),
) -> ElevationRequestResponse:
    user_name = body.user_name
    if user_name is None and caller.account is not None:
        user_name = caller.account.name

    command = SubmitElevationRequest(
        user_email=caller.email,
        request_type=body.request_type,
        user_name=user_name,
    )
    request_id = current_domain.process(command, asynchronous=False)
    return _elevation_request(current_domain.repository_for(ElevationRequest).get(request_id))


@elevation_router.get("", response_model=list[ElevationRequestResponse])
async def list_elevation_requests(caller: CallerContext = Depends(require(Capability.ADMIN))):
    return [_elevation_request(r) for r in current_domain.repository_for(ElevationRequest).all_requests()]


@elevation_router.patch("/{request_id}", response_model=ElevationRequestResponse)
async def review_elevation_request(
    request_id: str,
    body: ElevationReviewRequest,
    caller: CallerContext = Depends(require(Capability.ADMIN)),
) -> ElevationRequestResponse:
    command = ReviewElevationRequest(
        request_id=request_id,
        status=body.status,
        reviewed_by=caller.email,
    )
    current_domain.process(command, asynchronous=False)
    return _elevation_request(current_domain.repository_for(ElevationRequest).get(request_id))


# --- Order endpoints ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(
    body: PlaceOrderRequest,
    caller: CallerContext = Depends(require(Capability.ACTIVE)),
) -> OrderResponse:
    command = PlaceOrder(
        user_email=caller.email,
        price=body.price,
        quantity=body.quantity,
        chef_id=body.chef_id,
        meal_id=body.meal_id,
        meal_name=body.meal_name,
        delivery_address=body.delivery_address,
    )
    order_id = current_domain.process(command, asynchronous=False)
    return _order(current_domain.repository_for(Order).get(order_id))


@order_router.get("/chef/{chef_id}", response_model=list[OrderResponse])
async def list_chef_orders(chef_id: str, caller: CallerContext = Depends(require(Capability.STAFF))):
    if not caller.is_admin and caller.account.chef_id != chef_id:
        raise Forbidden("Chefs can only list their own orders")
    return [_order(o) for o in current_domain.repository_for(Order).for_chef(chef_id)]


@order_router.get("/{email}", response_model=list[OrderResponse])
async def list_buyer_orders(email: str, caller: CallerContext = Depends(require(Capability.SELF_ONLY, target="email"))):
    return [_order(o) for o in current_domain.repository_for(Order).placed_by(email)]


@order_router.patch("/{order_id}", response_model=OrderResponse)
async def update_order_status(
    order_id: str,
    body: UpdateOrderStatusRequest,
    caller: CallerContext = Depends(require(Capability.STAFF)),
) -> OrderResponse:
    command = UpdateOrderStatus(order_id=order_id, order_status=body.order_status)
    current_domain.process(command, asynchronous=False)
    return _order(current_domain.repository_for(Order).get(order_id))


@order_router.patch("/{order_id}/pay", response_model=OrderResponse)
async def mark_order_paid(order_id: str, caller: CallerContext = Depends(require(Capability.VERIFIED))):
    current_domain.process(MarkOrderPaid(order_id=order_id), asynchronous=False)
    return _order(current_domain.repository_for(Order).get(order_id))


# --- Payment & admin endpoints ---


@payment_router.post("/create-payment-intent", response_model=PaymentIntentResponse)
async def create_payment_intent(
    body: PaymentIntentRequest,
    caller: CallerContext = Depends(require(Capability.VERIFIED)),
) -> PaymentIntentResponse:
    intent = get_gateway().create_payment_intent(body.total_amount, config.PAYMENT_CURRENCY)
    logger.info(
        "Payment intent created",
        intent_id=intent.intent_id,
        amount=intent.amount,
        currency=intent.currency,
        email=caller.email,
    )
    return PaymentIntentResponse(client_secret=intent.client_secret)


@admin_router.get("/stats", response_model=PlatformStatsResponse)
async def get_platform_stats(caller: CallerContext = Depends(require(Capability.ADMIN))):
    stats = platform_stats()
    return PlatformStatsResponse(
        total_users=stats.total_users,
        total_orders=stats.total_orders,
        pending_orders=stats.pending_orders,
        delivered_orders=stats.delivered_orders,
        total_payment=stats.total_payment,
    )


# --- Meal endpoints ---


@meal_router.get("/meals", response_model=MealListResponse)
async def search_meals(
    search: str | None = None,
    sort: str | None = Query(None, pattern="^(asc|desc)$"),
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
) -> MealListResponse:
    result = current_domain.repository_for(Meal).search(search=search, sort=sort, page=page, limit=limit)
    return MealListResponse(meals=[_meal(m) for m in result.meals], total=result.total)


@meal_router.get("/meal/{meal_id}", response_model=MealResponse)
async def get_meal(meal_id: str) -> MealResponse:
    return _meal(current_domain.repository_for(Meal).get(meal_id))


@meal_router.post("/meals", status_code=201, response_model=MealResponse)
async def create_meal(body: CreateMealRequest, caller: CallerContext = Depends(require(Capability.CHEF))):
    command = CreateMeal(
        food_name=body.food_name,
        price=body.price,
        chef_email=caller.email,
        chef_id=caller.account.chef_id,
        chef_name=caller.account.name,
        image=body.image,
        ingredients=_ingredients_json(body.ingredients),
        delivery_area=body.delivery_area,
        estimated_delivery_time=body.estimated_delivery_time,
        chef_experience=body.chef_experience,
    )
    meal_id = current_domain.process(command, asynchronous=False)
    return _meal(current_domain.repository_for(Meal).get(meal_id))


@meal_router.put("/meals/{meal_id}", response_model=MealResponse)
async def update_meal(
    meal_id: str,
    body: UpdateMealRequest,
    caller: CallerContext = Depends(require(Capability.VERIFIED)),
) -> MealResponse:
    repo = current_domain.repository_for(Meal)
    ensure_owner_or_admin(caller, repo.get(meal_id).chef_email)

    command = UpdateMeal(
        meal_id=meal_id,
        food_name=body.food_name,
        price=body.price,
        image=body.image,
        ingredients=_ingredients_json(body.ingredients),
        delivery_area=body.delivery_area,
        estimated_delivery_time=body.estimated_delivery_time,
        chef_experience=body.chef_experience,
    )
    current_domain.process(command, asynchronous=False)
    return _meal(repo.get(meal_id))


@meal_router.delete("/meals/{meal_id}", response_model=IdResponse)
async def delete_meal(meal_id: str, caller: CallerContext = Depends(require(Capability.VERIFIED))) -> IdResponse:
    ensure_owner_or_admin(caller, current_domain.repository_for(Meal).get(meal_id).chef_email)
    current_domain.process(DeleteMeal(meal_id=meal_id, deleted_by=caller.email), asynchronous=False)
    return IdResponse(id=meal_id)


# --- Review endpoints ---


@review_router.get("/{meal_id}", response_model=list[ReviewResponse])
async def list_reviews(meal_id: str):
    return [_review(r) for r in current_domain.repository_for(MealReview).for_meal(meal_id)]


@review_router.post("", status_code=201, response_model=ReviewResponse)
async def post_review(body: PostReviewRequest, caller: CallerContext = Depends(require(Capability.VERIFIED))):
    account = caller.account
    command = PostMealReview(
        meal_id=body.meal_id,
        reviewer_email=caller.email,
        rating=body.rating,
        comment=body.comment,
        reviewer_name=body.reviewer_name or (account.name if account else None),
        reviewer_image=body.reviewer_image or (account.photo_url if account else None),
    )
    review_id = current_domain.process(command, asynchronous=False)
    return _review(current_domain.repository_for(MealReview).get(review_id))


# --- Favorite endpoints ---


@favorite_router.post("", response_model=AddFavoriteResponse)
async def add_favorite(
    body: AddFavoriteRequest,
    response: Response,
    caller: CallerContext = Depends(require(Capability.VERIFIED)),
) -> AddFavoriteResponse:
    command = AddFavorite(
        user_email=caller.email,
        meal_id=body.meal_id,
        meal_name=body.meal_name,
        chef_id=body.chef_id,
        price=body.price,
    )
    favorite_id, created = current_domain.process(command, asynchronous=False)
    if created:
        response.status_code = 201
        return AddFavoriteResponse(id=favorite_id, created=True)
    return AddFavoriteResponse(id=favorite_id, created=False, message="Already favorited")


@favorite_router.get("/{email}", response_model=list[FavoriteResponse])
async def list_favorites(email: str, caller: CallerContext = Depends(require(Capability.SELF_ONLY, target="email"))):
    return [_favorite(f) for f in current_domain.repository_for(Favorite).saved_by(email)]


@favorite_router.delete("/{favorite_id}", response_model=IdResponse)
async def remove_favorite(favorite_id: str, caller: CallerContext = Depends(require(Capability.VERIFIED))):
    favorite = current_domain.repository_for(Favorite).get(favorite_id)
    if favorite.user_email != caller.email:
        raise Forbidden("Favorites can only be removed by their owner")
    current_domain.process(RemoveFavorite(favorite_id=favorite_id), asynchronous=False)
    return IdResponse(id=favorite_id)
