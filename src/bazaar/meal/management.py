"""Meal management: commands and handlers for listing, editing and removing meals.

Ownership is checked before these commands are issued; the handlers only
apply the change.
"""

import json

import structlog
from protean import handle
from protean.fields import Float, Identifier, String, Text
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.meal.meal import Meal

logger = structlog.get_logger(__name__)


@bazaar.command(part_of="Meal")
class CreateMeal:
    food_name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    chef_email = String(required=True, max_length=254)
    chef_id = String(max_length=9)
    chef_name = String(max_length=200)
    image = String(max_length=1000)
    ingredients = Text()  # JSON list
    delivery_area = String(max_length=255)
    estimated_delivery_time = String(max_length=100)
    chef_experience = String(max_length=500)


@bazaar.command(part_of="Meal")
class UpdateMeal:
    meal_id = Identifier(required=True)
    food_name = String(max_length=255)
    price = Float(min_value=0.0)
    image = String(max_length=1000)
    ingredients = Text()  # JSON list
    delivery_area = String(max_length=255)
    estimated_delivery_time = String(max_length=100)
    chef_experience = String(max_length=500)


@bazaar.command(part_of="Meal")
class DeleteMeal:
    meal_id = Identifier(required=True)
    deleted_by = String(required=True, max_length=254)


def _decode_ingredients(raw):
    return json.loads(raw) if raw else None


@bazaar.command_handler(part_of=Meal)
class ManageMealHandler:
    @handle(CreateMeal)
    def create_meal(self, command):
        meal = Meal.list_meal(
            food_name=command.food_name,
            price=command.price,
            chef_email=command.chef_email,
            chef_id=command.chef_id,
            chef_name=command.chef_name,
            ingredients=_decode_ingredients(command.ingredients),
            image=command.image,
            delivery_area=command.delivery_area,
            estimated_delivery_time=command.estimated_delivery_time,
            chef_experience=command.chef_experience,
        )
        current_domain.repository_for(Meal).add(meal)
        return str(meal.id)

    @handle(UpdateMeal)
    def update_meal(self, command):
        repo = current_domain.repository_for(Meal)
        meal = repo.get(command.meal_id)
        meal.update_details(
            food_name=command.food_name,
            price=command.price,
            image=command.image,
            ingredients=_decode_ingredients(command.ingredients),
            delivery_area=command.delivery_area,
            estimated_delivery_time=command.estimated_delivery_time,
            chef_experience=command.chef_experience,
        )
        repo.add(meal)
        return str(meal.id)

    @handle(DeleteMeal)
    def delete_meal(self, command):
        repo = current_domain.repository_for(Meal)
        meal = repo.get(command.meal_id)
        repo._dao.delete(meal)
        logger.info("Meal withdrawn", meal_id=str(meal.id), deleted_by=command.deleted_by)
        return str(meal.id)
