"""Favorite commands: bookmark a meal and remove a bookmark."""

from protean import handle
from protean.fields import Float, Identifier, String
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.favorite.favorite import Favorite


@bazaar.command(part_of="Favorite")
class AddFavorite:
    user_email = String(required=True, max_length=254)
    meal_id = String(required=True, max_length=50)
    meal_name = String(max_length=255)
    chef_id = String(max_length=9)
    price = Float(min_value=0.0)


@bazaar.command(part_of="Favorite")
class RemoveFavorite:
    favorite_id = Identifier(required=True)


@bazaar.command_handler(part_of=Favorite)
class FavoriteHandler:
    @handle(AddFavorite)
    def add_favorite(self, command):
        """Returns ``(favorite_id, created)``; ``created`` is False when the meal was already bookmarked."""
        repo = current_domain.repository_for(Favorite)
        existing = repo.find_for(command.user_email, command.meal_id)
        if existing is not None:
            return str(existing.id), False

        favorite = Favorite.bookmark(
            user_email=command.user_email,
            meal_id=command.meal_id,
            meal_name=command.meal_name,
            chef_id=command.chef_id,
            price=command.price,
        )
        repo.add(favorite)
        return str(favorite.id), True

    @handle(RemoveFavorite)
    def remove_favorite(self, command):
        repo = current_domain.repository_for(Favorite)
        favorite = repo.get(command.favorite_id)
        repo._dao.delete(favorite)
        return str(favorite.id)
