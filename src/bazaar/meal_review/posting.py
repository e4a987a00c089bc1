"""PostMealReview: a signed-in buyer reviews a meal."""

from protean import handle
from protean.fields import Integer, String, Text
from protean.utils.globals import current_domain

from bazaar.domain import bazaar
from bazaar.meal.meal import Meal
from bazaar.meal_review.review import MealReview


@bazaar.command(part_of="MealReview")
class PostMealReview:
    meal_id = String(required=True, max_length=50)
    reviewer_email = String(required=True, max_length=254)
    rating = Integer(required=True, min_value=1, max_value=5)
    reviewer_name = String(max_length=200)
    reviewer_image = String(max_length=1000)
    comment = Text()


@bazaar.command_handler(part_of=MealReview)
class PostMealReviewHandler:
    @handle(PostMealReview)
    def post_meal_review(self, command):
        # Reviews can only be left on meals that exist
        current_domain.repository_for(Meal).get(command.meal_id)

        review = MealReview.post(
            meal_id=command.meal_id,
            reviewer_email=command.reviewer_email,
            rating=command.rating,
            reviewer_name=command.reviewer_name,
            reviewer_image=command.reviewer_image,
            comment=command.comment,
        )
        current_domain.repository_for(MealReview).add(review)
        return str(review.id)
