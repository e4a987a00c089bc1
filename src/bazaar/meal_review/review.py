"""MealReview aggregate: a buyer's rating and comment on a meal."""

from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Integer, String, Text

from bazaar.domain import bazaar


@bazaar.event(part_of="MealReview")
class MealReviewed:
    __version__ = 1

    review_id = Identifier(required=True)
    meal_id = String(required=True)
    reviewer_email = String(required=True)
    rating = Integer(required=True)
    reviewed_at = DateTime(required=True)


@bazaar.aggregate
class MealReview:
    meal_id = String(required=True, max_length=50)
    reviewer_email = String(required=True, max_length=254)
    reviewer_name = String(max_length=200)
    reviewer_image = String(max_length=1000)
    rating = Integer(required=True, min_value=1, max_value=5)
    comment = Text()
    reviewed_at = DateTime()

    @classmethod
    def post(cls, meal_id, reviewer_email, rating, reviewer_name=None, reviewer_image=None, comment=None):
        now = datetime.now(UTC)
        review = cls(
            meal_id=meal_id,
            reviewer_email=reviewer_email,
            reviewer_name=reviewer_name,
            reviewer_image=reviewer_image,
            rating=rating,
            comment=comment,
            reviewed_at=now,
        )
        review.raise_(
            MealReviewed(
                review_id=str(review.id),
                meal_id=meal_id,
                reviewer_email=reviewer_email,
                rating=rating,
                reviewed_at=now,
            )
        )
        return review
