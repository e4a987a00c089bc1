"""Integration tests for meals, reviews and favorites."""

import pytest


def _create_meal(client, auth, email="c@x.com", **overrides):
    payload = {"food_name": "Kacchi Biryani", "price": 12.5, "ingredients": ["rice", "mutton"]}
    payload.update(overrides)
    response = client.post("/meals", json=payload, headers=auth(email))
    assert response.status_code == 201
    return response.json()


@pytest.fixture()
def chef(make_account):
    return make_account("c@x.com", role="chef", chef_id="chef-4821", name="Chef Rina")


class TestMealEndpoints:
    def test_chef_creates_meal(self, client, auth, chef):
        meal = _create_meal(client, auth)
        assert meal["chef_email"] == "c@x.com"
        assert meal["chef_id"] == "chef-4821"
        assert meal["chef_name"] == "Chef Rina"
        assert meal["ingredients"] == ["rice", "mutton"]

    def test_user_cannot_create(self, client, auth, make_account):
        make_account("u@x.com")
        response = client.post("/meals", json={"food_name": "Tehari", "price": 7.0}, headers=auth("u@x.com"))
        assert response.status_code == 403

    def test_read_meal(self, client, auth, chef):
        meal = _create_meal(client, auth)
        response = client.get(f"/meal/{meal['id']}")
        assert response.status_code == 200
        assert response.json()["food_name"] == "Kacchi Biryani"

    def test_missing_meal(self, client):
        assert client.get("/meal/missing").status_code == 404

    def test_search_sort_and_paginate(self, client, auth, chef):
        _create_meal(client, auth, food_name="Chicken Biryani", price=9.0)
        _create_meal(client, auth, food_name="Beef Tehari", price=7.5)
        _create_meal(client, auth, food_name="Mutton Biryani", price=13.0)

        response = client.get("/meals", params={"search": "BIRYANI", "sort": "desc", "page": 1, "limit": 1})
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [m["food_name"] for m in data["meals"]] == ["Mutton Biryani"]

    def test_invalid_sort(self, client):
        assert client.get("/meals", params={"sort": "sideways"}).status_code == 422

    def test_owner_updates(self, client, auth, chef):
        meal = _create_meal(client, auth)
        response = client.put(f"/meals/{meal['id']}", json={"price": 15.0}, headers=auth("c@x.com"))
        assert response.status_code == 200
        assert response.json()["price"] == 15.0

    def test_other_chef_cannot_update(self, client, auth, chef, make_account):
        make_account("other@x.com", role="chef", chef_id="chef-1000")
        meal = _create_meal(client, auth)
        response = client.put(f"/meals/{meal['id']}", json={"price": 1.0}, headers=auth("other@x.com"))
        assert response.status_code == 403

    def test_admin_can_update(self, client, auth, chef, make_account):
        make_account("boss@x.com", role="admin")
        meal = _create_meal(client, auth)
        response = client.put(f"/meals/{meal['id']}", json={"food_name": "Renamed"}, headers=auth("boss@x.com"))
        assert response.json()["food_name"] == "Renamed"

    def test_owner_deletes(self, client, auth, chef):
        meal = _create_meal(client, auth)
        assert client.delete(f"/meals/{meal['id']}", headers=auth("c@x.com")).status_code == 200
        assert client.get(f"/meal/{meal['id']}").status_code == 404

    def test_stranger_cannot_delete(self, client, auth, chef):
        meal = _create_meal(client, auth)
        assert client.delete(f"/meals/{meal['id']}", headers=auth("u@x.com")).status_code == 403


class TestReviewEndpoints:
    def test_post_and_list(self, client, auth, chef, make_account):
        make_account("b@x.com", name="Buyer")
        meal = _create_meal(client, auth)
        response = client.post(
            "/reviews", json={"meal_id": meal["id"], "rating": 5, "comment": "Delicious"}, headers=auth("b@x.com")
        )
        assert response.status_code == 201
        assert response.json()["reviewer_email"] == "b@x.com"
        assert response.json()["reviewer_name"] == "Buyer"

        reviews = client.get(f"/reviews/{meal['id']}").json()
        assert [r["comment"] for r in reviews] == ["Delicious"]

    def test_rating_out_of_range(self, client, auth):
        response = client.post("/reviews", json={"meal_id": "m", "rating": 9}, headers=auth("b@x.com"))
        assert response.status_code == 422

    def test_requires_session(self, client):
        assert client.post("/reviews", json={"meal_id": "m", "rating": 4}).status_code == 401


class TestFavoriteEndpoints:
    def test_add_is_idempotent(self, client, auth):
        first = client.post("/favorites", json={"meal_id": "meal-1", "meal_name": "Kacchi"}, headers=auth("b@x.com"))
        assert first.status_code == 201
        assert first.json()["created"] is True

        second = client.post("/favorites", json={"meal_id": "meal-1"}, headers=auth("b@x.com"))
        assert second.status_code == 200
        assert second.json() == {"id": first.json()["id"], "created": False, "message": "Already favorited"}

    def test_list_own_favorites(self, client, auth):
        client.post("/favorites", json={"meal_id": "meal-1"}, headers=auth("b@x.com"))
        client.post("/favorites", json={"meal_id": "meal-2"}, headers=auth("b@x.com"))
        response = client.get("/favorites/b@x.com", headers=auth("b@x.com"))
        assert [f["meal_id"] for f in response.json()] == ["meal-1", "meal-2"]

    def test_list_someone_elses_favorites(self, client, auth):
        assert client.get("/favorites/b@x.com", headers=auth("a@x.com")).status_code == 403

    def test_remove(self, client, auth):
        favorite_id = client.post("/favorites", json={"meal_id": "meal-1"}, headers=auth("b@x.com")).json()["id"]
        assert client.delete(f"/favorites/{favorite_id}", headers=auth("b@x.com")).status_code == 200
        assert client.get("/favorites/b@x.com", headers=auth("b@x.com")).json() == []

    def test_only_owner_removes(self, client, auth):
        favorite_id = client.post("/favorites", json={"meal_id": "meal-1"}, headers=auth("b@x.com")).json()["id"]
        assert client.delete(f"/favorites/{favorite_id}", headers=auth("a@x.com")).status_code == 403
