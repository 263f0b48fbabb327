"""Tests for meal plan endpoints."""

from uuid import uuid4


def _recipe(client, title: str) -> str:
    response = client.post("/recipes", json={"title": title})
    return response.json()["recipe"]["_id"]


def _plan(recipe_id: str, day: str, weekday: str, **extra) -> dict:
    return {
        "userId": str(uuid4()),
        "recipeId": recipe_id,
        "date": day,
        "dayOfWeek": weekday,
        "email": "cook@example.com",
        **extra,
    }


def test_create_meal_plans_in_bulk(client, meal_plan_repository) -> None:
    recipe_id = _recipe(client, "Soup")

    response = client.post(
        "/meal-plans",
        json=[
            _plan(recipe_id, "2025-03-03", "Monday"),
            _plan(recipe_id, "2025-03-04T00:00:00.000Z", "Tuesday"),
        ],
    )

    assert response.status_code == 201
    data = response.json()
    assert data["message"] == "Meal plans saved successfully"
    assert [plan["date"] for plan in data["data"]] == ["2025-03-03", "2025-03-04"]
    assert all(plan["status"] == "Planned" for plan in data["data"])
    assert len(meal_plan_repository.plans) == 2


def test_create_meal_plans_rejects_empty_list(client) -> None:
    response = client.post("/meal-plans", json=[])

    assert response.status_code == 400
    assert response.json() == {"message": "No meal plans provided"}


def test_create_meal_plans_rejects_non_list(client) -> None:
    response = client.post("/meal-plans", json={"date": "2025-03-03"})

    assert response.status_code == 400


def test_create_meal_plans_rejects_unknown_status(client) -> None:
    recipe_id = _recipe(client, "Soup")

    response = client.post(
        "/meal-plans",
        json=[_plan(recipe_id, "2025-03-03", "Monday", status="Burnt")],
    )

    assert response.status_code == 400


def test_list_meal_plans_sorted_and_expanded(client) -> None:
    soup = _recipe(client, "Soup")
    salad = _recipe(client, "Salad")
    client.post(
        "/meal-plans",
        json=[
            _plan(soup, "2025-03-05", "Wednesday"),
            _plan(salad, "2025-03-03", "Monday"),
            {**_plan(soup, "2025-03-01", "Saturday"), "email": "other@example.com"},
        ],
    )

    response = client.get("/meal-plans", params={"email": "cook@example.com"})

    assert response.status_code == 200
    data = response.json()
    assert [entry["date"] for entry in data] == ["2025-03-03", "2025-03-05"]
    assert data[0]["recipe"]["title"] == "Salad"
    assert data[1]["recipe"]["title"] == "Soup"
    assert set(data[0]) == {"_id", "recipe", "date", "dayOfWeek", "status"}


def test_list_meal_plans_with_deleted_recipe(client) -> None:
    soup = _recipe(client, "Soup")
    client.post("/meal-plans", json=[_plan(soup, "2025-03-05", "Wednesday")])
    client.delete(f"/recipes/{soup}")

    response = client.get("/meal-plans", params={"email": "cook@example.com"})

    assert response.status_code == 200
    assert response.json()[0]["recipe"] is None


def test_list_meal_plans_requires_email(client) -> None:
    response = client.get("/meal-plans")

    assert response.status_code == 400
    assert response.json() == {"message": "Email is required"}


def test_update_status_is_reflected(client) -> None:
    soup = _recipe(client, "Soup")
    created = client.post(
        "/meal-plans", json=[_plan(soup, "2025-03-05", "Wednesday")]
    ).json()["data"][0]

    response = client.patch(f"/meal-plans/{created['_id']}", json={"status": "Cooked"})

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Status updated successfully"
    assert data["mealPlan"]["status"] == "Cooked"
    listed = client.get("/meal-plans", params={"email": "cook@example.com"}).json()
    assert listed[0]["status"] == "Cooked"


def test_update_status_rejects_values_outside_enum(client) -> None:
    soup = _recipe(client, "Soup")
    created = client.post(
        "/meal-plans", json=[_plan(soup, "2025-03-05", "Wednesday")]
    ).json()["data"][0]

    for status in ("cooked", "Done", None):
        response = client.patch(
            f"/meal-plans/{created['_id']}", json={"status": status}
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Invalid status value"}


def test_update_status_malformed_id(client) -> None:
    response = client.patch("/meal-plans/abc", json={"status": "Cooking"})

    assert response.status_code == 400
    assert response.json() == {"message": "Invalid meal plan ID"}


def test_update_status_unknown_plan(client) -> None:
    response = client.patch(f"/meal-plans/{uuid4()}", json={"status": "Cooking"})

    assert response.status_code == 404
    assert response.json() == {"message": "Meal plan not found"}
