"""Tests for the API routers, called directly with an injected store."""
import io
from datetime import date
from uuid import uuid4
import pytest
from fastapi import UploadFile
from core.exceptions import NotFoundError, ValidationError
from api.meals import create_meal, delete_meal, get_image, list_meals, toggle_favorite, update_meal, upload_meal_image
from api.plans import get_plan, get_week, save_plan
from api.profile import get_energy, save_profile
from api.suggestions import get_suggestions
from api.activity import list_activity
from schemas import DayPlan, Meal, MealCourse, UserProfile


def test_create_and_list_meals(store):
    meal = create_meal(Meal(name="Pho", calories=520, course=MealCourse.dinner), store=store)
    names = [m.name for m in list_meals(search="pho", course=None, store=store)]
    assert names == ["Pho"]
    assert meal in store.meals


def test_update_meal_uses_path_id(store):
    target = store.meals[0]
    body = target.model_copy(update={"id": uuid4(), "name": "Overnight Oats"})
    updated = update_meal(target.id, body, store=store)
    assert updated.id == target.id
    assert store.meals[0].name == "Overnight Oats"


def test_update_unknown_meal_raises_404(store):
    with pytest.raises(NotFoundError) as exc_info:
        update_meal(uuid4(), Meal(name="X", calories=1, course=MealCourse.snack), store=store)
    assert exc_info.value.status_code == 404


def test_delete_and_favorite_unknown_meal_raise(store):
    with pytest.raises(NotFoundError):
        delete_meal(uuid4(), store=store)
    with pytest.raises(NotFoundError):
        toggle_favorite(uuid4(), store=store)


def test_upload_and_serve_image(store):
    meal = store.meals[2]
    upload = UploadFile(file=io.BytesIO(b"jpeg-bytes"), filename="salmon.jpg")
    updated = upload_meal_image(meal.id, file=upload, store=store)
    assert updated.image_filename.endswith(".jpg")
    assert store.get_meal(meal.id).image_filename == updated.image_filename
    response = get_image(updated.image_filename, store=store)
    assert str(response.path) == str(store.image_path(updated.image_filename))


def test_upload_image_for_deleted_meal_raises_and_stores_nothing(store):
    meal = store.meals[2]
    delete_meal(meal.id, store=store)
    upload = UploadFile(file=io.BytesIO(b"jpeg-bytes"), filename="salmon.jpg")
    with pytest.raises(NotFoundError):
        upload_meal_image(meal.id, file=upload, store=store)
    assert store.get_meal(meal.id) is None
    assert list(store.storage.images_dir.iterdir()) == []


def test_get_missing_image_raises(store):
    with pytest.raises(NotFoundError):
        get_image("missing.jpg", store=store)
    with pytest.raises(ValidationError):
        get_image("../meals.json", store=store)


def test_energy_endpoint(store):
    save_profile(UserProfile(age=25, height_cm=170, weight_kg=65), store=store)
    energy = get_energy(store=store)
    assert energy.bmr == pytest.approx(1592.5)
    assert energy.tdee == pytest.approx(2468.375)
    assert energy.course_targets["dinner"] == pytest.approx(2468.375 * 0.35)


def test_plan_round_trip_through_api(store):
    fresh = get_plan(date(2025, 10, 24), store=store)
    assert fresh.lunch is None
    saved = save_plan(fresh.model_copy(update={"lunch": store.meals[1].id}), store=store)
    assert get_plan(date(2025, 10, 24), store=store) == saved


def test_week_view_resolves_meals(store):
    lunch = store.meals[1]
    save_plan(DayPlan(date=date(2025, 10, 24), lunch=lunch.id, dinner=uuid4()), store=store)
    week = get_week(date(2025, 10, 24), store=store)
    assert len(week) == 7
    middle = week[3]
    assert middle.lunch == lunch
    assert middle.dinner is None
    assert middle.total_calories == lunch.calories
    assert week[0].total_calories == 0


def test_suggestions_endpoint_respects_limit(store):
    for i in range(3):
        store.add_meal(Meal(name=f"Bar {i}", calories=120, course=MealCourse.snack))
    everything = get_suggestions(MealCourse.snack, limit=None, store=store, configured_limit=0)
    assert len(everything) == 4
    assert [s.score for s in everything] == sorted((s.score for s in everything), reverse=True)
    assert len(get_suggestions(MealCourse.snack, limit=2, store=store, configured_limit=0)) == 2
    assert len(get_suggestions(MealCourse.snack, limit=None, store=store, configured_limit=1)) == 1


def test_activity_endpoint(store, session_factory):
    create_meal(Meal(name="Kimchi Rice", calories=400, course=MealCourse.lunch), store=store)
    db = session_factory()
    try:
        entries = list_activity(limit=5, db=db)
    finally:
        db.close()
    assert entries[0].message == "Added meal: Kimchi Rice"
