"""Tests for day plan lookup, upsert and resolution helpers."""
from datetime import date, datetime, timedelta, timezone
from uuid import uuid4
from schemas import DayPlan, Meal, MealCourse
from services import plan_store


def test_get_plan_on_empty_collection_returns_fresh_plan():
    moment = datetime(2025, 10, 24, 18, 45, 12)
    plan = plan_store.get_plan(moment, [])
    assert plan.date == datetime(2025, 10, 24)
    assert plan.breakfast is None and plan.lunch is None
    assert plan.dinner is None and plan.snack is None


def test_get_plan_matches_normalized_day():
    stored = DayPlan(date=date(2025, 10, 24), lunch=uuid4())
    other = DayPlan(date=date(2025, 10, 25))
    assert plan_store.get_plan(datetime(2025, 10, 24, 9, 30), [other, stored]) is stored


def test_day_plan_date_is_truncated_on_construction():
    plan = DayPlan(date=datetime(2025, 1, 2, 23, 59, 59, 999))
    assert plan.date == datetime(2025, 1, 2)
    assert DayPlan(date="2025-01-02T13:14:15").date == datetime(2025, 1, 2)


def test_upsert_appends_new_plan():
    first = DayPlan(date=date(2025, 10, 24))
    second = DayPlan(date=date(2025, 10, 25))
    plans = plan_store.upsert_plan(first, [])
    plans = plan_store.upsert_plan(second, plans)
    assert plans == [first, second]


def test_upsert_same_id_replaces_in_place_even_with_new_date():
    a = DayPlan(date=date(2025, 10, 24))
    b = DayPlan(date=date(2025, 10, 25))
    plans = [a, b]
    moved = a.model_copy(update={"date": datetime(2025, 11, 1)})
    updated = plan_store.upsert_plan(moved, plans)
    assert len(updated) == 2
    assert updated[0] is moved and updated[1] is b
    # input collection is not mutated
    assert plans[0] is a


def test_upsert_falls_back_to_date_match():
    existing = DayPlan(date=date(2025, 10, 24))
    fresh = DayPlan(date=datetime(2025, 10, 24, 12), dinner=uuid4())
    updated = plan_store.upsert_plan(fresh, [DayPlan(date=date(2025, 10, 23)), existing])
    assert len(updated) == 2
    assert updated[1] is fresh


def test_upsert_prefers_id_over_date():
    a = DayPlan(date=date(2025, 10, 24))
    b = DayPlan(date=date(2025, 10, 25))
    # same id as b but dated like a: must replace b, not a
    edited = b.model_copy(update={"date": datetime(2025, 10, 24)})
    updated = plan_store.upsert_plan(edited, [a, b])
    assert updated == [a, edited]


def test_dangling_meal_reference_resolves_to_none():
    meal = Meal(name="Toast", calories=200, course=MealCourse.breakfast)
    plan = DayPlan(date=date(2025, 10, 24), breakfast=meal.id, lunch=uuid4())
    assert plan_store.resolve_meal(plan.breakfast, [meal]) == meal
    assert plan_store.resolve_meal(plan.lunch, [meal]) is None
    assert plan_store.resolve_meal(None, [meal]) is None
    assert plan_store.planned_calories(plan, [meal]) == 200


def test_planned_day_resolves_each_course():
    toast = Meal(name="Toast", calories=200, course=MealCourse.breakfast)
    soup = Meal(name="Soup", calories=350, course=MealCourse.lunch)
    plan = DayPlan(date=date(2025, 10, 24), breakfast=toast.id, lunch=soup.id, dinner=uuid4())
    day = plan_store.planned_day(plan, [toast, soup])
    assert day.breakfast == toast and day.lunch == soup
    assert day.dinner is None and day.snack is None
    assert day.total_calories == 550


def test_week_window_spans_seven_days():
    days = plan_store.week_window(datetime(2025, 10, 24, 15))
    assert len(days) == 7
    assert days[3] == datetime(2025, 10, 24)
    assert days[0] == datetime(2025, 10, 21)
    assert all(b - a == timedelta(days=1) for a, b in zip(days, days[1:]))


def local_midnight(moment):
    """Local calendar day of an aware datetime, as a naive midnight."""
    return moment.astimezone().replace(tzinfo=None, hour=0, minute=0, second=0, microsecond=0)


def test_aware_date_is_normalized_to_local_day():
    moment = datetime(2025, 10, 24, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
    plan = DayPlan(date=moment)
    assert plan.date.tzinfo is None
    assert plan.date == local_midnight(moment)
    assert plan_store.normalize_day(moment) == plan.date


def test_aware_plan_is_found_by_its_local_day():
    moment = datetime(2025, 10, 24, 10, tzinfo=timezone.utc)
    stored = DayPlan(date=moment.isoformat())
    day = local_midnight(moment)
    assert plan_store.get_plan(day.date(), [stored]) is stored
    # a fresh plan for the same day replaces the stored one by date
    fresh = DayPlan(date=day, lunch=uuid4())
    assert plan_store.upsert_plan(fresh, [stored]) == [fresh]
