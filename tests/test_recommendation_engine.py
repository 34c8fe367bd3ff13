"""Unit tests for the per-course suggestion engine."""
import pytest
from schemas import Allergy, Flavor, Meal, MealCourse, Sex, UserProfile
from services.nutrition_calculator import nutrition_calculator
from services.recommendation_engine import SuggestionEngine, suggestion_engine


def make_meal(name, calories=500, course=MealCourse.lunch, **kwargs):
    """Build a meal with sensible defaults for scoring tests."""
    return Meal(name=name, calories=calories, course=course, **kwargs)


@pytest.fixture
def profile():
    return UserProfile(age=25, sex=Sex.male, height_cm=170, weight_kg=65)


def test_only_requested_course_is_suggested(profile):
    catalog = [make_meal("Soup"), make_meal("Toast", course=MealCourse.breakfast)]
    result = suggestion_engine.suggest(MealCourse.lunch, profile, catalog)
    assert [m.name for m in result] == ["Soup"]


def test_allergenic_meals_are_excluded(profile):
    profile.allergies = {Allergy.nuts}
    safe = make_meal("Rice bowl", allergies={Allergy.soy})
    risky = make_meal("Satay", allergies={Allergy.nuts, Allergy.soy})
    result = suggestion_engine.suggest(MealCourse.lunch, profile, [risky, safe])
    assert risky not in result
    assert result == [safe]


def test_disliked_meals_are_excluded_regardless_of_score(profile):
    target = nutrition_calculator.course_target(MealCourse.lunch, profile)
    perfect = make_meal("Perfect", calories=round(target), is_favorite=True)
    profile.disliked_meal_ids = {perfect.id}
    other = make_meal("Other", calories=100)
    assert suggestion_engine.suggest(MealCourse.lunch, profile, [perfect, other]) == [other]


def test_meal_exactly_at_target_scores_point_six(profile):
    engine = SuggestionEngine()
    meal = make_meal("Stew", calories=600, course=MealCourse.dinner, flavors={Flavor.salty})
    assert engine.score_meal(meal, 600.0, profile) == pytest.approx(0.6)
    assert engine.score_meal(meal.model_copy(update={"calories": 0}), 600.0, profile) == pytest.approx(0.0)


def test_catalog_at_course_target_scores_equally(profile):
    """Meals at the rounded target, unflavored and not favorite, score ~0.6."""
    target = nutrition_calculator.course_target(MealCourse.breakfast, profile)
    catalog = [make_meal(f"M{i}", calories=round(target), course=MealCourse.breakfast) for i in range(3)]
    scored = suggestion_engine.suggest_scored(MealCourse.breakfast, profile, catalog)
    assert [m.name for m, _ in scored] == ["M0", "M1", "M2"]
    for _, score in scored:
        assert score == pytest.approx(0.6, abs=1e-3)


def test_flavor_score_is_share_of_meal_flavors(profile):
    profile.preferred_flavors = {Flavor.umami}
    meal = make_meal("Ramen", flavors={Flavor.umami, Flavor.salty})
    assert suggestion_engine.flavor_score(meal, profile) == pytest.approx(0.5)
    assert suggestion_engine.flavor_score(make_meal("Plain"), profile) == 0.0


def test_calorie_score_clamps_at_zero():
    assert suggestion_engine.calorie_score(2000, 500) == 0.0
    assert suggestion_engine.calorie_score(750, 500) == pytest.approx(0.5)
    # zero target uses a divisor of 1
    assert suggestion_engine.calorie_score(0, 0) == 1.0


def test_favorite_bonus_is_additive(profile):
    target = 500.0
    plain = make_meal("Plain", calories=500)
    fav = make_meal("Fav", calories=500, is_favorite=True)
    assert suggestion_engine.score_meal(fav, target, profile) - suggestion_engine.score_meal(plain, target, profile) == pytest.approx(0.15)


def test_output_sorted_descending_and_stable(profile):
    profile.preferred_flavors = {Flavor.spicy}
    target = nutrition_calculator.course_target(MealCourse.lunch, profile)
    far = make_meal("Far", calories=50)
    tie_a = make_meal("TieA", calories=round(target))
    spicy = make_meal("Spicy", calories=round(target), flavors={Flavor.spicy})
    tie_b = make_meal("TieB", calories=round(target))
    scored = suggestion_engine.suggest_scored(MealCourse.lunch, profile, [far, tie_a, spicy, tie_b])
    scores = [s for _, s in scored]
    assert scores == sorted(scores, reverse=True)
    assert [m.name for m, _ in scored] == ["Spicy", "TieA", "TieB", "Far"]


def test_empty_catalog_gives_empty_result(profile):
    assert suggestion_engine.suggest(MealCourse.snack, profile, []) == []
