"""Daily calorie target calculation."""

from calorie_tracker.domain.users import Goal

ACTIVITY_FACTOR = 1.55

_GOAL_MULTIPLIERS = {
    Goal.WEIGHT_LOSS: 0.8,
    Goal.MAINTENANCE: 1.0,
    Goal.WEIGHT_GAIN: 1.15,
}


def compute_target(age: int, weight_kg: float, height_cm: int, goal: Goal) -> int:
    """Return the daily calorie target for the given body metrics and goal.

    Uses the Mifflin-St Jeor BMR scaled by a fixed activity factor, then
    adjusted for the goal. Unknown goals fall back to maintenance. The result
    is truncated toward zero.
    """
    bmr = 10 * weight_kg + 6.25 * height_cm - 5 * age + 5
    maintenance = bmr * ACTIVITY_FACTOR
    multiplier = _GOAL_MULTIPLIERS.get(goal, 1.0)
    return int(maintenance * multiplier)
