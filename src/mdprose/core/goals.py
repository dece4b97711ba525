"""Word-goal evaluation: minimum, maximum, and approximate targets"""

from mdprose.core.models import GoalProgress, GoalStatus, GoalThresholds, GoalType


def goal_status(
    count: int,
    goal: int,
    goal_type: GoalType = GoalType.approx,
    thresholds: GoalThresholds = None,
    ) -> GoalStatus:
    """Classify count against a positive goal.

    min:    met at or above goal; warning from min_warning_percent of goal.
    max:    met at or below goal; warning up to max_warning_percent of goal.
    approx: met within approx_green_percent deviation; warning within
            approx_orange_percent.
    """
    if goal <= 0:
        raise ValueError(f"goal must be positive, got {goal}")
    t = thresholds or GoalThresholds()
    goal_type = GoalType(goal_type)
    percent = count * 100 / goal

    if goal_type == GoalType.minimum:
        if count >= goal:
            return GoalStatus.met
        return GoalStatus.warning if percent >= t.min_warning_percent else GoalStatus.not_met

    if goal_type == GoalType.maximum:
        if count <= goal:
            return GoalStatus.met
        return GoalStatus.warning if percent <= t.max_warning_percent else GoalStatus.not_met

    deviation = abs(count - goal) * 100 / goal
    if deviation <= t.approx_green_percent:
        return GoalStatus.met
    return GoalStatus.warning if deviation <= t.approx_orange_percent else GoalStatus.not_met


def goal_progress(
    count: int,
    goal: int | None,
    goal_type: GoalType = GoalType.approx,
    thresholds: GoalThresholds = None,
    ) -> GoalProgress | None:
    """Return GoalProgress for count, or None when no positive goal is set."""
    if not goal or goal <= 0:
        return None
    return GoalProgress(
        goal=goal,
        goal_type=GoalType(goal_type),
        word_count=count,
        ratio=count / goal,
        status=goal_status(count, goal, goal_type, thresholds),
    )
