"""Central constants for preference namespaces, keys and defaults."""

GOALS_NAMESPACE: str = "goals"
RESULTS_NAMESPACE: str = "results"
LANGUAGE_NAMESPACE: str = "language_settings"

GOALS_KEY: str = "goals"
GOALS_COMPLETION_KEY: str = "goals_completion"
INITIALIZED_KEY: str = "initialized"
RESULTS_COMPLETION_KEY: str = "results_completion"
DAILY_NOTES_KEY: str = "daily_notes"
LANGUAGE_CODE_KEY: str = "language_code"

TREND_WINDOW_DAYS: int = 10
VISIBLE_DAYS_RADIUS: int = 30
EXPECTED_POINTS_TOTAL: int = 100
