"""Daily completion ledger for the Swiss Health tracker."""

from swiss_health_tracker.ledger import DailySummary, HealthLedger, StatsSnapshot

__all__ = ["DailySummary", "HealthLedger", "StatsSnapshot"]
