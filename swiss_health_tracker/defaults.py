"""Built-in goal and result catalogs per language."""

from __future__ import annotations

from swiss_health_tracker.i18n import LanguageCode, coerce_language
from swiss_health_tracker.models import TrackedItem

DEFAULT_GOALS: dict[LanguageCode, tuple[TrackedItem, ...]] = {
    "fr": (
        TrackedItem(
            id=1,
            title="Faire 30 minutes d'exercice",
            points=10,
            details="Faire au moins 30 minutes d'activité physique modérée à intense",
        ),
        TrackedItem(
            id=2,
            title="Manger 5 fruits et légumes",
            points=10,
            details="Consommer au moins 5 portions de fruits et légumes dans la journée",
        ),
        TrackedItem(
            id=3,
            title="Boire 2L d'eau",
            points=10,
            details="Boire au moins 2 litres d'eau tout au long de la journée",
        ),
        TrackedItem(id=4, title="Dormir 8 heures", points=10, details="Avoir une nuit de sommeil d'au moins 8 heures"),
        TrackedItem(
            id=5,
            title="Méditer 10 minutes",
            points=10,
            details="Pratiquer la méditation ou la relaxation pendant 10 minutes",
        ),
        TrackedItem(id=6, title="Manger équilibré", points=10, details="Prendre 3 repas équilibrés dans la journée"),
        TrackedItem(
            id=7,
            title="Limiter les écrans",
            points=10,
            details="Limiter l'utilisation des écrans à 2 heures de loisirs par jour",
        ),
        TrackedItem(
            id=8, title="Activité sociale", points=10, details="Avoir au moins une interaction sociale positive"
        ),
        TrackedItem(id=9, title="Prendre l'air", points=10, details="Passer au moins 30 minutes en extérieur"),
        TrackedItem(
            id=10,
            title="Hygiène dentaire",
            points=10,
            details="Se brosser les dents au moins deux fois dans la journée",
        ),
    ),
    "en": (
        TrackedItem(
            id=1,
            title="Exercise for 30 minutes",
            points=10,
            details="Do at least 30 minutes of moderate to intense physical activity",
        ),
        TrackedItem(
            id=2,
            title="Eat 5 fruits and vegetables",
            points=10,
            details="Consume at least 5 servings of fruits and vegetables during the day",
        ),
        TrackedItem(
            id=3,
            title="Drink 2L of water",
            points=10,
            details="Drink at least 2 liters of water throughout the day",
        ),
        TrackedItem(id=4, title="Sleep 8 hours", points=10, details="Get at least 8 hours of sleep"),
        TrackedItem(
            id=5,
            title="Meditate for 10 minutes",
            points=10,
            details="Practice meditation or relaxation for 10 minutes",
        ),
        TrackedItem(id=6, title="Eat balanced meals", points=10, details="Have 3 balanced meals during the day"),
        TrackedItem(id=7, title="Limit screen time", points=10, details="Limit leisure screen time to 2 hours per day"),
        TrackedItem(id=8, title="Social activity", points=10, details="Have at least one positive social interaction"),
        TrackedItem(id=9, title="Get fresh air", points=10, details="Spend at least 30 minutes outdoors"),
        TrackedItem(id=10, title="Dental hygiene", points=10, details="Brush teeth at least twice a day"),
    ),
}

DEFAULT_RESULTS: dict[LanguageCode, tuple[TrackedItem, ...]] = {
    "fr": (
        TrackedItem(
            id=1,
            title="Qualité du sommeil",
            points=20,
            details="Évaluation subjective de la qualité de votre sommeil",
        ),
        TrackedItem(
            id=2,
            title="Niveau d'énergie",
            points=20,
            details="Évaluation subjective de votre niveau d'énergie dans la journée",
        ),
        TrackedItem(
            id=3,
            title="Niveau de stress",
            points=20,
            details="Évaluation subjective de votre niveau de stress dans la journée",
        ),
        TrackedItem(
            id=4,
            title="Humeur générale",
            points=20,
            details="Évaluation subjective de votre état émotionnel de la journée",
        ),
        TrackedItem(
            id=5,
            title="Confort digestif",
            points=20,
            details="Évaluation subjective de votre confort digestif de la journée",
        ),
    ),
    "en": (
        TrackedItem(id=1, title="Sleep Quality", points=20, details="Subjective evaluation of your sleep quality"),
        TrackedItem(
            id=2,
            title="Energy Level",
            points=20,
            details="Subjective evaluation of your energy level during the day",
        ),
        TrackedItem(
            id=3,
            title="Stress Level",
            points=20,
            details="Subjective evaluation of your stress level during the day",
        ),
        TrackedItem(
            id=4,
            title="General Mood",
            points=20,
            details="Subjective evaluation of your emotional state during the day",
        ),
        TrackedItem(
            id=5,
            title="Digestive Comfort",
            points=20,
            details="Subjective evaluation of your digestive comfort during the day",
        ),
    ),
}


def default_goals(language: str | None) -> list[TrackedItem]:
    return list(DEFAULT_GOALS[coerce_language(language)])


def default_results(language: str | None) -> list[TrackedItem]:
    return list(DEFAULT_RESULTS[coerce_language(language)])


__all__ = ["DEFAULT_GOALS", "DEFAULT_RESULTS", "default_goals", "default_results"]
