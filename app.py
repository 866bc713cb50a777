from __future__ import annotations

from datetime import date, timedelta

import streamlit as st

from swiss_health_tracker.charts import build_progress_figure, build_trend_figure
from swiss_health_tracker.config import AppConfig, configure_logging, load_config
from swiss_health_tracker.i18n import LANGUAGE_OPTIONS, LanguageCode, translate_text
from swiss_health_tracker.ledger import HealthLedger
from swiss_health_tracker.models import coerce_points, points_warning
from swiss_health_tracker.storage import FileStorageBackend, PreferencesStore

SELECTED_DATE_KEY = "selected_date"
CONFIRM_RESET_KEY = "confirm_reset"

GOALS_PAGE_LABEL = ("Objectifs du jour", "Daily goals")
RESULTS_PAGE_LABEL = ("Résultats", "Results")
STATS_PAGE_LABEL = ("Statistiques", "Statistics")
SETTINGS_PAGE_LABEL = ("Paramètres", "Settings")


@st.cache_resource
def _bootstrap_ledger(data_dir: str) -> HealthLedger:
    return HealthLedger(PreferencesStore(FileStorageBackend(data_dir)))


def _selected_date() -> date:
    selected = st.session_state.get(SELECTED_DATE_KEY)
    if isinstance(selected, date):
        return selected
    today = date.today()
    st.session_state[SELECTED_DATE_KEY] = today
    return today


def render_date_navigation(language: LanguageCode) -> date:
    current = _selected_date()
    previous_col, label_col, next_col = st.columns([1, 3, 1])
    if previous_col.button("◀", key="date_previous"):
        current -= timedelta(days=1)
    if next_col.button("▶", key="date_next"):
        current += timedelta(days=1)
    st.session_state[SELECTED_DATE_KEY] = current
    label_col.markdown(f"**{current.isoformat()}**")
    if current == date.today():
        label_col.caption(translate_text(("Aujourd'hui", "Today"), language))
    return current


def render_goals_page(ledger: HealthLedger, language: LanguageCode) -> None:
    day = render_date_navigation(language)
    for goal in ledger.goals_for(day):
        checked = st.checkbox(
            f"{goal.title} ({goal.points})",
            value=goal.is_completed,
            help=goal.details,
            key=f"goal_{goal.id}_{day.isoformat()}",
        )
        if checked != goal.is_completed:
            ledger.toggle_goal(goal.id, day)
            st.rerun()

    summary = ledger.daily_summary(day)
    st.progress(summary.ratio)
    st.plotly_chart(build_progress_figure(summary.earned, summary.maximum, language=language), use_container_width=True)


def render_results_page(ledger: HealthLedger, language: LanguageCode) -> None:
    day = render_date_navigation(language)
    for result in ledger.results_for(day):
        checked = st.checkbox(
            result.title,
            value=result.is_completed,
            help=result.details,
            key=f"result_{result.id}_{day.isoformat()}",
        )
        if checked != result.is_completed:
            ledger.toggle_result(result.id, day)
            st.rerun()

    note = st.text_area(
        translate_text(("Note du jour", "Daily note"), language),
        value=ledger.get_note(day),
        key=f"note_{day.isoformat()}",
    )
    if st.button(translate_text(("Enregistrer", "Save"), language), key="save_note"):
        ledger.save_note(day, note)
        st.success(translate_text(("Note enregistrée", "Note saved"), language))


def render_stats_page(ledger: HealthLedger, language: LanguageCode, config: AppConfig) -> None:
    snapshot = ledger.stats(date.today(), config.trend_window_days)
    st.plotly_chart(
        build_trend_figure(snapshot.dates, snapshot.goals, snapshot.results, language=language),
        use_container_width=True,
    )


def render_settings_page(ledger: HealthLedger, language: LanguageCode) -> None:
    goals = ledger.goals()
    warning = points_warning(goals)
    if warning:
        st.warning(translate_text((f"Total des points : {warning}", f"Total points: {warning}"), language))

    for goal in goals:
        with st.expander(goal.title):
            title = st.text_input(
                translate_text(("Titre", "Title"), language), value=goal.title, key=f"title_{goal.id}"
            )
            points = st.text_input(
                translate_text(("Points", "Points"), language), value=str(goal.points), key=f"points_{goal.id}"
            )
            details = st.text_area(
                translate_text(("Détails", "Details"), language), value=goal.details, key=f"details_{goal.id}"
            )
            save_col, delete_col = st.columns(2)
            if save_col.button(translate_text(("Enregistrer", "Save"), language), key=f"save_{goal.id}"):
                ledger.update_goal(goal.id, title, coerce_points(points), details)
                st.rerun()
            if delete_col.button(translate_text(("Supprimer", "Delete"), language), key=f"delete_{goal.id}"):
                ledger.delete_goal(goal.id)
                st.rerun()

    with st.form("new_goal", clear_on_submit=True):
        title = st.text_input(translate_text(("Nouvel objectif", "New goal"), language), key="new_goal_title")
        points = st.text_input(translate_text(("Points", "Points"), language), value="10", key="new_goal_points")
        details = st.text_area(translate_text(("Détails", "Details"), language), key="new_goal_details")
        submitted = st.form_submit_button(translate_text(("Ajouter", "Add"), language), key="new_goal_submit")
        if submitted and title.strip():
            ledger.add_goal(title.strip(), coerce_points(points), details)
            st.rerun()

    st.divider()
    if st.button(translate_text(("Réinitialiser toutes les données", "Reset all data"), language), key="reset"):
        st.session_state[CONFIRM_RESET_KEY] = True
    if st.session_state.get(CONFIRM_RESET_KEY):
        st.error(translate_text(("Cette action est irréversible.", "This cannot be undone."), language))
        confirm_col, cancel_col = st.columns(2)
        if confirm_col.button(translate_text(("Confirmer", "Confirm"), language), key="reset_confirm"):
            ledger.clear_all_data()
            st.session_state[CONFIRM_RESET_KEY] = False
            st.rerun()
        if cancel_col.button(translate_text(("Annuler", "Cancel"), language), key="reset_cancel"):
            st.session_state[CONFIRM_RESET_KEY] = False
            st.rerun()


def render_language_toggle(ledger: HealthLedger) -> LanguageCode:
    labels = list(LANGUAGE_OPTIONS)
    current = ledger.language
    index = list(LANGUAGE_OPTIONS.values()).index(current)
    selected_label = st.sidebar.radio("Langue / Language", labels, index=index, key="language_toggle")
    selected = LANGUAGE_OPTIONS[selected_label]
    if selected != current:
        ledger.set_language(selected)
    return selected


def main() -> None:
    config = load_config()
    configure_logging(config.log_level)
    st.set_page_config(page_title="Swiss Health", page_icon="✅", layout="centered")
    ledger = _bootstrap_ledger(str(config.data_dir))

    language = render_language_toggle(ledger)
    pages = [
        translate_text(label, language)
        for label in (GOALS_PAGE_LABEL, RESULTS_PAGE_LABEL, STATS_PAGE_LABEL, SETTINGS_PAGE_LABEL)
    ]
    selection = st.sidebar.radio(translate_text(("Navigation", "Navigation"), language), pages, key="navigation")

    st.title("Swiss Health")
    if selection == pages[0]:
        render_goals_page(ledger, language)
    elif selection == pages[1]:
        render_results_page(ledger, language)
    elif selection == pages[2]:
        render_stats_page(ledger, language, config)
    else:
        render_settings_page(ledger, language)


if __name__ == "__main__":
    main()
