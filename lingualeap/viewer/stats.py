"""
Stats renderer - Progress dashboard cards.

Provides:
- Overall stat cards (XP, lessons, correct answers, languages)
- Per-language progress cards with flag image and completion bar
"""

import html

from lingualeap.classroom import OverallStats, country_info, display_name, get_flag_url
from lingualeap.classroom.stats import format_completed_date
from lingualeap.schemas import LanguageProgress


def get_stats_css() -> str:
    """Get CSS styles for the stats dashboard."""
    return """
    <style>
    .stats-grid {
        display: grid;
        grid-template-columns: repeat(4, 1fr);
        gap: 1em;
        margin-bottom: 1.5em;
    }
    .stat-card {
        background: white;
        border-radius: 12px;
        padding: 1em;
        text-align: center;
        box-shadow: 0 2px 6px rgba(0, 0, 0, 0.08);
    }
    .stat-value {
        font-size: 1.8em;
        font-weight: 700;
        color: #1CB0F6;
    }
    .stat-label {
        color: #777;
        font-size: 0.9em;
    }
    .language-progress-card {
        background: white;
        border-radius: 12px;
        padding: 1em 1.5em;
        margin-bottom: 1em;
        box-shadow: 0 2px 6px rgba(0, 0, 0, 0.08);
    }
    .language-progress-header {
        display: flex;
        align-items: center;
        gap: 0.8em;
    }
    .flag-image {
        width: 48px;
        height: 48px;
        border-radius: 50%;
        object-fit: cover;
        border: 2px solid #e5e5e5;
    }
    .country-label {
        color: #999;
        font-size: 0.85em;
    }
    .progress-bar {
        background: #e5e5e5;
        border-radius: 8px;
        height: 10px;
        margin-top: 0.4em;
    }
    .progress-bar-fill {
        background: #58CC02;
        border-radius: 8px;
        height: 10px;
    }
    .last-completed {
        color: #999;
        font-size: 0.8em;
        margin-top: 0.5em;
    }
    </style>
    """


def render_stat_cards(total_xp: int, stats: OverallStats) -> str:
    """Render the four summary cards."""
    cards = [
        ("⭐", total_xp, "Total XP"),
        ("📚", stats.total_lessons, "Lessons Completed"),
        ("✓", stats.total_correct_answers, "Correct Answers"),
        ("🌍", stats.languages_started, "Languages Started"),
    ]
    parts = ['<div class="stats-grid">']
    for icon, value, label in cards:
        parts.append('<div class="stat-card">')
        parts.append(f'<div>{icon}</div>')
        parts.append(f'<div class="stat-value">{value}</div>')
        parts.append(f'<div class="stat-label">{label}</div>')
        parts.append('</div>')
    parts.append('</div>')
    return ''.join(parts)


def render_language_progress_card(language_id: str, entry: LanguageProgress) -> str:
    """
    Render progress for one language.

    The completion bar shows the high score, capped at 100%.
    """
    country_code, country_name, _ = country_info(language_id)
    name = html.escape(display_name(language_id))
    completion = min(entry.high_score, 100)

    parts = ['<div class="language-progress-card">']
    parts.append('<div class="language-progress-header">')
    parts.append(
        f'<img class="flag-image" src="{get_flag_url(country_code)}" '
        f'alt="{html.escape(country_name)} flag" loading="lazy">'
    )
    parts.append(f'<div><b>{name}</b><br><span class="country-label">{html.escape(country_name)}</span></div>')
    parts.append('</div>')
    parts.append(
        f'<div>Lessons: <b>{entry.completed_lessons}</b> · '
        f'High Score: <b>{entry.high_score}%</b> · '
        f'Last Score: <b>{entry.last_score}%</b></div>'
    )
    parts.append(f'<div class="progress-bar"><div class="progress-bar-fill" style="width: {completion}%"></div></div>')
    if entry.last_completed is not None:
        parts.append(f'<div class="last-completed">Last completed: {format_completed_date(entry)}</div>')
    parts.append('</div>')
    return ''.join(parts)
