"""
Team renderer - HTML fragments for designer and skill display.

Features:
- Designer card with avatar initials fallback and status badge
- Skill bar with current level and target marker
- Metric tile for dashboard numbers
"""

from typing import Optional
import html

from designdesk.schemas import Designer, Skill, SkillRating


# Designer level to CSS class mapping for badge color
LEVEL_CLASSES = {
    "Junior": "level-junior",      # Green
    "Middle": "level-middle",      # Blue
    "Senior": "level-senior",      # Purple
    "Lead": "level-lead",          # Orange
}


def get_team_css() -> str:
    """Get CSS styles for designer cards, skill bars and metric tiles."""
    return """
    <style>
    .designer-card {
        display: flex;
        gap: 12px;
        align-items: center;
        border: 1px solid #e0e0e0;
        border-radius: 8px;
        padding: 12px 16px;
        margin: 0.5em 0;
        background: #fff;
    }
    .designer-avatar {
        width: 48px;
        height: 48px;
        border-radius: 50%;
        object-fit: cover;
        background: #E3F2FD;
        color: #1976D2;
        display: flex;
        align-items: center;
        justify-content: center;
        font-weight: 600;
    }
    .designer-name {
        font-weight: 600;
        font-size: 1.05em;
    }
    .designer-position {
        color: #666;
        font-size: 0.9em;
    }
    .level-badge {
        border-radius: 10px;
        padding: 1px 8px;
        font-size: 0.75em;
        margin-left: 6px;
    }
    .level-junior { background: #E8F5E9; color: #388E3C; }
    .level-middle { background: #E3F2FD; color: #1976D2; }
    .level-senior { background: #F3E5F5; color: #7B1FA2; }
    .level-lead { background: #FFF3E0; color: #F57C00; }
    .status-inactive {
        opacity: 0.6;
    }
    .skill-bar {
        margin: 6px 0;
    }
    .skill-bar-label {
        display: flex;
        justify-content: space-between;
        font-size: 0.85em;
        color: #455A64;
    }
    .skill-bar-track {
        position: relative;
        height: 8px;
        background: #eceff1;
        border-radius: 4px;
    }
    .skill-bar-fill {
        height: 100%;
        background: #1976D2;
        border-radius: 4px;
    }
    .skill-bar-target {
        position: absolute;
        top: -2px;
        width: 2px;
        height: 12px;
        background: #F57C00;
    }
    .metric-tile {
        border: 1px solid #e0e0e0;
        border-radius: 8px;
        padding: 10px 14px;
        background: #fafafa;
    }
    .metric-value {
        font-size: 1.6em;
        font-weight: 600;
    }
    .metric-label {
        color: #666;
        font-size: 0.85em;
    }
    </style>
    """


def initials(name: str) -> str:
    """First letters of the first two words, upper-cased."""
    parts = name.split()
    return "".join(p[0] for p in parts[:2]).upper() or "?"


def _percent(value: float, maximum: float = 100) -> int:
    if maximum <= 0:
        return 0
    return max(0, min(100, round(value / maximum * 100)))


def render_designer_card(designer: Designer) -> str:
    if designer.avatar:
        avatar = f'<img class="designer-avatar" src="{html.escape(designer.avatar, quote=True)}" alt="">'
    else:
        avatar = f'<div class="designer-avatar">{html.escape(initials(designer.name))}</div>'

    level_class = LEVEL_CLASSES.get(designer.level, "level-middle")
    card_class = "designer-card" if designer.status == "Active" else "designer-card status-inactive"
    position = f'<div class="designer-position">{html.escape(designer.position)}</div>' if designer.position else ''

    return (
        f'<div class="{card_class}">'
        f'{avatar}'
        f'<div><span class="designer-name">{html.escape(designer.name)}</span>'
        f'<span class="level-badge {level_class}">{html.escape(designer.level)}</span>'
        f'{position}</div>'
        f'</div>'
    )


def render_skill_bar(rating: SkillRating, skill: Optional[Skill] = None) -> str:
    """Render one skill rating; the target level is drawn as a marker."""
    name = skill.name if skill else rating.skill_id
    maximum = skill.max_level if skill else 100
    current = _percent(rating.current_level, maximum)
    target = _percent(rating.target_level, maximum)

    return (
        f'<div class="skill-bar">'
        f'<div class="skill-bar-label"><span>{html.escape(name)}</span>'
        f'<span>{rating.current_level} / {rating.target_level}</span></div>'
        f'<div class="skill-bar-track">'
        f'<div class="skill-bar-fill" style="width:{current}%"></div>'
        f'<div class="skill-bar-target" style="left:{target}%"></div>'
        f'</div></div>'
    )


def render_skill_bars(designer: Designer, skills: list[Skill]) -> str:
    if not designer.skills:
        return ""
    catalogue = {s.id: s for s in skills}
    return "".join(render_skill_bar(r, catalogue.get(r.skill_id)) for r in designer.skills)


def render_metric(label: str, value) -> str:
    return (
        f'<div class="metric-tile">'
        f'<div class="metric-value">{html.escape(str(value))}</div>'
        f'<div class="metric-label">{html.escape(label)}</div>'
        f'</div>'
    )
