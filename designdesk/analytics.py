"""
Team analytics for the dashboard, analytics and skills-matrix views.

Aggregates are computed with pandas over flat frames built from the stored
records. Every function tolerates empty inputs and returns zeros.
"""

import pandas as pd

from designdesk.schemas import DESIGNER_LEVELS, Designer, Project, Skill


def designers_frame(designers: list[Designer]) -> pd.DataFrame:
    """One row per designer with the KPI columns used across the views."""
    rows = [
        {
            "id": d.id,
            "name": d.name,
            "level": d.level,
            "status": d.status,
            "efficiency": d.efficiency,
            "productivity": d.kpis.productivity,
            "quality": d.kpis.quality,
            "overall_score": d.kpis.overall_score,
        }
        for d in designers
    ]
    frame = pd.DataFrame(rows, columns=[
        "id", "name", "level", "status", "efficiency", "productivity", "quality", "overall_score",
    ])
    return frame.astype({"efficiency": float, "productivity": float, "quality": float, "overall_score": float})


def ratings_frame(designers: list[Designer]) -> pd.DataFrame:
    """One row per (designer, skill rating)."""
    rows = [
        {
            "designer_id": d.id,
            "skill_id": r.skill_id,
            "current_level": r.current_level,
            "target_level": r.target_level,
        }
        for d in designers
        for r in d.skills
    ]
    frame = pd.DataFrame(rows, columns=["designer_id", "skill_id", "current_level", "target_level"])
    return frame.astype({"current_level": int, "target_level": int})


def _rounded_mean(series: pd.Series) -> int:
    if series.empty:
        return 0
    return int(round(series.mean()))


def team_overview(designers: list[Designer], projects: list[Project] | None = None) -> dict:
    """
    Headline numbers for the dashboard.

    Projects count both the top-level collection and the designers' own
    project records, de-duplicated by id.
    """
    frame = designers_frame(designers)

    all_projects = {p.id: p for d in designers for p in d.projects}
    all_projects.update({p.id: p for p in (projects or [])})
    statuses = pd.Series([p.status for p in all_projects.values()], dtype="object")

    module_statuses = pd.Series(
        [m.status for d in designers for m in d.learning_modules], dtype="object"
    )

    return {
        "total_designers": len(frame),
        "active_designers": int((frame["status"] == "Active").sum()),
        "avg_productivity": _rounded_mean(frame["productivity"]),
        "avg_efficiency": _rounded_mean(frame["efficiency"]),
        "avg_quality": _rounded_mean(frame["quality"]),
        "active_projects": int((statuses == "Active").sum()),
        "completed_projects": int((statuses == "Completed").sum()),
        "learning_in_progress": int((module_statuses == "In Progress").sum()),
        "learning_completed": int((module_statuses == "Completed").sum()),
    }


def level_distribution(designers: list[Designer]) -> list[dict]:
    """Headcount and percentage per level, in seniority order."""
    frame = designers_frame(designers)
    counts = frame["level"].value_counts()
    total = len(frame)
    return [
        {
            "level": level,
            "count": int(counts.get(level, 0)),
            "percent": round(counts.get(level, 0) / total * 100) if total else 0,
        }
        for level in DESIGNER_LEVELS
    ]


def top_performers(designers: list[Designer], limit: int = 5) -> list[Designer]:
    """Designers ordered by overall KPI score, best first."""
    return sorted(designers, key=lambda d: d.kpis.overall_score, reverse=True)[:limit]


def skill_stats(skills: list[Skill], designers: list[Designer]) -> list[dict]:
    """
    Per-skill coverage.

    ``gap`` is the number of designers with no rating for the skill.
    """
    ratings = ratings_frame(designers)
    grouped = ratings.groupby("skill_id")["current_level"].agg(["mean", "count"])
    team_size = len(designers)

    stats = []
    for skill in skills:
        if skill.id in grouped.index:
            avg_level = int(round(grouped.loc[skill.id, "mean"]))
            holders = int(grouped.loc[skill.id, "count"])
        else:
            avg_level = 0
            holders = 0
        stats.append({
            "skill_id": skill.id,
            "name": skill.name,
            "category": skill.category,
            "avg_level": avg_level,
            "holders": holders,
            "gap": max(team_size - holders, 0),
        })
    return stats


def matrix_overview(skills: list[Skill], designers: list[Designer]) -> dict:
    """Summary row of the skills matrix."""
    stats = pd.DataFrame(skill_stats(skills, designers), columns=["avg_level", "holders", "gap"])
    cells = len(skills) * len(designers)
    return {
        "total_skills": len(skills),
        "avg_level": _rounded_mean(stats["avg_level"]),
        "coverage": round(stats["holders"].sum() / cells * 100) if cells else 0,
        "skill_gaps": int(stats["gap"].sum()),
    }


def filter_skills(skills: list[Skill], search: str = "", category: str = "all") -> list[Skill]:
    """Case-insensitive name search plus an optional category filter."""
    query = search.lower()
    return [
        s for s in skills
        if query in s.name.lower() and (category == "all" or s.category == category)
    ]


def skill_categories(skills: list[Skill]) -> list[str]:
    return sorted({s.category for s in skills if s.category})
