"""
DesignDesk - Design Team Management Dashboard

Streamlit application for team leads: designer profiles, skills matrix,
learning modules, projects, analytics and a team calendar, all kept in a
local document store.

Usage:
    streamlit run app.py
"""

from datetime import date
from typing import Optional

import pandas as pd
import streamlit as st

from designdesk.analytics import (
    filter_skills,
    level_distribution,
    matrix_overview,
    ratings_frame,
    skill_categories,
    skill_stats,
    team_overview,
    top_performers,
)
from designdesk.config import load_config, setup_logging, PRODUCT_SLUG
from designdesk.editors import (
    Debouncer,
    check_form,
    discard_drafts,
    draft_key_for_test,
    validate_designer,
    validate_learning_module,
    validate_lesson,
    validate_project,
    validate_skill,
    validate_test,
)
from designdesk.errors import StorageError
from designdesk.navigation import (
    HOME,
    DesignerEditorPage,
    DesignerProfilePage,
    LessonEditorPage,
    LessonPage,
    ModuleDetailsPage,
    ModuleEditorPage,
    NavigationState,
    ProjectEditorPage,
    Section,
    SectionPage,
    SkillEditorPage,
    Subsection,
    TestEditorPage,
    back_label,
    breadcrumb_target,
    build_breadcrumbs,
    go_back,
    module_editor_state,
    navigate_to,
    resolve_view,
    section_label,
)
from designdesk.notifications import (
    add_notification,
    mark_all_read,
    unread_count,
)
from designdesk.schedule import collect_events, events_for_day, upcoming_deadlines, upcoming_in_document
from designdesk.schemas import (
    DESIGNER_LEVELS,
    Designer,
    LearningModule,
    Lesson,
    NotificationType,
    Project,
    Skill,
    SkillRating,
    Test,
)
from designdesk.storage import DataStore, SqliteBackend
from designdesk.utils import load_seed, new_id, utcnow
from designdesk.viewer import (
    get_chrome_css,
    get_team_css,
    render_breadcrumbs,
    render_designer_card,
    render_metric,
    render_notification_list,
    render_skill_bars,
)


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------

CONFIG = load_config()
setup_logging(CONFIG)

st.set_page_config(
    page_title="DesignDesk",
    page_icon="🎨",
    layout="wide",
    initial_sidebar_state="expanded",
)


# -----------------------------------------------------------------------------
# Session State Initialization
# -----------------------------------------------------------------------------

def init_session_state():
    """Initialize session state variables."""
    if "store" not in st.session_state:
        st.session_state.store = DataStore(
            SqliteBackend(CONFIG.storage_path),
            key=CONFIG.storage_key,
        )

    if "notifications" not in st.session_state:
        st.session_state.notifications = ()

    if "nav" not in st.session_state:
        st.session_state.nav = HOME

    if "autosavers" not in st.session_state:
        st.session_state.autosavers = {}

    if "seeded" not in st.session_state:
        store = st.session_state.store
        if store.get_all_data() is None:
            store.initialize_with_mock_data(load_seed())
            notify("Demo data loaded", "The dashboard was filled with sample designers and skills.")
        st.session_state.seeded = True


def notify(title: str, message: str, type: NotificationType = NotificationType.INFO):
    st.session_state.notifications = add_notification(
        st.session_state.notifications, title, message, type, cap=CONFIG.notification_cap,
    )


def go(state: NavigationState):
    """Switch to a new navigation state and redraw."""
    discard_drafts(st.session_state, st.session_state.nav, state)
    st.session_state.nav = state
    st.rerun()


def open_view(**changes):
    go(navigate_to(st.session_state.nav, **changes))


def language() -> str:
    """Saved UI language, or the configured default until one is saved."""
    document = st.session_state.store.get_all_data()
    if document is None or "language" not in document.settings:
        return CONFIG.language
    return st.session_state.store.get_settings().language


def _to_date(value: Optional[str]) -> Optional[date]:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _iso(value: Optional[date]) -> Optional[str]:
    return value.isoformat() if value else None


def show_errors(errors: list[str]):
    for error in errors:
        st.error(error)


# -----------------------------------------------------------------------------
# Sidebar: Sections, Notifications
# -----------------------------------------------------------------------------

def render_sidebar():
    """Render the sidebar with section navigation and notifications."""
    st.sidebar.title("🎨 DesignDesk")
    lang = language()
    nav = st.session_state.nav

    sections = [s.value for s in Section]
    current = nav.section if nav.section in sections else Section.DASHBOARD.value
    choice = st.sidebar.radio(
        "Sections",
        sections,
        index=sections.index(current),
        format_func=lambda s: section_label(s, lang),
        label_visibility="collapsed",
    )
    if choice != current:
        go(NavigationState(section=choice))

    st.sidebar.divider()

    notifications = st.session_state.notifications
    unread = unread_count(notifications)
    with st.sidebar.expander(f"🔔 Notifications ({unread})"):
        st.markdown(get_chrome_css(), unsafe_allow_html=True)
        st.markdown(render_notification_list(notifications[:10]), unsafe_allow_html=True)
        if unread and st.button("Mark all as read", use_container_width=True):
            st.session_state.notifications = mark_all_read(notifications)
            st.rerun()


# -----------------------------------------------------------------------------
# Header: Breadcrumbs, Back Button
# -----------------------------------------------------------------------------

def render_header():
    nav = st.session_state.nav
    lang = language()
    crumbs = build_breadcrumbs(nav, lang)

    st.markdown(get_chrome_css(), unsafe_allow_html=True)
    st.markdown(render_breadcrumbs(crumbs), unsafe_allow_html=True)

    if len(crumbs) < 2:
        return

    cols = st.columns([1] * len(crumbs) + [6])
    with cols[0]:
        if st.button(f"← {back_label(lang)}", key="nav_back", use_container_width=True):
            go(go_back(nav))
    for index, crumb in enumerate(crumbs[:-1], start=1):
        with cols[index]:
            if st.button(crumb.label, key=f"crumb_{index}", use_container_width=True):
                go(breadcrumb_target(nav, crumb))


# -----------------------------------------------------------------------------
# Section: Dashboard
# -----------------------------------------------------------------------------

def render_dashboard():
    store = st.session_state.store
    designers = store.get_designers()
    overview = team_overview(designers, store.get_projects())

    st.title("Dashboard")
    st.markdown(get_team_css(), unsafe_allow_html=True)

    cols = st.columns(4)
    tiles = [
        ("Designers", overview["total_designers"]),
        ("Avg. productivity", f"{overview['avg_productivity']}%"),
        ("Active projects", overview["active_projects"]),
        ("Learning in progress", overview["learning_in_progress"]),
    ]
    for col, (label, value) in zip(cols, tiles):
        with col:
            st.markdown(render_metric(label, value), unsafe_allow_html=True)

    left, right = st.columns(2)
    with left:
        st.subheader("Top performers")
        for designer in top_performers(designers, limit=3):
            st.markdown(render_designer_card(designer), unsafe_allow_html=True)

    with right:
        st.subheader("Upcoming deadlines")
        document = store.get_all_data()
        deadlines = upcoming_deadlines(document, date.today()) if document else []
        if not deadlines:
            st.info("Nothing due in the next two weeks.")
        for event in deadlines:
            owner = f" ({event.designer_name})" if event.designer_name else ""
            st.markdown(f"**{event.day:%d.%m}** {event.title}{owner}")


# -----------------------------------------------------------------------------
# Section: Designers
# -----------------------------------------------------------------------------

def render_designers_section():
    store = st.session_state.store
    st.title("Designers")
    st.markdown(get_team_css(), unsafe_allow_html=True)

    col1, col2 = st.columns([3, 1])
    with col1:
        search = st.text_input("Search designers", placeholder="Name or position")
    with col2:
        if st.button("➕ Add designer", use_container_width=True):
            open_view(subsection=Subsection.DESIGNER_EDITOR, id=None, mode="create")

    query = search.lower()
    designers = [
        d for d in store.get_designers()
        if query in d.name.lower() or query in d.position.lower()
    ]

    for designer in designers:
        col1, col2, col3 = st.columns([6, 1, 1])
        with col1:
            st.markdown(render_designer_card(designer), unsafe_allow_html=True)
        with col2:
            if st.button("View", key=f"view_{designer.id}", use_container_width=True):
                open_view(subsection=Subsection.DESIGNER_PROFILE, id=designer.id, mode="view")
        with col3:
            if st.button("Edit", key=f"edit_{designer.id}", use_container_width=True):
                open_view(subsection=Subsection.DESIGNER_EDITOR, id=designer.id, mode="edit")


def render_designer_profile(page: DesignerProfilePage):
    store = st.session_state.store
    designer = store.get_designer(page.designer_id)
    if designer is None:
        st.error(f"Designer not found: {page.designer_id}")
        return

    st.markdown(get_team_css(), unsafe_allow_html=True)
    st.markdown(render_designer_card(designer), unsafe_allow_html=True)

    col1, col2 = st.columns([1, 1])
    with col1:
        if st.button("Edit profile", type="primary", use_container_width=True):
            open_view(subsection=Subsection.DESIGNER_EDITOR, mode="edit")
    with col2:
        if st.button("Delete designer", use_container_width=True):
            store.delete_designer(designer.id)
            notify("Designer deleted", designer.name, NotificationType.WARNING)
            go(NavigationState(section=Section.DESIGNERS.value))

    kpis = designer.kpis
    cols = st.columns(4)
    for col, (label, value) in zip(cols, [
        ("Productivity", kpis.productivity),
        ("Quality", kpis.quality),
        ("Collaboration", kpis.collaboration),
        ("Overall", kpis.overall_score),
    ]):
        with col:
            st.markdown(render_metric(label, f"{value:.0f}"), unsafe_allow_html=True)

    tab1, tab2, tab3, tab4 = st.tabs(["Skills", "Projects", "Learning", "Reviews"])

    with tab1:
        bars = render_skill_bars(designer, store.get_skills())
        if bars:
            st.markdown(bars, unsafe_allow_html=True)
        else:
            st.info("No skills rated yet.")

    with tab2:
        for project in designer.projects:
            st.markdown(f"**{project.name}** · {project.status} · {project.role}")
            st.progress(project.progress / 100)

    with tab3:
        for module in designer.learning_modules:
            st.markdown(f"**{module.title}** · {module.status}")
            st.progress(module.progress / 100)

    with tab4:
        for review in designer.peer_reviews:
            st.markdown(f"{'⭐' * review.rating} **{review.reviewer_name}** ({review.date})")
            if review.comment:
                st.caption(review.comment)


def _autosaver(designer_id: str) -> Debouncer:
    autosavers = st.session_state.autosavers
    if designer_id not in autosavers:
        store = st.session_state.store
        autosavers[designer_id] = Debouncer(
            CONFIG.autosave_delay,
            lambda record: store.save_designer(record.revised()),
        )
    return autosavers[designer_id]


def _rating_inputs(designer: Optional[Designer], skills: list[Skill], key: str) -> list[dict]:
    existing = {r.skill_id: r for r in designer.skills} if designer else {}
    catalogue = {s.id: s for s in skills}
    selected = st.multiselect(
        "Skills",
        list(catalogue),
        default=[sid for sid in existing if sid in catalogue],
        format_func=lambda sid: catalogue[sid].name,
        key=f"{key}_skills",
    )

    ratings = []
    for skill_id in selected:
        rating = existing.get(skill_id) or SkillRating(skill_id=skill_id)
        col1, col2 = st.columns(2)
        with col1:
            current = st.slider(
                f"{catalogue[skill_id].name}: current", 0, 100, rating.current_level,
                key=f"{key}_{skill_id}_current",
            )
        with col2:
            # Target can't go below the current level
            if current < 100:
                target = st.slider(
                    f"{catalogue[skill_id].name}: target", current, 100, max(rating.target_level, current),
                    key=f"{key}_{skill_id}_target",
                )
            else:
                target = 100
                st.caption(f"{catalogue[skill_id].name}: target 100")
        ratings.append({
            **rating.to_json_dict(),
            "currentLevel": current,
            "targetLevel": target,
        })
    return ratings


def render_designer_editor(page: DesignerEditorPage):
    store = st.session_state.store
    designer = store.get_designer(page.designer_id) if page.designer_id else None
    if page.mode != "create" and designer is None:
        st.error(f"Designer not found: {page.designer_id}")
        return

    designer_id = designer.id if designer else st.session_state.setdefault("draft_designer_id", new_id())
    key = f"designer_{designer_id}"
    base = designer.to_json_dict() if designer else {"id": designer_id}

    st.title("Edit designer" if designer else "New designer")

    col1, col2 = st.columns(2)
    with col1:
        name = st.text_input("Name", base.get("name", ""), key=f"{key}_name")
        email = st.text_input("Email", base.get("email", ""), key=f"{key}_email")
        phone = st.text_input("Phone", base.get("phone") or "", key=f"{key}_phone")
        location = st.text_input("Location", base.get("location", ""), key=f"{key}_location")
        avatar = st.text_input("Avatar URL", base.get("avatar") or "", key=f"{key}_avatar")
        birth_date = st.date_input(
            "Birth date", _to_date(base.get("birthDate")),
            min_value=date(1940, 1, 1), key=f"{key}_birth",
        )
    with col2:
        position = st.text_input("Position", base.get("position", ""), key=f"{key}_position")
        department = st.text_input("Department", base.get("department", ""), key=f"{key}_department")
        level = st.selectbox(
            "Level", DESIGNER_LEVELS,
            index=DESIGNER_LEVELS.index(base.get("level", "Middle")), key=f"{key}_level",
        )
        status = st.selectbox(
            "Status", ["Active", "Inactive"],
            index=["Active", "Inactive"].index(base.get("status", "Active")), key=f"{key}_status",
        )
        salary = st.number_input("Salary", value=float(base.get("salary", 0)), step=100.0, key=f"{key}_salary")
        hours = st.number_input(
            "Hours per week", value=int(base.get("hoursPerWeek", 40)), step=1, key=f"{key}_hours",
        )
        join_date = st.date_input("Join date", _to_date(base.get("joinDate")), key=f"{key}_join")

    ratings = _rating_inputs(designer, store.get_skills(), key)

    form = {
        **base,
        "name": name,
        "email": email,
        "phone": phone or None,
        "location": location,
        "avatar": avatar or None,
        "birthDate": _iso(birth_date),
        "position": position,
        "department": department,
        "level": level,
        "status": status,
        "salary": salary,
        "hoursPerWeek": hours,
        "joinDate": _iso(join_date),
        "skills": ratings,
    }
    record, errors = check_form(Designer, form, validate_designer)
    show_errors(errors)

    # Autosave edits of existing designers once the form is valid
    autosaver = _autosaver(designer_id)
    if designer and record and not errors and store.get_settings().autosave:
        fields = {"version", "last_modified"}
        if record.model_dump(exclude=fields) != designer.model_dump(exclude=fields):
            autosaver.trigger(record)
            st.caption("Saving…")
        elif not autosaver.pending:
            st.caption(f"Saved · v{designer.version}")

    if st.button("Save", type="primary", disabled=bool(errors) or record is None):
        autosaver.cancel()
        store.save_designer(record.revised())
        st.session_state.pop("draft_designer_id", None)
        notify("Designer saved", record.name, NotificationType.SUCCESS)
        go(navigate_to(st.session_state.nav, subsection=Subsection.DESIGNER_PROFILE, id=record.id, mode="view"))


# -----------------------------------------------------------------------------
# Section: Skills
# -----------------------------------------------------------------------------

def render_skills_section():
    store = st.session_state.store
    skills = store.get_skills()
    designers = store.get_designers()

    st.title("Skills Matrix")

    overview = matrix_overview(skills, designers)
    cols = st.columns(4)
    for col, (label, value) in zip(cols, [
        ("Skills", overview["total_skills"]),
        ("Average level", overview["avg_level"]),
        ("Coverage", f"{overview['coverage']}%"),
        ("Skill gaps", overview["skill_gaps"]),
    ]):
        with col:
            st.markdown(get_team_css() + render_metric(label, value), unsafe_allow_html=True)

    col1, col2, col3 = st.columns([3, 2, 1])
    with col1:
        search = st.text_input("Search skills")
    with col2:
        category = st.selectbox("Category", ["all"] + skill_categories(skills))
    with col3:
        if st.button("➕ Add skill", use_container_width=True):
            open_view(subsection=Subsection.SKILL_EDITOR, id=None, mode="create")

    visible = filter_skills(skills, search, category)

    ratings = ratings_frame(designers)
    if not ratings.empty and visible:
        names = {d.id: d.name for d in designers}
        matrix = ratings.pivot_table(index="designer_id", columns="skill_id", values="current_level")
        matrix = matrix.reindex(columns=[s.id for s in visible])
        matrix.columns = [s.name for s in visible]
        matrix.index = [names.get(i, i) for i in matrix.index]
        st.dataframe(matrix, use_container_width=True)

    for skill in visible:
        col1, col2, col3 = st.columns([6, 1, 1])
        with col1:
            st.markdown(f"**{skill.name}** · {skill.category}")
        with col2:
            if st.button("Edit", key=f"edit_skill_{skill.id}", use_container_width=True):
                open_view(subsection=Subsection.SKILL_EDITOR, id=skill.id, mode="edit")
        with col3:
            if st.button("Delete", key=f"delete_skill_{skill.id}", use_container_width=True):
                store.delete_skill(skill.id)
                notify("Skill deleted", skill.name, NotificationType.WARNING)
                st.rerun()


def render_skill_editor(page: SkillEditorPage):
    store = st.session_state.store
    skill = store.get_skill(page.skill_id) if page.skill_id else None
    base = skill.to_json_dict() if skill else {"id": new_id()}

    st.title("Edit skill" if skill else "New skill")
    with st.form("skill_form"):
        name = st.text_input("Name", base.get("name", ""))
        category = st.text_input("Category", base.get("category", ""))
        description = st.text_area("Description", base.get("description", ""))
        max_level = st.number_input("Max level", min_value=1, value=int(base.get("maxLevel", 100)))
        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        record, errors = check_form(Skill, {
            **base, "name": name, "category": category, "description": description, "maxLevel": max_level,
        }, validate_skill)
        if errors:
            show_errors(errors)
            return
        store.save_skill(record)
        notify("Skill saved", record.name, NotificationType.SUCCESS)
        go(go_back(st.session_state.nav))


# -----------------------------------------------------------------------------
# Section: Learning
# -----------------------------------------------------------------------------

def render_learning_section():
    store = st.session_state.store
    st.title("Learning")

    if st.button("➕ Add module"):
        open_view(subsection=Subsection.MODULE_EDITOR, id=None, mode="create")

    for module in store.get_learning_modules():
        with st.container(border=True):
            st.markdown(f"**{module.title}** · {module.category} · {module.difficulty}")
            st.caption(f"{len(module.lessons)} lessons · {len(module.tests)} tests · {module.estimated_time:g} h")
            col1, col2, col3 = st.columns(3)
            with col1:
                if st.button("Open", key=f"open_module_{module.id}", use_container_width=True):
                    open_view(subsection=Subsection.MODULE_DETAILS, id=module.id, mode="view")
            with col2:
                if st.button("Edit", key=f"edit_module_{module.id}", use_container_width=True):
                    go(module_editor_state(module.id))
            with col3:
                if st.button("Delete", key=f"delete_module_{module.id}", use_container_width=True):
                    store.delete_learning_module(module.id)
                    notify("Module deleted", module.title, NotificationType.WARNING)
                    st.rerun()


def render_module_details(page: ModuleDetailsPage):
    store = st.session_state.store
    module = store.get_learning_module(page.module_id)
    if module is None:
        st.error(f"Module not found: {page.module_id}")
        return

    st.title(module.title)
    if module.description:
        st.markdown(module.description)
    st.progress(module.progress / 100)

    st.subheader("Lessons")
    for lesson in module.lessons:
        done = "✓ " if lesson.completed else ""
        if st.button(f"{done}{lesson.title} ({lesson.duration})", key=f"lesson_{lesson.id}"):
            open_view(subsection=Subsection.LESSON_VIEW, data=lesson, module_id=None)

    st.subheader("Tests")
    for test in module.tests:
        st.markdown(f"**{test.title}** · {len(test.questions)} questions · pass {test.passing_score}%")

    if st.button("Edit module", type="primary"):
        go(module_editor_state(module.id))


def render_module_editor(page: ModuleEditorPage):
    store = st.session_state.store
    module = store.get_learning_module(page.module_id) if page.module_id else None
    if page.mode != "create" and module is None:
        st.error(f"Module not found: {page.module_id}")
        return

    base = module.to_json_dict() if module else {"id": new_id()}
    difficulties = ["Beginner", "Intermediate", "Advanced"]
    statuses = ["Not Started", "In Progress", "Completed"]

    st.title("Edit module" if module else "New module")
    with st.form("module_form"):
        title = st.text_input("Title", base.get("title", ""))
        description = st.text_area("Description", base.get("description", ""))
        category = st.text_input("Category", base.get("category", ""))
        col1, col2, col3 = st.columns(3)
        with col1:
            difficulty = st.selectbox("Difficulty", difficulties, index=difficulties.index(base.get("difficulty", "Beginner")))
        with col2:
            status = st.selectbox("Status", statuses, index=statuses.index(base.get("status", "Not Started")))
        with col3:
            estimated = st.number_input("Estimated time (h)", min_value=0.0, value=float(base.get("estimatedTime", 0)))
        deadline = st.date_input("Deadline", _to_date(base.get("deadline")))
        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        record, errors = check_form(LearningModule, {
            **base,
            "title": title,
            "description": description,
            "category": category,
            "difficulty": difficulty,
            "status": status,
            "estimatedTime": estimated,
            "deadline": _iso(deadline),
        }, validate_learning_module)
        if errors:
            show_errors(errors)
            return
        store.save_learning_module(record)
        notify("Module saved", record.title, NotificationType.SUCCESS)
        go(module_editor_state(record.id))

    if module is None:
        return

    st.subheader("Lessons")
    for lesson in module.lessons:
        col1, col2, col3 = st.columns([6, 1, 1])
        with col1:
            st.markdown(f"**{lesson.title}** · {lesson.type} · {lesson.duration}")
        with col2:
            if st.button("Edit", key=f"edit_lesson_{lesson.id}", use_container_width=True):
                open_view(subsection=Subsection.LESSON_EDITOR, id=lesson.id, mode="edit", module_id=module.id)
        with col3:
            if st.button("Delete", key=f"delete_lesson_{lesson.id}", use_container_width=True):
                store.delete_lesson(lesson.id)
                st.rerun()
    if st.button("➕ Add lesson"):
        open_view(subsection=Subsection.LESSON_EDITOR, id=None, mode="create", module_id=module.id)

    st.subheader("Tests")
    for test in module.tests:
        col1, col2, col3 = st.columns([6, 1, 1])
        with col1:
            st.markdown(f"**{test.title}** · {len(test.questions)} questions")
        with col2:
            if st.button("Edit", key=f"edit_test_{test.id}", use_container_width=True):
                open_view(subsection=Subsection.TEST_EDITOR, id=test.id, mode="edit", module_id=module.id)
        with col3:
            if st.button("Delete", key=f"delete_test_{test.id}", use_container_width=True):
                store.delete_test(test.id)
                st.rerun()
    if st.button("➕ Add test"):
        open_view(subsection=Subsection.TEST_EDITOR, id=None, mode="create", module_id=module.id)


def render_lesson_page(page: LessonPage):
    lesson = page.lesson
    if not isinstance(lesson, Lesson):
        lesson = Lesson.model_validate(lesson)

    st.title(lesson.title)
    st.caption(f"{lesson.type} · {lesson.duration}")
    st.markdown(lesson.content or "_No content yet._")

    if lesson.module_id and not lesson.completed:
        if st.button("Mark lesson as complete", type="primary", use_container_width=True):
            done = lesson.model_copy(update={"completed": True})
            st.session_state.store.save_lesson(done, lesson.module_id)
            notify("Lesson completed", lesson.title, NotificationType.SUCCESS)
            open_view(data=done)


def _find_in_module(items, item_id: Optional[str]):
    for item in items:
        if item.id == item_id:
            return item
    return None


def _owning_module_id(page_module_id: Optional[str], store: DataStore, key: str) -> Optional[str]:
    """The module to save into; asks the user when the editor was opened without one."""
    if page_module_id:
        return page_module_id
    modules = store.get_learning_modules()
    if not modules:
        st.warning("Create a learning module first.")
        return None
    titles = {m.id: m.title for m in modules}
    return st.selectbox("Module", list(titles), format_func=titles.get, key=key)


def render_lesson_editor(page: LessonEditorPage):
    store = st.session_state.store
    module = store.get_learning_module(page.module_id) if page.module_id else None
    lesson = None
    if page.lesson_id:
        lesson = _find_in_module(module.lessons, page.lesson_id) if module else None
        lesson = lesson or store.get_lesson(page.lesson_id)

    module_id = _owning_module_id(page.module_id or (lesson.module_id if lesson else None), store, "lesson_module")
    if module_id is None:
        return

    base = lesson.to_json_dict() if lesson else {"id": new_id()}
    types = ["video", "article", "interactive"]

    st.title("Edit lesson" if lesson else "New lesson")
    with st.form("lesson_form"):
        title = st.text_input("Title", base.get("title", ""))
        lesson_type = st.selectbox("Type", types, index=types.index(base.get("type", "article")))
        duration = st.text_input("Duration", base.get("duration", ""), placeholder="15 min")
        content = st.text_area("Content (markdown)", base.get("content", ""), height=300)
        completed = st.checkbox("Completed", base.get("completed", False))
        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        record, errors = check_form(Lesson, {
            **base, "title": title, "type": lesson_type, "duration": duration,
            "content": content, "completed": completed,
        }, validate_lesson)
        if errors:
            show_errors(errors)
            return
        store.save_lesson(record, module_id)
        notify("Lesson saved", record.title, NotificationType.SUCCESS)
        go(module_editor_state(module_id))


def _question_inputs(question: dict, key: str) -> dict:
    types = ["multiple-choice", "text", "rating"]
    text = st.text_input("Question", question.get("question", ""), key=f"{key}_text")
    q_type = st.selectbox("Type", types, index=types.index(question.get("type", "multiple-choice")), key=f"{key}_type")

    updated = {**question, "question": text, "type": q_type}
    if q_type == "multiple-choice":
        raw = st.text_area("Options (one per line)", "\n".join(question.get("options") or []), key=f"{key}_options")
        options = [line.strip() for line in raw.splitlines() if line.strip()]
        current = question.get("correctAnswer")
        correct = st.selectbox(
            "Correct answer", options,
            index=options.index(current) if current in options else 0,
            key=f"{key}_correct",
        ) if options else None
        updated.update({"options": options, "correctAnswer": correct})
    else:
        updated.update({"options": None, "correctAnswer": question.get("correctAnswer")})
    return updated


def render_test_editor(page: TestEditorPage):
    store = st.session_state.store
    module = store.get_learning_module(page.module_id) if page.module_id else None
    test = None
    if page.test_id:
        test = _find_in_module(module.tests, page.test_id) if module else None
        test = test or store.get_test(page.test_id)

    module_id = _owning_module_id(page.module_id or (test.module_id if test else None), store, "test_module")
    if module_id is None:
        return

    draft_key = draft_key_for_test(module_id, page.test_id)
    if draft_key not in st.session_state:
        st.session_state[draft_key] = test.to_json_dict() if test else {"id": new_id(), "questions": []}
    draft = st.session_state[draft_key]

    st.title("Edit test" if test else "New test")
    title = st.text_input("Title", draft.get("title", ""), key=f"{draft_key}_title")
    passing = st.slider("Passing score", 0, 100, int(draft.get("passingScore", 70)), key=f"{draft_key}_passing")

    questions = []
    for number, question in enumerate(draft["questions"], start=1):
        with st.expander(f"Question {number}", expanded=True):
            questions.append(_question_inputs(question, f"{draft_key}_{question['id']}"))
            if st.button("Remove question", key=f"{draft_key}_{question['id']}_remove"):
                draft["questions"] = [q for q in draft["questions"] if q["id"] != question["id"]]
                st.rerun()

    draft.update({"title": title, "passingScore": passing, "questions": questions})

    if st.button("➕ Add question"):
        draft["questions"].append({"id": new_id(), "question": "", "type": "multiple-choice", "options": []})
        st.rerun()

    record, errors = check_form(Test, draft, validate_test)
    show_errors(errors)

    if st.button("Save", type="primary", disabled=bool(errors)):
        store.save_test(record, module_id)
        del st.session_state[draft_key]
        notify("Test saved", record.title, NotificationType.SUCCESS)
        go(module_editor_state(module_id))


# -----------------------------------------------------------------------------
# Section: Projects
# -----------------------------------------------------------------------------

def render_projects_section():
    store = st.session_state.store
    st.title("Projects")

    if st.button("➕ Add project"):
        open_view(subsection=Subsection.PROJECT_EDITOR, id=None, mode="create")

    projects = store.get_projects()
    if not projects:
        st.info("No team projects yet.")

    for project in projects:
        with st.container(border=True):
            col1, col2, col3 = st.columns([6, 1, 1])
            with col1:
                st.markdown(f"**{project.name}** `{project.jira_key}` · {project.status}")
                st.progress(project.progress / 100)
            with col2:
                if st.button("Edit", key=f"edit_project_{project.id}", use_container_width=True):
                    open_view(subsection=Subsection.PROJECT_EDITOR, id=project.id, mode="edit")
            with col3:
                if st.button("Delete", key=f"delete_project_{project.id}", use_container_width=True):
                    store.delete_project(project.id)
                    notify("Project deleted", project.name, NotificationType.WARNING)
                    st.rerun()


def render_project_editor(page: ProjectEditorPage):
    store = st.session_state.store
    project = store.get_project(page.project_id) if page.project_id else None
    base = project.to_json_dict() if project else {"id": new_id()}
    statuses = ["Active", "Completed", "On Hold"]

    st.title("Edit project" if project else "New project")
    with st.form("project_form"):
        name = st.text_input("Name", base.get("name", ""))
        jira_key = st.text_input("Jira key", base.get("jiraKey", ""), placeholder="DS-123")
        description = st.text_area("Description", base.get("description") or "")
        col1, col2 = st.columns(2)
        with col1:
            status = st.selectbox("Status", statuses, index=statuses.index(base.get("status", "Active")))
            start_date = st.date_input("Start date", _to_date(base.get("startDate")))
        with col2:
            progress = st.slider("Progress", 0, 100, int(base.get("progress", 0)))
            deadline = st.date_input("Deadline", _to_date(base.get("deadline")))
        submitted = st.form_submit_button("Save", type="primary")

    if submitted:
        record, errors = check_form(Project, {
            **base,
            "name": name,
            "jiraKey": jira_key.strip().upper(),
            "description": description or None,
            "status": status,
            "progress": progress,
            "startDate": _iso(start_date),
            "deadline": _iso(deadline),
        }, validate_project)
        if errors:
            show_errors(errors)
            return
        store.save_project(record)
        notify("Project saved", record.name, NotificationType.SUCCESS)
        go(go_back(st.session_state.nav))


# -----------------------------------------------------------------------------
# Section: Analytics
# -----------------------------------------------------------------------------

def render_analytics_section():
    store = st.session_state.store
    designers = store.get_designers()
    st.title("Analytics")

    overview = team_overview(designers, store.get_projects())
    st.markdown(get_team_css(), unsafe_allow_html=True)
    cols = st.columns(3)
    for col, (label, value) in zip(cols, [
        ("Avg. efficiency", f"{overview['avg_efficiency']}%"),
        ("Avg. quality", overview["avg_quality"]),
        ("Completed projects", overview["completed_projects"]),
    ]):
        with col:
            st.markdown(render_metric(label, value), unsafe_allow_html=True)

    st.subheader("Levels")
    levels = pd.DataFrame(level_distribution(designers)).set_index("level")
    st.bar_chart(levels["count"])

    st.subheader("Skills")
    stats = pd.DataFrame(skill_stats(store.get_skills(), designers))
    if not stats.empty:
        st.dataframe(
            stats.drop(columns=["skill_id"]).sort_values("avg_level", ascending=False),
            use_container_width=True,
            hide_index=True,
        )


# -----------------------------------------------------------------------------
# Section: Calendar
# -----------------------------------------------------------------------------

EVENT_ICONS = {"project": "📁", "learning": "📚", "birthday": "🎂"}


def render_calendar_section():
    store = st.session_state.store
    document = store.get_all_data()
    st.title("Calendar")
    if document is None:
        st.info("No data yet.")
        return

    day = st.date_input("Day", date.today())
    events = collect_events(document, day.year)

    st.subheader(f"{day:%d.%m.%Y}")
    todays = events_for_day(events, day)
    if not todays:
        st.caption("No events on this day.")
    for event in todays:
        st.markdown(f"{EVENT_ICONS[event.kind]} {event.title}")

    st.subheader("Next 14 days")
    for event in upcoming_in_document(document, day, days=14):
        owner = f" · {event.designer_name}" if event.designer_name and event.kind != "birthday" else ""
        st.markdown(f"**{event.day:%d.%m}** {EVENT_ICONS[event.kind]} {event.title}{owner}")


# -----------------------------------------------------------------------------
# Section: Settings, Data Management
# -----------------------------------------------------------------------------

def render_settings_section():
    store = st.session_state.store
    settings = store.get_settings()
    st.title("Settings")

    with st.form("settings_form"):
        lang = st.selectbox("Language", ["uk", "en"], index=["uk", "en"].index(settings.language))
        themes = ["light", "dark", "system"]
        theme = st.selectbox("Theme", themes, index=themes.index(settings.theme))
        email = st.checkbox("Email notifications", settings.email_notifications)
        reminders = st.checkbox("Deadline reminders", settings.deadline_reminders)
        autosave = st.checkbox("Autosave designer profiles", settings.autosave)
        submitted = st.form_submit_button("Save settings", type="primary")

    if submitted:
        store.save_settings(settings.model_copy(update={
            "language": lang,
            "theme": theme,
            "email_notifications": email,
            "deadline_reminders": reminders,
            "autosave": autosave,
        }))
        notify("Settings saved", "Your preferences were updated.", NotificationType.SUCCESS)
        st.rerun()

    render_data_panel()


def render_data_panel():
    """Export, import, backups and reset of the stored document."""
    store = st.session_state.store

    with st.expander("💾 Data management", expanded=True):
        stats = store.get_usage_stats()
        if stats:
            st.caption(
                f"Last updated {stats['last_updated']:%Y-%m-%d %H:%M} · version {stats['version']} · "
                f"{stats['designers']} designers · {stats['size_bytes'] / 1024:.1f} KB"
            )

        st.download_button(
            "Export data",
            data=store.export_data(),
            file_name=f"{PRODUCT_SLUG}-backup-{utcnow():%Y-%m-%d}.json",
            mime="application/json",
        )

        uploaded = st.file_uploader("Import data", type=["json"])
        if uploaded is not None and st.button("Import"):
            if store.import_data(uploaded.getvalue()):
                notify("Import complete", uploaded.name, NotificationType.SUCCESS)
                go(HOME)
            else:
                notify("Import failed", f"{uploaded.name} is not a valid export", NotificationType.ERROR)
                st.rerun()

        st.divider()
        description = st.text_input("Backup description")
        if st.button("Create backup"):
            backup_id = store.create_manual_backup(description)
            if backup_id:
                notify("Backup created", description or backup_id, NotificationType.SUCCESS)
            st.rerun()

        for backup in store.get_backups():
            col1, col2 = st.columns([4, 1])
            with col1:
                kind = "auto" if backup.automatic else "manual"
                st.markdown(f"{backup.timestamp:%Y-%m-%d %H:%M} · {kind} · {backup.description}")
            with col2:
                if st.button("Restore", key=f"restore_{backup.id}", use_container_width=True):
                    if store.restore_from_backup(backup.id):
                        notify("Backup restored", backup.description, NotificationType.SUCCESS)
                    else:
                        notify("Restore failed", backup.description, NotificationType.ERROR)
                    go(HOME)

        st.divider()
        confirm = st.checkbox("I understand this deletes all data")
        if st.button("Clear all data", disabled=not confirm):
            store.clear_all_data()
            notify("Data cleared", "All stored data was deleted.", NotificationType.WARNING)
            go(HOME)


# -----------------------------------------------------------------------------
# Main App
# -----------------------------------------------------------------------------

SECTION_RENDERERS = {
    Section.DASHBOARD: render_dashboard,
    Section.DESIGNERS: render_designers_section,
    Section.SKILLS: render_skills_section,
    Section.LEARNING: render_learning_section,
    Section.PROJECTS: render_projects_section,
    Section.ANALYTICS: render_analytics_section,
    Section.CALENDAR: render_calendar_section,
    Section.SETTINGS: render_settings_section,
}


def render_view():
    """Render the page the navigation state resolves to."""
    view = resolve_view(st.session_state.nav)

    if isinstance(view, DesignerProfilePage):
        render_designer_profile(view)
    elif isinstance(view, DesignerEditorPage):
        render_designer_editor(view)
    elif isinstance(view, ModuleDetailsPage):
        render_module_details(view)
    elif isinstance(view, ModuleEditorPage):
        render_module_editor(view)
    elif isinstance(view, LessonPage):
        render_lesson_page(view)
    elif isinstance(view, LessonEditorPage):
        render_lesson_editor(view)
    elif isinstance(view, TestEditorPage):
        render_test_editor(view)
    elif isinstance(view, SkillEditorPage):
        render_skill_editor(view)
    elif isinstance(view, ProjectEditorPage):
        render_project_editor(view)
    elif isinstance(view, SectionPage):
        SECTION_RENDERERS[view.section]()


def main():
    """Main application entry point."""
    try:
        init_session_state()
        render_sidebar()
        render_header()
        render_view()
    except StorageError as e:
        st.error(f"Storage error: {e}")


if __name__ == "__main__":
    main()
