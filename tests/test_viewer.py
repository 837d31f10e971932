"""
Viewer tests for DesignDesk.

Tests the HTML fragments rendered into Streamlit markdown.
"""

from datetime import datetime, timezone

from designdesk.navigation import Breadcrumb
from designdesk.notifications import add_notification
from designdesk.schemas import Designer, NotificationType, Skill, SkillRating
from designdesk.viewer import (
    get_chrome_css,
    get_team_css,
    initials,
    render_breadcrumbs,
    render_designer_card,
    render_metric,
    render_notification_list,
    render_skill_bar,
    render_skill_bars,
)


class TestTeamViewer:
    """Test designer and skill fragments."""

    def test_css(self):
        assert "<style>" in get_team_css()
        assert "<style>" in get_chrome_css()

    def test_initials(self):
        assert initials("Марія Петренко") == "МП"
        assert initials("anna") == "A"
        assert initials("") == "?"

    def test_designer_card_escapes(self):
        html = render_designer_card(Designer(id="d1", name="<script>x</script>", position="A & B"))
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
        assert "A &amp; B" in html

    def test_designer_card_avatar(self):
        html = render_designer_card(Designer(id="d1", name="Anna", avatar='https://x/a.png"'))
        assert 'src="https://x/a.png&quot;"' in html

    def test_designer_card_initials_fallback(self):
        html = render_designer_card(Designer(id="d1", name="Anna Koval", level="Lead"))
        assert ">AK<" in html
        assert "level-lead" in html

    def test_inactive_designer(self):
        html = render_designer_card(Designer(id="d1", name="A", status="Inactive"))
        assert "status-inactive" in html

    def test_skill_bar(self):
        html = render_skill_bar(
            SkillRating(skill_id="s1", current_level=60, target_level=80),
            Skill(id="s1", name="Figma"),
        )
        assert "Figma" in html
        assert "width:60%" in html
        assert "left:80%" in html

    def test_skill_bar_without_catalogue_entry(self):
        html = render_skill_bar(SkillRating(skill_id="s9", current_level=10, target_level=20))
        assert "s9" in html

    def test_skill_bars_empty(self):
        assert render_skill_bars(Designer(id="d1", name="A"), []) == ""

    def test_metric(self):
        assert "86%" in render_metric("Productivity", "86%")


class TestChromeViewer:
    """Test breadcrumb and notification fragments."""

    def test_breadcrumbs(self):
        html = render_breadcrumbs([
            Breadcrumb(label="Learning", path="learning"),
            Breadcrumb(label="Edit <module>", path="module-editor"),
        ])
        assert 'class="breadcrumb-current">Edit &lt;module&gt;' in html
        assert "breadcrumb-sep" in html

    def test_breadcrumbs_empty(self):
        assert render_breadcrumbs([]) == ""

    def test_notification_list(self):
        now = datetime(2024, 12, 1, 9, 30, tzinfo=timezone.utc)
        notifications = add_notification((), "Saved <b>", "ok", NotificationType.SUCCESS, now=now)
        html = render_notification_list(notifications)
        assert "notification-success" in html
        assert "notification-unread" in html
        assert "Saved &lt;b&gt;" in html
        assert "2024-12-01 09:30" in html

    def test_notification_list_empty(self):
        assert "No notifications" in render_notification_list(())
