"""
Public page renderer.

Templates live in edumigrate/templates/ and use plain {{placeholder}}
replacement; every page body is wrapped into base.html.
"""

import re
from datetime import datetime, timezone
from html import escape
from pathlib import Path

from ..config import settings
from ..models.generated import SuccessStories as DBSuccessStories
from ..models.generated import TeamMembers as DBTeamMembers
from ..models.generated import Universities as DBUniversities
from ..schemas.settings import CompanySettings
from .universities import university_path

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
FALLBACK_IMAGE = "/logo/logo.svg"
DEFAULT_TAGLINE = "Your trusted partner for studying abroad."
PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}")


def _read_template(name: str) -> str:
    return (TEMPLATES_DIR / name).read_text(encoding="utf-8")


def _fill(template: str, replacements: dict[str, str]) -> str:
    # Single pass: substituted values are never scanned for placeholders
    return PLACEHOLDER_RE.sub(lambda m: replacements.get(m.group(1), m.group(0)), template)


def render_layout(title: str, content: str, path: str = "/", description: str = "") -> str:
    return _fill(
        _read_template("base.html"),
        {
            "title": escape(title),
            "description": escape(description),
            "canonical_url": escape(settings.site_url.rstrip("/") + path),
            "year": str(datetime.now(timezone.utc).year),
            "content": content,
            "site_name": escape(settings.site_name),
        },
    )


# ──────────────────────────────────────────────────────────────────────────────
# University cards
# ──────────────────────────────────────────────────────────────────────────────

def render_card(university: DBUniversities) -> str:
    name = escape(university.name or "")
    return (
        f'        <a class="card" href="{escape(university_path(university))}">\n'
        f'          <img src="{escape(university.image or FALLBACK_IMAGE)}" alt="{name}" loading="lazy" />\n'
        f"          <h3>{name}</h3>\n"
        f'          <p class="meta">{escape(university.country or "")}</p>\n'
        f"          <p>{escape(university.short_description or '')}</p>\n"
        f"        </a>"
    )


def _render_cards(universities: list[DBUniversities]) -> str:
    if not universities:
        return '        <p class="empty">No universities found.</p>'
    return "\n".join(render_card(u) for u in universities)


# ──────────────────────────────────────────────────────────────────────────────
# Pages
# ──────────────────────────────────────────────────────────────────────────────

def render_home_page(highlights: list[DBUniversities], company: CompanySettings) -> str:
    content = _fill(
        _read_template("home.html"),
        {
            "tagline": escape(company.tagline or DEFAULT_TAGLINE),
            "cards": _render_cards(highlights),
            "site_name": escape(settings.site_name),
        },
    )
    return render_layout("Home", content, "/", company.description or "")


def render_universities_page(
    universities: list[DBUniversities],
    q: str = "",
    country: str = "",
) -> str:
    content = _fill(
        _read_template("universities.html"),
        {
            "q": escape(q),
            "country": escape(country),
            "count": str(len(universities)),
            "cards": _render_cards(universities),
        },
    )
    return render_layout(
        "Universities", content, "/universities", "Partner universities we help students apply to."
    )


def render_university_page(university: DBUniversities) -> str:
    name = escape(university.name or "")
    if university.image:
        hero = f'<img class="hero" src="{escape(university.image)}" alt="{name}" />'
    else:
        hero = ""

    content = _fill(
        _read_template("university.html"),
        {
            "hero": hero,
            "name": name,
            "country": escape(university.country or ""),
            "type": escape(university.type or ""),
            "short_description": escape(university.short_description or ""),
            # Rich text authored in the admin editor
            "details": university.details or "",
        },
    )
    return render_layout(
        university.name or "University",
        content,
        university_path(university),
        university.short_description or "",
    )


def render_team_card(member: DBTeamMembers) -> str:
    name = escape(member.name)
    return (
        f'        <div class="card team-member">\n'
        f'          <img src="{escape(member.image or FALLBACK_IMAGE)}" alt="{name}" loading="lazy" />\n'
        f"          <h3>{name}</h3>\n"
        f'          <p class="meta">{escape(member.role)}</p>\n'
        f"          <p>{escape(member.bio or '')}</p>\n"
        f"        </div>"
    )


def render_story_card(story: DBSuccessStories) -> str:
    name = escape(story.name)
    stars = "\u2605" * story.rating
    return (
        f'        <div class="card success-story {escape(story.color or "")}">\n'
        f'          <img src="{escape(story.image or FALLBACK_IMAGE)}" alt="{name}" loading="lazy" />\n'
        f"          <h3>{name} {escape(story.flag or '')}</h3>\n"
        f'          <p class="meta">{escape(story.program)}, {escape(story.university)}, {escape(story.country)}</p>\n'
        f'          <p class="rating">{stars}</p>\n'
        f"          <blockquote>{escape(story.story)}</blockquote>\n"
        f"        </div>"
    )


def render_about_page(
    team: list[DBTeamMembers],
    stories: list[DBSuccessStories],
    company: CompanySettings,
) -> str:
    team_html = "\n".join(render_team_card(m) for m in team) or (
        '        <p class="empty">Our team information will be available soon.</p>'
    )
    stories_html = "\n".join(render_story_card(s) for s in stories) or (
        '        <p class="empty">No stories yet.</p>'
    )
    content = _fill(
        _read_template("about.html"),
        {
            "company_name": escape(company.company_name),
            "description": escape(company.description or DEFAULT_TAGLINE),
            "team": team_html,
            "stories": stories_html,
        },
    )
    return render_layout("About", content, "/about", company.description or "")


def render_contact_page(company: CompanySettings) -> str:
    office = company.main_office
    address = ", ".join(
        escape(part) for part in (office.address, office.suite, office.city, office.state,
                                  office.postal_code, office.country) if part
    )
    phones = "\n".join(
        f'          <li>{escape(p.title)}: <a href="tel:{escape(p.number)}">{escape(p.number)}</a></li>'
        for p in company.phone_numbers
    )
    content = _fill(
        _read_template("contact.html"),
        {
            "address": address,
            "phones": phones,
            "email": escape(company.emails.general),
        },
    )
    return render_layout("Contact", content, "/contact", "Get in touch with our advisors.")


def render_travel_page() -> str:
    return render_layout(
        "Travel Services",
        _read_template("travel.html"),
        "/travel",
        "Flights, accommodation, insurance and airport transfers.",
    )


def render_not_found_page() -> str:
    return render_layout("Not found", _read_template("not_found.html"))


def render_admin_login_page() -> str:
    return render_layout("Admin sign in", _read_template("admin_login.html"), "/admin/login")


def render_admin_dashboard_page(stats: dict[str, int]) -> str:
    content = _fill(
        _read_template("admin_dashboard.html"),
        {key: str(value) for key, value in stats.items()},
    )
    return render_layout("Dashboard", content, "/admin")
