"""Skills and Projects sections: one fixed template per array element, source order kept."""

from __future__ import annotations

from folio.core.animation import PROJECT_REVEAL, PROJECT_STAGGER, SKILL_REVEAL, SKILL_STAGGER, stagger
from folio.core.models import Portfolio, Project, Skill
from folio.web.components import action_link, chip, esc, glass_card, heading, icon, progress_bar, reveal_attrs, section


def skill_html(skill: Skill, index: int = 0) -> str:
    return (
        f'<div class="skill" {reveal_attrs(SKILL_REVEAL, delay=stagger(index, SKILL_STAGGER))}>'
        '<div class="flex items-center justify-between mb-2">'
        f'<p class="font-medium">{esc(skill.name)}</p>'
        f'<p class="text-sm text-black/60 dark:text-white/60">{skill.level:g}%</p>'
        "</div>"
        f"{progress_bar(skill.fill_percent)}"
        "</div>"
    )


def skills_html(portfolio: Portfolio) -> str:
    items = "".join(skill_html(skill, index) for index, skill in enumerate(portfolio.skills))
    body = heading("Skills") + f'<div class="mt-6 grid md:grid-cols-2 gap-6">{items}</div>'
    return "      <!-- ==================== Skills ==================== -->\n      " + section(
        "skills", body, "pt-10 md:pt-20"
    )


def project_html(project: Project, index: int = 0) -> str:
    bullets = "".join(f"<li>{esc(bullet)}</li>" for bullet in project.bullets)
    tech = "".join(chip(name) for name in project.tech)

    actions: list[str] = []
    if project.href:
        actions.append(action_link(project.href, "Live"))
    if project.repo:
        actions.append(action_link(project.repo, "Code"))

    card = glass_card(
        f'<h3 class="text-lg md:text-xl font-semibold">{esc(project.title)}</h3>'
        f'<p class="mt-2 text-sm text-black/70 dark:text-white/70">{esc(project.description)}</p>'
        f'<ul class="mt-3 text-sm list-disc pl-5 space-y-1">{bullets}</ul>'
        f'<div class="mt-4 flex flex-wrap gap-2">{tech}</div>'
        f'<div class="mt-5 flex gap-2">{"".join(actions)}</div>',
        extra="hover:-translate-y-1 hover:shadow-xl transition",
    )
    return f'<div class="project" {reveal_attrs(PROJECT_REVEAL, delay=stagger(index, PROJECT_STAGGER))}>{card}</div>'


def projects_html(portfolio: Portfolio) -> str:
    items = "".join(project_html(project, index) for index, project in enumerate(portfolio.projects))
    body = (
        '<div class="flex items-end justify-between">'
        + heading("Projects")
        + f'<a href="{esc(portfolio.contact.github)}" class="text-sm inline-flex items-center gap-1 opacity-80 hover:opacity-100">'
        + f'View more {icon("external-link")}</a>'
        + "</div>"
        + f'<div class="mt-6 grid md:grid-cols-2 gap-6">{items}</div>'
    )
    return "      <!-- ==================== Projects ==================== -->\n      " + section(
        "projects", body, "pt-10 md:pt-20"
    )
