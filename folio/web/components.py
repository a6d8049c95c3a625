"""Small HTML building blocks shared by every page section."""

from __future__ import annotations

import html
import math

import markdown as md

from folio.core.animation import Reveal, reveal_style


ICON_PATHS: dict[str, str] = {
    "box": '<path d="M21 8a2 2 0 0 0-1-1.73l-7-4a2 2 0 0 0-2 0l-7 4A2 2 0 0 0 3 8v8a2 2 0 0 0 1 1.73l7 4a2 2 0 0 0 2 0l7-4A2 2 0 0 0 21 16Z"/><path d="m3.3 7 8.7 5 8.7-5"/><path d="M12 22V12"/>',
    "briefcase": '<rect x="2" y="7" width="20" height="14" rx="2"/><path d="M16 21V5a2 2 0 0 0-2-2h-4a2 2 0 0 0-2 2v16"/>',
    "chevron-right": '<path d="m9 18 6-6-6-6"/>',
    "code": '<path d="m16 18 6-6-6-6"/><path d="m8 6-6 6 6 6"/>',
    "cpu": '<rect x="4" y="4" width="16" height="16" rx="2"/><rect x="9" y="9" width="6" height="6"/><path d="M15 2v2M15 20v2M2 15h2M2 9h2M20 15h2M20 9h2M9 2v2M9 20v2"/>',
    "database": '<ellipse cx="12" cy="5" rx="9" ry="3"/><path d="M3 5v14a9 3 0 0 0 18 0V5"/><path d="M3 12a9 3 0 0 0 18 0"/>',
    "download": '<path d="M21 15v4a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2v-4"/><path d="m7 10 5 5 5-5"/><path d="M12 15V3"/>',
    "external-link": '<path d="M15 3h6v6"/><path d="M10 14 21 3"/><path d="M18 13v6a2 2 0 0 1-2 2H5a2 2 0 0 1-2-2V8a2 2 0 0 1 2-2h6"/>',
    "github": '<path d="M15 22v-4a4.8 4.8 0 0 0-1-3.5c3 0 6-2 6-5.5.08-1.25-.27-2.48-1-3.5.28-1.15.28-2.35 0-3.5 0 0-1 0-3 1.5-2.64-.5-5.36-.5-8 0C6 2 5 2 5 2c-.3 1.15-.3 2.35 0 3.5A5.403 5.403 0 0 0 4 9c0 3.5 3 5.5 6 5.5-.39.49-.68 1.05-.85 1.65-.17.6-.22 1.23-.15 1.85v4"/><path d="M9 18c-4.51 2-5-2-7-2"/>',
    "layers": '<path d="m12.83 2.18 8.58 3.91a1 1 0 0 1 0 1.83l-8.58 3.9a2 2 0 0 1-1.66 0L2.6 7.93a1 1 0 0 1 0-1.83l8.58-3.9a2 2 0 0 1 1.66 0Z"/><path d="m22 17.65-9.17 4.16a2 2 0 0 1-1.66 0L2 17.65"/><path d="m22 12.65-9.17 4.16a2 2 0 0 1-1.66 0L2 12.65"/>',
    "linkedin": '<path d="M16 8a6 6 0 0 1 6 6v7h-4v-7a2 2 0 0 0-4 0v7h-4v-7a6 6 0 0 1 6-6z"/><rect x="2" y="9" width="4" height="12"/><circle cx="4" cy="4" r="2"/>',
    "mail": '<rect x="2" y="4" width="20" height="16" rx="2"/><path d="m22 7-8.97 5.7a1.94 1.94 0 0 1-2.06 0L2 7"/>',
    "phone": '<path d="M22 16.92v3a2 2 0 0 1-2.18 2 19.79 19.79 0 0 1-8.63-3.07 19.5 19.5 0 0 1-6-6 19.79 19.79 0 0 1-3.07-8.67A2 2 0 0 1 4.11 2h3a2 2 0 0 1 2 1.72 12.84 12.84 0 0 0 .7 2.81 2 2 0 0 1-.45 2.11L8.09 9.91a16 16 0 0 0 6 6l1.27-1.27a2 2 0 0 1 2.11-.45 12.84 12.84 0 0 0 2.81.7A2 2 0 0 1 22 16.92z"/>',
    "rocket": '<path d="M4.5 16.5c-1.5 1.26-2 5-2 5s3.74-.5 5-2c.71-.84.7-2.13-.09-2.91a2.18 2.18 0 0 0-2.91-.09z"/><path d="m12 15-3-3a22 22 0 0 1 2-3.95A12.88 12.88 0 0 1 22 2c0 2.72-.78 7.5-6 11a22.35 22.35 0 0 1-4 2z"/>',
    "star": '<path d="m12 2 3.09 6.26L22 9.27l-5 4.87 1.18 6.88L12 17.77l-6.18 3.25L7 14.14 2 9.27l6.91-1.01L12 2z"/>',
    "wrench": '<path d="M14.7 6.3a1 1 0 0 0 0 1.4l1.6 1.6a1 1 0 0 0 1.4 0l3.77-3.77a6 6 0 0 1-7.94 7.94l-6.91 6.91a2.12 2.12 0 0 1-3-3l6.91-6.91a6 6 0 0 1 7.94-7.94l-3.76 3.76z"/>',
}


def esc(value: object) -> str:
    return html.escape(str(value))


def icon(name: str, size: str = "w-4 h-4", extra: str = "") -> str:
    paths = ICON_PATHS.get(name, ICON_PATHS["star"])
    classes = f"{size} {extra}".strip()
    return (
        f'<svg class="{classes}" xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" fill="none" '
        f'stroke="currentColor" stroke-width="2" stroke-linecap="round" stroke-linejoin="round" aria-hidden="true">'
        f"{paths}</svg>"
    )


def render_markdown(text: str) -> str:
    # Content is escaped before conversion so raw HTML in copy never reaches the page.
    return md.markdown(html.escape(text, quote=False))


def reveal_attrs(reveal: Reveal, delay: float | None = None, trigger: str = "view") -> str:
    start = reveal.delay if delay is None else delay
    hidden = reveal_style(False, 0.0, reveal)
    shown = reveal_style(True, math.inf, reveal)
    return (
        f'data-reveal="{trigger}" data-reveal-amount="{reveal.amount:g}" '
        f'data-reveal-once="{"true" if reveal.once else "false"}" '
        f'style="--reveal-opacity: {hidden.opacity:g}; --reveal-y: {hidden.translate_y:g}px; '
        f'--reveal-to-opacity: {shown.opacity:g}; --reveal-to-y: {shown.translate_y:g}px; '
        f'--reveal-duration: {reveal.duration:g}s; --reveal-delay: {start:g}s"'
    )


def chip(label: str) -> str:
    return (
        '<span class="chip text-xs md:text-sm px-3 py-1 rounded-full border border-black/10 '
        'dark:border-white/10 backdrop-blur bg-white/50 dark:bg-white/5">'
        f"{esc(label)}</span>"
    )


def glass_card(body: str, extra: str = "") -> str:
    classes = (
        "group relative overflow-hidden rounded-2xl border border-black/10 dark:border-white/10 "
        "bg-white/60 dark:bg-white/5 backdrop-blur-xl shadow-[0_10px_30px_-10px_rgba(0,0,0,0.3)]"
    )
    if extra:
        classes = f"{classes} {extra}"
    return (
        f'<div class="{classes}">'
        '<div class="absolute inset-0 bg-gradient-to-br from-white/40 to-transparent dark:from-white/10"></div>'
        f'<div class="relative z-10 p-6 md:p-8">{body}</div>'
        "</div>"
    )


def progress_bar(value: int | float) -> str:
    width = max(0, min(100, value))
    return (
        '<div class="progress-track w-full h-2 rounded-full bg-black/5 dark:bg-white/10 overflow-hidden">'
        f'<div class="progress-fill h-full rounded-full bg-black/70 dark:bg-white/80" style="width: {width:g}%"></div>'
        "</div>"
    )


def section(section_id: str, body: str, extra: str = "") -> str:
    classes = "relative w-full max-w-6xl mx-auto px-4 md:px-8"
    if extra:
        classes = f"{classes} {extra}"
    return f'<section id="{esc(section_id)}" class="{classes}">{body}</section>'


def heading(text: str) -> str:
    return f'<h2 class="text-2xl md:text-3xl font-semibold tracking-tight">{esc(text)}</h2>'


def action_link(href: str, label: str) -> str:
    return (
        f'<a href="{esc(href)}" class="project-action px-3 py-2 rounded-xl border border-black/10 '
        f'dark:border-white/10 hover:bg-black/5 dark:hover:bg-white/10 text-sm">{esc(label)}</a>'
    )
