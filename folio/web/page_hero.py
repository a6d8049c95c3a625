"""Hero and About sections."""

from __future__ import annotations

from folio.core.animation import HERO_REVEAL, HERO_STAGGER, PHOTO_REVEAL, stagger
from folio.core.models import Portfolio
from folio.web.components import chip, esc, glass_card, heading, icon, reveal_attrs, render_markdown, section


def hero_html(portfolio: Portfolio) -> str:
    """Return the hero: photo, headline, intro, call-to-action links, tags, and stats card."""
    profile = portfolio.profile
    contact = portfolio.contact

    def _block(index: int) -> str:
        return reveal_attrs(HERO_REVEAL, delay=stagger(index, HERO_STAGGER), trigger="mount")

    tags = "".join(
        '<span class="px-3 py-1 rounded-full bg-black/5 dark:bg-white/10 border border-black/10 dark:border-white/20 '
        f'text-sm text-black/80 dark:text-gray-200">{esc(tag)}</span>'
        for tag in portfolio.tags
    )
    stats = "".join(
        f'<div><p class="text-2xl md:text-3xl font-bold">{esc(stat.value)}</p>'
        f'<p class="text-xs text-black/50 dark:text-gray-400 uppercase">{esc(stat.label)}</p></div>'
        for stat in portfolio.stats
    )
    suffix = f" {esc(profile.headline_suffix)}" if profile.headline_suffix else ""

    return f"""\
      <!-- ==================== Hero ==================== -->
      <section id="hero" class="min-h-screen flex flex-col md:flex-row items-center justify-center gap-12 px-6 md:px-16 container mx-auto py-12 md:py-20">
        <div class="relative flex-shrink-0" {reveal_attrs(PHOTO_REVEAL, trigger="mount")}>
          <div class="relative w-48 h-48 md:w-64 md:h-64 rounded-full overflow-hidden shadow-2xl border-4 border-white">
            <img src="{esc(profile.photo)}" alt="{esc(profile.name)}" class="w-full h-full object-cover" />
          </div>
          <div class="absolute inset-0 rounded-full p-[4px] animate-spin-slow bg-gradient-to-r from-sky-400 via-purple-500 to-pink-500 -z-10 blur-lg"></div>
        </div>
        <div class="flex-1 text-center md:text-left space-y-6">
          <h1 class="text-4xl md:text-6xl font-extrabold leading-tight" {_block(0)}>
            Hi, I’m <span class="text-sky-400">{esc(profile.name)}</span><br />I build
            <span class="bg-gradient-to-r from-indigo-500 via-sky-400 to-amber-400 bg-clip-text text-transparent">{esc(profile.headline_focus)}</span>{suffix}
          </h1>
          <div class="md-inline text-lg md:text-xl text-black/70 dark:text-gray-300 max-w-2xl mx-auto md:mx-0" {_block(1)}>{render_markdown(profile.intro)}</div>
          <div class="flex flex-wrap justify-center md:justify-start gap-4" {_block(2)}>
            <a href="{esc(contact.resume)}" class="inline-flex items-center gap-2 px-4 py-2 rounded-xl bg-black text-white dark:bg-white dark:text-black hover:scale-[1.02] active:scale-[0.98] transition">{icon("download")} Download CV</a>
            <a href="{esc(contact.email)}" class="inline-flex items-center gap-2 px-5 py-3 rounded-xl border border-gray-400/30 hover:bg-white/10 font-medium transition">{icon("mail")} Email Me</a>
            <a href="#projects" class="inline-flex items-center gap-2 px-5 py-3 rounded-xl hover:translate-x-1 transition">View Projects {icon("chevron-right")}</a>
          </div>
          <div class="flex flex-wrap gap-3 justify-center md:justify-start mt-6" {_block(3)}>{tags}</div>
          <div class="mt-8 bg-black/5 dark:bg-white/5 backdrop-blur-md rounded-2xl p-4 md:p-6 grid grid-cols-3 gap-6 text-center shadow-xl w-full max-w-3xl" {_block(4)}>{stats}</div>
        </div>
      </section>"""


def about_html(portfolio: Portfolio) -> str:
    profile = portfolio.profile
    highlights = "".join(
        f'<li class="flex items-start gap-2">{icon(item.icon, extra="mt-1 shrink-0")} {esc(item.text)}</li>'
        for item in portfolio.highlights
    )
    availability = "".join(chip(label) for label in profile.availability)
    tools = "".join(
        f'<p class="flex items-center gap-2">{icon(tool.icon)} {esc(tool.label)}</p>' for tool in portfolio.tools
    )

    looking_for = glass_card(
        f'<div class="flex items-center gap-3">{icon("briefcase", "w-5 h-5")}<p class="font-medium">What I’m looking for</p></div>'
        f'<p class="mt-2 text-sm text-black/70 dark:text-white/70">{esc(profile.looking_for)}</p>'
        f'<div class="mt-4 flex flex-wrap gap-2">{availability}</div>'
    )
    toolbox = glass_card(
        f'<div class="flex items-center gap-3">{icon("rocket", "w-5 h-5")}<p class="font-medium">Frameworks &amp; Tools</p></div>'
        f'<div class="mt-3 grid grid-cols-2 gap-2 text-sm">{tools}</div>'
    )

    body = (
        '<div class="grid md:grid-cols-12 gap-6 items-start">'
        '<div class="md:col-span-7">'
        + heading("About")
        + f'<div class="md-inline mt-3 text-black/70 dark:text-white/70">{render_markdown(profile.about)}</div>'
        + f'<ul class="mt-4 space-y-2 text-sm md:text-base">{highlights}</ul>'
        + "</div>"
        + f'<div class="md:col-span-5 space-y-4">{looking_for}{toolbox}</div>'
        + "</div>"
    )
    return "      <!-- ==================== About ==================== -->\n      " + section(
        "about", body, "pt-10 md:pt-20"
    )
