"""Shared HTML shell: <head>, nav, scroll bar, theme toggle, and page JavaScript."""

from __future__ import annotations

import json

from folio.core.animation import EASE_OUT_CSS
from folio.core.models import Portfolio
from folio.core.scroll import FRAME_SECONDS, MAX_FRAME_SECONDS, SUBSTEP_SECONDS, SpringConfig
from folio.core.theme import DARK_CLASS, DARK_GLYPH, LIGHT_GLYPH, ThemeController
from folio.web.components import esc, icon


def head_html(title: str) -> str:
    """Return everything inside <head>: meta, Tailwind config, and page CSS."""
    return (
        """\
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>"""
        + esc(title)
        + """</title>
    <script src="https://cdn.tailwindcss.com"></script>
    <script>
      tailwind.config = { darkMode: 'class' }
    </script>
    <style>
      html { -webkit-font-smoothing: antialiased; -moz-osx-font-smoothing: grayscale; scroll-behavior: smooth; }

      /* Scroll progress bar */
      #scroll-progress { transform: scaleX(0); transform-origin: left center; will-change: transform; }

      /* Entrance / viewport reveal */
      [data-reveal] {
        opacity: var(--reveal-opacity, 0);
        transform: translateY(var(--reveal-y, 8px));
        transition: opacity var(--reveal-duration, 0.4s) """
        + EASE_OUT_CSS
        + """ var(--reveal-delay, 0s),
                    transform var(--reveal-duration, 0.4s) """
        + EASE_OUT_CSS
        + """ var(--reveal-delay, 0s);
      }
      [data-reveal].revealed { opacity: var(--reveal-to-opacity, 1); transform: translateY(var(--reveal-to-y, 0px)); }
      @media (prefers-reduced-motion: reduce) {
        [data-reveal] { transition: none; opacity: 1; transform: none; }
      }

      /* Markdown copy */
      .md-inline p { margin: 0; }
      .md-inline strong { font-weight: 600; }

      /* Profile ring */
      @keyframes spin-slow { to { transform: rotate(360deg); } }
      .animate-spin-slow { animation: spin-slow 8s linear infinite; }
    </style>"""
    )


def scroll_progress_html() -> str:
    """Return the fixed top bar; it stacks above the nav and the theme toggle."""
    return (
        '    <div id="scroll-progress" class="fixed top-0 left-0 right-0 h-1 z-50 '
        'bg-gradient-to-r from-indigo-500 via-sky-400 to-amber-400" aria-hidden="true"></div>'
    )


def background_html() -> str:
    return """\
    <div class="pointer-events-none fixed inset-0 -z-10">
      <div class="absolute -top-24 left-1/2 -translate-x-1/2 w-[90vw] h-[90vw] max-w-[900px] rounded-full bg-[radial-gradient(ellipse_at_center,rgba(120,119,198,0.18),transparent_60%)] blur-2xl"></div>
      <div class="absolute top-1/3 -left-20 w-[60vw] h-[60vw] max-w-[700px] rounded-full bg-[radial-gradient(ellipse_at_center,rgba(56,189,248,0.2),transparent_60%)] blur-2xl"></div>
      <div class="absolute bottom-0 right-0 w-[70vw] h-[70vw] max-w-[800px] rounded-full bg-[radial-gradient(ellipse_at_center,rgba(253,186,116,0.18),transparent_60%)] blur-2xl"></div>
    </div>"""


def theme_toggle_html(theme: ThemeController) -> str:
    return (
        '    <button id="theme-toggle" type="button" aria-label="Toggle theme" '
        'class="fixed bottom-4 right-4 z-40 px-3 py-2 rounded-xl border border-black/10 dark:border-white/10 '
        f'bg-white/70 dark:bg-white/5 backdrop-blur shadow-lg">{theme.glyph}</button>'
    )


def nav_html(portfolio: Portfolio) -> str:
    links = "".join(
        f'<a href="{esc(link.href)}" class="px-3 py-2 rounded-xl text-sm hover:bg-black/5 dark:hover:bg-white/10">'
        f"{esc(link.label)}</a>"
        for link in portfolio.nav
    )
    contact = portfolio.contact
    return f"""\
    <div class="sticky top-3 z-40 w-full">
      <nav class="mx-auto max-w-6xl px-4 md:px-8">
        <div class="flex items-center justify-between rounded-2xl border border-black/10 dark:border-white/10 bg-white/60 dark:bg-black/40 backdrop-blur-xl px-4 md:px-6 py-3 shadow-lg">
          <a href="#" class="flex items-center gap-2 font-semibold tracking-tight">{icon("box", "w-5 h-5")}<span>{esc(portfolio.profile.name)}</span></a>
          <div class="hidden md:flex items-center gap-2">{links}</div>
          <div class="flex items-center gap-2">
            <a href="{esc(contact.github)}" aria-label="GitHub" class="p-2 rounded-xl hover:bg-black/5 dark:hover:bg-white/10">{icon("github", "w-5 h-5")}</a>
            <a href="{esc(contact.linkedin)}" aria-label="LinkedIn" class="p-2 rounded-xl hover:bg-black/5 dark:hover:bg-white/10">{icon("linkedin", "w-5 h-5")}</a>
          </div>
        </div>
      </nav>
    </div>"""


def page_config_js(spring: SpringConfig) -> str:
    """Return the constants the browser script shares with the Python models."""
    config = {
        "spring": {
            "stiffness": spring.stiffness,
            "damping": spring.resolved_damping,
            "mass": spring.mass,
            "restDelta": spring.rest_delta,
            "restSpeed": spring.rest_speed,
            "substep": SUBSTEP_SECONDS,
            "frame": FRAME_SECONDS,
            "maxFrame": MAX_FRAME_SECONDS,
        },
        "theme": {"darkClass": DARK_CLASS, "darkGlyph": DARK_GLYPH, "lightGlyph": LIGHT_GLYPH},
    }
    return f"      const PAGE_CONFIG = {json.dumps(config, ensure_ascii=False)};"


def shared_js() -> str:
    """Return the page behaviour: theme toggle, smoothed scroll progress, reveals, inert contact form."""
    return """\
      function byId(id) { return document.getElementById(id); }

      /* ============ Theme ============ */
      const themeState = { isDark: document.documentElement.classList.contains(PAGE_CONFIG.theme.darkClass) };

      function applyTheme() {
        document.documentElement.classList.toggle(PAGE_CONFIG.theme.darkClass, themeState.isDark);
        const btn = byId("theme-toggle");
        if (btn) btn.textContent = themeState.isDark ? PAGE_CONFIG.theme.darkGlyph : PAGE_CONFIG.theme.lightGlyph;
      }

      function toggleTheme() {
        themeState.isDark = !themeState.isDark;
        applyTheme();
      }

      /* ============ Scroll progress ============ */
      const spring = { value: 0, velocity: 0, target: 0 };
      let springFrame = null;
      let springLastTs = null;

      function scrollFraction() {
        const maxOffset = document.documentElement.scrollHeight - window.innerHeight;
        if (!(maxOffset > 0)) return 0;
        const raw = window.scrollY / maxOffset;
        if (!Number.isFinite(raw)) return 0;
        return Math.max(0, Math.min(1, raw));
      }

      function renderProgress() {
        const bar = byId("scroll-progress");
        if (bar) bar.style.transform = `scaleX(${Math.max(0, Math.min(1, spring.value))})`;
      }

      function springAtRest() {
        const cfg = PAGE_CONFIG.spring;
        return Math.abs(spring.target - spring.value) <= cfg.restDelta && Math.abs(spring.velocity) <= cfg.restSpeed;
      }

      function stepSpring(ts) {
        const cfg = PAGE_CONFIG.spring;
        const dt = springLastTs === null ? cfg.frame : Math.min(cfg.maxFrame, (ts - springLastTs) / 1000);
        springLastTs = ts;
        let remaining = dt;
        while (remaining > 0) {
          const h = Math.min(cfg.substep, remaining);
          const accel = (-cfg.stiffness * (spring.value - spring.target) - cfg.damping * spring.velocity) / cfg.mass;
          spring.velocity += accel * h;
          spring.value += spring.velocity * h;
          remaining -= h;
        }
        if (springAtRest()) {
          spring.value = spring.target;
          spring.velocity = 0;
          springFrame = null;
          springLastTs = null;
          renderProgress();
          return;
        }
        renderProgress();
        springFrame = window.requestAnimationFrame(stepSpring);
      }

      function onScroll() {
        spring.target = scrollFraction();
        if (springFrame === null) springFrame = window.requestAnimationFrame(stepSpring);
      }

      /* ============ Reveal ============ */
      function bindReveals() {
        const mounted = document.querySelectorAll('[data-reveal="mount"]');
        mounted.forEach(el => window.requestAnimationFrame(() => el.classList.add("revealed")));

        const inView = document.querySelectorAll('[data-reveal="view"]');
        if (!("IntersectionObserver" in window)) {
          inView.forEach(el => el.classList.add("revealed"));
          return;
        }
        inView.forEach(el => {
          const amount = Number(el.dataset.revealAmount || "0.3");
          const once = el.dataset.revealOnce !== "false";
          const observer = new IntersectionObserver(entries => {
            entries.forEach(entry => {
              if (entry.isIntersecting) {
                el.classList.add("revealed");
                if (once) observer.unobserve(el);
              } else if (!once) {
                el.classList.remove("revealed");
              }
            });
          }, { threshold: amount });
          observer.observe(el);
        });
      }"""


def init_js() -> str:
    """Return the event wiring that runs once the document is parsed."""
    return """\
      /* ============ Events ============ */
      function bindEvents() {
        const toggle = byId("theme-toggle");
        if (toggle) toggle.addEventListener("click", toggleTheme);
        window.addEventListener("scroll", onScroll, { passive: true });
        window.addEventListener("resize", onScroll);
        /* The contact form is a stub and never submits. */
        const form = byId("contact-form");
        if (form) form.addEventListener("submit", e => e.preventDefault());
      }

      function init() {
        applyTheme();
        bindEvents();
        bindReveals();
        onScroll();
      }
      init();"""
