"""Contact section (links + inert form) and footer."""

from __future__ import annotations

from folio.core.models import Portfolio
from folio.web.components import chip, esc, glass_card, icon, section


FORM_NOTICE = "This demo form doesn’t send yet. Hook it to your API or form service."

_INPUT_CLASSES = (
    "mt-1 w-full px-3 py-2 rounded-xl border border-black/10 dark:border-white/10 bg-white/70 dark:bg-white/5"
)


def contact_form_html() -> str:
    """Return the name/email/message form; it has no action and submit is cancelled client-side."""
    return f"""\
<form id="contact-form" class="grid grid-cols-1 md:grid-cols-2 gap-4" novalidate>
  <div class="col-span-1">
    <label class="text-sm" for="contact-name">Name</label>
    <input id="contact-name" name="name" class="{_INPUT_CLASSES}" placeholder="Your name" />
  </div>
  <div class="col-span-1">
    <label class="text-sm" for="contact-email">Email</label>
    <input id="contact-email" name="email" type="email" class="{_INPUT_CLASSES}" placeholder="you@example.com" />
  </div>
  <div class="col-span-1 md:col-span-2">
    <label class="text-sm" for="contact-message">Message</label>
    <textarea id="contact-message" name="message" class="{_INPUT_CLASSES} min-h-[120px]" placeholder="Tell me about your project..."></textarea>
  </div>
  <div class="col-span-1 md:col-span-2 flex items-center justify-between gap-3">
    <p class="text-xs text-black/60 dark:text-white/60">{esc(FORM_NOTICE)}</p>
    <button type="submit" class="px-4 py-2 rounded-xl bg-black text-white dark:bg-white dark:text-black hover:scale-[1.02] active:scale-[0.98] transition">Send</button>
  </div>
</form>"""


def contact_html(portfolio: Portfolio) -> str:
    contact = portfolio.contact
    links = [
        (contact.email, "mail", contact.email_label),
        (contact.phone, "phone", contact.phone_label),
        (contact.github, "github", "GitHub"),
        (contact.linkedin, "linkedin", "LinkedIn"),
    ]
    link_html = "".join(
        f'<a href="{esc(href)}" class="flex items-center gap-2 hover:underline">{icon(name)} {esc(label)}</a>'
        for href, name, label in links
    )
    body = (
        '<div class="grid md:grid-cols-12 gap-8">'
        '<div class="md:col-span-5">'
        '<h2 class="text-2xl md:text-3xl font-semibold tracking-tight">Let’s build something.</h2>'
        '<p class="mt-3 text-black/70 dark:text-white/70">I’m open to roles, freelance projects, and collaborations. '
        "The quickest way to reach me is by email or phone.</p>"
        f'<div class="mt-6 space-y-2 text-sm">{link_html}</div>'
        "</div>"
        f'<div class="md:col-span-7">{glass_card(contact_form_html())}</div>'
        "</div>"
    )
    return "      <!-- ==================== Contact ==================== -->\n      " + section(
        "contact", body, "pt-10 md:pt-20 pb-16 md:pb-24"
    )


def footer_html(portfolio: Portfolio, year: int) -> str:
    tags = "".join(chip(tag) for tag in portfolio.footer_tags)
    return f"""\
      <footer class="mt-8 px-4 md:px-8 py-10 border-t border-black/10 dark:border-white/10">
        <div class="max-w-6xl mx-auto flex flex-col md:flex-row items-center justify-between gap-4">
          <p class="text-sm text-black/60 dark:text-white/60">© {year} {esc(portfolio.profile.name)}. All rights reserved.</p>
          <div class="flex items-center gap-2">{tags}</div>
        </div>
      </footer>"""
