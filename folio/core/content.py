from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from folio.core.config import Settings
from folio.core.models import Portfolio


CONTENT_SUFFIXES = {".yaml", ".yml"}


DEFAULT_CONTENT: dict[str, Any] = {
    "profile": {
        "name": "Mahdi Hussain",
        "photo": "/assets/mahdi.jpg",
        "headline_focus": "MERN Stack",
        "headline_suffix": "apps 🚀",
        "intro": (
            "A passionate **MERN Stack Developer** focused on modern UX, resilient APIs, "
            "and clean, scalable state management with *Redux & RTK Query*."
        ),
        "about": (
            "I specialize in **Next.js** (TypeScript) front‑ends and **Node.js/Express** back‑ends "
            "with **MongoDB**. I care about DX, accessibility, and performance, from "
            "*animated, responsive UIs* to *secure, well‑documented APIs*."
        ),
        "looking_for": (
            "MERN/Next.js roles where I can own features end‑to‑end: "
            "API design, typed forms, and delightful UI polish."
        ),
        "availability": ["Full‑time", "Contract", "Remote", "On‑site (BD)"],
    },
    "contact": {
        "email": "mailto:your.email@example.com",
        "phone": "tel:+8801700940689",
        "github": "https://github.com/MahdiHDev",
        "linkedin": "https://www.linkedin.com/in/mahdi-hussain-dev/",
        "resume": "/assets/Mahdi_Hussain_Resume.pdf",
        "email_label": "your.email@example.com",
        "phone_label": "+880 1700 940689",
    },
    "tags": [
        "Next.js",
        "TypeScript",
        "React",
        "Redux / RTK Query",
        "Node.js",
        "Express",
        "MongoDB",
        "Tailwind CSS",
        "Framer Motion",
        "JWT/Auth",
        "REST APIs",
    ],
    "skills": [
        {"name": "HTML / CSS", "level": 95},
        {"name": "JavaScript (ESNext)", "level": 92},
        {"name": "TypeScript", "level": 85},
        {"name": "React", "level": 92},
        {"name": "Next.js", "level": 88},
        {"name": "Redux / RTK Query", "level": 90},
        {"name": "Node.js", "level": 86},
        {"name": "Express", "level": 84},
        {"name": "MongoDB", "level": 88},
        {"name": "Tailwind CSS", "level": 95},
    ],
    "projects": [
        {
            "title": "Clothing Brand API (MERN)",
            "description": (
                "Production-ready Node.js + MongoDB REST API for a clothing brand: items, categories, "
                "attributes, variations, and secure user auth."
            ),
            "bullets": [
                "RTK Query examples + React Admin UI ready",
                "Token persistence with Redux (no page reload)",
                "Clean controllers, services, and validators",
            ],
            "tech": ["Node.js", "Express", "MongoDB", "JWT", "RTK Query"],
            "repo": "#",
        },
        {
            "title": "E‑commerce Cart & Checkout (React + RTKQ)",
            "description": (
                "Global cart state with Redux + RTK Query. Each cart item shows image, size, category, "
                "quantity controls, subtotal, and remove."
            ),
            "bullets": [
                "Custom hooks for optimistic updates",
                "React Image Zoom for product preview",
                "Toast system for success/alert/promise states",
            ],
            "tech": ["React", "Redux", "RTK Query", "Toastify", "Tailwind"],
            "href": "#",
        },
        {
            "title": "About Page CMS (Next.js)",
            "description": (
                "Editable mission/vision with image upload via a custom Drag-n-Drop component. "
                "Built for marketing teams to ship faster."
            ),
            "bullets": [
                "Zod + react-hook-form with typed schema",
                "Field-level validation and Redux integration",
                "Optimized image handling & preview",
            ],
            "tech": ["Next.js", "TypeScript", "Zod", "react-hook-form", "Redux"],
        },
        {
            "title": "Chat Feature (Real-time UX)",
            "description": (
                "Conversation list + message threads fetched via /chat/converstion?userId=... endpoint, "
                "ready for WS/long-polling."
            ),
            "bullets": [
                "Message virtualization for performance",
                "Typing indicators + read receipts (ready)",
                "Clean API layer + caching",
            ],
            "tech": ["React", "Redux", "RTK Query", "Node.js"],
        },
        {
            "title": "Nikah Service Website Components",
            "description": (
                "Modern components: FAQs with smooth accordion transitions, footer, contact forms, "
                "and hero sections."
            ),
            "bullets": [
                "Accessible disclosure widgets",
                "Gradient cards with hover elevation",
                "Email/phone deep links + validation",
            ],
            "tech": ["React", "Next.js", "Tailwind", "Framer Motion"],
        },
    ],
    "stats": [
        {"value": "5+", "label": "Years Coding"},
        {"value": "10+", "label": "Major Modules"},
        {"value": "∞", "label": "Curiosity"},
    ],
    "highlights": [
        {"icon": "star", "text": "Reusable Toast system (success/alert/promise) controllable from outside components."},
        {"icon": "wrench", "text": "Global cart with quantity controls, subtotals, and clean remove flows."},
        {"icon": "cpu", "text": "Form stacks with react-hook-form + Zod, integrated into Redux slices."},
        {"icon": "database", "text": "Token persistence in Redux for seamless auth UX (no reloads)."},
    ],
    "tools": [
        {"icon": "code", "label": "Next.js, React, TS"},
        {"icon": "layers", "label": "Redux, RTKQ"},
        {"icon": "code", "label": "Node, Express"},
        {"icon": "database", "label": "MongoDB"},
    ],
    "nav": [
        {"href": "#about", "label": "About"},
        {"href": "#skills", "label": "Skills"},
        {"href": "#projects", "label": "Projects"},
        {"href": "#contact", "label": "Contact"},
    ],
    "footer_tag_count": 5,
}


def default_portfolio() -> Portfolio:
    return Portfolio.model_validate(DEFAULT_CONTENT)


def load_portfolio_file(path: Path) -> Portfolio:
    if not path.exists() or not path.is_file():
        raise FileNotFoundError(f"Content file not found: {path}")
    if path.suffix.lower() not in CONTENT_SUFFIXES:
        raise ValueError("Content file must end in .yaml or .yml")

    payload = yaml.safe_load(path.read_text(encoding="utf-8"))
    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        raise ValueError("Content file root must be a mapping/object")

    # Top-level sections in the file replace the defaults wholesale.
    merged = {**DEFAULT_CONTENT, **payload}
    return Portfolio.model_validate(merged)


def load_portfolio(settings: Settings) -> Portfolio:
    path = settings.content_path
    if path is None:
        return default_portfolio()
    return load_portfolio_file(path)
