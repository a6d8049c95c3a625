from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Skill(BaseModel):
    name: str
    level: float = Field(..., description="Self-assessed level; rendered fill is clamped to 0-100")

    @property
    def fill_percent(self) -> float:
        return max(0.0, min(100.0, self.level))


class Project(BaseModel):
    title: str
    description: str
    bullets: list[str] = Field(default_factory=list)
    tech: list[str] = Field(default_factory=list)
    href: str | None = Field(default=None, description="Live link; no Live action when missing")
    repo: str | None = Field(default=None, description="Source link; no Code action when missing")

    @field_validator("href", "repo")
    @classmethod
    def blank_link_is_missing(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return value.strip()


class Contact(BaseModel):
    email: str
    phone: str
    github: str
    linkedin: str
    resume: str
    email_label: str
    phone_label: str


class Stat(BaseModel):
    value: str
    label: str


class Highlight(BaseModel):
    icon: str
    text: str


class ToolGroup(BaseModel):
    icon: str
    label: str


class NavLink(BaseModel):
    href: str
    label: str


class Profile(BaseModel):
    name: str
    photo: str
    headline_focus: str = Field(..., description="Gradient phrase inside the hero headline")
    headline_suffix: str = ""
    intro: str = Field(..., description="Hero paragraph, markdown")
    about: str = Field(..., description="About paragraph, markdown")
    looking_for: str
    availability: list[str] = Field(default_factory=list)


class Portfolio(BaseModel):
    profile: Profile
    contact: Contact
    tags: list[str] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    stats: list[Stat] = Field(default_factory=list)
    highlights: list[Highlight] = Field(default_factory=list)
    tools: list[ToolGroup] = Field(default_factory=list)
    nav: list[NavLink] = Field(default_factory=list)
    footer_tag_count: int = Field(default=5, ge=0)

    @property
    def footer_tags(self) -> list[str]:
        return self.tags[: self.footer_tag_count]
