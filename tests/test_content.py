from pathlib import Path

import pytest
from pydantic import ValidationError

from folio.core.config import Settings
from folio.core.content import default_portfolio, load_portfolio, load_portfolio_file
from folio.core.models import Project, Skill


def test_default_portfolio_keeps_source_order() -> None:
    portfolio = default_portfolio()

    assert len(portfolio.skills) == 10
    assert len(portfolio.projects) == 5
    assert portfolio.skills[0].name == "HTML / CSS"
    assert portfolio.skills[-1].name == "Tailwind CSS"
    assert [link.label for link in portfolio.nav] == ["About", "Skills", "Projects", "Contact"]
    assert portfolio.footer_tags == portfolio.tags[:5]


def test_default_projects_have_optional_links() -> None:
    projects = default_portfolio().projects

    assert projects[0].href is None
    assert projects[0].repo == "#"
    assert projects[1].href == "#"
    assert projects[1].repo is None
    assert projects[2].href is None and projects[2].repo is None


def test_blank_project_links_count_as_missing() -> None:
    project = Project(title="t", description="d", href="  ", repo="")
    assert project.href is None
    assert project.repo is None


def test_skill_fill_is_clamped() -> None:
    assert Skill(name="Next.js", level=88).fill_percent == 88
    assert Skill(name="Over", level=150).fill_percent == 100
    assert Skill(name="Under", level=-10).fill_percent == 0


def test_load_portfolio_file_overrides_sections(tmp_path: Path) -> None:
    path = tmp_path / "content.yaml"
    path.write_text(
        "\n".join(
            [
                "skills:",
                "  - name: Python",
                "    level: 90",
                "  - name: FastAPI",
                "    level: 80",
                "footer_tag_count: 2",
            ]
        ),
        encoding="utf-8",
    )

    portfolio = load_portfolio_file(path)
    assert [skill.name for skill in portfolio.skills] == ["Python", "FastAPI"]
    assert len(portfolio.projects) == 5
    assert len(portfolio.footer_tags) == 2


def test_load_portfolio_file_rejects_bad_inputs(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_portfolio_file(tmp_path / "missing.yaml")

    wrong_suffix = tmp_path / "content.json"
    wrong_suffix.write_text("{}", encoding="utf-8")
    with pytest.raises(ValueError):
        load_portfolio_file(wrong_suffix)

    list_root = tmp_path / "list.yaml"
    list_root.write_text("- a\n- b\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_portfolio_file(list_root)

    bad_level = tmp_path / "bad.yaml"
    bad_level.write_text("skills:\n  - name: X\n    level: lots\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_portfolio_file(bad_level)


def test_load_portfolio_uses_settings_content_file(tmp_path: Path) -> None:
    path = tmp_path / "content.yml"
    path.write_text("tags: [One, Two]\n", encoding="utf-8")

    settings = Settings(_env_file=None, FOLIO_CONTENT_FILE=str(path))
    assert load_portfolio(settings).tags == ["One", "Two"]

    defaults = Settings(_env_file=None)
    assert load_portfolio(defaults).tags == default_portfolio().tags


def test_load_portfolio_file_accepts_fractional_levels(tmp_path: Path) -> None:
    path = tmp_path / "content.yaml"
    path.write_text("skills:\n  - name: Rust\n    level: 87.5\n  - name: Go\n    level: 120.5\n", encoding="utf-8")

    skills = load_portfolio_file(path).skills
    assert skills[0].level == 87.5
    assert skills[0].fill_percent == 87.5
    assert skills[1].fill_percent == 100.0
