"""Markdown reporter for available dependency updates.

Renders update candidates through a Jinja2 template, either the bundled
``updates.md.j2`` or a user-supplied one.
"""

from datetime import datetime
from importlib.resources import files
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, Template

from depbump.models import UpdateCandidate, UpdateTarget
from depbump.reporters.base import BaseReporter, change_label


class MarkdownReporter(BaseReporter):
    """Reporter that writes a Markdown table of available updates.

    Templates receive ``updates`` (list of dicts with name, current,
    candidate, change and install_spec keys), ``target`` and
    ``generated_at``.

    Attributes:
        template: The Jinja2 template used for rendering.
    """

    def __init__(self, template_path: Optional[Path] = None) -> None:
        """Initialize the Markdown reporter.

        Args:
            template_path: Optional path to a custom Jinja2 template.
                If not provided, uses the bundled template.
        """
        if template_path:
            env = Environment(
                loader=FileSystemLoader(template_path.parent),
                autoescape=False,
            )
            self.template = env.get_template(template_path.name)
        else:
            self.template = self._load_default_template()

    def _load_default_template(self) -> Template:
        template_content = (
            files("depbump.templates")
            .joinpath("updates.md.j2")
            .read_text(encoding="utf-8")
        )
        env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
        return env.from_string(template_content)

    def render(self, candidates: list[UpdateCandidate], target: UpdateTarget) -> str:
        updates = [
            {
                "name": candidate.name,
                "current": candidate.current_version,
                "candidate": candidate.candidate_version,
                "change": change_label(candidate),
                "install_spec": candidate.install_spec,
            }
            for candidate in candidates
        ]
        return self.template.render(
            updates=updates,
            target=target.value,
            generated_at=datetime.now(),
        )

    @property
    def format_name(self) -> str:
        return "markdown"
