"""Per-invocation formatter for projects and project items."""

from __future__ import annotations

from datetime import datetime

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from ghprojects import Project, ProjectItem, ProjectList
from ghprojects.cli.render.text import ago, truncate

TITLE_WIDTH = 60

_ITEM_TYPES = {
    "DRAFT_ISSUE": "Draft",
    "ISSUE": "Issue",
    "PULL_REQUEST": "Pull request",
}

_STATE_STYLES = {
    "OPEN": "green",
    "CLOSED": "red",
    "MERGED": "magenta",
}


def visibility_label(public: bool) -> str:
    return "PUBLIC" if public else "PRIVATE"


def state_label(project: Project) -> str:
    return "CLOSED" if project.closed else "OPEN"


def item_type_label(item: ProjectItem) -> str:
    return _ITEM_TYPES.get(item.type, item.type.replace("_", " ").capitalize() or "Item")


class ProjectFormatter:
    """Writes projects to *console*.

    Terminals get tables, colors and rendered markdown; anything else gets
    plain tab-separated lines suited to scripts.
    """

    def __init__(self, console: Console, *, now: datetime | None = None) -> None:
        self._console = console
        self._now = now

    @property
    def is_terminal(self) -> bool:
        return self._console.is_terminal

    def _write_fields(self, fields: list[str]) -> None:
        # Rich expands tabs, so scripted output bypasses the renderer.
        self._console.file.write("\t".join(fields) + "\n")

    def _ago(self, then: datetime | None) -> str:
        return ago(then, self._now) if then is not None else ""

    def projects(self, project_list: ProjectList) -> None:
        if not self.is_terminal:
            for project in project_list.projects:
                fields = [
                    f"#{project.number}",
                    project.title,
                    state_label(project),
                    visibility_label(project.public),
                    project.id,
                ]
                self._write_fields(fields)
            return

        if not project_list.projects:
            self._console.print("No projects match your search")
            return

        table = Table(box=None, show_header=False, pad_edge=False)
        table.add_column(style="bold")
        table.add_column()
        table.add_column()
        table.add_column(style="dim")
        table.add_column(style="dim")
        for project in project_list.projects:
            state = state_label(project)
            table.add_row(
                f"#{project.number}",
                Text(truncate(TITLE_WIDTH, project.title)),
                f"[{_STATE_STYLES[state]}]{state}[/]",
                visibility_label(project.public),
                self._ago(project.created_at),
            )
        self._console.print(table)

    def project(self, project: Project) -> None:
        console = self._console
        terminal = self.is_terminal

        console.print(f"{project.title} #{project.number}", style="bold" if terminal else None, markup=False)
        byline = f"{visibility_label(project.public)} • {project.creator} opened {self._ago(project.created_at)}"
        console.print(byline, style="dim" if terminal else None, markup=False, highlight=False)
        if project.description:
            console.print()
            console.print(project.description, markup=False, highlight=False)
        if project.body:
            console.print()
            if terminal:
                console.print(Markdown(project.body))
            else:
                console.print(project.body, markup=False, highlight=False, soft_wrap=True)

        if project.items is not None and project.items.nodes:
            console.print()
            self.items(project.items.nodes)

        console.print()
        console.print(f"View this project on GitHub: {project.url}", markup=False, highlight=False, soft_wrap=True)

    def items(self, items: list[ProjectItem]) -> None:
        if not self.is_terminal:
            for item in items:
                content = item.content
                number = f"#{content.number}" if content.number else ""
                fields = [item_type_label(item), number, content.title, content.state]
                self._write_fields(fields)
            return

        table = Table(box=None, show_header=False, pad_edge=False)
        table.add_column(style="dim")
        table.add_column(style="bold")
        table.add_column()
        table.add_column()
        table.add_column(style="dim")
        for item in items:
            content = item.content
            state_style = _STATE_STYLES.get(content.state, "")
            table.add_row(
                item_type_label(item),
                f"#{content.number}" if content.number else "",
                Text(truncate(TITLE_WIDTH, content.title)),
                f"[{state_style}]{content.state}[/]" if state_style else content.state,
                self._ago(content.created_at),
            )
        self._console.print(table)
