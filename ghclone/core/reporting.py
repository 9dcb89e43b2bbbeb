"""Presentation hooks: organization selection and clone progress."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

import typer
from tqdm import tqdm


class Reporter(Protocol):
    def prompt_selection(self, choices: Sequence[str]) -> list[str]: ...

    def report_progress(self, current: int, total: int) -> None: ...

    def report_done(self, organization: str) -> None: ...

    def close(self) -> None: ...


def parse_selection(answer: str, choices: Sequence[str]) -> list[str]:
    """Turn '1,3' / '2-4' / 'all' into the chosen entries, in list order."""
    answer = answer.strip().lower()
    if not answer:
        return []
    if answer in ("all", "*"):
        return list(choices)

    picked: set[int] = set()
    for part in answer.replace(" ", ",").split(","):
        if not part:
            continue
        if "-" in part:
            lo, _, hi = part.partition("-")
            if int(lo) > int(hi):
                raise ValueError(f"reversed range: {part}")
            picked.update(range(int(lo), int(hi) + 1))
        else:
            picked.add(int(part))

    bad = [i for i in sorted(picked) if not 1 <= i <= len(choices)]
    if bad:
        raise ValueError(f"out of range: {', '.join(map(str, bad))}")
    return [c for i, c in enumerate(choices, start=1) if i in picked]


class TerminalReporter:
    """Numbered multi-select via typer prompts and one tqdm bar per organization."""

    def __init__(self) -> None:
        self._bar: tqdm | None = None

    def prompt_selection(self, choices: Sequence[str]) -> list[str]:
        if not choices:
            return []
        typer.echo("Please select organizations to clone:")
        for i, c in enumerate(choices, start=1):
            typer.echo(f"  {i}. {c}")
        while True:
            answer = typer.prompt("Numbers (e.g. 1,3 or 2-4), 'all', or empty for none", default="", show_default=False)
            try:
                return parse_selection(answer, choices)
            except ValueError as e:
                typer.secho(f"Invalid selection: {e}", err=True)

    def report_progress(self, current: int, total: int) -> None:
        if self._bar is None or current == 0:
            self.close()
            self._bar = tqdm(total=total, unit="repo")
        self._bar.update(current - self._bar.n)

    def report_done(self, organization: str) -> None:
        self.close()
        typer.echo(f"Organization \"{organization}\" cloned successfully.")

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


class HeadlessReporter:
    """Non-interactive reporter: selection is fixed up front, progress is recorded."""

    def __init__(self, selection: Sequence[str] | None = None) -> None:
        self.selection = list(selection) if selection is not None else None
        self.progress: list[tuple[int, int]] = []
        self.done: list[str] = []
        self.closed = False

    def prompt_selection(self, choices: Sequence[str]) -> list[str]:
        if self.selection is None:
            return list(choices)
        return list(self.selection)

    def report_progress(self, current: int, total: int) -> None:
        self.progress.append((current, total))

    def report_done(self, organization: str) -> None:
        self.done.append(organization)

    def close(self) -> None:
        self.closed = True
