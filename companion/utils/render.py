"""Rendering helpers using Rich."""

from __future__ import annotations

from typing import Optional, Sequence

from rich.markup import escape
from rich.table import Table

from companion.bookmarks.user_cell import UserCellData
from companion.match.scoreboard import RankInfo, Scoreboard
from companion.missions.contract_view import COMPLETE, IN_PROGRESS, UNKNOWN, MissionRow

# Rich has no font weights; map the scoreboard's weights onto styles
_WEIGHT_STYLES = {"semibold": "bold", "medium": "", "regular": ""}

BAR_WIDTH = 20


def _styled(text: str, style: str) -> str:
    if not style:
        return text
    return f"[{style}]{text}[/{style}]"


def _faded(text: str, faded: bool) -> str:
    return _styled(text, "dim") if faded else text


def render_progress_bar(fraction: Optional[float], width: int = BAR_WIDTH) -> str:
    """Render a progress fraction as a fixed-width bar.

    A missing fraction renders as an empty (zero-width filled) bar. The bar
    is capped at full width even when progress exceeds the target; the
    numeric text next to it shows the real values.
    """
    filled = 0 if fraction is None else max(0, min(width, round(fraction * width)))
    return f"[cyan]{'━' * filled}[/cyan][grey37]{'━' * (width - filled)}[/grey37]"


def render_rank(rank: Optional[RankInfo]) -> str:
    if rank is None:
        return "[dim]?[/dim]"
    label = escape(rank.tier_name)
    if rank.tier > 0:
        label = f"{label} ({rank.ranked_rating} RR)"
    return _faded(label, rank.is_faded)


def render_scoreboard_table(scoreboard: Scoreboard, title: str = "Scoreboard") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="right")
    table.add_column("", justify="center")  # agent icon
    table.add_column("Player", justify="left")
    table.add_column("Rank", justify="left")
    table.add_column("Score", justify="right")
    table.add_column("K / D / A", justify="center")
    if scoreboard.show_parties:
        table.add_column("Party", justify="center")

    for row in scoreboard.rows:
        color = row.color or "white"
        icon = _faded(_styled("●", color), row.icon_faded)

        name = _styled(escape(row.display_name), _WEIGHT_STYLES.get(row.name_weight, ""))
        if row.player.tag_line:
            name += f" [dim]#{escape(row.player.tag_line)}[/dim]"
        if not row.links_to_profile:
            name += " [dim](you)[/dim]"

        cells = [
            str(row.position),
            icon,
            _styled(name, color),
            render_rank(row.rank),
            str(row.score),
            row.kda,
        ]
        if scoreboard.show_parties:
            label = _styled(row.party_label or "", "bold" if row.party_emphasized else "")
            cells.append(_faded(label, row.party_faded))
        table.add_row(*cells)

    return table


def render_missions_table(rows: Sequence[MissionRow], title: str = "Missions") -> Table:
    table = Table(title=title)
    table.add_column("Mission", justify="left")
    table.add_column("Progress", justify="left")
    table.add_column("", justify="right")

    for row in rows:
        name = escape(row.name)
        if row.status == UNKNOWN:
            table.add_row(f"[yellow]{name}[/yellow]", "", "")
            continue
        if row.status == COMPLETE:
            table.add_row(_faded(name, True), render_progress_bar(1.0), "[green]✓[/green]")
            continue

        progress = render_progress_bar(row.fraction_complete)
        if row.status == IN_PROGRESS:
            progress += f" [dim]{row.progress_text}[/dim]"
        table.add_row(name, progress, f"[dim]{row.xp_text}[/dim]")

    return table


def render_user_cells_table(cells: Sequence[UserCellData], title: str = "Bookmarks") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="center")
    table.add_column("Player", justify="left")
    table.add_column("Level", justify="right")
    table.add_column("Rank", justify="left")
    table.add_column("ID", justify="left", style="dim")

    for idx, cell in enumerate(cells, start=1):
        name = f"[bold]{escape(cell.name)}[/bold]"
        if cell.tag:
            name += f" [dim]#{escape(cell.tag)}[/dim]"
        table.add_row(
            str(idx),
            name,
            cell.level_text or "",
            render_rank(cell.rank),
            cell.user_id,
        )
    return table


def render_suggestions_table(suggestions: Sequence[dict], title: str = "Multiple matches found") -> Table:
    table = Table(title=title)
    table.add_column("#", justify="center")
    table.add_column("Option", justify="left")
    for idx, suggestion in enumerate(suggestions, start=1):
        table.add_row(str(idx), escape(suggestion["full_name"]))
    return table
