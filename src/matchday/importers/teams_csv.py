"""CSV team list importer.

Reads a team export (one row per team) into TeamRef objects. Column names
are auto-detected from a small set of common spellings so exports from
spreadsheets and document-store dumps both load without a mapping file.
"""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from matchday.errors import InvalidInput
from matchday.models.team import TeamRef

# CSV header → our key, in priority order
TEAM_COLUMNS: dict[str, str] = {
    "id": "id",
    "_id": "id",
    "team_id": "id",
    "code": "id",
    "name": "name",
    "team": "name",
    "team_name": "name",
    "venue": "venue",
    "stadium": "venue",
    "home_ground": "venue",
}


class TeamsCSVImporter:
    """Load TeamRef lists from CSV files."""

    def load(self, source_path: str | Path) -> list[TeamRef]:
        """Load teams in file order.

        Raises:
            FileNotFoundError: The file does not exist.
            InvalidInput: No id or name column, or a row without an identifier.
        """
        path = Path(source_path)
        if not path.exists():
            raise FileNotFoundError(f"Team CSV not found: {source_path}")

        df = pd.read_csv(path, dtype=str, keep_default_na=False)
        column_map = self._detect_columns(df)
        if "id" not in column_map and "name" not in column_map:
            raise InvalidInput(
                f"{path.name}: expected an id/code or name column, got {list(df.columns)}"
            )

        teams: list[TeamRef] = []
        for idx, row in df.iterrows():
            teams.append(self._row_to_team(row, column_map, idx))
        return teams

    def _detect_columns(self, df: pd.DataFrame) -> dict[str, str]:
        """Auto-detect column mapping from the CSV headers (case-insensitive)."""
        mapping: dict[str, str] = {}
        normalized = {str(col).strip().lower(): col for col in df.columns}
        for csv_col, our_key in TEAM_COLUMNS.items():
            if csv_col in normalized and our_key not in mapping:
                mapping[our_key] = normalized[csv_col]
        return mapping

    def _row_to_team(self, row: pd.Series, column_map: dict[str, str], idx) -> TeamRef:
        name = _cell(row, column_map.get("name"))
        team_id = _cell(row, column_map.get("id")) or name
        if not team_id:
            raise InvalidInput(f"Row {idx + 2}: team has neither an id nor a name")
        return TeamRef(
            id=team_id,
            name=name or None,
            venue=_cell(row, column_map.get("venue")) or None,
        )


def _cell(row: pd.Series, column: str | None) -> str:
    if not column:
        return ""
    val = row.get(column, "")
    if pd.isna(val):
        return ""
    return str(val).strip()


def load_teams(source_path: str | Path) -> list[TeamRef]:
    """Shortcut for ``TeamsCSVImporter().load(source_path)``."""
    return TeamsCSVImporter().load(source_path)
