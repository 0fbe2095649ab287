"""Team list importers."""

from matchday.importers.teams_csv import TeamsCSVImporter, load_teams

__all__ = ["TeamsCSVImporter", "load_teams"]
