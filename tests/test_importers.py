"""Tests for the CSV team importer."""

import pytest

from matchday.errors import InvalidInput
from matchday.importers.teams_csv import TeamsCSVImporter, load_teams
from matchday.models import TeamRef


class TestTeamsCSVImporter:
    @pytest.fixture
    def importer(self):
        return TeamsCSVImporter()

    def test_load_id_name_venue(self, importer, tmp_path):
        path = tmp_path / "teams.csv"
        path.write_text(
            "id,name,venue\n"
            "HAR,Harbour FC,Harbour Park\n"
            "MIL,Mill United,\n"
            "007,Agents,Spy Ground\n"
        )
        teams = importer.load(str(path))
        assert teams == [
            TeamRef(id="HAR", name="Harbour FC", venue="Harbour Park"),
            TeamRef(id="MIL", name="Mill United", venue=None),
            TeamRef(id="007", name="Agents", venue="Spy Ground"),
        ]

    def test_alternate_headers(self, importer, tmp_path):
        path = tmp_path / "export.csv"
        path.write_text("_id,Team,Stadium\nabc123,Rovers,Rovers Road\n")
        assert importer.load(path) == [TeamRef(id="abc123", name="Rovers", venue="Rovers Road")]

    def test_name_only_uses_name_as_id(self, importer, tmp_path):
        path = tmp_path / "names.csv"
        path.write_text("name\nRovers\nCity\n")
        assert [t.id for t in importer.load(path)] == ["Rovers", "City"]

    def test_file_order_preserved(self, tmp_path):
        path = tmp_path / "teams.csv"
        path.write_text("code\nZ\nA\nM\n")
        assert [t.id for t in load_teams(path)] == ["Z", "A", "M"]

    def test_file_not_found(self, importer):
        with pytest.raises(FileNotFoundError):
            importer.load("/nonexistent/teams.csv")

    def test_no_usable_columns(self, importer, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("founded,coach\n1901,Smith\n")
        with pytest.raises(InvalidInput):
            importer.load(path)

    def test_row_without_identifier(self, importer, tmp_path):
        path = tmp_path / "gap.csv"
        path.write_text("id,name\nA,Alpha\n,\n")
        with pytest.raises(InvalidInput, match="Row 3"):
            importer.load(path)
