"""
Tests for vsfinder.finder.constraints module.
"""

import pytest

from vsfinder.core.exceptions import InvalidVersionRequestError
from vsfinder.finder.constraints import (
    EnvironmentConstraint,
    VersionRequest,
    constraint_from_environment,
    describe_valid_versions,
)
from vsfinder.finder.diagnostics import DiagnosticLog


class TestConstraintFromEnvironment:
    """Tests for constraint_from_environment()."""

    def test_not_in_command_prompt(self):
        """Test no constraint without VCINSTALLDIR."""
        log = DiagnosticLog()

        assert constraint_from_environment({}, log) is None
        assert log.contains("VCINSTALLDIR not set")

    def test_empty_variable(self):
        """Test an empty VCINSTALLDIR counts as unset."""
        assert constraint_from_environment({"VCINSTALLDIR": ""}) is None

    def test_in_command_prompt(self):
        """Test the installation root is the parent of VCINSTALLDIR."""
        log = DiagnosticLog()
        environ = {"VCINSTALLDIR": "C:\\VS\\2019\\Community\\VC\\"}

        constraint = constraint_from_environment(environ, log)

        assert constraint == EnvironmentConstraint(path="C:\\VS\\2019\\Community")
        assert log.contains("running in VS Command Prompt")
        assert log.contains('"C:\\VS\\2019\\Community"')

    def test_reads_os_environ(self, monkeypatch):
        """Test os.environ is used by default."""
        monkeypatch.setenv("VCINSTALLDIR", "C:\\VS\\VC")

        constraint = constraint_from_environment()

        assert constraint.path == "C:\\VS"


class TestEnvironmentConstraint:
    """Tests for EnvironmentConstraint."""

    def test_matches_same_location(self):
        """Test matching ignores case, separators and trailing slashes."""
        constraint = EnvironmentConstraint(path="C:\\VS\\2019")

        assert constraint.matches("C:\\VS\\2019")
        assert constraint.matches("c:/vs/2019/")
        assert constraint.matches("C:\\VS\\2019\\VC\\..")

    def test_does_not_match_other_location(self):
        """Test sibling and nested paths do not match."""
        constraint = EnvironmentConstraint(path="C:\\VS\\2019")

        assert not constraint.matches("C:\\VS\\2022")
        assert not constraint.matches("C:\\VS\\2019\\VC")
        assert not constraint.matches("D:\\VS\\2019")


class TestVersionRequest:
    """Tests for VersionRequest."""

    @pytest.mark.parametrize("value", ["2017", "2019", "2022", " 2019 "])
    def test_parse_year(self, value):
        """Test parsing release years."""
        request = VersionRequest.parse(value)

        assert request.year == int(value)
        assert request.path is None

    def test_parse_path(self):
        """Test parsing an installation path."""
        request = VersionRequest.parse("C:/VS/2019/Community/")

        assert request.path == "C:\\VS\\2019\\Community"
        assert request.year is None

    @pytest.mark.parametrize(
        "value", ["", "2015", "vs2019", "latest", "16", "\u00b2", "\u0662\u0660\u0661\u0669"]
    )
    def test_parse_invalid(self, value):
        """Test values that are neither a year nor a path."""
        with pytest.raises(InvalidVersionRequestError):
            VersionRequest.parse(value)

    def test_year_request_matching(self):
        """Test a year request only checks the year."""
        request = VersionRequest(year=2019)

        assert request.matches_year(2019)
        assert not request.matches_year(2022)
        assert request.matches_path("C:\\Anything")

    def test_path_request_matching(self):
        """Test a path request only checks the path."""
        request = VersionRequest(path="C:\\VS")

        assert request.matches_year(2022)
        assert request.matches_path("c:\\vs\\")
        assert not request.matches_path("C:\\Other")

    def test_str(self):
        """Test string representation."""
        assert str(VersionRequest(year=2022)) == "2022"
        assert str(VersionRequest(path="C:\\VS")) == "C:\\VS"


def test_describe_valid_versions():
    """Test formatting the side-list of qualified installations."""
    text = describe_valid_versions([(2022, "C:\\A"), (2019, "C:\\B")])

    assert text == '2022 ("C:\\A"), 2019 ("C:\\B")'
    assert describe_valid_versions([]) == ""
