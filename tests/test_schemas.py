"""Tests for shared enums and identifier helpers."""

import pytest

from bitbucket_rest_api.schemas import ApiVersion, PullRequestState, parse_repo_string


class TestEnums:
    def test_api_versions(self):
        assert ApiVersion("1.0") is ApiVersion.V1
        assert ApiVersion("2.0") is ApiVersion.V2

    def test_pull_request_states(self):
        assert {state.value for state in PullRequestState} == {"OPEN", "MERGED", "DECLINED"}


class TestParseRepoString:
    def test_valid(self):
        assert parse_repo_string("alice/repo") == ("alice", "repo")

    def test_whitespace_stripped(self):
        assert parse_repo_string("  alice/Repo ") == ("alice", "Repo")

    @pytest.mark.parametrize("value", ["alice", "/repo", "alice/", "a/b/c", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_repo_string(value)
