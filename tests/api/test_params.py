"""Tests for request parameter normalization."""

from bitbucket_rest_api.api import filter_params, normalize_params
from bitbucket_rest_api.schemas import PullRequestState


class TestNormalizeParams:
    """Tests for normalize_params."""

    def test_none_yields_empty_dict(self):
        assert normalize_params(None) == {}

    def test_keys_become_strings(self):
        assert normalize_params({1: "a", "b": 2}) == {"1": "a", "b": 2}

    def test_enum_values_unwrapped(self):
        """Enum members are sent as their plain value."""
        params = normalize_params({"state": PullRequestState.MERGED})
        assert params == {"state": "MERGED"}
        assert type(params["state"]) is str

    def test_enum_keys_unwrapped(self):
        assert normalize_params({PullRequestState.OPEN: 1}) == {"OPEN": 1}

    def test_nested_mappings_normalized(self):
        params = normalize_params({"outer": {2: PullRequestState.DECLINED}})
        assert params == {"outer": {"2": "DECLINED"}}

    def test_sequence_elements_normalized(self):
        params = normalize_params(
            {"state": [PullRequestState.OPEN, PullRequestState.MERGED], "ids": (1, 2)}
        )
        assert params == {"state": ["OPEN", "MERGED"], "ids": [1, 2]}
        assert all(type(value) is str for value in params["state"])

    def test_sequences_inside_nested_mappings(self):
        params = normalize_params({"outer": {"states": (PullRequestState.DECLINED,)}})
        assert params == {"outer": {"states": ["DECLINED"]}}

    def test_strings_not_split(self):
        assert normalize_params({"q": "OPEN"}) == {"q": "OPEN"}

    def test_input_not_mutated(self):
        original = {"state": PullRequestState.OPEN}
        normalize_params(original)
        assert original == {"state": PullRequestState.OPEN}


class TestFilterParams:
    """Tests for filter_params."""

    def test_unknown_keys_dropped(self):
        """Unrecognized keys are dropped silently, not rejected."""
        assert filter_params(["state"], {"state": "OPEN", "bogus": "x"}) == {"state": "OPEN"}

    def test_missing_allowed_keys_not_added(self):
        assert filter_params(["state", "q"], {"state": "OPEN"}) == {"state": "OPEN"}

    def test_returns_new_dict(self):
        params = {"state": "OPEN"}
        filtered = filter_params(["state"], params)
        assert filtered == params
        assert filtered is not params

    def test_empty_allow_list(self):
        assert filter_params([], {"state": "OPEN"}) == {}
