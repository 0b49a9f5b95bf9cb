"""Test environment normalization."""

from newapp.core.environment import make_env_array
from newapp.model.config import EnvVar


class TestMakeEnvArray:
    def test_mapping_to_pairs(self):
        """Test converting a mapping, keeping its order."""
        assert make_env_array({"A": "1", "B": "2"}) == [
            EnvVar(name="A", value="1"),
            EnvVar(name="B", value="2"),
        ]

    def test_list_unchanged(self):
        """Test that a list is returned as is."""
        env = [EnvVar(name="A", value="1"), EnvVar(name="A", value="2")]
        assert make_env_array(env) is env

    def test_forms_equivalent(self):
        """Test that both forms normalize to the same pairs."""
        assert make_env_array({"A": "1", "B": "2"}) == make_env_array(
            [EnvVar(name="A", value="1"), EnvVar(name="B", value="2")]
        )

    def test_empty(self):
        """Test empty and missing input."""
        assert make_env_array({}) == []
        assert make_env_array([]) == []
        assert make_env_array(None) == []
