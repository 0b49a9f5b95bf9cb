"""Environment variable normalization."""

from typing import Dict, List, Union

from ..model.config import EnvVar


def make_env_array(env: Union[List[EnvVar], Dict[str, str], None]) -> List[EnvVar]:
    """Turn an env mapping into a list of name/value pairs.

    Lists are returned unchanged; mappings keep their iteration order.
    """
    if env is None:
        return []
    if isinstance(env, list):
        return env
    return [EnvVar(name=name, value=value) for name, value in env.items()]
