from typing import Any, Self
import os, re

from dotenv import dotenv_values

from .errors import ConfigurationError

_PLACEHOLDER_PATTERN = re.compile(r"{{\s*([^{}\s]+)\s*}}")

class Environment():
    """Key/value source used to hydrate {{ KEY }} placeholders in config files."""

    def __init__(self, values: dict[str, str] | None = None):
        self._env: dict[str, str] = {}
        for k, v in (values or {}).items():
            self.add_value(k, v)

    @classmethod
    def from_os(cls) -> Self:
        return cls(dict(os.environ))

    def add_value(self, key: str, value: str, overwrite=False):
        if key in self._env and not overwrite:
            raise ValueError(f"Multiple entries for variable: {key}")
        self._env[key] = value

    def get_value(self, key: str) -> str:
        if key not in self._env:
            raise KeyError(f"Key '{key}' not found in environment")
        return self._env[key]

    def load_env_file(self, fn: str, overwrite=True):
        if not os.path.isfile(fn):
            raise ConfigurationError(f"Could not find environment file {fn}")
        for k, v in dotenv_values(fn).items():
            self.add_value(k, v or "", overwrite=overwrite)


# replace {{ KEY }} with the value of KEY from env
def hydrate_string(s: str, env: Environment) -> str:
    return _PLACEHOLDER_PATTERN.sub(lambda match: env.get_value(match.group(1)), s)

# hydrates every string value of a loaded yaml document, keys and comments are left alone
def hydrate_value(value: Any, env: Environment) -> Any:
    if isinstance(value, dict):
        return { k: hydrate_value(v, env) for k, v in value.items() }
    if isinstance(value, list):
        return [hydrate_value(v, env) for v in value]
    if isinstance(value, str):
        return hydrate_string(value, env)
    return value
