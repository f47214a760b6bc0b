"""
This module defines environment variables used in ts-generic-lint.
Environment variable names follow these conventions:
- Public variables: names begin with `TS_GENERIC_LINT_`
- Internal-use variables: names begin with `_TS_GENERIC_LINT_`
"""

import os


class _EnvironmentVariable:
    """
    Represents an environment variable.
    """

    def __init__(self, name, type_, default):
        if type_ == bool and not isinstance(self, _BooleanEnvironmentVariable):
            raise ValueError("Use _BooleanEnvironmentVariable instead for boolean variables")
        self.name = name
        self.type = type_
        self.default = default

    @property
    def defined(self):
        return self.name in os.environ

    def get_raw(self):
        return os.getenv(self.name)

    def set(self, value):
        os.environ[self.name] = str(value)

    def get(self):
        """
        Reads the value of the environment variable if it exists and converts it to the desired
        type. Otherwise, returns the default value.
        """
        if (val := self.get_raw()) is not None:
            try:
                return self.type(val)
            except Exception as e:
                raise ValueError(f"Failed to convert {val!r} for {self.name}: {e}")
        return self.default

    def __format__(self, format_spec: str) -> str:
        return self.name.__format__(format_spec)


class _BooleanEnvironmentVariable(_EnvironmentVariable):
    """
    Represents a boolean environment variable.
    """

    def __init__(self, name, default):
        # `default not in [True, False, None]` doesn't work because `1 in [True]`
        # (or `0 in [False]`) returns True.
        if not (default is True or default is False or default is None):
            raise ValueError(f"{name} default value must be one of [True, False, None]")
        super().__init__(name, bool, default)

    def get(self):
        if not self.defined:
            return self.default

        val = os.getenv(self.name)
        lowercased = val.lower()
        if lowercased not in ["true", "false", "1", "0"]:
            raise ValueError(
                f"{self.name} value must be one of ['true', 'false', '1', '0'] (case-insensitive), "
                f"but got {val}"
            )
        return lowercased in ["true", "1"]


#: Specifies the logging level of the ``ts_generic_lint`` logger, e.g. ``DEBUG``.
#: (default: ``None``, which means ``INFO``)
TS_GENERIC_LINT_LOGGING_LEVEL = _EnvironmentVariable("TS_GENERIC_LINT_LOGGING_LEVEL", str, None)

#: Specifies whether to configure the ``ts_generic_lint`` logger when the package is imported.
#: Set to ``false`` to leave logging configuration to the embedding application.
#: (default: ``True``)
TS_GENERIC_LINT_CONFIGURE_LOGGING = _BooleanEnvironmentVariable(
    "TS_GENERIC_LINT_CONFIGURE_LOGGING", True
)

#: Specifies the number of worker processes used to lint multiple files.
#: (default: ``None``, which lets the process pool pick the CPU count)
TS_GENERIC_LINT_MAX_WORKERS = _EnvironmentVariable("TS_GENERIC_LINT_MAX_WORKERS", int, None)
