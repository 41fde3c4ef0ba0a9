from __future__ import annotations

import os

_TRUTHY = {"1", "true", "yes", "on"}


class Runtime:
    def __init__(self, *, env_var: str = "CACHEMATRIX_TRACE") -> None:
        self._env_var = env_var
        self._trace_override: bool | None = None

    def trace_enabled(self) -> bool:
        if self._trace_override is not None:
            return self._trace_override

        env = os.environ.get(self._env_var)
        if env is None:
            return False
        return env.strip().lower() in _TRUTHY

    def set_trace(self, enabled: bool | None) -> None:
        """Force cache-hit tracing on/off; ``None`` defers to the environment."""
        self._trace_override = None if enabled is None else bool(enabled)


runtime = Runtime()
