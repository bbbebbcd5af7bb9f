"""Runtime environment for Monkey.

The Environment stores bindings of identifier names to evaluated values and
supports nested scopes via an `outer` link. A child never writes into its
parent: `define` always targets the innermost frame. Closures hold a shared
reference to the frame they were created in, so later bindings in that frame
stay visible to them. Frames only ever point at ancestors, never the reverse.
"""

from __future__ import annotations

from io import StringIO
from typing import Optional

from monkey import MonkeyValue
from monkey.errors import MonkeyUnboundIdentifier


class Environment:
    """Hierarchical mapping from names to Monkey values."""

    __slots__ = ("vars", "outer")

    def __init__(self, outer: Optional[Environment] = None):
        self.vars: dict[str, MonkeyValue] = {}
        self.outer: Environment | None = outer

    def define(self, name: str, value: MonkeyValue) -> MonkeyValue:
        """Bind `name` to `value` in this frame, shadowing any earlier binding."""
        self.vars[name] = value
        return value

    def find(self, name: str) -> Optional[Environment]:
        """Find the nearest environment in the chain that binds `name`."""
        env: Optional[Environment] = self
        while env is not None:
            if name in env.vars:
                return env
            env = env.outer
        return None

    def lookup(self, name: str) -> MonkeyValue:
        """Look up the value bound to `name`, searching outward.

        Raises MonkeyUnboundIdentifier if not found.
        """
        env = self.find(name)
        if env is None:
            raise MonkeyUnboundIdentifier(f"undefined identifier: {name}")
        return env.vars[name]

    def __contains__(self, name: str) -> bool:
        return self.find(name) is not None

    def _write_vars(self, buffer: StringIO) -> None:
        """Write this frame's variables into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v.inspect() if hasattr(v, 'inspect') else v!r}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        """Human-readable single-frame view with an indicator for parent."""
        with StringIO() as buffer:
            self._write_vars(buffer)
            if self.outer is not None:
                buffer.write(" -> ...")
            return buffer.getvalue()

    def __repr__(self) -> str:
        """Detailed chain representation for debugging purposes."""
        chain = []
        env: Optional[Environment] = self
        while env is not None:
            with StringIO() as env_buf:
                env._write_vars(env_buf)
                chain.append(env_buf.getvalue())
            env = env.outer
        return "<Environment chain: " + " -> ".join(chain) + ">"
