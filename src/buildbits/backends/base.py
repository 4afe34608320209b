# topmark:header:start
#
#   project      : BuildBits
#   file         : base.py
#   file_relpath : src/buildbits/backends/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Backend contract for BuildBits transformation backends.

A *backend* turns one input file into one output artifact: a Less compiler,
a JavaScript minifier, a PNG compressor. The dispatcher treats every backend
as a black box honoring this contract:

* A backend class is bound to one or more extensions in the registry and is
  instantiated **once per dispatch** with the effective `Config`. Instances
  hold no state beyond the current call.
* ``compile(input_path, output_path, on_output=...)`` performs the
  transformation. Progress or tool output is reported by calling
  ``on_output`` with an `OutputEvent`, synchronously and in order.
* Returning ``None`` means "succeeded with default semantics"; the dispatcher
  then synthesizes the `CompileResult`. A backend may instead return its own
  result (e.g. to attach diagnostics), which is passed through verbatim.
* Failures are raised. The dispatcher never catches them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from buildbits.config.logging import BuildbitsLogger, get_logger
from buildbits.pipeline.job import OutputEvent

if TYPE_CHECKING:
    from pathlib import Path

    from buildbits.config.model import Config
    from buildbits.pipeline.job import CompileResult, OutputCallback

logger: BuildbitsLogger = get_logger(__name__)


class Backend:
    """Base class for transformation backends.

    Subclasses set `name` (also the key of their ``[backends.<name>]``
    configuration table) and `description`, and implement `compile`.

    Args:
        config (Config | None): Effective configuration for this dispatch.
    """

    name: str = ""
    description: str = ""

    def __init__(self, config: Config | None = None) -> None:
        self.config = config

    def compile(
        self,
        input_path: Path,
        output_path: Path,
        *,
        on_output: OutputCallback,
    ) -> CompileResult | None:
        """Transform ``input_path`` into ``output_path``.

        Args:
            input_path (Path): Source file.
            output_path (Path): Artifact path resolved by the dispatcher.
            on_output (OutputCallback): Receives progress/output events.

        Returns:
            CompileResult | None: An explicit result, or ``None`` for default success.
        """
        raise NotImplementedError(f"{type(self).__name__} does not implement compile()")

    def emit(self, on_output: OutputCallback, message: str) -> None:
        """Report one line of output through ``on_output``."""
        logger.trace("%s: %s", self.name, message)
        on_output(OutputEvent(source=self.name, message=message))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

