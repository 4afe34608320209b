# topmark:header:start
#
#   project      : BuildBits
#   file         : dispatcher.py
#   file_relpath : src/buildbits/pipeline/dispatcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Front controller dispatching one job to its backend.

`Dispatcher.process` runs, in order:

1. input validation (empty paths fail before anything else);
2. output path resolution;
3. a pre-invocation existence check of the output path;
4. backend selection by input extension;
5. backend invocation, relaying every output event to subscribers;
6. result normalization.

A call is synchronous and runs entirely on the calling thread. Backend
failures propagate unchanged; nothing is retried.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from buildbits.backends.registry import BackendRegistry
from buildbits.config.logging import BuildbitsLogger, get_logger
from buildbits.pipeline.job import CompileResult
from buildbits.pipeline.outputs import require_input_path, resolve_output_path

if TYPE_CHECKING:
    from pathlib import Path

    from buildbits.backends.base import Backend
    from buildbits.config.model import Config
    from buildbits.pipeline.job import Job, OutputCallback, OutputEvent

logger: BuildbitsLogger = get_logger(__name__)


class Dispatcher:
    """Dispatch jobs to backends and normalize their results.

    The dispatcher itself keeps no per-job state; the only state it holds is
    its configuration and the list of output subscribers.

    Args:
        config (Config | None): Effective configuration handed to every backend.
        registry (type[BackendRegistry]): Backend selector; overridable for tests.
    """

    def __init__(
        self,
        config: Config | None = None,
        *,
        registry: type[BackendRegistry] = BackendRegistry,
    ) -> None:
        self.config = config
        self.registry = registry
        self._subscribers: list[OutputCallback] = []

    def subscribe(self, callback: OutputCallback) -> Callable[[], None]:
        """Register ``callback`` for backend output events.

        Args:
            callback (OutputCallback): Called once per event, in emission order.

        Returns:
            Callable[[], None]: Removes the subscription when called.
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _publish(self, event: OutputEvent) -> None:
        for callback in list(self._subscribers):
            callback(event)

    def process(self, job: Job) -> CompileResult:
        """Run ``job`` through its backend and return the normalized result.

        Args:
            job (Job): The job to dispatch.

        Returns:
            CompileResult: The backend's own result, or a synthesized success.

        Raises:
            ConfigurationError: If the job's input path is empty.
            UnsupportedFileTypeError: If no backend handles the input extension.
        """
        input_path: Path = require_input_path(job.input_path)
        output_path: Path = resolve_output_path(job)
        existed: bool = output_path.exists()

        backend: Backend = self.registry.create(input_path, self.config)
        logger.info(
            "%s '%s' -> '%s' with %s",
            job.job_type.value,
            input_path,
            output_path,
            backend.name or type(backend).__name__,
        )

        result: CompileResult | None = backend.compile(
            input_path, output_path, on_output=self._publish
        )
        if result is not None:
            logger.debug("Backend %s returned its own result: %r", backend.name, result)
            return result

        return CompileResult(
            success=True,
            input_path=input_path,
            output_path=output_path,
            is_new_file=not existed,
        )
