"""Process context dependency for FastAPI."""

from ..factory import ProcessContext

__all__ = ["ContextDependency", "context_dependency"]


class ContextDependency:
    """Holds the process-wide context for request handlers.

    The context is built by `~passgate.main.create_app` and installed here
    by the application lifespan.
    """

    def __init__(self) -> None:
        self._process_context: ProcessContext | None = None

    async def __call__(self) -> ProcessContext:
        """Return the process context."""
        return self.get_process_context()

    def get_process_context(self) -> ProcessContext:
        """Return the process context.

        Raises
        ------
        RuntimeError
            The dependency has not been initialized.
        """
        if not self._process_context:
            raise RuntimeError("ContextDependency not initialized")
        return self._process_context

    def initialize(self, process_context: ProcessContext) -> None:
        """Install the process context built at application creation."""
        self._process_context = process_context

    def reset(self) -> None:
        """Drop the process context on shutdown."""
        self._process_context = None


context_dependency = ContextDependency()
"""The dependency that will return the per-process context."""
