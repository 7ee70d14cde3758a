"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands through
``@click.pass_obj``. Builds the dispatcher lazily and owns result emission
(stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mercyctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from mercyctl.config.settings import MercySettings
    from mercyctl.infrastructure.toolkit import Toolkit
    from mercyctl.services.dispatch import Dispatcher
    from mercyctl.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The toolkit and dispatcher are created on first use, so ``--help``
    and ``--version`` never load plugins or collaborators.
    """

    def __init__(self, settings: MercySettings) -> None:
        self.settings = settings
        self._toolkit: Toolkit | None = None
        self._dispatcher: Dispatcher | None = None

        from mercyctl.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from mercyctl.services.telemetry import enable_telemetry

            enable_telemetry()

    @property
    def toolkit(self) -> Toolkit:
        if self._toolkit is None:
            from mercyctl.infrastructure.toolkit import Toolkit

            self._toolkit = Toolkit(self.settings)
        return self._toolkit

    @property
    def dispatcher(self) -> Dispatcher:
        if self._dispatcher is None:
            from mercyctl.services.dispatch import Dispatcher

            self._dispatcher = Dispatcher(self.toolkit)
        return self._dispatcher

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, normal return. Warnings go to stderr outside
          JSON mode so they don't pollute piped output.
        * Failure (sentinel or environment error): stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
