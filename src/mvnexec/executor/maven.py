#
# src/mvnexec/executor/maven.py
#
"""
Runs a job with Maven and assembles the RunOutcome.
"""
from pathlib import Path

import structlog
from attrs import evolve

from mvnexec.config.models import MAVEN, BuildTool, RunnerConfig
from mvnexec.exceptions import (
    ProjectFileMissingError,
    ReportCollectionError,
    SettingsWriteError,
    UnsupportedContentError,
)
from mvnexec.executor.command import (
    build_arguments,
    current_user_name,
    parse_goal,
    resolve_command,
)
from mvnexec.executor.environment import build_environment, redact
from mvnexec.executor.process import SubprocessRunner
from mvnexec.executor.protocols import ProcessOutcome, ProcessRunner
from mvnexec.executor.reports import collect_reports
from mvnexec.executor.settings import write_settings
from mvnexec.executor.workspace import resolve_workspace
from mvnexec.models import ExecutionStatus, Job, RunOutcome
from mvnexec.telemetry import StructLogger

log: StructLogger = structlog.get_logger("executor.maven")

BUILD_FAILED_MESSAGE = "build failed with an exception"


class MavenRunner:
    """
    Drives the build tool for one job at a time and converts its reports.

    Stages: workspace check, content and project file validation, command
    resolution, optional settings file, execution, report collection. Any
    stage before execution that fails ends the run with a Failed outcome and
    no steps. Execution failures (tool missing or crashed) also end the run
    early, while a build that merely had failing tests still has its
    reports collected.
    """

    runner_type = "main"

    def __init__(
        self,
        config: RunnerConfig,
        process_runner: ProcessRunner | None = None,
        tool: BuildTool = MAVEN,
    ):
        self.config = config
        self.tool = tool
        self._process_runner = process_runner or SubprocessRunner()
        self._log = log.bind(tool=tool.name, data_dir=str(config.data_dir))
        self._log.info("Preparing test runner", emoji_key="execute")

    @property
    def data_dir(self) -> Path:
        return self.config.data_dir

    async def run(self, job: Job) -> RunOutcome:
        """
        Runs the job and returns its outcome.

        Raises:
            WorkspaceMissingError: The data directory does not exist.
            InvalidTestTypeError: The job's test type has no subtype.
        """
        run_log = self._log.bind(test_type=job.test_type)
        run_log.info("Preparing for test run")

        try:
            workspace = resolve_workspace(job, self.data_dir, self.tool)
        except (UnsupportedContentError, ProjectFileMissingError) as e:
            return RunOutcome.failed(e.message)

        # Reject a malformed selector before anything touches the workspace.
        parse_goal(job.test_type)

        command = resolve_command(workspace.directory, self.tool)
        user_name = current_user_name()

        settings_path = None
        if job.variables_file:
            try:
                settings_path = write_settings(workspace.directory, job.variables_file, self.tool)
            except SettingsWriteError as e:
                return RunOutcome.failed(e.message)

        args = build_arguments(job, settings_path, self.tool, user_name=user_name)
        env = build_environment(job.variables)

        result = await self._process_runner.run(command, args, workspace.run_path, env)
        output = redact(result.output, job.variables).decode("utf-8", errors="replace")

        if result.outcome is ProcessOutcome.SUCCESS:
            outcome = RunOutcome(status=ExecutionStatus.PASSED, output=output)
            run_log.info("Test run successful", emoji_key="success")
        elif result.outcome is ProcessOutcome.TESTS_FAILED:
            outcome = RunOutcome(
                status=ExecutionStatus.FAILED,
                output=output,
                error_message=BUILD_FAILED_MESSAGE,
            )
            run_log.warning("Test run failed", error=result.error, emoji_key="fail")
        else:
            run_log.error("Build tool was unable to run", error=result.error, emoji_key="fail")
            return RunOutcome(
                status=ExecutionStatus.FAILED,
                output=output,
                error_message=result.error,
            )

        report_dir = workspace.directory.joinpath(*self.tool.report_dir)
        try:
            collection = collect_reports(report_dir)
        except ReportCollectionError as e:
            if e.partial is not None:
                outcome = evolve(outcome, steps=e.partial.steps, warnings=e.partial.warnings)
            return outcome.with_error(str(e))

        return evolve(outcome, steps=collection.steps, warnings=collection.warnings)


# 🔼⚙️
