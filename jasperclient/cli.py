#!/usr/bin/env python3
"""
Command line access to a JasperReports Server.

Connection settings come from JASPER_* environment variables or a .env file:
    JASPER_SERVER_URL, JASPER_USERNAME, JASPER_PASSWORD, JASPER_ORGANIZATION
"""

import argparse
import sys
import threading
from typing import List, Optional

from .config import ConfigurationManager
from .exceptions import JasperClientError
from .logging_config import get_logger, log_key_value, log_list_items, log_section_header, setup_logging
from .models import ReportExecutionRequest, ReportParameter
from .rest_client import JasperRestClient
from .tasks import (
    AsyncTask,
    AsyncTaskManager,
    GetResourceLookupsAsyncTask,
    RunReportExecutionAsyncTask,
    SaveExportOutputAsyncTask,
    TaskCallbackListener,
)
from .ui import ResourceLookupsAdapter

logger = get_logger(__name__)

TASK_LIST_RESOURCES = 1
TASK_RUN_REPORT = 2
TASK_SAVE_OUTPUT = 3


class BlockingListener(TaskCallbackListener):
    """Collects finished tasks so the command line can wait for them."""

    def __init__(self):
        self.finished: List[AsyncTask] = []
        self._event = threading.Event()

    def on_task_complete(self, task: AsyncTask) -> None:
        self.finished.append(task)
        self._event.set()

    def on_task_exception(self, task: AsyncTask) -> None:
        self.finished.append(task)
        self._event.set()

    def wait_for(self, task: AsyncTask) -> AsyncTask:
        while task not in self.finished:
            self._event.wait()
            self._event.clear()
        if task.task_exception is not None:
            raise task.task_exception
        return task


def parse_parameters(raw_parameters: Optional[List[str]]) -> List[ReportParameter]:
    """``name=value`` pairs; repeating a name builds a multi-value parameter."""
    parameters = {}
    for raw in raw_parameters or []:
        if "=" not in raw:
            raise ValueError(f"Invalid parameter '{raw}', expected name=value")
        name, value = raw.split("=", 1)
        parameters.setdefault(name, []).append(value)
    return [ReportParameter(name, values) for name, values in parameters.items()]


def cmd_info(client: JasperRestClient, args) -> int:
    info = client.get_server_info(force_update=True)
    log_section_header(logger, "SERVER INFO")
    log_key_value(logger, "Server", client.server_profile.server_url)
    log_key_value(logger, "Version", info.version or "unknown")
    log_key_value(logger, "Edition", info.edition_name or info.edition or "unknown")
    log_key_value(logger, "Build", info.build or "unknown")
    return 0


def cmd_ls(client: JasperRestClient, args, manager: AsyncTaskManager, listener: BlockingListener) -> int:
    task = GetResourceLookupsAsyncTask(
        TASK_LIST_RESOURCES,
        client,
        args.folder,
        query=args.query,
        types=args.type,
        recursive=args.recursive,
        limit=args.limit,
        progress_message=f"Loading {args.folder}...",
        show_dialog_timeout=0.5,
    )
    manager.execute_task(task)
    lookups = listener.wait_for(task).result

    adapter = ResourceLookupsAdapter(lookups)
    log_list_items(logger, f"{args.folder} ({lookups.total_count or len(adapter)} items)", [
        f"{tag} {label}  {uri}" for tag, label, uri in adapter.display_rows()
    ])
    return 0


def cmd_search(client: JasperRestClient, args) -> int:
    descriptors = client.get_resources_list(
        args.folder, query=args.query, types=args.type, recursive=args.recursive, limit=args.limit
    )
    log_list_items(logger, f"Resources in {args.folder}", [
        f"{descriptor.ws_type}: {descriptor.label} ({descriptor.uri_string})" for descriptor in descriptors
    ])
    return 0


def cmd_controls(client: JasperRestClient, args) -> int:
    controls = client.get_input_controls(args.report)
    if not controls:
        logger.info(f"ℹ️  {args.report} has no input controls")
        return 0
    rows = []
    for control in controls:
        flags = "mandatory" if control.mandatory else "optional"
        rows.append(f"{control.id} ({control.type}, {flags}): {', '.join(control.selected_values) or '-'}")
    log_list_items(logger, f"Input controls of {args.report}", rows)

    parameters = parse_parameters(args.param)
    if parameters:
        errors = client.validate_input_controls_values(args.report, [p.name for p in parameters], parameters)
        for state in errors:
            logger.warning(f"⚠️ {state.id}: {state.error}")
        return 1 if errors else 0
    return 0


def cmd_run(client: JasperRestClient, args, manager: AsyncTaskManager, listener: BlockingListener) -> int:
    request = ReportExecutionRequest(
        report_unit_uri=args.report,
        output_format=args.format.lower(),
        async_=False,
        pages=args.pages,
        parameters=parse_parameters(args.param),
    )
    run_task = manager.execute_task(
        RunReportExecutionAsyncTask(TASK_RUN_REPORT, client, request, progress_message=f"Running {args.report}...")
    )
    execution = listener.wait_for(run_task).result
    if execution.is_failed or not execution.exports:
        message = execution.error_descriptor.message if execution.error_descriptor else execution.status
        logger.error(f"❌ Report execution failed: {message}")
        return 1

    export = execution.exports[0]
    save_task = manager.execute_task(
        SaveExportOutputAsyncTask(
            TASK_SAVE_OUTPUT,
            client,
            execution.request_id,
            export.id,
            args.output,
            progress_message=f"Saving {args.output}...",
        )
    )
    listener.wait_for(save_task)
    logger.info(f"📄 Report saved to {args.output} ({execution.total_pages} page(s))")
    return 0


def cmd_download(client: JasperRestClient, args) -> int:
    url = client.generate_report_url(args.report, parse_parameters(args.param), args.page, args.format.upper())
    logger.info(f"🔗 {url}")
    client.save_report_output_to_file(url, args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jasperclient",
        description="Browse and run reports on a JasperReports Server",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--env-file", help="Load settings from this .env file")
    parser.add_argument("--server", help="Server URL, overrides JASPER_SERVER_URL")
    parser.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--no-color", action="store_true", help="Disable colored log output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("info", help="Show server version and edition")

    for name, help_text in (("ls", "List a repository folder"), ("search", "Search resources (legacy service)")):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("folder", nargs="?", default="/")
        sub.add_argument("-q", "--query")
        sub.add_argument("-t", "--type", action="append", help="Resource type, may be repeated")
        sub.add_argument("-r", "--recursive", action="store_true")
        sub.add_argument("--limit", type=int, default=0)

    controls = subparsers.add_parser("controls", help="Show and validate input controls of a report")
    controls.add_argument("report")
    controls.add_argument("-p", "--param", action="append", help="name=value to validate, may be repeated")

    run = subparsers.add_parser("run", help="Run a report execution and save its output")
    run.add_argument("report")
    run.add_argument("output")
    run.add_argument("-f", "--format", default="pdf")
    run.add_argument("--pages")
    run.add_argument("-p", "--param", action="append", help="name=value, may be repeated")

    download = subparsers.add_parser("download", help="Download a report output by URL")
    download.add_argument("report")
    download.add_argument("output")
    download.add_argument("-f", "--format", default="pdf")
    download.add_argument("--page", type=int, default=0)
    download.add_argument("-p", "--param", action="append", help="name=value, may be repeated")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ConfigurationManager(env_file=args.env_file)
        if args.server:
            config.set_server_url(args.server)
        if args.log_level:
            config.set_log_level(args.log_level)
        setup_logging(config.get_log_level(), use_colors=not args.no_color)
        logger.debug(f"Configuration: {config.get_masked_config()}")

        profile = config.build_server_profile()
    except (JasperClientError, ValueError) as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    listener = BlockingListener()
    manager = AsyncTaskManager(listener)

    with JasperRestClient(
        profile,
        connect_timeout=config.get_connect_timeout(),
        read_timeout=config.get_read_timeout(),
        max_retries=config.get_max_retries(),
    ) as client:
        try:
            if args.command == "info":
                return cmd_info(client, args)
            if args.command == "ls":
                return cmd_ls(client, args, manager, listener)
            if args.command == "search":
                return cmd_search(client, args)
            if args.command == "controls":
                return cmd_controls(client, args)
            if args.command == "run":
                return cmd_run(client, args, manager, listener)
            if args.command == "download":
                return cmd_download(client, args)
        except (JasperClientError, ValueError) as e:
            logger.error(f"❌ {args.command} failed: {e}")
            return 1
        except KeyboardInterrupt:
            manager.on_cancel()
            logger.info("Interrupted")
            return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
