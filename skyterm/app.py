"""Application pipeline: fetch once, build view data, run the render loop."""

import logging
import shutil
import sys
from collections.abc import Callable
from contextlib import AbstractContextManager
from typing import Any, TextIO

from skyterm.config.loader import build_request
from skyterm.config.schema import AppConfig
from skyterm.errors import FetchError, TerminalError
from skyterm.ingest.open_meteo_client import OpenMeteoClient
from skyterm.models.common import ViewMode
from skyterm.models.forecast import ForecastRequest, ForecastResult
from skyterm.series.extractor import build_chart
from skyterm.ui.loop import RenderLoop
from skyterm.ui.terminal import terminal_session
from skyterm.ui.views import FrameRenderer, loading_renderer, make_renderer

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_INTERRUPTED = 130

SessionFactory = Callable[[], AbstractContextManager[Any]]


def build_client(config: AppConfig) -> OpenMeteoClient:
    return OpenMeteoClient(
        base_url=config.client.base_url,
        user_agent=config.client.user_agent,
        timeout=config.client.timeout_seconds,
    )


def fetch_snapshot(client: OpenMeteoClient, request: ForecastRequest) -> ForecastResult | None:
    """Fetch once. A failure degrades to None (the "no data" display)."""
    try:
        result = client.fetch(request)
    except FetchError:
        logger.exception("Forecast fetch failed, continuing without data")
        return None
    logger.info(
        "Fetched forecast: current=%s daily_entries=%s",
        result.current is not None,
        len(result.daily) if result.daily is not None else None,
    )
    return result


def build_renderer(config: AppConfig, result: ForecastResult | None) -> FrameRenderer:
    """Derive the chart data once and bind the configured view to the snapshot."""
    unit_symbol = config.request.temperature_unit.symbol
    chart = None
    if config.ui.view is ViewMode.CHART:
        chart = build_chart(
            result,
            config.chart.field,
            margin=config.chart.margin,
            tick_step=config.chart.tick_step,
            unit=unit_symbol,
        )
        if chart is None:
            logger.warning("No daily %s values to chart", config.chart.field)
    return make_renderer(
        config.ui.view,
        result,
        chart,
        summary_field=config.ui.summary_field,
        unit_symbol=unit_symbol,
    )


def run_app(
    config: AppConfig,
    client: OpenMeteoClient | None = None,
    session_factory: SessionFactory = terminal_session,
) -> int:
    """Run the interactive TUI. Returns the process exit code."""
    client = client or build_client(config)
    request = build_request(config)

    try:
        with session_factory() as stdscr:
            RenderLoop(stdscr, loading_renderer).draw()
            result = fetch_snapshot(client, request)
            loop = RenderLoop(
                stdscr,
                build_renderer(config, result),
                poll_timeout_ms=config.ui.poll_timeout_ms,
                quit_key=config.ui.quit_key,
            )
            loop.run()
    except TerminalError as e:
        logger.error("Terminal setup failed: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return EXIT_INTERRUPTED

    logger.info("Exited normally")
    return EXIT_OK


def print_view(
    config: AppConfig,
    client: OpenMeteoClient | None = None,
    out: TextIO | None = None,
) -> int:
    """Render the configured view once to ``out`` without curses.

    A failed fetch degrades to the "no data" frame, as in the TUI.
    """
    out = out or sys.stdout
    client = client or build_client(config)
    result = fetch_snapshot(client, build_request(config))

    size = shutil.get_terminal_size((80, 24))
    frame = build_renderer(config, result)(size.columns, size.lines - 2)
    print(frame.title, file=out)
    for line in frame.lines:
        print(line, file=out)
    return EXIT_OK
