"""Pytest plugin providing the ``interactions`` fixture."""

from __future__ import annotations

import inspect
import logging
import typing as t

import pytest

from .builder import InteractionBuilder

if t.TYPE_CHECKING:  # pragma: no cover - used only for typing
    import types

    from .interaction import Interaction

logger = logging.getLogger(__name__)


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line and ini options for the plugin."""
    group = parser.getgroup("callspec")
    group.addoption(
        "--callspec-capture-source",
        action="store_true",
        dest="callspec_capture_source",
        default=None,
        help=(
            "Label interactions with the source line that declared them. "
            "Overrides the pytest.ini setting."
        ),
    )
    group.addoption(
        "--no-callspec-capture-source",
        action="store_false",
        dest="callspec_capture_source",
        default=None,
        help=(
            "Label interactions with their line number only. "
            "Overrides the pytest.ini setting."
        ),
    )
    parser.addini(
        "callspec_capture_source",
        "Label interactions with the source line that declared them.",
        type="bool",
        default=True,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "callspec(capture_source: bool = True): override source capture "
            "for interactions built in a single test."
        ),
    )


class InteractionFactory:
    """Create builders labelled with the location of their caller."""

    def __init__(self, *, capture_source: bool = True) -> None:
        self.capture_source = capture_source
        self.built: list[Interaction] = []

    def builder(
        self,
        text: str | None = None,
        *,
        line: int | None = None,
        column: int | None = None,
    ) -> InteractionBuilder:
        """Return a builder whose interactions are recorded in :attr:`built`.

        Missing location details are taken from the calling frame.
        """
        frame = inspect.currentframe()
        try:
            caller = frame.f_back if frame is not None else None
            frame_line, frame_column, source = _frame_location(caller)
        finally:
            del frame
        if line is None:
            line = frame_line
        if column is None:
            column = frame_column
        if text is None:
            if self.capture_source and source:
                text = source
            else:
                text = f"<interaction at line {line}>"
        return _RecordingBuilder(line, column, text, self.built)


class _RecordingBuilder(InteractionBuilder):
    """Builder appending each built interaction to a shared list."""

    def __init__(
        self, line: int, column: int, text: str, sink: list[Interaction]
    ) -> None:
        super().__init__(line, column, text)
        self._sink = sink

    def build(self) -> Interaction:
        """Build the interaction and record it."""
        interaction = super().build()
        self._sink.append(interaction)
        return interaction


def _frame_location(frame: types.FrameType | None) -> tuple[int, int, str]:
    """Return the line, 1-based column and stripped source line of *frame*."""
    if frame is None:
        return (0, 0, "")
    info = inspect.getframeinfo(frame, context=1)
    positions = info.positions
    column = 0
    if positions is not None and positions.col_offset is not None:
        column = positions.col_offset + 1
    source = info.code_context[0].strip() if info.code_context else ""
    return (info.lineno, column, source)


def _capture_source_enabled(request: pytest.FixtureRequest) -> bool:
    """Return whether builders should be labelled with source text."""
    # Priority order: marker > CLI option > INI setting
    marker = request.node.get_closest_marker("callspec")
    if marker is not None and "capture_source" in marker.kwargs:
        return bool(marker.kwargs["capture_source"])

    config = request.config
    cli_value = config.getoption("callspec_capture_source")
    if cli_value is not None:
        return bool(cli_value)

    return bool(config.getini("callspec_capture_source"))


@pytest.fixture
def interactions(
    request: pytest.FixtureRequest,
) -> t.Generator[InteractionFactory, None, None]:
    """Provide an :class:`InteractionFactory` for the current test."""
    factory = InteractionFactory(capture_source=_capture_source_enabled(request))
    yield factory
    logger.debug(
        "%s built %d interaction(s)", request.node.nodeid, len(factory.built)
    )


__all__ = ["InteractionFactory", "interactions"]
