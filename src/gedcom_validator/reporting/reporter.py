"""
Reporter: renders findings and appends them to a text sink.

The sink is anything with a ``write(str)`` method (an open file, a
``StringIO``, a rich console file). The reporter only ever appends, in the
order findings are handed to it.
"""

from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING, Iterable, Iterator, Protocol, TextIO, Union

from gedcom_validator.core.exceptions import ReportSinkError
from gedcom_validator.logging import get_logger
from gedcom_validator.reporting.templates import get_template

if TYPE_CHECKING:
    from gedcom_validator.rules.finding import Finding

log = get_logger(__name__)


class TextSink(Protocol):
    def write(self, text: str) -> int: ...


def render_finding(finding: "Finding") -> str:
    """Render one finding with its rule's template."""
    return get_template(finding.code).render(finding.fields)


class Reporter:
    def __init__(self, sink: TextSink):
        self.sink = sink
        self.count = 0

    def report(self, finding: "Finding") -> None:
        text = render_finding(finding)
        try:
            self.sink.write(text)
            flush = getattr(self.sink, "flush", None)
            if flush is not None:
                flush()
        except (OSError, ValueError) as exc:
            # ValueError covers writes to an already-closed file object.
            raise ReportSinkError(f"Cannot append finding {finding.code}: {exc}") from exc
        self.count += 1
        log.debug(f"Reported {finding.code} for {', '.join(finding.entity_ids)}")

    def report_all(self, findings: Iterable["Finding"]) -> int:
        n = 0
        for finding in findings:
            self.report(finding)
            n += 1
        return n


@contextmanager
def open_report_sink(path: Union[str, Path]) -> Iterator[TextIO]:
    """Open ``path`` for appending, creating parent directories as needed."""
    report_path = Path(path)
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        fh = report_path.open("a", encoding="utf-8", newline="\n")
    except OSError as exc:
        raise ReportSinkError(f"Cannot open report file {report_path}: {exc}") from exc

    try:
        yield fh
    finally:
        fh.close()


def truncate_report(path: Union[str, Path]) -> None:
    """Empty the report file at the start of a new session."""
    report_path = Path(path)
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text("", encoding="utf-8")
    except OSError as exc:
        raise ReportSinkError(f"Cannot reset report file {report_path}: {exc}") from exc
