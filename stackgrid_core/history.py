from __future__ import annotations

import csv
import io
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from .board import Coord

CSV_HEADER = "Timestamp,CircleID,FromRow,FromCol,ToRow,ToCol,Success,Message"


@dataclass(frozen=True)
class MoveRecord:
    """One move attempt. src/dst are None when the token was unknown."""
    token_id: str
    src: Optional[Coord]
    dst: Optional[Coord]
    timestamp: datetime
    success: bool
    reason: Optional[str] = None


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(ts: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a 'Z' suffix, e.g. 2024-01-02T03:04:05.678Z."""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    ts = ts.astimezone(timezone.utc)
    return ts.strftime('%Y-%m-%dT%H:%M:%S.') + f"{ts.microsecond // 1000:03d}Z"


def _coord_fields(c: Optional[Coord]) -> List[str]:
    if c is None:
        return ["", ""]
    return [str(c[0]), str(c[1])]


def _quote(text: Optional[str]) -> str:
    return '"' + (text or '').replace('"', '""') + '"'


def record_to_csv_row(rec: MoveRecord) -> str:
    """One CSV line. Ids are quoted by the csv module when needed; the message is always quoted."""
    buf = io.StringIO()
    csv.writer(buf, lineterminator="\n").writerow(
        [format_timestamp(rec.timestamp), rec.token_id]
        + _coord_fields(rec.src)
        + _coord_fields(rec.dst)
        + ['true' if rec.success else 'false']
    )
    return buf.getvalue()[:-1] + "," + _quote(rec.reason)


def history_to_csv(records: Iterable[MoveRecord]) -> str:
    """Header line followed by one line per record. An empty history still ends the header with a newline."""
    rows = [record_to_csv_row(r) for r in records]
    return CSV_HEADER + "\n" + "\n".join(rows)
