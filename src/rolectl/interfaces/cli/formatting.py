"""Role list rows, --filter expressions and output renderers."""

import csv
import io
import json
import re
from collections.abc import Callable
from dataclasses import dataclass

import yaml
from rich.console import Console
from rich.table import Table

from rolectl.domain.entities import Role

FIELD_LABELS = {
    "rid": "ID",
    "label": "Role Label",
    "perms": "Permissions",
}
DEFAULT_FILTER_FIELD = "perms"
FORMATS = ("yaml", "json", "table", "csv")

_FILTER_RE = re.compile(r"^(?P<neg>!)?(?:(?P<field>\w+)\s*(?P<op>\*=|~=|=))?(?P<value>.*)$", re.S)


def role_rows(roles: list[Role]) -> list[dict]:
    """One row per role, permissions as a sorted list."""
    return [
        {"rid": r.id, "label": r.label, "perms": r.sorted_permissions()}
        for r in roles
    ]


@dataclass(frozen=True)
class RowFilter:
    """Parsed --filter expression.

    ``field=value`` equality (membership for perms), ``field*=value``
    substring, ``field~=regex`` regex search, leading ``!`` negates.
    Without an operator the whole expression is matched against perms.
    """

    field: str
    op: str
    value: str
    negate: bool = False

    @classmethod
    def parse(cls, expression: str) -> "RowFilter":
        m = _FILTER_RE.match(expression.strip())
        field = m.group("field") or DEFAULT_FILTER_FIELD
        op = m.group("op") or "="
        value = m.group("value").strip()
        if field not in FIELD_LABELS:
            raise ValueError(
                f"Unknown filter field {field!r}; expected one of {', '.join(FIELD_LABELS)}"
            )
        if op == "~=":
            try:
                re.compile(value)
            except re.error as e:
                raise ValueError(f"Invalid filter regex {value!r}: {e}") from e
        return cls(field=field, op=op, value=value, negate=bool(m.group("neg")))

    def _matcher(self) -> Callable[[str], bool]:
        if self.op == "*=":
            return lambda s: self.value in s
        if self.op == "~=":
            pattern = re.compile(self.value)
            return lambda s: pattern.search(s) is not None
        return lambda s: s == self.value

    def matches(self, row: dict) -> bool:
        match = self._matcher()
        cell = row[self.field]
        if isinstance(cell, list):
            result = any(match(item) for item in cell)
        else:
            result = match(cell)
        return result != self.negate

    def apply(self, rows: list[dict]) -> list[dict]:
        return [row for row in rows if self.matches(row)]


def parse_fields(value: str | None) -> list[str]:
    """Comma-separated field keys; all fields when omitted."""
    if not value:
        return list(FIELD_LABELS)
    fields = [f.strip() for f in value.split(",") if f.strip()]
    unknown = [f for f in fields if f not in FIELD_LABELS]
    if unknown:
        raise ValueError(
            f"Unknown field(s): {', '.join(unknown)}; expected one of {', '.join(FIELD_LABELS)}"
        )
    return fields


def _flat(cell) -> str:
    if isinstance(cell, list):
        return ",".join(cell)
    return cell


def _keyed(rows: list[dict], fields: list[str]) -> dict:
    return {row["rid"]: {f: row[f] for f in fields} for row in rows}


def render(rows: list[dict], output_format: str, fields: list[str] | None = None) -> str:
    """Render rows as yaml, json, table or csv text."""
    fields = fields or list(FIELD_LABELS)
    if output_format == "yaml":
        return yaml.safe_dump(
            _keyed(rows, fields), sort_keys=False, allow_unicode=True, default_flow_style=False
        )
    if output_format == "json":
        return json.dumps(_keyed(rows, fields), indent=2, ensure_ascii=False) + "\n"
    if output_format == "csv":
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow([FIELD_LABELS[f] for f in fields])
        for row in rows:
            writer.writerow([_flat(row[f]) for f in fields])
        return buf.getvalue()
    if output_format == "table":
        table = Table(show_edge=False)
        for f in fields:
            table.add_column(FIELD_LABELS[f], overflow="fold")
        for row in rows:
            table.add_row(*(_flat(row[f]) for f in fields))
        buf = io.StringIO()
        Console(file=buf, width=160, color_system=None, force_terminal=False).print(table)
        return buf.getvalue()
    raise ValueError(f"Unknown format: {output_format}")
