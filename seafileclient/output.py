"""
Output module for seafileclient.

Provides consistent output formatting across all commands:
- JSONL (default): Newline-delimited JSON for piping
- Pretty: Human-readable tables using Rich

Usage:
    from seafileclient.output import emit, emit_error

    emit(libraries, pretty=pretty, columns=['name', 'id', 'type'])
    emit_error(exc)
"""

import json
import sys
from typing import Iterable, Any, Dict, Optional, List

from rich.console import Console
from rich.table import Table
from rich import box


def emit(
    items: Iterable[Any],
    pretty: bool = False,
    columns: Optional[List[str]] = None,
    title: Optional[str] = None,
) -> None:
    """
    Emit items as JSONL or pretty table.

    Args:
        items: Items to emit (should have to_dict() method or be dicts)
        pretty: If True, render as table. If False, output JSONL
        columns: Column names for table (auto-detected if None)
        title: Optional table title
    """
    if pretty:
        _emit_table(items, columns, title)
    else:
        _emit_jsonl(items, sys.stdout)


def _to_dict(item: Any) -> Dict[str, Any]:
    if hasattr(item, 'to_dict'):
        return item.to_dict()
    if isinstance(item, dict):
        return item
    return {'value': item}


def _emit_jsonl(items: Iterable[Any], stream=sys.stdout) -> None:
    """Emit items as JSONL."""
    for item in items:
        print(json.dumps(_to_dict(item), ensure_ascii=False), file=stream, flush=True)


def _emit_table(items: Iterable[Any], columns: Optional[List[str]] = None, title: Optional[str] = None) -> None:
    """Emit items as a Rich table."""
    rows = [_to_dict(item) for item in items]
    console = Console()

    if not rows:
        console.print("[yellow]No results found[/yellow]")
        return

    if not columns:
        columns = list(rows[0].keys())

    table = Table(title=title, box=box.ROUNDED, show_header=True, header_style="bold magenta")
    for col in columns:
        table.add_column(col)

    for row in rows:
        table.add_row(*[_format_value(row.get(col, '')) for col in columns])

    console.print(table)


def _format_value(value: Any) -> str:
    """Format a value for table display."""
    if value is None:
        return ''
    if isinstance(value, bool):
        return 'yes' if value else 'no'
    return str(value)


def emit_error(exc: Exception, exit_code: Optional[int] = None) -> None:
    """
    Emit an error as a JSON object on stdout and a message on stderr.

    HTTP status and body are included when the error carries them.
    """
    error_obj: Dict[str, Any] = {
        'error': str(exc),
        'type': type(exc).__name__,
    }
    if exit_code is not None:
        error_obj['exit_code'] = exit_code
    status = getattr(exc, 'status', None)
    if status is not None:
        error_obj['status'] = status
    body = getattr(exc, 'body', None)
    if body:
        error_obj['body'] = body

    print(f"Error: {exc}", file=sys.stderr)
    print(json.dumps(error_obj, ensure_ascii=False), flush=True)
