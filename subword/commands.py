"""CLI command handlers for subword."""

from __future__ import annotations

import csv
import json
import sys
from typing import Any

from rich.console import Console
from rich.markup import escape as escape_markup
from rich.table import Table
from rich.text import Text

from .config import get_settings, set_setting
from .diagnostics import debug
from .editing import offset_to_position
from .scanner import Direction, InvalidCountError, ScanResult, Subword, iter_subwords, scan
from .store import SettingsError, SettingsStore

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_CLAMPED = 2


def _read_text(value: str) -> str:
    """Return the TEXT argument, reading stdin for '-'."""
    if value == "-":
        return sys.stdin.read().rstrip("\n")
    return value


def _highlight(text: str, words: list[Subword], styles: list[str]) -> Text:
    """Render text with each sub-word styled, cycling through styles."""
    rendered = Text(text)
    for index, word in enumerate(words):
        rendered.stylize(styles[index % len(styles)], word.start, word.end)
    return rendered


def _output_subwords_table(text: str, words: list[Subword], styles: list[str]) -> None:
    console = Console(highlight=False)
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("Sub-word")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    for index, word in enumerate(words, start=1):
        table.add_row(str(index), escape_markup(word.text), str(word.start), str(word.last))
    console.print(_highlight(text, words, styles))
    console.print(table)


def _subword_dict(word: Subword) -> dict[str, Any]:
    return {"text": word.text, "start": word.start, "end": word.last}


def cmd_split(args: Any) -> int:
    """List the sub-words of a text."""
    try:
        settings = get_settings()
    except SettingsError as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR
    text = _read_text(args.text)
    fmt = args.format or settings.default_format
    words = list(iter_subwords(text))
    debug("split", length=len(text), subwords=len(words), format=fmt)

    if fmt == "json":
        print(json.dumps([_subword_dict(w) for w in words], indent=2))
    elif fmt == "csv":
        writer = csv.writer(sys.stdout)
        writer.writerow(["text", "start", "end"])
        for word in words:
            writer.writerow([word.text, word.start, word.last])
    elif not words:
        print("No sub-words.")
    else:
        _output_subwords_table(text, words, settings.highlight_styles)
    return EXIT_OK


def _move_dict(text: str, result: ScanResult) -> dict[str, Any]:
    position = offset_to_position(text, result.offset)
    char = text[result.offset] if result.offset < len(text) else ""
    return {
        "direction": result.direction.value,
        "offset": result.offset,
        "row": position.row,
        "col": position.col,
        "char": char,
        "steps": result.steps,
        "clamped": result.clamped,
    }


def cmd_move(args: Any) -> int:
    """Run one sub-word scan and report where the cursor lands."""
    try:
        settings = get_settings()
    except SettingsError as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR
    text = _read_text(args.text)
    direction = Direction(args.direction)
    count = args.count if args.count is not None else settings.default_count

    try:
        result = scan(text, args.offset, direction, count)
    except InvalidCountError as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR

    debug(
        "move",
        direction=direction.value,
        start=args.offset,
        count=count,
        offset=result.offset,
        steps=result.steps,
        clamped=int(result.clamped),
    )

    data = _move_dict(text, result)
    if (args.format or "table") == "json":
        print(json.dumps(data, indent=2))
    else:
        console = Console(highlight=False)
        table = Table(show_header=False, box=None)
        table.add_column("Field", style="bold")
        table.add_column("Value")
        for key, value in data.items():
            table.add_row(key, escape_markup(repr(value) if key == "char" else str(value)))
        console.print(table)

    return EXIT_CLAMPED if result.clamped else EXIT_OK


def cmd_config_show(args: Any) -> int:
    """Print the settings file path and the effective settings."""
    store = SettingsStore()
    try:
        settings = get_settings()
    except SettingsError as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR
    print(json.dumps({"path": str(store.file_path), "settings": settings.to_dict()}, indent=2))
    return EXIT_OK


def cmd_config_set(args: Any) -> int:
    """Save one setting, keeping the rest of the settings file."""
    try:
        settings = set_setting(args.key, args.value)
    except (ValueError, SettingsError) as exc:
        print(f"Error: {exc}")
        return EXIT_ERROR
    debug("config_set", key=args.key, path=SettingsStore().file_path)
    print(f"Saved {args.key} = {json.dumps(getattr(settings, args.key))}")
    return EXIT_OK
