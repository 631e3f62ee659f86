"""
Table configuration: the option table and the fold into ``RenderConfig``.

Options are handled in three separate steps:

1. ``parse_arguments`` splits raw arguments into ``OptionValue`` pairs, in
   the order they were given, rejecting unknown options and missing values.
2. ``validate`` converts each raw value to its typed form and expands it
   into a mapping of ``RenderConfig`` field updates.
3. ``fold`` applies the updates left to right onto an immutable
   ``RenderConfig``. Later updates to a field overwrite earlier ones, so
   ``--theme=matrix --text-color=red`` ends with red text.

Example:
    config = load_config(["--theme=matrix", "--text-color=red"])
    config.header_text_color  # Color.RED
    config.border_style.name  # "heavy"
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

import click

from .exceptions import (
    InvalidNumberError,
    InvalidValueError,
    MissingValueError,
    UnexpectedValueError,
    UnknownOptionError,
)
from .models import Alignment, BorderStyle, Color, Delimiter, TextStyle
from .styles import BORDER_STYLES, DEFAULT_BORDER_STYLE, THEMES

logger = logging.getLogger(__name__)

DEFAULT_PADDING = 2
MAX_PADDING = 2**16

_PADDING_RANGE = click.IntRange(0, MAX_PADDING)


@dataclass(frozen=True)
class RenderConfig:
    """
    Fully resolved styling and behavior for one invocation.

    Colors and styles are enumeration members; ``None`` means unset and
    renders as nothing. Escape sequences are only chosen at render time.
    """

    table_color: Color | None = None
    header_text_color: Color | None = None
    body_text_color: Color | None = None
    header_bg_color: Color | None = None
    body_bg_color: Color | None = None
    header_text_style: TextStyle | None = None
    body_text_style: TextStyle | None = None
    header_align: Alignment = Alignment.LEFT
    body_align: Alignment = Alignment.LEFT
    border_style: BorderStyle = DEFAULT_BORDER_STYLE
    padding: int = DEFAULT_PADDING
    delimiter: Delimiter = Delimiter.SPACE
    header_data: tuple[str, ...] | None = None
    show_header: bool = True
    show_border: bool = True
    show_separator: bool = True

    def __post_init__(self) -> None:
        if not 0 <= self.padding <= MAX_PADDING:
            raise ValueError(f"padding must be between 0 and {MAX_PADDING}")

    @property
    def skip_first_line(self) -> bool:
        """Simplified mode drops the first input line instead of using it as header."""
        return not self.show_header


# ---------------------------------------------------------------------------
# Option table
# ---------------------------------------------------------------------------


def _split_header(value: str) -> tuple[str, ...]:
    names = value.split(",")
    # "a,b," names two columns, not three
    if names and names[-1] == "":
        names.pop()
    return tuple(names)


@dataclass(frozen=True)
class OptionSpec:
    """
    One table option.

    Attributes:
        name: Long option name, e.g. ``--text-color``
        help: One-line description for the help screen
        fields: ``RenderConfig`` fields the option sets
        short: Optional short alias, e.g. ``-b``
        metavar: Value placeholder; ``None`` marks a flag
        choices: Accepted raw values mapped to their typed values
        flag_value: Value assigned to ``fields`` when a flag is given
        convert: Converts a raw value when there is no fixed choice set
        expand: Turns the typed value into field updates, replacing the
            default of assigning it to every name in ``fields``
    """

    name: str
    help: str
    fields: tuple[str, ...] = ()
    short: str | None = None
    metavar: str | None = None
    choices: Mapping[str, Any] | None = field(default=None, hash=False)
    flag_value: Any = None
    convert: Callable[[str, str], Any] | None = field(default=None, hash=False)
    expand: Callable[[Any], dict[str, Any]] | None = field(default=None, hash=False)

    @property
    def is_flag(self) -> bool:
        return self.metavar is None

    def to_value(self, raw: str, given_as: str) -> Any:
        """Convert a raw value, raising a configuration error if it is invalid."""
        if self.choices is not None:
            choice = click.Choice(list(self.choices))
            try:
                return self.choices[choice.convert(raw, None, None)]
            except click.BadParameter as e:
                raise InvalidValueError(given_as, raw) from e
        if self.convert is not None:
            return self.convert(raw, given_as)
        return raw

    def updates(self, value: Any) -> dict[str, Any]:
        """Field updates produced by this option for an already converted value."""
        if self.expand is not None:
            return self.expand(value)
        return {name: value for name in self.fields}


def _to_padding(raw: str, given_as: str) -> int:
    try:
        number: int = _PADDING_RANGE.convert(raw, None, None)
    except click.BadParameter as e:
        reason = None
        if raw.strip().lstrip("+-").isdecimal():
            if int(raw) < 0:
                reason = f"The value of '{given_as}' cannot be less than 0"
            else:
                reason = f"The value for the '{given_as}' option is out of range"
        raise InvalidNumberError(given_as, raw, reason) from e
    return number


def _to_header(raw: str, given_as: str) -> tuple[str, ...]:
    names = _split_header(raw)
    if not names:
        raise InvalidValueError(given_as, raw)
    return names


_ALIGNMENTS = {a.value: a for a in Alignment}
_COLORS = {c.value: c for c in Color}
_STYLES = {s.value: s for s in TextStyle}
_DELIMITERS = {d.value: d for d in Delimiter}

OPTIONS: tuple[OptionSpec, ...] = (
    OptionSpec(
        "--bbg-color", "Set body background color", ("body_bg_color",),
        metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--bg-color", "Set header and body background color",
        ("header_bg_color", "body_bg_color"), metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--borderless", "Hide table border", ("show_border",), short="-b", flag_value=False
    ),
    OptionSpec(
        "--border-style", "Set border style", ("border_style",),
        metavar="STYLE", choices=BORDER_STYLES,
    ),
    OptionSpec(
        "--btext-align", "Set body text alignment", ("body_align",),
        metavar="ALIGN", choices=_ALIGNMENTS,
    ),
    OptionSpec(
        "--btext-color", "Set body text color", ("body_text_color",),
        metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--btext-style", "Set body text style", ("body_text_style",),
        metavar="STYLE", choices=_STYLES,
    ),
    OptionSpec(
        "--fusion", "Hide the separator between header and body", ("show_separator",),
        short="-f", flag_value=False,
    ),
    OptionSpec(
        "--hbg-color", "Set header background color", ("header_bg_color",),
        metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--hdata", "Set header data (comma-separated column names)", ("header_data",),
        metavar="NAMES", convert=_to_header,
    ),
    OptionSpec(
        "--htext-align", "Set header text alignment", ("header_align",),
        metavar="ALIGN", choices=_ALIGNMENTS,
    ),
    OptionSpec(
        "--htext-color", "Set header text color", ("header_text_color",),
        metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--htext-style", "Set header text style", ("header_text_style",),
        metavar="STYLE", choices=_STYLES,
    ),
    OptionSpec(
        "--padding", "Set column padding", ("padding",),
        metavar="VALUE", convert=_to_padding,
    ),
    OptionSpec(
        "--separator", "Set column separator", ("delimiter",),
        metavar="SEP", choices=_DELIMITERS,
    ),
    OptionSpec(
        "--simplify", "Show table in simple form (without header)", ("show_header",),
        short="-s", flag_value=False,
    ),
    OptionSpec(
        "--tab-color", "Set table border color", ("table_color",),
        metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--text-align", "Set header and body text alignment",
        ("header_align", "body_align"), metavar="ALIGN", choices=_ALIGNMENTS,
    ),
    OptionSpec(
        "--text-color", "Set header and body text color",
        ("header_text_color", "body_text_color"), metavar="COLOR", choices=_COLORS,
    ),
    OptionSpec(
        "--text-style", "Set header and body text style",
        ("header_text_style", "body_text_style"), metavar="STYLE", choices=_STYLES,
    ),
    OptionSpec(
        "--theme", "Set table theme", metavar="THEME", choices=THEMES,
        expand=lambda theme: dict(theme.updates),
    ),
)

_BY_NAME: dict[str, OptionSpec] = {spec.name: spec for spec in OPTIONS}
_BY_NAME.update({spec.short: spec for spec in OPTIONS if spec.short})


# ---------------------------------------------------------------------------
# Parse / validate / fold
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OptionValue:
    """An option occurrence in encounter order, before validation."""

    spec: OptionSpec
    given_as: str
    raw: str | None = None


def parse_arguments(args: Sequence[str]) -> list[OptionValue]:
    """
    Split raw arguments into option occurrences, preserving their order.

    Value options must use the ``--name=VALUE`` form.

    Raises:
        UnknownOptionError: If an argument is not a known option
        MissingValueError: If a value option has no ``=VALUE``
        UnexpectedValueError: If a flag is given ``=VALUE``
    """
    parsed: list[OptionValue] = []
    for arg in args:
        name, sep, raw = arg.partition("=")
        spec = _BY_NAME.get(name)
        if spec is None:
            raise UnknownOptionError(arg)
        if spec.is_flag:
            if sep:
                raise UnexpectedValueError(name, raw)
            parsed.append(OptionValue(spec, name))
        elif not sep:
            raise MissingValueError(name)
        else:
            parsed.append(OptionValue(spec, name, raw))
    return parsed


def validate(options: Iterable[OptionValue]) -> list[dict[str, Any]]:
    """
    Convert option occurrences into ``RenderConfig`` field updates.

    Raises:
        InvalidValueError: If a value is not in the option's enumerated set
        InvalidNumberError: If a numeric value is unparsable or negative
    """
    updates: list[dict[str, Any]] = []
    for option in options:
        spec = option.spec
        if spec.is_flag:
            value = spec.flag_value
        else:
            value = spec.to_value(option.raw or "", option.given_as)
        updates.append(spec.updates(value))
    return updates


def fold(
    updates: Iterable[Mapping[str, Any]],
    base: RenderConfig | None = None,
) -> RenderConfig:
    """Apply field updates left to right; the last write to a field wins."""
    config = base if base is not None else RenderConfig()
    for changes in updates:
        config = replace(config, **changes)
    return config


def load_config(args: Sequence[str]) -> RenderConfig:
    """Parse, validate and fold raw arguments into a ``RenderConfig``."""
    config = fold(validate(parse_arguments(args)))
    logger.debug("Resolved configuration: %s", config)
    return config
