"""Command line parsing for the newfile CLI.

Options are read left to right until the first token that does not start
with ``-``; that token and everything after it are positional arguments.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from newfile.errors import ErrorKind, InstantiateError
from newfile.templating import validate_template_name

USAGE = """\
usage: {prog} [options...] <path>

Create <path> as a copy of templates/template.<name>.

options:
  -h, --help                 print this help and exit
  -t <name>                  template name (letters and digits only)
  --template <name>          template name
  --template=<name>          template name
  --version                  print version and exit
  -v, --verbose              enable INFO logging
  --debug                    enable DEBUG logging
"""


class ParseState(Enum):
    OPTIONS = "options"
    DONE = "done"


@dataclass(slots=True)
class ParsedArguments:
    """Result of a single parsing pass."""

    template: str = ""
    template_source: str | None = None
    positionals: list[str] = field(default_factory=list)
    show_help: bool = False
    show_version: bool = False
    verbose: bool = False
    debug: bool = False


def format_usage(*, prog: str, templates: list[str] | None = None) -> str:
    """Render help text, listing available templates when any are known."""
    text = USAGE.format(prog=prog)
    if templates:
        text += f"\navailable templates: {', '.join(templates)}\n"
    return text


def parse_arguments(argv: list[str], *, validate_long_form: bool = False) -> ParsedArguments:
    """Parse ``argv`` into :class:`ParsedArguments`.

    ``-t`` names are always checked against ``[A-Za-z0-9]+``. The
    ``--template`` forms are only checked when ``validate_long_form`` is set.
    Help and version requests stop parsing immediately.
    """
    parsed = ParsedArguments()
    state = ParseState.OPTIONS
    index = 0

    while index < len(argv):
        token = argv[index]
        index += 1

        if state is ParseState.DONE:
            parsed.positionals.append(token)
            continue

        if not token.startswith("-"):
            state = ParseState.DONE
            parsed.positionals.append(token)
            continue

        if token in ("-h", "--help"):
            parsed.show_help = True
            return parsed
        if token == "--version":
            parsed.show_version = True
            return parsed
        if token in ("-v", "--verbose"):
            parsed.verbose = True
            continue
        if token == "--debug":
            parsed.debug = True
            continue

        if token == "-t":
            if index >= len(argv):
                raise InstantiateError(ErrorKind.MISSING_OPTION_ARGUMENT, {"option": token})
            parsed.template = validate_template_name(argv[index])
            parsed.template_source = token
            index += 1
            continue

        if token == "--template":
            if index >= len(argv) or not argv[index]:
                raise InstantiateError(ErrorKind.MISSING_OPTION_ARGUMENT, {"option": token})
            parsed.template = _long_form_name(argv[index], validate=validate_long_form)
            parsed.template_source = token
            index += 1
            continue

        if token.startswith("--template="):
            name = token.split("=", 1)[1]
            if not name:
                raise InstantiateError(ErrorKind.MISSING_OPTION_ARGUMENT, {"option": "--template"})
            parsed.template = _long_form_name(name, validate=validate_long_form)
            parsed.template_source = "--template="
            continue

        raise InstantiateError(ErrorKind.INVALID_OPTION, {"option": token})

    return parsed


def _long_form_name(name: str, *, validate: bool) -> str:
    if validate:
        return validate_template_name(name)
    return name
