"""Error kinds, structured error type and user-facing message formatting."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum


class ExitCode(IntEnum):
    """Process exit codes used by the newfile CLI."""

    OK = 0
    FAILURE = 1


class ErrorKind(Enum):
    """Every way an instantiation can fail."""

    NOT_TOP_LEVEL = "not-top-level"
    MISSING_OPTION_ARGUMENT = "missing-option-argument"
    INVALID_OPTION = "invalid-option"
    INVALID_TEMPLATE_NAME = "invalid-template-name"
    MISSING_ARGUMENT = "missing-argument"
    TEMPLATE_NOT_FOUND = "template-not-found"
    OUTPUT_EXISTS = "output-exists"
    COPY_FAILED = "copy-failed"
    INTERNAL = "internal"


@dataclass(slots=True)
class InstantiateError(Exception):
    """Structured failure carrying its kind and the context needed to describe it."""

    kind: ErrorKind
    context: dict[str, str] = field(default_factory=dict)
    exit_code: int = int(ExitCode.FAILURE)

    @property
    def what(self) -> str:
        return describe_error(self.kind, self.context)[0]

    @property
    def why(self) -> str:
        return describe_error(self.kind, self.context)[1]

    @property
    def remediation(self) -> str:
        return describe_error(self.kind, self.context)[2]

    @property
    def internal(self) -> bool:
        return self.kind is ErrorKind.INTERNAL

    def __str__(self) -> str:
        """Render the standardized user-facing message."""
        return format_user_error(what=self.what, why=self.why, how_to_fix=self.remediation)


def describe_error(kind: ErrorKind, context: dict[str, str]) -> tuple[str, str, str]:
    """Map an error kind and its context to a what/why/how-to-fix triad."""
    if kind is ErrorKind.NOT_TOP_LEVEL:
        directory = context.get("templates_dir", "templates")
        return (
            f"no '{directory}' directory in the current working directory.",
            "templates are looked up relative to the working directory",
            f"run from the top-level directory containing {directory}/",
        )
    if kind is ErrorKind.MISSING_OPTION_ARGUMENT:
        option = context.get("option", "")
        return (
            f"option '{option}' requires an argument.",
            "no template name followed the option",
            f"pass a template name, for example: {option} py",
        )
    if kind is ErrorKind.INVALID_OPTION:
        option = context.get("option", "")
        return (
            f"invalid option '{option}'.",
            "the option is not recognized",
            "see --help for the supported options",
        )
    if kind is ErrorKind.INVALID_TEMPLATE_NAME:
        template = context.get("template", "")
        return (
            f"invalid template name '{template}'.",
            "template names may contain only the characters A-Z, a-z and 0-9",
            "choose a template name made of letters and digits",
        )
    if kind is ErrorKind.MISSING_ARGUMENT:
        return (
            "missing argument; see --help.",
            "an output file path is required",
            "pass the path of the file to create, for example: newfile -t py out.py",
        )
    if kind is ErrorKind.TEMPLATE_NOT_FOUND:
        template = context.get("template", "")
        path = context.get("path", "")
        return (
            f"Template '{template}' does not exist.",
            f"no regular file at {path}",
            "pick one of the templates listed by --help or add the template file",
        )
    if kind is ErrorKind.OUTPUT_EXISTS:
        output_file = context.get("output_file", "")
        return (
            f"Output file '{output_file}' exists.",
            "existing files are never overwritten",
            "remove the file or choose another output path",
        )
    if kind is ErrorKind.COPY_FAILED:
        return (
            "copying the template failed.",
            context.get("reason", "the copy operation reported an error"),
            "check permissions and free space at the output path",
        )
    return (
        context.get("detail", "unexpected program state."),
        "a code path that should be unreachable was taken",
        "report this as a bug",
    )


def format_user_error(*, what: str, why: str, how_to_fix: str) -> str:
    """Build a structured error message for users.

    Args:
        what: A concise description of what failed.
        why: Why the failure happened.
        how_to_fix: Immediate actionable remediation steps.

    Returns:
        A three-part error message string.
    """
    return f"what: {what}; why: {why}; how-to-fix: {how_to_fix}"


def format_diagnostic(*, prog: str, error: InstantiateError) -> str:
    """Render the single stderr line for a fatal error, tagged by severity."""
    severity = "internal error" if error.internal else "error"
    return f"{prog}: {severity}: {error}"


def parse_user_error_message(message: str) -> tuple[str, str, str] | None:
    """Parse a formatted triad error message into its components when possible."""
    prefix_what = "what: "
    middle = "; why: "
    suffix = "; how-to-fix: "
    if not message.startswith(prefix_what) or middle not in message or suffix not in message:
        return None

    what_end = message.find(middle)
    why_end = message.find(suffix)
    if why_end < what_end:
        return None

    what = message[len(prefix_what):what_end]
    why = message[what_end + len(middle):why_end]
    remediation = message[why_end + len(suffix):]
    return what, why, remediation
