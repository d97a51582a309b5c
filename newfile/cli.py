"""newfile command line entrypoint."""

from __future__ import annotations

import logging
import sys

from newfile.arguments import ParsedArguments, format_usage, parse_arguments
from newfile.config import Settings, default_settings, log_level_from_flags, merge_settings
from newfile.errors import ErrorKind, ExitCode, InstantiateError, format_diagnostic, parse_user_error_message
from newfile.output import copy_template, ensure_output_absent
from newfile.templating import ensure_templates_dir, list_templates, resolve_template

_PROG = "newfile"
_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def _configure_logging(*, level: int) -> None:
    """Configure global logging level."""
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", force=True)


def _print_error(error: InstantiateError) -> int:
    print(format_diagnostic(prog=_PROG, error=error), file=sys.stderr)
    return int(error.exit_code)


def _instantiate(*, args: ParsedArguments, settings: Settings) -> None:
    """Run the lookup, conflict check and copy steps for parsed arguments."""
    if not args.positionals:
        raise InstantiateError(ErrorKind.MISSING_ARGUMENT)

    template_file = resolve_template(
        args.template,
        templates_dir=settings.templates_dir,
        prefix=settings.template_prefix,
    )
    logger.info("Resolved template %r to %s", args.template, template_file)

    output_file = args.positionals[0]
    if len(args.positionals) > 1:
        logger.debug("Ignoring extra positional arguments: %s", args.positionals[1:])
    ensure_output_absent(output_file)

    print(f"Instantiating `{args.template}` template as `{output_file}`")
    copy_template(template_path=template_file, output_path=output_file)
    logger.info("Wrote %s", output_file)


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    """Run CLI command and return process status code."""
    raw_argv = argv if argv is not None else sys.argv[1:]
    base_settings = settings if settings is not None else default_settings()

    try:
        ensure_templates_dir(base_settings.templates_dir)
        args = parse_arguments(raw_argv, validate_long_form=base_settings.validate_long_form)

        if args.show_help:
            templates = list_templates(base_settings.templates_dir, prefix=base_settings.template_prefix)
            print(format_usage(prog=_PROG, templates=templates), end="")
            return int(ExitCode.OK)
        if args.show_version:
            print(f"{_PROG} {_VERSION}")
            return int(ExitCode.OK)

        run_settings = merge_settings(
            defaults=base_settings,
            cli_args={"log_level": log_level_from_flags(verbose=args.verbose, debug=args.debug)},
        )
        _configure_logging(level=run_settings.logging_level)
        logger.debug("Parsed arguments: %s", args)

        _instantiate(args=args, settings=run_settings)
        return int(ExitCode.OK)
    except InstantiateError as exc:
        return _print_error(exc)
    except ValueError as exc:
        parsed = parse_user_error_message(str(exc))
        detail = parsed[0] if parsed is not None else str(exc)
        return _print_error(InstantiateError(ErrorKind.INTERNAL, {"detail": detail}))
    except Exception as exc:  # pragma: no cover
        return _print_error(InstantiateError(ErrorKind.INTERNAL, {"detail": f"unexpected failure: {exc}"}))


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
