import logging
import sys
from typing import Optional

from ls_wrapper.container import DependencyContainer, container
from ls_wrapper.entities.ls_options import LsOptions
from ls_wrapper.exceptions import (
    ArgumentParseError,
    ConfigurationError,
    ExecutionError,
)
from ls_wrapper.ui.printers import (
    PROGRAM_NAME,
    print_help,
    print_rosetta,
    print_version,
)
from ls_wrapper.use_cases.parsing.alias_resolver import resolve_alias
from ls_wrapper.use_cases.parsing.option_parser import parse_args
from ls_wrapper.use_cases.translation.translate import translate

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def _exit_code(success: bool, exit_code: int) -> int:
    if success:
        return 0
    # Codes outside 1..255 cannot be passed through as a process status
    if 0 < exit_code < 256:
        return exit_code
    return 1


def _run_tree(options: LsOptions, deps: DependencyContainer) -> int:
    try:
        result = deps.get_run_tree_use_case().execute(options)
    except ExecutionError as e:
        deps.get_stderr_console().print(
            f"{PROGRAM_NAME}: failed to run tree: {e}", markup=False
        )
        return 1
    return 0 if result.success else 1


def main(
    argv: Optional[list[str]] = None, deps: Optional[DependencyContainer] = None
) -> int:
    """
    Run the wrapper for one invocation.

    Args:
        argv: Full argument vector including the program name (default: sys.argv)
        deps: Container to resolve collaborators from (default: the global one)

    Returns:
        Process exit status
    """
    deps = deps or container
    args = resolve_alias(list(sys.argv if argv is None else argv))

    try:
        options = parse_args(args)
    except ArgumentParseError as e:
        err = deps.get_stderr_console()
        err.print(f"{PROGRAM_NAME}: {e}", markup=False)
        err.print("Try 'ls --help' for more information.", markup=False)
        return 1

    deps.configure(color=options.color)
    out = deps.get_stdout_console()

    if options.help:
        print_help(out)
        return 0
    if options.version:
        print_version(out)
        return 0
    if options.rosetta:
        print_rosetta(out)
        return 0

    try:
        settings = deps.get_settings()
    except ConfigurationError as e:
        deps.get_stderr_console().print(
            f"{PROGRAM_NAME}: configuration error: {e}", markup=False
        )
        return 1
    _configure_logging(settings.log_level)
    logger = logging.getLogger(__name__)
    logger.debug(f"Parsed options: {options}")

    if options.tree:
        return _run_tree(options, deps)

    translation = translate(options)
    logger.debug(f"Translation: {translation}")

    try:
        result = deps.get_execute_translation_use_case().execute(options, translation)
    except ExecutionError as e:
        deps.get_stderr_console().print(
            f"{PROGRAM_NAME}: execution error: {e}", markup=False
        )
        return 1

    return _exit_code(result.success, result.exit_code)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
