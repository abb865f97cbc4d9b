"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from ghprojects import AuthenticationError, ConfigError, EditError, GraphQLError, ProviderError

INSUFFICIENT_SCOPES = (
    "your token has not been granted the required scopes; "
    "use `gh auth refresh -s project` to authenticate with required scopes"
)


def describe_error(exc: BaseException) -> str:
    if isinstance(exc, GraphQLError) and exc.has_code("INSUFFICIENT_SCOPES"):
        return INSUFFICIENT_SCOPES
    cause = exc.__cause__
    if isinstance(cause, GraphQLError) and cause.has_code("INSUFFICIENT_SCOPES"):
        return INSUFFICIENT_SCOPES
    return str(exc)


def main(argv: list[str] | None = None) -> int:
    import ghprojects.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    commands = {
        "list": cli._run_list,
        "view": cli._run_view,
        "clone": cli._run_clone,
        "edit": cli._run_edit,
    }
    command = commands.get(args.command)
    if command is None:
        print(f"error: unsupported command: {args.command}", file=sys.stderr)
        return 2

    try:
        cli.asyncio.run(command(args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {describe_error(exc)}", file=sys.stderr)
        return 4
    except EditError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["describe_error", "main"]
