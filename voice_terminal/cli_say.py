import argparse
import os
import sys

from voice_terminal.container import container
from voice_terminal.entities.execution_result import ExecutionResult
from voice_terminal.entities.session import SessionContext
from voice_terminal.entities.translation import DirectoryChange, Translation


def _describe(translation: Translation) -> str:
    if isinstance(translation, DirectoryChange):
        return "cd .." if translation.to_parent else f"cd {translation.target}"
    return translation.command_line.render()


def _print_result(title: str, result: ExecutionResult, pretty: bool) -> None:
    if not pretty:
        print(result.output.rstrip("\n"))
        return
    from rich import box
    from rich.console import Console
    from rich.panel import Panel
    from rich.text import Text

    console = Console(soft_wrap=True)
    console.print(
        Panel(
            Text(result.output.rstrip("\n")),
            title=title,
            subtitle=result.status.value,
            box=box.ROUNDED,
            border_style="green" if result.ok else "red",
            expand=True,
        )
    )


def run_phrase(
    phrase: str, session: SessionContext, dry_run: bool = False, pretty: bool = False
) -> ExecutionResult | None:
    translation = container.get_phrase_translator().execute(phrase)
    if dry_run:
        print(_describe(translation))
        return None
    if isinstance(translation, DirectoryChange):
        result = container.get_navigate_directory_use_case().execute(session, translation)
    else:
        result = container.get_execute_command_use_case().execute(
            translation.command_line, session.cwd
        )
    _print_result(_describe(translation), result, pretty)
    return result


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="voice-terminal-say",
        description=(
            "Translate natural-language phrases into whitelisted commands and run them locally."
        ),
    )
    parser.add_argument(
        "phrases",
        nargs="*",
        help="Phrases to run in order; reads them from stdin when omitted",
    )
    parser.add_argument(
        "--cwd", default=None, help="Starting directory (default: configured start dir)"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the translated command without running it",
    )
    parser.add_argument(
        "--pretty", action="store_true", help="Render output in panels with colors"
    )
    args = parser.parse_args(argv)

    cwd = os.path.abspath(os.path.expanduser(args.cwd or container.settings.start_directory))
    if not os.path.isdir(cwd):
        print(f"Directory not found: {cwd}", file=sys.stderr)
        return 2
    session = SessionContext("cli", cwd)

    if args.phrases:
        failed = False
        for phrase in args.phrases:
            result = run_phrase(phrase, session, dry_run=args.dry_run, pretty=args.pretty)
            failed = failed or (result is not None and not result.ok)
        return 1 if failed else 0

    while True:
        try:
            phrase = input(f"{session.cwd}> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            return 0
        if phrase.lower() in {"exit", "quit"}:
            return 0
        if phrase:
            run_phrase(phrase, session, dry_run=args.dry_run, pretty=args.pretty)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
