"""
Ordered phrase-to-command rule table.

Rules are evaluated top to bottom against the lowercased phrase and the first
match wins. Content and listing rules come before system-info rules; directory
navigation is handled before any of them by the translator.
"""

import re
from typing import Callable

from voice_terminal.entities.command_line import CommandLine
from voice_terminal.entities.command_rule import CONTENT, SYSTEM, CommandRule

# Commands the executor is allowed to spawn
ALLOWED_COMMANDS: tuple[str, ...] = (
    "ls",
    "pwd",
    "whoami",
    "date",
    "df",
    "free",
    "ps",
    "cat",
    "mkdir",
    "rmdir",
    "rm",
    "mv",
    "cp",
    "echo",
    "find",
    "head",
    "pip",
    "cd",
    "top",
    "netstat",
    "touch",
)

CD_PATTERN = re.compile(r"^cd\s+(.+)$", re.IGNORECASE | re.DOTALL)
BACK_PATTERN = re.compile(
    r"(move back|go back|previous directory|back one folder)", re.IGNORECASE
)

HELP_TEXT = (
    "Try: list files, create file <name>, open <file>, first 5 lines of <file>, "
    "make folder <name>, delete file <name>, rename <a> to <b>, copy <a> to <b>, "
    "find files named <pattern>, cd <path>, go back, where am i, what time is it, "
    "disk usage, memory usage, running processes, network status"
)

_LEADING_NAME = re.compile(r"^(?:named|called)\s+", re.IGNORECASE)

# Marks the end of options so operands starting with '-' stay operands
END_OF_OPTIONS = "--"


def _after(keyword: str, phrase: str) -> str:
    """Text following the first whole-word `keyword`, minus a leading 'named'/'called'."""
    m = re.search(rf"\b(?:{keyword})\b", phrase, re.IGNORECASE)
    if not m:
        return ""
    rest = phrase[m.end() :].strip()
    return _LEADING_NAME.sub("", rest).strip()


def _invalid(label: str) -> CommandLine:
    return CommandLine("echo", (f"Invalid {label} syntax",))


def _fixed(program: str, *args: str) -> Callable[[str], CommandLine]:
    def build(phrase: str) -> CommandLine:
        return CommandLine(program, args)

    return build


def _single(
    program: str, keyword: str, default: str, *options: str
) -> Callable[[str], CommandLine]:
    """Command taking one argument found after `keyword`, or `default`.

    `options` are literal tokens placed before the argument.
    """

    def build(phrase: str) -> CommandLine:
        return CommandLine(program, (*options, _after(keyword, phrase) or default))

    return build


def _pair(program: str, verb: str) -> Callable[[str], CommandLine]:
    """Command taking '<verb> <a> to <b>' as two arguments in order."""
    regex = re.compile(rf"\b{verb}\s+(.+)\s+to\s+(.+)$", re.IGNORECASE | re.DOTALL)

    def build(phrase: str) -> CommandLine:
        m = regex.search(phrase)
        if not m or not m.group(1).strip() or not m.group(2).strip():
            return _invalid(verb)
        return CommandLine(
            program, (END_OF_OPTIONS, m.group(1).strip(), m.group(2).strip())
        )

    return build


def _last_word(program: str) -> Callable[[str], CommandLine]:
    def build(phrase: str) -> CommandLine:
        return CommandLine(program, (END_OF_OPTIONS, phrase.split()[-1]))

    return build


_ECHO_PREFIX = re.compile(r"^(echo|say|print)\s+", re.IGNORECASE)


def _echo(phrase: str) -> CommandLine:
    return CommandLine("echo", (_ECHO_PREFIX.sub("", phrase, count=1),))


_HEAD = re.compile(r"\bfirst\s+(\d+)\s+lines?\s+of\s+(.+)$", re.IGNORECASE | re.DOTALL)


def _head(phrase: str) -> CommandLine:
    m = _HEAD.search(phrase)
    if not m or not m.group(2).strip():
        return _invalid("head")
    return CommandLine("head", ("-n", m.group(1), END_OF_OPTIONS, m.group(2).strip()))


_PACKAGE_WORD = re.compile(r"^packages?\s+", re.IGNORECASE)


def _pip_install(phrase: str) -> CommandLine:
    package = _PACKAGE_WORD.sub("", _after("install", phrase)).strip()
    # an operand starting with "-" would be read as a pip option
    if not package or package.startswith("-"):
        return _invalid("install")
    return CommandLine("pip", ("install", package))


def _rule(
    name: str, category: str, pattern: str, build: Callable[[str], CommandLine]
) -> CommandRule:
    return CommandRule(name, category, re.compile(pattern), build)


COMMAND_RULES: tuple[CommandRule, ...] = (
    # content and listing
    _rule(
        "list_files",
        CONTENT,
        r"\b(list|show|display)\b.*\bfiles\b(?!\.\w)",
        _fixed("ls"),
    ),
    _rule(
        "create_file",
        CONTENT,
        r"\b(create|make|new|generate)\b.*\bfile\b",
        _single("touch", "file", "newfile.txt", END_OF_OPTIONS),
    ),
    _rule("show_head", CONTENT, r"\bfirst\s+\d+\s+lines?\s+of\b", _head),
    _rule(
        "read_file",
        CONTENT,
        r"\b(cat|open|read|show contents of|display contents of)\s+\S",
        _last_word("cat"),
    ),
    _rule("echo", CONTENT, r"^(echo|say|print)\s+", _echo),
    _rule(
        "current_directory",
        CONTENT,
        r"(show current directory|where am i|current folder|present working directory|current path)",
        _fixed("pwd"),
    ),
    _rule(
        "make_directory",
        CONTENT,
        r"\b(create|make|new)\b.*\b(directory|folder)\b",
        _single("mkdir", "directory|folder", "newdir", END_OF_OPTIONS),
    ),
    _rule(
        "remove_directory",
        CONTENT,
        r"\b(delete|remove)\b.*\b(directory|folder)\b",
        _single("rmdir", "directory|folder", "dir", END_OF_OPTIONS),
    ),
    _rule(
        "remove_file",
        CONTENT,
        r"\b(delete|remove)\b.*\bfile\b",
        _single("rm", "file", "file.txt", END_OF_OPTIONS),
    ),
    _rule("rename", CONTENT, r"\brename\b", _pair("mv", "rename")),
    _rule("copy", CONTENT, r"\bcopy\b", _pair("cp", "copy")),
    _rule("move", CONTENT, r"\bmove\b", _pair("mv", "move")),
    _rule(
        "find_named",
        CONTENT,
        r"\bfind\b.*\bnamed\b",
        _single("find", "named", "*", ".", "-name"),
    ),
    _rule("pip_install", CONTENT, r"\binstall\b", _pip_install),
    # system information
    _rule(
        "whoami",
        SYSTEM,
        r"(who am i|what'?s my username|display user|show user)",
        _fixed("whoami"),
    ),
    _rule(
        "date",
        SYSTEM,
        r"(what.?s the date|show date|display date|current date|what.?s the time|what time is it|current time|show time)",
        _fixed("date"),
    ),
    _rule(
        "disk_usage", SYSTEM, r"(disk usage|storage|check disk|disk space)", _fixed("df", "-h")
    ),
    _rule(
        "processes",
        SYSTEM,
        r"(running processes|list processes|display processes|show processes|show tasks)",
        _fixed("ps", "aux"),
    ),
    _rule("top_processes", SYSTEM, r"(top processes|cpu usage)", _fixed("top", "-b", "-n", "1")),
    _rule("memory_usage", SYSTEM, r"(memory usage|ram usage)", _fixed("free", "-h")),
    _rule(
        "network",
        SYSTEM,
        r"(network connections|network info|network status)",
        _fixed("netstat", "-tulnp"),
    ),
    _rule(
        "help",
        SYSTEM,
        r"(show help|list available commands|what can i say|^help$)",
        _fixed("echo", HELP_TEXT),
    ),
)


def rule_names(rules: tuple[CommandRule, ...] = COMMAND_RULES) -> list[str]:
    """Rule names in evaluation order."""
    return [r.name for r in rules]


def unknown_command(phrase: str) -> CommandLine:
    return CommandLine("echo", (f"Unknown command: {phrase}",))
