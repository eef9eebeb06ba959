"""Project name validation against npm package naming rules."""

import re
from dataclasses import dataclass, field
from urllib.parse import quote

MAX_NAME_LENGTH = 214

BLOCKED_NAMES = ("node_modules", "favicon.ico")

NODE_BUILTIN_MODULES = frozenset((
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
))

_SCOPED_NAME = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")


@dataclass(frozen=True)
class NameValidation:
    valid: bool
    problems: list[str] = field(default_factory=list)


def _url_safe(text):
    return quote(text, safe="!~*'()") == text


def _errors_for(name):
    errors = []
    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")
    for blocked in BLOCKED_NAMES:
        if name.lower() == blocked:
            errors.append(f"{blocked} is not a valid package name")
    if not _url_safe(name):
        match = _SCOPED_NAME.match(name)
        if not (match and _url_safe(match.group(1) or "") and _url_safe(match.group(2))):
            errors.append("name can only contain URL-friendly characters")
    return errors


def _warnings_for(name):
    warnings = []
    if name in NODE_BUILTIN_MODULES:
        warnings.append(f"{name} is a core module name")
    if len(name) > MAX_NAME_LENGTH:
        warnings.append(
            f"name can no longer contain more than {MAX_NAME_LENGTH} characters"
        )
    if name.lower() != name:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")
    return warnings


def validate_name(name: str) -> NameValidation:
    """Check a proposed project name against npm package naming rules.

    Every violated rule is reported, errors first and then the rules that
    only forbid a name for new packages, so callers can show the first
    problem or all of them.

    Args:
        name: Candidate package name, usually the last segment of the
            project path.

    Returns:
        NameValidation with valid=True and no problems, or valid=False and
        at least one human-readable problem.
    """
    if not isinstance(name, str):
        return NameValidation(valid=False, problems=["name must be a string"])
    problems = _errors_for(name) + _warnings_for(name)
    return NameValidation(valid=not problems, problems=problems)
