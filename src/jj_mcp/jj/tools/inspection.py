"""
Read-only tools for inspecting a repository: status, history and diffs.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import (
    boolean,
    define,
    non_negative_int,
    option,
    positive_int,
    repository,
    string,
    switch,
)


def build_status_args(params: Dict[str, Any]) -> List[str]:
    return ["status", *repository(params)]


def build_log_args(params: Dict[str, Any]) -> List[str]:
    return ["log", *repository(params), *option(params, "limit", "-n")]


def build_show_args(params: Dict[str, Any]) -> List[str]:
    return [
        "show",
        *option(params, "revision", "-r"),
        *repository(params),
        *option(params, "context", "--context"),
    ]


def build_diff_args(params: Dict[str, Any]) -> List[str]:
    return [
        "diff",
        *option(params, "from", "-f"),
        *option(params, "to", "-t"),
        *repository(params),
        *option(params, "context", "--context"),
        *switch(params, "stat", "--stat"),
    ]


def build_interdiff_args(params: Dict[str, Any]) -> List[str]:
    return [
        "interdiff",
        "-f",
        params["from"],
        "-t",
        params["to"],
        *repository(params),
        *option(params, "context", "--context"),
    ]


def build_evolog_args(params: Dict[str, Any]) -> List[str]:
    return [
        "evolog",
        *option(params, "revision", "-r"),
        *repository(params),
        *option(params, "limit", "-n"),
        *switch(params, "patch", "-p"),
    ]


def build_workspace_root_args(params: Dict[str, Any]) -> List[str]:
    return ["workspace", "root", *repository(params)]


CONTEXT = non_negative_int("context", "Optional number of lines of context to show")

TOOLS = (
    define(
        "status",
        "Show the high-level status of a Jujutsu (jj) repository: the working-copy commit, its parents "
        "and a summary of changes. Useful for an overview of the current state of the repository.",
        [],
        build_status_args,
    ),
    define(
        "log",
        "Show the commit history of a Jujutsu (jj) repository. Useful for reviewing past changes and "
        "understanding how the project evolved.",
        [positive_int("limit", "Optional maximum number of commits to show")],
        build_log_args,
    ),
    define(
        "show",
        "Show the description and changes of a revision in a Jujutsu (jj) repository compared to its "
        "parent(s). Useful for reviewing exactly what a commit changed.",
        [string("revision", "The revision to show; defaults to the working copy"), CONTEXT],
        build_show_args,
    ),
    define(
        "diff",
        "Compare file contents between two revisions in a Jujutsu (jj) repository. With 'from' and/or "
        "'to', shows the difference from/to those revisions; either one defaults to the working-copy commit.",
        [
            string("from", "Show changes from this revision"),
            string("to", "Show changes to this revision"),
            CONTEXT,
            boolean("stat", "Show a histogram of the changes instead of the full diff"),
        ],
        build_diff_args,
    ),
    define(
        "interdiff",
        "Compare the changes of two commits in a Jujutsu (jj) repository, showing only the difference "
        "between the two diffs and excluding changes from other commits.",
        [
            string("from", "First commit to compare", required=True),
            string("to", "Second commit to compare", required=True),
            CONTEXT,
        ],
        build_interdiff_args,
    ),
    define(
        "evolog",
        "Show how a change has evolved over time in a Jujutsu (jj) repository: the previous commits the "
        "change pointed to as it was updated, rebased and so on.",
        [
            string("revision", "Revision whose evolution to show"),
            positive_int("limit", "Optional maximum number of revisions to show"),
            boolean("patch", "Show the patch compared to the previous version"),
        ],
        build_evolog_args,
    ),
    define(
        "workspace-root",
        "Show the root directory of the current workspace of a Jujutsu (jj) repository.",
        [],
        build_workspace_root_args,
    ),
)
