"""
Operation log tools.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import define, non_negative_int, option, positional, positive_int, repository, string


def build_operation_abandon_args(params: Dict[str, Any]) -> List[str]:
    return ["operation", "abandon", params["operation"], *repository(params)]


def build_operation_diff_args(params: Dict[str, Any]) -> List[str]:
    return [
        "operation",
        "diff",
        *option(params, "from", "-f"),
        *option(params, "to", "-t"),
        *repository(params),
        *option(params, "context", "--context"),
    ]


def build_operation_log_args(params: Dict[str, Any]) -> List[str]:
    return ["operation", "log", *option(params, "limit", "-n"), *repository(params)]


def build_operation_restore_args(params: Dict[str, Any]) -> List[str]:
    return ["operation", "restore", params["operation"], *repository(params)]


def build_operation_show_args(params: Dict[str, Any]) -> List[str]:
    return ["operation", "show", *positional(params, "operation"), *repository(params)]


def build_operation_undo_args(params: Dict[str, Any]) -> List[str]:
    return ["operation", "undo", *positional(params, "operation"), *repository(params)]


TOOLS = (
    define(
        "operation-abandon",
        "Abandon operation history in a Jujutsu (jj) repository, discarding old operations and "
        "reparenting their descendants onto the root operation.",
        [string("operation", "Operation or range of operations to abandon", required=True)],
        build_operation_abandon_args,
    ),
    define(
        "operation-diff",
        "Compare the state of a Jujutsu (jj) repository between two operations.",
        [
            string("from", "Operation to show changes from"),
            string("to", "Operation to show changes to"),
            non_negative_int("context", "Optional number of lines of context to show"),
        ],
        build_operation_diff_args,
    ),
    define(
        "operation-log",
        "Show the operation log of a Jujutsu (jj) repository: every operation performed on it.",
        [positive_int("limit", "Optional maximum number of operations to show")],
        build_operation_log_args,
    ),
    define(
        "operation-restore",
        "Create a new operation that restores a Jujutsu (jj) repository to an earlier state, effectively "
        "undoing every operation after the given one.",
        [string("operation", "Operation to restore to", required=True)],
        build_operation_restore_args,
    ),
    define(
        "operation-show",
        "Show the changes made to a Jujutsu (jj) repository by one operation.",
        [string("operation", "Operation to show; defaults to the latest")],
        build_operation_show_args,
    ),
    define(
        "operation-undo",
        "Create a new operation that undoes an earlier operation in a Jujutsu (jj) repository by applying "
        "its inverse.",
        [string("operation", "Operation to undo; defaults to the latest")],
        build_operation_undo_args,
    ),
)
