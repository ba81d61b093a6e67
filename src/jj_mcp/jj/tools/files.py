"""
Tools operating on files at a revision.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import choice, define, option, positionals, repository, string, strings


def build_file_annotate_args(params: Dict[str, Any]) -> List[str]:
    return ["file", "annotate", *option(params, "revision", "-r"), params["path"], *repository(params)]


def build_file_chmod_args(params: Dict[str, Any]) -> List[str]:
    return [
        "file",
        "chmod",
        *option(params, "revision", "-r"),
        params["mode"],
        *positionals(params, "paths"),
        *repository(params),
    ]


def build_file_list_args(params: Dict[str, Any]) -> List[str]:
    return ["file", "list", *option(params, "revision", "-r"), *positionals(params, "paths"), *repository(params)]


def build_file_show_args(params: Dict[str, Any]) -> List[str]:
    return ["file", "show", *option(params, "revision", "-r"), *positionals(params, "paths"), *repository(params)]


def build_file_track_args(params: Dict[str, Any]) -> List[str]:
    return ["file", "track", *positionals(params, "paths"), *repository(params)]


def build_file_untrack_args(params: Dict[str, Any]) -> List[str]:
    return ["file", "untrack", *positionals(params, "paths"), *repository(params)]


TOOLS = (
    define(
        "file-annotate",
        "Show the change that introduced each line of a file in a Jujutsu (jj) repository.",
        [
            string("path", "Path of the file to annotate", required=True),
            string("revision", "Optional revision to annotate from; defaults to the working copy"),
        ],
        build_file_annotate_args,
    ),
    define(
        "file-chmod",
        "Set or remove the executable bit of files in a Jujutsu (jj) repository. Unlike POSIX chmod, "
        "this works on Windows and on arbitrary revisions.",
        [
            choice("mode", "'x' to make executable, 'n' to make non-executable", ["x", "n"], required=True),
            strings("paths", "Paths to modify", required=True),
            string("revision", "Optional revision to modify; defaults to the working copy"),
        ],
        build_file_chmod_args,
    ),
    define(
        "file-list",
        "List the files in a revision of a Jujutsu (jj) repository.",
        [
            string("revision", "Optional revision to list; defaults to the working copy"),
            strings("paths", "Optional paths to filter by"),
        ],
        build_file_list_args,
    ),
    define(
        "file-show",
        "Print the contents of files in a revision of a Jujutsu (jj) repository.",
        [
            strings("paths", "Paths of the files to show", required=True),
            string("revision", "Optional revision to show from; defaults to the working copy"),
        ],
        build_file_show_args,
    ),
    define(
        "file-track",
        "Start tracking paths in the working copy of a Jujutsu (jj) repository. New files are tracked "
        "automatically by default; this matters when auto-tracking is disabled.",
        [strings("paths", "Paths to track", required=True)],
        build_file_track_args,
    ),
    define(
        "file-untrack",
        "Stop tracking paths in the working copy of a Jujutsu (jj) repository. The paths must already be "
        "ignored, e.g. through .gitignore.",
        [strings("paths", "Paths to untrack", required=True)],
        build_file_untrack_args,
    ),
)
