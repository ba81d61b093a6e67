"""
Tools that create, rewrite or discard changes.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import (
    boolean,
    define,
    option,
    positional,
    positionals,
    repository,
    string,
    strings,
    switch,
)


def build_new_args(params: Dict[str, Any]) -> List[str]:
    return ["new", *option(params, "parents", "--parents"), *repository(params)]


def build_commit_args(params: Dict[str, Any]) -> List[str]:
    return ["commit", "-m", params["message"], *repository(params)]


def build_describe_args(params: Dict[str, Any]) -> List[str]:
    # jj takes the revset after all options.
    return [
        "describe",
        *repository(params),
        "-m",
        params["message"],
        *switch(params, "resetAuthor", "--reset-author"),
        *option(params, "author", "--author"),
        *positional(params, "revisions"),
    ]


def build_edit_args(params: Dict[str, Any]) -> List[str]:
    return ["edit", params["revision"], *repository(params)]


def build_abandon_args(params: Dict[str, Any]) -> List[str]:
    return ["abandon", params["revisions"], *repository(params)]


def build_rebase_args(params: Dict[str, Any]) -> List[str]:
    return ["rebase", "--source", params["source"], "--destination", params["destination"], *repository(params)]


def build_squash_args(params: Dict[str, Any]) -> List[str]:
    return [
        "squash",
        *option(params, "source", "-f"),
        *option(params, "destination", "-t"),
        *positionals(params, "paths"),
        *switch(params, "keepEmptied", "-k"),
        *repository(params),
    ]


def build_revert_args(params: Dict[str, Any]) -> List[str]:
    return [
        "revert",
        *option(params, "destination", "-d"),
        *positionals(params, "revisions"),
        *repository(params),
    ]


def build_restore_args(params: Dict[str, Any]) -> List[str]:
    return [
        "restore",
        *option(params, "source", "-f"),
        *option(params, "destination", "-t"),
        *positionals(params, "paths"),
        *repository(params),
    ]


TOOLS = (
    define(
        "new",
        "Create a new, empty change in a Jujutsu (jj) repository, optionally on top of the given parent "
        "revisions. Useful for starting a new line of development.",
        [string("parents", "Optional parent revisions, comma separated")],
        build_new_args,
    ),
    define(
        "commit",
        "Update the current change with the given message in a Jujutsu (jj) repository, then create and "
        "move to a new, empty change. This is jj's closest analog to committing in Git.",
        [string("message", "Commit message", required=True)],
        build_commit_args,
    ),
    define(
        "describe",
        "Update the change description or other metadata of a revision in a Jujutsu (jj) repository. "
        "Targets the working-copy revision (@) by default.",
        [
            string("message", "The new change description", required=True),
            string(
                "revisions",
                "The revision(s) whose description to edit, e.g. 'my-branch', '@-' or a commit ID; "
                "defaults to the working-copy revision",
            ),
            boolean("resetAuthor", "Reset the author to the configured user"),
            string(
                "author",
                "Set a custom author, e.g. 'User <email@example.com>'; changes name and email while "
                "keeping the author timestamp",
            ),
        ],
        build_describe_args,
    ),
    define(
        "edit",
        "Make the given revision the working-copy revision in a Jujutsu (jj) repository. It is generally "
        "recommended to use 'new' and 'squash' instead.",
        [string("revision", "The commit to edit, e.g. 'my-branch' or a commit ID", required=True)],
        build_edit_args,
    ),
    define(
        "abandon",
        "Abandon one or more revisions in a Jujutsu (jj) repository, rebasing their descendants onto "
        "their parents. Useful for discarding changes or cleaning up history.",
        [string("revisions", "Revisions to abandon, e.g. '@'", required=True)],
        build_abandon_args,
    ),
    define(
        "rebase",
        "Rebase one or more revisions onto a different parent in a Jujutsu (jj) repository. Commonly used "
        "to move changes to a new base or to clean up history.",
        [
            string("source", "Revisions to rebase, e.g. '@-'", required=True),
            string("destination", "Destination revision, e.g. 'main'", required=True),
        ],
        build_rebase_args,
    ),
    define(
        "squash",
        "Move changes from one revision into another in a Jujutsu (jj) repository. Only whole-file "
        "changes are supported (no interactive selection).",
        [
            string("source", "Revision to squash from; defaults to the working copy"),
            string("destination", "Revision to squash into"),
            strings("paths", "Optional path patterns to squash; whole paths only"),
            boolean("keepEmptied", "Keep the source revision even if it becomes empty"),
        ],
        build_squash_args,
    ),
    define(
        "revert",
        "Apply the reverse of one or more revisions in a Jujutsu (jj) repository, creating new changes "
        "that undo them. Useful for safely undoing changes.",
        [
            strings("revisions", "Revisions to revert", required=True),
            string("destination", "Optional revision to apply the revert onto"),
        ],
        build_revert_args,
    ),
    define(
        "restore",
        "Restore paths from another revision in a Jujutsu (jj) repository, undoing changes to specific "
        "files by returning them to an earlier state.",
        [
            string("source", "Revision to restore from; defaults to the parent"),
            string("destination", "Revision to restore into; defaults to the working copy"),
            strings("paths", "Paths to restore", required=True),
        ],
        build_restore_args,
    ),
)
