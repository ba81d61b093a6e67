"""
Tools for the Git backend: cloning, syncing with remotes and remote management.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import (
    boolean,
    define,
    option,
    positional,
    positive_int,
    repository,
    string,
    strings,
    switch,
    variadic,
)


def build_git_clone_args(params: Dict[str, Any]) -> List[str]:
    return [
        "git",
        "clone",
        params["source"],
        *positional(params, "destination"),
        *option(params, "remoteName", "--remote"),
        *switch(params, "colocate", "--colocate"),
        *option(params, "depth", "--depth"),
    ]


def build_init_args(params: Dict[str, Any]) -> List[str]:
    return [
        "git",
        "init",
        *positional(params, "destination"),
        *switch(params, "colocate", "--colocate"),
        *option(params, "gitRepo", "--git-repo"),
    ]


def build_git_export_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "export", *repository(params)]


def build_git_import_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "import", *repository(params)]


def build_git_fetch_args(params: Dict[str, Any]) -> List[str]:
    return [
        "git",
        "fetch",
        *option(params, "remote", "--remote"),
        *repository(params),
        *variadic(params, "branches", "--branch"),
    ]


def build_git_push_args(params: Dict[str, Any]) -> List[str]:
    return [
        "git",
        "push",
        *option(params, "remote", "--remote"),
        *variadic(params, "bookmarks", "--bookmark"),
        *switch(params, "all", "--all"),
        *switch(params, "tracked", "--tracked"),
        *switch(params, "deleted", "--deleted"),
        *switch(params, "allowNew", "--allow-new"),
        *repository(params),
    ]


def build_git_remote_add_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "remote", "add", params["name"], params["url"], *repository(params)]


def build_git_remote_list_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "remote", "list", *repository(params)]


def build_git_remote_remove_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "remote", "remove", params["name"], *repository(params)]


def build_git_remote_rename_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "remote", "rename", params["oldName"], params["newName"], *repository(params)]


def build_git_remote_set_url_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "remote", "set-url", params["name"], params["url"], *repository(params)]


def build_git_root_args(params: Dict[str, Any]) -> List[str]:
    return ["git", "root", *repository(params)]


COLOCATE = boolean("colocate", "Colocate the jj repository with the Git repository")

TOOLS = (
    define(
        "git-clone",
        "Create a new Jujutsu (jj) repository backed by a clone of a Git repository. The Git repository "
        "is stored as a bare repository inside the .jj/ directory.",
        [
            string("source", "URL or path of the Git repository to clone", required=True),
            string("destination", "Optional destination directory for the clone"),
            string("remoteName", "Optional name for the newly created remote (jj defaults to origin)"),
            COLOCATE,
            positive_int("depth", "Optional depth for a shallow clone"),
        ],
        build_git_clone_args,
        repo_path=False,
    ),
    define(
        "init",
        "Create a new Jujutsu (jj) repository backed by a Git repository, either a new one or an "
        "existing one.",
        [
            string("destination", "Optional destination directory"),
            COLOCATE,
            string("gitRepo", "Optional path to an existing Git repository to use"),
        ],
        build_init_args,
        repo_path=False,
    ),
    define(
        "git-export",
        "Update the underlying Git repository with changes made in the Jujutsu (jj) repository.",
        [],
        build_git_export_args,
    ),
    define(
        "git-import",
        "Update the Jujutsu (jj) repository with changes made in the underlying Git repository.",
        [],
        build_git_import_args,
    ),
    define(
        "git-fetch",
        "Fetch branches and bookmarks from a Git remote into a Jujutsu (jj) repository while preserving "
        "jj-specific state.",
        [
            string("remote", "Remote to fetch from (jj defaults to origin)"),
            strings("branches", "Optional branches or patterns to fetch"),
        ],
        build_git_fetch_args,
    ),
    define(
        "git-push",
        "Push bookmarks from a Jujutsu (jj) repository to a Git remote while preserving jj-specific state.",
        [
            string("remote", "Remote to push to (jj defaults to origin)"),
            strings("bookmarks", "Optional bookmarks to push"),
            boolean("all", "Push all bookmarks"),
            boolean("tracked", "Push all tracked bookmarks"),
            boolean("deleted", "Push all deleted bookmarks"),
            boolean("allowNew", "Allow pushing bookmarks that are new on the remote"),
        ],
        build_git_push_args,
    ),
    define(
        "git-remote-add",
        "Add a Git remote to a Jujutsu (jj) repository.",
        [
            string("name", "Name of the remote to add", required=True),
            string("url", "URL of the remote", required=True),
        ],
        build_git_remote_add_args,
    ),
    define(
        "git-remote-list",
        "List the Git remotes of a Jujutsu (jj) repository.",
        [],
        build_git_remote_list_args,
    ),
    define(
        "git-remote-remove",
        "Remove a Git remote from a Jujutsu (jj) repository.",
        [string("name", "Name of the remote to remove", required=True)],
        build_git_remote_remove_args,
    ),
    define(
        "git-remote-rename",
        "Rename a Git remote of a Jujutsu (jj) repository.",
        [
            string("oldName", "Current name of the remote", required=True),
            string("newName", "New name for the remote", required=True),
        ],
        build_git_remote_rename_args,
    ),
    define(
        "git-remote-set-url",
        "Set the URL of a Git remote of a Jujutsu (jj) repository.",
        [
            string("name", "Name of the remote", required=True),
            string("url", "New URL for the remote", required=True),
        ],
        build_git_remote_set_url_args,
    ),
    define(
        "git-root",
        "Show the underlying Git directory of a Jujutsu (jj) repository that uses the Git backend.",
        [],
        build_git_root_args,
    ),
)
