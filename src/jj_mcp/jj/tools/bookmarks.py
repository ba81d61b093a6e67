"""
Bookmark and tag tools.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import define, option, positionals, repository, string, strings


def build_bookmark_create_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "create", params["name"], *option(params, "revision", "-r"), *repository(params)]


def build_bookmark_delete_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "delete", *positionals(params, "names"), *repository(params)]


def build_bookmark_forget_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "forget", *positionals(params, "names"), *repository(params)]


def build_bookmark_list_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "list", *repository(params), *option(params, "template", "-T")]


def build_bookmark_move_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "move", *positionals(params, "names"), "-t", params["revision"], *repository(params)]


def build_bookmark_rename_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "rename", params["oldName"], params["newName"], *repository(params)]


def build_bookmark_set_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "set", params["name"], "-r", params["revision"], *repository(params)]


def build_bookmark_track_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "track", params["remoteBookmark"], *repository(params)]


def build_bookmark_untrack_args(params: Dict[str, Any]) -> List[str]:
    return ["bookmark", "untrack", params["remoteBookmark"], *repository(params)]


def build_tag_list_args(params: Dict[str, Any]) -> List[str]:
    return ["tag", "list", *positionals(params, "names"), *repository(params), *option(params, "template", "-T")]


TEMPLATE = string("template", "Optional template for output formatting")

TOOLS = (
    define(
        "bookmark-create",
        "Create a new bookmark in a Jujutsu (jj) repository. Useful for marking important points in "
        "history or creating named branches.",
        [
            string("name", "Name of the bookmark to create", required=True),
            string("revision", "Optional revision to point the bookmark at"),
        ],
        build_bookmark_create_args,
    ),
    define(
        "bookmark-delete",
        "Delete existing bookmarks in a Jujutsu (jj) repository and propagate the deletion to remotes on "
        "the next push.",
        [strings("names", "Names of the bookmarks to delete", required=True)],
        build_bookmark_delete_args,
    ),
    define(
        "bookmark-forget",
        "Forget bookmarks in a Jujutsu (jj) repository without marking them as deletions to be pushed.",
        [strings("names", "Names of the bookmarks to forget", required=True)],
        build_bookmark_forget_args,
    ),
    define(
        "bookmark-list",
        "List bookmarks and their targets in a Jujutsu (jj) repository.",
        [TEMPLATE],
        build_bookmark_list_args,
    ),
    define(
        "bookmark-move",
        "Move existing bookmarks to a target revision in a Jujutsu (jj) repository.",
        [
            strings("names", "Names of the bookmarks to move", required=True),
            string("revision", "Target revision to move the bookmarks to", required=True),
        ],
        build_bookmark_move_args,
    ),
    define(
        "bookmark-rename",
        "Rename a bookmark in a Jujutsu (jj) repository.",
        [
            string("oldName", "Current name of the bookmark", required=True),
            string("newName", "New name for the bookmark", required=True),
        ],
        build_bookmark_rename_args,
    ),
    define(
        "bookmark-set",
        "Create or update a bookmark to point at a given revision in a Jujutsu (jj) repository.",
        [
            string("name", "Name of the bookmark to set", required=True),
            string("revision", "Revision to point the bookmark at", required=True),
        ],
        build_bookmark_set_args,
    ),
    define(
        "bookmark-track",
        "Start tracking a remote bookmark in a Jujutsu (jj) repository.",
        [string("remoteBookmark", "Remote bookmark to track, formatted as bookmark@remote", required=True)],
        build_bookmark_track_args,
    ),
    define(
        "bookmark-untrack",
        "Stop tracking a remote bookmark in a Jujutsu (jj) repository.",
        [string("remoteBookmark", "Remote bookmark to untrack, formatted as bookmark@remote", required=True)],
        build_bookmark_untrack_args,
    ),
    define(
        "tag-list",
        "List tags and their targets in a Jujutsu (jj) repository.",
        [strings("names", "Optional names of the tags to list"), TEMPLATE],
        build_tag_list_args,
    ),
)
