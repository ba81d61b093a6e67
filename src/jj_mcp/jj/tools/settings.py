"""
Tools for reading and writing jj configuration.
"""

from typing import Any, Dict, List

from jj_mcp.jj.tools.base import boolean, define, positional, repository, string, switch


def _scope(params: Dict[str, Any]) -> List[str]:
    return [*switch(params, "user", "--user"), *switch(params, "repo", "--repo")]


def build_config_get_args(params: Dict[str, Any]) -> List[str]:
    return ["config", "get", params["name"], *repository(params)]


def build_config_list_args(params: Dict[str, Any]) -> List[str]:
    return [
        "config",
        "list",
        *positional(params, "name"),
        *switch(params, "includeDefaults", "--include-defaults"),
        *switch(params, "includeOverridden", "--include-overridden"),
        *_scope(params),
        *repository(params),
    ]


def build_config_set_args(params: Dict[str, Any]) -> List[str]:
    return ["config", "set", *_scope(params), params["name"], params["value"], *repository(params)]


def build_config_unset_args(params: Dict[str, Any]) -> List[str]:
    return ["config", "unset", *_scope(params), params["name"], *repository(params)]


def build_config_path_args(params: Dict[str, Any]) -> List[str]:
    return ["config", "path", *_scope(params), *repository(params)]


TOOLS = (
    define(
        "config-get",
        "Get the value of a config option in a Jujutsu (jj) repository. Unlike config-list, the output "
        "is unformatted, for scripting use.",
        [string("name", "Name of the config option", required=True)],
        build_config_get_args,
    ),
    define(
        "config-list",
        "List config variables and their values in a Jujutsu (jj) repository. Shows both user and "
        "repository level config by default.",
        [
            string("name", "Optional name of a specific config option to list"),
            boolean("includeDefaults", "Include default values"),
            boolean("includeOverridden", "Include overridden values"),
            boolean("user", "Only show user-level config"),
            boolean("repo", "Only show repository-level config"),
        ],
        build_config_list_args,
    ),
    define(
        "config-set",
        "Set a config option in the user or repository config file of a Jujutsu (jj) repository.",
        [
            string("name", "Name of the config option", required=True),
            string("value", "Value to set", required=True),
            boolean("user", "Write the user-level config"),
            boolean("repo", "Write the repository-level config"),
        ],
        build_config_set_args,
    ),
    define(
        "config-unset",
        "Remove a config option from the user or repository config file of a Jujutsu (jj) repository.",
        [
            string("name", "Name of the config option", required=True),
            boolean("user", "Unset in the user-level config"),
            boolean("repo", "Unset in the repository-level config"),
        ],
        build_config_unset_args,
    ),
    define(
        "config-path",
        "Show the path of the config files of a Jujutsu (jj) repository.",
        [
            boolean("user", "Show the user config path"),
            boolean("repo", "Show the repository config path"),
        ],
        build_config_path_args,
    ),
)
