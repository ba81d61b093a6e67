"""
Jujutsu (jj) integration: the process runner and the tool definitions.
"""

from .runner import CommandFailure, CommandResult, CommandSuccess, JJRunner
