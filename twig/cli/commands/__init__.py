"""
CLI command implementations.
"""

from twig.cli.commands.config import cmd_config_get, cmd_config_list, cmd_config_path
from twig.cli.commands.help import cmd_help

__all__ = ["cmd_help", "cmd_config_list", "cmd_config_get", "cmd_config_path"]
