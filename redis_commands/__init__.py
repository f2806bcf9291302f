"""
    redis_commands
    ~~~~~~~~~~~~~~

    Metadata about redis commands and the positions of their keys.

    :copyright: (c) 2015 Functional Software Inc.
    :license: Apache License 2.0, see LICENSE for more details.
"""
from redis_commands._rediscommands import COMMANDS
from redis_commands.keys import UnknownCommand, InvalidArguments, \
    KEY_FAMILIES
from redis_commands.table import CommandInfo, CommandTable


__version__ = '1.0.0'

#: The table of the commands the package was generated against.
default_table = CommandTable(COMMANDS)

#: All known command names, lowercase.
command_names = default_table.names

exists = default_table.exists
has_flag = default_table.has_flag
get_key_indexes = default_table.get_key_indexes
get_keys = default_table.get_keys

__all__ = [
    # table
    'CommandTable', 'CommandInfo', 'COMMANDS', 'default_table',
    'command_names',

    # lookups
    'exists', 'has_flag', 'get_key_indexes', 'get_keys',

    # keys
    'KEY_FAMILIES', 'UnknownCommand', 'InvalidArguments',
]
