from collections import namedtuple

from redis_commands.keys import UnknownCommand, get_key_indexes


class CommandInfo(namedtuple('CommandInfo', 'name arity flags key_spec')):
    """Metadata of a single command.  `flags` is a frozenset of the
    lowercase flag names and `key_spec` the 1-based ``(first, last, step)``
    triple as reported by the server.
    """
    __slots__ = ()

    @classmethod
    def from_spec(cls, name, spec):
        return cls(name, spec['arity'], frozenset(spec['flags']),
                   tuple(spec['key_spec']))

    @property
    def movable_keys(self):
        return 'movablekeys' in self.flags


def _normalize_name(name, case_insensitive):
    if isinstance(name, bytes):
        name = name.decode('utf-8', 'replace')
    elif not isinstance(name, str):
        name = str(name)
    if case_insensitive:
        name = name.lower()
    return name


class CommandTable(object):
    """The command table answers questions about commands and their
    arguments.  It is built once from a mapping in the format of the
    generated ``COMMANDS`` table and never changes afterwards::

        table = CommandTable({
            'get': {'arity': 2, 'flags': ['readonly', 'fast'],
                    'key_spec': (1, 1, 1)},
        })
        table.get_key_indexes('get', ['foo'])  # [0]

    The package level functions are bound to a table built from the
    commands of the server the table was generated against.
    """

    def __init__(self, commands):
        self._commands = dict(
            (name, CommandInfo.from_spec(name, spec))
            for name, spec in commands.items())
        self._names = tuple(sorted(self._commands))

    @property
    def names(self):
        """All known command names, sorted."""
        return self._names

    def __contains__(self, name):
        return self.exists(name)

    def __iter__(self):
        return iter(self._names)

    def __len__(self):
        return len(self._names)

    def __repr__(self):
        return '<%s commands=%d>' % (self.__class__.__name__, len(self))

    def exists(self, name, case_insensitive=False):
        """Checks if the command exists."""
        return _normalize_name(name, case_insensitive) in self._commands

    def get(self, name, case_insensitive=False):
        """Returns the :class:`CommandInfo` of a command."""
        name = _normalize_name(name, case_insensitive)
        rv = self._commands.get(name)
        if rv is None:
            raise UnknownCommand(name)
        return rv

    def has_flag(self, name, flag, name_case_insensitive=False):
        """Checks if the command has the flag.  Some of the possible flags
        are ``readonly``, ``noscript`` and ``loading``.
        """
        command = self.get(name, name_case_insensitive)
        return _normalize_name(flag, False) in command.flags

    def get_key_indexes(self, name, args, parse_external_key=False,
                        name_case_insensitive=False):
        """Returns the indexes of the keys in the arguments of a command::

            table.get_key_indexes('set', ['key', 'value'])  # [0]
            table.get_key_indexes('mget', ['key1', 'key2'])  # [0, 1]
        """
        command = self.get(name, name_case_insensitive)
        return get_key_indexes(command, args, parse_external_key)

    def get_keys(self, name, args, name_case_insensitive=False):
        """Returns the keys a command operates on."""
        indexes = self.get_key_indexes(
            name, args, name_case_insensitive=name_case_insensitive)
        return [args[idx] for idx in indexes if idx < len(args)]
