import math


class UnknownCommand(Exception):
    """Raised if a command is looked up that is not part of the command
    table.
    """

    def __init__(self, command):
        Exception.__init__(self, 'Unknown command %r' % (command,))
        self.command = command


class InvalidArguments(Exception):
    """Raised if the arguments of a command are not passed as a list or
    tuple.
    """


def _to_text(value):
    if isinstance(value, bytes):
        return value.decode('utf-8', 'replace')
    return str(value)


def _is_text(value):
    return isinstance(value, (str, bytes))


def _to_count(value):
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, bytes):
        value = value.decode('utf-8', 'replace')
    try:
        count = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(count) or math.isinf(count) or count <= 0:
        return 0
    return int(math.ceil(count))


def extract_key_indexes(args, key_spec):
    """Applies the ``(first, last, step)`` triple reported by ``COMMAND``
    to an argument list.  The triple is 1-based and a non positive `last`
    counts from the end of the arguments.
    """
    first, last, step = key_spec
    if step <= 0:
        return []
    if last > 0:
        stop = last
    else:
        stop = len(args) + last + 1
    return list(range(first - 1, stop, step))


def take_dynamic_keys(args, start):
    """Reads the number of keys at `start` and returns the indexes of the
    keys that follow it.  Counts reaching past the end of the arguments are
    cut off there.
    """
    if start >= len(args):
        return []
    count = min(_to_count(args[start]), len(args) - start - 1)
    return list(range(start + 1, start + 1 + count))


def take_key_after_token(args, start, token):
    """Returns the index right after the first occurrence of `token` or
    `None` if the token is not there.
    """
    token = token.lower()
    for idx in range(start, len(args) - 1):
        if _to_text(args[idx]).lower() == token:
            return idx + 1
    return None


def get_external_key_name_length(key):
    """Length of the key name in a ``SORT`` pattern, that is everything in
    front of the ``->`` hash field separator.
    """
    if isinstance(key, bytes):
        pos = key.find(b'->')
    else:
        key = str(key)
        pos = key.find('->')
    if pos == -1:
        return len(key)
    return pos


def _dynamic_keys_after_destination(args, parse_external_key):
    return [0] + take_dynamic_keys(args, 1)


def _dynamic_keys_at_second(args, parse_external_key):
    return take_dynamic_keys(args, 1)


def _dynamic_keys_at_first(args, parse_external_key):
    return take_dynamic_keys(args, 0)


def _make_georadius(start):
    def extract(args, parse_external_key):
        rv = [0]
        for token in 'STORE', 'STOREDIST':
            idx = take_key_after_token(args, start, token)
            if idx is not None:
                rv.append(idx)
        return rv
    return extract


def _sort_keys(args, parse_external_key):
    def external_key(idx):
        if parse_external_key:
            return (idx, get_external_key_name_length(args[idx]))
        return idx

    rv = [0]
    idx = 1
    while idx < len(args) - 1:
        arg = args[idx]
        if _is_text(arg):
            directive = _to_text(arg).upper()
            if directive == 'GET':
                idx += 1
                if args[idx] not in ('#', b'#'):
                    rv.append(external_key(idx))
            elif directive == 'BY':
                idx += 1
                rv.append(external_key(idx))
            elif directive == 'STORE':
                idx += 1
                rv.append(idx)
        idx += 1
    return rv


def _migrate_keys(args, parse_external_key):
    if len(args) > 2 and args[2] in ('', b''):
        for idx in range(5, len(args) - 1):
            arg = args[idx]
            if _is_text(arg) and _to_text(arg).upper() == 'KEYS':
                return list(range(idx + 1, len(args)))
        return []
    return [2]


def _make_stream_reader(start):
    # The key list after STREAMS is as long as the ID list behind it.
    def extract(args, parse_external_key):
        for idx in range(start, len(args) - 1):
            if _to_text(args[idx]).upper() == 'STREAMS':
                stop = idx + (len(args) - 1 - idx) // 2
                return list(range(idx + 1, stop + 1))
        return []
    return extract


#: Commands with movable keys and the functions that find them.
KEY_FAMILIES = {
    'zunionstore': _dynamic_keys_after_destination,
    'zinterstore': _dynamic_keys_after_destination,
    'zdiffstore': _dynamic_keys_after_destination,
    'eval': _dynamic_keys_at_second,
    'evalsha': _dynamic_keys_at_second,
    'eval_ro': _dynamic_keys_at_second,
    'evalsha_ro': _dynamic_keys_at_second,
    'fcall': _dynamic_keys_at_second,
    'fcall_ro': _dynamic_keys_at_second,
    'blmpop': _dynamic_keys_at_second,
    'bzmpop': _dynamic_keys_at_second,
    'sintercard': _dynamic_keys_at_first,
    'lmpop': _dynamic_keys_at_first,
    'zunion': _dynamic_keys_at_first,
    'zinter': _dynamic_keys_at_first,
    'zmpop': _dynamic_keys_at_first,
    'zintercard': _dynamic_keys_at_first,
    'zdiff': _dynamic_keys_at_first,
    'georadius': _make_georadius(5),
    'georadius_ro': _make_georadius(5),
    'georadiusbymember': _make_georadius(4),
    'georadiusbymember_ro': _make_georadius(4),
    'sort': _sort_keys,
    'sort_ro': _sort_keys,
    'migrate': _migrate_keys,
    'xread': _make_stream_reader(0),
    'xreadgroup': _make_stream_reader(3),
}


def get_key_indexes(command, args, parse_external_key=False):
    """Returns the indexes of the keys in `args` for the given
    :class:`~redis_commands.table.CommandInfo`.

    With `parse_external_key` the ``BY`` and ``GET`` patterns of ``SORT``
    are returned as ``(index, name_length)`` tuples instead of plain
    indexes.
    """
    if not isinstance(args, (list, tuple)):
        raise InvalidArguments('Expected the arguments of %r to be a list, '
                               'got %s' % (command.name,
                                           type(args).__name__))

    extract = KEY_FAMILIES.get(command.name)
    if extract is not None:
        return extract(args, parse_external_key)
    return extract_key_indexes(args, command.key_spec)
