"""
    redis_commands._generate
    ~~~~~~~~~~~~~~~~~~~~~~~~

    Regenerates the command table in ``_rediscommands.py`` from the
    ``COMMAND`` reply of a running server.
"""
import os
import logging
import pprint

from redis_commands.keys import KEY_FAMILIES


log = logging.getLogger(__name__)

MAIN_MARKER = "if __name__ == '__main__':"

DEFAULT_REDIS_URI = 'redis://localhost:6379/0'

# Older servers do not report QUIT at all.
QUIT_COMMAND = {
    'arity': 1,
    'flags': ['loading', 'stale', 'readonly'],
    'key_spec': (0, 0, 0),
}

# Read only variants of movable key commands.  They share the extraction
# rule with their writing counterparts but the server does not flag them.
READONLY_VARIANTS = frozenset(['georadius_ro', 'georadiusbymember_ro'])


class TableMismatch(Exception):
    """Raised if the commands with movable keys reported by the server do
    not match the commands the resolver knows how to handle.
    """


def _to_str(value):
    if isinstance(value, bytes):
        return value.decode('utf-8')
    return str(value)


def fetch_command_info(client):
    """Returns the parsed ``COMMAND`` reply of a redis-py client."""
    return client.execute_command('COMMAND')


def build_commands(reply):
    """Converts a parsed ``COMMAND`` reply into the table format."""
    rv = {}
    for name, info in reply.items():
        name = _to_str(name).lower()
        if ' ' in name:
            continue
        last = info['last_key_pos']
        # https://github.com/antirez/redis/issues/2598
        if name == 'brpop' and last == 1:
            log.info('Correcting last key position of brpop to -2')
            last = -2
        rv[name] = {
            # https://github.com/antirez/redis/pull/2986
            'arity': info['arity'] or 1,
            'flags': sorted(_to_str(x) for x in info['flags']),
            'key_spec': (info['first_key_pos'], last, info['step_count']),
        }

    if 'quit' not in rv:
        log.info('Server did not report quit, adding it')
        rv['quit'] = dict(QUIT_COMMAND)
    return rv


def check_movable_keys(commands, families=None):
    """Makes sure that exactly the commands flagged with ``movablekeys``
    have an extraction rule.
    """
    if families is None:
        families = KEY_FAMILIES
    movable = set(name for name, spec in commands.items()
                  if 'movablekeys' in spec['flags'])
    unhandled = sorted(movable - set(families))
    unflagged = sorted(
        name for name in set(families) - movable
        if name not in READONLY_VARIANTS or name not in commands)

    problems = []
    if unhandled:
        problems.append('not handled in the code: %s' % ', '.join(unhandled))
    if unflagged:
        problems.append('handled in the code but not flagged with '
                        'movablekeys: %s' % ', '.join(unflagged))
    if problems:
        raise TableMismatch('Command table does not match the key '
                            'families (%s)' % '; '.join(problems))


def render_module(commands, tail):
    return 'COMMANDS = %s\n\n\n%s' % (pprint.pformat(commands), tail)


def read_tail(path):
    """Returns everything from the ``__main__`` block on."""
    tail = []
    with open(path, 'r') as f:
        for line in f:
            if line.strip() == MAIN_MARKER:
                tail.append(line)
                tail.extend(f)
                break
    return ''.join(tail)


def regenerate(path, client):
    commands = build_commands(fetch_command_info(client))
    check_movable_keys(commands)
    tail = read_tail(path)
    with open(path, 'w') as f:
        f.write(render_module(commands, tail))
    log.info('Wrote %d commands to %s', len(commands), path)
    return commands


def main(path):
    from redis import StrictRedis

    logging.basicConfig(level=logging.INFO)
    client = StrictRedis.from_url(
        os.environ.get('REDIS_URI') or DEFAULT_REDIS_URI)
    try:
        regenerate(path, client)
    finally:
        client.connection_pool.disconnect()
