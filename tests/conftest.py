import pytest

from redis_commands import default_table
from redis_commands.table import CommandTable


@pytest.fixture
def table():
    return default_table


@pytest.fixture
def tiny_table():
    return CommandTable({
        'get': {'arity': 2, 'flags': ['readonly', 'fast'],
                'key_spec': (1, 1, 1)},
        'mset': {'arity': -3, 'flags': ['write', 'denyoom'],
                 'key_spec': (1, -1, 2)},
        'eval': {'arity': -3, 'flags': ['noscript', 'movablekeys'],
                 'key_spec': (0, 0, 0)},
        'ping': {'arity': -1, 'flags': ['fast'], 'key_spec': (0, 0, 0)},
    })
