import pytest

from redis_commands import get_key_indexes as index, get_keys, \
    UnknownCommand, InvalidArguments
from redis_commands.keys import extract_key_indexes, take_dynamic_keys, \
    take_key_after_token, get_external_key_name_length


def test_unknown_command():
    with pytest.raises(UnknownCommand):
        index('UNKNOWN', [])


def test_unknown_command_is_checked_first():
    with pytest.raises(UnknownCommand):
        index('UNKNOWN', 'foo')


def test_faulty_args():
    with pytest.raises(InvalidArguments):
        index('get', 'foo')
    with pytest.raises(InvalidArguments):
        index('eval', 'script')
    with pytest.raises(InvalidArguments):
        index('get', None)


def test_no_keys():
    assert index('auth', []) == []
    assert index('ping', ['hello']) == []


def test_key_indexes():
    assert index('set', ['foo', 'bar']) == [0]
    assert index('zdiff', ['2', 'foo', 'bar']) == [1, 2]
    assert index('del', ['foo']) == [0]
    assert index('get', ['foo']) == [0]
    assert index('mget', ['foo', 'bar']) == [0, 1]
    assert index('mset', ['foo', 'v1', 'bar', 'v2']) == [0, 2]
    assert index('hmset', ['key', 'foo', 'v1', 'bar', 'v2']) == [0]
    assert index('blpop', ['key1', 'key2', '17']) == [0, 1]
    assert index('lpop', ['key', 'COUNT', '17']) == [0]
    assert index('evalsha', ['23123', '2', 'foo', 'bar', 'zoo']) == [2, 3]
    assert index('sort', ['key']) == [0]
    assert index('bitop', ['AND', 'dest', 'k1', 'k2']) == [1, 2, 3]


def test_tuple_args():
    assert index('mget', ('foo', 'bar')) == [0, 1]


def test_case_insensitive_name():
    with pytest.raises(UnknownCommand):
        index('GET', ['foo'])
    assert index('GET', ['foo'], name_case_insensitive=True) == [0]
    assert index('EVAL', ['script', '2', 'k1', 'k2'],
                 name_case_insensitive=True) == [2, 3]


def test_idempotent():
    args = ['out', '2', 'zset1', 'zset2', 'WEIGHTS', '2', '3']
    assert index('zunionstore', args) == index('zunionstore', args)
    assert args == ['out', '2', 'zset1', 'zset2', 'WEIGHTS', '2', '3']


def test_store_commands():
    args = ['out', '2', 'zset1', 'zset2', 'WEIGHTS', '2', '3']
    assert index('zunionstore', args) == [0, 2, 3]
    assert index('zinterstore', args) == [0, 2, 3]
    assert index('zdiffstore', ['out', '2', 'zset1', 'zset2']) == [0, 2, 3]
    assert index('zinterstore',
                 ['out', 2, 'zset1', 'zset2', 'WEIGHTS', 2, 3]) == [0, 2, 3]


def test_eval():
    assert index('eval', ['script', '0', 'foo']) == []
    assert index('eval_ro', ['script', '0']) == []
    assert index('eval', ['script', '3', 'foo', 'bar', 'zoo']) == [2, 3, 4]
    assert index('eval', ['script', '2', 'foo', 'bar', 'zoo']) == [2, 3]
    assert index('eval', ['script', 2, 'foo', 'bar', 'zoo']) == [2, 3]
    assert index('evalsha', ['sha', '3', 'foo', 'bar', 'zoo']) == [2, 3, 4]
    assert index('evalsha_ro', ['script', 1, 'foo', 'bar']) == [2]
    assert index('evalsha_ro', ['sha', 0]) == []
    assert index('eval', ['script', b'1', 'foo']) == [2]


def test_fcall():
    assert index('fcall', ['function', '0', 'foo']) == []
    assert index('fcall_ro', ['function', '0']) == []
    assert index('fcall', ['function', '3', 'foo', 'bar', 'zoo']) == [2, 3, 4]
    assert index('fcall', ['myfunc', 2, 'foo', 'bar', 'zoo']) == [2, 3]
    assert index('fcall_ro', ['myfunc', 1, 'foo', 'bar', 'zoo']) == [2]


def test_blocking_pops():
    assert index('blmpop', ['0', '1', 'foo', 'left']) == [2]
    assert index('blmpop',
                 ['0', '2', 'foo', 'bar', 'right', 'count', 10]) == [2, 3]
    assert index('bzmpop', ['0', '1', 'foo', 'min']) == [2]
    assert index('bzmpop',
                 ['0', '2', 'foo', 'bar', 'max', 'count', 10]) == [2, 3]


def test_numkeys_first():
    assert index('sintercard', ['2', 'key1', 'key2', 'limit', '1']) == [1, 2]
    assert index('sintercard', ['2', 'key1', 'key2']) == [1, 2]
    assert index('zintercard', ['2', 'key1', 'key2']) == [1, 2]
    assert index('lmpop', ['2', 'key1', 'key2', 'left', 'count', 10]) == [1, 2]
    assert index('zunion', ['2', 'key1', 'key2', 'WITHSCORES']) == [1, 2]
    assert index('zinter', ['2', 'key1', 'key2', 'WITHSCORES']) == [1, 2]
    assert index('zmpop', ['2', 'key1', 'key2', 'MAX', 'COUNT', '10']) == [1, 2]
    assert index('zdiff', ['2', 'key1', 'key2', 'WITHSCORES']) == [1, 2]


def test_malformed_numkeys():
    assert index('eval', ['script', 'nope', 'foo']) == []
    assert index('eval', ['script']) == []
    assert index('eval', ['script', None, 'foo']) == []
    assert index('eval', ['script', '-2', 'foo']) == []
    assert index('eval', ['script', 'inf', 'foo']) == []
    assert index('eval', ['script', 10 ** 400, 'foo']) == [2]
    assert index('eval', ['script', '1e18', 'foo']) == [2]
    assert index('eval', ['script', '5', 'foo', 'bar']) == [2, 3]
    assert index('zunionstore', ['out', '1e18', 'a', 'b']) == [0, 2, 3]
    assert index('zunionstore', ['out']) == [0]
    assert index('zdiff', []) == []


def test_georadius():
    assert index('georadius', ['Sicily', 15, 37, 200, 'km', 'WITHDIST',
                               'STORE', 'store']) == [0, 7]
    assert index('georadius', ['Sicily', 15, 37, 200, 'km', 'WITHDIST',
                               'STORE', 'store1',
                               'STOREDIST', 'store2']) == [0, 7, 9]
    assert index('georadius', ['Sicily', 15, 37, 200, 'km', 'storedist',
                               'dist']) == [0, 6]
    assert index('georadius',
                 ['Sicily', 15, 37, 200, 'km', 'WITHDIST']) == [0]
    assert index('georadius_ro',
                 ['Sicily', 15, 37, 200, 'km', 'WITHDIST']) == [0]


def test_georadiusbymember():
    assert index('georadiusbymember',
                 ['Sicily', 'ag', 200, 'km', 'STORE', 'store']) == [0, 5]
    assert index('georadiusbymember_ro',
                 ['Sicily', 'ag', 200, 'km']) == [0]


def test_migrate():
    assert index('migrate', ['127.0.0.1', 6379, 'foo', 0, 0, 'COPY']) == [2]
    assert index('migrate', ['127.0.0.1', 6379, '', 0, 0, 'REPLACE',
                             'KEYS', 'foo', 'bar']) == [7, 8]
    assert index('migrate', ['127.0.0.1', 6379, '', '0', '0',
                             'KEYS', 'foo', 'bar']) == [6, 7]
    assert index('migrate', ['127.0.0.1', 6379, '', 0, 0]) == []


def test_xreadgroup():
    assert index('xreadgroup', ['GROUP', 'group', 'consumer', 'COUNT', 10,
                                'BLOCK', 2000, 'NOACK', 'STREAMS',
                                'key1', 'key2', 'id1', 'id2']) == [9, 10]
    assert index('xreadgroup', ['GROUP', 'group', 'consumer', 'STREAMS',
                                'key1', 'id1']) == [4]
    assert index('xreadgroup', ['GROUP', 'group', 'consumer', 'STREAMS',
                                'key1', 'key2', 'id1', 'id2']) == [4, 5]
    assert index('xreadgroup', ['GROUP', 'group', 'consumer', 'STREAMS',
                                'key1', 'key2', 'key3',
                                'id1', 'id2', 'id3']) == [4, 5, 6]


def test_xread():
    assert index('xread', ['COUNT', 10, 'BLOCK', 2000, 'STREAMS',
                           'key1', 'key2', 'id1', 'id2']) == [5, 6]
    assert index('xread', ['STREAMS', 'key1', 'id1']) == [1]
    assert index('xread', ['STREAMS', 'key1', 'key2', 'id1', 'id2']) == [1, 2]
    assert index('xread', ['streams', 'key1', 'key2', 'key3',
                           'id1', 'id2', 'id3']) == [1, 2, 3]
    assert index('xread', ['COUNT', 10]) == []


def test_sort_without_external_keys():
    assert index('sort', ['key', 'BY', 'hash:*->field']) == [0, 2]
    assert index('sort', ['key', 'BY', 'hash:*->field', 'LIMIT', 2, 3,
                          'GET', 'gk', 'GET', '#', 'Get', 'gh->f*',
                          'DESC', 'ALPHA', 'STORE', 'store']) == \
        [0, 2, 7, 11, 15]
    assert index('sort_ro', ['key', 'GET', '#', 'BY', 'w_*']) == [0, 4]


def test_sort_with_external_keys():
    assert index('sort', ['key', 'BY', 'hash:*->field'],
                 parse_external_key=True) == [0, (2, 6)]
    assert index('sort', ['key', 'BY', 'hash:*->field', 'LIMIT', 2, 3,
                          'GET', b'gk', 'GET', '#', 'Get', 'gh->f*',
                          'DESC', 'ALPHA', 'STORE', 'store'],
                 parse_external_key=True) == \
        [0, (2, 6), (7, 2), (11, 2), 15]


def test_get_keys():
    assert get_keys('mset', ['foo', 'v1', 'bar', 'v2']) == ['foo', 'bar']
    assert get_keys('eval', ['script', '2', 'a', 'b']) == ['a', 'b']
    assert get_keys('eval', ['script', '3', 'a']) == ['a']
    assert get_keys('ping', []) == []


def test_key_extraction():
    assert extract_key_indexes(['foo'], (1, 1, 1)) == [0]
    assert extract_key_indexes(['foo', 'value', 'foo2', 'value2'],
                               (1, -1, 2)) == [0, 2]
    assert extract_key_indexes(['extra', 'foo', 'value', 'foo2', 'value2'],
                               (2, -1, 2)) == [1, 3]
    assert extract_key_indexes(['foo', 'foo2'], (1, -1, 1)) == [0, 1]
    assert extract_key_indexes(['foo'], (0, 0, 0)) == []


def test_take_dynamic_keys():
    assert take_dynamic_keys(['2', 'a', 'b'], 0) == [1, 2]
    assert take_dynamic_keys(['x', 1.5, 'a', 'b'], 1) == [2, 3]
    assert take_dynamic_keys(['x', 'garbage'], 1) == []


def test_take_key_after_token():
    assert take_key_after_token(['a', 'store', 'b'], 0, 'STORE') == 2
    assert take_key_after_token([b'STORE', 'b'], 0, 'STORE') == 1
    assert take_key_after_token(['a', 'STORE'], 0, 'STORE') is None
    assert take_key_after_token(['STORE', 'b'], 1, 'STORE') is None


def test_external_key_name_length():
    assert get_external_key_name_length('hash:*->field') == 6
    assert get_external_key_name_length('plain') == 5
    assert get_external_key_name_length(b'h->f') == 1
    assert get_external_key_name_length(42) == 2
