COMMANDS = {'acl': {'arity': -2,
                    'flags': [],
                    'key_spec': (0, 0, 0)},
 'append': {'arity': 3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'asking': {'arity': 1,
            'flags': ['fast'],
            'key_spec': (0, 0, 0)},
 'auth': {'arity': -2,
          'flags': ['allow_busy', 'fast', 'loading', 'no_auth', 'noscript', 'stale'],
          'key_spec': (0, 0, 0)},
 'bgrewriteaof': {'arity': 1,
                  'flags': ['admin', 'no_async_loading', 'noscript'],
                  'key_spec': (0, 0, 0)},
 'bgsave': {'arity': -1,
            'flags': ['admin', 'no_async_loading', 'noscript'],
            'key_spec': (0, 0, 0)},
 'bitcount': {'arity': -2,
              'flags': ['readonly'],
              'key_spec': (1, 1, 1)},
 'bitfield': {'arity': -2,
              'flags': ['denyoom', 'write'],
              'key_spec': (1, 1, 1)},
 'bitfield_ro': {'arity': -2,
                 'flags': ['fast', 'readonly'],
                 'key_spec': (1, 1, 1)},
 'bitop': {'arity': -4,
           'flags': ['denyoom', 'write'],
           'key_spec': (2, -1, 1)},
 'bitpos': {'arity': -3,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'blmove': {'arity': 6,
            'flags': ['blocking', 'denyoom', 'noscript', 'write'],
            'key_spec': (1, 2, 1)},
 'blmpop': {'arity': -5,
            'flags': ['blocking', 'movablekeys', 'write'],
            'key_spec': (0, 0, 0)},
 'blpop': {'arity': -3,
           'flags': ['blocking', 'noscript', 'write'],
           'key_spec': (1, -2, 1)},
 'brpop': {'arity': -3,
           'flags': ['blocking', 'noscript', 'write'],
           'key_spec': (1, -2, 1)},
 'brpoplpush': {'arity': 4,
                'flags': ['blocking', 'denyoom', 'noscript', 'write'],
                'key_spec': (1, 2, 1)},
 'bzmpop': {'arity': -5,
            'flags': ['blocking', 'movablekeys', 'write'],
            'key_spec': (0, 0, 0)},
 'bzpopmax': {'arity': -3,
              'flags': ['blocking', 'fast', 'noscript', 'write'],
              'key_spec': (1, -2, 1)},
 'bzpopmin': {'arity': -3,
              'flags': ['blocking', 'fast', 'noscript', 'write'],
              'key_spec': (1, -2, 1)},
 'client': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'cluster': {'arity': -2,
             'flags': [],
             'key_spec': (0, 0, 0)},
 'command': {'arity': -1,
             'flags': ['loading', 'stale'],
             'key_spec': (0, 0, 0)},
 'config': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'copy': {'arity': -3,
          'flags': ['denyoom', 'write'],
          'key_spec': (1, 2, 1)},
 'dbsize': {'arity': 1,
            'flags': ['fast', 'readonly'],
            'key_spec': (0, 0, 0)},
 'debug': {'arity': -2,
           'flags': ['admin', 'loading', 'noscript', 'protected', 'stale'],
           'key_spec': (0, 0, 0)},
 'decr': {'arity': 2,
          'flags': ['denyoom', 'fast', 'write'],
          'key_spec': (1, 1, 1)},
 'decrby': {'arity': 3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'del': {'arity': -2,
         'flags': ['write'],
         'key_spec': (1, -1, 1)},
 'discard': {'arity': 1,
             'flags': ['allow_busy', 'fast', 'loading', 'noscript', 'stale'],
             'key_spec': (0, 0, 0)},
 'dump': {'arity': 2,
          'flags': ['readonly'],
          'key_spec': (1, 1, 1)},
 'echo': {'arity': 2,
          'flags': ['fast'],
          'key_spec': (0, 0, 0)},
 'eval': {'arity': -3,
          'flags': ['may_replicate', 'movablekeys', 'no_mandatory_keys', 'noscript', 'skip_monitor', 'stale'],
          'key_spec': (0, 0, 0)},
 'eval_ro': {'arity': -3,
             'flags': ['movablekeys', 'no_mandatory_keys', 'noscript', 'readonly', 'skip_monitor', 'stale'],
             'key_spec': (0, 0, 0)},
 'evalsha': {'arity': -3,
             'flags': ['may_replicate', 'movablekeys', 'no_mandatory_keys', 'noscript', 'skip_monitor', 'stale'],
             'key_spec': (0, 0, 0)},
 'evalsha_ro': {'arity': -3,
                'flags': ['movablekeys', 'no_mandatory_keys', 'noscript', 'readonly', 'skip_monitor', 'stale'],
                'key_spec': (0, 0, 0)},
 'exec': {'arity': 1,
          'flags': ['loading', 'noscript', 'skip_slowlog', 'stale'],
          'key_spec': (0, 0, 0)},
 'exists': {'arity': -2,
            'flags': ['fast', 'readonly'],
            'key_spec': (1, -1, 1)},
 'expire': {'arity': -3,
            'flags': ['fast', 'write'],
            'key_spec': (1, 1, 1)},
 'expireat': {'arity': -3,
              'flags': ['fast', 'write'],
              'key_spec': (1, 1, 1)},
 'expiretime': {'arity': 2,
                'flags': ['fast', 'readonly'],
                'key_spec': (1, 1, 1)},
 'failover': {'arity': -1,
              'flags': ['admin', 'noscript', 'stale'],
              'key_spec': (0, 0, 0)},
 'fcall': {'arity': -3,
           'flags': ['may_replicate', 'movablekeys', 'no_mandatory_keys', 'noscript', 'skip_monitor', 'stale'],
           'key_spec': (0, 0, 0)},
 'fcall_ro': {'arity': -3,
              'flags': ['movablekeys', 'no_mandatory_keys', 'noscript', 'readonly', 'skip_monitor', 'stale'],
              'key_spec': (0, 0, 0)},
 'flushall': {'arity': -1,
              'flags': ['write'],
              'key_spec': (0, 0, 0)},
 'flushdb': {'arity': -1,
             'flags': ['write'],
             'key_spec': (0, 0, 0)},
 'function': {'arity': -2,
              'flags': [],
              'key_spec': (0, 0, 0)},
 'geoadd': {'arity': -5,
            'flags': ['denyoom', 'write'],
            'key_spec': (1, 1, 1)},
 'geodist': {'arity': -4,
             'flags': ['readonly'],
             'key_spec': (1, 1, 1)},
 'geohash': {'arity': -2,
             'flags': ['readonly'],
             'key_spec': (1, 1, 1)},
 'geopos': {'arity': -2,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'georadius': {'arity': -6,
               'flags': ['denyoom', 'movablekeys', 'write'],
               'key_spec': (1, 1, 1)},
 'georadius_ro': {'arity': -6,
                  'flags': ['readonly'],
                  'key_spec': (1, 1, 1)},
 'georadiusbymember': {'arity': -5,
                       'flags': ['denyoom', 'movablekeys', 'write'],
                       'key_spec': (1, 1, 1)},
 'georadiusbymember_ro': {'arity': -5,
                          'flags': ['readonly'],
                          'key_spec': (1, 1, 1)},
 'geosearch': {'arity': -7,
               'flags': ['readonly'],
               'key_spec': (1, 1, 1)},
 'geosearchstore': {'arity': -8,
                    'flags': ['denyoom', 'write'],
                    'key_spec': (1, 2, 1)},
 'get': {'arity': 2,
         'flags': ['fast', 'readonly'],
         'key_spec': (1, 1, 1)},
 'getbit': {'arity': 3,
            'flags': ['fast', 'readonly'],
            'key_spec': (1, 1, 1)},
 'getdel': {'arity': 2,
            'flags': ['fast', 'write'],
            'key_spec': (1, 1, 1)},
 'getex': {'arity': -2,
           'flags': ['fast', 'write'],
           'key_spec': (1, 1, 1)},
 'getrange': {'arity': 4,
              'flags': ['readonly'],
              'key_spec': (1, 1, 1)},
 'getset': {'arity': 3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'hdel': {'arity': -3,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'hello': {'arity': -1,
           'flags': ['allow_busy', 'fast', 'loading', 'no_auth', 'noscript', 'stale'],
           'key_spec': (0, 0, 0)},
 'hexists': {'arity': 3,
             'flags': ['fast', 'readonly'],
             'key_spec': (1, 1, 1)},
 'hget': {'arity': 3,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, 1, 1)},
 'hgetall': {'arity': 2,
             'flags': ['readonly'],
             'key_spec': (1, 1, 1)},
 'hincrby': {'arity': 4,
             'flags': ['denyoom', 'fast', 'write'],
             'key_spec': (1, 1, 1)},
 'hincrbyfloat': {'arity': 4,
                  'flags': ['denyoom', 'fast', 'write'],
                  'key_spec': (1, 1, 1)},
 'hkeys': {'arity': 2,
           'flags': ['readonly'],
           'key_spec': (1, 1, 1)},
 'hlen': {'arity': 2,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, 1, 1)},
 'hmget': {'arity': -3,
           'flags': ['fast', 'readonly'],
           'key_spec': (1, 1, 1)},
 'hmset': {'arity': -4,
           'flags': ['denyoom', 'fast', 'write'],
           'key_spec': (1, 1, 1)},
 'hrandfield': {'arity': -2,
                'flags': ['readonly'],
                'key_spec': (1, 1, 1)},
 'hscan': {'arity': -3,
           'flags': ['readonly'],
           'key_spec': (1, 1, 1)},
 'hset': {'arity': -4,
          'flags': ['denyoom', 'fast', 'write'],
          'key_spec': (1, 1, 1)},
 'hsetnx': {'arity': 4,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'hstrlen': {'arity': 3,
             'flags': ['fast', 'readonly'],
             'key_spec': (1, 1, 1)},
 'hvals': {'arity': 2,
           'flags': ['readonly'],
           'key_spec': (1, 1, 1)},
 'incr': {'arity': 2,
          'flags': ['denyoom', 'fast', 'write'],
          'key_spec': (1, 1, 1)},
 'incrby': {'arity': 3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'incrbyfloat': {'arity': 3,
                 'flags': ['denyoom', 'fast', 'write'],
                 'key_spec': (1, 1, 1)},
 'info': {'arity': -1,
          'flags': ['loading', 'stale'],
          'key_spec': (0, 0, 0)},
 'keys': {'arity': 2,
          'flags': ['readonly'],
          'key_spec': (0, 0, 0)},
 'lastsave': {'arity': 1,
              'flags': ['fast', 'loading', 'stale'],
              'key_spec': (0, 0, 0)},
 'latency': {'arity': -2,
             'flags': [],
             'key_spec': (0, 0, 0)},
 'lcs': {'arity': -3,
         'flags': ['readonly'],
         'key_spec': (1, 2, 1)},
 'lindex': {'arity': 3,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'linsert': {'arity': 5,
             'flags': ['denyoom', 'write'],
             'key_spec': (1, 1, 1)},
 'llen': {'arity': 2,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, 1, 1)},
 'lmove': {'arity': 5,
           'flags': ['denyoom', 'write'],
           'key_spec': (1, 2, 1)},
 'lmpop': {'arity': -4,
           'flags': ['movablekeys', 'write'],
           'key_spec': (0, 0, 0)},
 'lolwut': {'arity': -1,
            'flags': ['fast', 'readonly'],
            'key_spec': (0, 0, 0)},
 'lpop': {'arity': -2,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'lpos': {'arity': -3,
          'flags': ['readonly'],
          'key_spec': (1, 1, 1)},
 'lpush': {'arity': -3,
           'flags': ['denyoom', 'fast', 'write'],
           'key_spec': (1, 1, 1)},
 'lpushx': {'arity': -3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'lrange': {'arity': 4,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'lrem': {'arity': 4,
          'flags': ['write'],
          'key_spec': (1, 1, 1)},
 'lset': {'arity': 4,
          'flags': ['denyoom', 'write'],
          'key_spec': (1, 1, 1)},
 'ltrim': {'arity': 4,
           'flags': ['write'],
           'key_spec': (1, 1, 1)},
 'memory': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'mget': {'arity': -2,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, -1, 1)},
 'migrate': {'arity': -6,
             'flags': ['movablekeys', 'write'],
             'key_spec': (3, 3, 1)},
 'module': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'monitor': {'arity': 1,
             'flags': ['admin', 'loading', 'noscript', 'stale'],
             'key_spec': (0, 0, 0)},
 'move': {'arity': 3,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'mset': {'arity': -3,
          'flags': ['denyoom', 'write'],
          'key_spec': (1, -1, 2)},
 'msetnx': {'arity': -3,
            'flags': ['denyoom', 'write'],
            'key_spec': (1, -1, 2)},
 'multi': {'arity': 1,
           'flags': ['allow_busy', 'fast', 'loading', 'noscript', 'stale'],
           'key_spec': (0, 0, 0)},
 'object': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'persist': {'arity': 2,
             'flags': ['fast', 'write'],
             'key_spec': (1, 1, 1)},
 'pexpire': {'arity': -3,
             'flags': ['fast', 'write'],
             'key_spec': (1, 1, 1)},
 'pexpireat': {'arity': -3,
               'flags': ['fast', 'write'],
               'key_spec': (1, 1, 1)},
 'pexpiretime': {'arity': 2,
                 'flags': ['fast', 'readonly'],
                 'key_spec': (1, 1, 1)},
 'pfadd': {'arity': -2,
           'flags': ['denyoom', 'fast', 'write'],
           'key_spec': (1, 1, 1)},
 'pfcount': {'arity': -2,
             'flags': ['may_replicate', 'readonly'],
             'key_spec': (1, -1, 1)},
 'pfdebug': {'arity': 3,
             'flags': ['admin', 'denyoom', 'write'],
             'key_spec': (2, 2, 1)},
 'pfmerge': {'arity': -2,
             'flags': ['denyoom', 'write'],
             'key_spec': (1, -1, 1)},
 'pfselftest': {'arity': 1,
                'flags': ['admin'],
                'key_spec': (0, 0, 0)},
 'ping': {'arity': -1,
          'flags': ['fast'],
          'key_spec': (0, 0, 0)},
 'psetex': {'arity': 4,
            'flags': ['denyoom', 'write'],
            'key_spec': (1, 1, 1)},
 'psubscribe': {'arity': -2,
                'flags': ['loading', 'noscript', 'pubsub', 'stale'],
                'key_spec': (0, 0, 0)},
 'psync': {'arity': -3,
           'flags': ['admin', 'no_async_loading', 'no_multi', 'noscript'],
           'key_spec': (0, 0, 0)},
 'pttl': {'arity': 2,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, 1, 1)},
 'publish': {'arity': 3,
             'flags': ['fast', 'loading', 'may_replicate', 'pubsub', 'stale'],
             'key_spec': (0, 0, 0)},
 'pubsub': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'punsubscribe': {'arity': -1,
                  'flags': ['loading', 'noscript', 'pubsub', 'stale'],
                  'key_spec': (0, 0, 0)},
 'quit': {'arity': -1,
          'flags': ['allow_busy', 'fast', 'loading', 'no_auth', 'noscript', 'stale'],
          'key_spec': (0, 0, 0)},
 'randomkey': {'arity': 1,
               'flags': ['readonly'],
               'key_spec': (0, 0, 0)},
 'readonly': {'arity': 1,
              'flags': ['fast', 'loading', 'stale'],
              'key_spec': (0, 0, 0)},
 'readwrite': {'arity': 1,
               'flags': ['fast', 'loading', 'stale'],
               'key_spec': (0, 0, 0)},
 'rename': {'arity': 3,
            'flags': ['write'],
            'key_spec': (1, 2, 1)},
 'renamenx': {'arity': 3,
              'flags': ['fast', 'write'],
              'key_spec': (1, 2, 1)},
 'replconf': {'arity': -1,
              'flags': ['admin', 'allow_busy', 'loading', 'noscript', 'stale'],
              'key_spec': (0, 0, 0)},
 'replicaof': {'arity': 3,
               'flags': ['admin', 'no_async_loading', 'noscript', 'stale'],
               'key_spec': (0, 0, 0)},
 'reset': {'arity': 1,
           'flags': ['allow_busy', 'fast', 'loading', 'no_auth', 'noscript', 'stale'],
           'key_spec': (0, 0, 0)},
 'restore': {'arity': -4,
             'flags': ['denyoom', 'write'],
             'key_spec': (1, 1, 1)},
 'restore-asking': {'arity': -4,
                    'flags': ['asking', 'denyoom', 'write'],
                    'key_spec': (1, 1, 1)},
 'role': {'arity': 1,
          'flags': ['fast', 'loading', 'noscript', 'stale'],
          'key_spec': (0, 0, 0)},
 'rpop': {'arity': -2,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'rpoplpush': {'arity': 3,
               'flags': ['denyoom', 'write'],
               'key_spec': (1, 2, 1)},
 'rpush': {'arity': -3,
           'flags': ['denyoom', 'fast', 'write'],
           'key_spec': (1, 1, 1)},
 'rpushx': {'arity': -3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'sadd': {'arity': -3,
          'flags': ['denyoom', 'fast', 'write'],
          'key_spec': (1, 1, 1)},
 'save': {'arity': 1,
          'flags': ['admin', 'no_async_loading', 'no_multi', 'noscript'],
          'key_spec': (0, 0, 0)},
 'scan': {'arity': -2,
          'flags': ['readonly'],
          'key_spec': (0, 0, 0)},
 'scard': {'arity': 2,
           'flags': ['fast', 'readonly'],
           'key_spec': (1, 1, 1)},
 'script': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'sdiff': {'arity': -2,
           'flags': ['readonly'],
           'key_spec': (1, -1, 1)},
 'sdiffstore': {'arity': -3,
                'flags': ['denyoom', 'write'],
                'key_spec': (1, -1, 1)},
 'select': {'arity': 2,
            'flags': ['fast', 'loading', 'stale'],
            'key_spec': (0, 0, 0)},
 'set': {'arity': -3,
         'flags': ['denyoom', 'write'],
         'key_spec': (1, 1, 1)},
 'setbit': {'arity': 4,
            'flags': ['denyoom', 'write'],
            'key_spec': (1, 1, 1)},
 'setex': {'arity': 4,
           'flags': ['denyoom', 'write'],
           'key_spec': (1, 1, 1)},
 'setnx': {'arity': 3,
           'flags': ['denyoom', 'fast', 'write'],
           'key_spec': (1, 1, 1)},
 'setrange': {'arity': 4,
              'flags': ['denyoom', 'write'],
              'key_spec': (1, 1, 1)},
 'shutdown': {'arity': -1,
              'flags': ['admin', 'allow_busy', 'loading', 'no_multi', 'noscript', 'stale'],
              'key_spec': (0, 0, 0)},
 'sinter': {'arity': -2,
            'flags': ['readonly'],
            'key_spec': (1, -1, 1)},
 'sintercard': {'arity': -3,
                'flags': ['movablekeys', 'readonly'],
                'key_spec': (0, 0, 0)},
 'sinterstore': {'arity': -3,
                 'flags': ['denyoom', 'write'],
                 'key_spec': (1, -1, 1)},
 'sismember': {'arity': 3,
               'flags': ['fast', 'readonly'],
               'key_spec': (1, 1, 1)},
 'slaveof': {'arity': 3,
             'flags': ['admin', 'no_async_loading', 'noscript', 'stale'],
             'key_spec': (0, 0, 0)},
 'slowlog': {'arity': -2,
             'flags': [],
             'key_spec': (0, 0, 0)},
 'smembers': {'arity': 2,
              'flags': ['readonly'],
              'key_spec': (1, 1, 1)},
 'smismember': {'arity': -3,
                'flags': ['fast', 'readonly'],
                'key_spec': (1, 1, 1)},
 'smove': {'arity': 4,
           'flags': ['fast', 'write'],
           'key_spec': (1, 2, 1)},
 'sort': {'arity': -2,
          'flags': ['denyoom', 'movablekeys', 'write'],
          'key_spec': (1, 1, 1)},
 'sort_ro': {'arity': -2,
             'flags': ['movablekeys', 'readonly'],
             'key_spec': (1, 1, 1)},
 'spop': {'arity': -2,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'spublish': {'arity': 3,
              'flags': ['fast', 'loading', 'may_replicate', 'pubsub', 'stale'],
              'key_spec': (1, 1, 1)},
 'srandmember': {'arity': -2,
                 'flags': ['readonly'],
                 'key_spec': (1, 1, 1)},
 'srem': {'arity': -3,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'sscan': {'arity': -3,
           'flags': ['readonly'],
           'key_spec': (1, 1, 1)},
 'ssubscribe': {'arity': -2,
                'flags': ['loading', 'noscript', 'pubsub', 'stale'],
                'key_spec': (1, -1, 1)},
 'strlen': {'arity': 2,
            'flags': ['fast', 'readonly'],
            'key_spec': (1, 1, 1)},
 'subscribe': {'arity': -2,
               'flags': ['loading', 'noscript', 'pubsub', 'stale'],
               'key_spec': (0, 0, 0)},
 'substr': {'arity': 4,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'sunion': {'arity': -2,
            'flags': ['readonly'],
            'key_spec': (1, -1, 1)},
 'sunionstore': {'arity': -3,
                 'flags': ['denyoom', 'write'],
                 'key_spec': (1, -1, 1)},
 'sunsubscribe': {'arity': -1,
                  'flags': ['loading', 'noscript', 'pubsub', 'stale'],
                  'key_spec': (1, -1, 1)},
 'swapdb': {'arity': 3,
            'flags': ['fast', 'write'],
            'key_spec': (0, 0, 0)},
 'sync': {'arity': 1,
          'flags': ['admin', 'no_async_loading', 'no_multi', 'noscript'],
          'key_spec': (0, 0, 0)},
 'time': {'arity': 1,
          'flags': ['fast', 'loading', 'stale'],
          'key_spec': (0, 0, 0)},
 'touch': {'arity': -2,
           'flags': ['fast', 'readonly'],
           'key_spec': (1, -1, 1)},
 'ttl': {'arity': 2,
         'flags': ['fast', 'readonly'],
         'key_spec': (1, 1, 1)},
 'type': {'arity': 2,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, 1, 1)},
 'unlink': {'arity': -2,
            'flags': ['fast', 'write'],
            'key_spec': (1, -1, 1)},
 'unsubscribe': {'arity': -1,
                 'flags': ['loading', 'noscript', 'pubsub', 'stale'],
                 'key_spec': (0, 0, 0)},
 'unwatch': {'arity': 1,
             'flags': ['allow_busy', 'fast', 'loading', 'noscript', 'stale'],
             'key_spec': (0, 0, 0)},
 'wait': {'arity': 3,
          'flags': ['noscript'],
          'key_spec': (0, 0, 0)},
 'watch': {'arity': -2,
           'flags': ['allow_busy', 'fast', 'loading', 'noscript', 'stale'],
           'key_spec': (1, -1, 1)},
 'xack': {'arity': -4,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'xadd': {'arity': -5,
          'flags': ['denyoom', 'fast', 'write'],
          'key_spec': (1, 1, 1)},
 'xautoclaim': {'arity': -6,
                'flags': ['fast', 'write'],
                'key_spec': (1, 1, 1)},
 'xclaim': {'arity': -6,
            'flags': ['fast', 'write'],
            'key_spec': (1, 1, 1)},
 'xdel': {'arity': -3,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'xgroup': {'arity': -2,
            'flags': [],
            'key_spec': (0, 0, 0)},
 'xinfo': {'arity': -2,
           'flags': [],
           'key_spec': (0, 0, 0)},
 'xlen': {'arity': 2,
          'flags': ['fast', 'readonly'],
          'key_spec': (1, 1, 1)},
 'xpending': {'arity': -3,
              'flags': ['readonly'],
              'key_spec': (1, 1, 1)},
 'xrange': {'arity': -4,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'xread': {'arity': -4,
           'flags': ['blocking', 'movablekeys', 'readonly'],
           'key_spec': (0, 0, 0)},
 'xreadgroup': {'arity': -7,
                'flags': ['blocking', 'movablekeys', 'write'],
                'key_spec': (0, 0, 0)},
 'xrevrange': {'arity': -4,
               'flags': ['readonly'],
               'key_spec': (1, 1, 1)},
 'xsetid': {'arity': -3,
            'flags': ['denyoom', 'fast', 'write'],
            'key_spec': (1, 1, 1)},
 'xtrim': {'arity': -4,
           'flags': ['write'],
           'key_spec': (1, 1, 1)},
 'zadd': {'arity': -4,
          'flags': ['denyoom', 'fast', 'write'],
          'key_spec': (1, 1, 1)},
 'zcard': {'arity': 2,
           'flags': ['fast', 'readonly'],
           'key_spec': (1, 1, 1)},
 'zcount': {'arity': 4,
            'flags': ['fast', 'readonly'],
            'key_spec': (1, 1, 1)},
 'zdiff': {'arity': -3,
           'flags': ['movablekeys', 'readonly'],
           'key_spec': (0, 0, 0)},
 'zdiffstore': {'arity': -4,
                'flags': ['denyoom', 'movablekeys', 'write'],
                'key_spec': (1, 1, 1)},
 'zincrby': {'arity': 4,
             'flags': ['denyoom', 'fast', 'write'],
             'key_spec': (1, 1, 1)},
 'zinter': {'arity': -3,
            'flags': ['movablekeys', 'readonly'],
            'key_spec': (0, 0, 0)},
 'zintercard': {'arity': -3,
                'flags': ['movablekeys', 'readonly'],
                'key_spec': (0, 0, 0)},
 'zinterstore': {'arity': -4,
                 'flags': ['denyoom', 'movablekeys', 'write'],
                 'key_spec': (1, 1, 1)},
 'zlexcount': {'arity': 4,
               'flags': ['fast', 'readonly'],
               'key_spec': (1, 1, 1)},
 'zmpop': {'arity': -4,
           'flags': ['movablekeys', 'write'],
           'key_spec': (0, 0, 0)},
 'zmscore': {'arity': -3,
             'flags': ['fast', 'readonly'],
             'key_spec': (1, 1, 1)},
 'zpopmax': {'arity': -2,
             'flags': ['fast', 'write'],
             'key_spec': (1, 1, 1)},
 'zpopmin': {'arity': -2,
             'flags': ['fast', 'write'],
             'key_spec': (1, 1, 1)},
 'zrandmember': {'arity': -2,
                 'flags': ['readonly'],
                 'key_spec': (1, 1, 1)},
 'zrange': {'arity': -4,
            'flags': ['readonly'],
            'key_spec': (1, 1, 1)},
 'zrangebylex': {'arity': -4,
                 'flags': ['readonly'],
                 'key_spec': (1, 1, 1)},
 'zrangebyscore': {'arity': -4,
                   'flags': ['readonly'],
                   'key_spec': (1, 1, 1)},
 'zrangestore': {'arity': -5,
                 'flags': ['denyoom', 'write'],
                 'key_spec': (1, 2, 1)},
 'zrank': {'arity': 3,
           'flags': ['fast', 'readonly'],
           'key_spec': (1, 1, 1)},
 'zrem': {'arity': -3,
          'flags': ['fast', 'write'],
          'key_spec': (1, 1, 1)},
 'zremrangebylex': {'arity': 4,
                    'flags': ['write'],
                    'key_spec': (1, 1, 1)},
 'zremrangebyrank': {'arity': 4,
                     'flags': ['write'],
                     'key_spec': (1, 1, 1)},
 'zremrangebyscore': {'arity': 4,
                      'flags': ['write'],
                      'key_spec': (1, 1, 1)},
 'zrevrange': {'arity': -4,
               'flags': ['readonly'],
               'key_spec': (1, 1, 1)},
 'zrevrangebylex': {'arity': -4,
                    'flags': ['readonly'],
                    'key_spec': (1, 1, 1)},
 'zrevrangebyscore': {'arity': -4,
                      'flags': ['readonly'],
                      'key_spec': (1, 1, 1)},
 'zrevrank': {'arity': 3,
              'flags': ['fast', 'readonly'],
              'key_spec': (1, 1, 1)},
 'zscan': {'arity': -3,
           'flags': ['readonly'],
           'key_spec': (1, 1, 1)},
 'zscore': {'arity': 3,
            'flags': ['fast', 'readonly'],
            'key_spec': (1, 1, 1)},
 'zunion': {'arity': -3,
            'flags': ['movablekeys', 'readonly'],
            'key_spec': (0, 0, 0)},
 'zunionstore': {'arity': -4,
                 'flags': ['denyoom', 'movablekeys', 'write'],
                 'key_spec': (1, 1, 1)}}


if __name__ == '__main__':
    from redis_commands._generate import main
    main(__file__.rstrip('co'))
