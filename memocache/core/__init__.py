# -*- coding: utf-8 -*-
"""
The caching core: :mod:`memocache.core.memoize` holds the cache,
:mod:`memocache.core.signature` binds callables to declared types and builds
keys, :mod:`memocache.core.adapters` adapts methods.
"""
