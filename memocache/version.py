# -*- coding: utf-8 -*-
"""
Version and application name, kept separate so ``setup.py`` can read them
without importing the rest of the package.
"""
__version__ = '0.1.0'
__app_name__ = 'memocache'
