# -*- coding: utf-8 -*-
"""
Core Module - Configuration, display strings and host API constants.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""
