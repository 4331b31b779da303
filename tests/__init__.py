"""
Test suite для BigInteger

Contains:
- tests/unit/          : Unit tests для движков и публичной модели
"""
