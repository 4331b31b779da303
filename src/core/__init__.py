"""
Core: представление целых произвольной длины, арифметические движки и инварианты.

Модуль не зависит от внешних систем: нет I/O, нет разделяемого изменяемого состояния.
"""
