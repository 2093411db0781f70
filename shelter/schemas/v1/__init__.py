"""
Схемы API версии 1.
"""
