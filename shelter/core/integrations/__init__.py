"""
Интеграции с внешними сервисами.
"""
