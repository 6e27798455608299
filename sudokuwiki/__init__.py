"""
Небольшой вики-сервер со страницами и досками судоку поверх файлов.
"""

__version__ = "0.1.0"
