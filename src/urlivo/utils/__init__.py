"""src/urlivo/utils/__init__.py"""
