# src/plateau/__init__.py
