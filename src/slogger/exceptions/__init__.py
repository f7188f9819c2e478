
# slogger/
# │
# ├── exceptions/
# │   ├── __init__.py
# │   └── base.py                    # Rendering errors (FormatError)

from .base import FormatError

__all__ = ["FormatError"]
