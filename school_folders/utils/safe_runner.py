"""
2025-09-04 décorateur de scripts main.
"""

from collections.abc import Callable
from functools import wraps
import sys
import traceback
from typing import Any


def safe_main(func: Callable[..., int | None]) -> Callable[..., None]:
    """
    Décorateur pour main en catchant toutes les exceptions et retourner un code retour.
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> None:
        try:
            code = func(*args, **kwargs)
        except Exception as e:
            print(f"❌ Erreur capturée par safe_main: {e}", file=sys.stderr)
            traceback.print_exc(file=sys.stderr)
            sys.exit(1)
        sys.exit(code or 0)

    return wrapper
