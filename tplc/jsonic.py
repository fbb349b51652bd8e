from __future__ import annotations

import json
from typing import Any


def dumps(obj: Any) -> str:
    """
    Минимальный JSON-дампер для ответов CLI.
    ensure_ascii=False и отступ 2; завершающий перевод строки добавляет CLI.
    """
    return json.dumps(obj, ensure_ascii=False, indent=2)
