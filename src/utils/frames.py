import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Union


def read_frames(path: Union[str, Path]) -> Iterator[Dict[str, Any]]:
    """
    Lee lecturas grabadas en formato JSON Lines, una por línea.

    Las líneas vacías se ignoran; las que no son UTF-8 o JSON válido se
    registran y se omiten.
    """
    path = Path(path)
    with path.open("rb") as f:
        for line_no, raw_line in enumerate(f, start=1):
            try:
                line = raw_line.decode("utf-8").strip()
                if not line:
                    continue
                payload = json.loads(line)
            except (UnicodeDecodeError, json.JSONDecodeError):
                logging.error(f"❌ Línea ilegible en {path.name}:{line_no}. Se omite la línea.")
                continue
            if not isinstance(payload, dict):
                logging.error(f"❌ Se esperaba un objeto JSON en {path.name}:{line_no}. Se omite la línea.")
                continue
            yield payload
