import json
import os
from dataclasses import dataclass

import pandas as pd


DEFAULT_DICTIONARY_PATH = "./word.json"

# source key -> Entry attribute, in display order
FIELD_MAP = {
    "word": "simplified",
    "oldword": "traditional",
    "strokes": "strokes",
    "pinyin": "pinyin",
    "radicals": "radical",
    "explanation": "explanation",
    "more": "extra",
}
SOURCE_FIELDS = tuple(FIELD_MAP.keys())


class DictionaryLoadError(Exception):
    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DictionaryNotFoundError(DictionaryLoadError):
    pass


class DictionaryMalformedError(DictionaryLoadError):
    pass


@dataclass(frozen=True)
class Entry:
    simplified: str = ""
    traditional: str = ""
    strokes: str = ""  # kept as text; sources annotate counts
    pinyin: str = ""
    radical: str = ""
    explanation: str = ""
    extra: str = ""


def _read_text(path: str) -> str:
    if not os.path.isfile(path):
        raise DictionaryNotFoundError(path, "no such file")
    try:
        with open(path, "rb") as f:
            raw = f.read()
    except OSError as exc:
        raise DictionaryNotFoundError(path, f"cannot read file ({exc.strerror or exc})")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise DictionaryMalformedError(path, f"not valid UTF-8 ({exc.reason})")


def _validate_records(payload, path: str) -> list[dict]:
    if not isinstance(payload, list):
        raise DictionaryMalformedError(
            path, f"expected a JSON array, got {type(payload).__name__}"
        )
    records: list[dict] = []
    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise DictionaryMalformedError(
                path, f"item {idx} is {type(item).__name__}, expected an object"
            )
        for key in SOURCE_FIELDS:
            value = item.get(key)
            if value is not None and not isinstance(value, str):
                raise DictionaryMalformedError(
                    path,
                    f"item {idx} field '{key}' is {type(value).__name__}, expected text",
                )
            if value is not None:
                try:
                    value.encode("utf-8")
                except UnicodeEncodeError:
                    raise DictionaryMalformedError(
                        path, f"item {idx} field '{key}' is not valid text"
                    )
        records.append(item)
    return records


def entries_from_records(records) -> tuple[Entry, ...]:
    """Build entries from decoded JSON objects, keeping their order.

    Unknown keys are dropped; absent or null fields become empty text.
    """
    df = pd.DataFrame(list(records), columns=list(SOURCE_FIELDS))
    df = df.astype(object).where(df.notna(), "")
    df = df.rename(columns=FIELD_MAP)
    return tuple(Entry(**row) for row in df.to_dict("records"))


def load_dictionary(path: str = DEFAULT_DICTIONARY_PATH) -> tuple[Entry, ...]:
    text = _read_text(path)
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DictionaryMalformedError(
            path, f"invalid JSON at line {exc.lineno} column {exc.colno}: {exc.msg}"
        )
    except (ValueError, RecursionError) as exc:
        # nesting too deep or integer literals past the conversion limit
        raise DictionaryMalformedError(path, f"cannot decode JSON ({exc})")
    return entries_from_records(_validate_records(payload, path))
