"""Load the static sample dataset that seeding resets the collection to."""

import json
from pathlib import Path
from typing import Union

from wanderlust.seeding.errors import DatasetError


def load_dataset(path: Union[str, Path]) -> list[dict]:
    """Read a JSON array of record objects from path.

    Record contents are not validated; only the outer shape is checked so a
    bad file fails before anything touches the database.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as exc:
        raise DatasetError(f"Seed file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise DatasetError(f"Seed file {path} is not valid JSON: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise DatasetError(f"Seed file {path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise DatasetError(f"Cannot read seed file {path}: {exc}") from exc

    if not isinstance(data, list):
        raise DatasetError(f"Seed file {path} must contain a JSON array of records")

    for index, record in enumerate(data):
        if not isinstance(record, dict):
            raise DatasetError(
                f"Record {index} in {path} is {type(record).__name__}, expected an object"
            )
    return data
