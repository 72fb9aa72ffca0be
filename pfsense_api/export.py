"""
Functions for exporting pfSense data to files.

Lists of models (DHCP leases, firewall rules, ARP entries...) or plain
dictionaries can be written to CSV or JSON for reporting. Models are
exported with their pfSense API key names.
"""

import csv
import json
from typing import Any, Dict, List, Optional, Sequence, Union

from .models.base import PfSenseModel
from .logging import get_logger

logger = get_logger(__name__)

Exportable = Union[PfSenseModel, Dict[str, Any]]


class PfSenseEncoder(json.JSONEncoder):
    def default(self, obj):
        if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
            return obj.to_dict()
        try:
            return super().default(obj)
        except TypeError:
            return str(obj)


def to_dict_list(items: Sequence[Exportable]) -> List[Dict[str, Any]]:
    """
    Convert a list of pfSense models to a list of dictionaries.

    Dictionaries are passed through unchanged; anything else is skipped.

    Args:
        items: Models or dictionaries

    Returns:
        List of dictionaries keyed by pfSense API field names
    """
    result = []

    for item in items:
        if hasattr(item, "to_dict") and callable(getattr(item, "to_dict")):
            result.append(item.to_dict())
        elif isinstance(item, dict):
            result.append(item)
        else:
            logger.debug(f"Skipping item of type {type(item).__name__} in export")

    return result


def _flatten_dict(
    d: Dict[str, Any], parent_key: str = "", sep: str = "_"
) -> Dict[str, Any]:
    """
    Flatten nested dictionaries, joining keys with ``sep``.

    Lists of dictionaries are flattened with the item index in the key;
    other lists become a comma separated string.
    """
    items = []
    for key, value in d.items():
        new_key = f"{parent_key}{sep}{key}" if parent_key else key
        if isinstance(value, dict):
            items.extend(_flatten_dict(value, new_key, sep=sep).items())
        elif isinstance(value, list):
            if value and all(isinstance(i, dict) for i in value):
                for index, item in enumerate(value):
                    items.extend(_flatten_dict(item, f"{new_key}{sep}{index}", sep=sep).items())
            else:
                items.append((new_key, ", ".join(str(i) for i in value)))
        else:
            items.append((new_key, value))

    return dict(items)


def _fieldnames(rows: List[Dict[str, Any]]) -> List[str]:
    # union of keys in first-seen order; rows of one model type may still omit None fields
    names: Dict[str, None] = {}
    for row in rows:
        for key in row:
            names.setdefault(key, None)
    return list(names)


def export_csv(
    items: Sequence[Exportable],
    path: str,
    fields: Optional[List[str]] = None,
    flatten_nested: bool = False,
) -> None:
    """
    Export pfSense objects to a CSV file.

    Args:
        items: Models or dictionaries
        path: Path where the CSV file will be saved
        fields: Optional list of columns to export. Defaults to every key
                found in the items.
        flatten_nested: Whether to flatten nested structures, for example a
                        rule's ``source`` object becomes ``source_address``,
                        ``source_network``... (default: False)
    """
    rows = to_dict_list(items)

    if flatten_nested:
        rows = [_flatten_dict(row) for row in rows]
        rows = [row for row in rows if row]

    if not rows:
        logger.debug(f"Nothing to export, writing empty file {path}")
        with open(path, "w", newline="", encoding="utf-8") as csvfile:
            csvfile.write("")
        return

    final_fields = fields if fields else _fieldnames(rows)

    with open(path, "w", newline="", encoding="utf-8") as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=final_fields, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)

    logger.info(f"Exported {len(rows)} rows to {path}")


def export_json(items: Sequence[Exportable], path: str, indent: int = 2) -> None:
    """
    Export pfSense objects to a JSON file.

    Args:
        items: Models or dictionaries
        path: Path where the JSON file will be saved
        indent: Number of spaces for indentation in the JSON file (default: 2)
    """
    rows = to_dict_list(items)

    with open(path, "w", encoding="utf-8") as jsonfile:
        json.dump(rows, jsonfile, indent=indent, cls=PfSenseEncoder)

    logger.info(f"Exported {len(rows)} items to {path}")
