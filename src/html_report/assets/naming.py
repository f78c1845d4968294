from __future__ import annotations

import re
from pathlib import PurePath

from html_report.domain.errors import InvalidAssetNameError

_CHART_STRIP = re.compile(r"[^A-Za-z0-9]")
_FILE_LINK_STRIP = re.compile(r"[^A-Za-z0-9.-]")


def chart_asset_name(unique_name: str) -> str:
    """'Sales 2024 / Q1' -> 'sales2024q1.png'"""
    stem = _CHART_STRIP.sub("", str(unique_name)).lower()
    if not stem:
        raise InvalidAssetNameError(
            f"Chart name {unique_name!r} has no alphanumeric characters."
        )
    return f"{stem}.png"


def file_link_asset_name(link_name: str, source_path: str | PurePath) -> str:
    """'Raw data', '/tmp/out/Data_v2.csv' -> 'rawdata-datav2.csv'"""
    base = PurePath(source_path).name
    name = _FILE_LINK_STRIP.sub("", f"{link_name}-{base}").lower()
    # Only dots and hyphens left would give names like '-' or '..'.
    if not name.strip(".-"):
        raise InvalidAssetNameError(
            f"Link {link_name!r} for {str(source_path)!r} has no usable characters."
        )
    return name
