"""JSON export of a dashboard snapshot.

Why JSON:
- Interoperability with other tools and pipelines.
- Keeps a record of what the remote service returned, with the same wire
  names it uses.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.services.dashboard import DashboardView


def export_dashboard_json(*, view: DashboardView, output_path: Path) -> Path:
    """Export `DashboardView` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = view.to_dict()
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
