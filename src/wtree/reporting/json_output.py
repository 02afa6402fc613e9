"""JSON rendering for ``--json`` output."""

from __future__ import annotations

import json

from wtree.constants.reporting import JSON_INDENT


def render_json(payload: object) -> str:
    return json.dumps(payload, indent=JSON_INDENT)
