"""Human-readable operation references: ``WH/<prefix>/<sequence>``."""

from __future__ import annotations

import re

from wms.domain.model.operation import Operation, OperationType

_REFERENCE_RE = re.compile(r"^WH/(?P<prefix>[A-Z]+)/(?P<seq>\d+)$")


def next_reference(operations: list[Operation], op_type: OperationType) -> str:
    """Continue the per-prefix sequence after its highest existing number."""
    prefix = op_type.reference_prefix
    highest = 0
    for op in operations:
        match = _REFERENCE_RE.match(op.reference)
        if match and match.group("prefix") == prefix:
            highest = max(highest, int(match.group("seq")))
    return f"WH/{prefix}/{highest + 1:05d}"
