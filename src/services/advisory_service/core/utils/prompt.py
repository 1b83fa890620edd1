from __future__ import annotations

from services.association_rule_service import (
    INCOMPATIBLE_CHEMICAL_PAIRS,
    MAX_DISTINCT_CHEMICALS_PER_WELL,
)
from services.projection_service import SystemSnapshot

_PROMPT_TEMPLATE = """\
You are an analyst for oilfield chemical injection systems.
Review the JSON snapshot of one injection site below.

Operating rules:
{rules}

Snapshot:
{snapshot}

Write a brief executive summary in Markdown covering:
- Operational efficiency, focusing on the running (ACTIVE) associations.
- Safety warnings, checking strictly for incompatible chemicals ACTIVE on the same well.
- Logistics alerts for low tank volumes.
- Recommendations.

Keep it concise.
"""


def build_advisory_prompt(
    snapshot: SystemSnapshot, low_volume_threshold: float = 0.2
) -> str:
    rules = [
        f"{first} and {second} are incompatible and must never be ACTIVE on the same well at the same time."
        for first, second in INCOMPATIBLE_CHEMICAL_PAIRS
    ]
    rules.append(
        f"A well may not be plumbed for more than {MAX_DISTINCT_CHEMICALS_PER_WELL} different chemicals."
    )
    rules.append(
        f"A tank below {low_volume_threshold:.0%} of its capacity is a low-volume alert."
    )
    rules.append("Chemical is only delivered while the association status is ACTIVE.")

    return _PROMPT_TEMPLATE.format(
        rules="\n".join(f"{i}. {rule}" for i, rule in enumerate(rules, start=1)),
        snapshot=snapshot.model_dump_json(indent=2),
    )
