"""
FATIGUE ACTION GUIDELINES

Required actions for each fatigue level. Shown next to every assessment
so the worker and supervisor know what controls apply.

Strictly advisory:
- No enforcement
- No notification
"""

from typing import Dict, List

from app.domain.models import FatigueLevel

# -------------------------------------------------------------------
# Stop-work flags
# -------------------------------------------------------------------

STOP_WORK_LEVELS = (FatigueLevel.HIGH, FatigueLevel.EXTREME)

# -------------------------------------------------------------------
# Actions
# -------------------------------------------------------------------

ACTION_GUIDELINES: Dict[FatigueLevel, str] = {
    FatigueLevel.LOW: (
        "Good to go? Continue to monitor fatigue. Note the assessment on HazChat."
    ),
    FatigueLevel.MODERATE: (
        "Discuss with team/crew, decide on appropriate controls. Consider whether "
        "high risk tasks should occur. Advise Supervisor if appropriate. Controls may "
        "include self and peer monitoring, task rotation, increased breaks, pacing "
        "work load. Note the assessment and actions on HazChat."
    ),
    FatigueLevel.HIGH: (
        "Stop Work. Discuss controls with crew/team and with Supervisor. High risk "
        "tasks should not be performed. Controls may include increased supervision, "
        "task re-assignment, buddy check, arrange back-up, transport alternatives may "
        "be required. Note the assessment and actions on HazChat."
    ),
    FatigueLevel.EXTREME: (
        "Stop Work (or do not commence). Discuss contingency with supervisor. Controls "
        "are unlikely to be sufficient. Make arrangements to convey worker home. "
        "Continuing with any work requires GM approval. Note the assessment and "
        "actions on HazChat."
    ),
}


def get_guideline(level: FatigueLevel) -> dict:
    """
    Guideline entry for one level.

    Returns:
        dict with keys:
        - level
        - stop_work
        - action
    """
    return {
        "level": level.value,
        "stop_work": level in STOP_WORK_LEVELS,
        "action": ACTION_GUIDELINES[level],
    }


def list_guidelines() -> List[dict]:
    """All guidelines, least to most severe"""
    return [get_guideline(level) for level in FatigueLevel]
