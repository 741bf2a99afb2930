# teamsignal/content/experiments.py
"""
Table de règles des expériences suggérées : (angle, zone) → texte.

Aucune génération libre : la synthèse reste déterministe.
Une couche de reformulation éventuelle (coach) est hors périmètre.

La table est EXHAUSTIVE : _validate_rule_table() est appelée à l'import
et lève si un couple (angle, zone) manque. Ajouter un angle à WowAngle
sans compléter la table casse l'import, jamais silencieusement.
"""
from typing import Dict

from teamsignal.shared.enums import WowAngle, Zone


# ── Libellés de focus par angle ──────────────────────────────

FOCUS_AREAS: Dict[WowAngle, str] = {
    WowAngle.SCRUM:                "Scrum events",
    WowAngle.FLOW:                 "Flow of work",
    WowAngle.OWNERSHIP:            "Team ownership",
    WowAngle.COLLABORATION:        "Collaboration",
    WowAngle.TECHNICAL_EXCELLENCE: "Technical quality",
    WowAngle.REFINEMENT:           "Backlog refinement",
    WowAngle.PLANNING:             "Sprint planning",
    WowAngle.RETRO:                "Retrospective follow-through",
    WowAngle.DEMO:                 "Sprint review",
    WowAngle.OBEYA:                "Visual management",
    WowAngle.DEPENDENCIES:         "Cross-team dependencies",
    WowAngle.PSYCHOLOGICAL_SAFETY: "Psychological safety",
    WowAngle.DEVOPS:               "Delivery pipeline",
    WowAngle.STAKEHOLDER:          "Stakeholder alignment",
    WowAngle.LEADERSHIP:           "Leadership support",
}


# ── Expériences (angle × zone) ───────────────────────────────

EXPERIMENTS: Dict[WowAngle, Dict[Zone, str]] = {
    WowAngle.SCRUM: {
        Zone.CRITICAL:  "Timebox every Scrum event next Sprint and end each one with a single written outcome.",
        Zone.ATTENTION: "Write the Sprint Goal on the board and open every Daily Scrum by checking progress against it.",
        Zone.STABLE:    "Pick the least useful event and redesign its format for one Sprint.",
        Zone.THRIVING:  "Invite another team to observe one event and give feedback on what they would copy.",
    },
    WowAngle.FLOW: {
        Zone.CRITICAL:  "Set a WIP limit of one item per person for the next two weeks.",
        Zone.ATTENTION: "Stop starting, start finishing: swarm on the oldest item every morning.",
        Zone.STABLE:    "Track cycle time per item for one Sprint and discuss the slowest three.",
        Zone.THRIVING:  "Lower the team WIP limit by one and watch what breaks.",
    },
    WowAngle.OWNERSHIP: {
        Zone.CRITICAL:  "List the last five decisions that needed outside approval and pick one the team will own from now on.",
        Zone.ATTENTION: "Let a different team member facilitate each event for one Sprint.",
        Zone.STABLE:    "Agree on a decision space: write down what the team decides without asking.",
        Zone.THRIVING:  "Let the team set its own improvement goal for the next quarter and report on it.",
    },
    WowAngle.COLLABORATION: {
        Zone.CRITICAL:  "Pair on every item started next week.",
        Zone.ATTENTION: "Hold a one-hour knowledge-sharing session on the area only one person knows.",
        Zone.STABLE:    "Rotate who picks up unfamiliar work so nobody stays in a silo.",
        Zone.THRIVING:  "Try a mob-programming session on the next complex item.",
    },
    WowAngle.TECHNICAL_EXCELLENCE: {
        Zone.CRITICAL:  "Reserve a fixed slice of every Sprint for the most painful piece of technical debt.",
        Zone.ATTENTION: "Add an automated test for every bug fixed next Sprint.",
        Zone.STABLE:    "Agree on one quality metric and show it at every Review.",
        Zone.THRIVING:  "Run a code-quality kata together and share the learnings with another team.",
    },
    WowAngle.REFINEMENT: {
        Zone.CRITICAL:  "Do not pull any story into the Sprint without acceptance criteria.",
        Zone.ATTENTION: "Hold a short mid-Sprint refinement to keep two Sprints of ready work.",
        Zone.STABLE:    "Split every story larger than three days before Planning.",
        Zone.THRIVING:  "Invite a user into refinement once to challenge the backlog.",
    },
    WowAngle.PLANNING: {
        Zone.CRITICAL:  "Plan only 70 % of last Sprint's capacity and protect the Sprint Goal.",
        Zone.ATTENTION: "End Planning by having each member restate the Sprint Goal in one sentence.",
        Zone.STABLE:    "Compare planned versus done for three Sprints and adjust how the team forecasts.",
        Zone.THRIVING:  "Let the team draft the Sprint Goal before the Product Owner proposes one.",
    },
    WowAngle.RETRO: {
        Zone.CRITICAL:  "Leave the next Retrospective with exactly one action, an owner and a date.",
        Zone.ATTENTION: "Open each Retrospective by reviewing the actions from the previous one.",
        Zone.STABLE:    "Change the Retrospective format to surface a topic the team keeps avoiding.",
        Zone.THRIVING:  "Let a team member design and facilitate the next Retrospective.",
    },
    WowAngle.DEMO: {
        Zone.CRITICAL:  "Show working software at the next Review, no slides.",
        Zone.ATTENTION: "Personally invite two stakeholders and ask each for one concrete piece of feedback.",
        Zone.STABLE:    "Turn the Review feedback into backlog items before the session ends.",
        Zone.THRIVING:  "Let stakeholders try the product hands-on during the Review.",
    },
    WowAngle.OBEYA: {
        Zone.CRITICAL:  "Put all current work on one visible board and update it daily.",
        Zone.ATTENTION: "Add blockers and risks to the board and review them at the Daily Scrum.",
        Zone.STABLE:    "Hold one standing meeting in front of the board instead of a meeting room.",
        Zone.THRIVING:  "Open the board to other teams and collect their questions for a week.",
    },
    WowAngle.DEPENDENCIES: {
        Zone.CRITICAL:  "Map every external dependency of the current Sprint and name a contact for each.",
        Zone.ATTENTION: "Set up a short weekly sync with the team you wait on most.",
        Zone.STABLE:    "Flag dependencies during refinement, before the story reaches Planning.",
        Zone.THRIVING:  "Propose removing one dependency by moving the skill into the team.",
    },
    WowAngle.PSYCHOLOGICAL_SAFETY: {
        Zone.CRITICAL:  "Start the next Retrospective with an anonymous safety check and discuss the result.",
        Zone.ATTENTION: "Share one recent mistake and what it taught you at the next team meeting.",
        Zone.STABLE:    "Agree on how the team disagrees and write it down as a working agreement.",
        Zone.THRIVING:  "Run a blameless review of the next incident and share it outside the team.",
    },
    WowAngle.DEVOPS: {
        Zone.CRITICAL:  "Write down every manual step of a release and automate the most error-prone one.",
        Zone.ATTENTION: "Deploy at least once a week, even with a small change.",
        Zone.STABLE:    "Measure lead time from commit to production and share it at the Review.",
        Zone.THRIVING:  "Try releasing behind a feature flag to decouple deploy from release.",
    },
    WowAngle.STAKEHOLDER: {
        Zone.CRITICAL:  "Identify the three most important stakeholders and agree on how they get updates.",
        Zone.ATTENTION: "Send a short written update after every Sprint, before anyone asks.",
        Zone.STABLE:    "Ask stakeholders to rank the top of the backlog together once a month.",
        Zone.THRIVING:  "Invite a stakeholder to one Planning to share the context behind priorities.",
    },
    WowAngle.LEADERSHIP: {
        Zone.CRITICAL:  "Ask leadership to restate the team's top priority and compare it with the backlog.",
        Zone.ATTENTION: "Schedule a short monthly session where the team can raise impediments to leadership.",
        Zone.STABLE:    "Agree with leadership on which decisions they delegate to the team.",
        Zone.THRIVING:  "Invite a leader to a Retrospective as a listener only.",
    },
}


def _validate_rule_table() -> None:
    missing_focus = [a.value for a in WowAngle if a not in FOCUS_AREAS]
    if missing_focus:
        raise RuntimeError(f"FOCUS_AREAS incomplet : {missing_focus}")

    missing = [
        f"{angle.value}/{zone.value}"
        for angle in WowAngle
        for zone in Zone
        if zone not in EXPERIMENTS.get(angle, {})
    ]
    if missing:
        raise RuntimeError(f"EXPERIMENTS incomplet : {missing}")


_validate_rule_table()


def get_experiment(angle: WowAngle, zone: Zone) -> str:
    return EXPERIMENTS[angle][zone]


def get_focus_area(angle: WowAngle) -> str:
    return FOCUS_AREAS[angle]
