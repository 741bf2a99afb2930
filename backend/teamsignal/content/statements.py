# teamsignal/content/statements.py
"""
Catalogue des énoncés Way of Work : 15 angles × 3 niveaux × 5 énoncés.

Énoncés nets et observables, au présent, vérifiables par observation.
    - Shu (守) : les fondamentaux sont-ils en place ?
    - Ha  (破) : améliore-t-on intentionnellement ?
    - Ri  (離) : crée-t-on notre propre approche ?

Contenu statique : jamais créé par les utilisateurs.
ZÉRO accès DB — importable par l'engine.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional

from teamsignal.shared.enums import WowAngle, WowLevel


@dataclass(frozen=True)
class Statement:
    id: str
    angle: WowAngle
    level: WowLevel
    text: str

    def to_dict(self) -> dict:
        return {"id": self.id, "angle": self.angle.value, "level": self.level.value, "text": self.text}


# ── Métadonnées des angles ───────────────────────────────────

ANGLES: Dict[WowAngle, Dict[str, str]] = {
    WowAngle.RETRO:                {"label": "Retro",                "description": "Are we improving? Do actions lead to change?"},
    WowAngle.PLANNING:             {"label": "Planning",             "description": "Is commitment realistic? Is the Sprint Goal clear?"},
    WowAngle.SCRUM:                {"label": "Scrum",                "description": "Are events useful? Is the framework helping?"},
    WowAngle.FLOW:                 {"label": "Flow",                 "description": "Is work moving? Are we finishing what we start?"},
    WowAngle.COLLABORATION:        {"label": "Collaboration",        "description": "Are we working together? Is knowledge shared?"},
    WowAngle.REFINEMENT:           {"label": "Refinement",           "description": "Are stories ready? Is the backlog actionable?"},
    WowAngle.OWNERSHIP:            {"label": "Ownership",            "description": "Does the team own it? Can we act without asking?"},
    WowAngle.TECHNICAL_EXCELLENCE: {"label": "Technical Excellence", "description": "Is the code getting better? Are we building quality in?"},
    WowAngle.DEMO:                 {"label": "Review",               "description": "Are stakeholders engaged? Is feedback valuable?"},
    WowAngle.OBEYA:                {"label": "Obeya",                "description": "Is work visible? Does the team align around shared visuals?"},
    WowAngle.DEPENDENCIES:         {"label": "Dependencies",         "description": "Are cross-team dependencies managed? Do handoffs work?"},
    WowAngle.PSYCHOLOGICAL_SAFETY: {"label": "Psychological Safety", "description": "Can we speak up? Is it safe to fail?"},
    WowAngle.DEVOPS:               {"label": "DevOps",               "description": "Is deployment smooth? Do we own our pipeline?"},
    WowAngle.STAKEHOLDER:          {"label": "Stakeholders",         "description": "Are stakeholders aligned? Is communication proactive?"},
    WowAngle.LEADERSHIP:           {"label": "Leadership",           "description": "Do leaders enable teams? Is direction clear?"},
}

# Angles disponibles sans abonnement (le gating lui-même est externe)
FREE_ANGLES: List[WowAngle] = [
    WowAngle.RETRO, WowAngle.PLANNING, WowAngle.SCRUM, WowAngle.FLOW, WowAngle.COLLABORATION,
]
PRO_ANGLES: List[WowAngle] = [a for a in WowAngle if a not in FREE_ANGLES]


# ── SHU (守) : apprendre les bases ────────────────────────────

_SHU = [
    Statement("scrum_shu_1", WowAngle.SCRUM, WowLevel.SHU, "The Sprint Goal was achieved last Sprint"),
    Statement("scrum_shu_2", WowAngle.SCRUM, WowLevel.SHU, "The Daily Scrum takes less than 15 minutes"),
    Statement("scrum_shu_3", WowAngle.SCRUM, WowLevel.SHU, "The Product Owner was available for questions last Sprint"),
    Statement("scrum_shu_4", WowAngle.SCRUM, WowLevel.SHU, "Sprint scope did not change after Sprint Planning"),
    Statement("scrum_shu_5", WowAngle.SCRUM, WowLevel.SHU, "The Retrospective produced at least one concrete action"),
    Statement("flow_shu_1", WowAngle.FLOW, WowLevel.SHU, "I worked on only one item at a time last week"),
    Statement("flow_shu_2", WowAngle.FLOW, WowLevel.SHU, "Items move from In Progress to Done within 3 days"),
    Statement("flow_shu_3", WowAngle.FLOW, WowLevel.SHU, "Code reviews happen within 4 hours"),
    Statement("flow_shu_4", WowAngle.FLOW, WowLevel.SHU, "I know exactly what I should work on next"),
    Statement("flow_shu_5", WowAngle.FLOW, WowLevel.SHU, "The board reflects reality right now"),
    Statement("own_shu_1", WowAngle.OWNERSHIP, WowLevel.SHU, "I know who is on-call and how to reach them"),
    Statement("own_shu_2", WowAngle.OWNERSHIP, WowLevel.SHU, "I have access to production logs"),
    Statement("own_shu_3", WowAngle.OWNERSHIP, WowLevel.SHU, "The team decides how to do the work, not external leads"),
    Statement("own_shu_4", WowAngle.OWNERSHIP, WowLevel.SHU, "When something breaks, we fix it first and blame never"),
    Statement("own_shu_5", WowAngle.OWNERSHIP, WowLevel.SHU, "I understand our team's main responsibilities"),
    Statement("collab_shu_1", WowAngle.COLLABORATION, WowLevel.SHU, "I asked for help when I was stuck"),
    Statement("collab_shu_2", WowAngle.COLLABORATION, WowLevel.SHU, "Someone asked me for help this week"),
    Statement("collab_shu_3", WowAngle.COLLABORATION, WowLevel.SHU, "I know what my teammates are working on right now"),
    Statement("collab_shu_4", WowAngle.COLLABORATION, WowLevel.SHU, "In the last Retro, everyone spoke at least once"),
    Statement("collab_shu_5", WowAngle.COLLABORATION, WowLevel.SHU, "Knowledge is documented, not just in people's heads"),
    Statement("tech_shu_1", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.SHU, "All code changes have automated tests"),
    Statement("tech_shu_2", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.SHU, "I can run the full system locally"),
    Statement("tech_shu_3", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.SHU, "We have clear coding standards that we follow"),
    Statement("tech_shu_4", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.SHU, "Documentation is updated when code changes"),
    Statement("tech_shu_5", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.SHU, "The test suite runs in under 10 minutes"),
    Statement("ref_shu_1", WowAngle.REFINEMENT, WowLevel.SHU, "Stories have clear acceptance criteria before entering the Sprint"),
    Statement("ref_shu_2", WowAngle.REFINEMENT, WowLevel.SHU, "The team understands the \"why\" behind each story"),
    Statement("ref_shu_3", WowAngle.REFINEMENT, WowLevel.SHU, "Stories are small enough to complete in 2-3 days"),
    Statement("ref_shu_4", WowAngle.REFINEMENT, WowLevel.SHU, "Refinement sessions are timeboxed and productive"),
    Statement("ref_shu_5", WowAngle.REFINEMENT, WowLevel.SHU, "The backlog has at least 2 Sprints worth of ready items"),
    Statement("plan_shu_1", WowAngle.PLANNING, WowLevel.SHU, "The Sprint Goal is clear and achievable"),
    Statement("plan_shu_2", WowAngle.PLANNING, WowLevel.SHU, "The team committed to scope they believe in"),
    Statement("plan_shu_3", WowAngle.PLANNING, WowLevel.SHU, "Capacity for planned absences was accounted for"),
    Statement("plan_shu_4", WowAngle.PLANNING, WowLevel.SHU, "Planning took less than 2 hours"),
    Statement("plan_shu_5", WowAngle.PLANNING, WowLevel.SHU, "Everyone in the team participated in planning discussions"),
    Statement("retro_shu_1", WowAngle.RETRO, WowLevel.SHU, "The last Retro produced at least one concrete action"),
    Statement("retro_shu_2", WowAngle.RETRO, WowLevel.SHU, "Retro actions from last Sprint were completed"),
    Statement("retro_shu_3", WowAngle.RETRO, WowLevel.SHU, "Everyone felt safe to speak up in the Retro"),
    Statement("retro_shu_4", WowAngle.RETRO, WowLevel.SHU, "Retro actions have clear owners"),
    Statement("retro_shu_5", WowAngle.RETRO, WowLevel.SHU, "Positive things were celebrated, not just problems"),
    Statement("demo_shu_1", WowAngle.DEMO, WowLevel.SHU, "Stakeholders attended the last Sprint Review"),
    Statement("demo_shu_2", WowAngle.DEMO, WowLevel.SHU, "The demo showed working software, not slides"),
    Statement("demo_shu_3", WowAngle.DEMO, WowLevel.SHU, "The Sprint Goal was clearly demonstrated"),
    Statement("demo_shu_4", WowAngle.DEMO, WowLevel.SHU, "Developers presented their own work"),
    Statement("demo_shu_5", WowAngle.DEMO, WowLevel.SHU, "The demo was timeboxed and focused"),
    Statement("obeya_shu_1", WowAngle.OBEYA, WowLevel.SHU, "Our team goals are visible to everyone in one place"),
    Statement("obeya_shu_2", WowAngle.OBEYA, WowLevel.SHU, "Progress toward sprint goals is updated daily on a shared board"),
    Statement("obeya_shu_3", WowAngle.OBEYA, WowLevel.SHU, "Impediments are made visible as soon as they arise"),
    Statement("obeya_shu_4", WowAngle.OBEYA, WowLevel.SHU, "Key metrics are displayed where the team can see them"),
    Statement("obeya_shu_5", WowAngle.OBEYA, WowLevel.SHU, "We have a regular cadence where the team gathers around shared visuals"),
    Statement("dep_shu_1", WowAngle.DEPENDENCIES, WowLevel.SHU, "We know which teams depend on us and which we depend on"),
    Statement("dep_shu_2", WowAngle.DEPENDENCIES, WowLevel.SHU, "Dependencies are identified before work starts"),
    Statement("dep_shu_3", WowAngle.DEPENDENCIES, WowLevel.SHU, "We communicate blockers to dependent teams within hours"),
    Statement("dep_shu_4", WowAngle.DEPENDENCIES, WowLevel.SHU, "Cross-team handoffs have clear ownership"),
    Statement("dep_shu_5", WowAngle.DEPENDENCIES, WowLevel.SHU, "We attend cross-team sync meetings when relevant"),
    Statement("psych_shu_1", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.SHU, "I can admit mistakes without fear of blame"),
    Statement("psych_shu_2", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.SHU, "Disagreement is expressed openly in team meetings"),
    Statement("psych_shu_3", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.SHU, "Questions are welcomed, not dismissed"),
    Statement("psych_shu_4", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.SHU, "Team members speak up when they see a problem"),
    Statement("psych_shu_5", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.SHU, "Nobody was interrupted or talked over in the last meeting"),
    Statement("devops_shu_1", WowAngle.DEVOPS, WowLevel.SHU, "We deploy to production at least once a week"),
    Statement("devops_shu_2", WowAngle.DEVOPS, WowLevel.SHU, "Our CI pipeline runs on every pull request"),
    Statement("devops_shu_3", WowAngle.DEVOPS, WowLevel.SHU, "Monitoring alerts go to the team, not just ops"),
    Statement("devops_shu_4", WowAngle.DEVOPS, WowLevel.SHU, "We have runbooks for common incidents"),
    Statement("devops_shu_5", WowAngle.DEVOPS, WowLevel.SHU, "Deployments require no manual steps"),
    Statement("stake_shu_1", WowAngle.STAKEHOLDER, WowLevel.SHU, "Stakeholders know when and how to reach the team"),
    Statement("stake_shu_2", WowAngle.STAKEHOLDER, WowLevel.SHU, "We share progress updates at least once per sprint"),
    Statement("stake_shu_3", WowAngle.STAKEHOLDER, WowLevel.SHU, "Stakeholder feedback is captured and added to the backlog"),
    Statement("stake_shu_4", WowAngle.STAKEHOLDER, WowLevel.SHU, "The Product Owner represents stakeholder needs in planning"),
    Statement("stake_shu_5", WowAngle.STAKEHOLDER, WowLevel.SHU, "We know who our key stakeholders are and what they need"),
    Statement("lead_shu_1", WowAngle.LEADERSHIP, WowLevel.SHU, "Leaders communicate clear priorities to their teams"),
    Statement("lead_shu_2", WowAngle.LEADERSHIP, WowLevel.SHU, "One-on-ones happen regularly and are not cancelled"),
    Statement("lead_shu_3", WowAngle.LEADERSHIP, WowLevel.SHU, "Leaders remove blockers when teams escalate"),
    Statement("lead_shu_4", WowAngle.LEADERSHIP, WowLevel.SHU, "Team members know the organizational direction"),
    Statement("lead_shu_5", WowAngle.LEADERSHIP, WowLevel.SHU, "Leaders attend team demos and retrospectives"),
]

# ── HA (破) : adapter intentionnellement ─────────────────────

_HA = [
    Statement("scrum_ha_1", WowAngle.SCRUM, WowLevel.HA, "We adapted Scrum events to better fit our context"),
    Statement("scrum_ha_2", WowAngle.SCRUM, WowLevel.HA, "The team experiments with different meeting formats"),
    Statement("scrum_ha_3", WowAngle.SCRUM, WowLevel.HA, "We measure and track our own velocity or throughput"),
    Statement("scrum_ha_4", WowAngle.SCRUM, WowLevel.HA, "Sprint length was chosen based on our delivery needs"),
    Statement("scrum_ha_5", WowAngle.SCRUM, WowLevel.HA, "We consciously break rules when it makes sense"),
    Statement("flow_ha_1", WowAngle.FLOW, WowLevel.HA, "WIP limits are enforced, not ignored"),
    Statement("flow_ha_2", WowAngle.FLOW, WowLevel.HA, "We track cycle time and act on the data"),
    Statement("flow_ha_3", WowAngle.FLOW, WowLevel.HA, "Blockers are escalated within hours, not days"),
    Statement("flow_ha_4", WowAngle.FLOW, WowLevel.HA, "We visualize bottlenecks and address them systematically"),
    Statement("flow_ha_5", WowAngle.FLOW, WowLevel.HA, "Deployments happen at least weekly"),
    Statement("own_ha_1", WowAngle.OWNERSHIP, WowLevel.HA, "I can deploy my code to production without asking permission"),
    Statement("own_ha_2", WowAngle.OWNERSHIP, WowLevel.HA, "I fixed a bug last week without being assigned to it"),
    Statement("own_ha_3", WowAngle.OWNERSHIP, WowLevel.HA, "The team owns the backlog prioritization, not just the PO"),
    Statement("own_ha_4", WowAngle.OWNERSHIP, WowLevel.HA, "I participated in an incident review this quarter"),
    Statement("own_ha_5", WowAngle.OWNERSHIP, WowLevel.HA, "I refactored code this month that I did not originally write"),
    Statement("collab_ha_1", WowAngle.COLLABORATION, WowLevel.HA, "I paired with a teammate on a task this week"),
    Statement("collab_ha_2", WowAngle.COLLABORATION, WowLevel.HA, "I received specific feedback on my work this week"),
    Statement("collab_ha_3", WowAngle.COLLABORATION, WowLevel.HA, "Disagreements are discussed openly, not avoided"),
    Statement("collab_ha_4", WowAngle.COLLABORATION, WowLevel.HA, "New team members can contribute within their first week"),
    Statement("collab_ha_5", WowAngle.COLLABORATION, WowLevel.HA, "We celebrate wins together, not just individually"),
    Statement("tech_ha_1", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.HA, "I refactored something this week without being asked"),
    Statement("tech_ha_2", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.HA, "Technical debt is tracked and prioritized"),
    Statement("tech_ha_3", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.HA, "We can roll back a bad deploy in under 5 minutes"),
    Statement("tech_ha_4", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.HA, "We review architecture decisions as a team"),
    Statement("tech_ha_5", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.HA, "Deployments are boring, not scary"),
    Statement("ref_ha_1", WowAngle.REFINEMENT, WowLevel.HA, "Technical dependencies are identified before Sprint Planning"),
    Statement("ref_ha_2", WowAngle.REFINEMENT, WowLevel.HA, "The PO prioritizes based on value, not gut feeling"),
    Statement("ref_ha_3", WowAngle.REFINEMENT, WowLevel.HA, "Edge cases are discussed during refinement, not during development"),
    Statement("ref_ha_4", WowAngle.REFINEMENT, WowLevel.HA, "Developers ask clarifying questions during refinement"),
    Statement("ref_ha_5", WowAngle.REFINEMENT, WowLevel.HA, "Stories are estimated by the whole team, not one person"),
    Statement("plan_ha_1", WowAngle.PLANNING, WowLevel.HA, "Sprint Planning ends with a shared plan, not assigned tasks"),
    Statement("plan_ha_2", WowAngle.PLANNING, WowLevel.HA, "The Sprint Goal connects to a business outcome"),
    Statement("plan_ha_3", WowAngle.PLANNING, WowLevel.HA, "We discussed how we will achieve the goal, not just what"),
    Statement("plan_ha_4", WowAngle.PLANNING, WowLevel.HA, "Dependencies on other teams were identified and addressed"),
    Statement("plan_ha_5", WowAngle.PLANNING, WowLevel.HA, "The Sprint Backlog is realistic, not aspirational"),
    Statement("retro_ha_1", WowAngle.RETRO, WowLevel.HA, "We discussed root causes, not just symptoms"),
    Statement("retro_ha_2", WowAngle.RETRO, WowLevel.HA, "The Retro format varies to keep it fresh"),
    Statement("retro_ha_3", WowAngle.RETRO, WowLevel.HA, "The Scrum Master facilitates, not dominates"),
    Statement("retro_ha_4", WowAngle.RETRO, WowLevel.HA, "We learn from what went well, not just what went wrong"),
    Statement("retro_ha_5", WowAngle.RETRO, WowLevel.HA, "The team decided on actions, not the Scrum Master"),
    Statement("demo_ha_1", WowAngle.DEMO, WowLevel.HA, "Stakeholder feedback was captured and added to the backlog"),
    Statement("demo_ha_2", WowAngle.DEMO, WowLevel.HA, "Stakeholders asked questions during the demo"),
    Statement("demo_ha_3", WowAngle.DEMO, WowLevel.HA, "The PO confirmed whether the Sprint Goal was met"),
    Statement("demo_ha_4", WowAngle.DEMO, WowLevel.HA, "Future direction was discussed based on what was learned"),
    Statement("demo_ha_5", WowAngle.DEMO, WowLevel.HA, "Incomplete work was shown transparently, not hidden"),
    Statement("obeya_ha_1", WowAngle.OBEYA, WowLevel.HA, "Our visual boards drive the conversation, not replace it"),
    Statement("obeya_ha_2", WowAngle.OBEYA, WowLevel.HA, "We update our metrics based on what we learn, not habit"),
    Statement("obeya_ha_3", WowAngle.OBEYA, WowLevel.HA, "Cross-team dependencies are visualized and actively managed"),
    Statement("obeya_ha_4", WowAngle.OBEYA, WowLevel.HA, "Our Obeya reflects current reality, not last week's truth"),
    Statement("obeya_ha_5", WowAngle.OBEYA, WowLevel.HA, "Stakeholders visit our Obeya to understand our situation"),
    Statement("dep_ha_1", WowAngle.DEPENDENCIES, WowLevel.HA, "We proactively reduce dependencies through API contracts"),
    Statement("dep_ha_2", WowAngle.DEPENDENCIES, WowLevel.HA, "Dependency risks are tracked and mitigated before they block"),
    Statement("dep_ha_3", WowAngle.DEPENDENCIES, WowLevel.HA, "We negotiate delivery timelines directly with other teams"),
    Statement("dep_ha_4", WowAngle.DEPENDENCIES, WowLevel.HA, "Integration testing with dependent teams happens regularly"),
    Statement("dep_ha_5", WowAngle.DEPENDENCIES, WowLevel.HA, "We visualize our dependency map and keep it current"),
    Statement("psych_ha_1", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.HA, "We give each other direct, honest feedback regularly"),
    Statement("psych_ha_2", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.HA, "Failed experiments are discussed as learning opportunities"),
    Statement("psych_ha_3", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.HA, "Junior members challenge senior members' ideas"),
    Statement("psych_ha_4", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.HA, "We discuss interpersonal tensions, not just technical problems"),
    Statement("psych_ha_5", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.HA, "Vulnerability is treated as strength, not weakness"),
    Statement("devops_ha_1", WowAngle.DEVOPS, WowLevel.HA, "We can deploy multiple times per day without coordination"),
    Statement("devops_ha_2", WowAngle.DEVOPS, WowLevel.HA, "Feature flags separate deployment from release"),
    Statement("devops_ha_3", WowAngle.DEVOPS, WowLevel.HA, "We own our infrastructure configuration as code"),
    Statement("devops_ha_4", WowAngle.DEVOPS, WowLevel.HA, "Mean time to recovery is under one hour"),
    Statement("devops_ha_5", WowAngle.DEVOPS, WowLevel.HA, "We review production metrics after every deployment"),
    Statement("stake_ha_1", WowAngle.STAKEHOLDER, WowLevel.HA, "We invite stakeholders to give feedback on working software"),
    Statement("stake_ha_2", WowAngle.STAKEHOLDER, WowLevel.HA, "Stakeholder expectations are managed proactively, not reactively"),
    Statement("stake_ha_3", WowAngle.STAKEHOLDER, WowLevel.HA, "We say no to requests that conflict with the Sprint Goal"),
    Statement("stake_ha_4", WowAngle.STAKEHOLDER, WowLevel.HA, "We present trade-offs and options, not just solutions"),
    Statement("stake_ha_5", WowAngle.STAKEHOLDER, WowLevel.HA, "Stakeholders trust the team to make technical decisions"),
    Statement("lead_ha_1", WowAngle.LEADERSHIP, WowLevel.HA, "Leaders create space for teams to make their own decisions"),
    Statement("lead_ha_2", WowAngle.LEADERSHIP, WowLevel.HA, "Feedback flows both ways between leaders and teams"),
    Statement("lead_ha_3", WowAngle.LEADERSHIP, WowLevel.HA, "Leaders experiment with different leadership styles"),
    Statement("lead_ha_4", WowAngle.LEADERSHIP, WowLevel.HA, "Strategic trade-offs are communicated transparently"),
    Statement("lead_ha_5", WowAngle.LEADERSHIP, WowLevel.HA, "Leaders actively coach, not just manage"),
]

# ── RI (離) : maîtrise ────────────────────────────────────────

_RI = [
    Statement("scrum_ri_1", WowAngle.SCRUM, WowLevel.RI, "We created our own cadence that transcends Scrum"),
    Statement("scrum_ri_2", WowAngle.SCRUM, WowLevel.RI, "The team self-organizes without needing a Scrum Master"),
    Statement("scrum_ri_3", WowAngle.SCRUM, WowLevel.RI, "We coach other teams on effective practices"),
    Statement("scrum_ri_4", WowAngle.SCRUM, WowLevel.RI, "Our process evolved from team experimentation"),
    Statement("scrum_ri_5", WowAngle.SCRUM, WowLevel.RI, "We deliver value continuously, not just at Sprint end"),
    Statement("flow_ri_1", WowAngle.FLOW, WowLevel.RI, "We optimize for flow across the entire value stream"),
    Statement("flow_ri_2", WowAngle.FLOW, WowLevel.RI, "We proactively identify and remove systemic bottlenecks"),
    Statement("flow_ri_3", WowAngle.FLOW, WowLevel.RI, "Lead time is predictable within a narrow range"),
    Statement("flow_ri_4", WowAngle.FLOW, WowLevel.RI, "We help other teams improve their flow"),
    Statement("flow_ri_5", WowAngle.FLOW, WowLevel.RI, "Continuous deployment is the default, not the exception"),
    Statement("own_ri_1", WowAngle.OWNERSHIP, WowLevel.RI, "I can create a new service without filing a ticket"),
    Statement("own_ri_2", WowAngle.OWNERSHIP, WowLevel.RI, "The team decided on technical approach, not a lead or architect"),
    Statement("own_ri_3", WowAngle.OWNERSHIP, WowLevel.RI, "We define our own success metrics"),
    Statement("own_ri_4", WowAngle.OWNERSHIP, WowLevel.RI, "We proactively reach out to stakeholders before they ask"),
    Statement("own_ri_5", WowAngle.OWNERSHIP, WowLevel.RI, "We sunset our own features when they no longer serve users"),
    Statement("collab_ri_1", WowAngle.COLLABORATION, WowLevel.RI, "We actively mentor team members and others outside our team"),
    Statement("collab_ri_2", WowAngle.COLLABORATION, WowLevel.RI, "Our team is sought out for advice by other teams"),
    Statement("collab_ri_3", WowAngle.COLLABORATION, WowLevel.RI, "We have created cross-team communities of practice"),
    Statement("collab_ri_4", WowAngle.COLLABORATION, WowLevel.RI, "Psychological safety is something we actively cultivate"),
    Statement("collab_ri_5", WowAngle.COLLABORATION, WowLevel.RI, "We adapt our collaboration style based on the situation"),
    Statement("tech_ri_1", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.RI, "We contribute to our organization's technical standards"),
    Statement("tech_ri_2", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.RI, "We build tools that other teams use"),
    Statement("tech_ri_3", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.RI, "Our codebase is an example others learn from"),
    Statement("tech_ri_4", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.RI, "We experiment with new technologies and share learnings"),
    Statement("tech_ri_5", WowAngle.TECHNICAL_EXCELLENCE, WowLevel.RI, "We proactively improve the developer experience for everyone"),
    Statement("ref_ri_1", WowAngle.REFINEMENT, WowLevel.RI, "We involve end users directly in refinement"),
    Statement("ref_ri_2", WowAngle.REFINEMENT, WowLevel.RI, "We challenge whether a feature should be built at all"),
    Statement("ref_ri_3", WowAngle.REFINEMENT, WowLevel.RI, "We define success metrics before starting work"),
    Statement("ref_ri_4", WowAngle.REFINEMENT, WowLevel.RI, "Our refinement practices are shared with other teams"),
    Statement("ref_ri_5", WowAngle.REFINEMENT, WowLevel.RI, "We continuously experiment with better ways to refine"),
    Statement("plan_ri_1", WowAngle.PLANNING, WowLevel.RI, "Our planning connects to long-term product vision"),
    Statement("plan_ri_2", WowAngle.PLANNING, WowLevel.RI, "We help shape the product roadmap, not just execute it"),
    Statement("plan_ri_3", WowAngle.PLANNING, WowLevel.RI, "We balance short-term delivery with long-term sustainability"),
    Statement("plan_ri_4", WowAngle.PLANNING, WowLevel.RI, "Our planning considers organizational constraints proactively"),
    Statement("plan_ri_5", WowAngle.PLANNING, WowLevel.RI, "We adapt our planning approach based on context"),
    Statement("retro_ri_1", WowAngle.RETRO, WowLevel.RI, "Our retro insights lead to organizational improvements"),
    Statement("retro_ri_2", WowAngle.RETRO, WowLevel.RI, "We facilitate retros for other teams"),
    Statement("retro_ri_3", WowAngle.RETRO, WowLevel.RI, "We create new retrospective formats"),
    Statement("retro_ri_4", WowAngle.RETRO, WowLevel.RI, "Continuous improvement is embedded in daily work, not just retros"),
    Statement("retro_ri_5", WowAngle.RETRO, WowLevel.RI, "We share our improvement journey with the organization"),
    Statement("demo_ri_1", WowAngle.DEMO, WowLevel.RI, "Our demos influence product strategy"),
    Statement("demo_ri_2", WowAngle.DEMO, WowLevel.RI, "We demo to external customers, not just internal stakeholders"),
    Statement("demo_ri_3", WowAngle.DEMO, WowLevel.RI, "Our demo format has been adopted by other teams"),
    Statement("demo_ri_4", WowAngle.DEMO, WowLevel.RI, "We gather quantitative feedback, not just qualitative"),
    Statement("demo_ri_5", WowAngle.DEMO, WowLevel.RI, "We demonstrate impact on business outcomes, not just features"),
    Statement("obeya_ri_1", WowAngle.OBEYA, WowLevel.RI, "Our visual management style has been adopted by other teams"),
    Statement("obeya_ri_2", WowAngle.OBEYA, WowLevel.RI, "We connect team-level visuals to organizational strategy"),
    Statement("obeya_ri_3", WowAngle.OBEYA, WowLevel.RI, "Our Obeya evolves as our team's needs change"),
    Statement("obeya_ri_4", WowAngle.OBEYA, WowLevel.RI, "We use our visual space to facilitate strategic conversations"),
    Statement("obeya_ri_5", WowAngle.OBEYA, WowLevel.RI, "We coach other teams on effective visual management"),
    Statement("dep_ri_1", WowAngle.DEPENDENCIES, WowLevel.RI, "We have eliminated most hard dependencies through decoupling"),
    Statement("dep_ri_2", WowAngle.DEPENDENCIES, WowLevel.RI, "We help other teams become less dependent on us"),
    Statement("dep_ri_3", WowAngle.DEPENDENCIES, WowLevel.RI, "Our architecture decisions consider cross-team impact"),
    Statement("dep_ri_4", WowAngle.DEPENDENCIES, WowLevel.RI, "We contribute to organization-wide dependency management"),
    Statement("dep_ri_5", WowAngle.DEPENDENCIES, WowLevel.RI, "We proactively refactor shared interfaces to reduce coupling"),
    Statement("psych_ri_1", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.RI, "We actively create space for dissenting opinions"),
    Statement("psych_ri_2", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.RI, "Our team culture of safety has been adopted by other teams"),
    Statement("psych_ri_3", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.RI, "We address systemic barriers to psychological safety"),
    Statement("psych_ri_4", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.RI, "We facilitate difficult conversations across the organization"),
    Statement("psych_ri_5", WowAngle.PSYCHOLOGICAL_SAFETY, WowLevel.RI, "Newcomers report feeling safe within their first week"),
    Statement("devops_ri_1", WowAngle.DEVOPS, WowLevel.RI, "Continuous deployment is our default, not a goal"),
    Statement("devops_ri_2", WowAngle.DEVOPS, WowLevel.RI, "We contribute to the organization's platform and tooling"),
    Statement("devops_ri_3", WowAngle.DEVOPS, WowLevel.RI, "Our deployment pipeline is a reference for other teams"),
    Statement("devops_ri_4", WowAngle.DEVOPS, WowLevel.RI, "We proactively improve observability across services"),
    Statement("devops_ri_5", WowAngle.DEVOPS, WowLevel.RI, "We experiment with chaos engineering or resilience testing"),
    Statement("stake_ri_1", WowAngle.STAKEHOLDER, WowLevel.RI, "We co-create the product roadmap with stakeholders"),
    Statement("stake_ri_2", WowAngle.STAKEHOLDER, WowLevel.RI, "Stakeholders advocate for the team's needs to leadership"),
    Statement("stake_ri_3", WowAngle.STAKEHOLDER, WowLevel.RI, "We influence strategic decisions beyond our team boundary"),
    Statement("stake_ri_4", WowAngle.STAKEHOLDER, WowLevel.RI, "Our stakeholder communication model has been adopted by others"),
    Statement("stake_ri_5", WowAngle.STAKEHOLDER, WowLevel.RI, "We actively seek out new stakeholders we should engage with"),
    Statement("lead_ri_1", WowAngle.LEADERSHIP, WowLevel.RI, "Leaders develop other leaders within the organization"),
    Statement("lead_ri_2", WowAngle.LEADERSHIP, WowLevel.RI, "Our leadership approach has been recognized outside the organization"),
    Statement("lead_ri_3", WowAngle.LEADERSHIP, WowLevel.RI, "Leaders facilitate cross-team collaboration at a systemic level"),
    Statement("lead_ri_4", WowAngle.LEADERSHIP, WowLevel.RI, "Psychological safety is a leadership KPI, not just a value"),
    Statement("lead_ri_5", WowAngle.LEADERSHIP, WowLevel.RI, "Leaders question and adapt the organizational structure"),
]

ALL_STATEMENTS: List[Statement] = _SHU + _HA + _RI

STATEMENTS_BY_ID: Dict[str, Statement] = {s.id: s for s in ALL_STATEMENTS}


def get_statements(angle: WowAngle, level: WowLevel = WowLevel.SHU) -> List[Statement]:
    return [s for s in ALL_STATEMENTS if s.angle == angle and s.level == level]


def get_statement(statement_id: str) -> Optional[Statement]:
    return STATEMENTS_BY_ID.get(statement_id)


def get_statements_for_level(level: WowLevel) -> List[Statement]:
    return [s for s in ALL_STATEMENTS if s.level == level]
