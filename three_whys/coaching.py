# coaching.py
# Role-adaptive coaching and band-keyed next actions.
#
# Role dispatch is an ordered list of (patterns, key) pairs. First match wins,
# so specific patterns must sit above looser ones ("chief product" before
# "product", "sales" before "president").

from __future__ import annotations

from typing import Any, Dict, List, Tuple

ROLE_RULES: List[Tuple[Tuple[str, ...], str]] = [
    (("chief product", "cpo", "vp product", "vp of product", "head of product",
      "director of product", "product director"), "product_leader"),
    (("ceo", "chief executive", "founder"), "executive"),
    (("sales", "revenue", "business development", "account executive", "bdr", "sdr"), "sales"),
    (("marketing", "cmo", "brand", "demand gen", "growth"), "marketing"),
    (("customer success", "customer experience", "account manag"), "customer_success"),
    (("product",), "product"),
    (("president", "managing director", "general manager", "partner"), "executive"),
]

ROLE_GUIDANCE: Dict[str, str] = {
    "executive": (
        "As an executive, your job is to own the narrative, not draft every asset. Make sure "
        "the case for change and the reason to act now are stated in board-level terms: risk, "
        "growth and cost of inaction. Sponsor one message house that marketing and sales "
        "both sign off, and ask for win-loss evidence each quarter."
    ),
    "product_leader": (
        "As a product leader, connect the roadmap to the buyer's case for change. Frame "
        "releases around the unconsidered needs they address rather than the features they "
        "add, and give marketing the proof and customer outcomes that make your "
        "differentiators defensible. Review positioning whenever a competitor ships a "
        "similar capability."
    ),
    "sales": (
        "As a sales leader, your team needs a repeatable opening that reframes the buyer's "
        "problem before any demo. Build talk tracks around triggers and cost of delay, "
        "practise telling customer stories with the buyer as hero, and feed objections from "
        "live deals back into the messaging so it stays grounded."
    ),
    "marketing": (
        "As a marketer, you are the custodian of the Three Whys. Turn the case for change "
        "into a point-of-view campaign, time content to the triggers that create urgency, "
        "and audit every asset for clarity and buyer-as-hero framing. Measure which "
        "messages move pipeline, not only engagement."
    ),
    "customer_success": (
        "In customer success, you hold the proof that powers every other message. Capture "
        "before-and-after outcomes in the customer's own words, identify which "
        "differentiators customers actually value, and share expansion triggers with sales "
        "so the why-now story reflects real customer moments."
    ),
    "product": (
        "As a product practitioner, make sure every feature story answers why it matters to "
        "the buyer. Write release notes and enablement in outcome language, flag when a "
        "capability creates a genuine differentiator, and bring user evidence to messaging "
        "reviews so claims stay honest."
    ),
    "generic": (
        "Whatever your role, start by aligning your team on one sentence for each of the "
        "Three Whys: why change, why now and why your company. Test those sentences with "
        "customers, remove anything that sounds like a competitor could say it, and make "
        "the buyer the subject of the story."
    ),
}

# Fixed coaching fields, identical for every report.
COACHING_FRAMEWORK: Dict[str, str] = {
    "headline": (
        "Lead with the buyer's problem, not your product. A strong headline names the status "
        "quo risk in the buyer's own words and hints at a better way."
    ),
    "urgency": (
        "Tie urgency to a real trigger and a quantified cost of delay so waiting feels like "
        "a decision with a price, not a neutral choice."
    ),
    "differentiators": (
        "Keep only differentiators that are unique to you, important to the buyer and "
        "defensible with proof. Everything else is table stakes."
    ),
    "valueOutline": (
        "Outline value as a short story: current state, hidden cost, new way, proof, and "
        "the outcome the buyer achieves as the hero."
    ),
    "valueProposition": (
        "For [target buyer] who struggle with [status quo problem], we help you [outcome] "
        "before [trigger or deadline], unlike [alternative], because [defensible "
        "differentiator]."
    ),
}

NEXT_ACTIONS: Dict[str, List[str]] = {
    "None": [
        "Interview three recent customers about why they bought and what they were doing before.",
        "Write one sentence each for why change, why now and why your company.",
        "Identify the single buyer role that feels the problem most acutely.",
        "Retake this assessment once the three sentences are agreed by your team.",
    ],
    "Emerging": [
        "Quantify the cost of the status quo with at least one customer-backed number.",
        "Name one trigger event that makes buyers act this quarter.",
        "Replace generic claims with two differentiators you can prove.",
        "Rewrite your homepage headline with the buyer as the subject.",
    ],
    "Basic": [
        "Add an unconsidered need that reframes how buyers see their problem.",
        "Build a cost-of-delay model sales can walk through with prospects.",
        "Turn two customer results into short buyer-as-hero stories.",
        "Restructure key assets as problem, urgency, difference, outcome.",
    ],
    "Advanced": [
        "Create role-specific versions of the narrative for executives and practitioners.",
        "Equip champions with an internal business case template.",
        "Run a win-loss review to confirm which differentiators decide deals.",
    ],
    "Leading": [
        "Establish a messaging owner and a quarterly review of the message house.",
        "Refresh proof points and retire differentiators that have become table stakes.",
        "Publish customer hero stories and feed their language back into messaging.",
    ],
}


def role_key(role: str) -> str:
    text = (role or "").lower()
    for patterns, key in ROLE_RULES:
        if any(p in text for p in patterns):
            return key
    return "generic"


def role_guidance(role: str) -> str:
    return ROLE_GUIDANCE[role_key(role)]


def next_actions(band: str) -> List[str]:
    return list(NEXT_ACTIONS.get(band, NEXT_ACTIONS["None"]))


def build_coaching(role: str, band: str) -> Dict[str, Any]:
    return {
        "role": role_key(role),
        "guidance": role_guidance(role),
        **COACHING_FRAMEWORK,
        "nextActions": next_actions(band),
    }
