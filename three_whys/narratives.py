"""
Narrative tables for the six Three Whys dimensions.

Each (dimension, level) pair carries a rationale ("why this level") and an
advancement note ("how to reach the next level"). Text is written per
dimension: "Why now" talks about triggers and timing, "Clarity" about plain
language and structure, and so on. The tables are read-only module data.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .dimensions import (
    BUYER_AS_HERO,
    CLARITY,
    EMOTION_LOGIC,
    WHY_CHANGE,
    WHY_NOW,
    WHY_YOUR_COMPANY,
)

Narrative = Tuple[str, str]

PLACEHOLDER: Narrative = ("", "")


_WHY_CHANGE: Dict[str, Narrative] = {
    "None": (
        "No case for leaving the status quo was given. Without naming what is broken in "
        "the buyer's current approach, prospects default to doing nothing, which remains "
        "the most common competitor in any B2B deal.",
        "Write down the single biggest problem your buyers live with today and what it "
        "costs them in time, money or risk. One honest sentence about the status quo is "
        "the starting point for every other message.",
    ),
    "Emerging": (
        "A reason to change is hinted at, but it reads as a general complaint rather than "
        "a specific, costly problem. Buyers can agree with it and still see no reason to "
        "disrupt the way they work today.",
        "Turn the complaint into a problem statement: who feels it, how often, and what "
        "it costs. Add one unconsidered need the buyer has not framed yet so the status "
        "quo starts to look unsafe instead of merely imperfect.",
    ),
    "Basic": (
        "The status-quo problem is named and partly quantified. The argument for change "
        "holds together, but it leans on familiar pain points that competitors also "
        "describe, so it does not yet reframe how the buyer sees the problem.",
        "Introduce a reframe: show the buyer a hidden cost or blind spot in their current "
        "approach that they had not connected to the problem. Support it with a number "
        "or customer example they can repeat internally.",
    ),
    "Advanced": (
        "The answer builds a credible, evidence-backed case against the status quo and "
        "surfaces at least one unconsidered need. Buyers would recognise their situation "
        "and understand why staying put carries real risk.",
        "Tighten the case into a repeatable story arc: current state, hidden cost, "
        "consequence of inaction, new way. Test it with customers and keep only the proof "
        "points that consistently change how they describe their own problem.",
    ),
    "Leading": (
        "The case for change is specific, quantified and reframes the buyer's thinking. "
        "It makes the status quo feel untenable and gives champions language they can "
        "reuse internally to build consensus for a decision.",
        "Keep the case current: refresh proof points each quarter, track which reframes "
        "win deals, and equip sales with short and long versions so every conversation "
        "opens with the same argument for change.",
    ),
}

_WHY_NOW: Dict[str, Narrative] = {
    "None": (
        "No urgency was described. Without a trigger event, deadline or cost of delay, "
        "buyers have no reason to act this quarter rather than next year, and deals stall "
        "even when the need is real.",
        "List the events that make your buyers start looking: regulation dates, budget "
        "cycles, leadership changes, growth milestones. Pick the most common one and "
        "describe what waiting another six months costs.",
    ),
    "Emerging": (
        "Timing is mentioned in passing, but the urgency is generic, such as market "
        "pressure or staying competitive. There is no concrete trigger or deadline that "
        "would move a purchase into the current budget cycle.",
        "Anchor urgency to a dated or measurable trigger. Quantify the cost of delay per "
        "month or quarter so the buyer can see that waiting is itself a decision with a "
        "price attached.",
    ),
    "Basic": (
        "A real trigger is identified and linked to the buyer's calendar, but the cost of "
        "inaction is asserted rather than shown. Buyers understand why now is sensible, "
        "not why later is expensive.",
        "Pair each trigger with evidence of what happened to organisations that waited. "
        "Build a simple cost-of-delay calculation sales can walk through with the buyer "
        "using the buyer's own numbers.",
    ),
    "Advanced": (
        "Urgency is tied to specific triggers and a quantified cost of delay. The timing "
        "argument is persuasive and maps to moments in the buyer's planning cycle when a "
        "decision can actually be made.",
        "Map triggers to segments and stages of the buying journey. Time outreach and "
        "content to those windows, and track which triggers convert fastest so the "
        "urgency story stays grounded in outcomes.",
    ),
    "Leading": (
        "The answer makes acting now the obvious choice: clear triggers, a quantified cost "
        "of waiting, and a window that will close. Timing is framed around the buyer's "
        "priorities rather than the seller's quota.",
        "Operationalise the timing story: monitor trigger signals in your data, alert "
        "sales when they appear, and keep a library of time-bound proof that shows what "
        "early movers gained over late adopters.",
    ),
}

_WHY_YOUR_COMPANY: Dict[str, Narrative] = {
    "None": (
        "No differentiation was offered. Without a reason to choose you over alternatives, "
        "including building in-house or doing nothing, buyers compare on price and "
        "features and the decision becomes a procurement exercise.",
        "Ask three recent customers why they chose you over the alternatives. Write down "
        "the capability they mention that competitors cannot easily claim, and connect it "
        "to the problem your buyers most want solved.",
    ),
    "Emerging": (
        "Strengths are listed, but they are claims any competitor could make, such as "
        "quality, service or innovation. Buyers hear parity, not a distinct reason to "
        "trust your company with this problem.",
        "Replace generic claims with one or two differentiators that are unique, "
        "important to the buyer and defensible with proof. Tie each one directly to the "
        "unconsidered need raised in your case for change.",
    ),
    "Basic": (
        "Differentiators are named and partly relevant, but they are described as "
        "features rather than outcomes. The link between what makes you different and "
        "what the buyer gains is left for the buyer to work out.",
        "Translate each differentiator into a buyer outcome and back it with a customer "
        "result. Show why the alternatives cannot deliver the same outcome in the same "
        "way, rather than just stating that you are better.",
    ),
    "Advanced": (
        "The answer presents differentiators that are unique, valued and supported by "
        "proof, and links them to buyer outcomes. It is clear why your company is better "
        "placed than the alternatives for this particular problem.",
        "Stress-test the differentiators against each competitor and the do-nothing "
        "option. Build short proof stories for each and make sure sales can explain the "
        "difference in one sentence without slides.",
    ),
    "Leading": (
        "Your company's position is distinctive and defensible. Differentiators are "
        "unique, relevant and proven, and they flow naturally from the case for change so "
        "the buyer sees you as the logical answer to the problem.",
        "Protect the position: watch competitor messaging for convergence, retire "
        "differentiators that become table stakes, and keep investing in the proof that "
        "makes your strongest claim impossible to copy.",
    ),
}

_EMOTION_LOGIC: Dict[str, Narrative] = {
    "None": (
        "Neither the emotional nor the rational side of the decision was addressed. B2B "
        "buyers need to feel personal confidence and also justify the purchase with "
        "numbers, and this answer gives them neither.",
        "Write one line on how the buyer feels about the problem today, such as exposed, "
        "frustrated or stretched, and one line on the measurable business result you "
        "deliver. Keep both visible in every message.",
    ),
    "Emerging": (
        "The message leans on one side only: either feelings and aspiration without "
        "evidence, or specifications and figures without any sense of what is at stake "
        "personally for the people making the decision.",
        "Add the missing half. If the message is all logic, name the personal risk or "
        "relief for the buyer. If it is all emotion, support it with a metric, benchmark "
        "or ROI figure a finance reviewer would accept.",
    ),
    "Basic": (
        "Both emotion and logic appear, but they sit side by side rather than working "
        "together. The emotional hook and the business case are not sequenced, so the "
        "message feels like two separate pitches.",
        "Sequence the story: open with the emotional stakes to earn attention, then move "
        "to the rational proof that justifies the decision. Make the numbers answer the "
        "worry you raised at the start.",
    ),
    "Advanced": (
        "The answer balances emotional resonance with rational justification and moves "
        "from one to the other deliberately. Buyers are likely to feel the stakes and be "
        "able to defend the choice to colleagues.",
        "Tailor the balance by role: more personal risk and reputation for executives, "
        "more operational proof for practitioners. Test which emotional frames lift "
        "response rates without weakening the business case.",
    ),
    "Leading": (
        "Emotion and logic reinforce each other throughout. The message makes the buyer "
        "feel safe and ambitious at the same time and gives them defensible evidence, so "
        "the decision is both wanted and justified.",
        "Codify the pattern in messaging guidelines so marketing and sales use the same "
        "emotional hooks and proof points. Review win and loss notes regularly to keep "
        "the balance aligned with how buyers actually decide.",
    ),
}

_BUYER_AS_HERO: Dict[str, Narrative] = {
    "None": (
        "The buyer does not appear in the story. Without showing who succeeds and how, "
        "the message cannot help a champion picture their own win or sell the idea "
        "inside their organisation.",
        "Rewrite one paragraph with the buyer as the subject of every sentence: what they "
        "decide, what they achieve, how they are seen afterwards. Move your company into "
        "the supporting role of guide.",
    ),
    "Emerging": (
        "The message is mostly about your company, its history, products and awards. The "
        "buyer is mentioned, but as an audience for your story rather than the person who "
        "drives the outcome.",
        "Count how often you say we versus you and flip the ratio. Describe the "
        "transformation from the buyer's point of view and position your product as the "
        "tool that makes their success possible.",
    ),
    "Basic": (
        "The buyer is positioned as the beneficiary, but not yet the hero. Outcomes are "
        "described in general terms, so a champion cannot easily see the personal and "
        "professional win they would get from leading the change.",
        "Describe the before-and-after for the specific buyer role: the recognition, "
        "control or time they gain. Use a customer story told from the champion's "
        "perspective rather than the vendor's.",
    ),
    "Advanced": (
        "The buyer is clearly the hero, with your company as the guide. The answer shows "
        "the buyer's journey from problem to success and gives champions a story they "
        "can tell internally with themselves at the centre.",
        "Equip champions directly: provide internal-facing summaries, business case "
        "templates and stakeholder talking points so the hero can win the internal "
        "argument without you in the room.",
    ),
    "Leading": (
        "The buyer's success is the whole narrative. Champions can see their path, the "
        "obstacles and their reward, and your company shows up exactly where guidance and "
        "proof are needed, and nowhere else.",
        "Turn customer heroes into proof: publish their stories in their words, invite "
        "them to peer forums, and feed their language back into messaging so new buyers "
        "recognise themselves immediately.",
    ),
}

_CLARITY: Dict[str, Narrative] = {
    "None": (
        "There is not enough content to judge clarity. A message that cannot be stated "
        "plainly cannot be repeated by sales or understood by a busy buyer skimming "
        "between meetings.",
        "Write your value proposition in one sentence of under twenty-five words using "
        "words your buyer would use. If it needs jargon or a second clause to make sense, "
        "simplify it until it does not.",
    ),
    "Emerging": (
        "The core point is present but buried in jargon, qualifiers or long sentences. A "
        "buyer would need to work to extract what you do, for whom and why it matters, "
        "and most will not.",
        "Cut acronyms and hedging words, split long sentences, and lead with the outcome. "
        "Read the message aloud: anything you would not say to a customer over coffee "
        "should be rewritten.",
    ),
    "Basic": (
        "The message is understandable and mostly plain, but it lacks a clear structure. "
        "Ideas arrive in the order they occurred to the writer rather than the order a "
        "buyer needs to follow the argument.",
        "Impose a simple structure: problem, urgency, difference, outcome. Give each part "
        "one sentence and one proof point, and remove anything that does not support the "
        "part it sits in.",
    ),
    "Advanced": (
        "The answer is clear, concise and well structured. A buyer could restate the main "
        "point after one read, and the language is concrete enough for sales to use "
        "without rewriting it.",
        "Create tiered versions: a one-line headline, a thirty-second spoken version and a "
        "one-page narrative. Check that each keeps the same core message and the same "
        "words for the key ideas.",
    ),
    "Leading": (
        "The message is crisp, memorable and consistent. Every sentence earns its place, "
        "the language matches how buyers talk, and the structure makes the argument easy "
        "to follow and easy to repeat.",
        "Govern consistency: maintain a shared message house, review new assets against "
        "it, and retire phrasing that drifts. Clarity at this level erodes quickly without "
        "someone owning it.",
    ),
}


NARRATIVES: Mapping[str, Mapping[str, Narrative]] = MappingProxyType({
    WHY_CHANGE.name: MappingProxyType(_WHY_CHANGE),
    WHY_NOW.name: MappingProxyType(_WHY_NOW),
    WHY_YOUR_COMPANY.name: MappingProxyType(_WHY_YOUR_COMPANY),
    EMOTION_LOGIC.name: MappingProxyType(_EMOTION_LOGIC),
    BUYER_AS_HERO.name: MappingProxyType(_BUYER_AS_HERO),
    CLARITY.name: MappingProxyType(_CLARITY),
})


def select_narrative(dimension_name: str, level: str) -> Narrative:
    """Return (rationale, advancement); PLACEHOLDER for an unknown pair."""
    by_level = NARRATIVES.get(dimension_name)
    if by_level is None:
        return PLACEHOLDER
    return by_level.get(level, PLACEHOLDER)
