"""
Lexicon: Immutable Pattern Store

Every word list, phrase list and regex family the analyzers consult:
  1. Sentiment lexicon, negators, intensifiers, hedges
  2. Emotional appeal patterns
  3. Loaded language, weasel phrases, ideological framing
  4. Logical fallacy families
  5. Claim marker families
  6. Source credibility tables and content signals

Tables are built once at import into a frozen Lexicon. Patterns are
compiled up front and only ever applied through finditer/search, so a
single Lexicon can be shared by any number of concurrent analyses.
Pass a different Lexicon to a component to test it in isolation.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

_I = re.IGNORECASE


# ============================================================
# DATA STRUCTURES
# ============================================================

@dataclass(frozen=True)
class PhrasePattern:
    """A literal phrase matched on word boundaries."""
    phrase: str
    pattern: re.Pattern


@dataclass(frozen=True)
class LabeledPattern:
    """A regex with a human-readable label (emotional appeals, framing)."""
    label: str
    pattern: re.Pattern
    bias: str = ""  # Framing direction, empty for non-framing patterns


@dataclass(frozen=True)
class FallacyPattern:
    """A named fallacy and the regex variants that indicate it.

    Only sentences with at least min_sentence_words words are checked.
    """
    name: str
    description: str
    severity: str  # "low", "medium", "high"
    patterns: tuple
    min_sentence_words: int


@dataclass(frozen=True)
class ContentSignal:
    """A weighted credibility signal found in page text."""
    label: str
    weight: int
    pattern: re.Pattern


def _phrases(phrases: list[str]) -> tuple:
    return tuple(
        PhrasePattern(p, re.compile(rf"\b{re.escape(p)}\b", _I)) for p in phrases
    )


def _compile(patterns: list[str], flags: int = _I) -> tuple:
    return tuple(re.compile(p, flags) for p in patterns)


# ============================================================
# SENTIMENT
# ============================================================

# AFINN-style scores (-5 to +5), curated for news and opinion writing
SENTIMENT_LEXICON: dict[str, int] = {
    "abandon": -2, "abandoned": -2, "abandons": -2, "abducted": -3, "abhor": -3,
    "abolish": -2, "abominable": -3, "abuse": -3, "abused": -3, "abuses": -3,
    "abusive": -3, "accept": 1, "accident": -2, "accomplish": 2, "accomplishment": 2,
    "achieve": 2, "achievement": 2, "ache": -2, "acknowledge": 1, "acrimonious": -3,
    "acquit": 2, "admirable": 2, "admire": 2, "admit": -1, "adorable": 3,
    "adore": 3, "advance": 1, "advantage": 2, "adventure": 2, "afraid": -2,
    "aggravate": -2, "aggressive": -2, "agony": -3, "agree": 1, "agreeable": 2,
    "alarm": -2, "alarmed": -2, "alarming": -2, "alas": -1, "alienate": -2,
    "allegation": -2, "allege": -2, "alleged": -2, "amazing": 3, "ambitious": 1,
    "amuse": 2, "anger": -2, "angry": -2, "anguish": -3, "annihilate": -3,
    "annoy": -2, "annoyed": -2, "annoying": -2, "antagonize": -2, "anxious": -2,
    "apathy": -1, "apologies": -1, "apologize": -1, "appalling": -3, "appeal": 1,
    "appreciate": 2, "apprehensive": -2, "approve": 2, "argue": -1, "arrogant": -2,
    "assault": -3, "asset": 1, "astonish": 2, "atrocious": -4, "atrocity": -4,
    "attack": -2, "attract": 1, "attractive": 2, "audacious": 1, "authority": 1,
    "avert": -1, "avid": 1, "avoid": -1, "award": 2, "awesome": 3,
    "awful": -3, "awkward": -1,
    "bad": -2, "ban": -1, "bankrupt": -3, "barbaric": -3, "barrier": -1,
    "battle": -1, "beaten": -2, "beautiful": 2, "befriend": 1, "beg": -1,
    "beneficial": 2, "benefit": 2, "benevolent": 2, "betray": -3, "betrayal": -3,
    "better": 1, "bewildered": -1, "bias": -1, "biased": -2, "bitter": -2,
    "bizarre": -1, "blame": -2, "bless": 2, "blessing": 2, "blind": -1,
    "bliss": 3, "block": -1, "bloody": -2, "blunder": -2, "bold": 1,
    "bomb": -3, "boost": 2, "bore": -1, "boring": -2, "bother": -2,
    "brave": 2, "bravery": 2, "breach": -2, "breakthrough": 3, "brilliant": 3,
    "broken": -2, "brutal": -3, "brutality": -3, "burden": -2, "burn": -1,
    "calm": 1, "capable": 1, "capture": -1, "care": 1, "careful": 1,
    "careless": -2, "catastrophe": -4, "catastrophic": -4, "celebrate": 2,
    "celebration": 2, "challenge": -1, "champion": 2, "chaos": -3, "charitable": 2,
    "charity": 2, "charm": 2, "cheat": -3, "cheer": 2, "cherish": 2,
    "child": 0, "chill": -1, "civil": 1, "civilized": 1, "claim": -1,
    "clash": -2, "clean": 1, "clear": 1, "clever": 2, "coerce": -2,
    "collapse": -3, "combat": -1, "comfort": 2, "commend": 2, "commit": 1,
    "compassion": 2, "compassionate": 2, "compel": -1, "competent": 1,
    "complain": -2, "complaint": -2, "comprehensive": 1, "compromise": 1,
    "condemn": -3, "condemnation": -3, "confidence": 2, "confident": 2,
    "conflict": -2, "confuse": -1, "confused": -2, "confusion": -2,
    "congratulate": 2, "conquer": 1, "conspiracy": -2, "constructive": 2,
    "contaminate": -2, "contempt": -3, "content": 1, "controversial": -1,
    "convict": -2, "conviction": -1, "cooperate": 1, "cooperation": 2,
    "corrupt": -3, "corruption": -3, "courage": 2, "courageous": 2,
    "courtesy": 2, "coward": -2, "cowardly": -2, "crash": -2, "create": 1,
    "creative": 2, "credible": 2, "crime": -3, "criminal": -3, "crisis": -3,
    "critical": -1, "criticism": -2, "criticize": -2, "cruel": -3, "cruelty": -3,
    "crush": -2, "cry": -2, "cunning": -1, "cure": 2, "curse": -2,
    "cut": -1, "cynical": -2,
    "damage": -2, "damn": -3, "danger": -2, "dangerous": -2, "daring": 1,
    "dark": -1, "dead": -3, "deadly": -3, "death": -3, "debacle": -3,
    "decay": -2, "deceit": -3, "deceitful": -3, "deceive": -3, "decent": 1,
    "deception": -3, "decline": -2, "defeat": -2, "defend": 1, "defense": 1,
    "defiant": -1, "defy": -1, "degrade": -3, "delay": -1, "deliberate": 0,
    "delight": 3, "delightful": 3, "demand": -1, "demolish": -2, "demon": -3,
    "demonize": -3, "denial": -1, "deny": -1, "deplorable": -3, "depress": -2,
    "depressed": -2, "depressing": -2, "depression": -2, "deprive": -2,
    "deride": -2, "deserve": 1, "desire": 1, "despair": -3, "desperate": -2,
    "despicable": -3, "despise": -3, "destroy": -3, "destruction": -3,
    "destructive": -3, "detain": -2, "determination": 2, "determined": 2,
    "devastating": -3, "devastation": -3, "devious": -2, "devoted": 2,
    "dignity": 2, "dire": -3, "dirty": -2, "disabled": -1, "disadvantage": -2,
    "disagree": -1, "disappear": -1, "disappoint": -2, "disappointed": -2,
    "disappointing": -2, "disappointment": -2, "disaster": -3, "disastrous": -3,
    "disbelief": -2, "discontent": -2, "discourage": -2, "discover": 2,
    "discrimination": -3, "disgrace": -3, "disgusting": -3, "dishonest": -3,
    "dislike": -2, "dismal": -2, "dismiss": -1, "disorder": -2, "dispute": -1,
    "disrespect": -2, "disrupt": -2, "dissatisfied": -2, "distort": -2,
    "distress": -2, "disturb": -2, "disturbing": -2, "divide": -1,
    "dominate": -1, "doom": -3, "doubt": -1, "doubtful": -1, "dread": -3,
    "dreadful": -3, "drown": -2, "dumb": -2, "dump": -1,
    "eager": 1, "earn": 1, "easy": 1, "effective": 1, "efficient": 1,
    "effort": 1, "elegant": 2, "eliminate": -1, "embarrass": -2, "embarrassing": -2,
    "emergency": -2, "empathy": 2, "empower": 2, "empowering": 2, "empty": -1,
    "encourage": 2, "encouraging": 2, "endanger": -2, "endure": -1, "enemy": -2,
    "energetic": 1, "enjoy": 2, "enjoyable": 2, "enormous": 1, "enrage": -3,
    "enrich": 2, "enslaved": -3, "entertain": 1, "enthusiasm": 2, "equal": 1,
    "equality": 2, "error": -2, "escape": -1, "essential": 1, "ethical": 2,
    "evil": -3, "exaggerate": -2, "exasperated": -2, "excel": 2, "excellent": 3,
    "exceptional": 3, "excite": 2, "excited": 2, "exciting": 2, "exclude": -1,
    "exclusive": 1, "excuse": -1, "exemplary": 3, "exhaust": -2, "exile": -2,
    "exploit": -2, "exploitation": -3, "explosive": -2, "expose": -1,
    "extraordinary": 3, "extreme": -1, "extremist": -3,
    "fabricate": -3, "fabulous": 3, "fail": -2, "failure": -2, "fair": 1,
    "faith": 2, "faithful": 2, "fake": -3, "false": -2, "fame": 1,
    "fantastic": 3, "fascinate": 2, "fatal": -3, "fault": -2, "favor": 1,
    "favorable": 2, "fear": -2, "fearful": -2, "fearless": 2, "feast": 1,
    "feat": 2, "feeble": -1, "fierce": -1, "fight": -1, "filthy": -3,
    "fine": 1, "fix": 1, "flaw": -2, "flawed": -2, "flee": -1,
    "flourish": 2, "fool": -2, "foolish": -2, "force": -1, "forceful": -1,
    "forgive": 2, "fortunate": 2, "foul": -3, "fraud": -3, "fraudulent": -3,
    "free": 1, "freedom": 2, "friendly": 2, "frighten": -2, "frightening": -2,
    "frustrate": -2, "frustrated": -2, "frustrating": -2, "fulfill": 2,
    "fun": 2, "fundamental": 1, "furious": -3, "fury": -3,
    "gain": 1, "generous": 2, "genius": 3, "gentle": 2, "genuine": 2,
    "gift": 2, "glad": 2, "gloomy": -2, "glorious": 3, "glory": 2,
    "good": 2, "gorgeous": 3, "grace": 2, "graceful": 2, "gracious": 2,
    "grand": 2, "grant": 1, "grateful": 2, "grave": -2, "great": 2,
    "greed": -3, "greedy": -3, "grief": -3, "grim": -2, "gross": -2,
    "groundbreaking": 3, "growth": 1, "guarantee": 1, "guilt": -2, "guilty": -2,
    "happy": 2, "harassment": -3, "hard": -1, "hardship": -2, "harm": -2,
    "harmful": -2, "harmony": 2, "harsh": -2, "hate": -3, "hatred": -3,
    "hazard": -2, "hazardous": -2, "heal": 2, "healing": 2, "health": 1,
    "healthy": 2, "heartbreaking": -3, "heartwarming": 3, "heavenly": 3,
    "help": 2, "helpful": 2, "helpless": -2, "hero": 2, "heroic": 2,
    "hesitant": -1, "hideous": -3, "hinder": -2, "honest": 2, "honor": 2,
    "honorable": 2, "hope": 2, "hopeful": 2, "hopeless": -2, "horrible": -3,
    "horrific": -3, "horrify": -3, "horror": -3, "hostile": -2, "hostility": -2,
    "humble": 1, "humiliate": -3, "humiliation": -3, "hurt": -2, "hurtful": -2,
    "hypocrisy": -3, "hypocrite": -3,
    "ideal": 2, "ignorance": -2, "ignorant": -2, "ignore": -1, "illegal": -2,
    "illegitimate": -2, "immoral": -3, "impartial": 2, "impede": -1,
    "impressive": 2, "improve": 2, "improvement": 2, "inability": -2,
    "inadequate": -2, "incompetent": -2, "incredible": 3, "indecent": -2,
    "independent": 1, "indifferent": -1, "indignation": -2, "inferior": -2,
    "inflame": -2, "influential": 1, "infringe": -2, "infuriate": -3,
    "ingenious": 3, "injure": -2, "injustice": -3, "innocent": 1,
    "innovate": 2, "innovation": 2, "innovative": 2, "insecure": -2,
    "insensitive": -2, "insidious": -3, "insightful": 2, "inspire": 2,
    "inspiring": 2, "integrity": 2, "intelligent": 2, "interest": 1,
    "intimidate": -2, "intolerant": -2, "invasion": -2, "invest": 1,
    "irrational": -2, "irresponsible": -2,
    "jealous": -2, "jeopardize": -2, "joy": 2, "joyful": 3, "joyous": 3,
    "just": 1, "justice": 2, "justify": 1,
    "keen": 1, "kill": -3, "killing": -3, "kind": 2, "kindness": 2,
    "knowledge": 1,
    "lack": -1, "lament": -2, "lash": -2, "laugh": 1, "launch": 1,
    "lawful": 1, "lawless": -2, "lead": 1, "leader": 1, "leadership": 1,
    "legitimate": 1, "lethal": -3, "liable": -1, "liberal": 0, "liberate": 2,
    "liberation": 2, "liberty": 2, "lie": -3, "lied": -3, "liar": -3,
    "like": 1, "limit": -1, "lonely": -2, "lose": -2, "loser": -2,
    "loss": -2, "lost": -1, "love": 2, "lovely": 2, "low": -1, "loyal": 2,
    "luck": 2, "lucky": 2, "lurk": -1, "luxury": 1,
    "mad": -2, "magnificent": 3, "malicious": -3, "malign": -3, "mandate": -1,
    "manipulate": -3, "manipulation": -3, "marvelous": 3, "massacre": -4,
    "masterful": 3, "meaningful": 2, "menace": -2, "merciful": 2, "mercy": 2,
    "merit": 2, "mess": -2, "mighty": 1, "miracle": 3, "miserable": -3,
    "misery": -3, "mislead": -3, "misleading": -3, "mistake": -2, "mistrust": -2,
    "mock": -2, "monopolize": -2, "monster": -3, "moral": 1, "mourn": -2,
    "murder": -4, "murderous": -4,
    "naive": -1, "nasty": -3, "necessary": 1, "neglect": -2, "negligent": -2,
    "negotiate": 1, "neutral": 0, "nightmare": -3, "noble": 2, "nonsense": -2,
    "nurture": 2,
    "obnoxious": -3, "obscene": -3, "obstacle": -1, "offend": -2, "offensive": -3,
    "ominous": -2, "oppress": -3, "oppression": -3, "oppressive": -3,
    "optimism": 2, "optimistic": 2, "ordeal": -2, "outstanding": 3,
    "outrage": -3, "outraged": -3, "outrageous": -3, "overcome": 1,
    "overwhelm": -1,
    "pain": -2, "painful": -2, "panic": -3, "paradise": 3, "paralyze": -2,
    "pardon": 1, "passion": 2, "passionate": 2, "pathetic": -2, "patience": 1,
    "patient": 1, "patriot": 1, "peace": 2, "peaceful": 2, "perfect": 2,
    "peril": -2, "perilous": -2, "persecute": -3, "persevere": 2, "pessimistic": -2,
    "phenomenal": 3, "pioneer": 2, "pity": -1, "plague": -3, "pleasant": 2,
    "please": 1, "pleased": 2, "pleasure": 2, "plunder": -3, "poison": -3,
    "pollute": -2, "poor": -2, "popular": 1, "positive": 2, "poverty": -2,
    "power": 1, "powerful": 1, "powerless": -2, "praise": 2, "pray": 1,
    "precious": 2, "predator": -3, "predatory": -3, "prejudice": -3,
    "preserve": 1, "pride": 2, "privilege": 1, "problem": -2, "productive": 2,
    "profane": -2, "profound": 2, "progress": 2, "prohibit": -1, "promise": 1,
    "promote": 1, "propaganda": -3, "proper": 1, "prosper": 2, "prosperity": 2,
    "protect": 1, "protective": 1, "protest": -1, "proud": 2, "provoke": -2,
    "prudent": 1, "punish": -2, "punishment": -2, "pure": 1,
    "quality": 1, "quarrel": -2,
    "racist": -3, "radical": -2, "rage": -3, "rampant": -2, "reckless": -2,
    "recommend": 1, "reconcile": 2, "reform": 1, "refuge": 1, "refuse": -1,
    "regret": -2, "reject": -2, "rejoice": 3, "relentless": -1, "reliable": 2,
    "relief": 2, "relieve": 2, "remarkable": 2, "remedy": 2, "remorse": -2,
    "renowned": 2, "reprehensible": -3, "repress": -2, "repulsive": -3,
    "rescue": 2, "resent": -2, "resentment": -2, "resilient": 2, "resist": -1,
    "resolve": 1, "respect": 2, "responsible": 1, "restore": 2, "restrain": -1,
    "retaliate": -2, "revenge": -2, "revere": 2, "revolt": -2, "revolting": -3,
    "reward": 2, "rich": 1, "ridicule": -2, "ridiculous": -2, "righteous": 2,
    "rigid": -1, "risk": -1, "risky": -1, "rob": -2, "robust": 1,
    "rogue": -2, "rotten": -3, "rude": -2, "ruin": -3, "ruthless": -3,
    "sacred": 1, "sacrifice": -1, "sad": -2, "safe": 1, "safety": 1,
    "savage": -3, "save": 2, "scandal": -3, "scandalous": -3, "scare": -2,
    "scared": -2, "scary": -2, "scold": -2, "scorn": -2, "secure": 1,
    "selfish": -2, "sensational": -1, "sensible": 1, "sensitive": 1,
    "serene": 2, "serious": -1, "severe": -2, "shame": -2, "shameful": -3,
    "shield": 1, "shock": -2, "shocking": -2, "shortage": -1, "shrewd": 1,
    "sick": -2, "silence": -1, "silly": -1, "sin": -2, "sincere": 2,
    "sinister": -3, "skeptical": -1, "slander": -3, "slaughter": -4,
    "smart": 2, "smile": 2, "smug": -1, "sneak": -1, "solid": 1,
    "solution": 1, "solve": 1, "sorrow": -2, "sorry": -1, "special": 2,
    "spectacular": 3, "splendid": 3, "spoil": -2, "stable": 1, "stagnant": -1,
    "starve": -3, "steal": -3, "stern": -1, "stimulate": 1, "stink": -2,
    "stolen": -2, "strength": 2, "strengthen": 2, "stress": -2, "strife": -2,
    "strike": -1, "strong": 1, "struggle": -2, "stubborn": -1, "stunning": 3,
    "stupid": -2, "submit": -1, "substantial": 1, "succeed": 2, "success": 2,
    "successful": 2, "suffer": -2, "suffering": -2, "sufficient": 1,
    "suicide": -4, "superior": 1, "support": 1, "supportive": 2,
    "suppress": -2, "supreme": 2, "sure": 1, "surprise": 1, "surrender": -1,
    "suspect": -1, "suspicious": -2, "sustain": 1, "sweet": 1, "sympathy": 2,
    "talent": 2, "talented": 2, "terrible": -3, "terrific": 3, "terrify": -3,
    "terrifying": -3, "terror": -3, "terrorism": -4, "terrorist": -4,
    "thank": 2, "thankful": 2, "thankless": -2, "thief": -3, "thirst": -1,
    "thorough": 1, "thoughtful": 2, "thoughtless": -2, "threat": -2,
    "threaten": -2, "threatening": -2, "thrive": 2, "tolerate": 1,
    "torment": -3, "torture": -4, "toxic": -3, "tradition": 1, "tragic": -3,
    "tragedy": -3, "transform": 1, "transparent": 1, "trap": -2,
    "trauma": -3, "traumatic": -3, "treacherous": -3, "treason": -3,
    "treasure": 2, "tremendous": 2, "triumph": 3, "trouble": -2, "troubled": -2,
    "troubling": -2, "true": 1, "trust": 2, "trustworthy": 2, "truth": 2,
    "tyranny": -3, "tyrant": -3,
    "ugly": -2, "unacceptable": -2, "unbearable": -2, "uncertain": -1,
    "undermine": -2, "unfair": -2, "unfortunate": -2, "unfounded": -2,
    "unhappy": -2, "unjust": -3, "unjustified": -2, "unlawful": -2,
    "unlikely": -1, "unprecedented": -1, "unrest": -2, "unsafe": -2,
    "unstable": -2, "uplift": 2, "uplifting": 2, "upset": -2, "urgent": -1,
    "vague": -1, "valid": 1, "valuable": 2, "value": 1, "vandalize": -3,
    "vengeance": -2, "venom": -3, "verify": 1, "veto": -1, "vicious": -3,
    "victim": -2, "victimize": -3, "victory": 3, "vigilant": 1, "vile": -3,
    "villain": -3, "vindictive": -3, "violate": -3, "violation": -3,
    "violence": -3, "violent": -3, "virtue": 2, "virtuous": 2, "vital": 1,
    "vivid": 1, "volunteer": 2, "vulnerable": -1,
    "war": -2, "warn": -1, "warning": -1, "waste": -2, "weak": -2,
    "weakness": -2, "wealth": 1, "weapon": -2, "weary": -1, "welcome": 2,
    "wellbeing": 2, "wholesome": 2, "wicked": -3, "widespread": 0,
    "willing": 1, "win": 2, "wisdom": 2, "wise": 2, "wish": 1,
    "wonderful": 3, "worry": -2, "worsen": -2, "worst": -3, "worth": 1,
    "worthless": -3, "worthy": 2, "wound": -2, "wrath": -3, "wreck": -2,
    "wrong": -2,
    "yearn": -1, "yield": 0, "young": 0, "zealot": -2, "zealous": -1,
    # Inflections that show up constantly in news copy
    "attacked": -2, "corrupted": -3, "destroyed": -3, "destroys": -3,
    "failed": -2, "hated": -3, "killed": -3, "lies": -3, "loved": 2,
    "threatened": -2,
}

NEGATORS = frozenset({
    "not", "no", "never", "neither", "nobody", "nothing", "nowhere", "nor",
    "cannot", "can't", "couldn't", "shouldn't", "wouldn't", "won't", "don't",
    "doesn't", "didn't", "isn't", "aren't", "wasn't", "weren't", "hasn't",
    "haven't", "hadn't", "barely", "hardly", "scarcely", "seldom", "rarely",
})

INTENSIFIERS: dict[str, float] = {
    "absolutely": 1.5, "completely": 1.4, "definitely": 1.3, "entirely": 1.4,
    "especially": 1.3, "essentially": 1.2, "exactly": 1.2, "exceptionally": 1.5,
    "exclusively": 1.3, "explicitly": 1.2, "extensively": 1.3, "extraordinarily": 1.5,
    "extremely": 1.5, "fundamentally": 1.3, "greatly": 1.3, "heavily": 1.3,
    "highly": 1.3, "hugely": 1.4, "immensely": 1.4, "impossibly": 1.4,
    "incredibly": 1.4, "inevitably": 1.3, "intensely": 1.4, "literally": 1.3,
    "massively": 1.4, "overwhelmingly": 1.5, "particularly": 1.2, "perfectly": 1.4,
    "profoundly": 1.4, "purely": 1.3, "radically": 1.3, "remarkably": 1.3,
    "seriously": 1.3, "significantly": 1.2, "simply": 1.1, "solely": 1.2,
    "strongly": 1.3, "surely": 1.2, "thoroughly": 1.3, "totally": 1.4,
    "tremendously": 1.4, "truly": 1.3, "ultimately": 1.2, "unbelievably": 1.5,
    "undeniably": 1.4, "undoubtedly": 1.3, "universally": 1.3, "unquestionably": 1.4,
    "utterly": 1.5, "vastly": 1.4, "very": 1.25,
}

HEDGES = frozenset({
    "allegedly", "apparently", "arguably", "assume", "assumed", "believe", "believed",
    "claim", "claimed", "consider", "could", "estimated", "generally", "guess",
    "hopefully", "likely", "may", "maybe", "might", "often", "perhaps", "possibly",
    "potentially", "presumably", "probably", "purportedly", "reportedly",
    "seems", "should", "sometimes", "somewhat", "supposedly", "suspect",
    "suspected", "tends", "think", "thought", "typically", "uncertain", "unclear",
    "usually", "would",
})

EMOTIONAL_PATTERNS: tuple = (
    LabeledPattern("Appeal to emotion (vulnerable groups)",
                   re.compile(r"\bthink of the (children|kids|families|elderly|veterans)\b", _I)),
    LabeledPattern("Appeal to common belief",
                   re.compile(r"\b(everyone knows|everybody knows|as we all know|common sense)\b", _I)),
    LabeledPattern("Certainty assertion",
                   re.compile(r"\b(no one can deny|undeniable fact|unquestionable|beyond dispute)\b", _I)),
    LabeledPattern("Condescension / dismissiveness",
                   re.compile(r"\b(wake up|open your eyes|sheeple|kool.?aid)\b", _I)),
    LabeledPattern("Identity/in-group appeal",
                   re.compile(r"\b(real americans?|true patriots?|real people|ordinary people)\b", _I)),
    LabeledPattern("Conspiracy framing",
                   re.compile(r"\b(they don't want you to know|secret(?:ly)?|hidden truth|cover[\s-]?up)\b", _I)),
    LabeledPattern("Slippery slope language",
                   re.compile(r"\b(where does it end|what'?s next|slippery slope|thin end of the wedge)\b", _I)),
    LabeledPattern("Militaristic framing",
                   re.compile(r"\b(fight back|take back|stand up against|war on|battle for)\b", _I)),
    LabeledPattern("Hyperbolic destruction language",
                   re.compile(r"\b(destroy|annihilate|obliterate|eradicate|wipe out|crush)\b", _I)),
    LabeledPattern("Crisis/urgency framing",
                   re.compile(r"\b(crisis|emergency|catastrophe|nightmare|apocalypse|existential threat)\b", _I)),
)


# ============================================================
# BIAS
# ============================================================

LOADED_LANGUAGE: dict[str, list[str]] = {
    "fear_mongering": [
        "invasion", "flooding", "swarm", "plague", "ticking time bomb",
        "skyrocketing", "out of control", "under siege", "spiraling out",
        "collapse of", "wave of", "onslaught", "inundated",
    ],
    "glorification": [
        "hero", "patriot", "freedom fighter", "champion", "savior", "visionary",
        "trailblazer", "genius", "legendary", "iconic", "fearless", "selfless",
        "unwavering", "tireless champion",
    ],
    "demonization": [
        "thug", "radical", "extremist", "puppet", "tyrant", "monster", "predator",
        "crooked", "corrupt", "elitist", "out of touch", "un-american",
        "anti-american", "enemy of the people", "threat to democracy",
    ],
    "euphemism": [
        "enhanced interrogation", "collateral damage", "right-sizing",
        "downsizing", "neutralize", "pacification", "regime change",
        "kinetic action", "alternative facts", "clean coal",
        "ethnic cleansing", "friendly fire", "pre-owned",
        "economically disadvantaged", "passed away", "let go",
    ],
    "absolutist": [
        "always", "never", "everyone knows", "no one", "nobody", "nothing",
        "without exception", "the only way", "the only answer", "impossible",
        "guaranteed", "definitively proven", "indisputable", "irrefutable",
        "beyond question", "unquestionable",
    ],
}

WEASEL_PHRASES: list[str] = [
    "some say", "many believe", "experts say", "critics claim", "some people think",
    "it is said", "it has been suggested", "there are those who",
    "sources say", "insiders claim", "according to sources", "observers note",
    "it is widely believed", "many feel", "questions have been raised",
    "concerns have been raised", "some argue", "many argue",
    "studies show", "research shows", "science says", "everyone knows",
]

FRAMING_PATTERNS: tuple = (
    LabeledPattern("Financial burden framing",
                   re.compile(r"\btaxpayer[\s-]?funded\b", _I), "fiscal-conservative"),
    LabeledPattern("Anti-regulation framing",
                   re.compile(r"\bjob[\s-]?killing\b", _I), "deregulation"),
    LabeledPattern("Anti-abortion framing",
                   re.compile(r"\b(pro[\s-]?life|unborn child|sanctity of life)\b", _I),
                   "socially conservative"),
    LabeledPattern("Pro-choice framing",
                   re.compile(r"\b(pro[\s-]?choice|reproductive rights|bodily autonomy)\b", _I),
                   "socially progressive"),
    LabeledPattern("Anti-immigration framing",
                   re.compile(r"\b(illegal alien|illegals)\b", _I), "restrictionist"),
    LabeledPattern("Pro-immigration framing",
                   re.compile(r"\b(undocumented worker|asylum seeker|dreamer)\b", _I), "permissive"),
    LabeledPattern("Pro-gun framing",
                   re.compile(r"\b(gun rights|second amendment rights|law[\s-]?abiding gun owner)\b", _I),
                   "gun rights"),
    LabeledPattern("Gun control framing",
                   re.compile(r"\b(gun violence epidemic|common[\s-]?sense gun|gun safety)\b", _I),
                   "gun control"),
    LabeledPattern("Climate skepticism framing",
                   re.compile(r"\b(climate alarmis[mt]|climate hoax|so[\s-]?called climate)\b", _I),
                   "climate skeptic"),
    LabeledPattern("Climate urgency framing",
                   re.compile(r"\b(climate crisis|climate emergency|climate catastrophe)\b", _I),
                   "climate action"),
    LabeledPattern("Media distrust framing",
                   re.compile(r"\b(mainstream media|liberal media|lamestream|fake news media)\b", _I),
                   "media skeptic"),
    LabeledPattern("Anti-establishment framing",
                   re.compile(r"\b(big pharma|big tech|big government|deep state|the establishment)\b", _I),
                   "populist"),
    LabeledPattern("Economic justice framing",
                   re.compile(r"\b(wealth gap|income inequality|the one percent|working class|"
                              r"exploitation of workers)\b", _I),
                   "economic-left"),
    LabeledPattern("Pro-market framing",
                   re.compile(r"\b(free market solution|job creators|over[\s-]?regulation|nanny state)\b", _I),
                   "economic-right"),
)

# "to be" + past participle (regular -ed or a curated irregular list).
PASSIVE_VOICE = re.compile(
    r"\b(was|were|is|are|been|being|be)\s+(\w+ed|taken|given|shown|known|seen|done|made|"
    r"told|found|left|held|brought|thought|kept|sent|grown|drawn|written|broken|spoken|"
    r"chosen|driven|forgotten|hidden|bitten|eaten|fallen|risen|born|worn|torn|sworn|"
    r"frozen|stolen|shaken|woven)\b",
    _I,
)

LEADING_QUESTIONS: tuple = _compile([
    r"\b(isn't it true that|don't you think|wouldn't you agree|isn't it obvious that)\b",
    r"\b(how can anyone|why would anyone|who could possibly|who in their right mind)\b",
])


# ============================================================
# LOGICAL FALLACIES
# ============================================================

FALLACY_PATTERNS: tuple = (
    FallacyPattern(
        name="Ad Hominem",
        description="Attacks the person rather than their argument.",
        severity="high",
        patterns=_compile([
            r"\b(you're|they're|he's|she's)\s+(just|only|nothing but|merely)\s+(a|an)\s+\w+",
            r"\bof course (?:you|he|she|they) would say that\b",
            r"\bconsider the source\b",
            r"\blook who'?s talking\b",
            r"\b(?:typical|classic)\s+(?:liberal|conservative|leftist|right[\s-]?winger|"
            r"democrat|republican)\b",
        ]),
        min_sentence_words=5,
    ),
    FallacyPattern(
        name="Straw Man",
        description="Misrepresents someone's argument to attack a distorted version.",
        severity="high",
        patterns=_compile([
            r"\bso (?:you're|you are) saying\b",
            r"\bwhat (?:you're|they're) really saying is\b",
            r"\b(?:basically|essentially),?\s*(?:you|they)\s+(?:want|believe|think|are saying)\b",
            r"\b(?:want(?:s)? to|trying to)\s+(?:destroy|ban|eliminate|abolish)\s+(?:all|every)\b",
        ]),
        min_sentence_words=6,
    ),
    FallacyPattern(
        name="Appeal to Authority",
        description="Uses authority status as evidence rather than the argument itself.",
        severity="medium",
        patterns=_compile([
            r"\b(?:experts|scientists|doctors) (?:agree|all agree|have confirmed|have proven)\b",
            r"\baccording to (?:leading|top|renowned|eminent) (?:experts|scientists|researchers)\b",
            r"\beven (?:he|she|they|[A-Z]\w+) (?:agrees?|admits?|acknowledges?|concedes?)\b",
        ]),
        min_sentence_words=6,
    ),
    FallacyPattern(
        name="Appeal to Emotion",
        description="Manipulates feelings instead of using logical reasoning.",
        severity="medium",
        patterns=_compile([
            r"\bthink of the (?:children|families|victims|elderly|veterans)\b",
            r"\bhow (?:would|could|can) you (?:live with yourself|sleep at night)\b",
            r"\bimagine if (?:this|it) (?:happened|were|was) (?:to you|to your)\b",
            r"\byou should be (?:ashamed|afraid|worried|outraged|disgusted)\b",
            r"\bwon't someone (?:think of|care about)\b",
        ]),
        min_sentence_words=5,
    ),
    FallacyPattern(
        name="False Dilemma",
        description="Presents only two options when more exist.",
        severity="high",
        patterns=_compile([
            r"\byou(?:'re| are) (?:either with us or against us)\b",
            r"\b(?:the only|there(?:'s| is) only one) (?:option|choice|way|solution|answer)\b",
            r"\bif (?:you're|we're|you are|we are) not (?:for|supporting|with).{3,30},?\s*"
            r"(?:then you're|you must be|you are)\b",
            r"\byou (?:can|must) either .{5,40} or .{5,40}\b",
        ]),
        min_sentence_words=7,
    ),
    FallacyPattern(
        name="Slippery Slope",
        description="Assumes one event inevitably leads to extreme consequences without justification.",
        severity="medium",
        patterns=_compile([
            r"\bwhere does it (?:end|stop)\b",
            r"\bnext thing you know\b",
            r"\bbefore (?:you|we) know it\b",
            r"\bif we (?:allow|let|permit) this.{5,40}(?:then|next|soon|eventually)\b",
            r"\bopen(?:s|ing)? the (?:door|floodgate)s?\b",
            r"\bthin end of the wedge\b",
            r"\btoday .{5,25},?\s*tomorrow .{5,25}\b",
        ]),
        min_sentence_words=6,
    ),
    FallacyPattern(
        name="Bandwagon / Appeal to Popularity",
        description="Argues something is true because many people believe it.",
        severity="low",
        patterns=_compile([
            # A bare pronoun object ("everyone knows it") is a weasel phrase, not an appeal
            r"\b(?:everyone|everybody|millions of people) (?:knows?|agrees?|believes?|thinks?)\b"
            r"(?!\s+(?:it|them|him|her)\b)",
            r"\b(?:growing|increasing) number of (?:people|Americans?|experts?)\s+"
            r"(?:believe|think|agree|support)\b",
            r"\b\d+\s*(?:million|percent|%) of (?:people|Americans?|voters?) "
            r"(?:agree|believe|support|think)\b",
        ]),
        min_sentence_words=5,
    ),
    FallacyPattern(
        name="Red Herring / Deflection",
        description="Introduces an irrelevant topic to divert from the issue.",
        severity="medium",
        patterns=_compile([
            r"\bthe real (?:issue|question|problem) (?:is|here is)\b",
            r"\blet'?s not forget (?:that|about)\b",
            r"\bwe should (?:really|instead) be (?:talking|focusing|looking) (?:about|at|on)\b",
            r"\bforget about that.{0,10}(?:what about|the real)\b",
        ]),
        min_sentence_words=6,
    ),
    FallacyPattern(
        name="Whataboutism (Tu Quoque)",
        description="Deflects criticism by pointing to someone else's behavior.",
        severity="medium",
        patterns=_compile([
            r"\b(?:but |yeah but |and )?what about (?:when|the time)\b",
            r"\byou(?:'re| are) one to talk\b",
            r"\bpot calling the kettle\b",
            r"\bhow about (?:when you|what they|what he|what she)\b",
            r"\b(?:but|yet) (?:you|they|he|she) (?:also|too) (?:did|do|have)\b",
        ]),
        min_sentence_words=5,
    ),
    FallacyPattern(
        name="Hasty Generalization",
        description="Draws broad conclusions from insufficient evidence.",
        severity="medium",
        patterns=_compile([
            r"\b(?:i knew a|my friend|my neighbor|this one guy).{5,30}"
            r"(?:so|therefore|that'?s why|which (?:means|proves|shows))\b",
            r"\b(?:one|two|a few|couple of?) (?:examples?|cases?|instances?)\s+"
            r"(?:prove|show|demonstrate|confirm)\b",
            r"\bjust look at .{5,30}(?:clearly|obviously|proves?|shows?)\b",
        ]),
        min_sentence_words=8,
    ),
    FallacyPattern(
        name="Circular Reasoning",
        description="The conclusion is assumed in the premise.",
        severity="high",
        patterns=_compile([
            r"\bit'?s true because .{5,30} (?:is true|says so|because it is)\b",
            r"\bthe bible is true because .{3,20} the bible\b",
            r"\b(\w+) is (\w+) because \1 is \2\b",
        ]),
        min_sentence_words=8,
    ),
    FallacyPattern(
        name="Appeal to Nature",
        description="Argues something is good because it's 'natural' or bad because it's 'unnatural'.",
        severity="low",
        patterns=_compile([
            r"\b(?:natural|nature) (?:is|means?) (?:always |inherently )?(?:better|safer|healthier|good)\b",
            r"\b(?:unnatural|artificial|synthetic|man[\s-]?made) (?:is|means?|are) "
            r"(?:always |inherently )?(?:bad|harmful|dangerous|unhealthy)\b",
            r"\b(?:nature intended|against nature|playing god)\b",
        ]),
        min_sentence_words=5,
    ),
    FallacyPattern(
        name="False Cause (Post Hoc)",
        description="Assumes causation from correlation or sequence.",
        severity="medium",
        patterns=_compile([
            r"\b(?:ever since|right after|immediately after) .{5,40} "
            r"(?:started|began|happened|things went)\b",
            r"\b(?:no |not a )?coincidence\??\b",
            r"\bcorrelat(?:ion|es?) .{3,15} (?:cause[ds]?|proof|proves?)\b",
        ]),
        min_sentence_words=6,
    ),
)


# ============================================================
# CLAIM MARKERS
# ============================================================

OPINION_MARKERS: tuple = _compile([
    r"\b(i think|i believe|i feel|in my (?:opinion|view|estimation)|it seems to me)\b",
    r"\b(we think|we believe|our view is|it (?:seems|appears) (?:that|to))\b",
    r"\b(should|ought to|must|need to) (?!be\b)",
    r"\b(best|worst|greatest|most important|least important|overrated|underrated)\b",
    r"\b(beautiful|ugly|terrible|wonderful|amazing|awful|horrible|brilliant|ridiculous|absurd)\b",
    r"\b(obviously|clearly|undoubtedly|certainly|of course|needless to say)\b",
    r"\b(sadly|fortunately|unfortunately|thankfully|hopefully|regrettably)\b",
    r"\b(unacceptable|outrageous|nonsensical|ludicrous|preposterous)\b",
    r"\b(wrong|right|fair|unfair|just|unjust|moral|immoral|ethical|unethical)\b",
])

FACTUAL_MARKERS: tuple = _compile([
    r"\b\d[\d,.]*\s*(?:percent|%|million|billion|trillion|thousand|hundred|km|miles?|kg|lbs?)\b",
    r"\b(?:according to|based on|data (?:shows?|indicates?)|research (?:shows?|found|indicates?))\b",
    r"\b(?:in \d{4}|on \w+ \d{1,2},? \d{4}|since \d{4}|from \d{4} to \d{4})\b",
    r"\b(?:located in|headquartered in|founded in|established in|born (?:in|on))\b",
    r"\b(?:measured|calculated|recorded|documented|published in|appeared in)\b",
    r"\b(?:increased|decreased|rose|fell|grew|shrank|declined) (?:by|from|to)\b",
    r"\b(?:population|GDP|revenue|profit|temperature|rate|index)\b",
])

CLAIM_MARKERS: tuple = _compile([
    r"\b(?:proves?|evidence (?:shows?|demonstrates?)|confirms?|establishes?|demonstrates?)\b",
    r"\bis the (?:cause|reason|result|solution|answer|key|only)\b",
    r"\bwill (?:cause|lead to|result in|create|destroy|prevent|guarantee)\b",
    r"\b(?:the fact is|the truth is|the reality is|make no mistake|let me be clear)\b",
    r"\b(?:guaranteed|certain to|inevitable|impossible|undeniable|irrefutable)\b",
    r"\bthe (?:biggest|greatest|worst|most serious|primary|main) (?:threat|problem|issue|cause)\b",
])

HEDGE_MARKERS: tuple = _compile([
    r"\b(?:may|might|could|possibly|potentially|arguably)\b",
    r"\b(?:suggests?|indicates?|implies?|appears?|seems?)\b",
    r"\b(?:likely|unlikely|probable|improbable|plausible)\b",
    r"\b(?:estimated|approximate(?:ly)?|roughly|about|around)\b",
    r"\b(?:tends? to|generally|typically|usually|often)\b",
])

RHETORICAL_QUESTION = re.compile(
    r"\b(isn't it|don't you|wouldn't you|can't we|shouldn't we|how can anyone|who could possibly)\b",
    _I,
)


# ============================================================
# SOURCE CREDIBILITY
# ============================================================

DOMAIN_TIERS: dict[str, tuple] = {
    "high": (
        "reuters.com", "apnews.com", "bbc.com", "bbc.co.uk", "npr.org", "pbs.org",
        "nature.com", "science.org", "thelancet.com", "nejm.org", "who.int", "cdc.gov",
        "nih.gov", "nasa.gov", "noaa.gov", "gov.uk", "europa.eu", "un.org",
        "worldbank.org", "nytimes.com", "washingtonpost.com", "wsj.com", "economist.com",
        "ft.com", "theguardian.com", "abc.net.au", "cbc.ca", "snopes.com",
        "factcheck.org", "politifact.com", "scholar.google.com",
        "pubmed.ncbi.nlm.nih.gov", "arxiv.org", "jstor.org", "ssrn.com",
        "springer.com", "wiley.com", "ieee.org", "acm.org",
    ),
    "medium": (
        "cnn.com", "foxnews.com", "msnbc.com", "nbcnews.com", "cbsnews.com",
        "abcnews.go.com", "usatoday.com", "latimes.com", "bloomberg.com", "cnbc.com",
        "forbes.com", "time.com", "newsweek.com", "theatlantic.com", "newyorker.com",
        "vox.com", "axios.com", "thehill.com", "politico.com", "wired.com",
        "arstechnica.com", "techcrunch.com", "theverge.com", "wikipedia.org",
        "britannica.com", "medium.com",
    ),
    "low": (
        "infowars.com", "naturalnews.com", "zerohedge.com", "beforeitsnews.com",
        "worldnetdaily.com", "globalresearch.ca", "rt.com", "sputniknews.com",
        "thegatewaypundit.com",
    ),
}

# Ordered: the first matching suffix wins
TLD_SCORES: tuple = (
    (".gov", 15), (".edu", 12), (".mil", 12), (".int", 10), (".org", 3),
    (".ac.uk", 10), (".com", 0), (".net", 0), (".io", 0), (".info", -3),
    (".biz", -5), (".xyz", -5), (".click", -8), (".buzz", -8),
)

POSITIVE_SIGNALS: tuple = (
    ContentSignal("Evidence citation", 3, re.compile(
        r"\b(according to|cited|reference[ds]?|peer[\s-]?reviewed|published in)\b", _I)),
    ContentSignal("Academic context", 3, re.compile(
        r"\b(university|institute|journal|methodology|systematic review)\b", _I)),
    ContentSignal("Balanced perspective", 4, re.compile(
        r"\b(however|on the other hand|conversely|critics argue|some disagree|counterargument)\b", _I)),
    ContentSignal("Transparency signals", 3, re.compile(
        r"\b(updated|correction|editor'?s note|clarification)\b", _I)),
    ContentSignal("Quantitative support", 2, re.compile(
        r"\b(\d+\s*percent|\d+%|survey of \d+|sample size)", _I)),
    ContentSignal("Disclosure", 2, re.compile(
        r"\b(disclaimer|disclosure|conflict of interest|funded by)\b", _I)),
)

NEGATIVE_SIGNALS: tuple = (
    ContentSignal("Conspiracy framing", -5, re.compile(
        r"\b(they don't want you to know|shocking truth|what .{3,20} doesn't tell you)\b", _I)),
    ContentSignal("Pseudoscience markers", -4, re.compile(
        r"\b(miracle cure|cure[\s-]?all|guaranteed results|secret remedy|ancient secret)\b", _I)),
    ContentSignal("Clickbait / marketing", -3, re.compile(
        r"\b(click here|subscribe now|share this before|limited time|act now)\b", _I)),
    ContentSignal("Media distrust markers", -4, re.compile(
        r"\b(mainstream media won't|lamestream|fake news|cover[\s-]?up)\b", _I)),
    ContentSignal("Bad-faith inquiry", -5, re.compile(
        r"\b(just asking questions|do your own research|wake up sheeple)\b", _I)),
    # Case-sensitive: shouted words only
    ContentSignal("Sensationalist caps", -1, re.compile(r"\b[A-Z]{5,}\b")),
    ContentSignal("Excessive punctuation", -2, re.compile(r"[!]{3,}|[?]{3,}")),
)

AUTHOR_ATTRIBUTION = re.compile(r"\b(by |author:|written by|reported by)\b", _I)

DATE_PATTERNS: tuple = (
    re.compile(r"\b(published|updated|posted)\s*:?\s*\w+\s+\d{1,2},?\s+\d{4}", _I),
    re.compile(r"\d{4}-\d{2}-\d{2}"),
)


# ============================================================
# THE LEXICON
# ============================================================

def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class Lexicon:
    """Read-only bundle of every table the analyzers use."""

    sentiment: Mapping = field(default_factory=lambda: _frozen(SENTIMENT_LEXICON))
    negators: frozenset = NEGATORS
    intensifiers: Mapping = field(default_factory=lambda: _frozen(INTENSIFIERS))
    hedges: frozenset = HEDGES
    emotional_patterns: tuple = EMOTIONAL_PATTERNS
    loaded_language: Mapping = field(default_factory=lambda: _frozen(
        {category: _phrases(words) for category, words in LOADED_LANGUAGE.items()}
    ))
    weasel_phrases: tuple = field(default_factory=lambda: _phrases(WEASEL_PHRASES))
    framing_patterns: tuple = FRAMING_PATTERNS
    passive_voice: re.Pattern = PASSIVE_VOICE
    leading_questions: tuple = LEADING_QUESTIONS
    fallacies: tuple = FALLACY_PATTERNS
    opinion_markers: tuple = OPINION_MARKERS
    factual_markers: tuple = FACTUAL_MARKERS
    claim_markers: tuple = CLAIM_MARKERS
    hedge_markers: tuple = HEDGE_MARKERS
    rhetorical_question: re.Pattern = RHETORICAL_QUESTION
    domain_tiers: Mapping = field(default_factory=lambda: _frozen(DOMAIN_TIERS))
    tld_scores: tuple = TLD_SCORES
    positive_signals: tuple = POSITIVE_SIGNALS
    negative_signals: tuple = NEGATIVE_SIGNALS
    author_attribution: re.Pattern = AUTHOR_ATTRIBUTION
    date_patterns: tuple = DATE_PATTERNS

    def describe(self) -> dict:
        """
        Summarise the detection surface.

        Used by the GET /lexicon endpoint.
        """
        return {
            "sentiment_terms": len(self.sentiment),
            "negators": len(self.negators),
            "intensifiers": len(self.intensifiers),
            "hedges": len(self.hedges),
            "emotional_patterns": [p.label for p in self.emotional_patterns],
            "loaded_language": {
                category: [p.phrase for p in phrases]
                for category, phrases in self.loaded_language.items()
            },
            "weasel_phrases": [p.phrase for p in self.weasel_phrases],
            "framing_patterns": [
                {"label": p.label, "bias": p.bias} for p in self.framing_patterns
            ],
            "fallacies": [
                {
                    "name": f.name,
                    "description": f.description,
                    "severity": f.severity,
                    "variants": len(f.patterns),
                    "min_sentence_words": f.min_sentence_words,
                }
                for f in self.fallacies
            ],
            "domain_tiers": {tier: len(domains) for tier, domains in self.domain_tiers.items()},
        }


# ============================================================
# SINGLETON: built once, never mutated
# ============================================================

DEFAULT_LEXICON = Lexicon()
