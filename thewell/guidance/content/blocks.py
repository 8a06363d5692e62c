from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..intents import StaticIntent
from ..schemas import ScripturePathwayEntry

DEFAULT_DISCLAIMER = (
    "this is guidance, not the final word—scripture is. "
    "read in context and walk with your local church."
)

CRISIS_MESSAGE = (
    "if you are in immediate danger, contact local emergency services "
    "or dial 988 in the U.S."
)

MISSING_CREDENTIAL_RESPONSE = "configuration error: missing OPENAI_API_KEY on server."

MISSING_CREDENTIAL_SCRIPTURE = ScripturePathwayEntry(
    ref="Psalm 119:105",
    why="the word lights our path",
    translation="ESV",
)


@dataclass(frozen=True)
class ContentBlock:
    response: str
    scripture: tuple[ScripturePathwayEntry, ...]
    next_steps: tuple[str, ...]
    explanation: Optional[str] = None
    reflection_prayer: Optional[str] = None
    follow_up_question: Optional[str] = None


# Kept apart from INTENT_BLOCKS: the crisis answer is never table-selected.
CRISIS_BLOCK = ContentBlock(
    response=(
        "I'm really glad you said something. What you're carrying matters, and you "
        "do not have to carry it alone. Please reach out to someone right now: a "
        "crisis line, emergency services, or a trusted person who can be with you."
    ),
    scripture=(
        ScripturePathwayEntry(
            ref="Psalm 34:18",
            quote="The LORD is near to the brokenhearted and saves the crushed in spirit.",
            why="God draws near in the darkest moments",
            translation="ESV",
        ),
        ScripturePathwayEntry(
            ref="Matthew 11:28-30",
            why="Jesus invites the weary to come and rest",
            translation="ESV",
        ),
    ),
    next_steps=(
        "Call or text 988 (U.S.) or your local emergency number now.",
        "Tell a trusted friend, family member, or pastor what you are feeling today.",
    ),
)


INTENT_BLOCKS: dict[StaticIntent, ContentBlock] = {
    StaticIntent.ASSURANCE: ContentBlock(
        response=(
            "Assurance does not rest on the strength of your feelings but on the "
            "finished work of Christ. If you have trusted him, nothing can separate "
            "you from the love of God."
        ),
        scripture=(
            ScripturePathwayEntry(
                ref="Romans 8:31-39",
                why="nothing can separate believers from God's love in Christ",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="John 10:27-29",
                quote="I give them eternal life, and they will never perish, and no one will snatch them out of my hand.",
                why="Jesus holds on to his sheep",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="1 John 5:11-13",
                why="John wrote so that believers may know they have eternal life",
                translation="ESV",
            ),
        ),
        next_steps=(
            "Read Romans 8 slowly and note every promise that depends on God, not you.",
            "Share your doubts with a mature believer this week.",
        ),
        reflection_prayer=(
            "Father, when my heart condemns me, remind me that you are greater "
            "than my heart. Hold me fast in Christ. Amen."
        ),
        follow_up_question="What usually triggers your doubts about your salvation?",
    ),
    StaticIntent.PRAYER: ContentBlock(
        response=(
            "Prayer is conversation with a Father who already knows and loves you. "
            "Start simple and honest; Jesus gave his disciples a pattern to follow."
        ),
        scripture=(
            ScripturePathwayEntry(
                ref="Matthew 6:9-13",
                why="the Lord's Prayer as a pattern",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Philippians 4:6-7",
                why="bring every request to God with thanksgiving",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Romans 8:26",
                why="the Spirit helps us when we do not know what to pray",
                translation="ESV",
            ),
        ),
        next_steps=(
            "Pray through the Lord's Prayer one line at a time each morning this week.",
            "Keep a short list of requests and note how God answers.",
        ),
        follow_up_question="What makes prayer feel hard for you right now?",
    ),
    StaticIntent.ANXIETY: ContentBlock(
        response=(
            "Anxiety is real, and Scripture does not shame you for it. God invites "
            "you to cast your cares on him because he cares for you."
        ),
        scripture=(
            ScripturePathwayEntry(
                ref="1 Peter 5:7",
                quote="casting all your anxieties on him, because he cares for you.",
                why="God cares about what weighs on you",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Philippians 4:6-7",
                why="prayer with thanksgiving guards the heart",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Matthew 6:25-34",
                why="the Father knows what you need today",
                translation="ESV",
            ),
        ),
        next_steps=(
            "Name your specific worries in prayer, one at a time.",
            "If anxiety is persistent, talk with a counselor or doctor as well as your pastor.",
        ),
        reflection_prayer="Lord, I hand you what I cannot carry. Give me your peace today. Amen.",
    ),
    StaticIntent.PURITY: ContentBlock(
        response=(
            "Temptation is common to everyone, and God provides a way of escape. "
            "Walking in purity is a fight you do not have to fight alone."
        ),
        scripture=(
            ScripturePathwayEntry(
                ref="1 Corinthians 10:13",
                why="God is faithful to provide a way out",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Psalm 119:9-11",
                why="guarding your way by God's word",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="1 John 1:9",
                why="confession meets forgiveness and cleansing",
                translation="ESV",
            ),
        ),
        next_steps=(
            "Ask a trusted believer of the same gender to be an accountability partner.",
            "Identify your most common trigger and remove access to it this week.",
        ),
        follow_up_question="When is temptation strongest for you?",
    ),
    StaticIntent.SUFFERING: ContentBlock(
        response=(
            "Suffering is not a sign that God has abandoned you. Scripture gives "
            "room to lament honestly while holding on to the hope of his presence."
        ),
        scripture=(
            ScripturePathwayEntry(
                ref="Psalm 13",
                why="an honest lament that ends in trust",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="2 Corinthians 4:16-18",
                why="present affliction and eternal weight of glory",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Romans 8:28",
                why="God works in all things for the good of those who love him",
                translation="ESV",
            ),
        ),
        next_steps=(
            "Write your own lament using Psalm 13 as a guide.",
            "Let someone in your church know what you are going through.",
        ),
        reflection_prayer="God of all comfort, meet me in this pain and do not let me go. Amen.",
    ),
    StaticIntent.GENERAL: ContentBlock(
        response=(
            "Thanks for asking. A good place to begin is with Jesus himself: who he "
            "is and what he has done. Start reading and bring your questions with you."
        ),
        scripture=(
            ScripturePathwayEntry(
                ref="John 1:1-14",
                why="who Jesus is",
                translation="ESV",
            ),
            ScripturePathwayEntry(
                ref="Psalm 119:105",
                why="the word lights our path",
                translation="ESV",
            ),
        ),
        next_steps=("Read one chapter of the Gospel of John each day this week.",),
        follow_up_question="What would you most like to understand better?",
    ),
}
