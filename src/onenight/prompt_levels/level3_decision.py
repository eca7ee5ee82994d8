"""Level 3: Decision Prompt with Schema.

The specific question being asked and, for structured decisions, the JSON
schema the answer must follow. Enum values in the schema are the closed set
of valid player names or center positions.
"""

from dataclasses import dataclass
from typing import Optional

from onenight.models import CenterPosition


SEER_LOOK_AT_PLAYER = "look_at_player"
SEER_LOOK_AT_CENTER = "look_at_center"


@dataclass
class DecisionPrompt:
    """Level 3: the question plus an optional answer schema.

    Freeform decisions (discussion) have no schema.
    """

    question: str
    schema: Optional[dict] = None

    def to_user_prompt(self, context: str) -> str:
        """Combine the Level 2 context with the question."""
        return f"{context}\n\n{self.question}"


def _object_schema(properties: dict) -> dict:
    return {
        "type": "object",
        "properties": properties,
        "required": list(properties.keys()),
        "additionalProperties": False,
    }


def build_seer_decision(other_names: list[str]) -> DecisionPrompt:
    positions = [p.value for p in CenterPosition]
    question = (
        "It is night. As the Seer, you may either:\n"
        "1. Look at ONE other player's card\n"
        "2. Look at TWO center cards\n\n"
        f"Other players: {', '.join(other_names)}\n"
        f"Center positions: {', '.join(positions)}\n\n"
        "What do you choose?"
    )
    schema = _object_schema({
        "action": {
            "type": "string",
            "enum": [SEER_LOOK_AT_PLAYER, SEER_LOOK_AT_CENTER],
        },
        "target_player": {
            "type": ["string", "null"],
            "enum": [*other_names, None],
            "description": "Player name if looking at a player, null otherwise",
        },
        "center_cards": {
            "type": ["array", "null"],
            "items": {"type": "string", "enum": positions},
            "description": "Two center positions if looking at the center, null otherwise",
        },
    })
    return DecisionPrompt(question=question, schema=schema)


def build_robber_decision(other_names: list[str]) -> DecisionPrompt:
    question = (
        "It is night. As the Robber, you MUST exchange your card with another "
        "player's card and see your new role.\n\n"
        f"Other players: {', '.join(other_names)}\n\n"
        "Who do you want to rob?"
    )
    schema = _object_schema({
        "target_player": {"type": "string", "enum": list(other_names)},
    })
    return DecisionPrompt(question=question, schema=schema)


def build_troublemaker_decision(other_names: list[str]) -> DecisionPrompt:
    question = (
        "It is night. As the Troublemaker, you may exchange the cards of two OTHER "
        "players. You will not see the cards.\n\n"
        f"Other players: {', '.join(other_names)}\n\n"
        "Which two players do you want to swap? (Pick two different players)"
    )
    schema = _object_schema({
        "player1": {"type": "string", "enum": list(other_names)},
        "player2": {"type": "string", "enum": list(other_names)},
    })
    return DecisionPrompt(question=question, schema=schema)


def build_discussion_decision(round_number: int, max_rounds: int) -> DecisionPrompt:
    question = (
        f"Day phase - Round {round_number} of {max_rounds}. Time to find the werewolves!\n\n"
        "REMEMBER: You win or lose with the card in front of you NOW, not your starting card.\n\n"
        "What do you say? You may claim a role (truthfully or as a bluff), share what you "
        "learned (real or fake), accuse someone, defend yourself or ask questions.\n\n"
        "Respond with just your statement (1-3 sentences)."
    )
    return DecisionPrompt(question=question)


def build_vote_decision(other_names: list[str]) -> DecisionPrompt:
    question = (
        "The discussion is over. Vote to eliminate one other player.\n\n"
        f"Other players: {', '.join(other_names)}\n\n"
        "If you believe no Werewolf is among the players, remember the village only wins "
        "if every player receives exactly one vote.\n\n"
        "Who do you vote for?"
    )
    schema = _object_schema({
        "vote": {"type": "string", "enum": list(other_names)},
    })
    return DecisionPrompt(question=question, schema=schema)
