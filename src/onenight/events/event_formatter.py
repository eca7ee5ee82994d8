"""Event formatter for human-readable game narration.

Formats narration events as plain text, for example:
- "Bob (seer): Alice's card is werewolf."
- "Charlie votes for Alice"
"""

from .game_events import EventType, StepEvent


class EventFormatter:
    """Format narration events as plain text lines.

    With ``show_reasoning`` the oracle's rationale is appended to events that
    carry one.
    """

    def __init__(self, show_reasoning: bool = False):
        self.show_reasoning = show_reasoning

    def format(self, event: StepEvent) -> str:
        """Format a single event.

        Args:
            event: The narration event to format

        Returns:
            Human-readable string describing the event
        """
        text = self._dispatch(event)
        rationale = event.data.get("rationale")
        if self.show_reasoning and rationale:
            text = f"{text}\n    (thinking: {rationale})"
        return text

    def _dispatch(self, event: StepEvent) -> str:
        """Route event to appropriate formatter method."""
        if event.type == EventType.SETUP:
            return self._format_setup(event)
        elif event.type == EventType.PHASE_CHANGE:
            return self._format_phase_change(event)
        elif event.type == EventType.NIGHT_ACTION:
            return self._format_night_action(event)
        elif event.type == EventType.DAY_MESSAGE:
            return self._format_day_message(event)
        elif event.type == EventType.VOTE:
            return self._format_vote(event)
        elif event.type == EventType.RESOLUTION:
            return self._format_resolution(event)
        elif event.type == EventType.GAME_END:
            return self._format_game_end(event)
        return str(event)

    def _format_setup(self, event: StepEvent) -> str:
        lines = ["Roles dealt:"]
        for player in event.data.get("players", []):
            lines.append(f"  {player['name']}: {player['original_role']}")
        center = event.data.get("center_cards", {})
        if center:
            cards = ", ".join(f"{pos}={role}" for pos, role in center.items())
            lines.append(f"  Center: {cards}")
        return "\n".join(lines)

    def _format_phase_change(self, event: StepEvent) -> str:
        phase = str(event.data.get("phase", "")).upper()
        round_number = event.data.get("round")
        if round_number is not None:
            return f"=== {phase} - ROUND {round_number} ==="
        return f"=== {phase} ==="

    def _format_night_action(self, event: StepEvent) -> str:
        data = event.data
        return f"{data.get('player')} ({data.get('role')}): {data.get('result')}"

    def _format_day_message(self, event: StepEvent) -> str:
        data = event.data
        return f"{data.get('player')}: \"{data.get('message')}\""

    def _format_vote(self, event: StepEvent) -> str:
        data = event.data
        if not data.get("accepted", True):
            return f"{data.get('voter')} cast an invalid vote (vote discarded)"
        return f"{data.get('voter')} votes for {data.get('target')}"

    def _format_resolution(self, event: StepEvent) -> str:
        data = event.data
        eliminated = data.get("eliminated", "No one")
        if data.get("eliminated_role"):
            return f"Eliminated: {eliminated} (card: {data['eliminated_role']})"
        return f"Eliminated: {eliminated}"

    def _format_game_end(self, event: StepEvent) -> str:
        data = event.data
        winners = ", ".join(data.get("winners", [])) or "nobody"
        lines = [f"Winners: {winners}"]
        for player in data.get("final_roles", []):
            if player["original_role"] == player["current_role"]:
                lines.append(f"  {player['name']}: {player['current_role']}")
            else:
                lines.append(
                    f"  {player['name']}: {player['original_role']} -> {player['current_role']}"
                )
        return "\n".join(lines)
