from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from crypto_price_agent.plugin.schemas import ExampleTurn


@dataclass(frozen=True)
class CharacterSpec:
    """Persona definition for the agent.

    Attributes:
        name: Display name, also used as the speaker in examples.
        system: Base system prompt.
        bio: Short statements describing the persona.
        topics: Subjects the agent is expected to talk about.
        message_examples: Illustrative conversations.
        style_all: Style rules applied everywhere.
        style_chat: Extra style rules for chat surfaces.
        plugins: Plugin package ids the host should load, in order.
        settings: Free-form host settings (avatar, secrets).
    """

    name: str
    system: str
    bio: list[str] = field(default_factory=list)
    topics: list[str] = field(default_factory=list)
    message_examples: list[list[ExampleTurn]] = field(default_factory=list)
    style_all: list[str] = field(default_factory=list)
    style_chat: list[str] = field(default_factory=list)
    plugins: list[str] = field(default_factory=list)
    settings: dict[str, Any] = field(default_factory=dict)

    def runtime_system_prompt(self) -> str:
        """Build the final runtime prompt from structured identity + base prompt."""
        sections: list[str] = []
        if self.system:
            sections.append(f"** Core instructions **: {self.system}")
        if self.bio:
            sections.append("** Bio **:\n" + "\n".join(f"- {line}" for line in self.bio))
        if self.topics:
            sections.append(f"** Topics **: {', '.join(self.topics)}")
        style = [rule for rule in [*self.style_all, *self.style_chat] if rule.strip()]
        if style:
            sections.append("** Style **:\n" + "\n".join(f"- {rule}" for rule in style))
        return "\n\n".join(sections).strip()

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "system": self.system,
            "bio": list(self.bio),
            "topics": list(self.topics),
            "messageExamples": [
                [turn.model_dump(exclude_defaults=True) for turn in example]
                for example in self.message_examples
            ],
            "style": {"all": list(self.style_all), "chat": list(self.style_chat)},
            "plugins": list(self.plugins),
            "settings": dict(self.settings),
        }
