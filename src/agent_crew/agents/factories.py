"""Per-role agent factories."""

from __future__ import annotations

from typing import Protocol

from agent_crew.agents import prompts
from agent_crew.models.agents import AgentConfig, AgentDefinition
from agent_crew.models.roles import AgentRole


class AgentFactory(Protocol):
    """Callable that instantiates a role's default definition."""

    def __call__(
        self,
        model: str,
        custom_prompt: str | None = None,
        custom_append: str | None = None,
    ) -> AgentDefinition: ...


def compose_prompt(default: str, custom_prompt: str | None, custom_append: str | None) -> str:
    """Pick the base prompt and append the optional fragment after it."""
    prompt = custom_prompt or default
    if custom_append:
        prompt = f"{prompt}\n\n{custom_append}"
    return prompt


def _build(
    role: AgentRole,
    description: str,
    default_prompt: str,
    temperature: float,
    model: str,
    custom_prompt: str | None,
    custom_append: str | None,
) -> AgentDefinition:
    return AgentDefinition(
        name=role,
        description=description,
        config=AgentConfig(
            model=model,
            temperature=temperature,
            prompt=compose_prompt(default_prompt, custom_prompt, custom_append),
        ),
    )


def create_orchestrator_agent(
    model: str,
    custom_prompt: str | None = None,
    custom_append: str | None = None,
    *,
    granular_fixers_enabled: bool = False,
) -> AgentDefinition:
    """Create the primary coordinating agent.

    ``granular_fixers_enabled`` only changes which specialists the default
    prompt advertises; delegation rights are decided by the policy table.
    """
    granular_team = prompts.ORCHESTRATOR_GRANULAR_TEAM if granular_fixers_enabled else ""
    default_prompt = prompts.ORCHESTRATOR_PROMPT.format(granular_team=granular_team)
    description = prompts.ORCHESTRATOR_DESCRIPTION
    if granular_fixers_enabled:
        description = f"{description} (granular fixers enabled)"
    return _build(
        AgentRole.ORCHESTRATOR,
        description,
        default_prompt,
        0.1,
        model,
        custom_prompt,
        custom_append,
    )


def create_explorer_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    """Create the read-only search agent."""
    return _build(
        AgentRole.EXPLORER,
        prompts.EXPLORER_DESCRIPTION,
        prompts.EXPLORER_PROMPT,
        0.1,
        model,
        custom_prompt,
        custom_append,
    )


def create_librarian_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    return _build(
        AgentRole.LIBRARIAN,
        prompts.LIBRARIAN_DESCRIPTION,
        prompts.LIBRARIAN_PROMPT,
        0.1,
        model,
        custom_prompt,
        custom_append,
    )


def create_oracle_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    return _build(
        AgentRole.ORACLE,
        prompts.ORACLE_DESCRIPTION,
        prompts.ORACLE_PROMPT,
        0.1,
        model,
        custom_prompt,
        custom_append,
    )


def create_designer_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    return _build(
        AgentRole.DESIGNER,
        prompts.DESIGNER_DESCRIPTION,
        prompts.DESIGNER_PROMPT,
        0.7,
        model,
        custom_prompt,
        custom_append,
    )


def create_fixer_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    return _build(
        AgentRole.FIXER,
        prompts.FIXER_DESCRIPTION,
        prompts.FIXER_PROMPT,
        0.2,
        model,
        custom_prompt,
        custom_append,
    )


def create_long_fixer_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    return _build(
        AgentRole.LONG_FIXER,
        prompts.LONG_FIXER_DESCRIPTION,
        prompts.LONG_FIXER_PROMPT,
        0.2,
        model,
        custom_prompt,
        custom_append,
    )


def create_quick_fixer_agent(
    model: str, custom_prompt: str | None = None, custom_append: str | None = None
) -> AgentDefinition:
    return _build(
        AgentRole.QUICK_FIXER,
        prompts.QUICK_FIXER_DESCRIPTION,
        prompts.QUICK_FIXER_PROMPT,
        0.1,
        model,
        custom_prompt,
        custom_append,
    )


# Subagent factories indexed by role; the orchestrator is built separately
# because it takes the experimental-features hint.
SUBAGENT_FACTORIES: dict[AgentRole, AgentFactory] = {
    AgentRole.EXPLORER: create_explorer_agent,
    AgentRole.LIBRARIAN: create_librarian_agent,
    AgentRole.ORACLE: create_oracle_agent,
    AgentRole.DESIGNER: create_designer_agent,
    AgentRole.FIXER: create_fixer_agent,
    AgentRole.LONG_FIXER: create_long_fixer_agent,
    AgentRole.QUICK_FIXER: create_quick_fixer_agent,
}

if set(SUBAGENT_FACTORIES) | {AgentRole.ORCHESTRATOR} != set(AgentRole):
    msg = "Every AgentRole needs a factory"
    raise RuntimeError(msg)
