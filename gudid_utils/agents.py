"""
gudid_utils/agents.py

Agent personas defined in YAML (agents.yaml), editable from the Agent HQ tab.

Expected shape:

    agents:
      supply_chain_analyst:
        description: ...
        llm_provider: gemini
        model: gemini-3-flash-preview
        capabilities: [trend analysis, supplier risk]
        system_prompt: |
          You are ...

Usage:
    from gudid_utils.agents import parse_agents_yaml, DEFAULT_AGENTS_YAML

    agents = parse_agents_yaml(DEFAULT_AGENTS_YAML)
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List

import yaml

logger = logging.getLogger(__name__)


class AgentConfigError(ValueError):
    """Raised when agents.yaml cannot be parsed into agent definitions."""


@dataclass
class AgentDef:
    """One chat persona."""
    id: str
    name: str
    description: str = ""
    llm_provider: str = ""
    model: str = ""
    capabilities: List[str] = field(default_factory=list)
    system_prompt: str = ""

    def to_dict(self) -> Dict:
        return {
            "description": self.description,
            "llm_provider": self.llm_provider,
            "model": self.model,
            "capabilities": list(self.capabilities),
            "system_prompt": self.system_prompt,
        }


DEFAULT_AGENTS_YAML = """\
agents:
  supply_chain_analyst:
    description: Summarizes delivery volumes and spots trends across suppliers and customers.
    llm_provider: gemini
    model: gemini-3-flash-preview
    capabilities:
      - trend analysis
      - volume summaries
    system_prompt: |
      You are a supply-chain analyst for medical devices. Use the data context
      to answer precisely. Quote numbers from the context and say when the
      context does not contain the answer.
  regulatory_advisor:
    description: Reviews device shipments with a regulatory and traceability lens (UDI / GUDID).
    llm_provider: gemini
    model: gemini-2.5-flash
    capabilities:
      - UDI traceability
      - recall readiness
    system_prompt: |
      You are a regulatory affairs advisor familiar with the FDA GUDID and
      UDI requirements. Relate your answers to traceability of the devices
      in the data context.
  logistics_planner:
    description: Suggests replenishment and delivery scheduling based on recent volumes.
    llm_provider: gemini
    model: gemini-3-flash-preview
    capabilities:
      - replenishment planning
      - delivery scheduling
    system_prompt: |
      You are a hospital logistics planner. Propose concrete, short action
      items based on the delivery volumes in the data context.
"""


def _agent_name(agent_id: str) -> str:
    return agent_id.replace("_", " ").upper()


def parse_agents_yaml(text: str) -> List[AgentDef]:
    """
    Parse agents.yaml text into AgentDefs, in file order.

    Raises:
        AgentConfigError: invalid YAML, or no `agents` mapping in the document.
    """
    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise AgentConfigError(f"Invalid agents YAML: {e}") from e

    if not isinstance(doc, dict) or not isinstance(doc.get("agents"), dict):
        raise AgentConfigError("agents.yaml must contain an 'agents' mapping")

    agents = []
    for key, val in doc["agents"].items():
        val = val if isinstance(val, dict) else {}
        capabilities = val.get("capabilities") or []
        if isinstance(capabilities, str):
            capabilities = [capabilities]

        agents.append(AgentDef(
            id=str(key),
            name=_agent_name(str(key)),
            description=str(val.get("description") or ""),
            llm_provider=str(val.get("llm_provider") or ""),
            model=str(val.get("model") or ""),
            capabilities=[str(c) for c in capabilities],
            system_prompt=str(val.get("system_prompt") or ""),
        ))

    logger.info(f"Parsed {len(agents)} agent definition(s)")
    return agents


def find_agent(agents: List[AgentDef], agent_id: str):
    """Agent with the given id, else the first agent, else None."""
    for agent in agents:
        if agent.id == agent_id:
            return agent
    return agents[0] if agents else None
