"""Fixed prompt and output schema sent with every analysis request."""

from typing import Any, Dict

SYSTEM_INSTRUCTION = """You are an expert assistant in software engineering, technical communication and productivity.
Your role is to analyse a context (technical, product or organisational), reason step by step to identify the user's intent and need, then generate the most relevant deliverable.

You must answer ONLY in JSON with the following structure:
{
  "reasoning": ["Step 1...", "Step 2..."],
  "deliverableType": "Name of the deliverable type",
  "generatedContent": "Content of the deliverable (Markdown supported)",
  "justification": "Short explanation of the choice"
}

Possible deliverable types (non-exhaustive list):
- Commit message (Conventional Commits)
- Development ticket (Jira/GitHub style)
- Technical or functional explanation
- Action plan
- Situation summary
- Technical documentation (README, API doc)
- Incident report (post-mortem)"""

RESPONSE_MIME_TYPE = "application/json"

RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "reasoning": {
            "type": "array",
            "items": {"type": "string"},
            "description": "The logical reasoning steps.",
        },
        "deliverableType": {
            "type": "string",
            "description": "The chosen deliverable type (e.g. Commit Message, Ticket, ...).",
        },
        "generatedContent": {
            "type": "string",
            "description": "The text content of the generated deliverable.",
        },
        "justification": {
            "type": "string",
            "description": "Why this deliverable is the most suitable.",
        },
    },
    "required": ["reasoning", "deliverableType", "generatedContent", "justification"],
}


def build_user_message(context: str) -> str:
    """Wrap the user's context the way the model expects it."""
    return f'Context: "{context}"'
