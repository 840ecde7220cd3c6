"""通用接口与OpenAI接口之间的角色映射

只有 model <-> assistant 一对映射，其余角色原样透传。
"""

from local_llm_bridge.models.genai import GenAIRoles

GENAI_MODEL_ROLE = GenAIRoles.MODEL
OPENAI_ASSISTANT_ROLE = "assistant"


def to_openai_role(role: str) -> str:
    return OPENAI_ASSISTANT_ROLE if role == GENAI_MODEL_ROLE else role


def to_genai_role(role: str) -> str:
    return GENAI_MODEL_ROLE if role == OPENAI_ASSISTANT_ROLE else role
